"""setuptools setup for ChronoTrack.

Install for development:
    pip install -e ".[test]"
    chronotrack serve
"""

from setuptools import setup, find_packages

setup(
    name="ChronoTrack",
    version="0.1.0",
    description="Durable stopwatch timers with an HTTP API and a desktop client",
    packages=find_packages(include=["chronotrack", "chronotrack.*"]),
    python_requires=">=3.10",
    install_requires=[
        "SQLAlchemy>=2.0",
        "PyQt6>=6.5",
        "fastapi>=0.100",
        "pydantic>=2.0",
        "uvicorn>=0.23",
    ],
    extras_require={
        "test": ["pytest>=7", "httpx>=0.24"],
    },
    entry_points={
        "console_scripts": ["chronotrack=chronotrack.__main__:main"],
    },
)
