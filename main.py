#!/usr/bin/env python3
"""ChronoTrack — entry point.

Run with:
    python main.py [serve|gui]
    python -m chronotrack [serve|gui]
"""

from chronotrack.__main__ import main


if __name__ == "__main__":
    main()
