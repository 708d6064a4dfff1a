"""Shared test helpers for ChronoTrack."""

from chronotrack.timer.errors import StaleWrite
from chronotrack.timer.store import InMemoryTimerStore


class SignalCollector:
    """Utility to capture pyqtSignal emissions into a list."""

    def __init__(self):
        self.items: list = []

    def slot(self, *args):
        self.items.append(args if len(args) > 1 else args[0] if args else None)

    def __call__(self, *args):
        self.slot(*args)

    def __len__(self):
        return len(self.items)

    def __getitem__(self, idx):
        return self.items[idx]

    @property
    def last(self):
        return self.items[-1] if self.items else None

    def clear(self):
        self.items.clear()


class RacingStore(InMemoryTimerStore):
    """Runs ``interleave`` right before the next ``n`` compare-and-set
    writes, simulating another request that commits in between the
    engine's read and its write."""

    def __init__(self):
        super().__init__()
        self.interleave = None
        self.races_left = 0
        self.stale_writes = 0
        self._racing = False

    def put(self, timer, expected_version=None):
        if (
            expected_version is not None
            and self.races_left > 0
            and self.interleave is not None
            and not self._racing
        ):
            self.races_left -= 1
            self._racing = True
            try:
                self.interleave()
            finally:
                self._racing = False
        try:
            return super().put(timer, expected_version)
        except StaleWrite:
            self.stale_writes += 1
            raise


class BrokenStore:
    """Every call fails the way an unreachable database would."""

    def __init__(self, exc):
        self.exc = exc

    def get(self, timer_id):
        raise self.exc

    def put(self, timer, expected_version=None):
        raise self.exc

    def delete(self, timer_id):
        raise self.exc
