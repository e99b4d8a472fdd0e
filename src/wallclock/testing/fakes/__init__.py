"""Testing fakes – ready-made clocks and listeners."""
from wallclock.testing.fakes.clock import (
    NEW_YEAR_2016,
    FakeAlarmClock,
    FakeFixedClock,
    RecordingListener,
)

__all__ = ["FakeAlarmClock", "FakeFixedClock", "NEW_YEAR_2016", "RecordingListener"]
