"""Testing support – fakes, fixtures and generators.

Import in your ``conftest.py``::

    pytest_plugins = ["wallclock.testing.fixtures"]
"""

from wallclock.testing.fakes import (
    NEW_YEAR_2016,
    FakeAlarmClock,
    FakeFixedClock,
    RecordingListener,
)
from wallclock.testing.generators import (
    COMMON_ZONES,
    local_datetime_strategy,
    zone_strategy,
    zoned_timestamp_strategy,
)

__all__ = [
    "COMMON_ZONES",
    "FakeAlarmClock",
    "FakeFixedClock",
    "NEW_YEAR_2016",
    "RecordingListener",
    "local_datetime_strategy",
    "zone_strategy",
    "zoned_timestamp_strategy",
]
