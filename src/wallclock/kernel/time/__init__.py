"""Kernel time – settable clocks, alarms and the system clock."""
from wallclock.kernel.time.alarm_clock import FixedAlarmClock
from wallclock.kernel.time.alarms import AlarmErrorPolicy, AlarmRegistry, AlarmTarget, TargetKind
from wallclock.kernel.time.clock import (
    AlarmClock,
    AlarmListener,
    AlarmTargetValue,
    SettableClock,
    WallClock,
)
from wallclock.kernel.time.fixed import ClockSource, FixedClock, initial_timestamp
from wallclock.kernel.time.holder import ZonedInstantHolder
from wallclock.kernel.time.ticking import TickingClock
from wallclock.kernel.time.zoned import ZonedTimestamp, resolve_zone, zone_id

__all__ = [
    "AlarmClock",
    "AlarmErrorPolicy",
    "AlarmListener",
    "AlarmRegistry",
    "AlarmTarget",
    "AlarmTargetValue",
    "ClockSource",
    "FixedAlarmClock",
    "FixedClock",
    "SettableClock",
    "TargetKind",
    "TickingClock",
    "WallClock",
    "ZonedInstantHolder",
    "ZonedTimestamp",
    "initial_timestamp",
    "resolve_zone",
    "zone_id",
]
