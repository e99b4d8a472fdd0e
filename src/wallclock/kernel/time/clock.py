"""Kernel time – clock capability interfaces.

``WallClock`` is the read side every clock offers: a zoned timestamp and the
projections derived from it.  Being *settable* and being able to *raise
alarms* are separate capabilities, described as protocols so a type can
offer either one, both, or neither::

    isinstance(clock, SettableClock)   # set_date / set_time / set_date_time
    isinstance(clock, AlarmClock)      # alarm / snooze
"""
from __future__ import annotations

import abc
from datetime import date, datetime, time, timedelta, tzinfo
from typing import Any, Callable, Protocol, runtime_checkable

from wallclock.kernel.time.zoned import ZonedTimestamp, zone_id

AlarmListener = Callable[[ZonedTimestamp], Any]
"""Anything callable with the new :class:`ZonedTimestamp`; the result is ignored."""

AlarmTargetValue = date | time | datetime
"""A date, a time-of-day or a date-time an alarm can be set for."""


class WallClock(abc.ABC):
    """Port: a clock providing zoned and non-zoned dates and times."""

    @abc.abstractmethod
    def zoned_date_time(self) -> ZonedTimestamp: ...

    @abc.abstractmethod
    def instant(self) -> datetime:
        """Current instant as an aware UTC ``datetime``."""

    @property
    @abc.abstractmethod
    def zone(self) -> tzinfo: ...

    @abc.abstractmethod
    def offset(self, duration: timedelta) -> WallClock: ...

    @abc.abstractmethod
    def with_zone(self, zone: tzinfo | str) -> WallClock: ...

    def date(self) -> date:
        return self.zoned_date_time().date()

    def time(self) -> time:
        return self.zoned_date_time().time()

    def date_time(self) -> datetime:
        return self.zoned_date_time().date_time()

    @property
    def zone_id(self) -> str:
        return zone_id(self.zone)


@runtime_checkable
class SettableClock(Protocol):
    """Capability: the date and time can be set explicitly."""

    def set_date(self, new_date: date) -> SettableClock: ...
    def set_time(self, new_time: time) -> SettableClock: ...
    def set_date_time(self, new_date_time: datetime) -> SettableClock: ...


@runtime_checkable
class AlarmClock(Protocol):
    """Capability: listeners can be registered for updates."""

    def alarm(self, listener: AlarmListener, target: AlarmTargetValue | None = None) -> None: ...
    def snooze(self, listener: AlarmListener, target: AlarmTargetValue | None = None) -> None: ...


__all__ = [
    "AlarmClock",
    "AlarmListener",
    "AlarmTargetValue",
    "SettableClock",
    "WallClock",
]
