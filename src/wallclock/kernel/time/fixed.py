"""Kernel time – FixedClock, a settable clock for tests and simulations.

The clock holds one :class:`ZonedTimestamp`.  It only moves when told to::

    clock = FixedClock(date(2016, 1, 1))          # 2016-01-01T00:00 UTC
    clock.set_time(time(12)).offset(timedelta(days=1))
    clock.date_time()                              # 2016-01-02 12:00

Setting a component to the value it already has is a no-op: nothing is
written and :meth:`FixedClock._on_change` is not called.
"""
from __future__ import annotations

from datetime import UTC, date, datetime, time, timedelta, tzinfo
from typing import Callable

from wallclock.kernel.errors import InvalidArgumentError, require
from wallclock.kernel.time.clock import WallClock
from wallclock.kernel.time.holder import ZonedInstantHolder
from wallclock.kernel.time.ticking import TickingClock
from wallclock.kernel.time.zoned import ZonedTimestamp, require_naive, resolve_zone
from wallclock.observability.logging import get_logger

_log = get_logger(__name__)

ClockSource = WallClock | ZonedTimestamp | datetime | date | time | None


def initial_timestamp(source: ClockSource, zone: tzinfo | str | None = None) -> ZonedTimestamp:
    """Build the starting timestamp of a fixed clock from *source*.

    * ``None`` – the current system time (UTC unless *zone* is given)
    * a :class:`WallClock` or :class:`ZonedTimestamp` – its current value
    * an aware ``datetime`` – as given
    * a naive ``datetime`` – interpreted in *zone*
    * a ``date`` – midnight in *zone*
    * a ``time`` – today in *zone*

    When *zone* accompanies a value that already has one, the value is moved
    to *zone* at the same instant.  Bare values default to UTC.
    """
    tz = resolve_zone(zone) if zone is not None else None
    if source is None:
        return TickingClock(tz or UTC).zoned_date_time()
    if isinstance(source, WallClock):
        source = source.zoned_date_time()
    if isinstance(source, ZonedTimestamp):
        return source if tz is None else source.with_zone_same_instant(tz)
    if isinstance(source, datetime):
        if source.tzinfo is not None:
            zoned = ZonedTimestamp(source)
            return zoned if tz is None else zoned.with_zone_same_instant(tz)
        return ZonedTimestamp.of(source, tz or UTC)
    if isinstance(source, date):
        return ZonedTimestamp.of(datetime.combine(source, time.min), tz or UTC)
    if isinstance(source, time):
        require_naive(source, "source", time)
        tz = tz or UTC
        return ZonedTimestamp.of(datetime.combine(datetime.now(tz).date(), source), tz)
    raise InvalidArgumentError(
        "source", f"Cannot build a clock from {type(source).__name__}", value=source
    )


class FixedClock(WallClock):
    """Mutable clock pinned to an explicit, settable timestamp.

    Thread-safe: concurrent setters are serialized by the underlying
    :class:`ZonedInstantHolder`, so no update is lost.  Two fixed clocks are
    equal when their zoned timestamps are equal.
    """

    def __init__(self, source: ClockSource = None, zone: tzinfo | str | None = None) -> None:
        self._holder = ZonedInstantHolder(initial_timestamp(source, zone))

    @classmethod
    def of_instant(cls, instant: datetime | float, zone: tzinfo | str = UTC) -> FixedClock:
        """Clock at *instant* (aware datetime or POSIX seconds) seen from *zone*."""
        return cls(ZonedTimestamp.of_instant(instant, zone))

    # ------------------------------------------------------------------
    # Readers
    # ------------------------------------------------------------------

    def zoned_date_time(self) -> ZonedTimestamp:
        return self._holder.read()

    def instant(self) -> datetime:
        return self._holder.instant()

    @property
    def zone(self) -> tzinfo:
        return self._holder.read().zone

    # ------------------------------------------------------------------
    # Setters
    # ------------------------------------------------------------------

    def set_date(self, new_date: date) -> FixedClock:
        """Change the date, keeping time and zone.  Same date is a no-op."""
        require(new_date, "new_date")
        require_naive(new_date, "new_date", date)
        self._set(lambda current: current.with_date(new_date))
        return self

    def set_time(self, new_time: time) -> FixedClock:
        """Change the time-of-day, keeping date and zone.  Same time is a no-op."""
        require(new_time, "new_time")
        require_naive(new_time, "new_time", time)
        self._set(lambda current: current.with_time(new_time))
        return self

    def set_date_time(self, new_date_time: datetime) -> FixedClock:
        """Change date and time together, keeping the zone."""
        require(new_date_time, "new_date_time")
        require_naive(new_date_time, "new_date_time", datetime)
        self._set(lambda current: current.with_date_time(new_date_time))
        return self

    def offset(self, duration: timedelta) -> FixedClock:
        """Move the instant by *duration*.  A zero duration is a no-op."""
        require(duration, "duration")
        if not isinstance(duration, timedelta):
            raise InvalidArgumentError("duration", "'duration' must be a timedelta", value=duration)
        if duration:
            self._set(lambda current: current.plus(duration))
        return self

    def with_zone(self, zone: tzinfo | str) -> FixedClock:
        """New, independent clock at the same instant in *zone*."""
        return type(self)(self.zoned_date_time().with_zone_same_instant(zone))

    # ------------------------------------------------------------------
    # Update path
    # ------------------------------------------------------------------

    def _set(self, fn: Callable[[ZonedTimestamp], ZonedTimestamp]) -> ZonedTimestamp | None:
        new = self._holder.update(fn)
        if new is None:
            return None
        _log.debug("clock_updated", clock=type(self).__name__, value=new.isoformat())
        self._on_change(new)
        return new

    def _on_change(self, new: ZonedTimestamp) -> None:
        """Called once per effective change, after the new value is visible."""

    # ------------------------------------------------------------------
    # Value semantics
    # ------------------------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, FixedClock):
            return NotImplemented
        return self.zoned_date_time() == other.zoned_date_time()

    def __hash__(self) -> int:
        return hash(self.zoned_date_time())

    def __repr__(self) -> str:
        return f"{type(self).__name__}@{self.zoned_date_time().isoformat()}"


__all__ = ["ClockSource", "FixedClock", "initial_timestamp"]
