"""Kernel time – TickingClock, a read-only view of system time."""
from __future__ import annotations

from datetime import UTC, datetime, timedelta, tzinfo

from wallclock.kernel.errors import InvalidArgumentError, require
from wallclock.kernel.time.clock import WallClock
from wallclock.kernel.time.zoned import ZonedTimestamp, resolve_zone, zone_id


class TickingClock(WallClock):
    """Immutable clock reporting the system time in *zone*, shifted by *skew*.

    ``TickingClock.utc()`` is the usual seed for fixed clocks.  It returns a
    fresh instance every call; instances compare equal by zone id and skew,
    so no shared module-level clock is needed.
    """

    def __init__(self, zone: tzinfo | str = UTC, skew: timedelta = timedelta(0)) -> None:
        self._zone = resolve_zone(zone)
        require(skew, "skew")
        if not isinstance(skew, timedelta):
            raise InvalidArgumentError("skew", "'skew' must be a timedelta", value=skew)
        self._skew = skew

    @classmethod
    def utc(cls) -> TickingClock:
        return cls(UTC)

    def zoned_date_time(self) -> ZonedTimestamp:
        return ZonedTimestamp(self.instant().astimezone(self._zone))

    def instant(self) -> datetime:
        return datetime.now(UTC) + self._skew

    @property
    def zone(self) -> tzinfo:
        return self._zone

    @property
    def skew(self) -> timedelta:
        return self._skew

    def offset(self, duration: timedelta) -> TickingClock:
        """Return a clock shifted by *duration*, or ``self`` for a zero duration."""
        require(duration, "duration")
        if not isinstance(duration, timedelta):
            raise InvalidArgumentError("duration", "'duration' must be a timedelta", value=duration)
        if not duration:
            return self
        return TickingClock(self._zone, self._skew + duration)

    def with_zone(self, zone: tzinfo | str) -> TickingClock:
        return TickingClock(zone, self._skew)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, TickingClock):
            return NotImplemented
        return zone_id(self._zone) == zone_id(other._zone) and self._skew == other._skew

    def __hash__(self) -> int:
        return hash((zone_id(self._zone), self._skew))

    def __repr__(self) -> str:
        return f"{type(self).__name__}@{self.zoned_date_time().isoformat()}"


__all__ = ["TickingClock"]
