"""Kernel time – ZonedTimestamp value object and time-zone helpers.

A :class:`ZonedTimestamp` is the single piece of state a fixed clock holds: a
local date, a local time and a time-zone.  It wraps an aware
:class:`~datetime.datetime` but, unlike ``datetime`` itself, compares by
*value* rather than by instant::

    >>> tokyo = ZonedTimestamp.of(datetime(2016, 1, 1, 9), "Asia/Tokyo")
    >>> utc = ZonedTimestamp.of(datetime(2016, 1, 1, 0), "UTC")
    >>> tokyo.instant() == utc.instant()
    True
    >>> tokyo == utc
    False

Zones with identical UTC offsets but different ids are not equal either.
"""

from __future__ import annotations

import dataclasses
from datetime import UTC, date, datetime, time, timedelta, tzinfo
from typing import Any
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from wallclock.kernel.errors import InvalidArgumentError, require

_UTC_NAMES = frozenset({"UTC", "Z"})


def resolve_zone(zone: tzinfo | str | None, argument: str = "zone") -> tzinfo:
    """Return a :class:`tzinfo` for *zone*.

    Accepts a ``tzinfo`` instance (returned as-is) or an IANA zone name.
    ``"UTC"`` and ``"Z"`` map to :data:`datetime.UTC`.
    """
    require(zone, argument)
    if isinstance(zone, tzinfo):
        return zone
    if isinstance(zone, str):
        if zone.upper() in _UTC_NAMES:
            return UTC
        try:
            return ZoneInfo(zone)
        except (ZoneInfoNotFoundError, ValueError) as exc:
            raise InvalidArgumentError(
                argument, f"Unknown time-zone {zone!r}", value=zone, cause=exc
            ) from exc
    raise InvalidArgumentError(
        argument, f"'{argument}' must be a tzinfo or a zone name", value=zone
    )


def zone_id(zone: tzinfo) -> str:
    """Stable identifier of *zone* (IANA key, or ``str()`` for fixed offsets)."""
    key = getattr(zone, "key", None)
    if key:
        return str(key)
    return str(zone)


def _is_aware(value: datetime | time) -> bool:
    return value.tzinfo is not None and value.utcoffset() is not None


def require_naive(value: Any, argument: str, kind: type) -> None:
    if isinstance(value, datetime) and kind is date:
        raise InvalidArgumentError(
            argument, f"'{argument}' must be a date, not a datetime", value=value
        )
    if not isinstance(value, kind):
        raise InvalidArgumentError(
            argument, f"'{argument}' must be a {kind.__name__}", value=value
        )
    if isinstance(value, (datetime, time)) and value.tzinfo is not None:
        raise InvalidArgumentError(
            argument, f"'{argument}' must not carry a time-zone", value=value
        )


@dataclasses.dataclass(frozen=True, slots=True, eq=False)
class ZonedTimestamp:
    """Immutable date + time + zone.

    ``value`` is always a timezone-aware ``datetime``.  Wall times that do not
    exist in the zone (DST gaps) are moved forward through UTC on creation, so
    the held value and its instant can never disagree.
    """

    value: datetime

    def __post_init__(self) -> None:
        require(self.value, "value")
        if not isinstance(self.value, datetime) or not _is_aware(self.value):
            raise InvalidArgumentError(
                "value", "ZonedTimestamp requires a timezone-aware datetime", value=self.value
            )
        zone = self.value.tzinfo
        normalized = self.value.astimezone(UTC).astimezone(zone)
        object.__setattr__(self, "value", normalized)

    # ------------------------------------------------------------------
    # Factories
    # ------------------------------------------------------------------

    @classmethod
    def of(cls, local: datetime, zone: tzinfo | str = UTC) -> ZonedTimestamp:
        """Interpret the naive *local* date-time in *zone*."""
        require(local, "local")
        require_naive(local, "local", datetime)
        return cls(local.replace(tzinfo=resolve_zone(zone)))

    @classmethod
    def of_instant(cls, instant: datetime | float, zone: tzinfo | str = UTC) -> ZonedTimestamp:
        """The given instant (aware datetime or POSIX seconds) seen from *zone*."""
        require(instant, "instant")
        tz = resolve_zone(zone)
        if isinstance(instant, datetime):
            if not _is_aware(instant):
                raise InvalidArgumentError(
                    "instant", "'instant' must be timezone-aware", value=instant
                )
            return cls(instant.astimezone(tz))
        if isinstance(instant, (int, float)) and not isinstance(instant, bool):
            return cls(datetime.fromtimestamp(instant, tz))
        raise InvalidArgumentError(
            "instant", "'instant' must be an aware datetime or POSIX seconds", value=instant
        )

    @classmethod
    def now(cls, zone: tzinfo | str = UTC) -> ZonedTimestamp:
        return cls(datetime.now(resolve_zone(zone)))

    # ------------------------------------------------------------------
    # Projections
    # ------------------------------------------------------------------

    def date(self) -> date:
        return self.value.date()

    def time(self) -> time:
        return self.value.time()

    def date_time(self) -> datetime:
        return self.value.replace(tzinfo=None)

    def instant(self) -> datetime:
        """The absolute instant, expressed in UTC."""
        return self.value.astimezone(UTC)

    @property
    def zone(self) -> tzinfo:
        return self.value.tzinfo  # type: ignore[return-value]

    @property
    def zone_id(self) -> str:
        return zone_id(self.zone)

    @property
    def utc_offset(self) -> timedelta:
        return self.value.utcoffset()  # type: ignore[return-value]

    def to_datetime(self) -> datetime:
        return self.value

    # ------------------------------------------------------------------
    # Derivations (all return new instances)
    # ------------------------------------------------------------------

    def with_date(self, new_date: date) -> ZonedTimestamp:
        return ZonedTimestamp(
            self.value.replace(year=new_date.year, month=new_date.month, day=new_date.day)
        )

    def with_time(self, new_time: time) -> ZonedTimestamp:
        return ZonedTimestamp(
            datetime.combine(self.value.date(), new_time.replace(tzinfo=None), self.zone)
        )

    def with_date_time(self, local: datetime) -> ZonedTimestamp:
        return ZonedTimestamp(local.replace(tzinfo=self.zone))

    def plus(self, duration: timedelta) -> ZonedTimestamp:
        """Add *duration* on the absolute timeline, keeping the zone."""
        return ZonedTimestamp((self.instant() + duration).astimezone(self.zone))

    def with_zone_same_instant(self, zone: tzinfo | str) -> ZonedTimestamp:
        return ZonedTimestamp(self.value.astimezone(resolve_zone(zone)))

    # ------------------------------------------------------------------
    # Value semantics
    # ------------------------------------------------------------------

    def _key(self) -> tuple[datetime, timedelta, str]:
        return (self.date_time(), self.utc_offset, self.zone_id)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ZonedTimestamp):
            return NotImplemented
        return self._key() == other._key()

    def __hash__(self) -> int:
        return hash(self._key())

    def isoformat(self) -> str:
        """ISO-8601 with the zone id appended, e.g. ``2016-01-01T00:00:00+00:00[UTC]``."""
        return f"{self.value.isoformat()}[{self.zone_id}]"

    def __str__(self) -> str:
        return self.isoformat()

    def __repr__(self) -> str:
        return f"ZonedTimestamp({self.isoformat()})"


__all__ = ["ZonedTimestamp", "require_naive", "resolve_zone", "zone_id"]
