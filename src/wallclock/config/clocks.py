"""Config – ClockFactory, the caller-held source of configured clocks."""
from __future__ import annotations

from datetime import date, datetime, time, tzinfo

from wallclock.config.settings.clock import ClockSettings
from wallclock.kernel.time import (
    ClockSource,
    FixedAlarmClock,
    FixedClock,
    TickingClock,
    WallClock,
    ZonedTimestamp,
)
from wallclock.observability.logging import JsonLoggerFactory


class ClockFactory:
    """Builds clocks that share one :class:`ClockSettings`.

    Create one at start-up and pass it (or the clocks it makes) to the code
    that needs time, instead of reaching for a module-level default::

        factory = ClockFactory(ClockSettings(default_zone="Europe/Berlin"))
        clock = factory.alarm_clock(date(2016, 1, 1))
    """

    def __init__(self, settings: ClockSettings | None = None) -> None:
        self._settings = settings or ClockSettings()
        self._zone = self._settings.zone

    @property
    def settings(self) -> ClockSettings:
        return self._settings

    @property
    def zone(self) -> tzinfo:
        return self._zone

    def _zone_for(self, source: ClockSource, zone: tzinfo | str | None) -> tzinfo | str | None:
        if zone is not None:
            return zone
        if isinstance(source, (WallClock, ZonedTimestamp)):
            return None
        if isinstance(source, (datetime, time)) and source.tzinfo is not None:
            return None
        if source is None or isinstance(source, (datetime, date, time)):
            return self._zone
        return None

    def ticking(self) -> TickingClock:
        return TickingClock(self._zone)

    def fixed(self, source: ClockSource = None, zone: tzinfo | str | None = None) -> FixedClock:
        """A :class:`FixedClock`; bare values and ``None`` use the configured zone."""
        return FixedClock(source, self._zone_for(source, zone))

    def alarm_clock(
        self, source: ClockSource = None, zone: tzinfo | str | None = None
    ) -> FixedAlarmClock:
        """A :class:`FixedAlarmClock` using the configured error policy."""
        return FixedAlarmClock(
            source,
            self._zone_for(source, zone),
            error_policy=self._settings.error_policy,
        )

    def configure_logging(self) -> None:
        JsonLoggerFactory.configure(self._settings.level)


__all__ = ["ClockFactory"]
