"""Kernel time – FixedAlarmClock."""
from __future__ import annotations

from datetime import tzinfo

from wallclock.kernel.time.alarms import AlarmErrorPolicy, AlarmRegistry, AlarmTarget
from wallclock.kernel.time.clock import AlarmListener, AlarmTargetValue
from wallclock.kernel.time.fixed import ClockSource, FixedClock
from wallclock.kernel.time.zoned import ZonedTimestamp


class FixedAlarmClock(FixedClock):
    """A :class:`FixedClock` that notifies listeners when it changes.

    Listeners run synchronously in the thread that changed the clock, after
    the new value is visible and before the setter returns::

        clock = FixedAlarmClock(datetime(2016, 1, 1, tzinfo=UTC))
        clock.alarm(on_new_year, date(2016, 1, 2))
        clock.offset(timedelta(days=1))     # on_new_year(ZonedTimestamp(2016-01-02...))

    Keep a reference to every listener you register: the clock only holds
    them weakly.
    """

    def __init__(
        self,
        source: ClockSource = None,
        zone: tzinfo | str | None = None,
        *,
        error_policy: AlarmErrorPolicy | str = AlarmErrorPolicy.ISOLATE,
    ) -> None:
        super().__init__(source, zone)
        self._alarms = AlarmRegistry(error_policy)

    @property
    def alarms(self) -> AlarmRegistry:
        return self._alarms

    def with_zone(self, zone: tzinfo | str) -> FixedAlarmClock:
        """New clock at the same instant in *zone*, with no listeners."""
        return type(self)(
            self.zoned_date_time().with_zone_same_instant(zone),
            error_policy=self._alarms.error_policy,
        )

    def _on_change(self, new: ZonedTimestamp) -> None:
        self._alarms.trigger(new)

    # ------------------------------------------------------------------
    # Alarm registration
    # ------------------------------------------------------------------

    def register_all(self, listener: AlarmListener) -> None:
        self._alarms.register_all(listener)

    def register_for(self, listener: AlarmListener, target: AlarmTargetValue) -> None:
        self._alarms.register_for(listener, target)

    def unregister_all(self, listener: AlarmListener) -> None:
        self._alarms.unregister_all(listener)

    def unregister_for(self, listener: AlarmListener, target: AlarmTargetValue) -> None:
        self._alarms.unregister_for(listener, target)

    def alarm(self, listener: AlarmListener, target: AlarmTargetValue | None = None) -> None:
        self._alarms.alarm(listener, target)

    def snooze(self, listener: AlarmListener, target: AlarmTargetValue | None = None) -> None:
        self._alarms.snooze(listener, target)

    def alarm_targets(self, listener: AlarmListener) -> frozenset[AlarmTarget] | None:
        return self._alarms.targets(listener)


__all__ = ["FixedAlarmClock"]
