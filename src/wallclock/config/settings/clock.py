"""Config settings – ClockSettings."""
from __future__ import annotations

import dataclasses
import logging
from datetime import tzinfo

from wallclock.config.settings.base import Settings
from wallclock.config.validation import InvalidSettingValueError
from wallclock.kernel.errors import InvalidArgumentError
from wallclock.kernel.time.alarms import AlarmErrorPolicy
from wallclock.kernel.time.zoned import resolve_zone

_LOG_LEVELS = frozenset({"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"})


@dataclasses.dataclass
class ClockSettings(Settings):
    """Clock defaults, built by the caller and handed to :class:`ClockFactory`.

    ``default_zone``
        Zone for clocks built from bare dates, times and naive date-times.
    ``alarm_error_policy``
        ``isolate`` or ``propagate``; see :class:`AlarmErrorPolicy`.
    ``log_level``
        Root level applied by :meth:`ClockFactory.configure_logging`.
    """

    default_zone: str = "UTC"
    alarm_error_policy: str = AlarmErrorPolicy.ISOLATE.value
    log_level: str = "INFO"

    def _validate(self) -> None:
        try:
            resolve_zone(self.default_zone, "default_zone")
        except InvalidArgumentError as exc:
            raise InvalidSettingValueError(
                "default_zone", self.default_zone, "unknown time-zone"
            ) from exc
        try:
            AlarmErrorPolicy(self.alarm_error_policy.lower())
        except ValueError as exc:
            allowed = ", ".join(p.value for p in AlarmErrorPolicy)
            raise InvalidSettingValueError(
                "alarm_error_policy", self.alarm_error_policy, f"expected one of: {allowed}"
            ) from exc
        if self.log_level.upper() not in _LOG_LEVELS:
            raise InvalidSettingValueError(
                "log_level", self.log_level, f"expected one of: {', '.join(sorted(_LOG_LEVELS))}"
            )

    @property
    def zone(self) -> tzinfo:
        return resolve_zone(self.default_zone, "default_zone")

    @property
    def error_policy(self) -> AlarmErrorPolicy:
        return AlarmErrorPolicy(self.alarm_error_policy.lower())

    @property
    def level(self) -> int:
        return logging.getLevelName(self.log_level.upper())


__all__ = ["ClockSettings"]
