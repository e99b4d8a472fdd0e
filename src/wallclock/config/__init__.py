"""Config – clock settings and the clock factory."""

from wallclock.config.clocks import ClockFactory
from wallclock.config.settings import ClockSettings, Settings
from wallclock.config.validation import ConfigError, InvalidSettingValueError

__all__ = [
    "ClockFactory",
    "ClockSettings",
    "ConfigError",
    "InvalidSettingValueError",
    "Settings",
]
