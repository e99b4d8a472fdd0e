"""Config settings – plain, validated settings dataclasses."""
from wallclock.config.settings.base import Settings
from wallclock.config.settings.clock import ClockSettings

__all__ = ["ClockSettings", "Settings"]
