"""
wallclock – settable, thread-safe clocks with alarms for tests and simulations.

Import path convention::

    from wallclock.kernel.time import FixedClock, FixedAlarmClock, TickingClock
    from wallclock.kernel.errors import InvalidArgumentError
    from wallclock.config import ClockFactory, ClockSettings
"""

__version__ = "0.1.0"
__all__ = ["__version__"]
