"""Testing fixtures – pytest fixtures for clocks.

Enable in your ``conftest.py``::

    pytest_plugins = ["wallclock.testing.fixtures"]
"""
from wallclock.testing.fixtures.clock import alarm_clock, fixed_clock, recording_listener

__all__ = ["alarm_clock", "fixed_clock", "recording_listener"]
