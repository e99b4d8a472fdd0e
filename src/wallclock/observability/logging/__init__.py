"""Observability – structured logging helpers."""
from wallclock.observability.logging.factory import JsonLoggerFactory
from wallclock.observability.logging.processors import add_clock_component, get_logger

__all__ = [
    "JsonLoggerFactory",
    "add_clock_component",
    "get_logger",
]
