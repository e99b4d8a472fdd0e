"""Kernel time – ZonedInstantHolder.

Holds the current :class:`ZonedTimestamp` together with its UTC instant as one
immutable snapshot.  Readers load a single reference and never see a
timestamp paired with another timestamp's instant; writers are serialized.
"""
from __future__ import annotations

import threading
from datetime import datetime
from typing import Callable, NamedTuple

from wallclock.kernel.errors import InvalidArgumentError, require
from wallclock.kernel.time.zoned import ZonedTimestamp


class _Snapshot(NamedTuple):
    zoned: ZonedTimestamp
    instant: datetime


def _snapshot(zoned: ZonedTimestamp) -> _Snapshot:
    return _Snapshot(zoned, zoned.instant())


def _require_zoned(value: object, argument: str) -> ZonedTimestamp:
    require(value, argument)
    if not isinstance(value, ZonedTimestamp):
        raise InvalidArgumentError(
            argument, f"'{argument}' must be a ZonedTimestamp", value=value
        )
    return value


class ZonedInstantHolder:
    """Atomically replaceable (timestamp, instant) pair."""

    __slots__ = ("_lock", "_state")

    def __init__(self, initial: ZonedTimestamp) -> None:
        self._lock = threading.Lock()
        self._state = _snapshot(_require_zoned(initial, "initial"))

    def read(self) -> ZonedTimestamp:
        return self._state.zoned

    def instant(self) -> datetime:
        return self._state.instant

    def replace(self, new: ZonedTimestamp) -> None:
        """Swap in *new* unconditionally."""
        state = _snapshot(_require_zoned(new, "new"))
        with self._lock:
            self._state = state

    def update(
        self, fn: Callable[[ZonedTimestamp], ZonedTimestamp]
    ) -> ZonedTimestamp | None:
        """Replace the current value with ``fn(current)`` under the writer lock.

        Returns the new timestamp, or ``None`` when ``fn`` produced a value
        equal to the current one (nothing is written in that case).
        """
        with self._lock:
            current = self._state.zoned
            new = _require_zoned(fn(current), "new")
            if new == current:
                return None
            self._state = _snapshot(new)
            return new

    def __repr__(self) -> str:
        return f"ZonedInstantHolder({self._state.zoned.isoformat()})"


__all__ = ["ZonedInstantHolder"]
