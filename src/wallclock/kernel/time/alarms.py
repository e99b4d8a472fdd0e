"""Kernel time – alarm registry and trigger engine.

Listeners are registered either for *every* update of a clock, or for a set
of targets.  A target is a date, a time-of-day or a date-time; each kind only
matches the same projection of the new timestamp::

    registry.register_for(listener, date(2016, 1, 2))    # any update on that day
    registry.register_for(listener, time(12, 0))         # any update at noon
    registry.register_all(other)                         # every update

Listeners are tracked by identity through weak references: the registry never
keeps a listener alive.
"""
from __future__ import annotations

import dataclasses
import enum
import inspect
import threading
import weakref
from datetime import date, datetime, time
from typing import Any, Callable

from wallclock.kernel.errors import InvalidArgumentError, require
from wallclock.kernel.time.clock import AlarmListener, AlarmTargetValue
from wallclock.kernel.time.zoned import ZonedTimestamp
from wallclock.observability.logging import get_logger

_log = get_logger(__name__)


class TargetKind(str, enum.Enum):
    DATE = "date"
    TIME = "time"
    DATE_TIME = "date_time"


@dataclasses.dataclass(frozen=True, slots=True)
class AlarmTarget:
    """A zone-free date, time or date-time an alarm matches against."""

    kind: TargetKind
    value: date | time | datetime

    @classmethod
    def of(cls, value: AlarmTargetValue) -> AlarmTarget:
        """Classify *value*.  Any tzinfo is dropped; matching ignores zones."""
        require(value, "target")
        if isinstance(value, datetime):
            return cls(TargetKind.DATE_TIME, value.replace(tzinfo=None))
        if isinstance(value, date):
            return cls(TargetKind.DATE, value)
        if isinstance(value, time):
            return cls(TargetKind.TIME, value.replace(tzinfo=None))
        raise InvalidArgumentError(
            "target", "'target' must be a date, time or datetime", value=value
        )

    @classmethod
    def projections(cls, zoned: ZonedTimestamp) -> frozenset[AlarmTarget]:
        """The three targets *zoned* satisfies."""
        return frozenset(
            (
                cls(TargetKind.DATE, zoned.date()),
                cls(TargetKind.TIME, zoned.time()),
                cls(TargetKind.DATE_TIME, zoned.date_time()),
            )
        )


class AlarmErrorPolicy(str, enum.Enum):
    """What a trigger pass does when a listener raises.

    ``ISOLATE`` logs the failure and carries on with the other listeners.
    ``PROPAGATE`` re-raises, abandoning the rest of the pass.  Either way the
    clock update that caused the pass has already been applied.
    """

    ISOLATE = "isolate"
    PROPAGATE = "propagate"


_Key = tuple[int, ...]


def _identity(listener: AlarmListener) -> _Key:
    # Bound methods are rebuilt on every attribute access; key on their parts.
    if inspect.ismethod(listener):
        return (id(listener.__self__), id(listener.__func__))
    return (id(listener),)


class _Registration:
    __slots__ = ("ref", "targets")

    def __init__(self, ref: weakref.ref[Any]) -> None:
        self.ref = ref
        self.targets: set[AlarmTarget] = set()


class AlarmRegistry:
    """Thread-safe mapping of listener → alarm targets.

    An empty target set means "every update"; a listener that is absent is
    simply not notified.  Registration changes use atomic read-modify-write
    under one re-entrant lock.  :meth:`trigger` copies the entries under the
    lock and calls listeners outside it, so a listener may (un)register or
    mutate the clock from inside its callback.
    """

    def __init__(self, error_policy: AlarmErrorPolicy | str = AlarmErrorPolicy.ISOLATE) -> None:
        require(error_policy, "error_policy")
        try:
            self._policy = AlarmErrorPolicy(error_policy)
        except ValueError as exc:
            allowed = ", ".join(p.value for p in AlarmErrorPolicy)
            raise InvalidArgumentError(
                "error_policy",
                f"'error_policy' must be one of: {allowed}",
                value=error_policy,
                cause=exc,
            ) from exc
        self._lock = threading.RLock()
        self._entries: dict[_Key, _Registration] = {}

    @property
    def error_policy(self) -> AlarmErrorPolicy:
        return self._policy

    # ------------------------------------------------------------------
    # Atomic read-modify-write helpers
    # ------------------------------------------------------------------

    def _weak(self, listener: AlarmListener, key: _Key) -> weakref.ref[Any]:
        registry_ref = weakref.ref(self)

        def _forget(dead: weakref.ref[Any]) -> None:
            registry = registry_ref()
            if registry is not None:
                registry._discard(key, dead)

        try:
            if inspect.ismethod(listener):
                return weakref.WeakMethod(listener, _forget)
            return weakref.ref(listener, _forget)
        except TypeError as exc:
            raise InvalidArgumentError(
                "listener",
                "'listener' must support weak references",
                value=listener,
                cause=exc,
            ) from exc

    def _discard(self, key: _Key, dead: weakref.ref[Any]) -> None:
        with self._lock:
            entry = self._entries.get(key)
            if entry is not None and entry.ref is dead:
                del self._entries[key]

    def _compute_if_absent(self, listener: AlarmListener) -> _Registration:
        key = _identity(listener)
        with self._lock:
            entry = self._entries.get(key)
            if entry is None or entry.ref() is None:
                entry = _Registration(self._weak(listener, key))
                self._entries[key] = entry
                _log.debug("alarm_registered", listener=repr(listener))
            return entry

    def _compute_if_present(
        self,
        listener: AlarmListener,
        fn: Callable[[set[AlarmTarget]], bool],
    ) -> bool:
        """Apply *fn* to the listener's targets; drop the entry if *fn* says so."""
        key = _identity(listener)
        with self._lock:
            entry = self._entries.get(key)
            if entry is None or entry.ref() is None:
                return False
            if fn(entry.targets):
                del self._entries[key]
                _log.debug("alarm_unregistered", listener=repr(listener))
            return True

    @staticmethod
    def _require_listener(listener: AlarmListener) -> None:
        require(listener, "listener")
        if not callable(listener):
            raise InvalidArgumentError("listener", "'listener' must be callable", value=listener)

    # ------------------------------------------------------------------
    # Registration
    # ------------------------------------------------------------------

    def register_all(self, listener: AlarmListener) -> None:
        """Notify *listener* on every update, unless it already has targets.

        Only a weak reference is kept: an inline ``lambda`` or a bound
        builtin such as ``calls.append`` does not stay registered once the
        call returns.  Keep a reference to *listener* for as long as it
        should fire.
        """
        self._require_listener(listener)
        self._compute_if_absent(listener)

    def register_for(self, listener: AlarmListener, target: AlarmTargetValue) -> None:
        """Notify *listener* on updates matching *target*.

        As with :meth:`register_all`, keep a reference to *listener*; the
        registry holds it weakly.
        """
        self._require_listener(listener)
        alarm_target = AlarmTarget.of(target)
        with self._lock:
            self._compute_if_absent(listener).targets.add(alarm_target)

    def unregister_all(self, listener: AlarmListener) -> None:
        """Forget *listener* whatever it was registered for."""
        self._require_listener(listener)
        self._compute_if_present(listener, lambda targets: True)

    def unregister_for(self, listener: AlarmListener, target: AlarmTargetValue) -> None:
        """Remove one target.  Removing the last one unregisters the listener.

        A listener registered for every update has no targets to remove and is
        left untouched.
        """
        self._require_listener(listener)
        alarm_target = AlarmTarget.of(target)

        def _remove(targets: set[AlarmTarget]) -> bool:
            if alarm_target not in targets:
                return False
            targets.discard(alarm_target)
            return not targets

        self._compute_if_present(listener, _remove)

    def alarm(self, listener: AlarmListener, target: AlarmTargetValue | None = None) -> None:
        """``register_all`` without a target, ``register_for`` with one."""
        if target is None:
            self.register_all(listener)
        else:
            self.register_for(listener, target)

    def snooze(self, listener: AlarmListener, target: AlarmTargetValue | None = None) -> None:
        """``unregister_all`` without a target, ``unregister_for`` with one."""
        if target is None:
            self.unregister_all(listener)
        else:
            self.unregister_for(listener, target)

    # ------------------------------------------------------------------
    # Introspection
    # ------------------------------------------------------------------

    def is_registered(self, listener: AlarmListener) -> bool:
        with self._lock:
            entry = self._entries.get(_identity(listener))
            return entry is not None and entry.ref() is not None

    def targets(self, listener: AlarmListener) -> frozenset[AlarmTarget] | None:
        """The listener's targets, an empty set for "every update", ``None`` if absent."""
        with self._lock:
            entry = self._entries.get(_identity(listener))
            if entry is None or entry.ref() is None:
                return None
            return frozenset(entry.targets)

    def clear(self) -> None:
        with self._lock:
            self._entries.clear()

    def __len__(self) -> int:
        with self._lock:
            entries = list(self._entries.values())
        return sum(1 for entry in entries if entry.ref() is not None)

    # ------------------------------------------------------------------
    # Trigger engine
    # ------------------------------------------------------------------

    def trigger(self, zoned: ZonedTimestamp) -> int:
        """Notify every listener *zoned* matches; return how many were called.

        Each matching listener is called once, however many of its targets
        match.  Call order across listeners is unspecified.
        """
        require(zoned, "zoned")
        with self._lock:
            # Weakref callbacks may run on this thread and prune the dict.
            entries = list(self._entries.values())
            snapshot = [(entry.ref, frozenset(entry.targets)) for entry in entries]
        projections = AlarmTarget.projections(zoned)
        fired = 0
        for ref, targets in snapshot:
            listener = ref()
            if listener is None:
                continue
            if targets and targets.isdisjoint(projections):
                continue
            fired += 1
            self._notify(listener, zoned)
        return fired

    def _notify(self, listener: AlarmListener, zoned: ZonedTimestamp) -> None:
        _log.debug("alarm_triggered", listener=repr(listener), value=zoned.isoformat())
        try:
            listener(zoned)
        except Exception:
            if self._policy is AlarmErrorPolicy.PROPAGATE:
                raise
            _log.exception(
                "alarm_listener_failed", listener=repr(listener), value=zoned.isoformat()
            )


__all__ = [
    "AlarmErrorPolicy",
    "AlarmRegistry",
    "AlarmTarget",
    "TargetKind",
]
