"""A small finite state machine keyed by hashable values (usually enums)."""

from __future__ import annotations

from abc import ABC, abstractmethod
from enum import Enum
from typing import Any, Dict, Generic, Hashable, Optional, TypeVar

K = TypeVar("K", bound=Hashable)


class StateMachineError(Exception):
    """Raised when a state machine is used in a way it does not allow."""


def _describe(key: Any) -> str:
    if isinstance(key, Enum):
        return f"{type(key).__name__}::{key.name}"
    return str(key)


class State(ABC, Generic[K]):
    """One state of a :class:`StateMachine`, identified by its key."""

    def __init__(self, fsm: "StateMachine[K]", key: K) -> None:
        if fsm is None:
            raise StateMachineError("a state needs the state machine it belongs to")
        self.fsm = fsm
        self.key = key

    @abstractmethod
    def enter(self, previous_state: K, context: Any = None) -> None:
        """Called when the state becomes active."""

    @abstractmethod
    def execute(self, current_state: K, delta_time: float) -> None:
        """Called every frame while the state is active."""

    @abstractmethod
    def exit(self, next_state: K, context: Any = None) -> None:
        """Called when the state stops being active."""

    def name(self) -> str:
        """Return a readable name for the state's key."""
        return _describe(self.key)

    def change_state(self, key: K) -> None:
        """Ask the owning machine to switch to another state."""
        self.fsm.change_state(key)


class StateMachine(Generic[K]):
    """Holds states by key and switches between them."""

    def __init__(self, default_key: K) -> None:
        self._states: Dict[K, State[K]] = {}
        self._default_key = default_key
        self._current_key = default_key
        self._previous_key = default_key
        self._current: Optional[State[K]] = None
        self._previous: Optional[State[K]] = None

    def add_state(self, key: K, state: State[K]) -> None:
        """Register a state; a key may be registered only once."""
        if key in self._states:
            raise StateMachineError(f"State {_describe(key)} already exists")
        self._states[key] = state

    def change_state(self, key: K, context: Any = None) -> None:
        """Leave the current state and enter the one registered for ``key``."""
        if self._current_key == key:
            return
        if key not in self._states:
            raise StateMachineError(f"State {_describe(key)} not found")
        if self._current is not None:
            self._current.exit(key, context)
            self._previous = self._current
            self._previous_key = self._current_key
        self._current_key = key
        self._current = self._states[key]
        self._current.enter(self._previous_key, context)

    def release(self) -> None:
        """Forget every registered state and the active one."""
        self._states.clear()
        self._current = None
        self._previous = None

    def execute(self, delta_time: float) -> None:
        """Run the active state for one frame."""
        if self._current is None:
            raise StateMachineError("no state is active")
        self._current.execute(self._current_key, delta_time)

    def current_state(self) -> K:
        """Return the active key, or the default key when nothing is active."""
        if self._current is not None:
            return self._current_key
        return self._default_key

    def get_state(self, key: K) -> Optional[State[K]]:
        """Return the state registered for ``key``, if any."""
        return self._states.get(key)

    def is_in_state(self, key: K) -> bool:
        """Tell whether ``key`` is the machine's current key."""
        return self._current_key == key