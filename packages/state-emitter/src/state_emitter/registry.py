"""Core state emitter: declared states plus normalized listener operations."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from pathlib import Path
from typing import Any, Iterator

from .config import load_config
from .dispatch import MISSING, Dispatcher, EventBus, EventCallback
from .exceptions import (
    DuplicateChannelError,
    InvalidChannelIdentifierError,
    InvalidChannelSetError,
    UnknownChannelError,
)
from .models import Channel, ChannelRef, is_channel

logger = logging.getLogger(__name__)


def _is_index(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def _validate_states(states: Any) -> tuple[Channel, ...]:
    if (
        not isinstance(states, Sequence)
        or isinstance(states, (str, bytes, bytearray))
        or not states
    ):
        raise InvalidChannelSetError(states)

    invalid = [value for value in states if not is_channel(value)]
    if invalid:
        raise InvalidChannelIdentifierError(invalid)

    seen: list[Channel] = []
    duplicates: list[Channel] = []
    for value in states:
        if value in seen:
            if value not in duplicates:
                duplicates.append(value)
        else:
            seen.append(value)
    if duplicates:
        raise DuplicateChannelError(states, duplicates)

    return tuple(states)


class StateEmitter:
    """Associate state names and their indices, providing interchangeable use.

    Every listener operation accepts a state by identifier (string or
    `Token`) or by its position in the declared states, and is routed to
    the delegated dispatcher under the identifier. A listener added via
    index 0 and one added via the first state name share one listener list.
    """

    def __init__(
        self,
        states: Sequence[Channel] | None = None,
        dispatcher: Dispatcher | None = None,
    ) -> None:
        self._states = _validate_states(states)
        self._dispatcher: Dispatcher = dispatcher if dispatcher is not None else EventBus()
        logger.debug("State emitter created with states %r", self._states)

    @classmethod
    def from_config(
        cls, path: str | Path, dispatcher: Dispatcher | None = None
    ) -> StateEmitter:
        """Create an emitter from the states declared in a TOML config file."""
        return cls(load_config(path).channels(), dispatcher)

    @property
    def states(self) -> tuple[Channel, ...]:
        return self._states

    def __len__(self) -> int:
        return len(self._states)

    def __iter__(self) -> Iterator[Channel]:
        return iter(self._states)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self._states)!r})"

    # ── Lookup ──

    def index(self, name: Any) -> int | None:
        """Return the index of a state, or None if it is not declared."""
        for position, state in enumerate(self._states):
            if state == name:
                return position
        return None

    def state_at(self, index: Any) -> Channel | None:
        """Return the state at `index`, or None if out of range."""
        if not _is_index(index) or not 0 <= index < len(self._states):
            return None
        return self._states[index]

    state = state_at

    def normalize(self, ref: ChannelRef) -> Channel:
        """Resolve an index or identifier to the declared state identifier.

        Raises UnknownChannelError if `ref` does not name a declared state.
        """
        candidate = self.state_at(ref) if _is_index(ref) else ref
        if not (is_channel(candidate) and self.index(candidate) is not None):
            raise UnknownChannelError(ref)
        return candidate

    # ── Subscriptions ──

    def subscribe(self, ref: ChannelRef, listener: EventCallback) -> Any:
        """Register a listener for a state."""
        return self._dispatcher.on(self.normalize(ref), listener)

    def subscribe_once(self, ref: ChannelRef, listener: EventCallback) -> Any:
        """Register a listener that is removed after one emission."""
        return self._dispatcher.once(self.normalize(ref), listener)

    def priority_subscribe(self, ref: ChannelRef, listener: EventCallback) -> Any:
        """Register a listener to be called before those already registered."""
        return self._dispatcher.prepend(self.normalize(ref), listener)

    def priority_subscribe_once(self, ref: ChannelRef, listener: EventCallback) -> Any:
        """Register a listener to be called first and removed after one emission."""
        return self._dispatcher.prepend_once(self.normalize(ref), listener)

    def unsubscribe(self, ref: ChannelRef, listener: EventCallback) -> Any:
        """Remove a listener from a state."""
        return self._dispatcher.off(self.normalize(ref), listener)

    def unsubscribe_all(self, ref: ChannelRef = MISSING) -> Any:
        """Remove all listeners for a state, or for every state if omitted."""
        if ref is MISSING:
            return self._dispatcher.remove_all()
        return self._dispatcher.remove_all(self.normalize(ref))

    on = add_listener = subscribe
    once = subscribe_once
    prepend_listener = priority_subscribe
    prepend_once_listener = priority_subscribe_once
    off = remove_listener = unsubscribe
    remove_all_listeners = unsubscribe_all

    # ── Emission ──

    def emit(self, ref: ChannelRef, *args: Any, **kwargs: Any) -> bool:
        """Call every listener of a state with the given arguments.

        Returns True if any listener was called.
        """
        state = self.normalize(ref)
        logger.debug("Emitting %r", state)
        return self._dispatcher.emit(state, *args, **kwargs)

    def listeners(self, ref: ChannelRef) -> list[EventCallback]:
        """Return the listeners currently registered for a state."""
        return self._dispatcher.listeners(self.normalize(ref))

    def listener_count(self, ref: ChannelRef) -> int:
        return len(self.listeners(ref))
