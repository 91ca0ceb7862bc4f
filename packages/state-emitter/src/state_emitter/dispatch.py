"""Simple event/callback dispatch used by the state emitter."""

from __future__ import annotations

from collections import defaultdict
from typing import Any, Callable, Hashable, Protocol

EventCallback = Callable[..., Any]


class _Missing:
    """Marks an omitted argument; distinct from any value a caller can pass."""

    def __repr__(self) -> str:
        return "MISSING"


MISSING: Any = _Missing()


class Dispatcher(Protocol):
    """The listener storage and invocation interface the emitter delegates to."""

    def on(self, event: Hashable, callback: EventCallback) -> None: ...

    def once(self, event: Hashable, callback: EventCallback) -> None: ...

    def prepend(self, event: Hashable, callback: EventCallback) -> None: ...

    def prepend_once(self, event: Hashable, callback: EventCallback) -> None: ...

    def off(self, event: Hashable, callback: EventCallback) -> None: ...

    def remove_all(self, event: Hashable = MISSING) -> None: ...

    def emit(self, event: Hashable, *args: Any, **kwargs: Any) -> bool: ...

    def listeners(self, event: Hashable) -> list[EventCallback]: ...


class _Listener:
    __slots__ = ("callback", "once")

    def __init__(self, callback: EventCallback, once: bool) -> None:
        self.callback = callback
        self.once = once


class EventBus:
    """Simple synchronous event bus with named events.

    Listeners run in registration order, with prepended listeners first.
    One-shot listeners are removed before they are called. Exceptions
    raised by a listener propagate to the emitter.
    """

    def __init__(self) -> None:
        self._listeners: dict[Hashable, list[_Listener]] = defaultdict(list)

    def _add(self, event: Hashable, callback: EventCallback, *, once: bool, prepend: bool) -> None:
        if not callable(callback):
            raise TypeError(f"Expected a callable listener, got {callback!r}")
        entry = _Listener(callback, once)
        if prepend:
            self._listeners[event].insert(0, entry)
        else:
            self._listeners[event].append(entry)

    def on(self, event: Hashable, callback: EventCallback) -> None:
        """Register a listener for an event."""
        self._add(event, callback, once=False, prepend=False)

    def once(self, event: Hashable, callback: EventCallback) -> None:
        """Register a listener that is removed after its first call."""
        self._add(event, callback, once=True, prepend=False)

    def prepend(self, event: Hashable, callback: EventCallback) -> None:
        """Register a listener ahead of those already registered."""
        self._add(event, callback, once=False, prepend=True)

    def prepend_once(self, event: Hashable, callback: EventCallback) -> None:
        self._add(event, callback, once=True, prepend=True)

    def off(self, event: Hashable, callback: EventCallback) -> None:
        """Remove a listener.

        When the same callback is registered more than once, the most
        recently registered entry is removed.
        """
        entries = self._listeners.get(event)
        if not entries:
            return
        for position in range(len(entries) - 1, -1, -1):
            if entries[position].callback == callback:
                del entries[position]
                break
        if not entries:
            del self._listeners[event]

    def remove_all(self, event: Hashable = MISSING) -> None:
        """Remove every listener for `event`, or for all events if omitted."""
        if event is MISSING:
            self._listeners.clear()
        else:
            self._listeners.pop(event, None)

    def emit(self, event: Hashable, *args: Any, **kwargs: Any) -> bool:
        """Emit an event, calling all registered listeners.

        Returns True if at least one listener was called.
        """
        entries = self._listeners.get(event)
        if not entries:
            return False
        for entry in list(entries):
            if entry.once:
                self._discard(event, entry)
            entry.callback(*args, **kwargs)
        return True

    def _discard(self, event: Hashable, entry: _Listener) -> None:
        entries = self._listeners.get(event)
        if entries is None:
            return
        for position, candidate in enumerate(entries):
            if candidate is entry:
                del entries[position]
                break
        if not entries:
            del self._listeners[event]

    def listeners(self, event: Hashable) -> list[EventCallback]:
        """Return a copy of the listeners registered for an event."""
        return [entry.callback for entry in self._listeners.get(event, [])]

    def listener_count(self, event: Hashable) -> int:
        return len(self._listeners.get(event, []))

    def events(self) -> list[Hashable]:
        """Return the events that currently have listeners."""
        return list(self._listeners)
