"""Custom exceptions for the state emitter."""

from __future__ import annotations

from typing import Any


class StateEmitterError(Exception):
    """Base exception for state emitter errors."""


class InvalidChannelSetError(StateEmitterError):
    """Raised when the declared states are not a non-empty sequence."""

    def __init__(self, value: Any, message: str | None = None) -> None:
        super().__init__(message or f"Expected states sequence, got {value!r}")
        self.value = value


class DuplicateChannelError(InvalidChannelSetError):
    """Raised when the declared states contain the same identifier twice."""

    def __init__(self, value: Any, duplicates: list[Any]) -> None:
        super().__init__(
            value, f"Expected states to be unique, got duplicates {duplicates!r}"
        )
        self.duplicates = duplicates


class InvalidChannelIdentifierError(StateEmitterError):
    """Raised when declared states are neither strings nor tokens.

    `invalid` holds every offending element, in declaration order.
    """

    def __init__(self, invalid: list[Any]) -> None:
        super().__init__(
            f"Expected states to consist of strings or tokens, got {invalid!r}"
        )
        self.invalid = invalid


class UnknownChannelError(StateEmitterError, LookupError):
    """Raised when an index or identifier does not name a declared state."""

    def __init__(self, ref: Any) -> None:
        super().__init__(f"Unknown state {ref!r}")
        self.ref = ref


class ConfigError(StateEmitterError):
    """Raised when a channel configuration file cannot be loaded."""

    def __init__(self, path: Any, reason: str) -> None:
        super().__init__(f"Invalid config {path}: {reason}")
        self.path = path
        self.reason = reason
