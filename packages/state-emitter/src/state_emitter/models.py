"""Data models for the state emitter."""

from __future__ import annotations

from typing import Union

from pydantic import BaseModel, ConfigDict, Field


class Token:
    """An opaque symbolic state identifier.

    Tokens compare and hash by identity only, so two tokens created with
    the same label are different states. The label is for display.
    """

    __slots__ = ("label",)

    def __init__(self, label: str = "") -> None:
        self.label = label

    def __repr__(self) -> str:
        return f"Token({self.label!r})"

    def __str__(self) -> str:
        return self.label


# A declared state: plain text or a token.
Channel = Union[str, Token]

# Anything a caller may use to refer to a state: its index or its identifier.
ChannelRef = Union[int, str, Token]


def is_channel(value: object) -> bool:
    """Return True if `value` may be declared as a state identifier."""
    return isinstance(value, (str, Token))


class TokenSpec(BaseModel):
    """A `{ token = "label" }` entry in a channel config file."""

    model_config = ConfigDict(extra="forbid")

    token: str


class ChannelConfig(BaseModel):
    """Declared states as read from a config file.

    Strings are used as-is; each `TokenSpec` yields a fresh `Token`.
    """

    model_config = ConfigDict(extra="forbid")

    states: list[Union[str, TokenSpec]] = Field(default_factory=list)

    def channels(self) -> list[Channel]:
        return [
            Token(entry.token) if isinstance(entry, TokenSpec) else entry
            for entry in self.states
        ]
