"""State Emitter — pub/sub over a fixed set of states, addressable by name or index."""

from .config import load_config
from .dispatch import Dispatcher, EventBus
from .exceptions import (
    ConfigError,
    DuplicateChannelError,
    InvalidChannelIdentifierError,
    InvalidChannelSetError,
    StateEmitterError,
    UnknownChannelError,
)
from .models import Channel, ChannelConfig, ChannelRef, Token, TokenSpec
from .registry import StateEmitter

__all__ = [
    "StateEmitter",
    "Dispatcher",
    "EventBus",
    "Token",
    "Channel",
    "ChannelRef",
    "ChannelConfig",
    "TokenSpec",
    "load_config",
    "ConfigError",
    "DuplicateChannelError",
    "InvalidChannelIdentifierError",
    "InvalidChannelSetError",
    "StateEmitterError",
    "UnknownChannelError",
]
