"""CLI entry point for the `state-emitter` command."""

from __future__ import annotations

import argparse
import logging
import sys

from .exceptions import StateEmitterError
from .models import Channel, ChannelRef, Token
from .registry import StateEmitter

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def _parse_ref(value: str) -> ChannelRef:
    """Treat an all-digit reference as an index, anything else as a name."""
    return int(value) if value.isdecimal() else value


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="state-emitter", description="Inspect declared states")
    parser.add_argument("--debug", action="store_true", help="Enable debug logging")

    sub = parser.add_subparsers(dest="command", required=True)

    show = sub.add_parser("show", help="List declared states with their indices")
    show.add_argument("config", help="Path to a TOML states config")

    resolve = sub.add_parser("resolve", help="Resolve indices or names to declared states")
    resolve.add_argument("config", help="Path to a TOML states config")
    resolve.add_argument("refs", nargs="+", metavar="REF", help="State index or name")

    return parser


def _format(state: Channel) -> str:
    """Mark tokens so they cannot be mistaken for a string of the same label."""
    return f"token:{state.label}" if isinstance(state, Token) else state


def _show(emitter: StateEmitter) -> None:
    for position, state in enumerate(emitter.states):
        print(f"{position}\t{_format(state)}")


def _resolve(emitter: StateEmitter, refs: list[str]) -> None:
    for ref in refs:
        print(_format(emitter.normalize(_parse_ref(ref))))


def main(argv: list[str] | None = None) -> None:
    parser = _build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.debug else logging.WARNING,
        format=LOG_FORMAT,
    )

    try:
        emitter = StateEmitter.from_config(args.config)
        if args.command == "show":
            _show(emitter)
        elif args.command == "resolve":
            _resolve(emitter, args.refs)
    except StateEmitterError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)
