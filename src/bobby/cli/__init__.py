"""CLI framework for Bobby."""

from bobby.cli.commands import (
    Command,
    CommandCategory,
    CommandRegistry,
    ParsedArgs,
)
from bobby.cli.app import BobbyApp
from bobby.cli.session import ConsoleSession

__all__ = [
    "BobbyApp",
    "Command",
    "CommandCategory",
    "CommandRegistry",
    "ConsoleSession",
    "ParsedArgs",
]
