"""Internal command definitions and argument parse hooks."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from enum import Enum
from typing import Protocol

from minish.core.types import ArgumentVector, ParsedArgs
from minish.errors import CommandUsageError

HELP_FLAG = "--help"


class CommandOutput(Protocol):
    """Output sink handed to internal command handlers."""

    def write(self, text: str) -> None: ...

    def error(self, message: str) -> None: ...


CommandHandler = Callable[[ParsedArgs, CommandOutput], None]


class ParseHook(Enum):
    """Closed set of argument normalizations used by internal commands."""

    NONE = "none"
    SINGLE = "single"
    OPTIONAL = "optional"
    SOURCE_AND_OPTIONAL_TARGET = "source_and_optional_target"
    PAIR = "pair"

    def parse(self, arguments: tuple[str, ...], *, usage: str, default: str | None = None) -> ParsedArgs:
        """Normalize raw arguments, raising ``CommandUsageError`` when required ones are missing."""

        if arguments and arguments[0] == HELP_FLAG:
            return ParsedArgs(help_requested=True)

        if self is ParseHook.NONE:
            return ParsedArgs()
        if self is ParseHook.OPTIONAL:
            return ParsedArgs(positional=(arguments[0] if arguments else default,))

        required = 2 if self is ParseHook.PAIR else 1
        if len(arguments) < required:
            raise CommandUsageError(usage)

        if self is ParseHook.SINGLE:
            return ParsedArgs(positional=(arguments[0],))
        if self is ParseHook.PAIR:
            return ParsedArgs(positional=(arguments[0], arguments[1]))
        target = arguments[1] if len(arguments) > 1 else None
        return ParsedArgs(positional=(arguments[0], target))


@dataclass(frozen=True)
class CommandEntry:
    """One internal command: name, parse hook and handler."""

    name: str
    parse_hook: ParseHook
    handler: CommandHandler
    summary: str
    usage: str
    default: str | None = None

    def parse(self, vector: ArgumentVector) -> ParsedArgs:
        return self.parse_hook.parse(vector.arguments, usage=self.usage, default=self.default)
