"""Immutable registry of internal commands."""

from __future__ import annotations

import builtins
import time
from collections.abc import Iterable
from dataclasses import dataclass
from types import MappingProxyType

from loguru import logger

from minish.core.commands import CommandEntry, CommandOutput
from minish.core.types import ArgumentVector
from minish.errors import CommandUsageError, UnknownCommandError


def _shorten_text(text: str, width: int = 30, placeholder: str = "...") -> str:
    """Shorten text to width characters, cutting in the middle of words if needed."""
    if len(text) <= width:
        return text

    available = width - len(placeholder)
    if available <= 0:
        return placeholder

    return text[:available] + placeholder


@dataclass(frozen=True)
class CommandExecutionResult:
    """Result of one internal command execution."""

    command: str
    name: str
    status: str
    output: str
    elapsed_ms: int

    @property
    def ok(self) -> bool:
        return self.status == "ok"


class CommandRegistry:
    """Fixed table of internal commands, built once at start-up."""

    def __init__(self, entries: Iterable[CommandEntry]) -> None:
        table: dict[str, CommandEntry] = {}
        for entry in entries:
            if entry.name in table:
                raise ValueError(f"Duplicate internal command: {entry.name}")
            table[entry.name] = entry
        self._entries = MappingProxyType(table)

    def __contains__(self, name: object) -> bool:
        return name in self._entries

    def __len__(self) -> int:
        return len(self._entries)

    def has(self, name: str) -> bool:
        return name in self._entries

    def get(self, name: str) -> CommandEntry | None:
        return self._entries.get(name)

    def identify(self, name: str) -> CommandEntry:
        entry = self._entries.get(name)
        if entry is None:
            raise UnknownCommandError(name)
        return entry

    def descriptors(self) -> builtins.list[CommandEntry]:
        return sorted(self._entries.values(), key=lambda item: item.name)

    def compact_rows(self) -> builtins.list[str]:
        width = max((len(entry.name) for entry in self._entries.values()), default=0)
        return [f"{entry.name:<{width}}  {entry.summary}" for entry in self.descriptors()]

    def execute(self, entry: CommandEntry, vector: ArgumentVector, output: CommandOutput) -> CommandExecutionResult:
        """Run the entry's parse hook then its handler, converting failures to an error result."""

        raw = " ".join(vector.tokens)
        logger.info(
            "command.call.start name={} {{ {} }}",
            entry.name,
            _shorten_text(" ".join(vector.arguments), width=30, placeholder="..."),
        )
        start = time.monotonic()
        status = "ok"
        text = ""
        try:
            parsed = entry.parse(vector)
            if parsed.help_requested:
                output.write(f"usage: {entry.usage}\n{entry.summary}\n")
            else:
                entry.handler(parsed, output)
        except CommandUsageError as exc:
            status = "error"
            text = str(exc)
        except OSError as exc:
            status = "error"
            text = _describe_os_error(exc)
            logger.debug("command.call.error name={} errno={}", entry.name, exc.errno)
        finally:
            duration = time.monotonic() - start
            logger.info("command.call.end name={} duration={:.3f}ms", entry.name, duration * 1000)

        return CommandExecutionResult(
            command=raw,
            name=entry.name,
            status=status,
            output=text,
            elapsed_ms=int(duration * 1000),
        )


def _describe_os_error(exc: OSError) -> str:
    message = exc.strerror or str(exc)
    if exc.filename is not None:
        return f"{exc.filename}: {message}"
    return message
