"""Shared core dataclasses."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Literal

RouteKind = Literal["exit", "empty", "internal", "external", "not_found", "failed"]


@dataclass(frozen=True)
class ArgumentVector:
    """Tokens of one input line; the first token names the command."""

    tokens: tuple[str, ...] = ()

    def __len__(self) -> int:
        return len(self.tokens)

    def __bool__(self) -> bool:
        return bool(self.tokens)

    @property
    def name(self) -> str:
        if not self.tokens:
            raise IndexError("empty argument vector has no command name")
        return self.tokens[0]

    @property
    def arguments(self) -> tuple[str, ...]:
        return self.tokens[1:]

    def argv(self) -> list[str]:
        return list(self.tokens)


@dataclass(frozen=True)
class ParsedArgs:
    """Arguments after an internal command's parse hook ran."""

    positional: tuple[str | None, ...] = ()
    help_requested: bool = False


@dataclass(frozen=True)
class ExecutionOutcome:
    """Result of one external program run, after the child was reaped."""

    path: str
    argv: tuple[str, ...] = ()
    returncode: int = 0
    elapsed_ms: int = 0


@dataclass(frozen=True)
class RouteResult:
    """Routing outcome for one input line."""

    kind: RouteKind
    name: str = ""
    exit_requested: bool = False
