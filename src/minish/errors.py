"""Application-level exception types for minish."""

from __future__ import annotations


class MinishError(Exception):
    """Base exception for minish."""


class ConfigurationError(MinishError):
    """Raised when settings fail start-up validation."""


class ParseError(MinishError):
    """Raised when a line or an argument list cannot be parsed."""


class CommandUsageError(ParseError):
    """Raised when an internal command receives unusable arguments."""

    def __init__(self, usage: str) -> None:
        super().__init__(f"usage: {usage}")
        self.usage = usage


class UnknownCommandError(MinishError):
    """Raised when a name is not a registered internal command."""

    def __init__(self, name: str) -> None:
        super().__init__(f"unknown command: {name}")
        self.name = name


class ResolutionError(MinishError):
    """Raised when a name resolves to no executable file."""

    def __init__(self, name: str) -> None:
        super().__init__(f"{name}: command not found")
        self.name = name


class LaunchError(MinishError):
    """Raised when a child process cannot be started."""

    def __init__(self, path: str, cause: OSError) -> None:
        super().__init__(cause.strerror or str(cause))
        self.path = path
        self.cause = cause


class ReadError(MinishError):
    """Raised when standard input cannot be read."""
