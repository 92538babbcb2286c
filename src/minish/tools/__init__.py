"""Internal commands for minish."""

from .builtin import build_registry
from .registry import CommandExecutionResult, CommandRegistry

__all__ = ["CommandExecutionResult", "CommandRegistry", "build_registry"]
