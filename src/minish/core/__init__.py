"""Core command-resolution and execution components."""

from .launcher import ProcessLauncher
from .resolver import ExecutableResolver
from .router import InputRouter
from .tokenizer import tokenize
from .types import ArgumentVector, ExecutionOutcome, RouteResult

__all__ = [
    "ArgumentVector",
    "ExecutableResolver",
    "ExecutionOutcome",
    "InputRouter",
    "ProcessLauncher",
    "RouteResult",
    "tokenize",
]
