"""Routing and command execution."""

from __future__ import annotations

from loguru import logger

from minish.core.commands import CommandEntry, CommandOutput
from minish.core.launcher import ProcessLauncher
from minish.core.resolver import ExecutableResolver
from minish.core.tokenizer import tokenize
from minish.core.types import ArgumentVector, RouteResult
from minish.errors import LaunchError, ResolutionError
from minish.tools.registry import CommandRegistry


class InputRouter:
    """Dispatch one input line to an internal command or an external program."""

    def __init__(
        self,
        registry: CommandRegistry,
        resolver: ExecutableResolver,
        launcher: ProcessLauncher,
        output: CommandOutput,
        *,
        exit_directive: str,
        max_tokens: int,
    ) -> None:
        self._registry = registry
        self._resolver = resolver
        self._launcher = launcher
        self._output = output
        self._exit_directive = exit_directive
        self._max_tokens = max_tokens

    def is_exit(self, line: str) -> bool:
        return line.startswith(self._exit_directive)

    def route(self, line: str) -> RouteResult:
        if self.is_exit(line):
            return RouteResult(kind="exit", exit_requested=True)

        vector = tokenize(line, self._max_tokens)
        if not vector:
            return RouteResult(kind="empty")

        entry = self._registry.get(vector.name)
        if entry is not None:
            return self._execute_internal(entry, vector)
        return self._execute_external(vector)

    def _execute_internal(self, entry: CommandEntry, vector: ArgumentVector) -> RouteResult:
        result = self._registry.execute(entry, vector, self._output)
        if not result.ok:
            self._output.error(f"{result.name}: {result.output}")
            return RouteResult(kind="failed", name=result.name)
        return RouteResult(kind="internal", name=result.name)

    def _execute_external(self, vector: ArgumentVector) -> RouteResult:
        try:
            path = self._resolver.resolve(vector.name)
        except ResolutionError as exc:
            self._output.error(str(exc))
            return RouteResult(kind="not_found", name=vector.name)

        try:
            outcome = self._launcher.run(path, vector)
        except LaunchError as exc:
            logger.debug("process.launch_failed path={} errno={}", exc.path, exc.cause.errno)
            self._output.error(f"Error executing command: {exc}")
            return RouteResult(kind="failed", name=vector.name)

        logger.info("command.external name={} path={} returncode={}", vector.name, path, outcome.returncode)
        return RouteResult(kind="external", name=vector.name)
