"""Executable discovery through the working directory and ``PATH``."""

from __future__ import annotations

import os
from collections.abc import Callable, Mapping

from loguru import logger

from minish.errors import ResolutionError

SEARCH_PATH_VARIABLE = "PATH"
SEARCH_PATH_SEPARATOR = ":"


def is_executable_file(path: str) -> bool:
    """Return whether ``path`` is a regular file the current user may execute."""
    return os.path.isfile(path) and os.access(path, os.X_OK)


class ExecutableResolver:
    """Resolve a command name to the path of an executable file.

    The search path is read from ``environ`` on every call, so changes made
    between commands are picked up. The check and the later launch are two
    separate steps; the file may change in between.
    """

    def __init__(
        self,
        environ: Mapping[str, str] | None = None,
        *,
        is_executable: Callable[[str], bool] = is_executable_file,
    ) -> None:
        self._environ = os.environ if environ is None else environ
        self._is_executable = is_executable

    def search_path(self) -> list[str]:
        value = self._environ.get(SEARCH_PATH_VARIABLE)
        if not value:
            return []
        return [entry for entry in value.split(SEARCH_PATH_SEPARATOR) if entry]

    def resolve(self, name: str) -> str:
        if self._is_candidate(name):
            logger.debug("resolver.hit name={} path={} source=direct", name, name)
            return name

        for directory in self.search_path():
            candidate = f"{directory}/{name}"
            if self._is_candidate(candidate):
                logger.debug("resolver.hit name={} path={} source=search", name, candidate)
                return candidate

        logger.debug("resolver.miss name={}", name)
        raise ResolutionError(name)

    def _is_candidate(self, path: str) -> bool:
        try:
            return self._is_executable(path)
        except (OSError, ValueError) as exc:
            # ValueError covers embedded NUL bytes.
            logger.debug("resolver.skip path={} error={}", path, exc)
            return False
