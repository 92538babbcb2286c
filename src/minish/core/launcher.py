"""Child process execution."""

from __future__ import annotations

import errno
import os
import subprocess
import sys
import time
from typing import TextIO

from loguru import logger

from minish.core.types import ArgumentVector, ExecutionOutcome
from minish.errors import LaunchError

# Failures to create the child process at all, as opposed to failures to exec.
_CREATION_ERRNOS = frozenset({errno.EAGAIN, errno.ENOMEM})


class ProcessLauncher:
    """Run an external program and block until it exits.

    The child inherits the standard streams. A program that cannot be started
    raises ``LaunchError``; a program that starts and exits non-zero is not an
    error here.
    """

    def __init__(self, stdout: TextIO | None = None) -> None:
        self._stdout = stdout

    @property
    def stdout(self) -> TextIO:
        return self._stdout if self._stdout is not None else sys.stdout

    def run(self, path: str, vector: ArgumentVector) -> ExecutionOutcome:
        argv = vector.argv()
        # Without a directory part, subprocess would search PATH again.
        executable = path if os.sep in path else os.path.join(os.curdir, path)
        # Pending prompt output must reach the terminal before the child's.
        self.stdout.flush()
        logger.debug("process.spawn path={} argv={}", path, argv)
        start = time.monotonic()
        try:
            completed = subprocess.run(argv, executable=executable, check=False)  # noqa: S603
        except OSError as exc:
            if exc.errno not in _CREATION_ERRNOS:
                # The child was created and reaped; only the exec step failed.
                self._end_output()
            raise LaunchError(path, exc) from exc

        elapsed_ms = int((time.monotonic() - start) * 1000)
        logger.debug("process.exit path={} returncode={} elapsed_ms={}", path, completed.returncode, elapsed_ms)
        self._end_output()
        return ExecutionOutcome(path=path, argv=tuple(argv), returncode=completed.returncode, elapsed_ms=elapsed_ms)

    def _end_output(self) -> None:
        self.stdout.write("\n")
        self.stdout.flush()
