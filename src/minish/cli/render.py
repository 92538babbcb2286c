"""Terminal input and output for the shell."""

from __future__ import annotations

import io
import sys
from typing import TextIO

from loguru import logger
from prompt_toolkit import PromptSession
from rich.console import Console

from minish.errors import ReadError


class Renderer:
    """Prompt, read lines and write command output and diagnostics."""

    def __init__(
        self,
        *,
        stdin: TextIO | None = None,
        stdout: TextIO | None = None,
        stderr: TextIO | None = None,
        interactive: bool | None = None,
        max_line_length: int = 4096,
    ) -> None:
        self._stdin = stdin
        self.console = Console(file=stdout, markup=False, highlight=False, emoji=False, soft_wrap=True)
        self.error_console = Console(
            file=stderr, stderr=stderr is None, markup=False, highlight=False, emoji=False, soft_wrap=True
        )
        self._interactive = interactive
        self._max_line_length = max_line_length
        self._prompt_session: PromptSession[str] | None = None
        self._prepared_stdin: TextIO | None = None

    @property
    def stdin(self) -> TextIO:
        return self._stdin if self._stdin is not None else sys.stdin

    @property
    def interactive(self) -> bool:
        if self._interactive is None:
            self._interactive = self.stdin.isatty() and self.console.is_terminal
        return self._interactive

    def write(self, text: str) -> None:
        """Write text verbatim to standard output."""
        stream = self.console.file
        stream.write(text)
        stream.flush()

    def info(self, message: str) -> None:
        self.console.print(message)

    def error(self, message: str) -> None:
        """Write one diagnostic line to standard error."""
        self.error_console.print(message, style="red")

    def banner(self, program_name: str, version: str) -> None:
        self.info(f"{program_name} version {version}.\n")

    def read_line(self, prompt: str) -> str:
        """Prompt for one line.

        Returns the line with its terminator, or an empty string at end of input.

        Raises:
            ReadError: if standard input cannot be read.
        """
        try:
            if self.interactive:
                line = self._read_interactive(prompt)
            else:
                self.write(prompt)
                line = self._prepare_stdin().readline()
        except UnicodeDecodeError as exc:
            self.error(f"Error: undecodable input: {exc.reason}")
            return "\n"
        except OSError as exc:
            raise ReadError(exc.strerror or str(exc)) from exc

        return self._bound(line)

    def _prepare_stdin(self) -> TextIO:
        # Undecodable bytes become lone surrogates instead of failing the read.
        stream = self.stdin
        if stream is not self._prepared_stdin:
            reconfigure = getattr(stream, "reconfigure", None)
            if reconfigure is not None:
                try:
                    reconfigure(errors="surrogateescape")
                except io.UnsupportedOperation:
                    logger.debug("stdin.reconfigure skipped stream={!r}", stream)
            self._prepared_stdin = stream
        return stream

    def _read_interactive(self, prompt: str) -> str:
        if self._prompt_session is None:
            self._prompt_session = PromptSession()
        try:
            return self._prompt_session.prompt(prompt) + "\n"
        except EOFError:
            return ""

    def _bound(self, line: str) -> str:
        if len(line) <= self._max_line_length:
            return line
        terminator = "\n" if line.endswith("\n") else ""
        return line[: self._max_line_length] + terminator
