"""Interactive read-dispatch loop."""

from __future__ import annotations

from loguru import logger

from minish import __version__
from minish.cli.render import Renderer
from minish.config import Settings
from minish.core.launcher import ProcessLauncher
from minish.core.resolver import ExecutableResolver
from minish.core.router import InputRouter
from minish.errors import MinishError, ReadError
from minish.tools.builtin import build_registry
from minish.tools.registry import CommandRegistry

EXIT_SUCCESS = 0
EXIT_FAILURE = 1


class InteractiveShell:
    """Prompt, read a line, dispatch it, and repeat until exit or end of input."""

    def __init__(
        self,
        settings: Settings,
        renderer: Renderer,
        *,
        registry: CommandRegistry | None = None,
        resolver: ExecutableResolver | None = None,
        launcher: ProcessLauncher | None = None,
    ) -> None:
        self._settings = settings
        self._renderer = renderer
        self._router = InputRouter(
            registry or build_registry(),
            resolver or ExecutableResolver(),
            launcher or ProcessLauncher(),
            renderer,
            exit_directive=settings.exit_directive,
            max_tokens=settings.max_tokens,
        )

    @property
    def router(self) -> InputRouter:
        return self._router

    def run(self) -> int:
        """Run until the exit directive or end of input; return the process exit status."""

        if self._settings.show_banner:
            self._renderer.banner(self._settings.program_name, __version__)
        logger.info("shell.start prompt={!r} exit_directive={!r}", self._settings.prompt, self._settings.exit_directive)

        while True:
            try:
                raw = self._renderer.read_line(self._settings.prompt)
            except ReadError as exc:
                self._renderer.error(f"Error: {exc}")
                logger.info("shell.stop reason=read_error")
                return EXIT_FAILURE
            except KeyboardInterrupt:
                self._renderer.write("\n")
                continue

            if not raw:
                logger.info("shell.stop reason=eof")
                return EXIT_SUCCESS
            if raw in ("\n", "\r\n"):
                continue

            line = raw.rstrip("\n").rstrip("\r")
            if self._dispatch(line):
                logger.info("shell.stop reason=exit_directive")
                return EXIT_SUCCESS

    def _dispatch(self, line: str) -> bool:
        try:
            return self._router.route(line).exit_requested
        except KeyboardInterrupt:
            self._renderer.write("\n")
        except MinishError as exc:
            self._renderer.error(str(exc))
        except Exception as exc:
            logger.exception("shell.dispatch.error line={!r}", line)
            self._renderer.error(f"Unexpected error: {exc!s}")
        return False
