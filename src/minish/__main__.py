"""minish command-line bootstrap."""

from __future__ import annotations

from minish.cli.app import app

if __name__ == "__main__":
    app()
