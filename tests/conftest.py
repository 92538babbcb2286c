from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field

import pytest
from loguru import logger


@pytest.fixture(autouse=True)
def _silence_logger() -> Iterator[None]:
    logger.remove()
    yield
    logger.remove()


@dataclass
class FakeOutput:
    written: list[str] = field(default_factory=list)
    errors: list[str] = field(default_factory=list)

    def write(self, text: str) -> None:
        self.written.append(text)

    def error(self, message: str) -> None:
        self.errors.append(message)

    @property
    def text(self) -> str:
        return "".join(self.written)


@pytest.fixture
def output() -> FakeOutput:
    return FakeOutput()
