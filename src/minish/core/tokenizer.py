"""Input line tokenization."""

from __future__ import annotations

import re

from loguru import logger

from minish.core.types import ArgumentVector

DELIMITERS = " \t"
_TOKEN_RE = re.compile(rf"[^{DELIMITERS}]+")


def tokenize(line: str, max_tokens: int) -> ArgumentVector:
    """Split a line on spaces and tabs into at most ``max_tokens`` tokens.

    Runs of delimiters never yield empty tokens. Text after the last accepted
    token is discarded once the limit is reached.
    """

    if max_tokens < 1:
        raise ValueError(f"max_tokens must be positive, got {max_tokens}")

    tokens: list[str] = []
    for match in _TOKEN_RE.finditer(line):
        if len(tokens) == max_tokens:
            logger.debug("tokenizer.truncated max_tokens={} dropped_from={}", max_tokens, match.start())
            break
        tokens.append(match.group())
    return ArgumentVector(tuple(tokens))
