from __future__ import annotations
import logging
import os
import sys
from contextlib import contextmanager
from typing import Iterator, Optional

from theta.errors import ThetaConfigError


# Defaults
_DEFAULT_RECURSION_LIMIT = 10_000


def int_from_env(var: str, default: int) -> int:
    raw = os.environ.get(var)
    if not raw or not raw.strip():
        return default
    try:
        value = int(raw.strip())
    except ValueError:
        raise ThetaConfigError(f"{var} must be an integer, got {raw!r}") from None
    if value <= 0:
        raise ThetaConfigError(f"{var} must be positive, got {value}")
    return value


def get_recursion_limit() -> int:
    return int_from_env('THETA_RECURSION_LIMIT', _DEFAULT_RECURSION_LIMIT)


def get_log_level() -> Optional[int]:
    raw = os.environ.get('THETA_LOG_LEVEL')
    if not raw or not raw.strip():
        return None
    level = logging.getLevelName(raw.strip().upper())
    if not isinstance(level, int):
        raise ThetaConfigError(f"THETA_LOG_LEVEL is not a logging level: {raw!r}")
    return level


@contextmanager
def recursion_limit(limit: int | None = None) -> Iterator[int]:
    """Raise the interpreter recursion limit for the duration of the block.

    The limit is never lowered below the current one; the previous value is
    restored on exit.
    """
    wanted = limit if limit is not None else get_recursion_limit()
    previous = sys.getrecursionlimit()
    if wanted > previous:
        sys.setrecursionlimit(wanted)
    try:
        yield max(wanted, previous)
    finally:
        sys.setrecursionlimit(previous)
