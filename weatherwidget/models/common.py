"""Common types and helpers shared across models."""

import time
from collections.abc import Callable
from typing import TypeAlias

Clock: TypeAlias = Callable[[], float]


def now_ms() -> float:
    """Wall-clock time in milliseconds, the unit cache timestamps use."""
    return time.time() * 1000
