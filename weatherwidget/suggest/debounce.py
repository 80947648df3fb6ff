"""Keystroke debouncing on an asyncio event loop."""

import asyncio
import logging
from collections.abc import Callable
from typing import Any

logger = logging.getLogger(__name__)

DEFAULT_DEBOUNCE_MS = 300


class Debouncer:
    """Delays ``callback`` until ``delay_ms`` passes with no new trigger.

    Each trigger cancels the pending timer before scheduling a new one, so
    at most one callback is ever waiting. Only the arguments of the last
    trigger reach the callback.
    """

    def __init__(
        self,
        callback: Callable[..., Any],
        delay_ms: float = DEFAULT_DEBOUNCE_MS,
        loop: asyncio.AbstractEventLoop | None = None,
    ):
        self.callback = callback
        self.delay_ms = delay_ms
        self._loop = loop
        self._handle: asyncio.TimerHandle | None = None

    @property
    def loop(self) -> asyncio.AbstractEventLoop:
        if self._loop is None:
            self._loop = asyncio.get_running_loop()
        return self._loop

    @property
    def pending(self) -> bool:
        return self._handle is not None

    def trigger(self, *args: Any) -> None:
        self.cancel()
        self._handle = self.loop.call_later(self.delay_ms / 1000, self._fire, args)

    def cancel(self) -> None:
        if self._handle is not None:
            self._handle.cancel()
            self._handle = None

    def _fire(self, args: tuple) -> None:
        self._handle = None
        logger.debug("Debounce fired after %dms quiet", self.delay_ms)
        self.callback(*args)
