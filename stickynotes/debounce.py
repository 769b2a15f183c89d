"""Rate-limiting of repeated calls."""

from __future__ import annotations

import time
from datetime import timedelta
from typing import Callable, Generic, Optional, TypeVar, Union

T = TypeVar("T")


class Bouncer(Generic[T]):
    """Runs a function at most once per ``delay`` seconds.

    The first call always runs; later calls run only once more than
    ``delay`` has passed since the last call that ran.
    """

    def __init__(self, delay: Union[float, timedelta]) -> None:
        if isinstance(delay, timedelta):
            delay = delay.total_seconds()
        self.delay: float = float(delay)
        self._last_run: Optional[float] = None
        self._func: Optional[Callable[[], T]] = None
        self.result: Optional[T] = None

    def with_func(self, func: Callable[[], T]) -> "Bouncer[T]":
        """Bind the function that :meth:`execute` runs; returns ``self``."""
        self._func = func
        return self

    def execute(self) -> None:
        """Debounce the bound function and keep its outcome in ``result``."""
        if self._func is not None:
            self.result = self.debounce(self._func)

    def debounce(self, func: Callable[[], T]) -> Optional[T]:
        """Call ``func`` unless the last run was within ``delay``.

        Returns the function's result, or ``None`` when the call was skipped.
        """
        now = time.monotonic()
        if self._last_run is not None and now - self._last_run <= self.delay:
            return None
        self._last_run = now
        return func()

    def reset(self) -> None:
        """Forget the last run so the next call goes through."""
        self._last_run = None