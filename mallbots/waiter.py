"""Runs long-lived coroutines together until one fails or a stop is requested."""

from __future__ import annotations

import asyncio
import signal
from collections.abc import Awaitable, Callable

WaitFunc = Callable[[asyncio.Event], Awaitable[None]]

_SIGNAL_NAMES = ("SIGINT", "SIGTERM", "SIGQUIT")


class Waiter:
    """Group of coroutines sharing one stop event.

    Each function receives ``done``, an :class:`asyncio.Event` set when the
    group is stopping. :meth:`wait` returns once ``done`` is set and every
    function has finished, re-raising the first failure.
    """

    def __init__(self, catch_signals: bool = False) -> None:
        self.done = asyncio.Event()
        self._catch_signals = catch_signals
        self._fns: list[WaitFunc] = []

    def add(self, *fns: WaitFunc) -> None:
        self._fns.extend(fns)

    def cancel(self) -> None:
        self.done.set()

    def _install_signal_handlers(self, loop: asyncio.AbstractEventLoop) -> list[int]:
        installed = []
        for name in _SIGNAL_NAMES:
            sig = getattr(signal, name, None)
            if sig is None:
                continue
            try:
                loop.add_signal_handler(sig, self.cancel)
            except (NotImplementedError, RuntimeError, ValueError):
                continue
            installed.append(sig)
        return installed

    async def wait(self) -> None:
        loop = asyncio.get_running_loop()
        installed = self._install_signal_handlers(loop) if self._catch_signals else []
        errors: list[BaseException] = []

        async def run(fn: WaitFunc) -> None:
            try:
                await fn(self.done)
            except Exception as exc:
                errors.append(exc)
                self.cancel()

        tasks = [asyncio.create_task(run(fn)) for fn in self._fns]
        try:
            await self.done.wait()
            await asyncio.gather(*tasks)
        finally:
            for task in tasks:
                if not task.done():
                    task.cancel()
            for sig in installed:
                loop.remove_signal_handler(sig)

        if errors:
            raise errors[0]