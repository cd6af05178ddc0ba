"""Cancellable delayed execution on the running event loop."""

import asyncio
from typing import Awaitable, Callable, Optional


class Debouncer:
    """Run only the most recent block once a quiet period has passed."""

    def __init__(self, delay: float) -> None:
        self.delay = delay
        self._task: Optional[asyncio.Task] = None

    @property
    def pending(self) -> bool:
        return self._task is not None and not self._task.done()

    def run(self, block: Callable[[], Awaitable[None]]) -> asyncio.Task:
        """Cancel any scheduled block and schedule ``block`` after the delay."""
        self.cancel()
        self._task = asyncio.get_running_loop().create_task(self._run_after(block))
        return self._task

    async def _run_after(self, block: Callable[[], Awaitable[None]]) -> None:
        await asyncio.sleep(self.delay)
        await block()

    def cancel(self) -> Optional[asyncio.Task]:
        """Cancel the scheduled block and return its task if it was still running."""
        task, self._task = self._task, None
        if task is None or task.done():
            return None
        task.cancel()
        return task

    async def aclose(self) -> None:
        """Cancel the scheduled block and wait until it has unwound."""
        task = self.cancel()
        if task is not None:
            await asyncio.wait({task})

    async def wait(self) -> None:
        """Wait until the scheduled block (if any) has finished or been cancelled."""
        while self._task is not None and not self._task.done():
            await asyncio.wait({self._task})
