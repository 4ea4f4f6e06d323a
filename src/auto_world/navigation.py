from __future__ import annotations

import asyncio
import logging
from typing import Callable, List, Optional


logger = logging.getLogger(__name__)


class Router:
    """Records client-side navigation between the app's pages."""

    def __init__(self, path: str = "/") -> None:
        self.path = path
        self.history: List[str] = [path]

    def push(self, path: str) -> None:
        logger.info("Navigating to %s", path)
        self.path = path
        self.history.append(path)


class DelayedNavigation:
    """Push ``path`` onto ``router`` after ``delay`` seconds unless cancelled.

    Must be created from within a running event loop.
    """

    def __init__(
        self,
        router: Router,
        path: str,
        delay: float,
        on_fire: Optional[Callable[[], None]] = None,
    ) -> None:
        self.router = router
        self.path = path
        self.delay = delay
        self.on_fire = on_fire
        self.fired = False
        self._task = asyncio.get_running_loop().create_task(self._run())

    async def _run(self) -> None:
        await asyncio.sleep(self.delay)
        self.fired = True
        if self.on_fire is not None:
            self.on_fire()
        self.router.push(self.path)

    @property
    def cancelled(self) -> bool:
        return self._task.cancelled()

    @property
    def done(self) -> bool:
        return self._task.done()

    def cancel(self) -> bool:
        if self._task.done():
            return False
        return self._task.cancel()

    async def wait(self) -> None:
        try:
            await self._task
        except asyncio.CancelledError:
            if not self._task.cancelled():
                raise
