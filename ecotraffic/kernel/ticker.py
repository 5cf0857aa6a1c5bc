import asyncio
import logging
import time
from typing import Optional

from ecotraffic.domain import config

logger = logging.getLogger(__name__)

class Ticker:
    """Drives kernel.run_tick() on a fixed period from an asyncio task."""

    def __init__(self, kernel, interval: float = config.TICK_INTERVAL):
        self.kernel = kernel
        self.interval = interval
        self._task: Optional[asyncio.Task] = None

    @property
    def running(self) -> bool:
        return self._task is not None and not self._task.done()

    def start(self):
        if self.running:
            return
        self._task = asyncio.create_task(self._run())
        logger.info("Ticker started (interval %.2fs)", self.interval)

    async def stop(self):
        if self._task is None:
            return
        self._task.cancel()
        try:
            await self._task
        except asyncio.CancelledError:
            pass
        self._task = None
        logger.info("Ticker stopped")

    async def _run(self):
        while True:
            start_time = time.monotonic()

            try:
                self.kernel.run_tick()
            except Exception:
                logger.exception("Simulation tick failed")

            # Sleep off the remainder of the period
            elapsed = time.monotonic() - start_time
            await asyncio.sleep(max(0.0, self.interval - elapsed))
