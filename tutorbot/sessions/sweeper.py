"""Periodic expiry sweep for the session store."""
import asyncio
import logging
from typing import Optional

from tutorbot.sessions.store import SessionStore

logger = logging.getLogger(__name__)


class ExpirySweeper:
    """Runs ``SessionStore.sweep_expired`` on a fixed interval.

    The sweeper owns one background task. ``start`` and ``stop`` are called
    from the application lifespan; ``run_once`` is the on-demand trigger for
    deployments that cannot keep a background task alive.
    """

    def __init__(
        self,
        store: SessionStore,
        interval_seconds: float,
        threshold_minutes: Optional[int] = None,
    ) -> None:
        if interval_seconds <= 0:
            raise ValueError("interval_seconds must be positive")
        self._store = store
        self._interval = interval_seconds
        self._threshold = threshold_minutes
        self._task: Optional[asyncio.Task[None]] = None

    @property
    def is_running(self) -> bool:
        return self._task is not None and not self._task.done()

    def run_once(self) -> int:
        return self._store.sweep_expired(self._threshold)

    def start(self) -> None:
        if self.is_running:
            return
        self._task = asyncio.create_task(self._loop(), name="session-expiry-sweep")
        logger.info("Session sweep started, interval=%.0fs", self._interval)

    async def stop(self) -> None:
        if self._task is None:
            return
        self._task.cancel()
        try:
            await self._task
        except asyncio.CancelledError:
            pass
        self._task = None
        logger.info("Session sweep stopped")

    async def _loop(self) -> None:
        while True:
            await asyncio.sleep(self._interval)
            try:
                self.run_once()
            except Exception:
                logger.exception("Session sweep failed")
