"""
Synchronization barrier shared by every action source.

Sequences that reach a `wait` marker pass through the barrier one at a time;
sequences without a marker never touch it.
"""

import asyncio
import logging
from collections.abc import Callable

from treeactions.exceptions import BarrierTimeoutError

logger = logging.getLogger(__name__)

Release = Callable[[], None]


class Barrier:
    """Mutual-exclusion gate handing out one-shot release functions.

    Params:
        timeout: Optional number of seconds to wait for acquisition before
            raising `BarrierTimeoutError`. None waits forever.
    """

    def __init__(self, timeout: float | None = None):
        self.timeout = timeout
        self._lock = asyncio.Lock()

    @property
    def locked(self) -> bool:
        return self._lock.locked()

    async def acquire(self) -> Release:
        """
        Wait until the barrier is free and take it.

        Returns:
            A release function; only its first call releases the barrier

        Raises:
            BarrierTimeoutError: When `timeout` is set and expires first
        """
        if self.timeout is None:
            await self._lock.acquire()
        else:
            await self._acquire_within_timeout()
        logger.debug("Action barrier acquired")

        released = False

        def release() -> None:
            nonlocal released
            if released:
                return
            released = True
            self._lock.release()
            logger.debug("Action barrier released")

        return release

    async def _acquire_within_timeout(self) -> None:
        # The acquisition may complete after the deadline but before the
        # cancellation lands; the lock is then handed back, never leaked.
        waiter = asyncio.ensure_future(self._lock.acquire())
        try:
            done, _ = await asyncio.wait({waiter}, timeout=self.timeout)
        except asyncio.CancelledError:
            await self._abandon(waiter)
            raise
        if not done:
            await self._abandon(waiter)
            raise BarrierTimeoutError(self.timeout)
        waiter.result()

    async def _abandon(self, waiter: asyncio.Future) -> None:
        waiter.cancel()
        await asyncio.wait({waiter})
        if not waiter.cancelled() and waiter.exception() is None:
            self._lock.release()
