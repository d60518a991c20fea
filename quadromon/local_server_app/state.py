from __future__ import annotations

import asyncio
import logging
import time
from typing import Optional

from quadromon.domain.device import Quadro
from quadromon.local_server_app.logging import redact


class MonitorState:
    """
    Shared state of the monitor host.

    The device does no locking of its own, so every call into it goes through
    ``lock`` and runs in a worker thread.
    """

    def __init__(self, device: Quadro, logger: logging.Logger) -> None:
        self.device = device
        self.logger = logger
        self.lock = asyncio.Lock()
        self.polled_at: Optional[float] = None
        self.poll_count = 0
        self.last_error: Optional[str] = None

    def log(self, event: str, details: Optional[dict] = None, level: int = logging.INFO) -> None:
        self.logger.log(level, event, extra={"details": redact(details)})

    async def poll(self) -> None:
        async with self.lock:
            try:
                await asyncio.to_thread(self.device.update)
            except Exception as exc:
                self.last_error = f"{type(exc).__name__}: {exc}"
                self.log(
                    "poll_failed",
                    {"identifier": self.device.identifier, "error": self.last_error},
                    level=logging.WARNING,
                )
                raise
            self.polled_at = time.time()
            self.poll_count += 1
            self.last_error = None

    async def close(self) -> None:
        async with self.lock:
            await asyncio.to_thread(self.device.close)
        self.log("device_released", {"identifier": self.device.identifier, "polls": self.poll_count})
