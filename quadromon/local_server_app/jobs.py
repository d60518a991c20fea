import asyncio
from typing import List

from quadromon.local_server_app.config import MonitorSettings
from quadromon.local_server_app.state import MonitorState


class JobManager:
    def __init__(self):
        self.tasks: List[asyncio.Task] = []

    def start(self, coro, name: str):
        task = asyncio.create_task(coro, name=name)
        self.tasks.append(task)

    async def stop(self):
        for task in self.tasks:
            task.cancel()
        for task in self.tasks:
            try:
                await task
            except asyncio.CancelledError:
                pass
        self.tasks.clear()


async def poll_job(st: MonitorState, settings: MonitorSettings, stop_event: asyncio.Event):
    interval = settings.poll_interval
    while not stop_event.is_set():
        if st.device.connected:
            try:
                await st.poll()
            except Exception:
                # already logged by MonitorState.poll; keep the previous values
                pass
        try:
            await asyncio.wait_for(stop_event.wait(), timeout=interval)
        except asyncio.TimeoutError:
            continue
