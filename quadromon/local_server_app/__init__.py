"""
Monitor host: a FastAPI application that owns one device, polls it in the
background and serves the latest sensor values.
"""
from __future__ import annotations

import asyncio
from contextlib import asynccontextmanager
from typing import List, Optional

from fastapi import FastAPI, HTTPException
from fastapi.responses import PlainTextResponse

from quadromon.core.binary import ReportTruncatedError
from quadromon.domain.device import Quadro
from quadromon.domain.factory import create_hid_device, create_replay_device
from quadromon.local_server_app.config import MonitorSettings, get_settings
from quadromon.local_server_app.jobs import JobManager, poll_job
from quadromon.local_server_app.logging import create_logger, ring_buffer
from quadromon.local_server_app.models import (
    DeviceResponse,
    LogEvent,
    ReportResponse,
    SensorModel,
    SensorsResponse,
)
from quadromon.local_server_app.state import MonitorState
from quadromon.transports.base import TransportReadError

__all__ = ["create_app", "MonitorSettings", "get_settings"]


def device_from_settings(settings: MonitorSettings) -> Quadro:
    if settings.replay_file:
        return create_replay_device(replay_file=settings.replay_file)
    return create_hid_device(
        vendor_id=settings.vendor_id,
        product_id=settings.product_id,
        path=settings.device_path,
        report_size=settings.report_size,
        read_timeout_ms=settings.read_timeout_ms,
    )


def create_app(settings: Optional[MonitorSettings] = None, device: Optional[Quadro] = None) -> FastAPI:
    settings = settings or get_settings()
    logger = create_logger("quadromon", settings.log_ring_size)
    jobs = JobManager()
    stop_event = asyncio.Event()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        dev = device or device_from_settings(settings)
        state = MonitorState(dev, logger)
        app.state.monitor = state
        state.log(
            "device_ready",
            {
                "name": dev.name,
                "identifier": dev.identifier,
                "firmware": dev.firmware_version,
                "connected": dev.connected,
            },
        )
        stop_event.clear()
        if settings.enable_poll_job:
            jobs.start(poll_job(state, settings, stop_event), name="poll")
        try:
            yield
        finally:
            stop_event.set()
            await jobs.stop()
            await state.close()

    app = FastAPI(title="quadromon", lifespan=lifespan)

    def _state() -> MonitorState:
        return app.state.monitor

    def _sensors(state: MonitorState) -> SensorsResponse:
        return SensorsResponse(
            sensors=[SensorModel.from_sensor(s) for s in state.device.sensors],
            polled_at=state.polled_at,
            last_error=state.last_error,
        )

    @app.get("/health", response_class=PlainTextResponse)
    async def health() -> str:
        return "ok"

    @app.get("/device", response_model=DeviceResponse)
    async def get_device() -> DeviceResponse:
        dev = _state().device
        return DeviceResponse(
            name=dev.name,
            identifier=dev.identifier,
            hardware_type=dev.hardware_type,
            firmware_version=dev.firmware_version,
            connected=dev.connected,
        )

    @app.get("/sensors", response_model=SensorsResponse)
    async def get_sensors() -> SensorsResponse:
        return _sensors(_state())

    @app.get("/report", response_model=ReportResponse)
    async def get_report() -> ReportResponse:
        state = _state()
        report = state.device.last_report
        if report is None:
            raise HTTPException(status_code=404, detail="No report decoded yet")
        return ReportResponse(report=report.as_dict(), polled_at=state.polled_at)

    @app.post("/refresh", response_model=SensorsResponse)
    async def refresh() -> SensorsResponse:
        state = _state()
        if not state.device.connected:
            raise HTTPException(status_code=503, detail="Device is not connected")
        try:
            await state.poll()
        except ReportTruncatedError as exc:
            raise HTTPException(status_code=502, detail=str(exc)) from exc
        except TransportReadError as exc:
            raise HTTPException(status_code=503, detail=str(exc)) from exc
        return _sensors(state)

    @app.get("/logs", response_model=List[LogEvent])
    async def get_logs() -> List[LogEvent]:
        handler = ring_buffer(logger)
        events = handler.get_events() if handler else []
        return [LogEvent(**event) for event in events]

    return app
