from __future__ import annotations

from typing import Any, Dict, List, Optional

from pydantic import BaseModel, Field

from quadromon.domain.sensors import Sensor


class SensorModel(BaseModel):
    name: str
    index: int
    type: str
    unit: str
    value: Optional[float] = None
    active: bool = False

    @classmethod
    def from_sensor(cls, sensor: Sensor) -> "SensorModel":
        return cls(
            name=sensor.name,
            index=sensor.index,
            type=sensor.sensor_type.value,
            unit=sensor.unit,
            value=sensor.value,
            active=sensor.active,
        )


class DeviceResponse(BaseModel):
    name: str
    identifier: str
    hardware_type: str
    firmware_version: Optional[int] = None
    connected: bool = False


class SensorsResponse(BaseModel):
    sensors: List[SensorModel] = Field(default_factory=list)
    polled_at: Optional[float] = None
    last_error: Optional[str] = None


class ReportResponse(BaseModel):
    report: Dict[str, Any]
    polled_at: Optional[float] = None


class LogEvent(BaseModel):
    event: str
    level: str
    logger: str
    ts: float
    details: Dict[str, Any] = Field(default_factory=dict)
