from __future__ import annotations

from dataclasses import asdict, dataclass, field
from typing import Any, Optional


@dataclass(frozen=True)
class DeviceInfo:
    validator: int
    structure_id: int
    serial: int
    hardware: int
    device_type: int
    bootloader: int
    firmware: int


@dataclass(frozen=True)
class DeviceInfoExt:
    system_state: int
    features: int
    time: int
    power_cycles: int
    runtime: int


@dataclass(frozen=True)
class TemperatureReading:
    raw: int
    value: Optional[float]

    @property
    def available(self) -> bool:
        return self.value is not None


@dataclass(frozen=True)
class FanReading:
    percentage: float
    voltage: float
    current: float
    power: float
    speed: int
    torque: int
    state: int


@dataclass(frozen=True)
class DecodedReport:
    """
    One decoded Quadro status report.

    ``reserved_a`` and ``reserved_b`` hold the unsupported sensor metadata
    regions verbatim so that a decoded report can be encoded back unchanged.
    """
    device_info: DeviceInfo
    device_info_ext: DeviceInfoExt
    temperatures: tuple[TemperatureReading, ...]
    vcc: float
    flow: float
    fans: tuple[FanReading, ...]
    reserved_a: bytes = field(default=b"", repr=False)
    reserved_b: bytes = field(default=b"", repr=False)

    def as_dict(self) -> dict[str, Any]:
        data = asdict(self)
        data.pop("reserved_a")
        data.pop("reserved_b")
        for reading, raw in zip(data["temperatures"], self.temperatures):
            reading["available"] = raw.available
        return data
