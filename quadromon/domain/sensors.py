from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Protocol


class SensorType(str, Enum):
    TEMPERATURE = "temperature"
    FAN = "fan"
    VOLTAGE = "voltage"
    FLOW = "flow"

    @property
    def unit(self) -> str:
        return _UNITS[self]


_UNITS = {
    SensorType.TEMPERATURE: "°C",
    SensorType.FAN: "RPM",
    SensorType.VOLTAGE: "V",
    SensorType.FLOW: "L/h",
}


@dataclass
class Sensor:
    """
    A named value slot owned by a hardware device.

    ``value`` is None when the device has nothing to report for the slot,
    which is distinct from a reading of zero.
    """
    name: str
    index: int
    sensor_type: SensorType
    value: Optional[float] = None
    active: bool = False

    @property
    def unit(self) -> str:
        return self.sensor_type.unit


class SensorSink(Protocol):
    def set(self, index: int, value: Optional[float]) -> None:
        ...


class SensorBank:
    """A fixed-size group of sensors of one type, written by index."""

    def __init__(self, sensor_type: SensorType, names: list[str]) -> None:
        self.sensor_type = sensor_type
        self.sensors = [Sensor(name=name, index=i, sensor_type=sensor_type) for i, name in enumerate(names)]

    @classmethod
    def numbered(cls, sensor_type: SensorType, prefix: str, count: int) -> "SensorBank":
        return cls(sensor_type, [f"{prefix} {i}" for i in range(count)])

    def set(self, index: int, value: Optional[float]) -> None:
        self.sensors[index].value = value

    def __len__(self) -> int:
        return len(self.sensors)

    def __iter__(self):
        return iter(self.sensors)

    def __getitem__(self, index: int) -> Sensor:
        return self.sensors[index]
