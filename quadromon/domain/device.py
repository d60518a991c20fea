"""
Hardware devices that turn raw status reports into sensor values.
"""
from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import Optional

from quadromon.domain.sensors import Sensor, SensorBank, SensorType
from quadromon.parsing.report import DecodedReport, decode_report
from quadromon.parsing.report.layout import NUM_FANS, NUM_TEMPERATURES
from quadromon.transports.base import DeviceTransport, TransportOpenError

logger = logging.getLogger(__name__)


class Hardware(ABC):
    """
    Capability interface for a monitored piece of hardware.

    Implementations own their sensors and transport. The interface carries no
    state of its own.
    """

    @property
    @abstractmethod
    def name(self) -> str:
        ...

    @property
    @abstractmethod
    def identifier(self) -> str:
        ...

    @property
    @abstractmethod
    def hardware_type(self) -> str:
        ...

    @property
    @abstractmethod
    def firmware_version(self) -> Optional[int]:
        ...

    @property
    @abstractmethod
    def sensors(self) -> list[Sensor]:
        """Sensors currently activated, in activation order."""

    @abstractmethod
    def activate_sensor(self, sensor: Sensor) -> None:
        ...

    @abstractmethod
    def update(self) -> None:
        ...

    @abstractmethod
    def close(self) -> None:
        ...


class Quadro(Hardware):
    """
    Aquacomputer Quadro fan controller.

    Opening the transport happens in the constructor. If it cannot be opened
    the device stays disconnected: it exposes no sensors and ``update`` and
    ``close`` do nothing. Calls must be serialised by the caller.
    """

    def __init__(self, transport: DeviceTransport, name: str = "Quadro") -> None:
        self._transport = transport
        self._name = name
        self._identifier = transport.identifier
        self._firmware_version: Optional[int] = None
        self._active: list[Sensor] = []
        self._connected = False
        self._closed = False
        self.last_report: Optional[DecodedReport] = None

        self.temperatures = SensorBank.numbered(SensorType.TEMPERATURE, "Temperature", NUM_TEMPERATURES)
        self.fans = SensorBank.numbered(SensorType.FAN, "Fan", NUM_FANS)
        self.vcc = SensorBank(SensorType.VOLTAGE, ["VCC"])
        self.flow = SensorBank(SensorType.FLOW, ["Flow"])

        try:
            transport.open()
        except TransportOpenError as exc:
            logger.warning(
                "device_open_failed",
                extra={"details": {"identifier": self._identifier, "error": str(exc)}},
            )
            return

        try:
            report = self._read_report()
        except Exception:
            transport.close()
            raise

        self._connected = True
        self._firmware_version = report.device_info.firmware
        for bank in (self.temperatures, self.fans, self.vcc, self.flow):
            for sensor in bank:
                self.activate_sensor(sensor)
        logger.info(
            "device_opened",
            extra={"details": {"identifier": self._identifier, "firmware": self._firmware_version}},
        )

    # ---- Hardware ----
    @property
    def name(self) -> str:
        return self._name

    @property
    def identifier(self) -> str:
        return self._identifier

    @property
    def hardware_type(self) -> str:
        return "cooler"

    @property
    def firmware_version(self) -> Optional[int]:
        return self._firmware_version

    @property
    def connected(self) -> bool:
        return self._connected and not self._closed

    @property
    def sensors(self) -> list[Sensor]:
        return list(self._active)

    def activate_sensor(self, sensor: Sensor) -> None:
        if sensor.active:
            return
        sensor.active = True
        self._active.append(sensor)

    def update(self) -> None:
        if not self._connected:
            return
        if self._closed:
            raise RuntimeError(f"{self._name} at {self._identifier} is closed")

        report = self._read_report()
        for i, reading in enumerate(report.temperatures):
            self.temperatures.set(i, reading.value)
        for i, fan in enumerate(report.fans):
            self.fans.set(i, fan.speed)
        self.vcc.set(0, report.vcc)
        self.flow.set(0, report.flow)
        self.last_report = report

    def close(self) -> None:
        if not self._connected or self._closed:
            return
        self._closed = True
        self._transport.close()
        logger.info("device_closed", extra={"details": {"identifier": self._identifier}})

    def _read_report(self) -> DecodedReport:
        return decode_report(self._transport.read())
