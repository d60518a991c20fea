"""
This package defines the core domain models for the quadromon library:
the sensor slots a device writes into and the devices themselves.

It exposes the `Quadro` device, the `Hardware` interface it implements and
factory functions for creating device instances.
"""
from quadromon.domain.device import Hardware, Quadro
from quadromon.domain.factory import create_hid_device, create_replay_device
from quadromon.domain.sensors import Sensor, SensorBank, SensorSink, SensorType

__all__ = [
    "Hardware",
    "Quadro",
    "create_hid_device",
    "create_replay_device",
    "Sensor",
    "SensorBank",
    "SensorSink",
    "SensorType",
]
