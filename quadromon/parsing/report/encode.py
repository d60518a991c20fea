"""
Encoder for the Quadro status report.

Writes a ``DecodedReport`` back into the wire layout. Used to build synthetic
reports and replay captures.
"""
from __future__ import annotations

from quadromon.core.binary import int_to_be
from quadromon.parsing.report import layout
from quadromon.parsing.report.model import DecodedReport, FanReading, TemperatureReading


def _scaled(value: float, scale: float) -> bytes:
    return int_to_be(round(value * scale), 2, signed=True)


def _reserved(data: bytes, size: int) -> bytes:
    return data if len(data) == size else bytes(size)


def _encode_temperature(reading: TemperatureReading) -> bytes:
    if reading.value is None:
        return int_to_be(layout.TEMPERATURE_UNAVAILABLE, 2, signed=True)
    raw = round(reading.value * layout.TEMPERATURE_SCALE)
    if raw == layout.TEMPERATURE_UNAVAILABLE:
        raise ValueError(f"temperature {reading.value} collides with the not-connected value 0x7FFF")
    return int_to_be(raw, 2, signed=True)


def _encode_fan(fan: FanReading) -> bytes:
    return b"".join(
        [
            _scaled(fan.percentage, layout.FAN_PERCENTAGE_SCALE),
            _scaled(fan.voltage, layout.FAN_VOLTAGE_SCALE),
            _scaled(fan.current, layout.FAN_CURRENT_SCALE),
            _scaled(fan.power, layout.FAN_POWER_SCALE),
            int_to_be(fan.speed, 2, signed=True),
            int_to_be(fan.torque, 2, signed=True),
            int_to_be(fan.state, 1),
        ]
    )


def encode_report(report: DecodedReport) -> bytes:
    """
    Encode a report into its big-endian wire form.

    Args:
        report: The report to encode. It must carry exactly four temperatures
            and four fans.

    Returns:
        Exactly ``REPORT_MIN_LENGTH`` bytes.

    Raises:
        ValueError: If a slot count is wrong or a value does not fit its field.
    """
    if len(report.temperatures) != layout.NUM_TEMPERATURES:
        raise ValueError(f"expected {layout.NUM_TEMPERATURES} temperatures, got {len(report.temperatures)}")
    if len(report.fans) != layout.NUM_FANS:
        raise ValueError(f"expected {layout.NUM_FANS} fans, got {len(report.fans)}")

    info = report.device_info
    ext = report.device_info_ext
    buf = bytearray()
    buf += int_to_be(info.validator, 1)
    buf += int_to_be(info.structure_id, 2)
    buf += int_to_be(info.serial, 4)
    buf += int_to_be(info.hardware, 2)
    buf += int_to_be(info.device_type, 2)
    buf += int_to_be(info.bootloader, 2)
    buf += int_to_be(info.firmware, 2)

    buf += int_to_be(ext.system_state, 4)
    buf += int_to_be(ext.features, 1)
    buf += int_to_be(ext.time, 4)
    buf += int_to_be(ext.power_cycles, 4)
    buf += int_to_be(ext.runtime, 4)

    buf += _reserved(report.reserved_a, layout.RESERVED_A_SIZE)
    for reading in report.temperatures:
        buf += _encode_temperature(reading)
    buf += _reserved(report.reserved_b, layout.RESERVED_B_SIZE)

    buf += _scaled(report.vcc, layout.VCC_SCALE)
    buf += _scaled(report.flow, layout.FLOW_SCALE)
    for fan in report.fans:
        buf += _encode_fan(fan)
    return bytes(buf)
