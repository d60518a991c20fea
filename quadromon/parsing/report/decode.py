"""
Decoder for the Quadro status report.

The report is a fixed sequence of big-endian fields. Decoding walks it once
with a checked ``ByteCursor``; a short buffer raises ``ReportTruncatedError``
naming the field that could not be read.
"""
from __future__ import annotations

from typing import Optional

from quadromon.core.binary import ByteCursor
from quadromon.parsing.report import layout
from quadromon.parsing.report.model import (
    DecodedReport,
    DeviceInfo,
    DeviceInfoExt,
    FanReading,
    TemperatureReading,
)


def scale_temperature(raw: int) -> Optional[float]:
    """
    Convert a raw temperature to degrees Celsius.

    Args:
        raw: The signed 16-bit value from the report.

    Returns:
        The temperature, or None when the sensor is not connected.
    """
    if raw == layout.TEMPERATURE_UNAVAILABLE:
        return None
    return raw / layout.TEMPERATURE_SCALE


def _read_device_info(cursor: ByteCursor) -> DeviceInfo:
    return DeviceInfo(
        validator=cursor.read_u8("device_info.validator"),
        structure_id=cursor.read_u16("device_info.structure_id"),
        serial=cursor.read_u32("device_info.serial"),
        hardware=cursor.read_u16("device_info.hardware"),
        device_type=cursor.read_u16("device_info.device_type"),
        bootloader=cursor.read_u16("device_info.bootloader"),
        firmware=cursor.read_u16("device_info.firmware"),
    )


def _read_device_info_ext(cursor: ByteCursor) -> DeviceInfoExt:
    return DeviceInfoExt(
        system_state=cursor.read_u32("device_info_ext.system_state"),
        features=cursor.read_u8("device_info_ext.features"),
        time=cursor.read_u32("device_info_ext.time"),
        power_cycles=cursor.read_u32("device_info_ext.power_cycles"),
        runtime=cursor.read_u32("device_info_ext.runtime"),
    )


def _read_temperature(cursor: ByteCursor, index: int) -> TemperatureReading:
    raw = cursor.read_i16(f"temperatures[{index}]")
    return TemperatureReading(raw=raw, value=scale_temperature(raw))


def _read_fan(cursor: ByteCursor, index: int) -> FanReading:
    prefix = f"fans[{index}]"
    # Power may follow the temperature sentinel rule too; unconfirmed, so it is always taken as valid.
    return FanReading(
        percentage=cursor.read_i16(f"{prefix}.percentage") / layout.FAN_PERCENTAGE_SCALE,
        voltage=cursor.read_i16(f"{prefix}.voltage") / layout.FAN_VOLTAGE_SCALE,
        current=cursor.read_i16(f"{prefix}.current") / layout.FAN_CURRENT_SCALE,
        power=cursor.read_i16(f"{prefix}.power") / layout.FAN_POWER_SCALE,
        speed=cursor.read_i16(f"{prefix}.speed"),
        torque=cursor.read_i16(f"{prefix}.torque"),
        state=cursor.read_u8(f"{prefix}.state"),
    )


def decode_report(data: bytes) -> DecodedReport:
    """
    Decode a raw status report.

    Bytes past the last fan are ignored. The validator byte is stored but not
    checked.

    Args:
        data: The raw report as read from the device.

    Returns:
        The decoded report.

    Raises:
        ReportTruncatedError: If the buffer ends before the last field.
    """
    cursor = ByteCursor(data)
    device_info = _read_device_info(cursor)
    device_info_ext = _read_device_info_ext(cursor)
    reserved_a = cursor.skip(layout.RESERVED_A_SIZE, "reserved_a")
    temperatures = tuple(_read_temperature(cursor, i) for i in range(layout.NUM_TEMPERATURES))
    reserved_b = cursor.skip(layout.RESERVED_B_SIZE, "reserved_b")
    vcc = cursor.read_i16("vcc") / layout.VCC_SCALE
    flow = cursor.read_i16("flow") / layout.FLOW_SCALE
    fans = tuple(_read_fan(cursor, i) for i in range(layout.NUM_FANS))

    return DecodedReport(
        device_info=device_info,
        device_info_ext=device_info_ext,
        temperatures=temperatures,
        vcc=vcc,
        flow=flow,
        fans=fans,
        reserved_a=reserved_a,
        reserved_b=reserved_b,
    )
