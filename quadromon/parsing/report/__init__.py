"""
Codec for the Aquacomputer Quadro status report.

The report is a fixed, big-endian record: device identity, extended device
info, four temperature probes, supply voltage, flow rate and four fan channels.
"""
from quadromon.parsing.report.decode import decode_report, scale_temperature
from quadromon.parsing.report.encode import encode_report
from quadromon.parsing.report.layout import REPORT_MIN_LENGTH, TEMPERATURE_UNAVAILABLE
from quadromon.parsing.report.model import (
    DecodedReport,
    DeviceInfo,
    DeviceInfoExt,
    FanReading,
    TemperatureReading,
)

__all__ = [
    "decode_report",
    "encode_report",
    "scale_temperature",
    "REPORT_MIN_LENGTH",
    "TEMPERATURE_UNAVAILABLE",
    "DecodedReport",
    "DeviceInfo",
    "DeviceInfoExt",
    "FanReading",
    "TemperatureReading",
]
