"""
Field layout constants for the Quadro status report.

All multi-byte fields are big-endian. Offsets follow from field order and
widths alone; the report carries no length header.
"""
from __future__ import annotations

NUM_TEMPERATURES = 4
NUM_FANS = 4

# Raw temperature value reported for an unplugged sensor.
TEMPERATURE_UNAVAILABLE = 0x7FFF

DEVICE_INFO_SIZE = 1 + 2 + 4 + 2 + 2 + 2 + 2
DEVICE_INFO_EXT_SIZE = 4 + 1 + 4 + 4 + 4
RESERVED_A_SIZE = 10 * 2
TEMPERATURE_SIZE = 2
RESERVED_B_SIZE = 16 * 2 + 16 * 1
VCC_SIZE = 2
FLOW_SIZE = 2
FAN_SIZE = 6 * 2 + 1

REPORT_MIN_LENGTH = (
    DEVICE_INFO_SIZE
    + DEVICE_INFO_EXT_SIZE
    + RESERVED_A_SIZE
    + NUM_TEMPERATURES * TEMPERATURE_SIZE
    + RESERVED_B_SIZE
    + VCC_SIZE
    + FLOW_SIZE
    + NUM_FANS * FAN_SIZE
)

# Divisors from raw integers to physical units.
TEMPERATURE_SCALE = 100.0
VCC_SCALE = 100.0
FLOW_SCALE = 10.0
FAN_PERCENTAGE_SCALE = 100.0
FAN_VOLTAGE_SCALE = 100.0
FAN_CURRENT_SCALE = 1000.0
FAN_POWER_SCALE = 100.0
