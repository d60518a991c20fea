"""
Transports deliver raw status reports from a device.

- ``hid``: USB HID access through the ``hidapi`` package.
- ``replay``: Captured reports served from memory or a hex dump file.
"""
from quadromon.transports.base import DeviceTransport, TransportOpenError, TransportReadError

__all__ = ["DeviceTransport", "TransportOpenError", "TransportReadError"]
