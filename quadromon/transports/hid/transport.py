from __future__ import annotations

import logging
from typing import Any, Optional

from quadromon.transports.base import DeviceTransport, TransportOpenError, TransportReadError

AQUACOMPUTER_VENDOR_ID = 0x0C70
QUADRO_PRODUCT_ID = 0xF00D
# Size of the Quadro status input report, report id included.
QUADRO_REPORT_SIZE = 0xDC

logger = logging.getLogger(__name__)


def _load_hid() -> Any:
    try:
        import hid
    except ImportError as exc:
        raise TransportOpenError(
            "HID support needs the 'hidapi' package (pip install 'quadromon[hid]')"
        ) from exc
    return hid


def enumerate_devices(vendor_id: int = AQUACOMPUTER_VENDOR_ID, product_id: int = QUADRO_PRODUCT_ID) -> list[str]:
    hid = _load_hid()
    paths = []
    for entry in hid.enumerate(vendor_id, product_id):
        path = entry.get("path")
        if isinstance(path, bytes):
            path = path.decode("utf-8", errors="replace")
        if path:
            paths.append(path)
    return sorted(set(paths))


class HidTransport(DeviceTransport):
    def __init__(
        self,
        vendor_id: int = AQUACOMPUTER_VENDOR_ID,
        product_id: int = QUADRO_PRODUCT_ID,
        path: Optional[str] = None,
        report_size: int = QUADRO_REPORT_SIZE,
        read_timeout_ms: int = 1000,
    ) -> None:
        self.vendor_id = vendor_id
        self.product_id = product_id
        self.path = path
        self.report_size = report_size
        self.read_timeout_ms = read_timeout_ms
        self.identifier = path or f"hid/{vendor_id:04x}:{product_id:04x}"
        self._device: Any = None

    # ---- DeviceTransport ----
    def open(self) -> None:
        hid = _load_hid()
        device = hid.device()
        try:
            if self.path:
                device.open_path(self.path.encode("utf-8"))
            else:
                device.open(self.vendor_id, self.product_id)
        except OSError as exc:
            raise TransportOpenError(f"Could not open HID device {self.identifier}: {exc}") from exc
        self._device = device
        logger.info("hid_opened", extra={"details": {"identifier": self.identifier}})

    def read(self) -> bytes:
        if self._device is None:
            raise TransportReadError(f"HID device {self.identifier} is not open")
        try:
            data = self._device.read(self.report_size, self.read_timeout_ms)
        except (OSError, ValueError) as exc:
            raise TransportReadError(f"HID read from {self.identifier} failed: {exc}") from exc
        if not data:
            raise TransportReadError(f"HID read from {self.identifier} timed out after {self.read_timeout_ms} ms")
        return bytes(data)

    def close(self) -> None:
        if self._device is None:
            return
        self._device.close()
        self._device = None
        logger.info("hid_closed", extra={"details": {"identifier": self.identifier}})
