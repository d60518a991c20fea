from quadromon.transports.hid.transport import (
    AQUACOMPUTER_VENDOR_ID,
    QUADRO_PRODUCT_ID,
    QUADRO_REPORT_SIZE,
    HidTransport,
    enumerate_devices,
)

__all__ = ["AQUACOMPUTER_VENDOR_ID", "QUADRO_PRODUCT_ID", "QUADRO_REPORT_SIZE", "HidTransport", "enumerate_devices"]
