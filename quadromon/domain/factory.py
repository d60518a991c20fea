from __future__ import annotations

from pathlib import Path
from typing import Iterable, Optional

from quadromon.domain.device import Quadro
from quadromon.transports.hid.transport import (
    AQUACOMPUTER_VENDOR_ID,
    QUADRO_PRODUCT_ID,
    QUADRO_REPORT_SIZE,
    HidTransport,
)
from quadromon.transports.replay.transport import ReplayTransport


def create_hid_device(
    vendor_id: int = AQUACOMPUTER_VENDOR_ID,
    product_id: int = QUADRO_PRODUCT_ID,
    path: Optional[str] = None,
    report_size: int = QUADRO_REPORT_SIZE,
    read_timeout_ms: int = 1000,
) -> Quadro:
    transport = HidTransport(
        vendor_id=vendor_id,
        product_id=product_id,
        path=path,
        report_size=report_size,
        read_timeout_ms=read_timeout_ms,
    )
    return Quadro(transport)


def create_replay_device(
    reports: Optional[Iterable[bytes]] = None,
    replay_file: Optional[str | Path] = None,
    loop: bool = True,
) -> Quadro:
    if replay_file is not None:
        transport = ReplayTransport.from_file(replay_file, loop=loop)
    else:
        transport = ReplayTransport(reports or [], loop=loop)
    return Quadro(transport)
