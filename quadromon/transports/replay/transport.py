from __future__ import annotations

from pathlib import Path
from typing import Iterable

from quadromon.transports.base import DeviceTransport, TransportOpenError, TransportReadError


def load_hex_dump(path: str | Path) -> list[bytes]:
    """
    Read captured reports from a text file.

    Each non-empty line holds one report as hex digits. Whitespace inside a
    line is ignored and lines starting with ``#`` are comments.

    Args:
        path: The capture file.

    Returns:
        The reports in file order.
    """
    reports: list[bytes] = []
    with open(path, "r", encoding="utf-8") as f:
        for lineno, line in enumerate(f, start=1):
            stripped = line.strip()
            if not stripped or stripped.startswith("#"):
                continue
            try:
                reports.append(bytes.fromhex("".join(stripped.split())))
            except ValueError as exc:
                raise ValueError(f"{path}:{lineno}: invalid hex report: {exc}") from exc
    return reports


class ReplayTransport(DeviceTransport):
    def __init__(self, reports: Iterable[bytes], loop: bool = True, identifier: str = "replay") -> None:
        self.reports = [bytes(r) for r in reports]
        self.loop = loop
        self.identifier = identifier
        self._position = 0
        self._opened = False

    @classmethod
    def from_file(cls, path: str | Path, loop: bool = True) -> "ReplayTransport":
        return cls(load_hex_dump(path), loop=loop, identifier=f"replay:{Path(path).name}")

    # ---- DeviceTransport ----
    def open(self) -> None:
        if not self.reports:
            raise TransportOpenError(f"{self.identifier} has no reports to replay")
        self._position = 0
        self._opened = True

    def read(self) -> bytes:
        if not self._opened:
            raise TransportReadError(f"{self.identifier} is not open")
        if self._position >= len(self.reports):
            if not self.loop:
                raise TransportReadError(f"{self.identifier} exhausted after {len(self.reports)} reports")
            self._position = 0
        report = self.reports[self._position]
        self._position += 1
        return report

    def close(self) -> None:
        self._opened = False

