from __future__ import annotations

from abc import ABC, abstractmethod


class TransportOpenError(ConnectionError):
    pass


class TransportReadError(ConnectionError):
    pass


class DeviceTransport(ABC):
    """
    Exclusive handle to one device.

    ``open`` is called once, ``read`` blocks until one raw report is
    available, ``close`` releases the handle.
    """

    identifier: str = ""

    @abstractmethod
    def open(self) -> None:
        ...

    @abstractmethod
    def read(self) -> bytes:
        ...

    @abstractmethod
    def close(self) -> None:
        ...
