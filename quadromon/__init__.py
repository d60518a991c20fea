from quadromon.domain import Quadro, create_hid_device, create_replay_device
from quadromon.parsing.report import decode_report, encode_report
from quadromon.local_server_app import create_app, MonitorSettings
from quadromon.local_server import LocalServer
from importlib.metadata import PackageNotFoundError, version

__all__ = [
    "Quadro",
    "create_hid_device",
    "create_replay_device",
    "decode_report",
    "encode_report",
    "LocalServer",
    "create_app",
    "MonitorSettings",
]

try:
    __version__ = version("quadromon")
except PackageNotFoundError:
    __version__ = "0.0.0"
