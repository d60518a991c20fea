"""Tests for the replay and HID transports."""
import pytest

from quadromon.transports import TransportOpenError, TransportReadError
from quadromon.transports.hid import transport as hid_transport
from quadromon.transports.hid import HidTransport, enumerate_devices
from quadromon.transports.replay import ReplayTransport, load_hex_dump


def test_replay_loops():
    transport = ReplayTransport([b"\x01", b"\x02"])
    transport.open()
    assert [transport.read() for _ in range(5)] == [b"\x01", b"\x02", b"\x01", b"\x02", b"\x01"]


def test_replay_exhausts_without_loop():
    transport = ReplayTransport([b"\x01"], loop=False)
    transport.open()
    transport.read()
    with pytest.raises(TransportReadError):
        transport.read()


def test_replay_read_before_open():
    with pytest.raises(TransportReadError):
        ReplayTransport([b"\x01"]).read()


def test_replay_empty_fails_open():
    with pytest.raises(TransportOpenError):
        ReplayTransport([]).open()


def test_load_hex_dump(tmp_path):
    path = tmp_path / "capture.hex"
    path.write_text("# quadro capture\n01 02 0a\n\n  ff00  \n", encoding="utf-8")
    assert load_hex_dump(path) == [b"\x01\x02\x0a", b"\xff\x00"]

    transport = ReplayTransport.from_file(path, loop=False)
    assert transport.identifier == "replay:capture.hex"
    transport.open()
    assert transport.read() == b"\x01\x02\x0a"


def test_load_hex_dump_reports_bad_line(tmp_path):
    path = tmp_path / "bad.hex"
    path.write_text("0102\nzz\n", encoding="utf-8")
    with pytest.raises(ValueError, match=":2:"):
        load_hex_dump(path)


class _FakeHidDevice:
    def __init__(self, fail_open=False, reads=None):
        self.fail_open = fail_open
        self.reads = list(reads or [])
        self.opened_with = None
        self.closed = False

    def open(self, vendor_id, product_id):
        if self.fail_open:
            raise OSError("open failed")
        self.opened_with = (vendor_id, product_id)

    def open_path(self, path):
        self.opened_with = path

    def read(self, size, timeout_ms):
        return self.reads.pop(0)[:size] if self.reads else []

    def close(self):
        self.closed = True


class _FakeHidModule:
    def __init__(self, device):
        self._device = device

    def device(self):
        return self._device

    def enumerate(self, vendor_id, product_id):
        return [{"path": b"/dev/hidraw3"}, {"path": b"/dev/hidraw1"}, {"path": b"/dev/hidraw3"}]


def _patch_hid(monkeypatch, device):
    monkeypatch.setattr(hid_transport, "_load_hid", lambda: _FakeHidModule(device))


def test_hid_open_read_close(monkeypatch):
    device = _FakeHidDevice(reads=[list(range(300))])
    _patch_hid(monkeypatch, device)
    transport = HidTransport()
    transport.open()
    assert device.opened_with == (0x0C70, 0xF00D)
    data = transport.read()
    assert isinstance(data, bytes)
    assert len(data) == 0xDC
    transport.close()
    assert device.closed


def test_hid_open_by_path(monkeypatch):
    device = _FakeHidDevice()
    _patch_hid(monkeypatch, device)
    transport = HidTransport(path="/dev/hidraw3")
    transport.open()
    assert device.opened_with == b"/dev/hidraw3"
    assert transport.identifier == "/dev/hidraw3"


def test_hid_open_failure(monkeypatch):
    _patch_hid(monkeypatch, _FakeHidDevice(fail_open=True))
    with pytest.raises(TransportOpenError):
        HidTransport().open()


def test_hid_read_timeout(monkeypatch):
    _patch_hid(monkeypatch, _FakeHidDevice())
    transport = HidTransport(read_timeout_ms=5)
    transport.open()
    with pytest.raises(TransportReadError, match="timed out"):
        transport.read()


def test_hid_read_before_open():
    with pytest.raises(TransportReadError):
        HidTransport().read()


def test_enumerate_devices(monkeypatch):
    _patch_hid(monkeypatch, _FakeHidDevice())
    assert enumerate_devices() == ["/dev/hidraw1", "/dev/hidraw3"]
