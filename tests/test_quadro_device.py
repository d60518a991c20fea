"""Tests for the Quadro device facade: slots, update mapping, lifecycle."""
import logging

import pytest

from quadromon.core.binary import ReportTruncatedError
from quadromon.domain import Hardware, Quadro, SensorType, create_replay_device
from quadromon.parsing.report import (
    DecodedReport,
    DeviceInfo,
    DeviceInfoExt,
    FanReading,
    TemperatureReading,
    encode_report,
)
from quadromon.transports import DeviceTransport, TransportOpenError, TransportReadError
from quadromon.transports.replay import ReplayTransport


def _report_bytes(temps=(2500, 32767, 1800, 2100), speeds=(1000, 1100, 1200, 1300), vcc=12.1, flow=80.5, firmware=1032) -> bytes:
    """Helper: encode a report with the given sensor values."""
    report = DecodedReport(
        device_info=DeviceInfo(1, 0x0301, 1, 2, 12, 3, firmware),
        device_info_ext=DeviceInfoExt(0, 0, 0, 0, 0),
        temperatures=tuple(
            TemperatureReading(raw=t, value=None if t == 32767 else t / 100.0) for t in temps
        ),
        vcc=vcc,
        flow=flow,
        fans=tuple(FanReading(50.0, 12.0, 0.25, 3.0, s, 0, 0) for s in speeds),
    )
    return encode_report(report)


class _ClosedTransport(DeviceTransport):
    identifier = "missing"

    def __init__(self):
        self.read_calls = 0
        self.close_calls = 0

    def open(self):
        raise TransportOpenError("no such device")

    def read(self):
        self.read_calls += 1
        return b""

    def close(self):
        self.close_calls += 1


class _ScriptedTransport(DeviceTransport):
    """Returns queued items in order; exceptions in the queue are raised."""

    identifier = "scripted"

    def __init__(self, items):
        self.items = list(items)
        self.close_calls = 0

    def open(self):
        pass

    def read(self):
        item = self.items.pop(0)
        if isinstance(item, Exception):
            raise item
        return item

    def close(self):
        self.close_calls += 1


def test_quadro_is_hardware():
    device = create_replay_device([_report_bytes()])
    assert isinstance(device, Hardware)
    assert device.name == "Quadro"
    assert device.hardware_type == "cooler"
    assert device.identifier == "replay"


def test_firmware_read_at_construction():
    device = create_replay_device([_report_bytes(firmware=1032), _report_bytes(firmware=999)])
    assert device.firmware_version == 1032
    device.update()
    assert device.firmware_version == 1032


def test_slots_created_and_activated():
    device = create_replay_device([_report_bytes(temps=(32767, 32767, 32767, 32767))])
    sensors = device.sensors
    assert len(sensors) == 10
    assert all(s.active for s in sensors)
    names = [s.name for s in sensors]
    assert names == [
        "Temperature 0", "Temperature 1", "Temperature 2", "Temperature 3",
        "Fan 0", "Fan 1", "Fan 2", "Fan 3",
        "VCC", "Flow",
    ]
    assert [s.sensor_type for s in sensors].count(SensorType.TEMPERATURE) == 4
    assert [s.sensor_type for s in sensors].count(SensorType.FAN) == 4
    assert device.vcc[0].unit == "V"
    assert device.flow[0].unit == "L/h"


def test_values_empty_before_first_update():
    device = create_replay_device([_report_bytes()])
    assert all(s.value is None for s in device.sensors)


def test_update_maps_values():
    device = create_replay_device([_report_bytes()])
    device.update()
    assert [s.value for s in device.temperatures] == [25.0, None, 18.0, 21.0]
    assert [s.value for s in device.fans] == [1000, 1100, 1200, 1300]
    assert device.vcc[0].value == pytest.approx(12.1)
    assert device.flow[0].value == pytest.approx(80.5)
    assert device.last_report is not None
    assert device.last_report.fans[0].current == pytest.approx(0.25)


def test_unavailable_differs_from_zero():
    device = create_replay_device([_report_bytes(temps=(0, 32767, 0, 0))])
    device.update()
    assert device.temperatures[0].value == 0.0
    assert device.temperatures[1].value is None


def test_update_overwrites_previous_values():
    device = create_replay_device(
        [
            _report_bytes(),
            _report_bytes(temps=(2500, 2600, 2700, 2800), speeds=(0, 0, 0, 0)),
            _report_bytes(temps=(32767, 2600, 2700, 2800)),
        ],
        loop=False,
    )
    device.update()
    assert device.temperatures[1].value == 26.0
    assert device.fans[0].value == 0
    device.update()
    assert device.temperatures[0].value is None


def test_open_failure_exposes_no_sensors(caplog):
    transport = _ClosedTransport()
    with caplog.at_level(logging.WARNING, logger="quadromon"):
        device = Quadro(transport)
    assert device.sensors == []
    assert device.firmware_version is None
    assert not device.connected
    assert any(r.getMessage() == "device_open_failed" for r in caplog.records)

    device.update()
    device.close()
    assert transport.read_calls == 0
    assert transport.close_calls == 0


def test_empty_replay_fails_open():
    device = create_replay_device([])
    assert device.sensors == []


def test_truncated_report_surfaces_from_update():
    good = _report_bytes()
    transport = _ScriptedTransport([good, good[:100]])
    device = Quadro(transport)
    with pytest.raises(ReportTruncatedError):
        device.update()
    assert device.temperatures[0].value is None


def test_truncated_update_keeps_previous_values():
    good = _report_bytes()
    transport = _ScriptedTransport([good, good, good[:-1]])
    device = Quadro(transport)
    device.update()
    with pytest.raises(ReportTruncatedError):
        device.update()
    assert device.temperatures[0].value == 25.0


def test_read_error_propagates_unchanged():
    error = TransportReadError("usb gone")
    transport = _ScriptedTransport([_report_bytes(), error])
    device = Quadro(transport)
    with pytest.raises(TransportReadError) as excinfo:
        device.update()
    assert excinfo.value is error


def test_construction_decode_failure_closes_transport():
    transport = _ScriptedTransport([b"\x01\x02"])
    with pytest.raises(ReportTruncatedError):
        Quadro(transport)
    assert transport.close_calls == 1


def test_close_releases_once():
    transport = _ScriptedTransport([_report_bytes()])
    device = Quadro(transport)
    device.close()
    device.close()
    assert transport.close_calls == 1
    assert not device.connected


def test_update_after_close_raises():
    device = Quadro(ReplayTransport([_report_bytes()]))
    device.close()
    with pytest.raises(RuntimeError):
        device.update()


def test_activate_sensor_is_idempotent():
    device = create_replay_device([_report_bytes()])
    device.activate_sensor(device.fans[0])
    assert len(device.sensors) == 10


def test_bank_set_writes_slot():
    device = create_replay_device([_report_bytes()])
    device.temperatures.set(2, 33.5)
    assert device.temperatures[2].value == 33.5
    device.temperatures.set(2, None)
    assert device.temperatures[2].value is None


def test_last_report_set_by_update_only():
    device = create_replay_device([_report_bytes()])
    assert device.firmware_version == 1032
    assert device.last_report is None
    device.update()
    assert device.last_report.device_info.firmware == 1032
