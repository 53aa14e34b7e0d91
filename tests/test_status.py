import pytest

from hsesproto.errors import UnderflowError
from hsesproto.status import Status, StatusData1, StatusData2


def test_status_from_bytes():
    status = Status.from_bytes(bytes([0x01, 0x00, 0x40, 0x00]))
    assert status.data1.step
    assert status.data2.servo_on
    assert not status.data1.running
    assert not status.data2.alarm


def test_status_serialization():
    status = Status(StatusData1(step=True), StatusData2(servo_on=True))
    deserialized = Status.from_bytes(status.serialize())
    assert deserialized.data1.step == status.data1.step
    assert deserialized.data2.servo_on == status.data2.servo_on
    assert deserialized.data1.running == status.data1.running
    assert deserialized == status


def test_status_helper_methods():
    status = Status(
        StatusData1(running=True, teach=True), StatusData2(servo_on=True)
    )
    assert status.is_running()
    assert status.is_servo_on()
    assert not status.has_alarm()
    assert status.is_teach_mode()
    assert not status.is_play_mode()
    assert not status.is_remote_mode()
    assert not status.has_error()


def test_status_command_id():
    assert Status.command_id == 0x72
    assert StatusData1.command_id == 0x72
    assert StatusData2.command_id == 0x72
    status = Status(StatusData1(step=True), StatusData2())
    assert Status.from_bytes(status.serialize()).data1.step


def test_status_data1():
    status_data1 = StatusData1.from_bytes(bytes([0x01, 0x00]))
    assert status_data1.step
    assert not status_data1.running
    assert not status_data1.teach
    deserialized = StatusData1.from_bytes(status_data1.serialize())
    assert deserialized.step == status_data1.step


def test_status_data2():
    status_data2 = StatusData2.from_bytes(bytes([0x40, 0x00]))
    assert status_data2.servo_on
    assert not status_data2.alarm
    assert not status_data2.error
    deserialized = StatusData2.from_bytes(status_data2.serialize())
    assert deserialized.servo_on == status_data2.servo_on


def test_status_serialized_bytes():
    status = Status(
        StatusData1(running=True, teach=True), StatusData2(servo_on=True, alarm=True)
    )
    assert status.serialize() == bytes([0x28, 0x00, 0x50, 0x00])


def test_status_data1_all_bits():
    data = StatusData1.from_bytes(bytes([0xFF, 0x00]))
    assert data.serialize() == bytes([0xFF, 0x00])
    assert data.remote and data.play and data.speed_limited


def test_status_data2_ignores_bit_zero():
    data = StatusData2.from_bytes(bytes([0x01, 0x00]))
    assert data == StatusData2()
    assert data.serialize() == bytes([0x00, 0x00])


@pytest.mark.parametrize("cls", [StatusData1, StatusData2])
def test_status_data_underflow(cls):
    with pytest.raises(UnderflowError):
        cls.from_bytes(b"\x01")


def test_status_underflow():
    with pytest.raises(UnderflowError):
        Status.from_bytes(b"\x01\x00\x40")