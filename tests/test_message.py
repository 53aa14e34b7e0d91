import pytest

from hsesproto.errors import InvalidHeaderError, SerializationError, UnderflowError
from hsesproto.message import (
    HsesCommonHeader,
    HsesRequestMessage,
    HsesRequestSubHeader,
    HsesResponseMessage,
    HsesResponseSubHeader,
)


def test_common_header_creation():
    header = HsesCommonHeader.create(1, 0, 1, 10)
    assert header.magic == b"YERC"
    assert header.header_size == 0x20
    assert header.division == 1
    assert header.ack == 0
    assert header.request_id == 1
    assert header.payload_size == 10
    assert header.block_number == 0
    assert header.reserved == b"99999999"


def test_common_header_ack_sets_block_number():
    header = HsesCommonHeader.create(1, 1, 1, 0)
    assert header.block_number == 0x80000000


def test_common_header_encode_bytes():
    encoded = HsesCommonHeader.create(1, 0, 1, 10).encode()
    assert encoded == (
        b"YERC" + b"\x20\x00" + b"\x0a\x00" + b"\x03\x01\x00\x01"
        + b"\x00\x00\x00\x00" + b"99999999"
    )


def test_common_header_encode_ack_block_number_bytes():
    encoded = HsesCommonHeader.create(1, 1, 1, 0).encode()
    assert encoded[12:16] == b"\x00\x00\x00\x80"


def test_common_header_encode_decode():
    header = HsesCommonHeader.create(1, 0, 1, 10)
    decoded = HsesCommonHeader.decode(header.encode())
    assert decoded == header


def test_common_header_decode_underflow():
    with pytest.raises(UnderflowError):
        HsesCommonHeader.decode(b"YERC" + bytes(10))


def test_common_header_decode_bad_magic():
    data = bytearray(HsesCommonHeader.create(1, 0, 1, 0).encode())
    data[0:4] = b"XXXX"
    with pytest.raises(InvalidHeaderError):
        HsesCommonHeader.decode(bytes(data))


def test_common_header_encode_out_of_range():
    header = HsesCommonHeader.create(300, 0, 1, 0)
    with pytest.raises(SerializationError):
        header.encode()


def test_request_sub_header_creation():
    sub_header = HsesRequestSubHeader.create(0x0070, 1, 0, 1)
    assert sub_header.command == 0x0070
    assert sub_header.instance == 1
    assert sub_header.attribute == 0
    assert sub_header.service == 1
    assert sub_header.padding == 0


def test_request_sub_header_encode_bytes():
    assert HsesRequestSubHeader.create(0x0070, 1, 0, 1).encode() == (
        b"\x70\x00\x01\x00\x00\x01\x00\x00"
    )


def test_request_sub_header_encode_decode():
    sub_header = HsesRequestSubHeader.create(0x0070, 1, 0, 1)
    assert HsesRequestSubHeader.decode(sub_header.encode()) == sub_header


def test_request_sub_header_decode_underflow():
    with pytest.raises(UnderflowError):
        HsesRequestSubHeader.decode(b"\x70\x00\x01")


def test_response_sub_header_creation():
    sub_header = HsesResponseSubHeader.create(1, 0, 0x0000)
    assert sub_header.service == 0x81
    assert sub_header.status == 0
    assert sub_header.added_status_size == 2
    assert sub_header.added_status == 0x0000


def test_response_sub_header_service_overflow():
    with pytest.raises(ValueError):
        HsesResponseSubHeader.create(0x90, 0, 0)


def test_response_sub_header_encode_bytes():
    assert HsesResponseSubHeader.create(1, 0, 0x1234).encode() == (
        b"\x81\x00\x02\x00\x34\x12\x00\x00"
    )


def test_response_sub_header_encode_decode():
    sub_header = HsesResponseSubHeader.create(1, 0, 0x0000)
    decoded = HsesResponseSubHeader.decode(sub_header.encode())
    assert decoded.service == sub_header.service
    assert decoded.status == sub_header.status
    assert decoded.added_status_size == sub_header.added_status_size
    assert decoded.added_status == sub_header.added_status


def test_response_sub_header_decode_underflow():
    with pytest.raises(UnderflowError):
        HsesResponseSubHeader.decode(bytes(7))


def test_request_message_creation():
    payload = bytes([1, 2, 3])
    message = HsesRequestMessage.create(1, 0, 1, 0x0070, 1, 0, 1, payload)
    assert message.header.division == 1
    assert message.header.ack == 0
    assert message.header.request_id == 1
    assert message.header.payload_size == 3
    assert message.sub_header.command == 0x0070
    assert message.sub_header.service == 1
    assert message.payload == payload


def test_request_message_encode_decode():
    payload = bytes([1, 2, 3])
    message = HsesRequestMessage.create(1, 0, 1, 0x0070, 1, 0, 1, payload)
    encoded = message.encode()
    assert len(encoded) == 35
    decoded = HsesRequestMessage.decode(encoded)
    assert decoded.header.division == message.header.division
    assert decoded.header.ack == message.header.ack
    assert decoded.header.request_id == message.header.request_id
    assert decoded.header.payload_size == message.header.payload_size
    assert decoded.sub_header.command == message.sub_header.command
    assert decoded.sub_header.service == message.sub_header.service
    assert decoded.payload == payload


def test_request_message_accepts_list_payload():
    message = HsesRequestMessage.create(1, 0, 1, 0x0070, 1, 0, 1, [4, 5])
    assert message.payload == b"\x04\x05"


def test_request_message_decode_truncated_sub_header():
    encoded = HsesRequestMessage.create(1, 0, 1, 0x0070, 1, 0, 1, b"").encode()
    with pytest.raises(UnderflowError):
        HsesRequestMessage.decode(encoded[:28])


def test_request_message_payload_too_large():
    with pytest.raises(ValueError):
        HsesRequestMessage.create(1, 0, 1, 0x0070, 1, 0, 1, bytes(0x10000))


def test_response_message_creation():
    payload = bytes([1, 2, 3])
    message = HsesResponseMessage.create(1, 1, 1, 1, 0, 0x0000, payload)
    assert message.header.division == 1
    assert message.header.ack == 1
    assert message.header.request_id == 1
    assert message.header.payload_size == 3
    assert message.sub_header.service == 0x81
    assert message.sub_header.status == 0
    assert message.sub_header.added_status == 0x0000
    assert message.payload == payload


def test_response_message_encode_decode():
    payload = bytes([1, 2, 3])
    message = HsesResponseMessage.create(1, 1, 1, 1, 0, 0x0000, payload)
    decoded = HsesResponseMessage.decode(message.encode())
    assert decoded.header.division == message.header.division
    assert decoded.header.ack == message.header.ack
    assert decoded.header.request_id == message.header.request_id
    assert decoded.header.payload_size == message.header.payload_size
    assert decoded.sub_header.service == message.sub_header.service
    assert decoded.sub_header.status == message.sub_header.status
    assert decoded.sub_header.added_status == message.sub_header.added_status
    assert decoded.payload == payload


def test_response_message_decode_bad_magic():
    encoded = bytearray(HsesResponseMessage.create(1, 1, 1, 1, 0, 0, b"").encode())
    encoded[3:4] = b"Z"
    with pytest.raises(InvalidHeaderError):
        HsesResponseMessage.decode(bytes(encoded))