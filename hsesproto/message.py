"""HSES message headers and complete request and response messages."""

from __future__ import annotations

import struct
from dataclasses import dataclass
from typing import ClassVar

from .errors import InvalidHeaderError, SerializationError, UnderflowError

MAGIC = b"YERC"
HEADER_SIZE = 0x20
RESERVED_MAGIC = 0x03
RESERVED = b"99999999"
ACK_BLOCK_NUMBER = 0x80000000

_COMMON = struct.Struct("<4sHHBBBBI8s")
_REQUEST_SUB = struct.Struct("<HHBBH")
_RESPONSE_SUB = struct.Struct("<BBBBHH")


def _pack(layout: struct.Struct, *values: object) -> bytes:
    try:
        return layout.pack(*values)
    except struct.error as exc:
        raise SerializationError(str(exc)) from exc


def _payload_size(payload: bytes) -> int:
    if len(payload) > 0xFFFF:
        raise ValueError(f"payload too large: {len(payload)} bytes")
    return len(payload)


@dataclass
class HsesCommonHeader:
    """The 24-byte header shared by requests and responses."""

    SIZE: ClassVar[int] = _COMMON.size

    magic: bytes
    header_size: int
    payload_size: int
    reserved_magic: int
    division: int
    ack: int
    request_id: int
    block_number: int
    reserved: bytes

    @classmethod
    def create(
        cls, division: int, ack: int, request_id: int, payload_size: int
    ) -> HsesCommonHeader:
        """Build a header with the protocol's fixed fields filled in."""
        return cls(
            magic=MAGIC,
            header_size=HEADER_SIZE,
            payload_size=payload_size,
            reserved_magic=RESERVED_MAGIC,
            division=division,
            ack=ack,
            request_id=request_id,
            block_number=ACK_BLOCK_NUMBER if ack == 0x01 else 0,
            reserved=RESERVED,
        )

    def encode(self) -> bytes:
        return _pack(
            _COMMON,
            self.magic,
            self.header_size,
            self.payload_size,
            self.reserved_magic,
            self.division,
            self.ack,
            self.request_id,
            self.block_number,
            self.reserved,
        )

    @classmethod
    def decode(cls, data: bytes) -> HsesCommonHeader:
        """Decode a header from the start of ``data``."""
        if len(data) < cls.SIZE:
            raise UnderflowError()
        fields = _COMMON.unpack_from(data)
        if fields[0] != MAGIC:
            raise InvalidHeaderError()
        return cls(*fields)


@dataclass
class HsesRequestSubHeader:
    """The 8-byte sub-header of a request."""

    SIZE: ClassVar[int] = _REQUEST_SUB.size

    command: int
    instance: int
    attribute: int
    service: int
    padding: int = 0

    @classmethod
    def create(
        cls, command: int, instance: int, attribute: int, service: int
    ) -> HsesRequestSubHeader:
        return cls(command, instance, attribute, service, 0)

    def encode(self) -> bytes:
        return _pack(
            _REQUEST_SUB,
            self.command,
            self.instance,
            self.attribute,
            self.service,
            self.padding,
        )

    @classmethod
    def decode(cls, data: bytes) -> HsesRequestSubHeader:
        """Decode a request sub-header from the start of ``data``."""
        if len(data) < cls.SIZE:
            raise UnderflowError()
        return cls(*_REQUEST_SUB.unpack_from(data))


@dataclass
class HsesResponseSubHeader:
    """The 8-byte sub-header of a response."""

    SIZE: ClassVar[int] = _RESPONSE_SUB.size

    service: int
    status: int
    added_status_size: int
    padding1: int
    added_status: int
    padding2: int

    @classmethod
    def create(
        cls, service: int, status: int, added_status: int
    ) -> HsesResponseSubHeader:
        """Build a sub-header answering ``service``; 0x80 marks it a response."""
        answered = service + 0x80
        if not 0 <= answered <= 0xFF:
            raise ValueError(f"service code out of range: {service}")
        return cls(
            service=answered,
            status=status,
            added_status_size=2,
            padding1=0,
            added_status=added_status,
            padding2=0,
        )

    def encode(self) -> bytes:
        return _pack(
            _RESPONSE_SUB,
            self.service,
            self.status,
            self.added_status_size,
            self.padding1,
            self.added_status,
            self.padding2,
        )

    @classmethod
    def decode(cls, data: bytes) -> HsesResponseSubHeader:
        """Decode a response sub-header from the start of ``data``."""
        if len(data) < cls.SIZE:
            raise UnderflowError()
        return cls(*_RESPONSE_SUB.unpack_from(data))


@dataclass
class HsesRequestMessage:
    """A complete request: header, sub-header and payload."""

    header: HsesCommonHeader
    sub_header: HsesRequestSubHeader
    payload: bytes

    @classmethod
    def create(
        cls,
        division: int,
        ack: int,
        request_id: int,
        command: int,
        instance: int,
        attribute: int,
        service: int,
        payload: bytes,
    ) -> HsesRequestMessage:
        payload = bytes(payload)
        header = HsesCommonHeader.create(
            division, ack, request_id, _payload_size(payload)
        )
        sub_header = HsesRequestSubHeader.create(command, instance, attribute, service)
        return cls(header, sub_header, payload)

    def encode(self) -> bytes:
        return self.header.encode() + self.sub_header.encode() + self.payload

    @classmethod
    def decode(cls, data: bytes) -> HsesRequestMessage:
        """Decode a request; everything after the sub-header is payload."""
        data = bytes(data)
        header = HsesCommonHeader.decode(data)
        rest = data[HsesCommonHeader.SIZE :]
        sub_header = HsesRequestSubHeader.decode(rest)
        return cls(header, sub_header, rest[HsesRequestSubHeader.SIZE :])


@dataclass
class HsesResponseMessage:
    """A complete response: header, sub-header and payload."""

    header: HsesCommonHeader
    sub_header: HsesResponseSubHeader
    payload: bytes

    @classmethod
    def create(
        cls,
        division: int,
        ack: int,
        request_id: int,
        service: int,
        status: int,
        added_status: int,
        payload: bytes,
    ) -> HsesResponseMessage:
        payload = bytes(payload)
        header = HsesCommonHeader.create(
            division, ack, request_id, _payload_size(payload)
        )
        sub_header = HsesResponseSubHeader.create(service, status, added_status)
        return cls(header, sub_header, payload)

    def encode(self) -> bytes:
        return self.header.encode() + self.sub_header.encode() + self.payload

    @classmethod
    def decode(cls, data: bytes) -> HsesResponseMessage:
        """Decode a response; everything after the sub-header is payload."""
        data = bytes(data)
        header = HsesCommonHeader.decode(data)
        rest = data[HsesCommonHeader.SIZE :]
        sub_header = HsesResponseSubHeader.decode(rest)
        return cls(header, sub_header, rest[HsesResponseSubHeader.SIZE :])