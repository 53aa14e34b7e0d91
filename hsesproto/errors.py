"""Exceptions raised while encoding or decoding HSES protocol data."""

from __future__ import annotations


class ProtocolError(Exception):
    """Base class for every HSES protocol error."""

    message = "protocol error"

    def __init__(self, detail: str | None = None) -> None:
        self.detail = detail
        text = self.message if detail is None else f"{self.message}: {detail}"
        super().__init__(text)


class UnderflowError(ProtocolError):
    """The buffer holds fewer bytes than the structure needs."""

    message = "buffer underflow"


class InvalidHeaderError(ProtocolError):
    """The message header is malformed."""

    message = "invalid header"


class UnknownCommandError(ProtocolError):
    """A command id that the protocol does not know."""

    message = "unknown command"

    def __init__(self, command: int) -> None:
        self.command = command
        self.detail = None
        Exception.__init__(self, f"unknown command 0x{command:04X}")


class UnsupportedError(ProtocolError):
    """The operation is not supported."""

    message = "unsupported operation"


class SerializationError(ProtocolError):
    """A value could not be turned into bytes."""

    message = "serialization error"


class DeserializationError(ProtocolError):
    """Bytes could not be turned into a value."""

    message = "deserialization error"


class InvalidVariableTypeError(ProtocolError):
    """The variable type is not valid here."""

    message = "invalid variable type"


class InvalidCoordinateSystemError(ProtocolError):
    """The coordinate system is not valid here."""

    message = "invalid coordinate system"


class PositionError(ProtocolError):
    """Position data is inconsistent."""

    message = "position data error"


class FileError(ProtocolError):
    """A file operation failed."""

    message = "file operation error"


class SystemInfoError(ProtocolError):
    """System information could not be handled."""

    message = "system info error"


class InvalidMessageError(ProtocolError):
    """A message is not valid."""

    message = "invalid message"


class InvalidAttributeError(ProtocolError):
    """The attribute number is not valid for the command."""

    message = "invalid attribute"


class InvalidServiceError(ProtocolError):
    """The service code is not valid for the command."""

    message = "invalid service"


class InvalidCommandError(ProtocolError):
    """The command is not valid."""

    message = "invalid command"