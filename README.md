# hsesproto

Encoding and decoding of the HSES (High Speed Ethernet Server) protocol
spoken by industrial robot controllers. The package has no runtime
dependencies. It turns Python objects into the bytes the controller
expects, and turns received bytes back into Python objects.

## Modules

- `hsesproto.message`: the framing of every datagram.
  `HsesCommonHeader` (24 bytes, `YERC` magic), `HsesRequestSubHeader`
  and `HsesResponseSubHeader` (8 bytes each), and the complete
  `HsesRequestMessage` and `HsesResponseMessage`. Each has a `create`
  class method that fills in the fixed fields, plus `encode()` and the
  class method `decode(data)`. `HsesResponseSubHeader.create` adds 0x80
  to the service code. `HsesCommonHeader.create` sets the block number
  to 0x80000000 when `ack` is 1.
- `hsesproto.types`: the constants `DEFAULT_PORT` (10040) and `FILE_PORT`
  (10041). The enums `VarType`, `Division`, `Service` and
  `CoordinateSystemType`. `CoordinateSystem`, with `CoordinateSystem.BASE`,
  `.ROBOT` and `.TOOL`, and `CoordinateSystem.user(number)` for user
  systems. The generic `Variable` dataclass, which also has
  `Variable.with_default(var_type, index, factory)`.
- `hsesproto.variables`: value codecs, each with a `command_id`,
  `serialize(value)` and `deserialize(data)`.
  - `ByteCodec`: one byte, padded to four.
  - `IntegerCodec`: signed 32-bit little-endian.
  - `RealCodec`: 32-bit float.
  - `UnitCodec`: the empty value.

  Ready-made instances are `BYTE`, `INTEGER`, `REAL` and `UNIT`.
- `hsesproto.position`: `PulsePosition` (eight joints and a control
  group) and `CartesianPosition` (x, y, z, rx, ry, rz, tool and user
  coordinate numbers). Both serialize to the 52-byte position record.
  `deserialize_position(data)` returns one or the other, depending on the
  record's type field. Cartesian values go over the wire multiplied by 1000.
- `hsesproto.status`: `StatusData1`, `StatusData2` and `Status`. Each has
  `from_bytes` and `serialize`. `Status` also has the helpers
  `is_running()`, `is_servo_on()`, `has_alarm()`, `is_teach_mode()`,
  `is_play_mode()`, `is_remote_mode()` and `has_error()`.
- `hsesproto.alarm`: `Alarm`, with the following methods.
  - `serialize(attribute)`: encodes one attribute.
  - `serialize_complete()`: encodes the whole 268-byte record.
  - `deserialize(data)`: reads code, data, type, time and name back.
  - `with_sub_code(...)`: returns a copy that carries sub-code texts.
  - `Alarm.default()`

  The module also holds `AlarmAttribute`, whose `from_value` maps unknown
  numbers to `CODE`, and the sample alarms `servo_error()`,
  `emergency_stop()`, `safety_error()` and `communication_error()`.
- `hsesproto.alarm_commands`: `ReadAlarmData` (command 0x70) and
  `ReadAlarmHistory` (command 0x71). `ReadAlarmHistory` has
  `is_valid_instance()`, `get_alarm_category()` and `get_alarm_index()`,
  and `AlarmCategory` names its five instance ranges.
- `hsesproto.commands`: `ReadVar`, `WriteVar`, `ReadStatus`,
  `ReadStatusData1`, `ReadStatusData2` and `ReadCurrentPosition`. Each
  has a `command_id`, `instance` and `attribute` for the sub-header, and
  `serialize()` for the payload.
- `hsesproto.errors`: `ProtocolError` and its subclasses, for example
  `UnderflowError`, `InvalidHeaderError`, `InvalidAttributeError`,
  `PositionError` and `DeserializationError`.

## Example

```python
from hsesproto.commands import ReadVar, WriteVar
from hsesproto.message import HsesRequestMessage, HsesResponseMessage
from hsesproto.status import Status
from hsesproto.types import Division, Service
from hsesproto.variables import INTEGER

command = WriteVar(INTEGER, 5, 1234)
request = HsesRequestMessage.create(
    Division.ROBOT, 0, 1,
    command.command_id, command.instance, command.attribute,
    Service.SET_SINGLE, command.serialize(),
)
datagram = request.encode()   # header, sub-header and 4-byte payload

def read_status(received: bytes) -> Status:
    reply = HsesResponseMessage.decode(received)
    return Status.from_bytes(reply.payload)
```

A buffer that is too short raises `UnderflowError`. A header without the
`YERC` magic raises `InvalidHeaderError`. Both are subclasses of
`ProtocolError`.

## What it does not do

The package only encodes and decodes. It opens no sockets and has no
client that talks to a controller. It has no simulated controller or
server, and no file-transfer operations: `Division.FILE` and `FILE_PORT`
are only constants. Sending datagrams and matching replies to requests
is left to the caller.

## Running the tests

```
pip install -e .[test]
pytest
```