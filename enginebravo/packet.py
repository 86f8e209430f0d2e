"""Network roles, message identifiers and the packet header carried by every message."""

from __future__ import annotations

import struct
import time
from dataclasses import dataclass, fields
from enum import Enum, IntEnum

SERVER_PORT = 60001
CLIENT_PORT = 60002

USER_PACKET_ENUM = 134
"""First message identifier available to applications."""

UNASSIGNED_GUID = 0xFFFF_FFFF_FFFF_FFFF
"""Client GUID meaning that no client is assigned."""


class NetworkRole(Enum):
    """The part a participant plays in the network."""

    UNASSIGNED = "unassigned"
    CLIENT = "client"
    SERVER = "server"
    HOST = "host"


class NetworkMessage(IntEnum):
    """Custom message identifiers."""

    ID_TRANSFORM_PACKET = USER_PACKET_ENUM + 1
    ID_PLAYER_INIT = USER_PACKET_ENUM + 2
    ID_PLAYER_DESTROY = USER_PACKET_ENUM + 3
    ID_CUSTOM_SERIALIZE = USER_PACKET_ENUM + 4
    ID_SPAWN_PREFAB = USER_PACKET_ENUM + 5
    ID_DESPAWN_PREFAB = USER_PACKET_ENUM + 6


@dataclass
class NetworkPacket:
    """The header written at the start of every network message."""

    message_id: int = 0
    network_object_id: int = 0xFFFF
    prefab_id: int = 0x7FFF_FFFF
    timestamp: int = 0
    client_guid: int = UNASSIGNED_GUID
    serializable_id: int = 0xFFFF_FFFF
    network_behaviour_id: int = 0xFF
    network_variable_id: int = 0xFF

    def set_timestamp_now(self) -> None:
        """Set the timestamp to the current monotonic time in milliseconds."""
        self.timestamp = time.monotonic_ns() // 1_000_000


_HEADER_FORMATS = {
    "message_id": "B",
    "network_object_id": "H",
    "prefab_id": "i",
    "timestamp": "Q",
    "client_guid": "Q",
    "serializable_id": "I",
    "network_behaviour_id": "B",
    "network_variable_id": "B",
}


def _with_order(fmt: str) -> str:
    return fmt if fmt[:1] in "<>!=@" else "<" + fmt


class BitStream:
    """A growable byte stream with independent read and write positions.

    Only bytes before the write offset can be read.
    """

    def __init__(self, data: bytes = b"") -> None:
        self._buffer = bytearray(data)
        self.write_offset = len(self._buffer)
        self.read_offset = 0

    @property
    def data(self) -> bytes:
        return bytes(self._buffer[: self.write_offset])

    def __len__(self) -> int:
        return self.write_offset

    def write(self, fmt: str, value: int | float | bool) -> None:
        """Pack ``value`` with the struct format ``fmt`` at the write offset."""
        chunk = struct.pack(_with_order(fmt), value)
        if self.write_offset > len(self._buffer):
            self._buffer.extend(bytes(self.write_offset - len(self._buffer)))
        end = self.write_offset + len(chunk)
        self._buffer[self.write_offset:end] = chunk
        self.write_offset = end

    def read(self, fmt: str) -> int | float | bool:
        """Unpack one value with the struct format ``fmt`` at the read offset."""
        layout = struct.Struct(_with_order(fmt))
        end = self.read_offset + layout.size
        if end > self.write_offset:
            raise EOFError("Not enough data left in the stream")
        (value,) = layout.unpack_from(self._buffer, self.read_offset)
        self.read_offset = end
        return value

    def reset(self) -> None:
        """Discard all data and rewind both offsets."""
        self._buffer.clear()
        self.write_offset = 0
        self.read_offset = 0


def _write_fields(stream: BitStream, packet: NetworkPacket) -> None:
    for item in fields(packet):
        stream.write(_HEADER_FORMATS[item.name], getattr(packet, item.name))


def reserve_packet_bits(stream: BitStream) -> None:
    """Clear the stream and fill it with a default header to be overwritten later."""
    stream.reset()
    _write_fields(stream, NetworkPacket())


def read_packet(stream: BitStream) -> NetworkPacket:
    """Read a packet header from the stream's read offset."""
    values = {name: stream.read(fmt) for name, fmt in _HEADER_FORMATS.items()}
    return NetworkPacket(**values)


def write_packet_header(stream: BitStream, packet: NetworkPacket) -> None:
    """Overwrite the header at the start of the stream, keeping the write offset."""
    saved = stream.write_offset
    stream.write_offset = 0
    _write_fields(stream, packet)
    stream.write_offset = saved