"""Wake-on-LAN magic packet encoder and decoder.

Packet layout::

    +--------------------+-----------+-----------+-----+-----------+
    |     Sync header    |  MAC #1   |  MAC #2   | ... |  MAC #16  |
    |  6 bytes of 0xFF   |  6 bytes  |  6 bytes  |     |  6 bytes  |
    +--------------------+-----------+-----------+-----+-----------+

- Sync header: six 0xFF bytes, never overwritten
- MAC copies: the target's 6-byte address repeated 16 times back to back
- Total size: 102 bytes
"""

from __future__ import annotations

from ..models.address import MacAddress, EUI48_SIZE
from .address import parse_address

SYNC_BYTE = 0xFF
SYNC_LENGTH = 6
REPETITIONS = 16
MAGIC_PACKET_SIZE = SYNC_LENGTH + EUI48_SIZE * REPETITIONS  # 102


def encode_packet(address: MacAddress) -> bytes:
    """Build the 102-byte magic packet for an already parsed address.

    Args:
        address: The target's hardware address.

    Returns:
        A 102-byte ``bytes`` object ready to hand to a datagram socket.
    """
    if not isinstance(address, MacAddress):
        raise TypeError(
            f"Expected MacAddress, got {type(address).__name__}"
        )
    buf = bytearray([SYNC_BYTE] * MAGIC_PACKET_SIZE)
    for i in range(REPETITIONS):
        start = SYNC_LENGTH + i * EUI48_SIZE
        buf[start : start + EUI48_SIZE] = address.octets
    return bytes(buf)


def create_magic_packet(text: str) -> bytes:
    """Parse ``text`` as a MAC address and build its magic packet.

    Raises:
        ParseError: Propagated unchanged from :func:`parse_address`.
    """
    return encode_packet(parse_address(text))


def parse_magic_packet(data: bytes) -> MacAddress | None:
    """Recover the target address from a magic packet.

    Args:
        data: A received 102-byte payload.

    Returns:
        The ``MacAddress`` the packet wakes, or ``None`` if the size or sync
        header is wrong or the 16 copies disagree.
    """
    if len(data) != MAGIC_PACKET_SIZE:
        return None

    if any(b != SYNC_BYTE for b in data[:SYNC_LENGTH]):
        return None

    first = bytes(data[SYNC_LENGTH : SYNC_LENGTH + EUI48_SIZE])
    if bytes(data[SYNC_LENGTH:]) != first * REPETITIONS:
        return None

    return MacAddress(octets=first)
