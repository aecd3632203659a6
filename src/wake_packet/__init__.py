"""Parse EUI-48 addresses and build Wake-on-LAN magic packets."""

from .models.address import MacAddress
from .protocol.address import (
    ParseError,
    BadFormat,
    BadLength,
    BadCharacter,
    parse_address,
)
from .protocol.magic import (
    MAGIC_PACKET_SIZE,
    create_magic_packet,
    encode_packet,
    parse_magic_packet,
)

__all__ = [
    "MacAddress",
    "ParseError",
    "BadFormat",
    "BadLength",
    "BadCharacter",
    "parse_address",
    "MAGIC_PACKET_SIZE",
    "create_magic_packet",
    "encode_packet",
    "parse_magic_packet",
]
