"""Protocol layer: address parsing and magic packet encoding."""

from .address import (
    ParseError,
    BadFormat,
    BadLength,
    BadCharacter,
    parse_address,
)
from .magic import create_magic_packet, encode_packet, parse_magic_packet
