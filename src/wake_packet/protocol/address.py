"""EUI-48 address parser.

Accepted layouts (hex digits are case-insensitive)::

    aabbccddeeff          12 characters, no separators
    aabb.ccdd.eeff        14 characters, three groups of four digits
    aa:bb:cc:dd:ee:ff     17 characters, one separator between octets

Any of ``-``, ``:`` and ``.`` may act as a separator, and they may be mixed
within one address (``ca.11:ab-1e.ba:be``). Separators carry no value; the
address is built from the 12 hex digits alone, two nibbles per octet.
"""

from __future__ import annotations

import string

from ..models.address import MacAddress, EUI48_SIZE

ACCEPTED_LENGTHS = (12, 14, 17)
SEPARATORS = frozenset("-:.")
HEX_DIGITS = frozenset(string.hexdigits)


class ParseError(ValueError):
    """Base class for malformed address text."""

    def __eq__(self, other: object) -> bool:
        return type(self) is type(other) and self.args == other.args

    def __hash__(self) -> int:
        return hash((type(self), self.args))


class BadFormat(ParseError):
    """Digits and separators do not add up to exactly six octets."""

    def __str__(self) -> str:
        return "bad format"


class BadLength(ParseError):
    """Text length is not one of 12, 14 or 17 characters."""

    def __init__(self, length: int) -> None:
        super().__init__(length)
        self.length = length

    def __str__(self) -> str:
        return f"bad length of {self.length}"


class BadCharacter(ParseError):
    """Character is neither a hex digit nor one of ``-``, ``:``, ``.``."""

    def __init__(self, character: str, index: int) -> None:
        super().__init__(character, index)
        self.character = character
        self.index = index

    def __str__(self) -> str:
        return f"bad character '{self.character}' at index {self.index}"


def parse_address(text: str) -> MacAddress:
    """Parse a textual MAC address into its six octets.

    Args:
        text: Address in one of the accepted layouts.

    Returns:
        The parsed ``MacAddress``.

    Raises:
        BadLength: If ``text`` is not 12, 14 or 17 characters long.
        BadCharacter: On the first character that is not a hex digit or
            separator, with its index into ``text``.
        BadFormat: If the text does not hold exactly 12 hex digits.
    """
    if not isinstance(text, str):
        raise TypeError(f"MAC address must be str, got {type(text).__name__}")

    if len(text) not in ACCEPTED_LENGTHS:
        raise BadLength(len(text))

    octets = bytearray(EUI48_SIZE)
    high_nibble = True  # next digit is the high half of an octet
    offset = 0

    for index, char in enumerate(text):
        if offset >= EUI48_SIZE:
            raise BadFormat()
        if char in HEX_DIGITS:
            value = int(char, 16)
            if high_nibble:
                octets[offset] = value << 4
            else:
                octets[offset] |= value
                offset += 1
            high_nibble = not high_nibble
        elif char in SEPARATORS:
            continue
        else:
            raise BadCharacter(char, index)

    # Too few digits, e.g. "aa:bb:cc:dd:ee:f" padded out with separators
    if offset != EUI48_SIZE:
        raise BadFormat()

    return MacAddress(octets=bytes(octets))
