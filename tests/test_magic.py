"""Tests for magic packet encoding and decoding."""

import pytest

from wake_packet import create_magic_packet
from wake_packet.models.address import MacAddress
from wake_packet.protocol.address import BadCharacter, BadFormat, BadLength, parse_address
from wake_packet.protocol.magic import (
    MAGIC_PACKET_SIZE,
    REPETITIONS,
    SYNC_LENGTH,
    encode_packet,
    parse_magic_packet,
)


def test_packet_size():
    """Every magic packet is exactly 102 bytes."""
    assert MAGIC_PACKET_SIZE == 102
    assert len(create_magic_packet("ca:11:ab:1e:ba:be")) == MAGIC_PACKET_SIZE


def test_literal_packet():
    """Header, first copy and last copy for an all-0xAA address."""
    pkt = create_magic_packet("AA:aa:aa:aa:aa:aa")

    # starts with padding
    assert list(pkt[:6]) == [255, 255, 255, 255, 255, 255]
    # follows with mac
    assert list(pkt[6:12]) == [170, 170, 170, 170, 170, 170]
    # ends with mac
    assert list(pkt[102 - 6 : 102]) == [170, 170, 170, 170, 170, 170]


@pytest.mark.parametrize(
    "text",
    ["ff:aa:bb:cc:dd:ee", "de-ad-be-ef-ba-be", "ca11ab1ebabe", "aabb.ccdd.eeff"],
)
def test_every_window_holds_address(text):
    """All 16 windows after the header equal the parsed address."""
    address = parse_address(text)
    pkt = create_magic_packet(text)
    assert pkt[:SYNC_LENGTH] == b"\xff" * 6
    for i in range(REPETITIONS):
        start = SYNC_LENGTH + 6 * i
        assert pkt[start : start + 6] == address.octets


def test_encode_matches_create():
    address = MacAddress(octets=bytes([0xCA, 0x11, 0xAB, 0x1E, 0xBA, 0xBE]))
    assert encode_packet(address) == create_magic_packet("ca-11-ab-1e-ba-be")


def test_header_survives_zero_address():
    """A zero address does not disturb the 0xFF header."""
    pkt = encode_packet(MacAddress(octets=bytes(6)))
    assert pkt == b"\xff" * 6 + bytes(96)


def test_encode_rejects_raw_bytes():
    with pytest.raises(TypeError):
        encode_packet(b"\xaa" * 6)


def test_create_propagates_errors():
    """Parse errors reach the caller unchanged."""
    with pytest.raises(BadLength) as exc:
        create_magic_packet("ab:cd")
    assert exc.value == BadLength(5)

    with pytest.raises(BadCharacter) as exc:
        create_magic_packet("he.js:an:cc:dd:ee")
    assert exc.value == BadCharacter("h", 0)

    with pytest.raises(BadFormat):
        create_magic_packet("aa:aabbccddeeffaa")


def test_parse_magic_packet_recovers_address():
    pkt = create_magic_packet("ca.11:ab-1e.ba:be")
    assert parse_magic_packet(pkt) == parse_address("ca:11:ab:1e:ba:be")


def test_parse_magic_packet_wrong_size():
    pkt = create_magic_packet("ca:11:ab:1e:ba:be")
    assert parse_magic_packet(pkt[:-1]) is None
    assert parse_magic_packet(pkt + b"\x00") is None


def test_parse_magic_packet_bad_header():
    pkt = bytearray(create_magic_packet("ca:11:ab:1e:ba:be"))
    pkt[2] = 0x00
    assert parse_magic_packet(bytes(pkt)) is None


def test_parse_magic_packet_inconsistent_copies():
    """A single corrupted copy invalidates the packet."""
    pkt = bytearray(create_magic_packet("ca:11:ab:1e:ba:be"))
    pkt[-1] ^= 0x01
    assert parse_magic_packet(bytes(pkt)) is None
