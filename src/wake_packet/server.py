"""MCP server entry point for Wake-on-LAN packet building.

Exposes address parsing and magic packet encoding as tools via the Model
Context Protocol using the official Python MCP SDK with stdio transport.
The server only computes payloads; sending them is left to the client.
"""

from __future__ import annotations

import json
import logging
from typing import Any

from mcp.server.fastmcp import FastMCP

from .protocol.address import (
    ParseError,
    ACCEPTED_LENGTHS,
    SEPARATORS,
    parse_address,
)
from .protocol.magic import (
    MAGIC_PACKET_SIZE,
    encode_packet,
    parse_magic_packet,
)

logger = logging.getLogger(__name__)

mcp = FastMCP(
    "wake-packet",
    instructions="Parse MAC addresses and build Wake-on-LAN magic packets",
)


def _error(exc: ParseError) -> dict[str, Any]:
    return {"error": str(exc), "kind": type(exc).__name__}


# ─── ADDRESS TOOLS ───────────────────────────────────────────────────

@mcp.tool()
def parse_mac(mac: str) -> dict[str, Any]:
    """Parse a MAC address and return its six octets.

    Args:
        mac: Address such as "aa:bb:cc:dd:ee:ff", "aabb.ccdd.eeff"
            or "aabbccddeeff".
    """
    try:
        address = parse_address(mac)
    except ParseError as e:
        logger.debug("Rejected MAC %r: %s", mac, e)
        return _error(e)
    return address.to_dict()


@mcp.tool()
def normalize_mac(
    mac: str, separator: str = ":", upper: bool = False
) -> dict[str, Any]:
    """Rewrite a MAC address in a single canonical layout.

    Args:
        mac: Address in any accepted layout.
        separator: One of "-", ":", "." or "" for no separator.
        upper: Use upper-case hex digits.
    """
    if separator and separator not in SEPARATORS:
        return {
            "error": f"Separator must be one of {sorted(SEPARATORS)} or empty, "
                     f"got {separator!r}",
        }
    try:
        address = parse_address(mac)
    except ParseError as e:
        logger.debug("Rejected MAC %r: %s", mac, e)
        return _error(e)
    return {"mac": address.format(separator, upper=upper)}


# ─── MAGIC PACKET TOOLS ──────────────────────────────────────────────

@mcp.tool()
def build_magic_packet(mac: str) -> dict[str, Any]:
    """Build the 102-byte Wake-on-LAN magic packet for a MAC address.

    The payload is returned hex-encoded. It is usually sent as a UDP
    broadcast datagram to port 9, which this server does not do.
    """
    try:
        address = parse_address(mac)
    except ParseError as e:
        logger.debug("Rejected MAC %r: %s", mac, e)
        return _error(e)

    packet = encode_packet(address)
    logger.info("Built magic packet for %s", address)
    return {
        "mac": str(address),
        "length": len(packet),
        "hex": packet.hex(),
    }


@mcp.tool()
def decode_magic_packet(payload_hex: str) -> dict[str, Any]:
    """Check a hex-encoded payload and report which MAC it wakes.

    Args:
        payload_hex: The packet as hex, whitespace allowed.
    """
    try:
        data = bytes.fromhex(payload_hex)
    except ValueError as e:
        return {"valid": False, "error": f"Invalid hex: {e}"}

    address = parse_magic_packet(data)
    if address is None:
        return {
            "valid": False,
            "length": len(data),
            "error": f"Not a {MAGIC_PACKET_SIZE}-byte magic packet",
        }
    return {"valid": True, "mac": str(address)}


# ─── MCP RESOURCES ───────────────────────────────────────────────────

@mcp.resource("wol://formats")
def resource_formats() -> str:
    """Accepted MAC address layouts with examples."""
    return json.dumps({
        "accepted_lengths": list(ACCEPTED_LENGTHS),
        "separators": sorted(SEPARATORS),
        "formats": [
            {"layout": "aabbccddeeff", "length": 12},
            {"layout": "aabb.ccdd.eeff", "length": 14},
            {"layout": "aa:bb:cc:dd:ee:ff", "length": 17},
            {"layout": "aa-bb-cc-dd-ee-ff", "length": 17},
            {"layout": "aa.bb.cc.dd.ee.ff", "length": 17},
        ],
        "packet_size": MAGIC_PACKET_SIZE,
    })


# ─── ENTRY POINT ─────────────────────────────────────────────────────

def main():
    """Run the MCP server with stdio transport."""
    logging.basicConfig(level=logging.INFO)
    mcp.run(transport="stdio")


if __name__ == "__main__":
    main()
