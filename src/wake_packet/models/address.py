"""EUI-48 hardware address model."""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar

EUI48_SIZE = 6  # octets


@dataclass(frozen=True)
class MacAddress:
    """A 6-octet hardware address, octets in transmission order."""

    SIZE: ClassVar[int] = EUI48_SIZE

    octets: bytes

    def __post_init__(self) -> None:
        if not isinstance(self.octets, (bytes, bytearray)):
            raise TypeError(
                f"MAC octets must be bytes, got {type(self.octets).__name__}"
            )
        if len(self.octets) != EUI48_SIZE:
            raise ValueError(
                f"MAC address must be {EUI48_SIZE} bytes, got {len(self.octets)}"
            )
        # Normalize bytearray so the frozen instance stays immutable
        object.__setattr__(self, "octets", bytes(self.octets))

    def __bytes__(self) -> bytes:
        return self.octets

    def __str__(self) -> str:
        return self.format()

    def __repr__(self) -> str:
        return f"MacAddress({self.format()!r})"

    def format(self, separator: str = ":", upper: bool = False) -> str:
        """Render the address as hex pairs joined by ``separator``."""
        text = self.octets.hex(separator) if separator else self.octets.hex()
        return text.upper() if upper else text

    def to_dict(self) -> dict:
        return {
            "mac": self.format(),
            "octets": list(self.octets),
            "hex": self.octets.hex(),
        }

    @classmethod
    def from_bytes(cls, data: bytes) -> MacAddress:
        return cls(octets=bytes(data))
