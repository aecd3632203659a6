"""Data models for hardware addresses."""

from .address import MacAddress, EUI48_SIZE
