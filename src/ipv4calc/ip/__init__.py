"""
IPv4 Address Module

Provides the IPv4Address value type with network arithmetic,
classification and text conversions.
"""

from ipv4calc.ip.core import (
    AddressError,
    AddressInfo,
    InvalidAddress,
    InvalidPrefix,
    IPv4Address,
    CLASS_A,
    CLASS_B,
    CLASS_C,
    LINK_LOCAL,
    LOOPBACK,
    MULTICAST,
    get_address_info,
)

__all__ = [
    "AddressError",
    "AddressInfo",
    "InvalidAddress",
    "InvalidPrefix",
    "IPv4Address",
    "CLASS_A",
    "CLASS_B",
    "CLASS_C",
    "LINK_LOCAL",
    "LOOPBACK",
    "MULTICAST",
    "get_address_info",
]
