"""
ipv4calc - IPv4 Address and CIDR Arithmetic

Parse IPv4 addresses and CIDR blocks, compute network and broadcast
boundaries, test membership, classify addresses and render them as
binary strings or reverse-DNS names.
"""

from ipv4calc.ip import (
    AddressError,
    InvalidAddress,
    InvalidPrefix,
    IPv4Address,
    get_address_info,
)

__version__ = "0.1.0"

__all__ = [
    "AddressError",
    "InvalidAddress",
    "InvalidPrefix",
    "IPv4Address",
    "get_address_info",
]
