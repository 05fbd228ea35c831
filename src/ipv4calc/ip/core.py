"""
Core IPv4 address and CIDR arithmetic.
"""

import logging
import random
import time
from dataclasses import dataclass
from functools import total_ordering

from netaddr import AddrFormatError, IPAddress, IPNetwork, INET_PTON, valid_ipv4

logger = logging.getLogger(__name__)

MAX_PREFIX = 32
MAX_UINT32 = 0xFFFFFFFF


class AddressError(ValueError):
    """Base exception for invalid address input."""
    pass


class InvalidAddress(AddressError):
    """Text is not a valid dotted-decimal IPv4 address."""
    pass


class InvalidPrefix(AddressError):
    """Prefix length is not an integer in 0-32."""
    pass


def validate_prefix(prefix: int) -> bool:
    """Check that a prefix length is within 0-32."""
    return isinstance(prefix, int) and not isinstance(prefix, bool) and 0 <= prefix <= MAX_PREFIX


def _split_cidr(text: str) -> tuple[str, int]:
    """Split "a.b.c.d/p" into address text and prefix length."""
    address, sep, suffix = text.partition("/")
    if not sep:
        return address, MAX_PREFIX

    if not (suffix.isascii() and suffix.isdigit()):
        raise InvalidPrefix(f"prefix must be 0-32, got {suffix!r}")

    prefix = int(suffix, 10)
    if not validate_prefix(prefix):
        raise InvalidPrefix(f"prefix must be 0-32, got {prefix}")

    return address, prefix


@total_ordering
@dataclass(frozen=True, eq=False)
class IPv4Address:
    """An IPv4 address together with the prefix length of its network.

    Equality, hashing and ordering only look at the 32-bit address; the
    prefix is carried along by every arithmetic operation.
    """

    octets: tuple[int, int, int, int]
    prefix: int = MAX_PREFIX

    def __post_init__(self):
        octets = tuple(self.octets)
        if len(octets) != 4 or not all(
            isinstance(b, int) and not isinstance(b, bool) and 0 <= b <= 255 for b in octets
        ):
            raise InvalidAddress(f"invalid IPv4 octets: {self.octets!r}")
        if not validate_prefix(self.prefix):
            raise InvalidPrefix(f"prefix must be 0-32, got {self.prefix!r}")
        object.__setattr__(self, "octets", octets)

    @classmethod
    def parse(cls, text: str) -> "IPv4Address":
        """Parse "a.b.c.d" or "a.b.c.d/p". Without a suffix the prefix is 32."""
        if not isinstance(text, str):
            raise InvalidAddress(f"expected a string, got {type(text).__name__}")

        address, prefix = _split_cidr(text)

        message = f"{address!r} is not a valid IPv4 address"
        if not address:
            raise InvalidAddress(message)

        # inet_pton raises on NUL bytes and unencodable characters
        try:
            valid = valid_ipv4(address, flags=INET_PTON)
            n = int(IPAddress(address, 4, flags=INET_PTON)) if valid else None
        except (AddrFormatError, ValueError) as e:
            raise InvalidAddress(message) from e
        if not valid:
            raise InvalidAddress(message)

        logger.debug(f"Parsed {text!r} as {n:#010x}/{prefix}")
        return cls.from_uint32(n, prefix)

    @classmethod
    def from_uint32(cls, n: int, prefix: int = MAX_PREFIX) -> "IPv4Address":
        """Build an address from a 32-bit unsigned integer, most significant byte first."""
        if not validate_prefix(prefix):
            raise InvalidPrefix(f"prefix must be 0-32, got {prefix!r}")
        if not 0 <= n <= MAX_UINT32:
            raise InvalidAddress(f"{n} does not fit in 32 bits")

        return cls((n >> 24 & 0xFF, n >> 16 & 0xFF, n >> 8 & 0xFF, n & 0xFF), prefix)

    # Conversions

    def to_uint32(self) -> int:
        """Pack the octets into an unsigned 32-bit integer."""
        n = 0
        for b in self.octets:
            n = (n << 8) | b
        return n

    def __int__(self) -> int:
        return self.to_uint32()

    def __str__(self) -> str:
        return ".".join(str(b) for b in self.octets)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}.parse({self.with_prefix!r})"

    @property
    def with_prefix(self) -> str:
        """Address in CIDR notation, e.g. 192.168.0.1/24."""
        return f"{self}/{self.prefix}"

    def bits(self) -> str:
        return "".join(f"{b:08b}" for b in self.octets)

    def to_bytes(self) -> bytes:
        return bytes(self.octets)

    def __bytes__(self) -> bytes:
        return self.to_bytes()

    def reverse_dns_name(self) -> str:
        """Name used for PTR lookups, e.g. 1.0.0.127.in-addr.arpa."""
        return ".".join(str(b) for b in reversed(self.octets)) + ".in-addr.arpa"

    def to_netaddr(self) -> IPAddress:
        return IPAddress(self.to_uint32(), 4)

    def to_network(self) -> IPNetwork:
        """The enclosing block as a netaddr network (host bits cleared)."""
        return IPNetwork(self.network().with_prefix)

    # Comparison

    def __eq__(self, other):
        if not isinstance(other, IPv4Address):
            return NotImplemented
        return self.to_uint32() == other.to_uint32()

    def __lt__(self, other):
        if not isinstance(other, IPv4Address):
            return NotImplemented
        return self.to_uint32() < other.to_uint32()

    def __hash__(self):
        return hash(self.to_uint32())

    # Network arithmetic

    def _mask(self) -> int:
        # shifting by 32 at prefix 0 leaves nothing inside 32 bits
        return (MAX_UINT32 << (MAX_PREFIX - self.prefix)) & MAX_UINT32

    def _hostmask(self) -> int:
        return (1 << (MAX_PREFIX - self.prefix)) - 1

    def network(self) -> "IPv4Address":
        """First address of the block (host bits cleared)."""
        return self.from_uint32(self.to_uint32() & self._mask(), self.prefix)

    def broadcast(self) -> "IPv4Address":
        """Last address of the block (host bits set)."""
        return self.from_uint32(self.to_uint32() | self._hostmask(), self.prefix)

    def netmask(self) -> str:
        return str(self.from_uint32(self._mask()))

    def next(self) -> "IPv4Address | None":
        """The following address, or None at the end of the block."""
        n = self.to_uint32()
        if n >= self.broadcast().to_uint32():
            return None
        return self.from_uint32(n + 1, self.prefix)

    def prev(self) -> "IPv4Address | None":
        """The preceding address, or None at the start of the block."""
        n = self.to_uint32()
        if n <= self.network().to_uint32():
            return None
        return self.from_uint32(n - 1, self.prefix)

    def size(self) -> int:
        """Number of addresses in the block, 2**32 for /0."""
        return 1 << (MAX_PREFIX - self.prefix)

    def contains(self, other: "IPv4Address") -> bool:
        n = other.to_uint32()
        return self.network().to_uint32() <= n <= self.broadcast().to_uint32()

    def __contains__(self, other) -> bool:
        if isinstance(other, str):
            other = self.parse(other)
        elif not isinstance(other, IPv4Address):
            raise TypeError(f"expected IPv4Address or str, got {type(other).__name__}")
        return self.contains(other)

    def sample(self, rng: random.Random | None = None) -> "IPv4Address":
        """Pick a random address from the block, excluding the broadcast address.

        The default generator is seeded from the current time, so results are
        not reproducible. Not suitable for anything security related.
        """
        size = self.size()
        if size <= 1:
            raise ValueError(f"cannot sample from single-address block {self.with_prefix}")

        if rng is None:
            rng = random.Random(time.time_ns())

        offset = rng.randrange(size - 1)
        return self.from_uint32(self.network().to_uint32() + offset, self.prefix)

    # Classification

    def is_class_a(self) -> bool:
        return CLASS_A.contains(self)

    def is_class_b(self) -> bool:
        return CLASS_B.contains(self)

    def is_class_c(self) -> bool:
        return CLASS_C.contains(self)

    def is_multicast(self) -> bool:
        return MULTICAST.contains(self)

    def is_loopback(self) -> bool:
        return LOOPBACK.contains(self)

    def is_link_local(self) -> bool:
        return LINK_LOCAL.contains(self)

    def is_private(self) -> bool:
        """Check membership in 10.0.0.0/8, 172.16.0.0/12 or 192.168.0.0/16."""
        return any(r.contains(self) for r in PRIVATE_RANGES)

    def class_name(self) -> str:
        """Return "A", "B" or "C", or an empty string when none match."""
        for name, block in CLASS_RANGES:
            if block.contains(self):
                return name
        return ""


CLASS_A = IPv4Address.parse("10.0.0.0/8")
CLASS_B = IPv4Address.parse("172.16.0.0/12")
CLASS_C = IPv4Address.parse("192.168.0.0/16")
MULTICAST = IPv4Address.parse("224.0.0.0/4")
LOOPBACK = IPv4Address.parse("127.0.0.0/8")
LINK_LOCAL = IPv4Address.parse("169.254.0.0/16")

PRIVATE_RANGES = (CLASS_A, CLASS_B, CLASS_C)

CLASS_RANGES = (
    ("A", CLASS_A),
    ("B", CLASS_B),
    ("C", CLASS_C),
)


@dataclass
class AddressInfo:
    """Summary of an IPv4 address and its block."""
    address: str
    cidr: str
    prefix_length: int
    netmask: str
    network: str
    broadcast: str
    num_addresses: int
    class_name: str
    bits: str
    reverse_dns: str
    is_private: bool
    is_loopback: bool
    is_multicast: bool
    is_link_local: bool
    first_host: str | None = None
    last_host: str | None = None


def get_address_info(text: str) -> AddressInfo:
    """Parse an address or CIDR and collect everything worth displaying."""
    addr = IPv4Address.parse(text)

    first = addr.network().next()
    last = addr.broadcast().prev()

    return AddressInfo(
        address=str(addr),
        cidr=addr.with_prefix,
        prefix_length=addr.prefix,
        netmask=addr.netmask(),
        network=str(addr.network()),
        broadcast=str(addr.broadcast()),
        num_addresses=addr.size(),
        class_name=addr.class_name(),
        bits=addr.bits(),
        reverse_dns=addr.reverse_dns_name(),
        is_private=addr.is_private(),
        is_loopback=addr.is_loopback(),
        is_multicast=addr.is_multicast(),
        is_link_local=addr.is_link_local(),
        first_host=str(first) if first is not None else None,
        last_host=str(last) if last is not None else None,
    )
