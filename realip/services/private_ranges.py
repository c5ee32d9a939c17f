"""Classification of addresses against the private/reserved CIDR table."""

import ipaddress
from dataclasses import dataclass
from typing import Optional, Tuple, Union

from realip.constants.private_ranges import PRIVATE_CIDR_BLOCKS
from realip.exceptions import InvalidAddressError

IPNetwork = Union[ipaddress.IPv4Network, ipaddress.IPv6Network]


@dataclass(frozen=True)
class PrivateRangeTable:
    """Immutable set of CIDR blocks checked in declaration order."""

    networks: Tuple[IPNetwork, ...] = PRIVATE_CIDR_BLOCKS

    def __post_init__(self):
        # Accepts CIDR literals or network objects
        networks = tuple(ipaddress.ip_network(block) for block in self.networks)
        object.__setattr__(self, "networks", networks)

    def __len__(self) -> int:
        return len(self.networks)

    def contains(self, address: str) -> bool:
        """
        Return True if ``address`` falls inside any block of the table.

        Args:
            address: IPv4 dotted-decimal or IPv6 colon-hex text, without a port

        Returns:
            True on the first matching block, False if none match

        Raises:
            InvalidAddressError: ``address`` is not a valid IP address
        """
        try:
            ip = ipaddress.ip_address(address)
        except ValueError:
            raise InvalidAddressError(address) from None

        # Zone identifiers (fe80::1%eth0) are not plain addresses
        if getattr(ip, "scope_id", None):
            raise InvalidAddressError(address)

        # ::ffff:a.b.c.d is checked against the IPv4 blocks
        if ip.version == 6 and ip.ipv4_mapped is not None:
            ip = ip.ipv4_mapped

        for network in self.networks:
            if ip.version == network.version and ip in network:
                return True
        return False


# Built once at import, shared read-only by every caller
DEFAULT_TABLE = PrivateRangeTable(PRIVATE_CIDR_BLOCKS)


def get_private_range_table() -> PrivateRangeTable:
    """Process-wide default table."""
    return DEFAULT_TABLE


def is_private_address(address: str, table: Optional[PrivateRangeTable] = None) -> bool:
    """Check if ``address`` is a loopback, private or link-local address."""
    if table is None:
        table = DEFAULT_TABLE
    return table.contains(address)
