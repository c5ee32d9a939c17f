"""Resolve the real client IP of an HTTP request behind reverse proxies."""

__version__ = "1.0.0"

from realip.exceptions import InvalidAddressError, RealIPError
from realip.services.private_ranges import (
    PrivateRangeTable,
    get_private_range_table,
    is_private_address,
)
from realip.services.resolver import resolve_client_ip

__all__ = [
    "__version__",
    "InvalidAddressError",
    "PrivateRangeTable",
    "RealIPError",
    "get_private_range_table",
    "is_private_address",
    "resolve_client_ip",
]
