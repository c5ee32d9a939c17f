"""
Client IP resolution from proxy headers.

Precedence:
1. No X-Real-Ip and no X-Forwarded-For: the peer address, port removed
2. First public address in X-Forwarded-For, scanning left to right
3. X-Real-Ip as given, even if empty
"""

import logging
from typing import List, Optional

from realip.exceptions import InvalidAddressError
from realip.logging_config import TRACE
from realip.services.private_ranges import PrivateRangeTable, is_private_address

log = logging.getLogger(__name__)


def strip_port(remote_addr: str) -> str:
    """
    Return the host part of a ``host`` or ``host:port`` peer address.

    ``[::1]:8080`` gives ``::1``. A bare IPv6 literal such as ``::1`` has no
    port to strip and is returned unchanged.
    """
    if ":" not in remote_addr:
        return remote_addr

    if remote_addr.startswith("["):
        end = remote_addr.find("]")
        if end != -1:
            return remote_addr[1:end]
        return remote_addr

    host, _, _ = remote_addr.rpartition(":")
    if ":" in host:
        # More than one colon without brackets: an IPv6 literal
        return remote_addr
    return host


def split_forwarding_chain(forwarded_for: str) -> List[str]:
    """Split an X-Forwarded-For value into trimmed entries, leftmost first."""
    return [address.strip() for address in forwarded_for.split(",")]


def resolve_client_ip(
    real_ip: Optional[str],
    forwarded_for: Optional[str],
    remote_addr: str,
    table: Optional[PrivateRangeTable] = None
) -> str:
    """
    Pick the address most likely to be the original client.

    Args:
        real_ip: X-Real-Ip header value, None or "" when absent
        forwarded_for: X-Forwarded-For header value, None or "" when absent
        remote_addr: Peer address of the connection, ``host`` or ``host:port``
        table: Private range table, defaults to the process-wide one

    Returns:
        The resolved address. Empty when X-Real-Ip is empty and the
        forwarding chain has no public entry.
    """
    if not real_ip and not forwarded_for:
        remote_ip = strip_port(remote_addr)
        log.debug(f"No proxy headers, using peer address {remote_ip!r}")
        return remote_ip

    for address in split_forwarding_chain(forwarded_for or ""):
        try:
            is_private = is_private_address(address, table)
        except InvalidAddressError as e:
            log.log(TRACE, f"Skipping forwarded entry: {e}")
            continue

        if is_private:
            log.log(TRACE, f"Skipping private forwarded entry {address!r}")
            continue

        log.debug(f"Using first public forwarded entry {address!r}")
        return address

    log.debug(f"No public forwarded entry, falling back to X-Real-Ip {real_ip!r}")
    return real_ip or ""
