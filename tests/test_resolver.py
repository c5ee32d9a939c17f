import logging

import pytest

from realip.services.private_ranges import PrivateRangeTable
from realip.services.resolver import (
    resolve_client_ip,
    split_forwarding_chain,
    strip_port,
)


@pytest.mark.parametrize("remote_addr,expected", [
    ("203.0.113.5:443", "203.0.113.5"),
    ("203.0.113.5", "203.0.113.5"),
    ("[2001:db8::1]:8080", "2001:db8::1"),
    ("2001:db8::1", "2001:db8::1"),
    ("localhost:80", "localhost"),
    ("", ""),
])
def test_strip_port(remote_addr, expected):
    assert strip_port(remote_addr) == expected


def test_split_forwarding_chain_trims_entries():
    assert split_forwarding_chain(" 10.0.0.1 ,203.0.113.9,  8.8.8.8") == [
        "10.0.0.1", "203.0.113.9", "8.8.8.8"
    ]
    assert split_forwarding_chain("") == [""]
    assert split_forwarding_chain("   ") == [""]


@pytest.mark.parametrize("real_ip,forwarded_for,remote_addr,expected", [
    # No proxy headers: peer address without port
    ("", "", "203.0.113.5:443", "203.0.113.5"),
    ("", "", "203.0.113.5", "203.0.113.5"),
    (None, None, "[::1]:8080", "::1"),
    # First public entry in the chain
    ("", "10.0.0.1, 203.0.113.9, 8.8.8.8", "1.2.3.4:80", "203.0.113.9"),
    ("198.51.100.7", "8.8.8.8, 203.0.113.9", "1.2.3.4:80", "8.8.8.8"),
    (None, "fe80::1, 2001:4860:4860::8888", "1.2.3.4:80", "2001:4860:4860::8888"),
    # Unparseable entries are skipped, not fatal
    ("", "garbage, 10.0.0.1:80, 203.0.113.9", "1.2.3.4:80", "203.0.113.9"),
    # Nothing public in the chain: X-Real-Ip as given
    ("198.51.100.7", "10.0.0.1, 192.168.1.1", "1.2.3.4:80", "198.51.100.7"),
    ("198.51.100.7", "", "1.2.3.4:80", "198.51.100.7"),
    ("198.51.100.7", None, "1.2.3.4:80", "198.51.100.7"),
    ("198.51.100.7", "   ", "1.2.3.4:80", "198.51.100.7"),
    ("10.1.1.1", "not-an-ip", "1.2.3.4:80", "10.1.1.1"),
    ("", "10.0.0.1", "1.2.3.4:80", ""),
    (None, "127.0.0.1", "1.2.3.4:80", ""),
])
def test_resolve_client_ip(real_ip, forwarded_for, remote_addr, expected):
    assert resolve_client_ip(real_ip, forwarded_for, remote_addr) == expected


def test_real_ip_only_is_not_validated():
    # X-Real-Ip is returned verbatim, even when it is not an address
    assert resolve_client_ip("proxy-says-so", "", "1.2.3.4:80") == "proxy-says-so"


def test_peer_path_does_not_consult_table():
    class ExplodingTable(PrivateRangeTable):
        def contains(self, address):
            raise AssertionError("table consulted")

    assert resolve_client_ip("", "", "10.0.0.1:80", ExplodingTable()) == "10.0.0.1"


def test_custom_table_is_used():
    table = PrivateRangeTable(["203.0.113.0/24"])
    assert resolve_client_ip("", "203.0.113.9, 10.0.0.1", "1.2.3.4:80", table) == "10.0.0.1"


def test_resolution_is_idempotent():
    args = ("198.51.100.7", "10.0.0.1, 203.0.113.9", "1.2.3.4:80")
    assert resolve_client_ip(*args) == resolve_client_ip(*args) == "203.0.113.9"


def test_skipped_entries_are_traced(caplog):
    with caplog.at_level(5, logger="realip.services.resolver"):
        resolve_client_ip("", "bogus, 10.0.0.1, 8.8.8.8", "1.2.3.4:80")

    messages = [r.getMessage() for r in caplog.records]
    assert any("bogus" in m for m in messages)
    assert any("10.0.0.1" in m for m in messages)
    assert any(r.levelno == logging.DEBUG and "8.8.8.8" in r.getMessage() for r in caplog.records)


def test_zoned_forwarded_entry_is_skipped():
    assert resolve_client_ip("", "2001:db8::1%eth0, 8.8.8.8", "1.2.3.4:80") == "8.8.8.8"
    assert resolve_client_ip("198.51.100.7", "fe80::1%eth0", "1.2.3.4:80") == "198.51.100.7"
