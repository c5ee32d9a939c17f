"""Exceptions raised by the realip package."""


class RealIPError(Exception):
    """Base class for realip errors."""


class InvalidAddressError(RealIPError, ValueError):
    """Raised when a string cannot be parsed as an IP address."""

    def __init__(self, address: str):
        self.address = address
        super().__init__(f"address is not valid: {address!r}")
