"""IP address extraction from HTTP requests with reverse proxy support."""

import warnings

from fastapi import Request

from realip.config import settings
from realip.services.resolver import resolve_client_ip, strip_port


def get_client_ip(request: Request) -> str:
    """
    Extract real client IP from request, handling reverse proxy headers.

    Order of precedence:
    1. request.client.host when neither proxy header is set
    2. First public address in X-Forwarded-For
    3. X-Real-IP (even if empty)

    Args:
        request: FastAPI Request object

    Returns:
        Client IP address as string

    Note:
        Header content is trusted as-is. Set TRUST_PROXY_HEADERS=false when
        the app is reachable without a proxy that overwrites these headers.
    """
    remote_addr = request.client.host if request.client else ""

    if not settings.trust_proxy_headers:
        return strip_port(remote_addr)

    return resolve_client_ip(
        request.headers.get(settings.real_ip_header),
        request.headers.get(settings.forwarded_for_header),
        remote_addr,
    )


def real_ip(request: Request) -> str:
    """Deprecated, use get_client_ip instead."""
    warnings.warn(
        "real_ip() is deprecated, use get_client_ip() instead",
        DeprecationWarning,
        stacklevel=2,
    )
    return get_client_ip(request)
