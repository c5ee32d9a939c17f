import logging

from fastapi import APIRouter, Depends, Request

from realip.config import settings
from realip.exceptions import InvalidAddressError
from realip.schemas.client_ip import ClientIPResponse
from realip.services.private_ranges import is_private_address
from realip.utils.ip_extractor import get_client_ip

log = logging.getLogger(__name__)

router = APIRouter()

@router.get("/", response_model=ClientIPResponse)
async def read_client_ip(request: Request, client_ip: str = Depends(get_client_ip)):
    """Report the resolved client IP for the calling request."""
    try:
        is_private = is_private_address(client_ip)
    except InvalidAddressError:
        is_private = None

    log.debug(f"Resolved client IP {client_ip!r} (private={is_private})")
    return ClientIPResponse(
        client_ip=client_ip,
        remote_addr=request.client.host if request.client else "",
        x_real_ip=request.headers.get(settings.real_ip_header),
        x_forwarded_for=request.headers.get(settings.forwarded_for_header),
        is_private=is_private,
    )
