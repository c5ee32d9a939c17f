from fastapi import APIRouter

from realip.api.v1.endpoints import client_ip

api_router = APIRouter()
api_router.include_router(client_ip.router, prefix="/client-ip", tags=["client-ip"])
