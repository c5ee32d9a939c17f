from typing import Optional
from pydantic import BaseModel, Field

class ClientIPResponse(BaseModel):
    """Resolved client address together with the inputs it came from."""
    client_ip: str = Field(..., description="Resolved client address, may be empty")
    remote_addr: str = Field(..., description="Peer address of the connection")
    x_real_ip: Optional[str] = Field(None, description="X-Real-Ip header as received")
    x_forwarded_for: Optional[str] = Field(None, description="X-Forwarded-For header as received")
    is_private: Optional[bool] = Field(None, description="Whether client_ip is private, None if it does not parse")
