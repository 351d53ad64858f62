## Ready-made shapes for common device output
from typing import List, Optional

from pydantic import BaseModel, Field

class SSHConnection(BaseModel):
    user: str = Field(description="The SSH user")
    host: str = Field(description="The SSH host")
    ip: Optional[str] = Field(default=None, description="The IP address")
    port: Optional[int] = Field(default=None, description="The port number")

class HostSummary(BaseModel):
    hostname: str
    uptime: float = Field(description="Uptime in seconds")
    users: List[str]
