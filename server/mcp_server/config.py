import os
from dataclasses import dataclass


@dataclass
class MCPConfig:
    server_url: str = os.getenv("AE_SERVER_URL", "http://localhost:8000")
    transport: str = os.getenv("AE_TRANSPORT", "stdio")  # stdio | sse
    sse_port: int = int(os.getenv("AE_SSE_PORT", "3000"))
    timeout: float = float(os.getenv("AE_TIMEOUT", "10"))


config = MCPConfig()
