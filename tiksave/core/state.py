from dataclasses import dataclass
from typing import Optional
import httpx

@dataclass
class RuntimeState:
    """Centralized runtime state"""
    http_client: Optional[httpx.AsyncClient] = None

state = RuntimeState()
