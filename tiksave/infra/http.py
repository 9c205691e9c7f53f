import logging
import httpx
from tiksave.core.state import state

logger = logging.getLogger("tiksave")

def init_http_client() -> httpx.AsyncClient:
    """Create the pooled outbound client (per-call timeouts are set by callers)"""
    if state.http_client is None or state.http_client.is_closed:
        state.http_client = httpx.AsyncClient(follow_redirects=True)
        logger.debug("Outbound HTTP client created")
    return state.http_client

def get_http_client() -> httpx.AsyncClient:
    """FastAPI dependency returning the shared outbound client"""
    return init_http_client()

async def close_http_client() -> None:
    """Close the outbound client"""
    if state.http_client:
        await state.http_client.aclose()
        state.http_client = None
        logger.debug("Outbound HTTP client closed")
