from fastapi import APIRouter

from tiksave.config.settings import config
from tiksave.i18n import i18n

router = APIRouter()


@router.get("/health")
async def health_check():
    """Lightweight health check"""
    return {
        "status": i18n.get("health.status"),
        "service": config.api.title,
        "version": config.api.version,
    }
