import os
from fastapi import APIRouter, HTTPException
from fastapi.responses import FileResponse
from tiksave.config.settings import config
from tiksave.i18n import i18n

BUNDLED_STATIC_DIR = os.path.join(os.path.dirname(os.path.dirname(__file__)), "static")
ENTRY_DOCUMENT = "index.html"

router = APIRouter()

def static_root() -> str:
    return os.path.realpath(config.api.static_dir or BUNDLED_STATIC_DIR)

def resolve_static_path(path: str) -> str:
    """Requested asset inside the static root, or the entry document"""
    root = static_root()
    if path:
        candidate = os.path.realpath(os.path.join(root, path))
        if candidate.startswith(root + os.sep) and os.path.isfile(candidate):
            return candidate
    return os.path.join(root, ENTRY_DOCUMENT)

@router.get("/{path:path}", include_in_schema=False)
async def serve_static(path: str):
    """Serve static assets; any unknown path falls back to the entry document"""
    target = resolve_static_path(path)
    if not os.path.isfile(target):
        raise HTTPException(status_code=404, detail=i18n.get("error.not_found"))
    return FileResponse(target)
