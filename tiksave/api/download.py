import httpx
from typing import Optional
from fastapi import APIRouter, Request, Depends, HTTPException, Query
from fastapi.responses import StreamingResponse
from tiksave.services.proxy import DownloadProxy, UpstreamError
from tiksave.core.validation import MediaUrlValidator, UrlValidationResult
from tiksave.core.logging import log_info, log_error
from tiksave.infra.http import get_http_client
from tiksave.utils.filename import sanitize_download_name
from tiksave.utils.locale import get_locale, safe_url_for_log
from tiksave.i18n import i18n
import functools

router = APIRouter()

@router.get("/api/download")
async def download_video(
    request: Request,
    url: Optional[str] = Query(None, description="Direct media URL"),
    filename: Optional[str] = Query(None, description="Base name for the saved file"),
    client: httpx.AsyncClient = Depends(get_http_client),
):
    """Stream a media file back to the caller as an .mp4 attachment"""
    
    locale = get_locale(request.headers.get("accept-language"))
    _ = functools.partial(i18n.get, locale=locale)
    
    validation_result = MediaUrlValidator.validate(url)
    if validation_result == UrlValidationResult.MISSING:
        raise HTTPException(status_code=400, detail=_("error.missing_download_url"))
    if validation_result == UrlValidationResult.INVALID:
        raise HTTPException(status_code=400, detail=_("error.invalid_download_url"))
    
    safe_url = safe_url_for_log(url)
    log_info(request, _("log.starting_download", url=safe_url, filename=sanitize_download_name(filename)))
    
    try:
        generator, headers = await DownloadProxy.open(url, filename, client)
    except UpstreamError as e:
        log_error(request, f"Download upstream error for {safe_url}: HTTP {e.status_code}")
        raise HTTPException(status_code=500, detail=_("error.download_failed"))
    except Exception as e:
        log_error(request, f"Download error for {safe_url}: {e!r}")
        raise HTTPException(status_code=500, detail=_("error.download_failed"))
    
    return StreamingResponse(
        generator,
        media_type=headers["Content-Type"],
        headers=headers
    )
