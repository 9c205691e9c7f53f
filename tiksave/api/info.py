import asyncio
import httpx
from fastapi import APIRouter, Request, Depends, HTTPException
from tiksave.models.request import InfoRequest
from tiksave.models.response import InfoResponse
from tiksave.services.resolver import MetadataResolver, ProviderError
from tiksave.core.validation import SourceUrlValidator, UrlValidationResult
from tiksave.core.disconnect import ClientDisconnected, cancel_on_disconnect
from tiksave.core.logging import log_info, log_warning, log_error
from tiksave.infra.http import get_http_client
from tiksave.utils.locale import get_locale, safe_url_for_log
from tiksave.i18n import i18n
import functools

router = APIRouter()

@router.post("/api/info", response_model=InfoResponse)
async def get_video_info(
    request: Request,
    info_request: InfoRequest,
    client: httpx.AsyncClient = Depends(get_http_client),
):
    """Resolve a TikTok link to normalized video metadata"""
    
    locale = get_locale(request.headers.get("accept-language"))
    _ = functools.partial(i18n.get, locale=locale)
    
    validation_result = SourceUrlValidator.validate(info_request.url)
    
    if validation_result == UrlValidationResult.MISSING:
        raise HTTPException(status_code=400, detail=_("error.missing_url"))
    
    if validation_result == UrlValidationResult.INVALID:
        raise HTTPException(status_code=400, detail=_("error.invalid_url"))
    
    url = info_request.url.strip()
    safe_url = safe_url_for_log(url)
    log_info(request, _("log.fetching_info", url=safe_url))
    
    try:
        metadata = await cancel_on_disconnect(request, MetadataResolver.resolve(url, client))
    except ProviderError as e:
        log_warning(request, _("log.provider_rejected", url=safe_url, code=e.code, msg=e.reason))
        raise HTTPException(status_code=400, detail=_("error.provider_failed"))
    except ClientDisconnected:
        log_info(request, f"Client disconnected, provider call for {safe_url} cancelled")
        raise HTTPException(status_code=499, detail=_("error.client_closed"))
    except (httpx.TimeoutException, asyncio.TimeoutError) as e:
        log_error(request, f"Provider timeout for {safe_url}: {e!r}")
        raise HTTPException(status_code=504, detail=_("error.timeout"))
    except Exception as e:
        log_error(request, f"Video info error for {safe_url}: {e!r}")
        raise HTTPException(status_code=500, detail=_("error.info_failed"))
    
    log_info(request, _("log.info_retrieved", title=metadata.title))
    return InfoResponse(data=metadata)
