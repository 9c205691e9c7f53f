import asyncio
from datetime import datetime
from typing import Optional

import httpx
from pydantic import ValidationError

from tiksave.models.provider import ProviderEnvelope, ProviderVideo
from tiksave.models.response import Author, DisplayStrings, Stats, VideoMetadata
from tiksave.utils.filename import build_download_name
from tiksave.utils.formatting import format_count, format_duration
from tiksave.utils.http_headers import provider_headers

PROVIDER_ENDPOINT = "https://www.tikwm.com/api/"
PROVIDER_TIMEOUT = 15.0
DEFAULT_TITLE = "TikTok Video"
UNKNOWN_AUTHOR = "Unknown"


class ProviderError(Exception):
    """Provider answered but reported failure or returned no video"""

    def __init__(self, reason: str, code: Optional[int] = None):
        super().__init__(reason)
        self.reason = reason
        self.code = code


def normalize_video(video: ProviderVideo, now: Optional[datetime] = None) -> VideoMetadata:
    """
    Map the provider's optional fields onto VideoMetadata.
    All fallback chains live here; nothing returned is ever None.
    """
    author = video.author
    username = (author.unique_id if author else None) or ""
    name = (author.nickname if author else None) or username or UNKNOWN_AUTHOR
    music_info = video.music_info

    stats = Stats(
        plays=video.play_count or 0,
        likes=video.digg_count or 0,
        comments=video.comment_count or 0,
        shares=video.share_count or 0,
    )
    duration = video.duration or 0
    is_hd = bool(video.hdplay)

    return VideoMetadata(
        id=video.id or "",
        title=video.title or DEFAULT_TITLE,
        author=Author(
            name=name,
            username=username,
            avatar_url=(author.avatar if author else None) or "",
        ),
        stats=stats,
        duration=duration,
        thumbnail_url=video.cover or video.origin_cover or "",
        music_url=video.music or "",
        music_title=(music_info.title if music_info else None) or "",
        hd_url=video.hdplay or video.play or "",
        sd_url=video.play or video.wmplay or "",
        is_high_definition=is_hd,
        display=DisplayStrings(
            plays=format_count(stats.plays),
            likes=format_count(stats.likes),
            comments=format_count(stats.comments),
            shares=format_count(stats.shares),
            duration=format_duration(duration),
            quality="HD" if is_hd else "SD",
        ),
        suggested_filename=build_download_name(username, now),
    )


class MetadataResolver:
    """Resolve a TikTok link to VideoMetadata through the tikwm API"""

    @staticmethod
    async def fetch_envelope(url: str, client: httpx.AsyncClient) -> ProviderEnvelope:
        """
        Single outbound call to the provider.
        PROVIDER_TIMEOUT bounds the whole exchange, body included
        (asyncio.TimeoutError); httpx's own timeout only bounds each phase.
        Transport failures and non-2xx replies propagate as httpx errors.
        """
        response = await asyncio.wait_for(
            client.post(
                PROVIDER_ENDPOINT,
                params={"url": url, "hd": 1},
                headers=provider_headers(),
                timeout=PROVIDER_TIMEOUT,
            ),
            timeout=PROVIDER_TIMEOUT,
        )
        response.raise_for_status()

        try:
            return ProviderEnvelope.model_validate(response.json())
        except ValueError as e:
            # json.JSONDecodeError and pydantic.ValidationError are both ValueErrors
            reason = "malformed payload" if isinstance(e, ValidationError) else "non-JSON payload"
            raise ProviderError(reason) from e

    @staticmethod
    async def resolve(url: str, client: httpx.AsyncClient) -> VideoMetadata:
        envelope = await MetadataResolver.fetch_envelope(url, client)

        if envelope.code != 0 or envelope.data is None:
            raise ProviderError(envelope.msg or "no data", code=envelope.code)

        return normalize_video(envelope.data)
