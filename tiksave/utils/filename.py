import re
from datetime import datetime
from typing import Optional

FALLBACK_BASE_NAME = "tiktok_video"
DOWNLOAD_EXTENSION = "mp4"
SUGGESTED_SUFFIX = "tiksave"

_UNSAFE_CHARS = re.compile(r"[^A-Za-z0-9_-]")


def sanitize_download_name(name: Optional[str]) -> str:
    """
    Reduce an untrusted base name to [A-Za-z0-9_-].
    Every other character becomes '_', so quotes, CR/LF and path
    separators can never reach the Content-Disposition header.
    """
    if not name:
        return FALLBACK_BASE_NAME
    return _UNSAFE_CHARS.sub("_", name)


def attachment_disposition(name: Optional[str]) -> str:
    """Content-Disposition value for a proxied download"""
    return f'attachment; filename="{sanitize_download_name(name)}.{DOWNLOAD_EXTENSION}"'


def build_download_name(username: Optional[str], when: Optional[datetime] = None) -> str:
    """Suggested base name: <username>_<YYYYMMDD_HHMMSS>_tiksave"""
    when = when or datetime.now()
    return f"{username or 'unknown'}_{when:%Y%m%d_%H%M%S}_{SUGGESTED_SUFFIX}"
