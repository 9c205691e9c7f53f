from typing import Dict

UA_CHROME = (
    "Mozilla/5.0 (Windows NT 10.0; Win64; x64) "
    "AppleWebKit/537.36 (KHTML, like Gecko) "
    "Chrome/120.0.0.0 Safari/537.36"
)

# CDNs reject media requests that do not look like they come from the site
ORIGIN_REFERER = "https://www.tiktok.com/"


def provider_headers() -> Dict[str, str]:
    """Headers for the metadata provider (it rejects requests without a UA)"""
    return {
        "User-Agent": UA_CHROME,
        "Accept": "application/json",
    }


def media_headers() -> Dict[str, str]:
    """Headers for fetching the media bytes from the origin CDN"""
    return {
        "User-Agent": UA_CHROME,
        "Accept": "*/*",
        "Accept-Encoding": "identity",
        "Referer": ORIGIN_REFERER,
    }
