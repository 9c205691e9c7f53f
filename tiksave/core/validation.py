import re
from enum import Enum, auto
from typing import Optional
from urllib.parse import urlparse

SOURCE_URL_PATTERN = re.compile(r"tiktok\.com|vm\.tiktok\.com|vt\.tiktok\.com", re.IGNORECASE)
MEDIA_SCHEMES = ("http", "https")


class UrlValidationResult(Enum):
    """URL validation result without throwing exceptions"""
    OK = auto()
    MISSING = auto()
    INVALID = auto()


class SourceUrlValidator:
    """Check that a pasted link points at a known short-video domain."""

    @staticmethod
    def validate(url: Optional[str]) -> UrlValidationResult:
        if not url or not url.strip():
            return UrlValidationResult.MISSING

        if not SOURCE_URL_PATTERN.search(url):
            return UrlValidationResult.INVALID

        return UrlValidationResult.OK


class MediaUrlValidator:
    """
    Check a direct media URL before proxying it.
    Only absolute http(s) URLs are forwarded upstream.
    """

    @staticmethod
    def validate(url: Optional[str]) -> UrlValidationResult:
        if not url:
            return UrlValidationResult.MISSING

        try:
            parsed = urlparse(url)
        except ValueError:
            return UrlValidationResult.INVALID

        if parsed.scheme.lower() not in MEDIA_SCHEMES or not parsed.hostname:
            return UrlValidationResult.INVALID

        return UrlValidationResult.OK
