from .filename import attachment_disposition, build_download_name, sanitize_download_name
from .formatting import format_count, format_duration

__all__ = [
    "attachment_disposition",
    "build_download_name",
    "format_count",
    "format_duration",
    "sanitize_download_name",
]
