from .provider import ProviderAuthor, ProviderEnvelope, ProviderMusicInfo, ProviderVideo
from .request import InfoRequest
from .response import Author, DisplayStrings, ErrorResponse, InfoResponse, Stats, VideoMetadata

__all__ = [
    "Author",
    "DisplayStrings",
    "ErrorResponse",
    "InfoRequest",
    "InfoResponse",
    "ProviderAuthor",
    "ProviderEnvelope",
    "ProviderMusicInfo",
    "ProviderVideo",
    "Stats",
    "VideoMetadata",
]
