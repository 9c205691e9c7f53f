from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, field_validator


def _lenient_int(v: Any) -> Optional[int]:
    """Provider counters arrive as ints, numeric strings or null"""
    if v is None or isinstance(v, bool):
        return None
    if isinstance(v, (int, float)):
        return int(v)
    if isinstance(v, str) and v.strip().isdigit():
        return int(v.strip())
    return None


class ProviderModel(BaseModel):
    model_config = ConfigDict(extra="ignore", coerce_numbers_to_str=True)


class ProviderAuthor(ProviderModel):
    id: Optional[str] = None
    unique_id: Optional[str] = None
    nickname: Optional[str] = None
    avatar: Optional[str] = None


class ProviderMusicInfo(ProviderModel):
    title: Optional[str] = None
    author: Optional[str] = None
    play: Optional[str] = None


class ProviderVideo(ProviderModel):
    """tikwm `data` object; every field may be missing"""
    id: Optional[str] = None
    title: Optional[str] = None
    play: Optional[str] = None
    wmplay: Optional[str] = None
    hdplay: Optional[str] = None
    cover: Optional[str] = None
    origin_cover: Optional[str] = None
    music: Optional[str] = None
    duration: Optional[int] = None
    play_count: Optional[int] = None
    digg_count: Optional[int] = None
    comment_count: Optional[int] = None
    share_count: Optional[int] = None
    author: Optional[ProviderAuthor] = None
    music_info: Optional[ProviderMusicInfo] = None

    @field_validator('duration', 'play_count', 'digg_count', 'comment_count', 'share_count', mode='before')
    @classmethod
    def coerce_counter(cls, v):
        return _lenient_int(v)

    @field_validator('author', 'music_info', mode='before')
    @classmethod
    def drop_non_objects(cls, v):
        return v if isinstance(v, dict) else None


class ProviderEnvelope(ProviderModel):
    """Top-level provider reply: {code, msg, data}"""
    code: Optional[int] = None
    msg: Optional[str] = None
    data: Optional[ProviderVideo] = None

    @field_validator('code', mode='before')
    @classmethod
    def coerce_code(cls, v):
        return _lenient_int(v)

    @field_validator('data', mode='before')
    @classmethod
    def drop_non_object_data(cls, v):
        # {} is a present but empty video; defaults fill every field
        return v if isinstance(v, dict) else None
