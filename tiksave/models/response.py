from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Serialized with camelCase keys, constructed with snake_case names"""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class Author(CamelModel):
    name: str = "Unknown"
    username: str = ""
    avatar_url: str = ""


class Stats(CamelModel):
    plays: int = 0
    likes: int = 0
    comments: int = 0
    shares: int = 0


class DisplayStrings(CamelModel):
    """Pre-formatted values for the preview card"""
    plays: str = "0"
    likes: str = "0"
    comments: str = "0"
    shares: str = "0"
    duration: str = "0:00"
    quality: str = "SD"


class VideoMetadata(CamelModel):
    """Normalized video information returned by /api/info"""
    id: str = ""
    title: str = "TikTok Video"
    author: Author = Field(default_factory=Author)
    stats: Stats = Field(default_factory=Stats)
    duration: int = 0
    thumbnail_url: str = ""
    music_url: str = ""
    music_title: str = ""
    hd_url: str = ""
    sd_url: str = ""
    is_high_definition: bool = False
    display: DisplayStrings = Field(default_factory=DisplayStrings)
    suggested_filename: str = ""


class InfoResponse(BaseModel):
    success: bool = True
    data: VideoMetadata


class ErrorResponse(BaseModel):
    error: str
