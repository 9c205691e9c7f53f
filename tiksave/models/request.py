from pydantic import BaseModel, Field
from typing import Optional

class InfoRequest(BaseModel):
    # Presence and domain checks happen in the route so failures keep the {error} shape
    url: Optional[str] = Field(None, description="TikTok video URL")
