from datetime import datetime
from typing import List, Optional
from pydantic import Field
from app.schemas.base import CamelModel


class TutorMessageResponse(CamelModel):
    id: int
    role: str
    content: str
    created_at: datetime


class TutorThreadResponse(CamelModel):
    thread_id: Optional[int] = None
    messages: List[TutorMessageResponse] = Field(default_factory=list)
