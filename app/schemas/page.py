from pydantic import BaseModel, ConfigDict, Field
from datetime import datetime
from typing import Optional, List
from app.schemas.block import BlockResponse

# Schemas pour les pages

class PageTitleUpdate(BaseModel):
    title: str = Field(min_length=1, max_length=256)

    model_config = ConfigDict(str_strip_whitespace=True)

class PageResponse(BaseModel):
    id: int
    slug: str
    title: str
    created_at: datetime
    updated_at: Optional[datetime] = None

    model_config = ConfigDict(from_attributes=True)

class PageWithBlocks(BaseModel):
    page: PageResponse
    blocks: List[BlockResponse] = []
