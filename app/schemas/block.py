from pydantic import BaseModel, ConfigDict, Field, PositiveInt
from datetime import datetime
from enum import Enum
from typing import Annotated, Literal, Optional, Union

class TextStyle(str, Enum):
    h1 = "h1"
    h2 = "h2"
    h3 = "h3"
    p = "p"

class Direction(str, Enum):
    up = "up"
    down = "down"

class TextPayload(BaseModel):
    """Contenu d'un block texte"""
    type: Literal["text"] = "text"
    text: str
    text_style: TextStyle

class ImagePayload(BaseModel):
    """Contenu d'un block image"""
    type: Literal["image"] = "image"
    image_src: str
    image_width: Optional[PositiveInt] = None
    image_height: Optional[PositiveInt] = None

BlockPayload = Annotated[Union[TextPayload, ImagePayload], Field(discriminator="type")]

class BlockCreate(BaseModel):
    """Créer un block, à la fin de la page ou juste après un autre block"""
    payload: BlockPayload
    insert_after_block_id: Optional[int] = None

class BlockUpdate(BaseModel):
    """Modifier le contenu d'un block, le type doit rester le même"""
    payload: BlockPayload

class BlockMove(BaseModel):
    direction: Direction

class BlockMoveResponse(BaseModel):
    moved: bool

class BlockResponse(BaseModel):
    """Block retourné"""
    id: int
    page_id: int
    type: str
    position: int
    text: Optional[str] = None
    text_style: Optional[TextStyle] = None
    image_src: Optional[str] = None
    image_width: Optional[int] = None
    image_height: Optional[int] = None
    created_at: datetime
    updated_at: Optional[datetime] = None
    
    model_config = ConfigDict(from_attributes=True)
