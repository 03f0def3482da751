from sqlalchemy import BigInteger, Column, Integer, String, Text, DateTime, ForeignKey, Index, CheckConstraint
from datetime import datetime
from app.core.database import Base


class Block(Base):
    __tablename__ = "blocks"
    __table_args__ = (
        Index("blocks_page_id_idx", "page_id"),
        # une seule position par page
        Index("blocks_page_position_idx", "page_id", "position", unique=True),
        CheckConstraint("type IN ('text', 'image')", name="ck_block_type"),
        CheckConstraint("text_style IS NULL OR text_style IN ('h1', 'h2', 'h3', 'p')", name="ck_block_text_style"),
    )
    
    id = Column(Integer, primary_key=True, index=True)
    page_id = Column(Integer, ForeignKey("pages.id", ondelete="CASCADE"), nullable=False)
    type = Column(String, nullable=False)
    position = Column(BigInteger, nullable=False)  # position dans la page, pas forcément contiguë

    # text
    text = Column(Text, nullable=True)
    text_style = Column(String, nullable=True)

    # image
    image_src = Column(Text, nullable=True)
    image_width = Column(Integer, nullable=True)
    image_height = Column(Integer, nullable=True)

    created_at = Column(DateTime, default=datetime.utcnow, nullable=False)
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)
