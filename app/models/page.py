"""Page model"""

from sqlalchemy import Column, Integer, String, DateTime
from datetime import datetime
from app.core.database import Base


class Page(Base):
    __tablename__ = "pages"
    
    id = Column(Integer, primary_key=True, index=True)
    slug = Column(String(128), unique=True, nullable=False, index=True)
    title = Column(String(256), nullable=False)
    
    created_at = Column(DateTime, default=datetime.utcnow, nullable=False)
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)
