# catalog/models/category.py
"""Category model - Groups videos by type (Movies, Series, Documentaries, etc)"""
from sqlalchemy import Column, String, Text, Boolean
from sqlalchemy.orm import relationship
from ..database import Base
from .mixins import UUIDPrimaryKeyMixin, TimestampMixin, SoftDeleteMixin


class Category(UUIDPrimaryKeyMixin, TimestampMixin, SoftDeleteMixin, Base):
    __tablename__ = "categories"

    name = Column(String(255), nullable=False, index=True)
    description = Column(Text, nullable=True)
    is_active = Column(Boolean, default=True, nullable=False, index=True)

    # Relationships
    videos = relationship("Video", secondary="category_video", back_populates="categories")

    def __repr__(self):
        return f"<Category(id={self.id}, name={self.name})>"
