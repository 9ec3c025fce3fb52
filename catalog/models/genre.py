# catalog/models/genre.py
"""Genre model for videos"""
from sqlalchemy import Column, String, Boolean
from sqlalchemy.orm import relationship
from ..database import Base
from .mixins import UUIDPrimaryKeyMixin, TimestampMixin, SoftDeleteMixin


class Genre(UUIDPrimaryKeyMixin, TimestampMixin, SoftDeleteMixin, Base):
    __tablename__ = "genres"

    name = Column(String(255), nullable=False, index=True)

    # Status
    is_active = Column(Boolean, default=True, nullable=False, index=True)

    # Relationships
    videos = relationship("Video", secondary="genre_video", back_populates="genres")

    def __repr__(self):
        return f"<Genre(id={self.id}, name={self.name})>"
