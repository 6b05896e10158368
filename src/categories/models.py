from sqlalchemy import Boolean, Column, DateTime, Integer, String, Text
from sqlalchemy.orm import relationship

from src.database import Base, utcnow


class Category(Base):
    """Category model for database."""

    __tablename__ = "category"

    id = Column(Integer, primary_key=True, index=True, autoincrement=True)
    name = Column(String(100), nullable=False)
    emoji = Column(String(16), nullable=False, default="📦")
    description = Column(Text, nullable=True)
    # Exactly one seeded row carries this flag; it cannot be deleted
    is_default = Column(Boolean, nullable=False, default=False)
    created_at = Column(DateTime, nullable=False, default=utcnow)
    updated_at = Column(DateTime, nullable=False, default=utcnow, onupdate=utcnow)

    # Relationship with Words (one-to-many)
    words = relationship(
        "Word",
        back_populates="category",
        cascade="all, delete-orphan",
        passive_deletes=True,
    )

    def __repr__(self):
        return f"<Category(id={self.id}, name='{self.name}', is_default={self.is_default})>"
