from sqlalchemy import CheckConstraint, Column, DateTime, ForeignKey, Integer, String, UniqueConstraint
from sqlalchemy.orm import relationship

from src.database import Base, utcnow


class Word(Base):
    """Word model for database."""

    __tablename__ = "word"
    __table_args__ = (
        CheckConstraint("letter_count BETWEEN 4 AND 10", name="letter_count_range"),
        UniqueConstraint("category_id", "word", name="word_category_id_word_key"),
    )

    id = Column(Integer, primary_key=True, index=True, autoincrement=True)
    category_id = Column(Integer, ForeignKey("category.id", ondelete="CASCADE"), nullable=False, index=True)
    word = Column(String(20), nullable=False)
    # Character count of `word`, stored so buckets are queryable
    letter_count = Column(Integer, nullable=False, index=True)
    hint = Column(String(500), nullable=True)
    created_at = Column(DateTime, nullable=False, default=utcnow)

    # Relationship with Category (many-to-one)
    category = relationship("Category", back_populates="words")

    def __repr__(self):
        return f"<Word(id={self.id}, word='{self.word}', letter_count={self.letter_count}, category_id={self.category_id})>"
