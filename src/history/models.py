from sqlalchemy import Column, DateTime, ForeignKey, Integer, String
from sqlalchemy.orm import relationship

from src.database import Base, utcnow


class GameHistory(Base):
    """A finished game. Immutable once recorded."""

    __tablename__ = "game_history"

    id = Column(Integer, primary_key=True, index=True, autoincrement=True)
    # Cleared when the category is deleted; category_name keeps the snapshot
    category_id = Column(Integer, ForeignKey("category.id", ondelete="SET NULL"), nullable=True, index=True)
    category_name = Column(String(100), nullable=False)
    game_mode = Column(String(10), nullable=False)  # "single", "multi", "team"
    played_at = Column(DateTime, nullable=False, index=True)
    total_time_seconds = Column(Integer, nullable=True)
    created_at = Column(DateTime, nullable=False, default=utcnow)

    participants = relationship(
        "GameParticipant",
        back_populates="game_history",
        cascade="all, delete-orphan",
        passive_deletes=True,
        order_by="GameParticipant.id",
    )

    def __repr__(self):
        return f"<GameHistory(id={self.id}, category_name='{self.category_name}', game_mode='{self.game_mode}')>"


class GameParticipant(Base):
    """A player or team of a recorded game."""

    __tablename__ = "game_participant"

    id = Column(Integer, primary_key=True, index=True, autoincrement=True)
    game_history_id = Column(
        Integer, ForeignKey("game_history.id", ondelete="CASCADE"), nullable=False, index=True
    )
    participant_name = Column(String(100), nullable=False)
    participant_type = Column(String(10), nullable=False)  # "player" or "team"
    score = Column(Integer, nullable=False, default=0)
    words_found = Column(Integer, nullable=False, default=0)
    words_skipped = Column(Integer, nullable=False, default=0)
    letters_revealed = Column(Integer, nullable=False, default=0)
    rank = Column(Integer, nullable=True)
    created_at = Column(DateTime, nullable=False, default=utcnow)

    game_history = relationship("GameHistory", back_populates="participants")
    word_results = relationship(
        "GameWordResult",
        back_populates="participant",
        cascade="all, delete-orphan",
        passive_deletes=True,
        order_by="GameWordResult.id",
    )

    def __repr__(self):
        return f"<GameParticipant(id={self.id}, name='{self.participant_name}', score={self.score})>"


class GameWordResult(Base):
    """Outcome of one word for one participant."""

    __tablename__ = "game_word_result"

    id = Column(Integer, primary_key=True, index=True, autoincrement=True)
    # Direct reference for range queries without joining participants
    game_history_id = Column(
        Integer, ForeignKey("game_history.id", ondelete="CASCADE"), nullable=False, index=True
    )
    participant_id = Column(
        Integer, ForeignKey("game_participant.id", ondelete="CASCADE"), nullable=False, index=True
    )
    word = Column(String(20), nullable=False)
    word_hint = Column(String(500), nullable=True)
    result = Column(String(10), nullable=False)  # "found", "skipped", "timeout"
    points_earned = Column(Integer, nullable=False, default=0)
    letters_used = Column(Integer, nullable=False, default=0)
    created_at = Column(DateTime, nullable=False, default=utcnow)

    participant = relationship("GameParticipant", back_populates="word_results")

    def __repr__(self):
        return f"<GameWordResult(id={self.id}, word='{self.word}', result='{self.result}')>"
