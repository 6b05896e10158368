from sqlalchemy import Column, String, Text

from src.database import Base


class Setting(Base):
    """Application setting stored as a key/value pair."""

    __tablename__ = "setting"

    key = Column(String(100), primary_key=True)
    value = Column(Text, nullable=True)

    def __repr__(self):
        return f"<Setting(key='{self.key}', value='{self.value}')>"
