from sqlalchemy import Column, String, Integer, Boolean, DateTime, JSON, Text
from string_analyzer.database import Base


class StringAnalysis(Base):
    __tablename__ = "string_analyses"

    # Insertion sequence, used for listing order
    seq = Column(Integer, primary_key=True, autoincrement=True)
    # SHA-256 of value, so the unique constraint also keeps values unique
    id = Column(String(64), unique=True, nullable=False, index=True)
    value = Column(Text, nullable=False)
    length = Column(Integer, nullable=False)
    is_palindrome = Column(Boolean, nullable=False)
    unique_characters = Column(Integer, nullable=False)
    word_count = Column(Integer, nullable=False)
    sha256_hash = Column(String(64), nullable=False)
    character_frequency_map = Column(JSON, nullable=False)
    created_at = Column(DateTime(timezone=True), nullable=False)
