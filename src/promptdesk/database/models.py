"""Database models."""

from sqlalchemy import Boolean, Column, Float, ForeignKey, Integer, String, Text

from .base import Base


class UserRecord(Base):
    __tablename__ = "users"

    id = Column(Integer, primary_key=True, autoincrement=True)
    username = Column(String(255), unique=True, nullable=False)
    # compared verbatim at login
    password = Column(String(255), nullable=False)
    is_admin = Column(Boolean, nullable=False, default=False)


class PromptRecord(Base):
    __tablename__ = "prompts"

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(Text, nullable=False)
    provider = Column(String(50), nullable=False)
    # Legacy column, only written by the seed row
    api_key = Column(Text, nullable=True)
    model = Column(String(255), nullable=False)
    temperature = Column(Float, nullable=False)
    content = Column(Text, nullable=False)
    created_by = Column(Integer, nullable=False)


class MessageRecord(Base):
    __tablename__ = "messages"

    id = Column(Integer, primary_key=True, autoincrement=True)
    prompt_id = Column(
        Integer, ForeignKey("prompts.id", ondelete="CASCADE"), nullable=False, index=True
    )
    content = Column(Text, nullable=False)
    is_user = Column(Boolean, nullable=False)
    timestamp = Column(String(64), nullable=False)
