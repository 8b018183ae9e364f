"""
Database Models for the Forum

This module defines the SQLModel database schemas for:
- User: Registered members
- Question: Questions asked by users
- Answer: Answers to questions
- Comment: Comments attached to a question or an answer
- Vote: Up/down votes on a question or an answer

Design Decisions:
- Comments and votes are polymorphic (type + id) rather than one table per target
- answer_count / vote_count are denormalized for cheap sorting
- Indexes on the columns services allow filtering and sorting by
"""

from datetime import datetime
from typing import Optional

from sqlalchemy import DateTime, Integer, String, Text
from sqlmodel import Column, Field, SQLModel


class User(SQLModel, table=True):
    """
    Forum member.

    email is private; UserService strips it from every response.
    """
    __tablename__ = "users"

    id: Optional[int] = Field(default=None, primary_key=True)
    username: str = Field(
        sa_column=Column(String(50), nullable=False, unique=True, index=True),
        max_length=50
    )
    email: str = Field(sa_column=Column(String(320), nullable=False))
    headline: Optional[str] = Field(
        default=None,
        sa_column=Column(String(200), nullable=True)
    )
    follower_count: int = Field(default=0, sa_column=Column(Integer, nullable=False, default=0, index=True))
    created_at: datetime = Field(
        default_factory=datetime.utcnow,
        sa_column=Column(DateTime(timezone=True), nullable=False, index=True)
    )


class Question(SQLModel, table=True):
    """Question asked by a user."""
    __tablename__ = "questions"

    id: Optional[int] = Field(default=None, primary_key=True)
    user_id: int = Field(sa_column=Column(Integer, nullable=False, index=True))
    title: str = Field(sa_column=Column(String(80), nullable=False))
    content: str = Field(default="", sa_column=Column(Text, nullable=False, default=""))
    answer_count: int = Field(default=0, sa_column=Column(Integer, nullable=False, default=0, index=True))
    vote_count: int = Field(default=0, sa_column=Column(Integer, nullable=False, default=0, index=True))
    created_at: datetime = Field(
        default_factory=datetime.utcnow,
        sa_column=Column(DateTime(timezone=True), nullable=False, index=True)
    )
    updated_at: datetime = Field(
        default_factory=datetime.utcnow,
        sa_column=Column(DateTime(timezone=True), nullable=False, index=True)
    )


class Answer(SQLModel, table=True):
    """Answer to a question."""
    __tablename__ = "answers"

    id: Optional[int] = Field(default=None, primary_key=True)
    question_id: int = Field(sa_column=Column(Integer, nullable=False, index=True))
    user_id: int = Field(sa_column=Column(Integer, nullable=False, index=True))
    content: str = Field(sa_column=Column(Text, nullable=False))
    vote_count: int = Field(default=0, sa_column=Column(Integer, nullable=False, default=0, index=True))
    created_at: datetime = Field(
        default_factory=datetime.utcnow,
        sa_column=Column(DateTime(timezone=True), nullable=False, index=True)
    )


class Comment(SQLModel, table=True):
    """
    Comment on a question or an answer.

    commentable_type is 'question' or 'answer'; commentable_id points into
    the matching table.
    """
    __tablename__ = "comments"

    id: Optional[int] = Field(default=None, primary_key=True)
    commentable_type: str = Field(sa_column=Column(String(20), nullable=False, index=True))
    commentable_id: int = Field(sa_column=Column(Integer, nullable=False, index=True))
    user_id: int = Field(sa_column=Column(Integer, nullable=False, index=True))
    content: str = Field(sa_column=Column(Text, nullable=False))
    created_at: datetime = Field(
        default_factory=datetime.utcnow,
        sa_column=Column(DateTime(timezone=True), nullable=False, index=True)
    )


class Vote(SQLModel, table=True):
    """
    Up or down vote on a question or an answer.

    type is 'up' or 'down'.
    """
    __tablename__ = "votes"

    id: Optional[int] = Field(default=None, primary_key=True)
    user_id: int = Field(sa_column=Column(Integer, nullable=False, index=True))
    votable_type: str = Field(sa_column=Column(String(20), nullable=False, index=True))
    votable_id: int = Field(sa_column=Column(Integer, nullable=False, index=True))
    type: str = Field(sa_column=Column(String(10), nullable=False))
    created_at: datetime = Field(
        default_factory=datetime.utcnow,
        sa_column=Column(DateTime(timezone=True), nullable=False, index=True)
    )
