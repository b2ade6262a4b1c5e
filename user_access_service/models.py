"""SQLAlchemy models for the user access service.

``User`` backs the registration path (store-generated integer ids) and
``UserProfileRecord`` backs the orchestration path (caller-supplied string
ids). The two tables are deliberately separate identifier spaces.
"""

from __future__ import annotations

from typing import Optional

from sqlalchemy import Column, Integer, String
from sqlalchemy.ext.asyncio import AsyncAttrs
from sqlalchemy.orm import declarative_base


class Base(AsyncAttrs, declarative_base()):
    """Abstract base class for all ORM models of the service."""

    __abstract__ = True


class User(Base):
    """ORM model representing a registered user.

    Attributes
    ----------
    id:
        Auto-increment integer primary key generated by the store.
    username:
        Unique login name.
    password:
        Credential stored verbatim as received.
    """

    __tablename__ = "users"

    id: int = Column(Integer, primary_key=True, autoincrement=True, index=True)
    username: Optional[str] = Column(
        String(255), unique=True, index=True, nullable=False
    )
    password: Optional[str] = Column(String(255), nullable=False)

    def __repr__(self) -> str:
        return f"<User id={self.id!r} username={self.username!r}>"


class UserProfileRecord(Base):
    """Display profile keyed by a caller-supplied identifier."""

    __tablename__ = "user_profiles"

    id: str = Column(String(64), primary_key=True)
    name: str = Column(String(255), nullable=False)

    def __repr__(self) -> str:
        return f"<UserProfileRecord id={self.id!r} name={self.name!r}>"
