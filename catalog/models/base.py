"""
Base model for all database tables with async relationship support.

This module provides the BaseModel class that all SQLModel table models
should inherit from. It includes SQLAlchemy's AsyncAttrs mixin to enable
proper handling of lazy-loaded attributes in async contexts.
"""

from sqlalchemy.ext.asyncio import AsyncAttrs
from sqlmodel import SQLModel


class BaseModel(SQLModel, AsyncAttrs):  # type: ignore[misc]
    """
    Base model for all database tables with async relationship support.

    All table models in the application inherit from this class so that
    they share one metadata object and consistent async behavior.

    Example:
        class Author(BaseModel, table=True):
            id: int | None = Field(default=None, primary_key=True)
            name: str
    """

    pass
