from datetime import date

from sqlmodel import Field

from catalog.constants import MAX_NAME_LENGTH
from catalog.models.base import BaseModel


class Author(BaseModel, table=True):
    """
    SQLModel representing an author entity in the database.

    This is a clean data model without Active Record methods.
    Use AuthorRepository for all database operations.

    Attributes:
        id: Primary key identifier for the author
        name: Name of the author
        bio: Free-form biography
        birth_date: Date of birth
    """

    __tablename__ = "authors"
    __table_args__ = {"extend_existing": True}

    id: int | None = Field(default=None, primary_key=True)
    name: str = Field(max_length=MAX_NAME_LENGTH)
    bio: str
    birth_date: date
