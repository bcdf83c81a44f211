from datetime import date

from sqlmodel import Field

from catalog.constants import MAX_NAME_LENGTH
from catalog.models.base import BaseModel


class Book(BaseModel, table=True):
    """
    SQLModel representing a book entity in the database.

    ``author_id`` points at ``authors.id`` but no foreign key constraint is
    declared: a book may reference an author that does not exist, and
    deleting an author leaves its books in place.

    Attributes:
        id: Primary key identifier for the book
        author_id: Identifier of the author who wrote the book
        title: Title of the book
        description: Free-form description
        publish_date: Publication date
    """

    __tablename__ = "books"
    __table_args__ = {"extend_existing": True}

    id: int | None = Field(default=None, primary_key=True)
    author_id: int = Field(index=True)
    title: str = Field(max_length=MAX_NAME_LENGTH)
    description: str
    publish_date: date
