from datetime import date
from typing import Annotated

from pydantic import BaseModel, BeforeValidator, Field

from catalog.constants import MAX_ID
from catalog.schemas.author import NameStr, TextStr
from catalog.schemas.base import DateStr, InputModel, PartialInputModel, reject_bool

AuthorId = Annotated[int, BeforeValidator(reject_bool), Field(ge=1, le=MAX_ID)]


class BookCreate(InputModel):
    """Rules for creating a book: every field is required."""

    author_id: AuthorId
    title: NameStr
    description: TextStr
    publish_date: DateStr


class BookUpdate(PartialInputModel):
    """Rules for updating a book: fields are optional but still checked."""

    author_id: AuthorId | None = None
    title: NameStr | None = None
    description: TextStr | None = None
    publish_date: DateStr | None = None


class AuthorBookRead(BaseModel):  # type: ignore[misc]
    """A book row joined with the name of its author."""

    id: int
    author_id: int
    title: str
    description: str
    publish_date: date
    author_name: str
