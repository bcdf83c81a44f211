from typing import Annotated

from pydantic import Field

from catalog.constants import MAX_NAME_LENGTH
from catalog.schemas.base import DateStr, InputModel, PartialInputModel

NameStr = Annotated[str, Field(min_length=1, max_length=MAX_NAME_LENGTH)]
TextStr = Annotated[str, Field(min_length=1)]


class AuthorCreate(InputModel):
    """Rules for creating an author: every field is required."""

    name: NameStr
    bio: TextStr
    birth_date: DateStr


class AuthorUpdate(PartialInputModel):
    """Rules for updating an author: fields are optional but still checked."""

    name: NameStr | None = None
    bio: TextStr | None = None
    birth_date: DateStr | None = None
