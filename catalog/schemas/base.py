from datetime import date
from typing import Annotated, Any

from pydantic import BaseModel, BeforeValidator, ConfigDict, field_validator
from pydantic_core import PydanticCustomError


def require_date_string(value: Any) -> Any:
    """
    Accept only textual dates such as ``"2000-12-12"``.

    Numbers, booleans and digit-only strings would otherwise be read as
    Unix timestamps.
    """
    if not isinstance(value, str) or value.strip().lstrip("+-").isdigit():
        raise PydanticCustomError("date_type", "Input should be a date string")
    return value.strip()


def reject_bool(value: Any) -> Any:
    if isinstance(value, bool):
        raise PydanticCustomError("int_type", "Input should be a valid integer")
    return value


DateStr = Annotated[date, BeforeValidator(require_date_string)]


class InputModel(BaseModel):  # type: ignore[misc]
    """Base for request payload models; unknown keys are ignored."""

    model_config = ConfigDict(str_strip_whitespace=True, extra="ignore")


class PartialInputModel(InputModel):
    """
    Base for partial update payloads.

    Every field is optional, but a field that is present must hold a
    value: an explicit ``null`` is rejected instead of being written.
    Use ``model_dump(exclude_unset=True)`` to get only the fields that
    were sent.
    """

    @field_validator("*", mode="before")
    @classmethod
    def reject_null(cls, value: Any) -> Any:
        if value is None:
            raise PydanticCustomError("null_value", "Field must not be null")
        return value
