"""
Input validation for request payloads.

A pydantic model class is the rule set for a payload: required
vs. optional fields, maximum lengths and value types. ``validate_input``
applies it to a raw key/value map and either returns the parsed model or a
map from field name to human-readable messages, ready to be sent to the
client as-is.

Example:
    ```python
    outcome = validate_input(AuthorCreate, {"name": "John Doe"})
    if not outcome.is_valid:
        return OperationResult.invalid(outcome.errors)
    author = Author(**outcome.data.model_dump())
    ```
"""

from dataclasses import dataclass, field
from typing import Any, Generic, Mapping, TypeVar

from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError
from pydantic_core import ErrorDetails

TModel = TypeVar("TModel", bound=BaseModel)

# pydantic error type -> message template
ERROR_MESSAGES: dict[str, str] = {
    "missing": "The {label} field is required.",
    "string_too_short": "The {label} field is required.",
    "string_too_long": "The {label} field must not be greater than {max_length} characters.",
    "string_type": "The {label} field must be a string.",
    "int_type": "The {label} field must be an integer.",
    "int_parsing": "The {label} field must be an integer.",
    "int_from_float": "The {label} field must be an integer.",
    "null_value": "The {label} field must not be null.",
    "greater_than_equal": "The {label} field must be at least {ge}.",
    "less_than_equal": "The {label} field must not be greater than {le}.",
}

DATE_ERROR_MESSAGE = "The {label} field must be a valid date."


@dataclass
class ValidationOutcome(Generic[TModel]):
    """
    Result of validating one payload.

    Exactly one of ``data`` and ``errors`` is meaningful: ``data`` holds the
    parsed model when the payload is valid, ``errors`` maps field names to
    messages otherwise.
    """

    data: TModel | None = None
    errors: dict[str, list[str]] = field(default_factory=dict)

    @property
    def is_valid(self) -> bool:
        return not self.errors


def field_label(name: str) -> str:
    """Turn a field name into the label used in messages (birth_date -> birth date)."""
    return name.replace("_", " ")


def format_error(error: ErrorDetails) -> str:
    """
    Render one pydantic error as a client-facing message.

    Args:
        error: A single entry of ``ValidationError.errors()``.

    Returns:
        Message naming the offending field.
    """
    loc = error.get("loc") or ("input",)
    label = field_label(str(loc[0]))
    error_type = error["type"]
    ctx = error.get("ctx") or {}

    if error_type.startswith("date"):
        return DATE_ERROR_MESSAGE.format(label=label)

    template = ERROR_MESSAGES.get(error_type)
    if template is None:
        return f"The {label} field is invalid: {error['msg']}."

    return template.format(label=label, **ctx)


def collect_errors(
    exc: PydanticValidationError,
) -> dict[str, list[str]]:
    """
    Group the errors of a pydantic ValidationError by field.

    Args:
        exc: The raised validation error.

    Returns:
        Field name to list of messages, in the order pydantic reported them.
    """
    errors: dict[str, list[str]] = {}
    for error in exc.errors():
        loc = error.get("loc") or ("input",)
        errors.setdefault(str(loc[0]), []).append(format_error(error))
    return errors


def validate_input(
    schema: type[TModel], raw: Mapping[str, Any] | None
) -> ValidationOutcome[TModel]:
    """
    Validate a raw payload against a rule set.

    Validation is pure: it never touches the database.

    Args:
        schema: Pydantic model class describing the accepted fields.
        raw: Decoded request body. Anything other than a mapping is
            treated as an empty payload.

    Returns:
        ValidationOutcome with either the parsed model or the error map.
    """
    payload = dict(raw) if isinstance(raw, Mapping) else {}

    try:
        return ValidationOutcome(data=schema.model_validate(payload))
    except PydanticValidationError as exc:
        return ValidationOutcome(errors=collect_errors(exc))
