"""
Tests for payload validation.

Tests cover:
- Required fields on create
- Length, type and date checks
- Optional-but-checked fields on update
- Rejection of explicit nulls
- Non-object payloads
"""

from datetime import date

import pytest

from catalog.schemas.author import AuthorCreate, AuthorUpdate
from catalog.schemas.book import BookCreate, BookUpdate
from catalog.utils.validation import field_label, validate_input


class TestCreateRules:
    """Tests for the create rule sets."""

    def test_valid_author(self):
        outcome = validate_input(
            AuthorCreate,
            {"name": "John Doe", "bio": "new author", "birth_date": "2000-12-12"},
        )

        assert outcome.is_valid
        assert outcome.data.name == "John Doe"
        assert outcome.data.birth_date == date(2000, 12, 12)

    def test_missing_fields_are_reported(self):
        outcome = validate_input(AuthorCreate, {"name": "John Doe"})

        assert not outcome.is_valid
        assert outcome.errors == {
            "bio": ["The bio field is required."],
            "birth_date": ["The birth date field is required."],
        }

    def test_empty_and_blank_strings_count_as_missing(self):
        outcome = validate_input(
            AuthorCreate, {"name": "   ", "bio": "", "birth_date": "2000-12-12"}
        )

        assert outcome.errors == {
            "name": ["The name field is required."],
            "bio": ["The bio field is required."],
        }

    def test_surrounding_whitespace_is_stripped(self):
        outcome = validate_input(
            AuthorCreate,
            {"name": "  Jane  ", "bio": "bio", "birth_date": "2000-12-12"},
        )

        assert outcome.data.name == "Jane"

    def test_name_too_long(self):
        outcome = validate_input(
            AuthorCreate,
            {"name": "x" * 101, "bio": "bio", "birth_date": "2000-12-12"},
        )

        assert outcome.errors == {
            "name": ["The name field must not be greater than 100 characters."]
        }

    def test_name_at_limit_is_accepted(self):
        outcome = validate_input(
            AuthorCreate,
            {"name": "x" * 100, "bio": "bio", "birth_date": "2000-12-12"},
        )

        assert outcome.is_valid

    def test_invalid_date(self):
        outcome = validate_input(
            AuthorCreate,
            {"name": "John", "bio": "bio", "birth_date": "not-a-date"},
        )

        assert outcome.errors == {
            "birth_date": ["The birth date field must be a valid date."]
        }

    def test_name_must_be_string(self):
        outcome = validate_input(
            AuthorCreate, {"name": 123, "bio": "bio", "birth_date": "2000-12-12"}
        )

        assert outcome.errors == {"name": ["The name field must be a string."]}

    def test_book_author_id_must_be_integer(self):
        outcome = validate_input(
            BookCreate,
            {
                "author_id": "abc",
                "title": "T",
                "description": "D",
                "publish_date": "2021-01-01",
            },
        )

        assert outcome.errors == {
            "author_id": ["The author id field must be an integer."]
        }

    def test_book_author_id_numeric_string_is_coerced(self):
        outcome = validate_input(
            BookCreate,
            {
                "author_id": "5",
                "title": "T",
                "description": "D",
                "publish_date": "2021-01-01",
            },
        )

        assert outcome.data.author_id == 5

    @pytest.mark.parametrize("author_id", [True, False])
    def test_book_author_id_rejects_booleans(self, author_id):
        outcome = validate_input(
            BookCreate,
            {
                "author_id": author_id,
                "title": "T",
                "description": "D",
                "publish_date": "2021-01-01",
            },
        )

        assert outcome.errors == {
            "author_id": ["The author id field must be an integer."]
        }

    def test_book_author_id_beyond_id_column(self):
        outcome = validate_input(
            BookCreate,
            {
                "author_id": 2**40,
                "title": "T",
                "description": "D",
                "publish_date": "2021-01-01",
            },
        )

        assert outcome.errors == {
            "author_id": [
                "The author id field must not be greater than 2147483647."
            ]
        }

    def test_book_author_id_must_be_positive(self):
        outcome = validate_input(
            BookCreate,
            {
                "author_id": 0,
                "title": "T",
                "description": "D",
                "publish_date": "2021-01-01",
            },
        )

        assert outcome.errors == {
            "author_id": ["The author id field must be at least 1."]
        }

    @pytest.mark.parametrize("birth_date", [0, 1700000000, 1.5, True, "0", []])
    def test_non_textual_dates_are_rejected(self, birth_date):
        outcome = validate_input(
            AuthorCreate,
            {"name": "John", "bio": "bio", "birth_date": birth_date},
        )

        assert outcome.errors == {
            "birth_date": ["The birth date field must be a valid date."]
        }

    def test_unknown_keys_are_ignored(self):
        outcome = validate_input(
            AuthorCreate,
            {
                "id": 99,
                "name": "John",
                "bio": "bio",
                "birth_date": "2000-12-12",
                "extra": "x",
            },
        )

        assert outcome.is_valid
        assert "id" not in outcome.data.model_dump()

    @pytest.mark.parametrize("payload", [None, [], ["name"], "text", 42])
    def test_non_object_payload_is_treated_as_empty(self, payload):
        outcome = validate_input(AuthorCreate, payload)

        assert set(outcome.errors) == {"name", "bio", "birth_date"}


class TestUpdateRules:
    """Tests for the update rule sets."""

    def test_empty_update_is_valid(self):
        outcome = validate_input(AuthorUpdate, {})

        assert outcome.is_valid
        assert outcome.data.model_dump(exclude_unset=True) == {}

    def test_only_present_fields_are_set(self):
        outcome = validate_input(BookUpdate, {"title": "New title"})

        assert outcome.data.model_dump(exclude_unset=True) == {
            "title": "New title"
        }

    def test_present_fields_are_still_checked(self):
        outcome = validate_input(
            AuthorUpdate, {"name": "x" * 101, "birth_date": "31-31-2000"}
        )

        assert outcome.errors == {
            "name": ["The name field must not be greater than 100 characters."],
            "birth_date": ["The birth date field must be a valid date."],
        }

    def test_explicit_null_is_rejected(self):
        outcome = validate_input(BookUpdate, {"title": None})

        assert outcome.errors == {"title": ["The title field must not be null."]}

    def test_update_rejects_numeric_date(self):
        outcome = validate_input(BookUpdate, {"publish_date": 0})

        assert outcome.errors == {
            "publish_date": ["The publish date field must be a valid date."]
        }

    def test_author_id_can_be_changed(self):
        outcome = validate_input(BookUpdate, {"author_id": 7})

        assert outcome.data.model_dump(exclude_unset=True) == {"author_id": 7}


def test_field_label():
    assert field_label("birth_date") == "birth date"
    assert field_label("name") == "name"
