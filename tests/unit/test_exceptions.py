"""Tests for application exception classes."""

from catalog.exceptions import AppException, DatabaseError


class TestHTTPStatus:
    """Each exception carries the HTTP status it maps to."""

    def test_base_exception_defaults_to_500(self):
        ex = AppException("boom")

        assert ex.http_status == 500
        assert ex.message == "boom"
        assert ex.data is None
        assert str(ex) == "boom"

    def test_data_is_kept(self):
        ex = AppException("Validation failed", {"bio": ["required"]})

        assert ex.data == {"bio": ["required"]}

    def test_database_error(self):
        ex = DatabaseError("Connection failed")

        assert ex.http_status == 500
        assert isinstance(ex, AppException)
