"""
Custom exception classes for the application.

Expected outcomes of a request (invalid input, missing entity) are returned
by the resource handlers as results, not raised. These exceptions cover the
cases that do escape a handler; each one carries the HTTP status the
application-level exception handler responds with.
"""

from typing import Any


class AppException(Exception):
    """
    Base exception class for all application exceptions.

    Attributes:
        message: Human-readable error message.
        http_status: HTTP status code for REST API responses.
        data: Optional payload placed in the response envelope.
    """

    http_status: int = 500

    def __init__(self, message: str, data: Any = None):
        """
        Initialize the exception with a message.

        Args:
            message: Human-readable error description.
            data: Optional payload for the response envelope.
        """
        self.message = message
        self.data = data
        super().__init__(message)


class DatabaseError(AppException):
    """
    Database operation failed.

    Raised when the database cannot be reached or initialized.

    HTTP Status: 500 Internal Server Error
    """

    http_status = 500
