# -*- coding: utf-8 -*-
"""Custom exceptions for the application."""


class ApiException(Exception):
    """Exception raised when the server rejects a request (non-2xx)."""

    def __init__(self, message: str, status_code: int = None,
                 response_data: dict = None, context: str = None):
        super().__init__(message)
        self.message = message
        self.status_code = status_code
        self.response_data = response_data or {}
        self.context = context

    def __str__(self):
        if self.status_code:
            return f"[{self.status_code}] {self.message}"
        return self.message


class AuthRequiredException(ApiException):
    """Raised for 401 responses or an 'Authentication required' error body."""


class ValidationException(Exception):
    """Exception raised for validation errors."""

    def __init__(self, message: str, field: str = None,
                 errors: list = None, context: str = None):
        super().__init__(message)
        self.message = message
        self.field = field
        self.errors = errors or []
        self.context = context


class NetworkException(Exception):
    """Exception raised for network/connection errors and unreadable responses."""

    def __init__(self, message: str, original_error: Exception = None,
                 context: str = None):
        super().__init__(message)
        self.message = message
        self.original_error = original_error
        self.context = context


class InvalidTransition(Exception):
    """Raised when jumping to a step whose earlier steps do not validate."""

    def __init__(self, target_index: int, blocking_index: int, errors: list = None):
        super().__init__(
            f"Cannot jump to step {target_index}: step {blocking_index} is not valid"
        )
        self.target_index = target_index
        self.blocking_index = blocking_index
        self.errors = errors or []
