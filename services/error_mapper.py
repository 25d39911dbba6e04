# -*- coding: utf-8 -*-
"""Centralized error message mapper."""

import requests

from services.translation_manager import tr
from services.exceptions import (
    ApiException, AuthRequiredException, NetworkException, ValidationException
)
from utils.logger import get_logger

logger = get_logger(__name__)

AUTH_REQUIRED_TEXT = "authentication required"


def extract_error_message(response_data) -> str:
    """Pull the server's error text out of a response body.

    The platform answers rejections with {"error": "..."}; a few endpoints use
    {"success": false, "message": "..."} instead.
    """
    if not isinstance(response_data, dict):
        return ""

    error = response_data.get("error")
    if isinstance(error, str) and error.strip():
        return error.strip()

    message = response_data.get("message")
    if isinstance(message, str) and message.strip():
        return message.strip()

    return ""


def is_auth_error(error: Exception) -> bool:
    """Check if an exception means the session is missing or expired."""
    if isinstance(error, AuthRequiredException):
        return True
    if isinstance(error, ApiException):
        if error.status_code == 401:
            return True
        return AUTH_REQUIRED_TEXT in extract_error_message(error.response_data).lower()
    return False


def map_api_error(error: ApiException) -> str:
    """Map a server rejection to the message shown to the user.

    The server's own error text is shown verbatim; technical details are logged.
    """
    if is_auth_error(error):
        logger.warning(f"Authentication required ({error.status_code})")
        return tr("error.auth.required")

    details = _extract_validation_details(error.response_data)
    if details:
        logger.warning(f"API validation error ({error.status_code}): {details}")
    else:
        logger.warning(f"API error ({error.status_code}): {error}")

    return extract_error_message(error.response_data) or tr("error.api.generic")


def map_network_error(error: NetworkException) -> str:
    """Map a transport failure to a retry-suggesting message."""
    original = error.original_error
    if isinstance(original, requests.exceptions.Timeout):
        return tr("error.api.timeout")
    if isinstance(original, ValueError):
        return tr("error.api.invalid_response")
    return tr("error.api.connection")


def map_exception(error: Exception, context: str = None) -> str:
    """Map any exception to a user-friendly message."""
    if isinstance(error, ApiException):
        if not error.context and context:
            error.context = context
        return map_api_error(error)

    if isinstance(error, NetworkException):
        logger.warning(f"Network error in {context or 'request'}: {error}")
        return map_network_error(error)

    if isinstance(error, ValidationException):
        if error.errors:
            logger.warning(f"Validation error: {error.errors}")
        return error.message

    logger.error(f"Unexpected error in {context or 'request'}: {error}", exc_info=error)
    return tr("error.api.generic")


def _extract_validation_details(response_data: dict) -> str:
    """Extract validation error details (zod 'details' or 'errors') from a body."""
    if not response_data:
        return ""

    errors = response_data.get("details") or response_data.get("errors")
    if isinstance(errors, dict):
        lines = []
        for field, messages in errors.items():
            if isinstance(messages, list):
                for msg in messages:
                    lines.append(f"- {field}: {msg}")
            else:
                lines.append(f"- {field}: {messages}")
        return "\n".join(lines)

    if isinstance(errors, list):
        lines = []
        for entry in errors:
            if isinstance(entry, dict):
                path = ".".join(str(p) for p in entry.get("path", []))
                lines.append(f"- {path}: {entry.get('message', '')}")
            else:
                lines.append(f"- {entry}")
        return "\n".join(lines)

    return ""
