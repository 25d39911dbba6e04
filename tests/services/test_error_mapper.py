# -*- coding: utf-8 -*-
"""
Tests for the error mapper: which message the user sees for each failure.
"""

import requests

from services.error_mapper import extract_error_message, is_auth_error, map_exception
from services.exceptions import (
    ApiException, AuthRequiredException, NetworkException, ValidationException
)
from services.translation_manager import tr


class TestExtractErrorMessage:

    def test_error_key(self):
        assert extract_error_message({"error": " Slug already exists "}) == "Slug already exists"

    def test_message_key(self):
        assert extract_error_message({"success": False, "message": "Not allowed"}) == "Not allowed"

    def test_nothing_usable(self):
        assert extract_error_message({"error": ""}) == ""
        assert extract_error_message(["error"]) == ""
        assert extract_error_message(None) == ""


class TestIsAuthError:

    def test_auth_exception(self):
        assert is_auth_error(AuthRequiredException("Unauthorized", status_code=401))

    def test_plain_401(self):
        assert is_auth_error(ApiException("Unauthorized", status_code=401))

    def test_authentication_required_body(self):
        error = ApiException("x", status_code=403, response_data={"error": "Authentication required"})
        assert is_auth_error(error)

    def test_other_errors(self):
        assert not is_auth_error(ApiException("Bad request", status_code=400))
        assert not is_auth_error(NetworkException("down"))
        assert not is_auth_error(ValueError("boom"))


class TestMapException:

    def test_server_text_is_shown(self):
        error = ApiException("x", status_code=409, response_data={"error": "Slug already exists"})
        assert map_exception(error) == "Slug already exists"

    def test_rejection_without_text_is_generic(self):
        assert map_exception(ApiException("x", status_code=500)) == tr("error.api.generic")

    def test_auth_maps_to_sign_in_message(self):
        assert map_exception(AuthRequiredException("x", status_code=401)) == tr("error.auth.required")

    def test_network_errors(self):
        timeout = NetworkException("slow", original_error=requests.exceptions.Timeout())
        refused = NetworkException("refused", original_error=requests.exceptions.ConnectionError())
        garbled = NetworkException("Invalid JSON response", original_error=ValueError("bad"))

        assert map_exception(timeout) == tr("error.api.timeout")
        assert map_exception(refused) == tr("error.api.connection")
        assert map_exception(garbled) == tr("error.api.invalid_response")

    def test_validation_exception_keeps_message(self):
        assert map_exception(ValidationException("Title is required")) == "Title is required"

    def test_context_is_recorded(self):
        error = ApiException("x", status_code=400)
        map_exception(error, context="create /api/admin/pages")
        assert error.context == "create /api/admin/pages"

    def test_unexpected_error_is_generic(self):
        assert map_exception(RuntimeError("boom")) == tr("error.api.generic")
