# -*- coding: utf-8 -*-
"""
Tests for RemoteSync create/update/delete and failure folding.
"""

import requests

from services.exceptions import ApiException, AuthRequiredException, NetworkException
from services.remote_sync import RemoteSync, SyncResult
from services.translation_manager import tr


class TestSave:

    def test_new_entity_is_posted(self, fake_api):
        fake_api.respond("POST", "/api/admin/pages", {"page": {"id": "p1", "title": "About Us"}})
        sync = RemoteSync("/api/admin/pages/", fake_api, entity_key="page")

        result = sync.save(None, {"title": "About Us"})

        assert result.ok
        assert result.entity == {"id": "p1", "title": "About Us"}
        assert fake_api.calls == [("POST", "/api/admin/pages", {"title": "About Us"})]

    def test_existing_entity_is_put(self, fake_api):
        fake_api.respond("PUT", "/api/admin/pages/p1", {"page": {"id": "p1"}})
        sync = RemoteSync("/api/admin/pages", fake_api, entity_key="page")

        result = sync.save("p1", {"title": "About"})

        assert result.ok
        assert fake_api.calls_to("PUT", "/api/admin/pages/p1") == [{"title": "About"}]

    def test_unwrapped_body_is_returned_as_is(self, fake_api):
        fake_api.respond("POST", "/api/courses", {"id": "c1", "title": "IELTS"})
        result = RemoteSync("/api/courses", fake_api, entity_key="course").save(None, {})
        assert result.entity == {"id": "c1", "title": "IELTS"}

    def test_non_dict_body_is_empty_entity(self, fake_api):
        fake_api.respond("POST", "/api/courses", ["unexpected"])
        result = RemoteSync("/api/courses", fake_api).save(None, {})
        assert result.ok
        assert result.entity == {}


class TestFailures:

    def test_rejection_is_folded(self, fake_api):
        fake_api.respond("POST", "/api/admin/pages", ApiException(
            "x", status_code=409, response_data={"error": "Slug already exists"}))

        result = RemoteSync("/api/admin/pages", fake_api).save(None, {})

        assert result == SyncResult.failure("Slug already exists", auth_required=False, status_code=409)

    def test_expired_session_is_flagged(self, fake_api):
        fake_api.respond("PUT", "/api/admin/pages/p1", AuthRequiredException("x", status_code=401))

        result = RemoteSync("/api/admin/pages", fake_api).save("p1", {})

        assert not result.ok
        assert result.auth_required
        assert result.message == tr("error.auth.required")

    def test_network_failure_is_folded(self, fake_api):
        fake_api.respond("DELETE", "/api/admin/pages/p1", NetworkException(
            "refused", original_error=requests.exceptions.ConnectionError()))

        result = RemoteSync("/api/admin/pages", fake_api).delete("p1")

        assert not result.ok
        assert result.message == tr("error.api.connection")
        assert result.status_code is None


class TestDelete:

    def test_delete_addresses_the_entity(self, fake_api):
        result = RemoteSync("/api/admin/pages", fake_api).delete("p9")
        assert result.ok
        assert fake_api.calls == [("DELETE", "/api/admin/pages/p9", None)]
