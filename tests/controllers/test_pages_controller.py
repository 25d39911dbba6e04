# -*- coding: utf-8 -*-
"""
Tests for PagesManagementController.
"""

import pytest

from controllers.pages_controller import PAGES_COLLECTION, PagesManagementController
from services.exceptions import AuthRequiredException, NetworkException
from services.translation_manager import tr


@pytest.fixture
def controller(fake_api, manual_runner):
    return PagesManagementController(api_client=fake_api, runner=manual_runner)


class TestPagesManagementController:
    """List, edit hand-off and delete of CMS pages."""

    def test_new_page_opens_empty_editor(self, controller):
        requested = []
        controller.editor_requested.connect(requested.append)

        controller.create_page()

        assert requested == [None]

    def test_edit_loads_full_page_first(self, controller, fake_api, manual_runner):
        requested = []
        controller.editor_requested.connect(requested.append)
        fake_api.respond("GET", f"{PAGES_COLLECTION}/p1", {"page": {"id": "p1", "title": "About"}})

        controller.edit_page("p1")
        assert requested == []
        manual_runner.run_all()

        assert requested == [{"id": "p1", "title": "About"}]

    def test_unexpected_body_is_an_error(self, controller, fake_api, manual_runner):
        errors = []
        requested = []
        controller.error_changed.connect(errors.append)
        controller.editor_requested.connect(requested.append)
        fake_api.respond("GET", f"{PAGES_COLLECTION}/p1", {"pages": []})

        controller.edit_page("p1")
        manual_runner.run_all()

        assert errors == [tr("error.api.invalid_response")]
        assert requested == []

    def test_expired_session_while_loading(self, controller, fake_api, manual_runner):
        auth = []
        errors = []
        controller.auth_required.connect(lambda: auth.append(True))
        controller.error_changed.connect(errors.append)
        fake_api.respond("GET", f"{PAGES_COLLECTION}/p1", AuthRequiredException("x", status_code=401))

        controller.edit_page("p1")
        manual_runner.run_all()

        assert auth == [True]
        assert errors == []

    def test_saved_editor_refreshes_list(self, controller, fake_api, manual_runner):
        notices = []
        controller.notice.connect(notices.append)

        controller.editor_finished(True, {"id": "p2"})
        manual_runner.run_all()

        assert notices == [tr("wizard.saved")]
        assert fake_api.calls_to("GET", PAGES_COLLECTION) == [{"page": "1", "limit": "20"}]

    def test_cancelled_editor_does_nothing(self, controller, manual_runner):
        controller.editor_finished(False)
        assert manual_runner.pending == []

    def test_delete_notifies_and_refetches(self, controller, fake_api, manual_runner):
        notices = []
        controller.notice.connect(notices.append)

        controller.delete_page("p1")
        manual_runner.run_all()

        assert fake_api.calls[0] == ("DELETE", f"{PAGES_COLLECTION}/p1", None)
        assert notices == [tr("pages.deleted")]
        assert len(fake_api.calls_to("GET", PAGES_COLLECTION)) == 1

    def test_list_session_expiry_is_forwarded(self, controller, fake_api, manual_runner):
        errors = []
        auth = []
        controller.error_changed.connect(errors.append)
        controller.auth_required.connect(lambda: auth.append(True))
        fake_api.respond("GET", PAGES_COLLECTION, AuthRequiredException("x", status_code=401))

        controller.refresh()
        manual_runner.run_all()

        assert errors == []
        assert auth == [True]

    def test_list_errors_are_forwarded(self, controller, fake_api, manual_runner):
        errors = []
        controller.error_changed.connect(errors.append)
        fake_api.respond("GET", PAGES_COLLECTION, NetworkException("down"))

        controller.refresh()
        manual_runner.run_all()

        assert errors == [tr("error.api.connection")]
