# -*- coding: utf-8 -*-
"""
Tests for the page editor wizard.
"""

import pytest
from PyQt5.QtWidgets import QDialog

from services.exceptions import ApiException, AuthRequiredException
from ui.wizards.page_editor import PageEditorDialog, PageEditorWizard, create_page_editor_controller


def saved_page(data):
    return {"page": dict(data, id="p1")}


@pytest.fixture
def dialog(qtbot, fake_api, immediate_runner):
    fake_api.respond("POST", "/api/admin/pages", saved_page)
    dialog = PageEditorDialog(api_client=fake_api, runner=immediate_runner)
    qtbot.addWidget(dialog)
    dialog.show()
    return dialog


def fill_content(wizard, qtbot, title="About Us"):
    form = wizard.forms[0]
    qtbot.keyClicks(form.editors["title"].widget, title)
    form.editors["content"].widget.setPlainText("<p>Who we are</p>")


class TestPageEditor:
    """Creating and editing a page end to end."""

    def test_title_fills_slug_field(self, dialog, qtbot):
        fill_content(dialog.wizard, qtbot)

        assert dialog.wizard.forms[0].editors["slug"].widget.text() == "about-us"
        assert dialog.controller.aggregate["slug"] == "about-us"

    def test_create_posts_once_and_accepts(self, dialog, qtbot, fake_api):
        wizard = dialog.wizard
        fill_content(wizard, qtbot)

        wizard.btn_next.click()
        assert dialog.controller.current_index == 1

        with qtbot.waitSignal(dialog.accepted, timeout=1000):
            wizard.btn_submit.click()

        posts = fake_api.calls_to("POST", "/api/admin/pages")
        assert len(posts) == 1
        assert posts[0]["title"] == "About Us"
        assert posts[0]["slug"] == "about-us"
        assert posts[0]["template"] == "default"
        assert dialog.result_entity["id"] == "p1"
        assert dialog.result() == QDialog.Accepted

    def test_missing_content_blocks_next(self, dialog, qtbot):
        wizard = dialog.wizard
        qtbot.keyClicks(wizard.forms[0].editors["title"].widget, "About Us")

        wizard.btn_next.click()

        assert dialog.controller.current_index == 0
        assert "Content is required" in wizard.error_label.text()
        assert wizard.forms[0].editors["content"].widget.styleSheet() != ""

    def test_bad_slug_is_rejected_locally(self, dialog, qtbot, fake_api):
        wizard = dialog.wizard
        fill_content(wizard, qtbot)
        wizard.forms[0].editors["slug"].widget.clear()
        qtbot.keyClicks(wizard.forms[0].editors["slug"].widget, "About Us")

        wizard.btn_next.click()

        assert dialog.controller.current_index == 0
        assert fake_api.calls == []

    def test_step_indicator_is_guarded(self, dialog):
        wizard = dialog.wizard

        wizard.indicator_buttons[1].click()

        assert dialog.controller.current_index == 0
        assert 'Complete "Content"' in wizard.error_label.text()

    def test_server_rejection_keeps_dialog_open(self, qtbot, fake_api, immediate_runner):
        fake_api.respond("POST", "/api/admin/pages", ApiException(
            "x", status_code=409, response_data={"error": "Slug already exists"}))
        dialog = PageEditorDialog(api_client=fake_api, runner=immediate_runner)
        qtbot.addWidget(dialog)
        dialog.show()
        fill_content(dialog.wizard, qtbot)
        dialog.wizard.btn_next.click()

        dialog.wizard.btn_submit.click()

        assert dialog.wizard.error_label.text() == "Slug already exists"
        assert dialog.wizard.btn_submit.isEnabled()
        assert dialog.result_entity is None

    def test_expired_session_is_forwarded(self, qtbot, fake_api, immediate_runner):
        fake_api.respond("POST", "/api/admin/pages", AuthRequiredException("x", status_code=401))
        dialog = PageEditorDialog(api_client=fake_api, runner=immediate_runner)
        qtbot.addWidget(dialog)
        dialog.show()
        fill_content(dialog.wizard, qtbot)
        dialog.wizard.btn_next.click()

        with qtbot.waitSignal(dialog.wizard.login_required, timeout=1000):
            dialog.wizard.btn_submit.click()

    def test_edit_mode_updates(self, qtbot, fake_api, immediate_runner):
        fake_api.respond("PUT", "/api/admin/pages/p7", lambda data: {"page": dict(data, id="p7")})
        controller = create_page_editor_controller(
            {"id": "p7", "title": "FAQ", "slug": "faq", "content": "<p>Q</p>", "template": "faq"},
            api_client=fake_api, runner=immediate_runner)
        wizard = PageEditorWizard(controller)
        qtbot.addWidget(wizard)

        assert wizard.get_wizard_title() == "Edit Page"
        assert wizard.forms[0].editors["title"].widget.text() == "FAQ"

        controller.update_field("title", "Frequently Asked Questions")
        controller.jump_to(1)
        controller.submit()

        puts = fake_api.calls_to("PUT", "/api/admin/pages/p7")
        assert puts[0]["title"] == "Frequently Asked Questions"
        assert puts[0]["slug"] == "faq"
        assert puts[0]["template"] == "faq"
