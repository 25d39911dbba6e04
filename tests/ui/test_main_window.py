# -*- coding: utf-8 -*-
"""
Tests for the main window: navigation, wizard launchers and sign in.
"""

import pytest

from app.config import Pages
from app.main_window import MainWindow
from ui.components.login_dialog import LoginDialog
from ui.pages.catalog_list_page import CatalogListPage
from ui.pages.pages_management_page import PagesManagementPage
from ui.wizards.course import CourseBuilderWizard
from ui.wizards.framework import WizardDialog


@pytest.fixture
def window(qtbot, fake_api, immediate_runner):
    window = MainWindow(api_client=fake_api, runner=immediate_runner)
    qtbot.addWidget(window)
    return window


def list_requests(fake_api, endpoint):
    return len(fake_api.calls_to("GET", endpoint))


class TestNavigation:

    def test_screens(self, window):
        assert set(window.pages) == {Pages.UNIVERSITIES, Pages.PROGRAMS, Pages.EVENTS,
                                     Pages.COURSES, Pages.PAGES}
        assert isinstance(window.pages[Pages.EVENTS], CatalogListPage)
        assert isinstance(window.pages[Pages.PAGES], PagesManagementPage)

    def test_first_visit_loads_once(self, window, fake_api):
        window.navigate_to(Pages.EVENTS)
        window.navigate_to(Pages.PROGRAMS)
        window.navigate_to(Pages.EVENTS)

        assert window.current_page_id() == Pages.EVENTS
        assert list_requests(fake_api, "/api/events") == 1
        assert window.sidebar.button(Pages.EVENTS).isChecked()
        assert not window.sidebar.button(Pages.PROGRAMS).isChecked()

    def test_sidebar_click_navigates(self, window, fake_api):
        window.sidebar.button(Pages.PAGES).click()

        assert window.current_page_id() == Pages.PAGES
        assert list_requests(fake_api, "/api/admin/pages") == 1

    def test_refresh_reloads_current_screen(self, window, fake_api):
        window.navigate_to(Pages.COURSES)
        window.refresh_current_page()
        assert list_requests(fake_api, "/api/courses") == 2

    def test_unknown_page_is_ignored(self, window):
        window.navigate_to("reports")
        assert window.wizard_dialog is None


class TestWizards:

    def test_action_entry_opens_wizard(self, window):
        window.sidebar.button(Pages.COURSE_BUILDER).click()

        dialog = window.wizard_dialog
        assert isinstance(dialog, WizardDialog)
        assert isinstance(dialog.wizard, CourseBuilderWizard)

    def test_closing_wizard_refreshes_list(self, window, fake_api):
        window.navigate_to(Pages.COURSES)
        window.open_wizard(Pages.COURSE_BUILDER)

        window.wizard_dialog.wizard.btn_cancel.click()

        assert window.wizard_dialog is None
        assert list_requests(fake_api, "/api/courses") == 2

    def test_every_wizard_opens(self, window):
        for wizard_id in (Pages.COURSE_BUILDER, Pages.TEST_BUILDER,
                          Pages.BOOK_APPOINTMENT, Pages.SETUP):
            dialog = window.open_wizard(wizard_id)
            assert dialog.windowTitle()
            dialog.reject()


class TestSession:

    def test_login_is_shown_once(self, window):
        window.show_login()
        first = window.login_dialog
        window.show_login()

        assert isinstance(first, LoginDialog)
        assert window.login_dialog is first

    def test_expired_session_on_a_screen_asks_to_sign_in(self, window):
        window.pages[Pages.PAGES].auth_required.emit()
        assert isinstance(window.login_dialog, LoginDialog)

    def test_sign_in_loads_first_screen(self, window, fake_api):
        window.show_login()
        dialog = window.login_dialog
        fake_api.respond("POST", "/api/auth/login", {"user": {"email": "admin@bnoverseas.com"}})

        dialog.email_input.setText("admin@bnoverseas.com")
        dialog.password_input.setText("secret")
        dialog.login_btn.click()

        assert window.current_user == {"email": "admin@bnoverseas.com"}
        assert window.sidebar.user_label.text() == "admin@bnoverseas.com"
        assert window.login_dialog is None
        assert list_requests(fake_api, "/api/universities") == 1

    def test_sign_in_again_refreshes_current_screen(self, window, fake_api):
        window.navigate_to(Pages.EVENTS)

        window._on_login_successful({"email": "admin@bnoverseas.com"})

        assert list_requests(fake_api, "/api/events") == 2
