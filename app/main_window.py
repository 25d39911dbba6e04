# -*- coding: utf-8 -*-
"""
Main application window with sidebar navigation and QStackedWidget routing.
"""

from typing import Callable, Dict, Optional

from PyQt5.QtWidgets import QHBoxLayout, QMainWindow, QShortcut, QStackedWidget, QWidget
from PyQt5.QtCore import Qt
from PyQt5.QtGui import QKeySequence

from .config import Config, Pages
from services.translation_manager import tr
from utils.logger import get_logger

logger = get_logger(__name__)


class MainWindow(QMainWindow):
    """Main application window: sidebar, list screens and wizard launchers."""

    def __init__(self, api_client=None, runner=None, parent=None):
        super().__init__(parent)
        self._api_client = api_client
        self._runner = runner
        self.current_user = None
        self.pages: Dict[str, QWidget] = {}
        self._loaded_pages = set()
        self.login_dialog = None
        self.wizard_dialog = None

        self._setup_window()
        self._create_widgets()
        self._setup_shortcuts()

    def _setup_window(self):
        """Configure window properties."""
        self.setWindowTitle(Config.APP_TITLE)
        self.setMinimumSize(Config.WINDOW_MIN_WIDTH, Config.WINDOW_MIN_HEIGHT)

    def _setup_shortcuts(self):
        # Reload the visible list: F5
        self.refresh_shortcut = QShortcut(QKeySequence("F5"), self)
        self.refresh_shortcut.activated.connect(self.refresh_current_page)

    def _create_widgets(self):
        # Import here to avoid circular imports
        from ui.components.sidebar import Sidebar
        from ui.pages.catalog_list_page import CatalogListPage
        from ui.pages.pages_management_page import PagesManagementPage

        central = QWidget()
        central.setStyleSheet(f"background-color: {Config.BACKGROUND_COLOR};")
        self.setCentralWidget(central)
        layout = QHBoxLayout(central)
        layout.setContentsMargins(0, 0, 0, 0)
        layout.setSpacing(0)

        self.sidebar = Sidebar()
        self.sidebar.navigate.connect(self.navigate_to)
        layout.addWidget(self.sidebar)

        self.stack = QStackedWidget()
        layout.addWidget(self.stack, 1)

        for page_id in (Pages.UNIVERSITIES, Pages.PROGRAMS, Pages.EVENTS, Pages.COURSES):
            page = CatalogListPage(page_id, api_client=self._api_client, runner=self._runner)
            self._add_page(page_id, page)

        self._add_page(Pages.PAGES, PagesManagementPage(api_client=self._api_client, runner=self._runner))

    def _add_page(self, page_id: str, page: QWidget):
        page.auth_required.connect(self.show_login)
        self.pages[page_id] = page
        self.stack.addWidget(page)

    # ==================== Navigation ====================

    def navigate_to(self, page_id: str):
        """Show a list screen, or open the wizard for a creation entry."""
        if page_id in self.pages:
            page = self.pages[page_id]
            self.stack.setCurrentWidget(page)
            self.sidebar.set_current_page(page_id)
            if page_id not in self._loaded_pages:
                self._loaded_pages.add(page_id)
                page.load()
            logger.debug(f"Navigated to {page_id}")
            return

        if page_id in self._wizard_factories():
            self.open_wizard(page_id)
            return

        logger.warning(f"Unknown page: {page_id}")

    def current_page_id(self) -> Optional[str]:
        current = self.stack.currentWidget()
        for page_id, page in self.pages.items():
            if page is current:
                return page_id
        return None

    def refresh_current_page(self):
        page_id = self.current_page_id()
        if page_id:
            self.pages[page_id].load()

    # ==================== Wizards ====================

    def _wizard_factories(self) -> Dict[str, Callable[[], QWidget]]:
        from ui.wizards.appointment import AppointmentWizard, create_appointment_controller
        from ui.wizards.course import CourseBuilderWizard, create_course_controller
        from ui.wizards.prep_test import TestBuilderWizard, create_test_controller
        from ui.wizards.setup import SetupWizard, create_setup_controller

        client, runner = self._api_client, self._runner
        return {
            Pages.COURSE_BUILDER: lambda: CourseBuilderWizard(
                create_course_controller(api_client=client, runner=runner)),
            Pages.TEST_BUILDER: lambda: TestBuilderWizard(
                create_test_controller(api_client=client, runner=runner)),
            Pages.BOOK_APPOINTMENT: lambda: AppointmentWizard(
                create_appointment_controller(api_client=client, runner=runner)),
            Pages.SETUP: lambda: SetupWizard(
                create_setup_controller(api_client=client, runner=runner)),
        }

    def open_wizard(self, wizard_id: str):
        """Open one of the creation wizards in a dialog."""
        from ui.components.toast import Toast
        from ui.wizards.framework import WizardDialog

        wizard = self._wizard_factories()[wizard_id]()
        wizard.controller.setParent(wizard)
        dialog = WizardDialog(wizard, self)
        dialog.setAttribute(Qt.WA_DeleteOnClose)
        wizard.login_required.connect(self.show_login)
        dialog.accepted.connect(lambda: Toast.notify(self, tr("wizard.saved"), Toast.SUCCESS))
        dialog.finished.connect(self._on_wizard_closed)
        self.wizard_dialog = dialog
        logger.info(f"Opening wizard {wizard_id}")
        dialog.open()
        return dialog

    def _on_wizard_closed(self, _result: int):
        self.wizard_dialog = None
        # Catalog lists may now contain the new entry
        self._loaded_pages.clear()
        self._loaded_pages.add(self.current_page_id())
        self.refresh_current_page()

    # ==================== Session ====================

    def start(self):
        """Show the window and ask for credentials."""
        self.show()
        self.show_login()

    def show_login(self):
        """Ask the user to sign in; a no-op while the dialog is already open."""
        from ui.components.login_dialog import LoginDialog

        if self.login_dialog is not None:
            return
        logger.info("Sign in required")
        dialog = LoginDialog(api_client=self._api_client, runner=self._runner, parent=self)
        dialog.setAttribute(Qt.WA_DeleteOnClose)
        dialog.login_successful.connect(self._on_login_successful)
        dialog.finished.connect(self._on_login_closed)
        self.login_dialog = dialog
        dialog.open()

    def _on_login_closed(self, _result: int):
        self.login_dialog = None

    def _on_login_successful(self, user):
        self.current_user = user
        self.sidebar.set_user(user)
        page_id = self.current_page_id()
        if page_id is None or page_id not in self._loaded_pages:
            self.navigate_to(page_id or Pages.UNIVERSITIES)
        else:
            self.refresh_current_page()
