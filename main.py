#!/usr/bin/env python
# -*- coding: utf-8 -*-
"""
BnOverseas Admin - back-office desktop client for the study-abroad platform.
Main entry point for the application.
"""

import sys

from PyQt5.QtWidgets import QApplication
from PyQt5.QtCore import Qt

from app.config import Config
from app import MainWindow, get_stylesheet
from services.api_client import get_api_client
from utils.logger import setup_logger


def main():
    """Main application entry point."""

    # Set Qt attributes BEFORE creating QApplication
    QApplication.setAttribute(Qt.AA_EnableHighDpiScaling, True)
    QApplication.setAttribute(Qt.AA_UseHighDpiPixmaps, True)

    # Initialize logging
    logger = setup_logger()

    try:
        app = QApplication(sys.argv)
        app.setApplicationName(Config.APP_NAME)
        app.setApplicationVersion(Config.VERSION)
        app.setOrganizationName(Config.ORGANIZATION)
        app.setStyleSheet(get_stylesheet())

        logger.info("=" * 80)
        logger.info(f"Starting {Config.APP_NAME} {Config.VERSION}")
        logger.info(f"API: {Config.API_BASE_URL}")
        logger.info("=" * 80)

        # Created here so request workers never race to build it
        get_api_client()

        window = MainWindow()
        window.start()
        logger.info(">> Main window created and displayed")

        exit_code = app.exec_()
        logger.info(f"Application closed with exit code: {exit_code}")
        sys.exit(exit_code)

    except Exception as e:
        logger.exception(f"Fatal error during application startup: {e}")
        print(f"\n[ERROR] Fatal error during application startup: {e}")
        print(f"\nPlease check {Config.LOG_PATH} for details")
        sys.exit(1)


if __name__ == "__main__":
    main()
