# -*- coding: utf-8 -*-


from pathlib import Path
from dataclasses import dataclass
import os

from dotenv import load_dotenv

# ============================================================================
# Load .env file for local environment configuration
# ============================================================================
load_dotenv()

# ============================================================================
# Read settings from environment variables (from .env or system)
# ============================================================================
# API Settings
_API_BASE_URL = os.getenv("API_BASE_URL", "http://localhost:3000")
_API_TIMEOUT = int(os.getenv("API_TIMEOUT", "30"))
_API_VERIFY_SSL = os.getenv("API_VERIFY_SSL", "true").lower() in ("true", "1", "yes")

# Catalog list settings
_LIST_PAGE_SIZE = int(os.getenv("LIST_PAGE_SIZE", "12"))

# Logging
_LOG_CONSOLE_LEVEL = os.getenv("LOG_CONSOLE_LEVEL", "INFO")


@dataclass
class Config:
    """Application configuration."""

    # Application Info
    APP_NAME: str = "BnOverseas Admin"
    APP_TITLE: str = "BnOverseas Study Abroad - Back Office"
    VERSION: str = "1.0.0"
    ORGANIZATION: str = "BnOverseas"

    # HTTP API Backend Settings
    # Reads from .env file (API_BASE_URL, API_TIMEOUT, API_VERIFY_SSL)
    API_BASE_URL: str = _API_BASE_URL
    API_TIMEOUT: int = _API_TIMEOUT
    API_VERIFY_SSL: bool = _API_VERIFY_SSL

    # Pagination
    LIST_PAGE_SIZE: int = _LIST_PAGE_SIZE

    # Paths
    PROJECT_ROOT: Path = Path(__file__).parent.parent
    LOGS_DIR: Path = PROJECT_ROOT / "logs"

    # Logging
    LOG_FILE: str = "app.log"
    LOG_PATH: Path = LOGS_DIR / LOG_FILE
    LOG_MAX_BYTES: int = 5 * 1024 * 1024  # 5MB
    LOG_BACKUP_COUNT: int = 3
    LOG_CONSOLE_LEVEL: str = _LOG_CONSOLE_LEVEL

    # UI Settings
    WINDOW_MIN_WIDTH: int = 1200
    WINDOW_MIN_HEIGHT: int = 800
    SIDEBAR_WIDTH: int = 240
    TOAST_DURATION_MS: int = 3000

    # Branding Colors
    PRIMARY_COLOR: str = "#1D4ED8"
    PRIMARY_DARK: str = "#1E3A8A"
    TEXT_COLOR: str = "#1F2937"
    TEXT_LIGHT: str = "#6B7280"
    BACKGROUND_COLOR: str = "#F3F4F6"
    BORDER_COLOR: str = "#D1D5DB"
    SUCCESS_COLOR: str = "#16A34A"
    WARNING_COLOR: str = "#D97706"
    ERROR_COLOR: str = "#DC2626"
    SIDEBAR_BG: str = "#0F172A"
    SIDEBAR_ACTIVE: str = "#1D4ED8"

    # Date/Time Formats
    DATE_FORMAT: str = "%Y-%m-%d"
    DATETIME_FORMAT: str = "%Y-%m-%d %H:%M:%S"


# Page identifiers
class Pages:
    UNIVERSITIES = "universities"
    PROGRAMS = "programs"
    EVENTS = "events"
    COURSES = "courses"
    PAGES = "pages"
    COURSE_BUILDER = "course_builder"
    TEST_BUILDER = "test_builder"
    BOOK_APPOINTMENT = "book_appointment"
    SETUP = "setup"
