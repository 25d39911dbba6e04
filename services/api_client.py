# -*- coding: utf-8 -*-
"""
BnOverseas API Client
=====================

Thin wrapper over the platform's REST endpoints. Credentials travel as the
session cookie kept in the requests.Session cookie jar; the client never
manages tokens itself.
"""

import json
from dataclasses import dataclass
from threading import Lock
from typing import Any, Dict, Optional

import requests
import urllib3

from services.error_mapper import extract_error_message, AUTH_REQUIRED_TEXT
from services.exceptions import ApiException, AuthRequiredException, NetworkException
from utils.logger import get_logger

logger = get_logger(__name__)

_LOG_BODY_LIMIT = 1000


@dataclass
class ApiConfig:
    """
    API connection settings.

    Fields left as None are loaded from Config (which reads .env):
        API_BASE_URL=http://localhost:3000
        API_TIMEOUT=30
        API_VERIFY_SSL=true
    """
    base_url: str = None
    timeout: int = None
    verify_ssl: bool = None

    def __post_init__(self):
        from app.config import Config

        if self.base_url is None:
            self.base_url = Config.API_BASE_URL
        if self.timeout is None:
            self.timeout = Config.API_TIMEOUT
        if self.verify_ssl is None:
            self.verify_ssl = Config.API_VERIFY_SSL


class ConsultancyApiClient:
    """
    HTTP client for the consultancy platform.

    Raises:
        ApiException: non-2xx response (ServerRejection)
        AuthRequiredException: 401 or "Authentication required" body
        NetworkException: connection failure, timeout or unreadable body

    Usage:
        client = ConsultancyApiClient(ApiConfig(base_url="http://localhost:3000"))
        body = client.get("/api/universities", params={"page": 1})
    """

    def __init__(self, config: Optional[ApiConfig] = None, session: Optional[requests.Session] = None):
        self.config = config or ApiConfig()
        self.base_url = self.config.base_url.rstrip('/')
        self.session = session or requests.Session()
        self.session.headers.update({
            "Content-Type": "application/json",
            "Accept": "application/json",
        })

        if not self.config.verify_ssl:
            # Self-signed certificates on staging servers
            urllib3.disable_warnings(urllib3.exceptions.InsecureRequestWarning)

    # ==================== Verbs ====================

    def get(self, endpoint: str, params: Optional[Dict[str, Any]] = None) -> Any:
        return self._request("GET", endpoint, params=params)

    def post(self, endpoint: str, json_data: Optional[Dict[str, Any]] = None) -> Any:
        return self._request("POST", endpoint, json_data=json_data)

    def put(self, endpoint: str, json_data: Optional[Dict[str, Any]] = None) -> Any:
        return self._request("PUT", endpoint, json_data=json_data)

    def delete(self, endpoint: str) -> Any:
        return self._request("DELETE", endpoint)

    # ==================== Authentication ====================

    def login(self, email: str, password: str) -> Dict[str, Any]:
        """Sign in; the server answers with the session cookie."""
        data = self.post("/api/auth/login", json_data={"email": email, "password": password})
        logger.info(f"Signed in as {email}")
        return data

    def current_session(self) -> Dict[str, Any]:
        """Return the server's view of the current session."""
        return self.get("/api/auth/session")

    # ==================== Internals ====================

    def _request(
        self,
        method: str,
        endpoint: str,
        json_data: Optional[Dict] = None,
        params: Optional[Dict] = None
    ) -> Any:
        """
        Execute an HTTP request with error handling.

        Args:
            method: HTTP method (GET, POST, PUT, DELETE)
            endpoint: API path (e.g., "/api/admin/pages")
            json_data: JSON payload
            params: Query parameters; None values are dropped

        Returns:
            Decoded JSON body, or {} for an empty body
        """
        url = f"{self.base_url}{endpoint}"
        if params:
            params = {k: v for k, v in params.items() if v is not None}

        logger.info(f"[API REQ] {method} {endpoint}")
        if params:
            logger.info(f"[API REQ] Params: {params}")
        if json_data is not None:
            logger.debug(f"[API REQ] Body: {_dump(json_data)}")

        try:
            response = self.session.request(
                method=method,
                url=url,
                json=json_data,
                params=params or None,
                timeout=self.config.timeout,
                verify=self.config.verify_ssl
            )
            response.raise_for_status()

        except requests.exceptions.HTTPError as e:
            raise self._rejection(method, endpoint, e.response, e)
        except (requests.exceptions.ConnectionError, requests.exceptions.Timeout) as e:
            logger.error(f"[API ERR] Network error: {method} {endpoint} - {e}")
            raise NetworkException(message=str(e), original_error=e)
        except requests.exceptions.RequestException as e:
            logger.error(f"[API ERR] Request failed: {method} {endpoint} - {e}")
            raise NetworkException(message=str(e), original_error=e)

        if not response.content:
            logger.info(f"[API RES] {response.status_code} {endpoint} (empty)")
            return {}

        try:
            result = response.json()
        except ValueError as e:
            logger.error(f"[API ERR] Non-JSON response from {method} {endpoint}")
            raise NetworkException(message="Invalid JSON response", original_error=e)

        logger.info(f"[API RES] {response.status_code} {endpoint}")
        logger.debug(f"[API RES] Body: {_dump(result)}")
        return result

    def _rejection(self, method: str, endpoint: str, response, error: Exception) -> ApiException:
        """Build the exception for a non-2xx response."""
        status_code = response.status_code if response is not None else 0
        response_data = {}
        if response is not None:
            try:
                body = response.json()
                if isinstance(body, dict):
                    response_data = body
            except ValueError:
                pass

        message = extract_error_message(response_data) or str(error)
        logger.error(f"[API ERR] {status_code} {method} {endpoint} | Response: {response_data or message}")

        if status_code == 401 or AUTH_REQUIRED_TEXT in message.lower():
            return AuthRequiredException(message, status_code=status_code, response_data=response_data)
        return ApiException(message, status_code=status_code, response_data=response_data)


def _dump(data: Any) -> str:
    try:
        text = json.dumps(data, ensure_ascii=False, default=str)
    except (TypeError, ValueError):
        text = str(data)
    if len(text) > _LOG_BODY_LIMIT:
        return f"{text[:_LOG_BODY_LIMIT]}... (truncated)"
    return text


# Shared client
_api_client: Optional[ConsultancyApiClient] = None
_api_client_lock = Lock()


def get_api_client(config: Optional[ApiConfig] = None) -> ConsultancyApiClient:
    """
    Return the shared API client, creating it on first use.

    main() creates it on the GUI thread at startup; the lock covers callers
    that reach it first from a request worker.
    """
    global _api_client
    with _api_client_lock:
        if _api_client is None:
            _api_client = ConsultancyApiClient(config)
            logger.info(f"API client ready for {_api_client.base_url}")
        return _api_client


def reset_api_client():
    """Drop the shared client (e.g. after changing API_BASE_URL)."""
    global _api_client
    with _api_client_lock:
        _api_client = None
