# -*- coding: utf-8 -*-
"""
Shared fixtures: offscreen Qt, a scripted API client and a manual runner.
"""

import os
import sys
from pathlib import Path

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

import pytest

from services.request_runner import ImmediateRunner


class FakeApiClient:
    """
    Stand-in for ConsultancyApiClient.

    Responses are scripted per (method, endpoint). A scripted value may be a
    body, an exception instance (raised) or a callable taking the request
    (params or json) and returning a body. Unscripted calls answer {}.
    """

    def __init__(self):
        self.calls = []
        self.responses = {}

    def respond(self, method: str, endpoint: str, response):
        self.responses[(method, endpoint)] = response

    def _call(self, method, endpoint, data=None):
        self.calls.append((method, endpoint, data))
        response = self.responses.get((method, endpoint), {})
        if isinstance(response, Exception):
            raise response
        if callable(response):
            return response(data)
        return response

    def get(self, endpoint, params=None):
        return self._call("GET", endpoint, params)

    def post(self, endpoint, json_data=None):
        return self._call("POST", endpoint, json_data)

    def put(self, endpoint, json_data=None):
        return self._call("PUT", endpoint, json_data)

    def delete(self, endpoint):
        return self._call("DELETE", endpoint)

    def login(self, email, password):
        return self.post("/api/auth/login", json_data={"email": email, "password": password})

    def calls_to(self, method: str, endpoint: str):
        return [data for m, e, data in self.calls if m == method and e == endpoint]


class ManualRunner:
    """Queues submitted requests; the test decides when (and in which order) they finish."""

    def __init__(self):
        self.pending = []

    def submit(self, fn, on_success, on_error=None):
        self.pending.append((fn, on_success, on_error))

    def run(self, index: int = 0):
        fn, on_success, on_error = self.pending.pop(index)
        try:
            result = fn()
        except Exception as e:
            if on_error is None:
                raise
            on_error(e)
            return
        on_success(result)

    def run_all(self):
        while self.pending:
            self.run(0)


@pytest.fixture(autouse=True)
def _qt_application(qapp):
    """Every test runs with a QApplication (signals, widgets, timers)."""
    return qapp


@pytest.fixture
def fake_api():
    return FakeApiClient()


@pytest.fixture
def manual_runner():
    return ManualRunner()


@pytest.fixture
def immediate_runner():
    return ImmediateRunner()
