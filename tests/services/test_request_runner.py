# -*- coding: utf-8 -*-
"""
Tests for the request runners.
"""

import pytest

from services.request_runner import ImmediateRunner, RequestRunner


class TestImmediateRunner:

    def test_success_callback(self):
        results = []
        ImmediateRunner().submit(lambda: 42, results.append, None)
        assert results == [42]

    def test_error_callback(self):
        errors = []
        ImmediateRunner().submit(lambda: 1 / 0, lambda _r: None, errors.append)
        assert isinstance(errors[0], ZeroDivisionError)

    def test_error_without_callback_propagates(self):
        with pytest.raises(ZeroDivisionError):
            ImmediateRunner().submit(lambda: 1 / 0, lambda _r: None)


class TestRequestRunner:

    def test_result_is_delivered_on_gui_thread(self, qtbot):
        runner = RequestRunner()
        results = []

        runner.submit(lambda: {"ok": True}, results.append)

        qtbot.waitUntil(lambda: results == [{"ok": True}], timeout=5000)
        qtbot.waitUntil(lambda: runner.pending_count == 0, timeout=5000)

    def test_error_is_delivered(self, qtbot):
        runner = RequestRunner()
        errors = []

        def fail():
            raise RuntimeError("boom")

        runner.submit(fail, lambda _r: None, errors.append)

        qtbot.waitUntil(lambda: len(errors) == 1, timeout=5000)
        assert str(errors[0]) == "boom"
