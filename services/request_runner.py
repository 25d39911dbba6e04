# -*- coding: utf-8 -*-
"""
Request runners - run blocking HTTP calls off the GUI thread.

Controllers hand a callable plus success/error callbacks to a runner:

    runner.submit(lambda: client.get("/api/events"), on_success, on_error)

RequestRunner executes the callable on QThreadPool and delivers the outcome
back on the GUI thread through Qt signals. ImmediateRunner runs it inline.
"""

from typing import Any, Callable, Optional, Set

from PyQt5.QtCore import QObject, QRunnable, QThreadPool, pyqtSignal

from utils.logger import get_logger

logger = get_logger(__name__)

SuccessCallback = Callable[[Any], None]
ErrorCallback = Callable[[Exception], None]


class _TaskSignals(QObject):
    """Signals of a background task (QRunnable cannot own signals)."""
    succeeded = pyqtSignal(object)
    failed = pyqtSignal(object)


class _RequestTask(QRunnable):
    """Background task that runs one callable."""

    def __init__(self, fn: Callable[[], Any]):
        super().__init__()
        self.fn = fn
        self.signals = _TaskSignals()

    def run(self):
        try:
            result = self.fn()
        except Exception as e:
            logger.debug(f"Background request raised {type(e).__name__}: {e}")
            self.signals.failed.emit(e)
            return
        self.signals.succeeded.emit(result)


class RequestRunner:
    """Runs requests on a QThreadPool."""

    def __init__(self, pool: Optional[QThreadPool] = None):
        self.pool = pool or QThreadPool.globalInstance()
        self._active: Set[_RequestTask] = set()

    def submit(self, fn: Callable[[], Any], on_success: SuccessCallback,
               on_error: Optional[ErrorCallback] = None):
        task = _RequestTask(fn)
        task.setAutoDelete(False)
        self._active.add(task)

        def _succeeded(result):
            self._active.discard(task)
            on_success(result)

        def _failed(error):
            self._active.discard(task)
            if on_error is not None:
                on_error(error)
            else:
                logger.error(f"Unhandled background request error: {error}")

        task.signals.succeeded.connect(_succeeded)
        task.signals.failed.connect(_failed)
        self.pool.start(task)

    @property
    def pending_count(self) -> int:
        return len(self._active)


class ImmediateRunner:
    """Runs requests synchronously on the calling thread."""

    def submit(self, fn: Callable[[], Any], on_success: SuccessCallback,
               on_error: Optional[ErrorCallback] = None):
        try:
            result = fn()
        except Exception as e:
            if on_error is None:
                raise
            on_error(e)
            return
        on_success(result)


_runner = None


def get_request_runner():
    """Return the shared runner: thread pool when a Qt application exists."""
    global _runner
    if _runner is None:
        from PyQt5.QtCore import QCoreApplication
        if QCoreApplication.instance() is not None:
            _runner = RequestRunner()
        else:
            logger.info("No Qt application; requests will run inline")
            _runner = ImmediateRunner()
    return _runner
