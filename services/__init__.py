# -*- coding: utf-8 -*-
"""
BnOverseas Service Layer

HTTP client, request runner, remote persistence and error mapping.
"""

# Lazy imports to avoid circular dependencies
__all__ = [
    "ConsultancyApiClient",
    "RemoteSync",
    "SyncResult",
    "RequestRunner",
]


def __getattr__(name):
    """Lazy import to avoid circular dependencies."""
    if name == "ConsultancyApiClient":
        from .api_client import ConsultancyApiClient
        return ConsultancyApiClient
    elif name in ("RemoteSync", "SyncResult"):
        from . import remote_sync
        return getattr(remote_sync, name)
    elif name == "RequestRunner":
        from .request_runner import RequestRunner
        return RequestRunner
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
