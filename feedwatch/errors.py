"""
errors.py
Request-scoped failures and the HTTP status each one maps to.
"""

from __future__ import annotations

from fastapi import status


class FeedWatchError(Exception):
    """Base error for anything that fails a single /check request."""

    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class StoreUnavailableError(FeedWatchError):
    status_code = status.HTTP_503_SERVICE_UNAVAILABLE


class DocumentNotFoundError(FeedWatchError):
    status_code = status.HTTP_502_BAD_GATEWAY


class MalformedDocumentError(FeedWatchError):
    status_code = status.HTTP_502_BAD_GATEWAY


class TimestampParseError(FeedWatchError):
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
