"""
deps.py
FastAPI dependency helpers for shared app state and the Basic Auth gate.
"""

from __future__ import annotations

import hashlib
import hmac
import logging
from base64 import b64decode
from datetime import datetime, tzinfo
from typing import Callable

from fastapi import Depends, HTTPException, Request, status
from fastapi.security import HTTPBasicCredentials
from fastapi.security.utils import get_authorization_scheme_param

from .config import Settings

logger = logging.getLogger(__name__)

Clock = Callable[[tzinfo], datetime]

UNAUTHORIZED_HEADERS = {"WWW-Authenticate": 'Basic realm="restricted", charset="UTF-8"'}


def get_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_clock(request: Request) -> Clock:
    return request.app.state.clock


def get_db(request: Request):
    return request.app.state.db


def get_updates_collection(request: Request):
    return request.app.state.db[request.app.state.settings.collection]


def _digest(value: str) -> bytes:
    return hashlib.sha256(value.encode("utf-8")).digest()


def credentials_match(username: str, password: str, settings: Settings) -> bool:
    # Both digests are compared every time so timing does not reveal which part failed.
    username_ok = hmac.compare_digest(_digest(username), _digest(settings.auth_username))
    password_ok = hmac.compare_digest(_digest(password), _digest(settings.auth_password))
    return username_ok & password_ok


def parse_basic_credentials(authorization: str | None) -> HTTPBasicCredentials | None:
    """Decode a ``Basic`` Authorization header, or None if it is absent or malformed.

    The payload is read as UTF-8, matching the ``charset="UTF-8"`` challenge.
    """
    scheme, param = get_authorization_scheme_param(authorization)
    if not authorization or scheme.lower() != "basic":
        return None
    try:
        data = b64decode(param, validate=True).decode("utf-8")
    except ValueError:  # binascii.Error, UnicodeDecodeError, non-ASCII header text
        return None
    username, separator, password = data.partition(":")
    if not separator:
        return None
    return HTTPBasicCredentials(username=username, password=password)


async def require_basic_auth(
    request: Request,
    settings: Settings = Depends(get_settings),
) -> str:
    creds = parse_basic_credentials(request.headers.get("Authorization"))

    if creds is None or not credentials_match(creds.username, creds.password, settings):
        logger.info("Rejected unauthenticated request to %s", request.url.path)
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Unauthorized",
            headers=UNAUTHORIZED_HEADERS,
        )
    return creds.username
