"""
db/mongo.py
What this file does:
- Creates the async MongoDB client (Motor) for the store the feed publisher writes to.
- Client creation is lazy in Motor, so nothing connects until the first read.
"""

from __future__ import annotations

from typing import Any, Dict

from motor.motor_asyncio import AsyncIOMotorClient, AsyncIOMotorDatabase

from ..config import Settings


def client_options(settings: Settings) -> Dict[str, Any]:
    timeout_ms = int(settings.store_timeout_s * 1000)
    opts: Dict[str, Any] = {
        "serverSelectionTimeoutMS": timeout_ms,
        "connectTimeoutMS": timeout_ms,
        "socketTimeoutMS": timeout_ms,
    }
    if settings.store_credentials_file is not None:
        # X.509 client certificate auth
        opts.update(
            tls=True,
            tlsCertificateKeyFile=str(settings.store_credentials_file),
            authMechanism="MONGODB-X509",
        )
    return opts


def create_client(settings: Settings) -> AsyncIOMotorClient:
    return AsyncIOMotorClient(settings.mongo_uri, **client_options(settings))


def get_db(client: AsyncIOMotorClient, settings: Settings) -> AsyncIOMotorDatabase:
    return client[settings.mongo_db]
