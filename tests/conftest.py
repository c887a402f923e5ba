"""Shared fixtures: in-memory store and fixed clock, so no MongoDB is needed."""

import asyncio
from datetime import datetime

import pytest
from fastapi.testclient import TestClient

from feedwatch.config import Settings
from feedwatch.main import create_app

USERNAME = "monitor"
PASSWORD = "s3cret"


class FakeCollection:
    def __init__(self, name="updates", doc=None, exc=None, delay_s=0.0):
        self.name = name
        self.doc = doc
        self.exc = exc
        self.delay_s = delay_s
        self.calls = []

    async def find_one(self, flt):
        self.calls.append(flt)
        if self.delay_s:
            await asyncio.sleep(self.delay_s)
        if self.exc is not None:
            raise self.exc
        return self.doc


class FakeDb:
    def __init__(self, collections=None, ping_exc=None):
        self.collections = collections or {}
        self.ping_exc = ping_exc

    def __getitem__(self, name):
        return self.collections.setdefault(name, FakeCollection(name))

    async def command(self, cmd):
        if self.ping_exc is not None:
            raise self.ping_exc
        return {"ok": 1.0}


def fixed_clock(day, month, hour, minute, year=2024):
    def clock(tz):
        return datetime(year, month, day, hour, minute, tzinfo=tz)

    return clock


@pytest.fixture
def settings(monkeypatch, tmp_path):
    monkeypatch.chdir(tmp_path)  # keep any developer .env out of the tests
    return Settings(
        AUTH_USERNAME=USERNAME,
        AUTH_PASSWORD=PASSWORD,
        COLLECTION="updates",
        DOC="latest",
        STORE_TIMEOUT_S=0.5,
    )


@pytest.fixture
def collection():
    return FakeCollection("updates", doc={"_id": "latest", "Atualizado": "10/05 12:00", "Rede": "main"})


@pytest.fixture
def make_client(settings, collection):
    def _make(clock=None, db=None):
        app = create_app(
            settings,
            db=db or FakeDb({"updates": collection}),
            clock=clock or fixed_clock(10, 5, 12, 30),
        )
        return TestClient(app)

    return _make


@pytest.fixture
def auth():
    return (USERNAME, PASSWORD)
