"""
tests.conftest

Shared fixtures: a booted app on a throwaway SQLite file, and in-process
HTTP clients (one cookie jar per simulated browser).
"""

from __future__ import annotations

from collections.abc import AsyncIterator, Awaitable, Callable

import httpx
import pytest_asyncio
from fastapi import FastAPI

from socialhub.api.app import create_app
from socialhub.settings import Settings

BASE_URL = "http://socialhub.test"


@pytest_asyncio.fixture
async def settings(tmp_path) -> Settings:
    return Settings(
        env="test",
        log_level="WARNING",
        database_url=f"sqlite+aiosqlite:///{tmp_path / 'socialhub.db'}",
    )


@pytest_asyncio.fixture
async def app(settings: Settings) -> AsyncIterator[FastAPI]:
    app = create_app(settings=settings)
    # httpx ASGITransport does not run lifespan; drive it explicitly.
    async with app.router.lifespan_context(app):
        yield app


@pytest_asyncio.fixture
async def client_factory(app: FastAPI) -> AsyncIterator[Callable[[], httpx.AsyncClient]]:
    clients: list[httpx.AsyncClient] = []

    def make() -> httpx.AsyncClient:
        client = httpx.AsyncClient(transport=httpx.ASGITransport(app=app), base_url=BASE_URL)
        clients.append(client)
        return client

    yield make
    for client in clients:
        await client.aclose()


@pytest_asyncio.fixture
async def client(client_factory) -> httpx.AsyncClient:
    return client_factory()


@pytest_asyncio.fixture
async def login_as(client_factory) -> Callable[..., Awaitable[httpx.AsyncClient]]:
    """Register `username` and return a client holding its session cookie."""

    async def _login(username: str, password: str = "pw") -> httpx.AsyncClient:
        c = client_factory()
        r = await c.post("/users", json={"username": username, "password": password})
        assert r.status_code == 200, r.text
        r = await c.post("/login", json={"username": username, "password": password})
        assert r.status_code == 200, r.text
        return c

    return _login
