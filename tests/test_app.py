import asyncio
import socket
from types import SimpleNamespace

import httpx
import pytest

from app.core.errors import StoreError
from app.db.repositories.blog_repository import BlogRepository
import app.server as server_module
from app.server import start_server, stop_server


async def test_root(client):
    response = await client.get("/")

    assert response.status_code == 200
    assert response.json()["health"] == "/health"


async def test_health(client):
    response = await client.get("/health")

    assert response.status_code == 200
    assert response.json() == {"status": "ok", "database": "ok"}


async def test_health_reports_unavailable_database(client, app, monkeypatch):
    async def failing_ping():
        return False

    monkeypatch.setattr(app.state.database, "ping", failing_ping)

    response = await client.get("/health")

    assert response.status_code == 503
    assert response.json()["database"] == "unavailable"


async def test_store_error_returns_500(client, monkeypatch):
    async def broken_list_all(self):
        raise StoreError("Failed to list blogs")

    monkeypatch.setattr(BlogRepository, "list_all", broken_list_all)

    response = await client.get("/posts")

    assert response.status_code == 500
    assert response.json() == {"detail": "Internal server error"}


def _free_port() -> int:
    with socket.socket(socket.AF_INET, socket.SOCK_STREAM) as sock:
        sock.bind(("127.0.0.1", 0))
        return sock.getsockname()[1]


async def test_start_and_stop_server(database_url):
    port = _free_port()
    await start_server(database_url, host="127.0.0.1", port=port)
    try:
        with pytest.raises(RuntimeError):
            await start_server(database_url, host="127.0.0.1", port=port)

        async with httpx.AsyncClient(base_url=f"http://127.0.0.1:{port}") as http_client:
            created = await http_client.post("/posts", json={"title": "A", "author": "B"})
            listed = await http_client.get("/posts")
    finally:
        await stop_server()

    assert created.status_code == 201
    assert listed.json()["blogs"] == [created.json()]

    # Повторная остановка ничего не делает
    await stop_server()


async def test_start_server_on_busy_port_raises(database_url):
    with socket.socket(socket.AF_INET, socket.SOCK_STREAM) as holder:
        holder.bind(("127.0.0.1", 0))
        holder.listen()
        port = holder.getsockname()[1]

        with pytest.raises(RuntimeError):
            await start_server(database_url, host="127.0.0.1", port=port)

    # Неудачный запуск не оставляет сервер зарегистрированным
    await stop_server()
    assert server_module._server is None


async def test_stop_server_resets_state_when_serve_failed(monkeypatch):
    async def failed_serve():
        raise OSError("listener crashed")

    task = asyncio.create_task(failed_serve())
    monkeypatch.setattr(server_module, "_server", SimpleNamespace(should_exit=False))
    monkeypatch.setattr(server_module, "_serve_task", task)

    with pytest.raises(OSError):
        await stop_server()

    assert server_module._server is None
    assert server_module._serve_task is None
