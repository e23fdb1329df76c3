import asyncio
import logging
import socket
from typing import Optional

import uvicorn

from app.core.config import settings
from app.main import create_app

logger = logging.getLogger(__name__)

_server: Optional[uvicorn.Server] = None
_serve_task: Optional[asyncio.Task] = None


async def start_server(
    database_url: Optional[str] = None,
    host: Optional[str] = None,
    port: Optional[int] = None
) -> uvicorn.Server:
    """Запуск HTTP сервера в фоне; возвращает управление, когда сервер принимает соединения"""
    global _server, _serve_task

    if _server is not None:
        raise RuntimeError("Server is already running")

    host = host or settings.host
    port = port if port is not None else settings.port

    # Порт занимаем сами: при ошибке bind uvicorn вызывает sys.exit
    sock = socket.socket(socket.AF_INET6 if ":" in host else socket.AF_INET)
    sock.setsockopt(socket.SOL_SOCKET, socket.SO_REUSEADDR, 1)
    try:
        sock.bind((host, port))
    except OSError as e:
        sock.close()
        raise RuntimeError(f"Cannot bind {host}:{port}: {e}") from e

    app = create_app(database_url=database_url or settings.database_url)
    config = uvicorn.Config(
        app,
        host=host,
        port=port,
        log_level=settings.log_level.lower(),
        lifespan="on"
    )
    server = uvicorn.Server(config)
    task = asyncio.create_task(server.serve(sockets=[sock]))

    while not server.started:
        if task.done():
            # serve() завершился до старта: пробрасываем его ошибку
            sock.close()
            await task
            raise RuntimeError("Server failed to start")
        await asyncio.sleep(0.05)

    _server, _serve_task = server, task
    logger.info(f"Server listening on {config.host}:{config.port}")
    return server


async def stop_server() -> None:
    """Остановка сервера и закрытие подключения к базе данных"""
    global _server, _serve_task

    if _server is None:
        return

    _server.should_exit = True
    try:
        await _serve_task
    finally:
        _server, _serve_task = None, None
    logger.info("Server stopped")


def main() -> None:
    uvicorn.run(
        "app.main:app",
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower()
    )


if __name__ == "__main__":
    main()
