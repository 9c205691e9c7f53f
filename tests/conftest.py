import asyncio
from contextlib import suppress

import httpx
import pytest_asyncio

from tiksave.infra.http import get_http_client
from tiksave.main import app


class UpstreamRecorder:
    """MockTransport handler that remembers every outbound request"""

    def __init__(self, handler):
        self.handler = handler
        self.requests = []

    def __call__(self, request: httpx.Request):
        self.requests.append(request)
        return self.handler(request)


@pytest_asyncio.fixture
async def upstream():
    """Route the app's outbound calls to a handler: upstream(handler) -> recorder"""
    clients = []

    def install(handler) -> UpstreamRecorder:
        recorder = UpstreamRecorder(handler)
        client = httpx.AsyncClient(transport=httpx.MockTransport(recorder))
        clients.append(client)
        app.dependency_overrides[get_http_client] = lambda: client
        return recorder

    yield install
    app.dependency_overrides.clear()
    for client in clients:
        await client.aclose()


class TricklingProvider:
    """Local HTTP server: sends headers, then one body byte per interval"""

    def __init__(self, interval: float = 0.2, total_bytes: int = 200):
        self.interval = interval
        self.total_bytes = total_bytes
        self.bytes_sent = 0
        self.url = ""
        self._server = None
        self._writers = []
        self._tasks = []

    async def _handle(self, reader, writer):
        self._tasks.append(asyncio.current_task())
        self._writers.append(writer)
        with suppress(ConnectionError, asyncio.IncompleteReadError):
            await reader.readuntil(b"\r\n\r\n")
            writer.write(
                b"HTTP/1.1 200 OK\r\n"
                b"Content-Type: application/json\r\n"
                b"Content-Length: %d\r\n\r\n" % self.total_bytes
            )
            await writer.drain()
            for _ in range(self.total_bytes):
                if writer.is_closing():
                    break
                writer.write(b" ")
                await writer.drain()
                self.bytes_sent += 1
                await asyncio.sleep(self.interval)
        writer.close()

    async def start(self):
        self._server = await asyncio.start_server(self._handle, "127.0.0.1", 0)
        host, port = self._server.sockets[0].getsockname()[:2]
        self.url = f"http://{host}:{port}/api/"

    async def stop(self):
        for writer in self._writers:
            writer.close()
        for task in self._tasks:
            task.cancel()
        await asyncio.gather(*self._tasks, return_exceptions=True)
        self._server.close()
        await self._server.wait_closed()


@pytest_asyncio.fixture
async def trickling_provider():
    provider = TricklingProvider()
    await provider.start()
    yield provider
    await provider.stop()


@pytest_asyncio.fixture
async def api():
    async with httpx.AsyncClient(transport=httpx.ASGITransport(app=app), base_url="http://test") as ac:
        yield ac


def provider_reply(data=None, code=0, msg="success"):
    body = {"code": code, "msg": msg}
    if data is not None:
        body["data"] = data
    return body


FULL_VIDEO = {
    "id": "7301234567890123456",
    "title": "cat does a backflip",
    "play": "https://cdn.example.com/sd.mp4",
    "wmplay": "https://cdn.example.com/wm.mp4",
    "hdplay": "https://cdn.example.com/hd.mp4",
    "cover": "https://cdn.example.com/cover.jpg",
    "origin_cover": "https://cdn.example.com/origin.jpg",
    "music": "https://cdn.example.com/music.mp3",
    "music_info": {"title": "original sound", "author": "catlover"},
    "duration": 75,
    "play_count": 1500000,
    "digg_count": 1500,
    "comment_count": 500,
    "share_count": 0,
    "author": {
        "id": "6800000000",
        "unique_id": "catlover",
        "nickname": "Cat Lover",
        "avatar": "https://cdn.example.com/avatar.jpg",
    },
}
