"""
Middleware tests — the disconnect watcher is driven with hand-written ASGI
callables so a client disconnect can be simulated deterministically.
"""
import asyncio

import pytest
from httpx import AsyncClient

from comment_api.middleware import DisconnectMiddleware

SCOPE = {"type": "http", "method": "GET", "path": "/api/v1/comments", "headers": []}


async def _never() -> None:
    await asyncio.Event().wait()


@pytest.mark.asyncio
async def test_disconnect_cancels_handler():
    started = asyncio.Event()
    cancelled = asyncio.Event()

    async def slow_app(scope, receive, send):
        started.set()
        try:
            await _never()
        except asyncio.CancelledError:
            cancelled.set()
            raise

    async def receive():
        await started.wait()
        return {"type": "http.disconnect"}

    async def send(message):
        raise AssertionError("no response expected after disconnect")

    await asyncio.wait_for(DisconnectMiddleware(slow_app)(SCOPE, receive, send), timeout=1)
    assert cancelled.is_set()


@pytest.mark.asyncio
async def test_request_body_and_response_pass_through():
    sent = []
    incoming = [
        {"type": "http.request", "body": b'{"a":', "more_body": True},
        {"type": "http.request", "body": b"1}", "more_body": False},
    ]

    async def echo_app(scope, receive, send):
        body = b""
        while True:
            message = await receive()
            body += message["body"]
            if not message["more_body"]:
                break
        await send({"type": "http.response.start", "status": 200, "headers": []})
        await send({"type": "http.response.body", "body": body})

    async def receive():
        if incoming:
            return incoming.pop(0)
        await _never()

    async def send(message):
        sent.append(message)

    await DisconnectMiddleware(echo_app)(SCOPE, receive, send)
    assert sent[0]["status"] == 200
    assert sent[1]["body"] == b'{"a":1}'


@pytest.mark.asyncio
async def test_disconnect_after_response_does_not_cancel():
    finished = asyncio.Event()

    async def app(scope, receive, send):
        await send({"type": "http.response.start", "status": 204, "headers": []})
        await send({"type": "http.response.body", "body": b""})
        await asyncio.sleep(0.01)
        finished.set()

    async def receive():
        return {"type": "http.disconnect"}

    async def send(message):
        pass

    await DisconnectMiddleware(app)(SCOPE, receive, send)
    assert finished.is_set()


@pytest.mark.asyncio
async def test_timing_headers_present(async_client: AsyncClient):
    await async_client.post(
        "/api/v1/comments", json={"slug": "s", "author": "a", "body": "b"}
    )
    resp = await async_client.get("/api/v1/comments")
    assert float(resp.headers["x-response-time-ms"]) >= 0
    assert int(resp.headers["x-query-count"]) >= 1
