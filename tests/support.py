"""Test helpers: a fake backend for httpx.MockTransport and session builders."""

import asyncio
import json
from collections.abc import Callable

import httpx

from launchpad_client import Session, SessionUser

BASE_URL = "http://backend.test"


class FakeBackend:
    """MockTransport handler with canned responses per (method, path).

    Every request is recorded. Unrouted requests get a 404. Set ``gate`` to
    an ``asyncio.Event`` to hold requests in flight until it is set.
    """

    def __init__(self):
        self.requests: list[httpx.Request] = []
        self._routes: dict[tuple[str, str], Callable] = {}
        self.gate: asyncio.Event | None = None

    def route(self, method: str, path: str, json_body=None, status: int = 200, handler: Callable | None = None):
        if handler is None:
            def handler(request):
                if json_body is None:
                    return httpx.Response(status)
                return httpx.Response(status, json=json_body)
        self._routes[(method.upper(), path)] = handler

    def calls(self, method: str | None = None, path: str | None = None) -> list[httpx.Request]:
        return [
            r for r in self.requests
            if (method is None or r.method == method.upper()) and (path is None or r.url.path == path)
        ]

    async def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.gate is not None:
            await self.gate.wait()
        else:
            await asyncio.sleep(0)
        handler = self._routes.get((request.method, request.url.path))
        if handler is None:
            return httpx.Response(404, json={"detail": "Not Found"})
        return handler(request)

    @property
    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self)


def body(request: httpx.Request):
    return json.loads(request.content) if request.content else None


def make_session(token: str = "tok-1", user_id: str = "u1", **user_fields) -> Session:
    return Session(token=token, user=SessionUser(id=user_id, **user_fields))
