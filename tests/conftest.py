"""Shared fixtures: an httpx client backed by a recording mock transport."""

import json

import httpx
import pytest


class RecordingHandler:
    """Answers every request with a canned response and remembers the requests."""

    def __init__(self, status_code=200, payload=None, content=None):
        self.status_code = status_code
        self.payload = payload
        self.content = content
        self.requests = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.content is not None:
            return httpx.Response(self.status_code, content=self.content)
        return httpx.Response(self.status_code, json=self.payload if self.payload is not None else {})

    @property
    def last_json(self):
        return json.loads(self.requests[-1].content)


@pytest.fixture
def make_client():
    """Factory returning (client, handler) pairs; clients are closed after the test."""
    clients = []

    def _make(status_code=200, payload=None, content=None):
        handler = RecordingHandler(status_code, payload, content)
        client = httpx.Client(transport=httpx.MockTransport(handler))
        clients.append(client)
        return client, handler

    yield _make

    for client in clients:
        client.close()


@pytest.fixture
def failing_client():
    """Client whose every request fails before a response arrives."""

    def handler(request):
        raise httpx.ConnectError("connection refused", request=request)

    client = httpx.Client(transport=httpx.MockTransport(handler))
    yield client
    client.close()
