"""Tests for the configuration-driven notifier service."""

import httpx
import pytest

from notifier.exceptions import IncompleteDsnError, UnsupportedSchemeError
from notifier.services import notifier_service
from notifier.services.notifier_service import NotifierService


@pytest.fixture
def created_clients(monkeypatch):
    """Records every httpx.Client the service creates itself."""
    created = []

    class TrackingClient(httpx.Client):
        def __init__(self, *args, **kwargs):
            super().__init__(*args, **kwargs)
            created.append(self)

    monkeypatch.setattr(notifier_service.httpx, "Client", TrackingClient)
    return created


class TestNotifierService:
    def test_builds_transports_in_order(self, created_clients):
        service = NotifierService(
            transport_dsns={"chat": "telegram://1:x@default?channel=c", "null": "null://null"}
        )

        assert list(service.dispatcher.transports) == ["chat", "null"]
        assert len(created_clients) == 1

        service.close()
        assert created_clients[0].is_closed

    @pytest.mark.parametrize(
        "dsn, error",
        [
            ("slack://x@default", UnsupportedSchemeError),
            ("telegram://1@default", IncompleteDsnError),
        ],
    )
    def test_bad_dsn_closes_owned_client(self, created_clients, dsn, error):
        with pytest.raises(error):
            NotifierService(transport_dsns={"a": dsn})

        assert len(created_clients) == 1
        assert created_clients[0].is_closed

    def test_bad_dsn_leaves_injected_client_open(self, make_client):
        client, _ = make_client()

        with pytest.raises(UnsupportedSchemeError):
            NotifierService(transport_dsns={"a": "slack://x@default"}, client=client)

        assert not client.is_closed

    def test_does_not_close_injected_client(self, make_client):
        client, _ = make_client()
        service = NotifierService(transport_dsns={"null": "null://null"}, client=client)

        service.close()

        assert not client.is_closed
