"""Tests for the message dispatcher."""

import pytest

from notifier.exceptions import (
    InvalidArgumentError,
    NoSupportingTransportError,
    TransportError,
    UnsupportedMessageTypeError,
)
from notifier.models import Message
from notifier.services import Dispatcher
from notifier.transports import GatewayApiTransport, NullTransport, TelegramTransport


@pytest.fixture
def sms_client(make_client):
    return make_client(200, {"ids": [99]})


@pytest.fixture
def chat_client(make_client):
    return make_client(200, {"ok": True, "result": {"message_id": 5}})


class TestDispatcher:
    def test_routes_sms_to_sms_transport(self, sms_client, chat_client):
        sms, sms_handler = sms_client
        chat, chat_handler = chat_client
        dispatcher = Dispatcher({
            "chat": TelegramTransport("1:x", "c", chat),
            "sms": GatewayApiTransport("T", "FROM", sms),
        })

        sent = dispatcher.send(Message.sms("+4512345678", "hello"))

        assert sent.message_id == "99"
        assert sent.transport == "gatewayapi://gatewayapi.com?from=FROM"
        assert len(sms_handler.requests) == 1
        assert chat_handler.requests == []

    def test_routes_chat_to_chat_transport(self, sms_client, chat_client):
        sms, _ = sms_client
        chat, chat_handler = chat_client
        dispatcher = Dispatcher({
            "sms": GatewayApiTransport("T", "FROM", sms),
            "chat": TelegramTransport("1:x", "c", chat),
        })

        sent = dispatcher.send(Message.chat("hello"))

        assert sent.message_id == "5"
        assert len(chat_handler.requests) == 1

    def test_first_registered_supporting_transport_wins(self, sms_client, make_client):
        first, first_handler = sms_client
        second, second_handler = make_client(200, {"ids": [1]})
        dispatcher = Dispatcher()
        dispatcher.register_transport("first", GatewayApiTransport("T", "ONE", first))
        dispatcher.register_transport("second", GatewayApiTransport("T", "TWO", second))

        dispatcher.send(Message.sms("+4512345678", "hello"))

        assert len(first_handler.requests) == 1
        assert second_handler.requests == []

    def test_named_transport_is_used(self, sms_client, make_client):
        first, first_handler = sms_client
        second, second_handler = make_client(200, {"ids": [1]})
        dispatcher = Dispatcher({
            "first": GatewayApiTransport("T", "ONE", first),
            "second": GatewayApiTransport("T", "TWO", second),
        })

        sent = dispatcher.send(Message.sms("+4512345678", "hello").with_transport("second"))

        assert sent.transport == "gatewayapi://gatewayapi.com?from=TWO"
        assert first_handler.requests == []
        assert len(second_handler.requests) == 1

    def test_unknown_named_transport(self):
        dispatcher = Dispatcher({"null": NullTransport()})
        with pytest.raises(InvalidArgumentError):
            dispatcher.send(Message.chat("hi").with_transport("nope"))

    def test_named_transport_not_supporting_message(self, sms_client):
        sms, handler = sms_client
        dispatcher = Dispatcher({"sms": GatewayApiTransport("T", "FROM", sms)})

        with pytest.raises(UnsupportedMessageTypeError):
            dispatcher.send(Message.chat("hi").with_transport("sms"))
        assert handler.requests == []

    def test_no_supporting_transport(self, sms_client):
        sms, handler = sms_client
        dispatcher = Dispatcher({"sms": GatewayApiTransport("T", "FROM", sms)})

        with pytest.raises(NoSupportingTransportError):
            dispatcher.send(Message.chat("hi"))
        assert handler.requests == []

    def test_empty_dispatcher(self):
        with pytest.raises(NoSupportingTransportError):
            Dispatcher().send(Message.chat("hi"))

    def test_transport_error_propagates(self, make_client):
        client, _ = make_client(401, {"message": "Unauthorized"})
        dispatcher = Dispatcher({"sms": GatewayApiTransport("T", "FROM", client)})

        with pytest.raises(TransportError) as exc_info:
            dispatcher.send(Message.sms("+4512345678", "hello"))
        assert exc_info.value.status_code == 401

    def test_supports(self, sms_client):
        sms, _ = sms_client
        dispatcher = Dispatcher({"sms": GatewayApiTransport("T", "FROM", sms)})
        assert dispatcher.supports(Message.sms("+4512345678", "hello")) is True
        assert dispatcher.supports(Message.chat("hi")) is False
        assert dispatcher.supports(Message.sms("+4512345678", "x").with_transport("other")) is False

    def test_register_duplicate_name(self):
        dispatcher = Dispatcher({"null": NullTransport()})
        with pytest.raises(InvalidArgumentError):
            dispatcher.register_transport("null", NullTransport())

    def test_to_string_lists_transports(self):
        dispatcher = Dispatcher({
            "sms": GatewayApiTransport("T", "FROM"),
            "null": NullTransport(),
        })
        assert str(dispatcher) == "[gatewayapi://gatewayapi.com?from=FROM, null://null]"


class TestNullTransport:
    def test_supports_everything_and_sends_nothing(self):
        transport = NullTransport()
        message = Message.chat("hi")

        sent = transport.send(message)

        assert transport.supports(Message.sms("+1", "x")) is True
        assert sent.transport == "null://null"
        assert sent.message_id is None
        assert sent.original_message is message
