import dataclasses

import pytest

from mcpbridge.types import Message, Server


def test_message_str_uses_time_user_text_layout():
    msg = Message(context="#general", user="alice", text="hello", time="1700000000.1")
    assert str(msg) == "[1700000000.1] alice: hello"


def test_message_fields_are_kept():
    msg = Message("o/r", "bob", "body", "t")
    assert (msg.context, msg.user, msg.text, msg.time) == ("o/r", "bob", "body", "t")


def test_message_equality_by_value():
    assert Message("c", "u", "x", "t") == Message("c", "u", "x", "t")
    assert Message("c", "u", "x", "t") != Message("c", "u", "y", "t")


def test_message_is_immutable():
    msg = Message("c", "u", "x", "t")
    with pytest.raises(dataclasses.FrozenInstanceError):
        msg.text = "changed"
    assert msg.text == "x"
    assert str(msg) == "[t] u: x"


def test_server_cannot_be_instantiated():
    with pytest.raises(TypeError):
        Server()


def test_server_declares_abstract_operations():
    with pytest.raises(TypeError) as excinfo:
        Server.__new__(Server)
    text = str(excinfo.value)
    for name in ("connect", "list_contexts", "send_message", "receive_messages"):
        assert name in text


def test_incomplete_server_subclass_is_rejected():
    class Partial(Server):
        name = "partial"

        def connect(self, config=None):
            return None

    with pytest.raises(TypeError) as excinfo:
        Server.__new__(Partial)
    text = str(excinfo.value)
    assert "list_contexts" in text
    assert "send_message" in text
    assert "receive_messages" in text


def test_complete_server_subclass_works():
    class Echo(Server):
        name = "echo"

        def __init__(self):
            self.sent = []

        def connect(self, config=None):
            return None

        def list_contexts(self):
            return [context for context, _ in self.sent]

        def send_message(self, context, message):
            self.sent.append((context, message))

        def receive_messages(self, context):
            for ctx, text in self.sent:
                if ctx == context:
                    yield Message(ctx, "echo", text, "0")

    server = Echo()
    server.send_message("room", "hi")
    assert server.list_contexts() == ["room"]
    assert list(server.receive_messages("room")) == [Message("room", "echo", "hi", "0")]