from mcpbridge.registry import get_server, list_servers, register_server
from mcpbridge.types import Server


def _make_server(server_name):
    class Dummy(Server):
        name = server_name

        def connect(self, config=None):
            return None

        def list_contexts(self):
            return []

        def send_message(self, context, message):
            return None

        def receive_messages(self, context):
            return iter(())

    return Dummy()


def test_register_and_get_returns_same_instance():
    server = _make_server("registry-test-one")
    register_server(server)
    assert get_server("registry-test-one") is server


def test_unknown_server_is_none():
    assert get_server("registry-test-missing") is None


def test_list_servers_contains_registered_names():
    register_server(_make_server("registry-test-a"))
    register_server(_make_server("registry-test-b"))
    names = list_servers()
    assert "registry-test-a" in names
    assert "registry-test-b" in names


def test_registering_again_replaces_previous():
    first = _make_server("registry-test-dup")
    second = _make_server("registry-test-dup")
    register_server(first)
    register_server(second)
    assert get_server("registry-test-dup") is second
    assert list_servers().count("registry-test-dup") == 1