"""Process-wide registry of messaging backends, keyed by name."""

from __future__ import annotations

from mcpbridge.types import Server

_servers: dict[str, Server] = {}


def register_server(server: Server) -> None:
    """Register a server under its name, replacing any earlier one."""
    _servers[server.name] = server


def get_server(name: str) -> Server | None:
    """Return the server registered under ``name``, or None."""
    return _servers.get(name)


def list_servers() -> list[str]:
    """Return the names of all registered servers."""
    return list(_servers)