"""HTTP interface exposing the registered backends under /api/v1/<server>."""

from __future__ import annotations

import argparse
import os
from collections.abc import Iterable, Iterator

from flask import Flask, Response, request

from mcpbridge.github import GithubServer
from mcpbridge.registry import get_server, register_server
from mcpbridge.slack import SlackServer
from mcpbridge.types import MCPError, Message, Server

DEFAULT_PORT = "8080"


def _error(message: str, status: int) -> Response:
    return Response(
        message + "\n",
        status=status,
        mimetype="text/plain",
        headers={"X-Content-Type-Options": "nosniff"},
    )


def _text(body: str | Iterable[str]) -> Response:
    return Response(body, mimetype="text/plain")


def _connected_server(name: str) -> Server | None:
    """Look up a server and connect it, ignoring connection failures."""
    server = get_server(name)
    if server is not None:
        try:
            server.connect({})
        except MCPError:
            pass
    return server


def _lines(messages: Iterator[Message]) -> Iterator[str]:
    for message in messages:
        yield f"{message}\n"


def create_app() -> Flask:
    """Register the built-in backends and build the Flask application."""
    register_server(SlackServer())
    register_server(GithubServer())

    app = Flask(__name__)

    @app.get("/api/v1/<server>/contexts")
    def list_contexts(server: str) -> Response:
        backend = _connected_server(server)
        if backend is None:
            return _error(f"Unknown server: {server}", 400)
        try:
            contexts = backend.list_contexts()
        except MCPError as exc:
            return _error(str(exc), 500)
        return _text("".join(f"{context}\n" for context in contexts))

    @app.post("/api/v1/<server>/send")
    def send_message(server: str) -> Response:
        backend = _connected_server(server)
        if backend is None:
            return _error(f"Unknown server: {server}", 400)
        context = request.args.get("context", "")
        message = request.args.get("message", "")
        if not context or not message:
            return _error("Missing context or message", 400)
        try:
            backend.send_message(context, message)
        except MCPError as exc:
            return _error(str(exc), 500)
        return _text("OK")

    @app.get("/api/v1/<server>/receive")
    def receive_messages(server: str) -> Response:
        backend = _connected_server(server)
        if backend is None:
            return _error(f"Unknown server: {server}", 400)
        context = request.args.get("context", "")
        if not context:
            return _error("Missing context", 400)
        try:
            messages = backend.receive_messages(context)
        except MCPError as exc:
            return _error(str(exc), 500)
        return _text(_lines(messages))

    return app


def main(argv: list[str] | None = None) -> None:
    """Serve the API on the port named by the PORT environment variable."""
    parser = argparse.ArgumentParser(prog="mcpapi", description="MCP REST API server")
    parser.parse_args(argv)
    port = os.environ.get("PORT") or DEFAULT_PORT
    app = create_app()
    print("Starting MCP REST API server on port", port)
    app.run(host="0.0.0.0", port=int(port))


if __name__ == "__main__":
    main()