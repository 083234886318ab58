"""Command-line client for the registered messaging backends."""

from __future__ import annotations

import argparse
from collections.abc import Callable

from mcpbridge.github import GithubServer
from mcpbridge.registry import get_server, register_server
from mcpbridge.slack import SlackServer
from mcpbridge.types import MCPError, Server


def _connect_quietly(server: Server) -> None:
    try:
        server.connect({})
    except MCPError:
        pass


def _run_connect(server: Server, args: argparse.Namespace) -> None:
    try:
        server.connect({})
    except MCPError as exc:
        print("Connect error:", exc)
    else:
        print("Connected to", args.server)


def _run_list(server: Server, args: argparse.Namespace) -> None:
    _connect_quietly(server)
    try:
        contexts = server.list_contexts()
    except MCPError as exc:
        print("List error:", exc)
        return
    print("Contexts:")
    for context in contexts:
        print(" -", context)


def _run_send(server: Server, args: argparse.Namespace) -> None:
    _connect_quietly(server)
    try:
        server.send_message(args.context, args.message)
    except MCPError as exc:
        print("Send error:", exc)


def _run_recv(server: Server, args: argparse.Namespace) -> None:
    _connect_quietly(server)
    try:
        messages = server.receive_messages(args.context)
    except MCPError as exc:
        print("Receive error:", exc)
        return
    for message in messages:
        print(message)


_COMMANDS: dict[str, Callable[[Server, argparse.Namespace], None]] = {
    "connect": _run_connect,
    "list": _run_list,
    "send": _run_send,
    "recv": _run_recv,
}


def _build_parser() -> argparse.ArgumentParser:
    server_help = "Name of the MCP server (slack|github)"
    common = argparse.ArgumentParser(add_help=False)
    common.add_argument(
        "-s", "--server", default=argparse.SUPPRESS, help=server_help
    )

    parser = argparse.ArgumentParser(prog="mcpcli", description="MCP CLI")
    parser.add_argument("-s", "--server", default="", help=server_help)
    commands = parser.add_subparsers(dest="command", metavar="command")

    commands.add_parser("connect", parents=[common], help="Connect to an MCP server")
    commands.add_parser("list", parents=[common], help="List contexts on server")

    send = commands.add_parser("send", parents=[common], help="Send a message")
    send.add_argument("-c", "--context", required=True, help="Context/channel/repo")
    send.add_argument("-m", "--message", required=True, help="Message text")

    recv = commands.add_parser("recv", parents=[common], help="Receive messages")
    recv.add_argument("-c", "--context", required=True, help="Context/channel/repo")

    return parser


def main(argv: list[str] | None = None) -> int:
    """Run one CLI command and return the exit status."""
    parser = _build_parser()
    args = parser.parse_args(argv)
    if args.command is None:
        parser.print_help()
        return 0

    register_server(SlackServer())
    register_server(GithubServer())

    server = get_server(args.server)
    if server is None:
        print("Unknown server:", args.server)
        return 0
    _COMMANDS[args.command](server, args)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())