"""Slack backend: channels are contexts, channel history provides messages."""

from __future__ import annotations

import os
from collections.abc import Iterator, Mapping
from typing import Any

import requests

from mcpbridge.types import MCPError, Message, Server

API_URL = "https://slack.com/api"
_TIMEOUT = 30
_CHANNEL_TYPES = "public_channel,private_channel"
_CHANNEL_LIMIT = 1000
_HISTORY_LIMIT = 5


def _strip_hash(context: str) -> str:
    return context[1:] if context.startswith("#") else context


class SlackServer(Server):
    """Talks to the Slack Web API with a bot or user token."""

    name = "slack"

    def __init__(self, session: requests.Session | None = None) -> None:
        self._session = session if session is not None else requests.Session()
        self._token: str | None = None

    def _call(self, method: str, **params: Any) -> dict[str, Any]:
        if self._token is None:
            raise MCPError("not connected to slack")
        try:
            response = self._session.post(
                f"{API_URL}/{method}",
                data=params,
                headers={"Authorization": f"Bearer {self._token}"},
                timeout=_TIMEOUT,
            )
            response.raise_for_status()
            payload = response.json()
        except (requests.RequestException, ValueError) as exc:
            raise MCPError(str(exc)) from exc
        if not payload.get("ok"):
            raise MCPError(payload.get("error") or "unknown error")
        return payload

    def connect(self, config: Mapping[str, str] | None = None) -> None:
        token = (config or {}).get("token") or os.environ.get("SLACK_TOKEN", "")
        if not token:
            raise MCPError("missing slack token in config or environment")
        self._token = token
        try:
            auth = self._call("auth.test")
        except MCPError as exc:
            raise MCPError(f"slack authentication failed: {exc}") from exc
        print(f"Connected to Slack as {auth.get('user', '')}")

    def _channels(self) -> list[dict[str, Any]]:
        payload = self._call(
            "conversations.list", types=_CHANNEL_TYPES, limit=_CHANNEL_LIMIT
        )
        return payload.get("channels") or []

    def _resolve_channel_id(self, channel: str) -> str:
        for entry in self._channels():
            if entry.get("name") == channel:
                return entry.get("id", "")
        raise MCPError(f"channel {channel} not found")

    def list_contexts(self) -> list[str]:
        return ["#" + entry.get("name", "") for entry in self._channels()]

    def send_message(self, context: str, message: str) -> None:
        channel_id = self._resolve_channel_id(_strip_hash(context))
        try:
            self._call("chat.postMessage", channel=channel_id, text=message)
        except MCPError as exc:
            raise MCPError(f"failed to send message: {exc}") from exc
        print(f"Sent message to {context}: {message}")

    def receive_messages(self, context: str) -> Iterator[Message]:
        """Yield the latest channel messages; yields nothing when history cannot be read."""
        channel_id = self._resolve_channel_id(_strip_hash(context))
        return self._history(context, channel_id)

    def _history(self, context: str, channel_id: str) -> Iterator[Message]:
        try:
            payload = self._call(
                "conversations.history", channel=channel_id, limit=_HISTORY_LIMIT
            )
        except MCPError:
            return
        for entry in payload.get("messages") or []:
            yield Message(
                context=context,
                user=entry.get("user", ""),
                text=entry.get("text", ""),
                time=entry.get("ts", ""),
            )