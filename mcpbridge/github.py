"""GitHub backend: repositories are contexts, comments on the latest issue are messages."""

from __future__ import annotations

import os
from collections.abc import Iterator, Mapping
from datetime import datetime, timezone
from typing import Any

import requests

from mcpbridge.types import MCPError, Message, Server

API_URL = "https://api.github.com"
_TIMEOUT = 30
_ZERO_TIME = "0001-01-01 00:00:00 +0000 UTC"


def _format_time(value: str | None) -> str:
    if not value:
        return _ZERO_TIME
    try:
        parsed = datetime.fromisoformat(value.replace("Z", "+00:00"))
    except ValueError:
        return value
    if parsed.tzinfo is not None:
        parsed = parsed.astimezone(timezone.utc)
    return f"{parsed:%Y-%m-%d %H:%M:%S} +0000 UTC"


def _split_repo(context: str) -> tuple[str, str]:
    parts = context.split("/")
    if len(parts) != 2:
        raise MCPError("context should be in owner/repo format")
    return parts[0], parts[1]


class GithubServer(Server):
    """Talks to the GitHub REST API with a personal access token."""

    name = "github"

    def __init__(self, session: requests.Session | None = None) -> None:
        self._session = session if session is not None else requests.Session()
        self._token: str | None = None

    def _require_connection(self) -> None:
        if self._token is None:
            raise MCPError("not connected to github")

    def _request(self, method: str, path: str, **kwargs: Any) -> Any:
        self._require_connection()
        headers = {
            "Authorization": f"Bearer {self._token}",
            "Accept": "application/vnd.github+json",
        }
        try:
            response = self._session.request(
                method, API_URL + path, headers=headers, timeout=_TIMEOUT, **kwargs
            )
            response.raise_for_status()
            return response.json()
        except (requests.RequestException, ValueError) as exc:
            raise MCPError(str(exc)) from exc

    def connect(self, config: Mapping[str, str] | None = None) -> None:
        token = (config or {}).get("token") or os.environ.get("GITHUB_TOKEN", "")
        if not token:
            raise MCPError("missing github token in config or environment")
        self._token = token
        try:
            user = self._request("GET", "/user")
        except MCPError as exc:
            raise MCPError(f"github authentication failed: {exc}") from exc
        print(f"Connected to GitHub as {user.get('login', '')}")

    def list_contexts(self) -> list[str]:
        repos = self._request("GET", "/user/repos") or []
        return [repo.get("full_name", "") for repo in repos]

    def _latest_issue_number(self, owner: str, repo: str) -> int | None:
        issues = self._request("GET", f"/repos/{owner}/{repo}/issues") or []
        if not issues:
            return None
        return issues[0].get("number", 0)

    def send_message(self, context: str, message: str) -> None:
        """Post ``message`` as a comment on the latest issue of an owner/repo."""
        owner, repo = _split_repo(context)
        try:
            number = self._latest_issue_number(owner, repo)
        except MCPError as exc:
            raise MCPError(f"no issues found in {context}: {exc}") from exc
        if number is None:
            raise MCPError(f"no issues found in {context}")
        try:
            self._request(
                "POST",
                f"/repos/{owner}/{repo}/issues/{number}/comments",
                json={"body": message},
            )
        except MCPError as exc:
            raise MCPError(f"failed to send message as comment: {exc}") from exc
        print(f"Sent message to {context} issue #{number}: {message}")

    def receive_messages(self, context: str) -> Iterator[Message]:
        """Yield the comments of the latest issue; yields nothing when they cannot be read."""
        owner, repo = _split_repo(context)
        self._require_connection()
        return self._comments(context, owner, repo)

    def _comments(self, context: str, owner: str, repo: str) -> Iterator[Message]:
        try:
            number = self._latest_issue_number(owner, repo)
            if number is None:
                return
            comments = self._request(
                "GET", f"/repos/{owner}/{repo}/issues/{number}/comments"
            ) or []
        except MCPError:
            return
        for comment in comments:
            yield Message(
                context=context,
                user=(comment.get("user") or {}).get("login", ""),
                text=comment.get("body") or "",
                time=_format_time(comment.get("created_at")),
            )