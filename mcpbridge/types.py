"""Core types shared by every messaging backend."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Iterator, Mapping
from dataclasses import dataclass
from typing import ClassVar


@dataclass(frozen=True)
class Message:
    """A single message read from a backend context."""

    context: str
    user: str
    text: str
    time: str

    def __str__(self) -> str:
        return f"[{self.time}] {self.user}: {self.text}"


class MCPError(Exception):
    """Raised when a backend operation fails."""


class Server(ABC):
    """A messaging backend that exposes contexts such as channels or repositories."""

    name: ClassVar[str]

    @abstractmethod
    def connect(self, config: Mapping[str, str] | None = None) -> None:
        """Authenticate against the backend."""

    @abstractmethod
    def list_contexts(self) -> list[str]:
        """Return the names of the contexts available to the connected user."""

    @abstractmethod
    def send_message(self, context: str, message: str) -> None:
        """Post a message into a context."""

    @abstractmethod
    def receive_messages(self, context: str) -> Iterator[Message]:
        """Return an iterator over recent messages of a context."""