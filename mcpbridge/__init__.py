"""One interface for sending and reading messages on Slack and GitHub, with a CLI and a REST API."""

__version__ = "0.1.0"