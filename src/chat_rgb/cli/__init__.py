"""Command line interface for chat-rgb."""

from chat_rgb.cli.app import create_app

__all__ = ["create_app"]
