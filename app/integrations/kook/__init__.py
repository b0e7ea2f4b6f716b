"""KOOK bot integration."""

from .client import KookClient, MessageType

__all__ = ["KookClient", "MessageType"]
