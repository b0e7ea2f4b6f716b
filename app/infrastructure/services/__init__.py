"""
Shared infrastructure services.

Provides cached provider functions for process-wide singletons.
"""

from infrastructure.services.providers import get_dynamodb_client, get_settings

__all__ = [
    "get_settings",
    "get_dynamodb_client",
]
