"""Feature settings __init__ - exports all feature settings."""

from infrastructure.configuration.features.poller import PollerSettings

__all__ = ["PollerSettings"]
