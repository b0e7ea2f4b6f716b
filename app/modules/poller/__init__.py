"""Guild match poller.

Fetches a guild's recent matches from STRATZ and notifies every configured
destination once per new match.
"""

from modules.poller.errors import (
    EmptyParticipantsError,
    MissingMatchFieldError,
    MissingPlayerFieldError,
    NormalizationError,
    PollerError,
    ProviderError,
    PublishError,
    StoreError,
)
from modules.poller.handler import handle_poll_event
from modules.poller.service import PollerService, PollSummary

__all__ = [
    "handle_poll_event",
    "PollerService",
    "PollSummary",
    "PollerError",
    "ProviderError",
    "NormalizationError",
    "MissingMatchFieldError",
    "MissingPlayerFieldError",
    "EmptyParticipantsError",
    "PublishError",
    "StoreError",
]
