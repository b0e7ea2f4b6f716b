"""Test data factories for deterministic test data generation."""

from tests.factories.notifications import (
    make_notification,
    make_participant,
    make_result,
)
from tests.factories.stratz import (
    make_graphql_body,
    make_guild_matches,
    make_raw_match,
    make_raw_player,
)

__all__ = [
    "make_notification",
    "make_participant",
    "make_result",
    "make_graphql_body",
    "make_guild_matches",
    "make_raw_match",
    "make_raw_player",
]
