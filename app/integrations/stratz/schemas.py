"""STRATZ GraphQL response schemas.

Field names follow the GraphQL schema. Every field is optional because
STRATZ returns ``null`` for anything it has not parsed yet (e.g. a match
still being processed); the poller's normalizer decides what is required.
"""

from typing import Any, Dict, List, Optional

from pydantic import BaseModel


class RawHero(BaseModel):
    id: Optional[int] = None
    displayName: Optional[str] = None


class RawSteamAccount(BaseModel):
    name: Optional[str] = None


class RawPlayer(BaseModel):
    isRadiant: Optional[bool] = None
    isVictory: Optional[bool] = None
    kills: Optional[int] = None
    deaths: Optional[int] = None
    assists: Optional[int] = None
    imp: Optional[int] = None
    hero: Optional[RawHero] = None
    steamAccount: Optional[RawSteamAccount] = None


class RawMatch(BaseModel):
    id: Optional[int] = None
    durationSeconds: Optional[int] = None
    endDateTime: Optional[int] = None
    lobbyType: Optional[str] = None
    gameMode: Optional[str] = None
    players: Optional[List[Optional[RawPlayer]]] = None


class GuildData(BaseModel):
    id: Optional[int] = None
    name: Optional[str] = None
    logo: Optional[str] = None
    matches: Optional[List[Optional[RawMatch]]] = None


class QueryData(BaseModel):
    guild: Optional[GuildData] = None


class GraphQLResponse(BaseModel):
    data: Optional[QueryData] = None
    errors: Optional[List[Dict[str, Any]]] = None


class GuildMatches(BaseModel):
    """Validated guild header plus its most recent matches, newest first."""

    guild_id: int
    guild_name: str
    guild_logo: str
    matches: List[RawMatch] = []
