"""STRATZ provider integration."""

from .client import StratzClient
from .schemas import GuildMatches, RawMatch, RawPlayer

__all__ = ["StratzClient", "GuildMatches", "RawMatch", "RawPlayer"]
