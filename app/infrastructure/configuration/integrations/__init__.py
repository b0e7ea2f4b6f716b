"""Integration settings __init__ - exports all integration settings."""

from infrastructure.configuration.integrations.aws import AwsSettings
from infrastructure.configuration.integrations.discord import DiscordSettings
from infrastructure.configuration.integrations.kook import KookSettings
from infrastructure.configuration.integrations.stratz import StratzSettings

__all__ = [
    "AwsSettings",
    "DiscordSettings",
    "KookSettings",
    "StratzSettings",
]
