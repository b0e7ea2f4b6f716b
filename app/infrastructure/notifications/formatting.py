"""Rendering helpers shared by every notification channel."""

from typing import Callable, Iterable

from infrastructure.notifications.models import MatchNotification, ParticipantStats

IconResolver = Callable[[int], str]

MATCH_URL = "https://stratz.com/matches/{match_id}"
GUILD_URL = "https://stratz.com/guilds/{guild_id}"
GUILD_LOGO_URL = "https://steamusercontent-a.akamaihd.net/ugc/{logo}/"
FOOTER_TEXT = "Powered by STRATZ"
FOOTER_ICON_URL = (
    "https://cdn.discordapp.com/icons/268890221943324677/"
    "12b63c55a83a715ec569e91e40641db0.webp?size=96"
)
RADIANT_LABEL = "Radiant"
DIRE_LABEL = "Dire"


def unknown_icon(character_id: int) -> str:
    return "?"


def match_url(notification: MatchNotification) -> str:
    return MATCH_URL.format(match_id=notification.match_id)


def guild_url(notification: MatchNotification) -> str:
    return GUILD_URL.format(guild_id=notification.guild_id)


def guild_logo_url(notification: MatchNotification) -> str:
    return GUILD_LOGO_URL.format(logo=notification.guild_logo)


def format_participant(
    stats: ParticipantStats, icon: str, delta_template: str = " `{:+d}`"
) -> str:
    """Render one player as ``"{icon} {name} [{k}/{d}/{a}]"``.

    The signed performance delta is appended with ``delta_template`` when
    the provider reported one.
    """
    line = (
        f"{icon} {stats.display_name} "
        f"[{stats.kills}/{stats.deaths}/{stats.assists}]"
    )
    if stats.performance_delta is not None:
        line += delta_template.format(stats.performance_delta)
    return line


def format_side(
    players: Iterable[ParticipantStats],
    icon_resolver: IconResolver = unknown_icon,
    delta_template: str = " `{:+d}`",
) -> str:
    """Render a side as newline-separated player lines; empty string for no players."""
    return "\n".join(
        format_participant(p, icon_resolver(p.character_id), delta_template)
        for p in players
    )
