"""GraphQL documents sent to STRATZ."""

GUILD_MATCHES_QUERY = """
query GuildMatches($guildId: Int!, $take: Int!) {
  guild(id: $guildId) {
    id
    name
    logo
    matches(take: $take) {
      id
      durationSeconds
      endDateTime
      lobbyType
      gameMode
      players {
        isRadiant
        isVictory
        kills
        deaths
        assists
        imp
        hero {
          id
          displayName
        }
        steamAccount {
          name
        }
      }
    }
  }
}
"""
