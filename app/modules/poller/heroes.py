"""Hero lookup backed by the bundled ``data/heroes.json`` asset.

The asset maps a hero id to its shortcode slug and its Discord custom
emoji. Both icon resolvers have the ``IconResolver`` signature expected by
the notification channels.
"""

import json
from functools import lru_cache
from pathlib import Path
from typing import Dict

HEROES_FILE = Path(__file__).parent / "data" / "heroes.json"

UNKNOWN_EMOJI = ":grey_question:"
UNKNOWN_SLUG = "?"


@lru_cache
def load_heroes() -> Dict[int, Dict[str, str]]:
    """Load the hero table keyed by hero id."""
    with open(HEROES_FILE, encoding="utf-8") as f:
        raw = json.load(f)
    return {int(hero_id): entry for hero_id, entry in raw.items()}


def hero_emoji(hero_id: int) -> str:
    """Discord emoji for a hero; ``:grey_question:`` for unknown ids."""
    entry = load_heroes().get(hero_id)
    return entry["emoji"] if entry else UNKNOWN_EMOJI


def hero_slug(hero_id: int) -> str:
    """Hero shortcode (e.g. ``antimage``); ``?`` for unknown ids."""
    entry = load_heroes().get(hero_id)
    return entry["slug"] if entry else UNKNOWN_SLUG
