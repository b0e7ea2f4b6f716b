"""Tests for normalize_match."""

from datetime import datetime, timezone

import pytest

from infrastructure.notifications.models import MatchOutcome
from modules.poller.errors import (
    EmptyParticipantsError,
    MissingMatchFieldError,
    MissingPlayerFieldError,
    NormalizationError,
)
from modules.poller.normalizer import normalize_match
from tests.factories.stratz import make_match_dict, make_player_dict, make_raw_match
from integrations.stratz.schemas import RawMatch


def _normalize(raw):
    return normalize_match(raw, 117311, "G", "L")


@pytest.mark.unit
class TestNormalizeMatch:
    def test_builds_full_notification(self):
        notification = _normalize(make_raw_match())

        assert notification.match_id == "42"
        assert notification.guild_id == "117311"
        assert notification.guild_name == "G"
        assert notification.guild_logo == "L"
        assert notification.outcome == MatchOutcome.MIXED
        assert notification.lobby_label == "Ranked"
        assert notification.mode_label == "All Pick"
        assert notification.duration_field == "10:00"
        assert notification.end_time == datetime(
            2023, 11, 14, 22, 13, 20, tzinfo=timezone.utc
        )

    def test_splits_sides_preserving_order(self):
        raw = make_raw_match(
            players=[
                make_player_dict(name="A", is_radiant=True),
                make_player_dict(name="B", is_radiant=False),
                make_player_dict(name="C", is_radiant=True),
                make_player_dict(name="D", is_radiant=False),
            ]
        )

        notification = _normalize(raw)

        assert [p.display_name for p in notification.radiant] == ["A", "C"]
        assert [p.display_name for p in notification.dire] == ["B", "D"]

    def test_one_sided_match_leaves_other_side_empty(self):
        notification = _normalize(
            make_raw_match(players=[make_player_dict(is_radiant=False)])
        )

        assert notification.radiant == ()
        assert len(notification.dire) == 1

    def test_maps_player_stats(self):
        notification = _normalize(
            make_raw_match(players=[make_player_dict(imp=-7, hero_id=5)])
        )

        player = notification.radiant[0]
        assert player.display_name == "Alice"
        assert player.character_id == 5
        assert player.character_display_name == "Anti-Mage"
        assert (player.kills, player.deaths, player.assists) == (10, 2, 5)
        assert player.performance_delta == -7

    def test_missing_performance_delta_is_allowed(self):
        notification = _normalize(make_raw_match(players=[make_player_dict(imp=None)]))

        assert notification.radiant[0].performance_delta is None

    def test_all_victories_is_victory(self):
        raw = make_raw_match(
            players=[
                make_player_dict(is_victory=True),
                make_player_dict(is_victory=True, is_radiant=False),
            ]
        )

        assert _normalize(raw).outcome == MatchOutcome.VICTORY

    def test_unknown_enums_do_not_fail(self):
        raw = make_raw_match(lobby_type="GAUNTLET", game_mode="FUTURE_MODE")

        notification = _normalize(raw)

        assert notification.title == "Clash - Unknown - Unknown"


@pytest.mark.unit
class TestNormalizeMatchFailures:
    @pytest.mark.parametrize(
        "override,field",
        [
            ({"duration": None}, "durationSeconds"),
            ({"end": None}, "endDateTime"),
            ({"lobby_type": None}, "lobbyType"),
            ({"game_mode": None}, "gameMode"),
            ({"match_id": None}, "id"),
        ],
    )
    def test_missing_match_field(self, override, field):
        with pytest.raises(MissingMatchFieldError) as exc_info:
            _normalize(make_raw_match(**override))

        assert exc_info.value.field == field
        assert exc_info.value.error_code == "MATCH_FIELD_MISSING"

    def test_absent_player_list(self):
        raw = RawMatch.model_validate({**make_match_dict(), "players": None})

        with pytest.raises(EmptyParticipantsError) as exc_info:
            _normalize(raw)

        assert exc_info.value.match_id == 42

    def test_empty_player_list(self):
        with pytest.raises(EmptyParticipantsError):
            _normalize(make_raw_match(players=[]))

    @pytest.mark.parametrize(
        "override,field",
        [
            ({"is_radiant": None}, "isRadiant"),
            ({"is_victory": None}, "isVictory"),
            ({"kills": None}, "kills"),
            ({"deaths": None}, "deaths"),
            ({"assists": None}, "assists"),
            ({"hero_id": None}, "hero.id"),
            ({"hero_name": None}, "hero.displayName"),
            ({"name": None}, "steamAccount.name"),
        ],
    )
    def test_missing_player_field(self, override, field):
        raw = make_raw_match(players=[make_player_dict(), make_player_dict(**override)])

        with pytest.raises(MissingPlayerFieldError) as exc_info:
            _normalize(raw)

        assert exc_info.value.field == field
        assert exc_info.value.index == 1
        assert exc_info.value.match_id == 42

    def test_missing_hero_object(self):
        player = make_player_dict()
        player["hero"] = None

        with pytest.raises(MissingPlayerFieldError) as exc_info:
            _normalize(make_raw_match(players=[player]))

        assert exc_info.value.field == "hero"

    def test_null_player_entry(self):
        with pytest.raises(MissingPlayerFieldError) as exc_info:
            _normalize(make_raw_match(players=[make_player_dict(), None]))

        assert exc_info.value.field == "player"

    def test_negative_stats_are_rejected(self):
        with pytest.raises(NormalizationError):
            _normalize(make_raw_match(players=[make_player_dict(kills=-1)]))
