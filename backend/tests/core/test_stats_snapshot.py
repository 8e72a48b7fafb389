"""Stats snapshot helpers - ranking and score rounding, pure."""

from game_collection.core.stats_snapshot import (
    GroupCount, StatsSnapshot, rank_by_count, rank_by_key, round_score,
)


def test_empty_snapshot_is_all_zero():
    assert StatsSnapshot().to_dict() == {
        "total": 0, "completed": 0, "favorite": 0,
        "total_play_hours": 0, "avg_score": 0,
        "by_genre": [], "by_platform": [], "by_year": [],
    }


def test_rank_by_count_descending():
    groups = [GroupCount("PC", 1), GroupCount("Switch", 3), GroupCount("PS5", 2)]
    assert [g.key for g in rank_by_count(groups)] == ["Switch", "PS5", "PC"]


def test_rank_by_count_keeps_incoming_order_for_ties():
    groups = [GroupCount("RPG", 2), GroupCount("Puzzle", 1), GroupCount("Action", 2)]
    assert [g.key for g in rank_by_count(groups)] == ["RPG", "Action", "Puzzle"]


def test_rank_by_key_descending_ignores_counts():
    groups = [GroupCount(2017, 5), GroupCount(2022, 1), GroupCount(2019, 3)]
    assert [g.key for g in rank_by_key(groups)] == [2022, 2019, 2017]


def test_round_score_none_is_zero():
    assert round_score(None) == 0


def test_round_score_rounds_halves_up():
    assert round_score(74.5) == 75
    assert round_score(82.5) == 83
    assert round_score(74.49) == 74


def test_group_count_to_dict():
    assert GroupCount("RPG", 2).to_dict() == {"key": "RPG", "count": 2}
