"""compute_collection_stats - StatsEngine over both store adapters."""

from game_collection.services.collection_stats import compute_collection_stats
from tests.sample_games import make_draft, seed


async def test_empty_store_yields_all_zero_snapshot(store):
    snapshot = await compute_collection_stats(store)
    assert snapshot.to_dict() == {
        "total": 0, "completed": 0, "favorite": 0,
        "total_play_hours": 0, "avg_score": 0,
        "by_genre": [], "by_platform": [], "by_year": [],
    }


async def test_counts_and_totals(store):
    await seed(store)
    snapshot = await compute_collection_stats(store)
    assert snapshot.total == 5
    assert snapshot.completed == 3
    assert snapshot.favorite == 2
    assert snapshot.total_play_hours == 425.5


async def test_average_score_ignores_missing_and_rounds(store):
    await seed(store)
    snapshot = await compute_collection_stats(store)
    # (97 + 96 + 93 + 87) / 4 = 93.25
    assert snapshot.avg_score == 93


async def test_average_score_rounds_half_up(store):
    await seed(store, [
        make_draft(0, metacritic_score=90),
        make_draft(1, metacritic_score=75),
    ])
    snapshot = await compute_collection_stats(store)
    assert snapshot.avg_score == 83


async def test_average_score_is_zero_when_no_game_has_one(store):
    await seed(store, [make_draft(0, metacritic_score=None)])
    snapshot = await compute_collection_stats(store)
    assert snapshot.avg_score == 0


async def test_multi_genre_games_count_once_per_genre(store):
    await seed(store, [
        make_draft(0, genres=("RPG",)),
        make_draft(1, genres=("RPG", "Action")),
        make_draft(2, genres=("Action",)),
    ])
    snapshot = await compute_collection_stats(store)
    assert {(g.key, g.count) for g in snapshot.by_genre} == {("RPG", 2), ("Action", 2)}


async def test_genres_and_platforms_ranked_by_count(store):
    await seed(store)
    snapshot = await compute_collection_stats(store)
    genre_counts = [g.count for g in snapshot.by_genre]
    assert genre_counts == sorted(genre_counts, reverse=True)
    assert snapshot.by_genre[0].key == "Action"
    # PC and Switch tie at 3; tie order is the store's
    assert {g.key for g in snapshot.by_platform[:2]} == {"PC", "Switch"}
    assert [g.count for g in snapshot.by_platform] == [3, 3, 1, 1]


async def test_years_ranked_by_year_not_by_count(store):
    await seed(store, [
        make_draft(0, release_year=2017),
        make_draft(1, release_year=2017),
        make_draft(2, release_year=2017),
        make_draft(3, release_year=2023),
        make_draft(4, release_year=1998),
    ])
    snapshot = await compute_collection_stats(store)
    assert [(g.key, g.count) for g in snapshot.by_year] == [
        (2023, 1), (2017, 3), (1998, 1),
    ]


async def test_snapshot_reflects_latest_state(store):
    records = await seed(store)
    before = await compute_collection_stats(store)
    await store.delete(records[0].id)
    after = await compute_collection_stats(store)
    assert before.total == 5
    assert after.total == 4
