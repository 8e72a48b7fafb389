"""select_games - FilterEngine behaviour end to end, against both store adapters.

Tests cover:
    - Empty FilterSpec returns everything newest first
    - favorite=true selects exactly the favorites
    - Multi-genre membership, search across fields
    - Odd sort input degrades instead of failing
"""

from game_collection.core.filter_spec import FilterSpec, build_filter_spec
from game_collection.services.game_queries import (
    export_collection, list_filter_options, select_games,
)
from tests.sample_games import BASE_TIME, make_draft, seed


def _titles(records):
    return [r.title for r in records]


async def test_no_criteria_returns_everything_newest_first(store):
    records = await seed(store)
    games = await select_games(store, FilterSpec())
    expected = sorted(records, key=lambda r: r.created_at, reverse=True)
    assert [g.id for g in games] == [r.id for r in expected]


async def test_favorite_true_selects_exactly_the_favorites(store):
    records = await seed(store)
    games = await select_games(store, build_filter_spec(favorite="true"))
    assert {g.id for g in games} == {r.id for r in records if r.favorite}


async def test_favorite_false_is_not_the_same_as_absent(store):
    await seed(store)
    unfiltered = await select_games(store, build_filter_spec())
    not_favorite = await select_games(store, build_filter_spec(favorite="false"))
    assert len(unfiltered) == 5
    assert len(not_favorite) == 3
    assert all(not g.favorite for g in not_favorite)


async def test_genre_matches_games_with_that_genre_among_others(store):
    await seed(store)
    games = await select_games(store, build_filter_spec(genres="Adventure"))
    assert _titles(games) == [
        "Link's Awakening", "The Legend of Zelda: Breath of the Wild",
    ]


async def test_search_zelda_matches_title_or_developer(store):
    await seed(store, [
        make_draft(0, title="The Legend of Zelda", developer="Nintendo EAD"),
        make_draft(1, title="Four Swords", developer="Nintendo EAD Zelda"),
        make_draft(2, title="Metroid Prime", developer="Retro Studios", publisher="Nintendo"),
    ])
    games = await select_games(store, build_filter_spec(search="zelda"))
    assert _titles(games) == ["Four Swords", "The Legend of Zelda"]


async def test_publisher_filter_and_completed_combine(store):
    await seed(store)
    games = await select_games(
        store, build_filter_spec(publisher="NINTENDO", completed="true"),
    )
    assert _titles(games) == [
        "Link's Awakening", "The Legend of Zelda: Breath of the Wild",
    ]


async def test_platform_filter_with_two_values(store):
    await seed(store)
    games = await select_games(store, build_filter_spec(platforms=["PS5", "Wii U"]))
    assert _titles(games) == ["Elden Ring", "The Legend of Zelda: Breath of the Wild"]


async def test_sort_by_score_desc_with_missing_score_last(store):
    await seed(store)
    games = await select_games(
        store, build_filter_spec(sort="metacritic_score", order="desc"),
    )
    assert [g.metacritic_score for g in games] == [97, 96, 93, 87, None]


async def test_unknown_sort_and_order_fall_back_to_defaults(store):
    await seed(store)
    odd = await select_games(store, build_filter_spec(sort="nonsense", order="up"))
    default = await select_games(store, FilterSpec())
    assert [g.id for g in odd] == [g.id for g in default]


async def test_repeated_calls_return_identical_order(store):
    await seed(store, [make_draft(0, title=f"Same {n}") for n in range(5)])
    spec = build_filter_spec(sort="release_year")
    first = await select_games(store, spec)
    second = await select_games(store, spec)
    assert [g.id for g in first] == [g.id for g in second]


async def test_no_match_is_empty_not_an_error(store):
    await seed(store)
    assert await select_games(store, build_filter_spec(search="no such game")) == []


async def test_filter_options_are_sorted(store):
    await seed(store)
    options = await list_filter_options(store)
    assert options["genres"] == [
        "Action", "Adventure", "RPG", "Roguelike", "Simulation",
    ]
    assert options["platforms"] == ["PC", "PS5", "Switch", "Wii U"]
    assert options["publishers"][0] == "Bandai Namco"
    assert "Grezzo" in options["developers"]


async def test_export_wraps_every_game(store):
    await seed(store)
    export = await export_collection(store, now=BASE_TIME)
    assert export["export_date"] == BASE_TIME
    assert export["total_games"] == 5
    assert len(export["games"]) == 5
