"""FilterSpec parsing - lenient normalization of raw listing criteria.

Tests cover:
    - Absent vs false for tri-state flags
    - Sort field fallback and aliases
    - Sort order fallback
    - Blank and duplicate value cleanup
"""

from game_collection.core.domain_types import SortField, SortOrder
from game_collection.core.filter_spec import (
    FilterSpec, SortSpec, build_filter_spec, clean_values,
    parse_sort_field, parse_sort_order, parse_tristate,
)


# --- Tri-state flags ----------------------------------------------------------

def test_tristate_absent_is_none():
    assert parse_tristate(None) is None


def test_tristate_blank_is_none():
    assert parse_tristate("") is None
    assert parse_tristate("   ") is None


def test_tristate_true_strings():
    for raw in ("true", "TRUE", "1", "yes", "on", " True "):
        assert parse_tristate(raw) is True


def test_tristate_false_is_false_not_none():
    assert parse_tristate("false") is False
    assert parse_tristate("0") is False


def test_tristate_garbage_degrades_to_false():
    assert parse_tristate("maybe") is False


def test_tristate_passes_booleans_through():
    assert parse_tristate(True) is True
    assert parse_tristate(False) is False


# --- Sorting ------------------------------------------------------------------

def test_sort_field_defaults_to_created_at():
    assert parse_sort_field(None) == SortField.CREATED_AT
    assert parse_sort_field("") == SortField.CREATED_AT


def test_unknown_sort_field_falls_back_to_created_at():
    assert parse_sort_field("genres") == SortField.CREATED_AT
    assert parse_sort_field("date_ajout") == SortField.CREATED_AT
    assert parse_sort_field("; DROP TABLE games") == SortField.CREATED_AT


def test_known_sort_fields_parse():
    assert parse_sort_field("metacritic_score") == SortField.METACRITIC_SCORE
    assert parse_sort_field("TITLE") == SortField.TITLE
    assert parse_sort_field("play_hours") == SortField.PLAY_HOURS


def test_camel_case_aliases():
    assert parse_sort_field("releaseYear") == SortField.RELEASE_YEAR
    assert parse_sort_field("metacriticScore") == SortField.METACRITIC_SCORE
    assert parse_sort_field("createdAt") == SortField.CREATED_AT


def test_aliases_tolerate_surrounding_whitespace():
    assert parse_sort_field("metacriticScore ") == SortField.METACRITIC_SCORE
    assert parse_sort_field(" releaseYear") == SortField.RELEASE_YEAR


def test_sort_order_asc():
    assert parse_sort_order("asc") == SortOrder.ASC
    assert parse_sort_order("ASC") == SortOrder.ASC


def test_sort_order_anything_else_is_desc():
    assert parse_sort_order(None) == SortOrder.DESC
    assert parse_sort_order("desc") == SortOrder.DESC
    assert parse_sort_order("sideways") == SortOrder.DESC


# --- Values -------------------------------------------------------------------

def test_clean_values_wraps_single_string():
    assert clean_values("RPG") == ("RPG",)


def test_clean_values_drops_blanks_and_duplicates():
    assert clean_values(["RPG", " ", "RPG", " Action "]) == ("RPG", "Action")


def test_clean_values_empty_is_none():
    assert clean_values([]) is None
    assert clean_values(["", "  "]) is None
    assert clean_values(None) is None


# --- build_filter_spec --------------------------------------------------------

def test_no_criteria_builds_default_spec():
    assert build_filter_spec() == FilterSpec()
    assert FilterSpec().sort == SortSpec(SortField.CREATED_AT, SortOrder.DESC)


def test_build_filter_spec_normalizes_everything():
    spec = build_filter_spec(
        genres=["RPG"], platforms="PC", completed="false", favorite="true",
        publisher="  nintendo ", search="", sort="title", order="asc",
    )
    assert spec.genres == ("RPG",)
    assert spec.platforms == ("PC",)
    assert spec.completed is False
    assert spec.favorite is True
    assert spec.publisher == "nintendo"
    assert spec.search is None
    assert spec.sort == SortSpec(SortField.TITLE, SortOrder.ASC)
