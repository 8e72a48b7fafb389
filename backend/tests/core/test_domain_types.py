"""Domain Types - enum values and field groupings."""

from game_collection.core.domain_types import (
    MULTI_VALUED_FIELDS, RecordField, SortField, SortOrder, TEXT_FIELDS,
)


def test_every_sort_field_names_a_record_field():
    for field in SortField:
        assert field.record_field.value == field.value


def test_multi_valued_fields_cannot_be_sort_keys():
    sortable = {f.record_field for f in SortField}
    assert sortable.isdisjoint(MULTI_VALUED_FIELDS)


def test_text_fields_are_the_searchable_strings():
    assert TEXT_FIELDS == {
        RecordField.TITLE, RecordField.PUBLISHER, RecordField.DEVELOPER,
    }


def test_str_enums_compare_to_query_strings():
    assert SortOrder.ASC == "asc"
    assert SortField("release_year") is SortField.RELEASE_YEAR
