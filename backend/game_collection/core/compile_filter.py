"""Compile Filter - turns a FilterSpec into a conjunctive GamePredicate.

Invariants:
    - One clause per present criterion, AND-ed together; no criteria -> MATCH_ALL
    - genres/platforms compile to AnyOf (OR within the dimension)
    - search compiles to a single ContainsText over title, developer, publisher
"""

from game_collection.core.domain_types import RecordField
from game_collection.core.filter_spec import FilterSpec
from game_collection.core.predicates import (
    AllOf, AnyOf, Clause, ContainsText, Equals, GamePredicate,
)

SEARCH_FIELDS = (
    RecordField.TITLE, RecordField.DEVELOPER, RecordField.PUBLISHER,
)


def compile_filter(spec: FilterSpec) -> GamePredicate:
    """Build the selection predicate for spec. Pure, never raises."""
    clauses: list[Clause] = []
    if spec.genres:
        clauses.append(AnyOf(RecordField.GENRES, tuple(spec.genres)))
    if spec.platforms:
        clauses.append(AnyOf(RecordField.PLATFORMS, tuple(spec.platforms)))
    if spec.completed is not None:
        clauses.append(Equals(RecordField.COMPLETED, spec.completed))
    if spec.favorite is not None:
        clauses.append(Equals(RecordField.FAVORITE, spec.favorite))
    if spec.publisher:
        clauses.append(ContainsText((RecordField.PUBLISHER,), spec.publisher))
    if spec.search:
        clauses.append(ContainsText(SEARCH_FIELDS, spec.search))
    return AllOf(tuple(clauses))


def only_flag(field: RecordField, value: bool) -> GamePredicate:
    """Predicate selecting records whose boolean field equals value."""
    return AllOf((Equals(field, value),))
