"""Predicates - declarative selection clauses evaluable in memory or translatable to SQL.

Invariants:
    - AllOf with no clauses matches every record
    - AnyOf on a multi-valued field matches when the record's set intersects the values;
      on a scalar field it matches when the value is one of them
    - ContainsText is a case-insensitive literal substring test, OR-ed across its fields
    - Equals is exact equality, so Equals(favorite, False) differs from no clause at all

Design Decisions:
    - Clauses are plain frozen dataclasses, not callables: the SQL adapter walks the
      same tree the in-memory adapter evaluates, so both backends agree on semantics
"""

from dataclasses import dataclass
from typing import Union

from game_collection.core.domain_types import MULTI_VALUED_FIELDS, RecordField
from game_collection.core.game_record import GameRecord


@dataclass(frozen=True)
class Equals:
    field: RecordField
    value: object

    def matches(self, record: GameRecord) -> bool:
        return record.value_of(self.field) == self.value


@dataclass(frozen=True)
class AnyOf:
    field: RecordField
    values: tuple

    def matches(self, record: GameRecord) -> bool:
        current = record.value_of(self.field)
        if self.field in MULTI_VALUED_FIELDS:
            return not set(current).isdisjoint(self.values)
        return current in self.values


@dataclass(frozen=True)
class ContainsText:
    fields: tuple[RecordField, ...]
    needle: str

    def matches(self, record: GameRecord) -> bool:
        needle = self.needle.lower()
        return any(
            needle in (record.value_of(f) or "").lower() for f in self.fields
        )


@dataclass(frozen=True)
class AllOf:
    clauses: tuple["Clause", ...] = ()

    def matches(self, record: GameRecord) -> bool:
        return all(c.matches(record) for c in self.clauses)


Clause = Union[Equals, AnyOf, ContainsText, AllOf]
GamePredicate = AllOf

MATCH_ALL = AllOf()
