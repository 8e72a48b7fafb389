"""Order Records - the total ordering every GameStore.find must produce.

Invariants:
    - Primary key: the sort field in the requested direction
    - Text fields compare lower-cased with str.lower(), which folds all of Unicode;
      SQLite lower() folds ASCII only, so accented titles may order differently
      in SqlGameStore. Each adapter is still total and deterministic
    - Absent values (metacritic_score=None) go last in BOTH directions
    - Ties broken by id ascending, so the order is total for a fixed snapshot

Design Decisions:
    - Two stable passes (id asc, then primary key) instead of a composite key:
      reversing only the primary pass keeps the id tie-break ascending
"""

from game_collection.core.domain_types import TEXT_FIELDS
from game_collection.core.filter_spec import SortSpec
from game_collection.core.game_record import GameRecord


def _primary_key(record: GameRecord, spec: SortSpec):
    value = record.value_of(spec.field.record_field)
    if spec.field.record_field in TEXT_FIELDS:
        return value.lower()
    return value


def order_records(records: list[GameRecord], spec: SortSpec) -> list[GameRecord]:
    """Return records sorted per spec. Pure, stable, never raises."""
    by_id = sorted(records, key=lambda r: str(r.id))
    present = [r for r in by_id if _primary_key(r, spec) is not None]
    absent = [r for r in by_id if _primary_key(r, spec) is None]
    present.sort(key=lambda r: _primary_key(r, spec), reverse=spec.descending)
    return present + absent
