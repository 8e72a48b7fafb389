"""SQL Game Store - GameStore adapter over a SQLAlchemy async session.

Invariants:
    - Predicate trees from core/predicates.py are compiled to WHERE clauses with the
      same semantics as their in-memory matches()
    - ORDER BY reproduces core/order_records.py: NULLs last in both directions,
      text lower-cased, id ascending as the final tie-break
    - lower() is the database's: on SQLite it folds ASCII only, so non-ASCII text
      may order differently from MemoryGameStore
    - Each mutation is committed on its own; any SQLAlchemy failure rolls the
      session back and surfaces as DatabaseError
    - group_count returns groups ordered by key (the store's natural order for ties)

Design Decisions:
    - icontains(autoescape=True): search text is literal, % and _ are not wildcards
    - Membership (genres/platforms) compiled to an IN-subquery on the child table,
      so a game with several matching members still appears once
"""

import functools
import logging
import uuid

from sqlalchemy import ColumnElement, and_, func, or_, select, true
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from game_collection.core.domain_types import (
    GameId, MULTI_VALUED_FIELDS, RecordField, TEXT_FIELDS,
)
from game_collection.core.errors import ResourceNotFoundError
from game_collection.core.filter_spec import SortSpec
from game_collection.core.game_record import GameDraft, GameRecord, ensure_utc
from game_collection.core.predicates import (
    AllOf, AnyOf, Clause, ContainsText, Equals, GamePredicate,
)
from game_collection.core.stats_snapshot import GroupCount
from game_collection.infrastructure.database import map_sqlalchemy_error
from game_collection.models.game import Game, GameGenre, GamePlatform

logger = logging.getLogger(__name__)

_MEMBERSHIP_MODELS = {
    RecordField.GENRES: GameGenre,
    RecordField.PLATFORMS: GamePlatform,
}


def _column(field: RecordField):
    return getattr(Game, field.value)


def _membership(field: RecordField, values: tuple) -> ColumnElement[bool]:
    model = _MEMBERSHIP_MODELS[field]
    return Game.id.in_(
        select(model.game_id).where(model.name.in_(values)),
    )


def compile_clause(clause: Clause) -> ColumnElement[bool]:
    """Translate a predicate clause into a SQL boolean expression."""
    if isinstance(clause, AllOf):
        if not clause.clauses:
            return true()
        return and_(*(compile_clause(c) for c in clause.clauses))
    if isinstance(clause, AnyOf):
        if clause.field in MULTI_VALUED_FIELDS:
            return _membership(clause.field, clause.values)
        return _column(clause.field).in_(clause.values)
    if isinstance(clause, Equals):
        if clause.field in MULTI_VALUED_FIELDS:
            return _membership(clause.field, (clause.value,))
        return _column(clause.field) == clause.value
    if isinstance(clause, ContainsText):
        return or_(*(
            _column(f).icontains(clause.needle, autoescape=True)
            for f in clause.fields
        ))
    raise TypeError(f"Unsupported predicate clause: {type(clause).__name__}")


def order_by_clauses(sort: SortSpec) -> list:
    column = _column(sort.field.record_field)
    key = func.lower(column) if sort.field.record_field in TEXT_FIELDS else column
    return [
        column.is_(None).asc(),
        key.desc() if sort.descending else key.asc(),
        Game.id.asc(),
    ]


def to_record(row: Game) -> GameRecord:
    return GameRecord(
        id=GameId(row.id),
        title=row.title,
        genres=tuple(g.name for g in row.genre_rows),
        platforms=tuple(p.name for p in row.platform_rows),
        publisher=row.publisher,
        developer=row.developer,
        release_year=row.release_year,
        metacritic_score=row.metacritic_score,
        play_hours=row.play_hours,
        completed=row.completed,
        favorite=row.favorite,
        created_at=ensure_utc(row.created_at),
        updated_at=ensure_utc(row.updated_at),
    )


def _store_operation(operation: str):
    """Roll back and map SQLAlchemy failures to DatabaseError."""
    def decorator(method):
        @functools.wraps(method)
        async def wrapper(self, *args, **kwargs):
            try:
                return await method(self, *args, **kwargs)
            except SQLAlchemyError as e:
                await self._session.rollback()
                logger.error(
                    f"Store {operation} failed: {e}",
                    extra={"operation": operation},
                )
                raise map_sqlalchemy_error(e, operation) from e
        return wrapper
    return decorator


class SqlGameStore:
    """GameStore over one AsyncSession (one per request)."""

    def __init__(self, session: AsyncSession):
        self._session = session

    @_store_operation("find")
    async def find(
        self, predicate: GamePredicate, sort: SortSpec,
    ) -> list[GameRecord]:
        result = await self._session.execute(
            select(Game)
            .where(compile_clause(predicate))
            .order_by(*order_by_clauses(sort)),
        )
        return [to_record(row) for row in result.scalars().all()]

    @_store_operation("count")
    async def count(self, predicate: GamePredicate) -> int:
        result = await self._session.execute(
            select(func.count()).select_from(Game).where(compile_clause(predicate)),
        )
        return result.scalar_one()

    @_store_operation("distinct_values")
    async def distinct_values(self, field: RecordField) -> set[str]:
        if field in MULTI_VALUED_FIELDS:
            column = _MEMBERSHIP_MODELS[field].name
        else:
            column = _column(field)
        result = await self._session.execute(select(column).distinct())
        return {v for v in result.scalars().all() if v is not None}

    @_store_operation("group_count")
    async def group_count(
        self, field: RecordField, multi_valued: bool,
    ) -> list[GroupCount]:
        if multi_valued:
            model = _MEMBERSHIP_MODELS[field]
            key, counted = model.name, model.id
        else:
            key, counted = _column(field), Game.id
        result = await self._session.execute(
            select(key, func.count(counted)).group_by(key).order_by(key),
        )
        return [GroupCount(k, n) for k, n in result.all()]

    @_store_operation("sum")
    async def sum(self, field: RecordField) -> float:
        result = await self._session.execute(
            select(func.coalesce(func.sum(_column(field)), 0)),
        )
        return float(result.scalar_one())

    @_store_operation("average")
    async def average(self, field: RecordField) -> float | None:
        column = _column(field)
        result = await self._session.execute(
            select(func.avg(column)).where(column.is_not(None)),
        )
        value = result.scalar_one_or_none()
        return float(value) if value is not None else None

    async def _get_row(self, game_id: GameId) -> Game | None:
        return await self._session.get(Game, game_id)

    @_store_operation("get")
    async def get(self, game_id: GameId) -> GameRecord | None:
        row = await self._get_row(game_id)
        return to_record(row) if row else None

    @_store_operation("insert")
    async def insert(self, draft: GameDraft) -> GameRecord:
        row = Game(
            id=uuid.uuid4(),
            title=draft.title,
            publisher=draft.publisher,
            developer=draft.developer,
            release_year=draft.release_year,
            metacritic_score=draft.metacritic_score,
            play_hours=draft.play_hours,
            completed=draft.completed,
            favorite=draft.favorite,
            created_at=draft.created_at,
            updated_at=draft.updated_at,
            genre_rows=[
                GameGenre(name=name, position=i) for i, name in enumerate(draft.genres)
            ],
            platform_rows=[
                GamePlatform(name=name, position=i)
                for i, name in enumerate(draft.platforms)
            ],
        )
        self._session.add(row)
        await self._session.commit()
        return to_record(row)

    @_store_operation("replace")
    async def replace(self, record: GameRecord) -> GameRecord:
        row = await self._get_row(record.id)
        if row is None:
            raise ResourceNotFoundError("Game", str(record.id))
        row.title = record.title
        row.publisher = record.publisher
        row.developer = record.developer
        row.release_year = record.release_year
        row.metacritic_score = record.metacritic_score
        row.play_hours = record.play_hours
        row.completed = record.completed
        row.favorite = record.favorite
        row.updated_at = record.updated_at
        if tuple(g.name for g in row.genre_rows) != record.genres:
            row.genre_rows = [
                GameGenre(name=name, position=i) for i, name in enumerate(record.genres)
            ]
        if tuple(p.name for p in row.platform_rows) != record.platforms:
            row.platform_rows = [
                GamePlatform(name=name, position=i)
                for i, name in enumerate(record.platforms)
            ]
        await self._session.commit()
        return to_record(row)

    @_store_operation("delete")
    async def delete(self, game_id: GameId) -> GameRecord:
        row = await self._get_row(game_id)
        if row is None:
            raise ResourceNotFoundError("Game", str(game_id))
        record = to_record(row)
        await self._session.delete(row)
        await self._session.commit()
        return record
