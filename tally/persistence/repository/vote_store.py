"""PostgreSQL implementation of the vote store."""

import asyncio
from typing import Any, Optional

import logfire
from sqlalchemy import Table, Update, and_, func, literal, select, update
from sqlalchemy.dialects.postgresql import UUID
from sqlalchemy.dialects.postgresql import insert as pg_insert
from sqlalchemy.ext.asyncio import AsyncSession

from tally.domain.model import Votable, VoteTransition
from tally.domain.repository import VoteStore
from tally.domain.value import (
    CounterDelta,
    EntityId,
    UpdateResult,
    VotableType,
    VoterId,
    VoteValue,
)
from tally.persistence.mappers import row_to_votable, votable_to_dict
from tally.persistence.tables import comments_table, posts_table, users_table

TABLES: dict[VotableType, Table] = {
    VotableType.POST: posts_table,
    VotableType.COMMENT: comments_table,
    VotableType.USER: users_table,
}


def _voter_ids_column(table: Table, value: VoteValue) -> Any:
    return table.c.up_voter_ids if value is VoteValue.UP else table.c.down_voter_ids


def _counter_values(table: Table, delta: CounterDelta) -> dict[str, Any]:
    return {name: table.c[name] + amount for name, amount in delta.non_zero().items()}


def build_conditional_update(
    table: Table, entity_id: EntityId, transition: VoteTransition
) -> Update:
    """Build the single guarded UPDATE statement for a transition.

    Membership checks use the array containment operator, so the guard and
    the mutation are evaluated by Postgres under the same row lock.
    """
    guard = transition.guard
    voter: list[VoterId] = [guard.voter_id]

    conditions = [table.c.id == entity_id]
    if guard.present_in is not None:
        conditions.append(_voter_ids_column(table, guard.present_in).contains(voter))
    for side in sorted(guard.absent_from):
        conditions.append(~_voter_ids_column(table, side).contains(voter))

    values = _counter_values(table, transition.delta)
    voter_param = literal(guard.voter_id, UUID(as_uuid=True))
    if transition.remove_from is not None:
        column = _voter_ids_column(table, transition.remove_from)
        values[column.name] = func.array_remove(column, voter_param, type_=column.type)
    if transition.add_to is not None:
        column = _voter_ids_column(table, transition.add_to)
        values[column.name] = func.array_append(column, voter_param, type_=column.type)

    return update(table).where(and_(*conditions)).values(**values)


def build_increment(table: Table, entity_id: EntityId, delta: CounterDelta) -> Update:
    """Build an unconditional counter increment."""
    return (
        update(table)
        .where(table.c.id == entity_id)
        .values(**_counter_values(table, delta))
    )


class PostgresVoteStore(VoteStore):
    """PostgreSQL implementation of VoteStore.

    All statements share the request's session. An AsyncSession must not be
    used by concurrent tasks, so access is serialized with a lock; ancestor
    increments run in savepoints so a failure cannot abort the transaction
    holding the primary vote.
    """

    def __init__(self, session: AsyncSession) -> None:
        """Initialize store with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session
        self._lock = asyncio.Lock()

    async def find_by_id(
        self, votable_type: VotableType, entity_id: EntityId
    ) -> Optional[Votable]:
        """Find a votable entity by ID."""
        table = TABLES[votable_type]
        stmt = select(table).where(table.c.id == entity_id)
        async with self._lock:
            result = await self.session.execute(stmt)
            row = result.fetchone()
        return row_to_votable(votable_type, row._asdict()) if row else None

    async def save(self, entity: Votable) -> Votable:
        """Insert an entity, or replace it if the ID exists."""
        table = TABLES[entity.votable_type]
        data = votable_to_dict(entity)
        stmt = (
            pg_insert(table)
            .values(**data)
            .on_conflict_do_update(index_elements=[table.c.id], set_=data)
        )
        async with self._lock:
            await self.session.execute(stmt)
            await self.session.flush()
        return entity

    async def conditional_update(
        self,
        votable_type: VotableType,
        entity_id: EntityId,
        transition: VoteTransition,
    ) -> UpdateResult:
        """Apply a vote transition if its guard holds, in one statement."""
        with logfire.span(
            "vote_store.conditional_update",
            votable_type=votable_type.value,
            entity_id=str(entity_id),
            intent=transition.intent.value,
        ):
            stmt = build_conditional_update(TABLES[votable_type], entity_id, transition)
            async with self._lock:
                result = await self.session.execute(stmt)
                await self.session.flush()
            count = result.rowcount  # type: ignore[attr-defined]
            return UpdateResult(matched=count > 0, count=count)

    async def increment(
        self,
        votable_type: VotableType,
        entity_id: EntityId,
        delta: CounterDelta,
    ) -> None:
        """Unconditionally increment counters inside a savepoint."""
        if delta.is_empty():
            return

        stmt = build_increment(TABLES[votable_type], entity_id, delta)
        async with self._lock:
            async with self.session.begin_nested():
                result = await self.session.execute(stmt)

        if result.rowcount == 0:  # type: ignore[attr-defined]
            logfire.warn(
                "Increment target not found",
                votable_type=votable_type.value,
                entity_id=str(entity_id),
            )
