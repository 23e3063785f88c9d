"""Tests for bucket_conditions / bucket_counts — evaluated by SQLite against a fixed today."""

from datetime import date, timedelta

import pytest
from sqlalchemy import (
    Boolean, Column, Date, Integer, MetaData, Table, insert, literal, select,
)
from sqlalchemy.ext.asyncio import create_async_engine
from sqlalchemy.pool import StaticPool

from planner.core.domain_types import TaskBucket
from planner.core.task_summary import bucket_conditions, bucket_counts

TODAY = date(2026, 10, 18)

rows_table = Table(
    "summary_rows", MetaData(),
    Column("id", Integer, primary_key=True),
    Column("completed", Boolean, nullable=False),
    Column("due_date", Date, nullable=True),
)


@pytest.fixture
async def engine():
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:", poolclass=StaticPool,
    )
    async with engine.begin() as conn:
        await conn.run_sync(rows_table.metadata.create_all)
    yield engine
    await engine.dispose()


async def _summarize(engine, rows: list[tuple[bool, date | None]]) -> dict:
    query = select(
        *bucket_counts(
            rows_table.c.completed, rows_table.c.due_date, literal(TODAY, Date),
        ),
    )
    async with engine.begin() as conn:
        await conn.execute(
            insert(rows_table),
            [{"completed": c, "due_date": d} for c, d in rows],
        )
        row = (await conn.execute(query)).one()
    return dict(row._mapping)


def test_conditions_cover_exactly_three_buckets():
    conditions = bucket_conditions(
        rows_table.c.completed, rows_table.c.due_date, literal(TODAY, Date),
    )
    assert set(conditions) == set(TaskBucket)


async def test_completed_wins_over_past_due_date(engine):
    counts = await _summarize(engine, [(True, TODAY - timedelta(days=5))])
    assert counts == {"completed": 1, "pending": 0, "overdue": 0}


async def test_no_due_date_is_pending(engine):
    counts = await _summarize(engine, [(False, None)])
    assert counts == {"completed": 0, "pending": 1, "overdue": 0}


async def test_due_today_is_pending_not_overdue(engine):
    counts = await _summarize(engine, [(False, TODAY)])
    assert counts == {"completed": 0, "pending": 1, "overdue": 0}


async def test_due_yesterday_is_overdue(engine):
    counts = await _summarize(engine, [(False, TODAY - timedelta(days=1))])
    assert counts == {"completed": 0, "pending": 0, "overdue": 1}


async def test_buckets_sum_to_total(engine):
    rows = [
        (True, None),
        (True, TODAY - timedelta(days=3)),
        (False, None),
        (False, TODAY + timedelta(days=1)),
        (False, TODAY - timedelta(days=1)),
    ]
    counts = await _summarize(engine, rows)
    assert counts == {"completed": 2, "pending": 2, "overdue": 1}
    assert sum(counts.values()) == len(rows)
