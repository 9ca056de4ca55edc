"""Shared test fixtures."""

from __future__ import annotations

import asyncio
from pathlib import Path

import pytest
from sqlalchemy.pool import NullPool

from flipside.agents.postgres import PostgresAgent
from flipside.cache import view_cache


def create_agent(tmp_path: Path) -> PostgresAgent:
    """File-backed SQLite agent with every table created."""
    agent = PostgresAgent(f"sqlite+aiosqlite:///{tmp_path / 'flipside.db'}", poolclass=NullPool)
    asyncio.run(agent.create_tables())
    return agent


@pytest.fixture
def agent(tmp_path: Path) -> PostgresAgent:
    return create_agent(tmp_path)


@pytest.fixture(autouse=True)
def _clear_view_cache() -> None:
    """The listing cache is process-wide, so start every test without entries."""
    view_cache.clear()
