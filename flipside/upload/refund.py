from typing import Any, Iterable

from flipside import paths
from flipside.agents.postgres import PostgresAgent, default_agent
from flipside.schemas.refund import RefundData
from flipside.schemas.state import RefundState
from flipside.upload.base import normalize_date, upload_rows

async def upload_refunds(rows: Iterable[dict[str, Any]], agent: PostgresAgent | None = None) -> RefundState:
    agent = agent or default_agent()
    return await upload_rows("refund", rows, normalize_date, RefundData, agent.insert_refund, RefundState, paths.REFUNDS)
