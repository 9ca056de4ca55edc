from typing import Any, Iterable

from flipside import paths
from flipside.agents.postgres import PostgresAgent, default_agent
from flipside.schemas.order import OrderData
from flipside.schemas.state import OrderState
from flipside.upload.base import normalize_date, upload_rows
from flipside.utils.numbers import to_str

def normalize_order(row: dict[str, Any]):
    for name in ("item_id", "zip", "state"):
        row[name] = to_str(row.get(name))
    return normalize_date(row)

async def upload_orders(rows: Iterable[dict[str, Any]], agent: PostgresAgent | None = None) -> OrderState:
    agent = agent or default_agent()
    return await upload_rows("order", rows, normalize_order, OrderData, agent.insert_order, OrderState, paths.SALES)
