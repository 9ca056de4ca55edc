from typing import Any, Iterable

from flipside import paths
from flipside.agents.postgres import PostgresAgent, default_agent
from flipside.schemas.purchase import PurchaseData
from flipside.schemas.state import PurchaseState
from flipside.upload.base import normalize_date, upload_rows
from flipside.utils.numbers import to_str

def normalize_purchase(row: dict[str, Any]):
    row["item_id"] = to_str(row.get("item_id"))
    return normalize_date(row)

async def upload_purchases(rows: Iterable[dict[str, Any]], agent: PostgresAgent | None = None) -> PurchaseState:
    agent = agent or default_agent()
    return await upload_rows("purchase", rows, normalize_purchase, PurchaseData, agent.insert_purchase, PurchaseState, paths.PURCHASES)
