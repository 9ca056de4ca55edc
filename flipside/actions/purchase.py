from typing import Any, Mapping
from loguru import logger

from flipside import paths
from flipside.agents.postgres import PostgresAgent, default_agent
from flipside.cache import revalidate_path
from flipside.schemas.purchase import PurchaseUpdate
from flipside.schemas.state import PurchaseState
from flipside.utils.numbers import parse_float, parse_int

def read_purchase_form(form: Mapping[str, Any]):
    return {
        "date": form.get("date"),
        "platform": form.get("platform"),
        "seller_username": form.get("seller_username"),
        "listing_title": form.get("listing_title"),
        "individual_price": parse_float(form.get("individual_price")),
        "quantity": parse_int(form.get("quantity")),
        "shipping_price": parse_float(form.get("shipping_price")),
        "tax": parse_float(form.get("tax")),
        "total": parse_float(form.get("total")),
        "amount_refunded": parse_float(form.get("amount_refunded")),
    }

async def update_purchase(item_id: str, prev_state: PurchaseState | None, form: Mapping[str, Any], agent: PostgresAgent | None = None) -> PurchaseState:
    purchase, errors = PurchaseUpdate.safe_parse(read_purchase_form(form))
    if errors:
        logger.warning("Purchase {} update rejected: {}", item_id, errors)
        return PurchaseState(errors=errors, message="Missing Fields. Failed to Update Purchase.")

    try:
        await (agent or default_agent()).update_purchase(item_id, purchase)
    except Exception:
        logger.exception("Failed to update purchase {}", item_id)
        return PurchaseState(message="Database Error: Failed to Update Purchase.")

    revalidate_path(paths.PURCHASES)
    return PurchaseState(message="Updated Purchase.", redirect=paths.PURCHASES)

async def delete_purchase(item_id: str, agent: PostgresAgent | None = None) -> PurchaseState:
    try:
        await (agent or default_agent()).delete_purchase(item_id)
    except Exception:
        logger.exception("Failed to delete purchase {}", item_id)
        return PurchaseState(message="Database Error: Failed to Delete Purchase.")

    revalidate_path(paths.PURCHASES)
    return PurchaseState(message="Deleted Purchase.")
