from typing import Any, Mapping
from loguru import logger

from flipside import paths
from flipside.agents.postgres import PostgresAgent, default_agent
from flipside.cache import revalidate_path
from flipside.schemas.order import OrderUpdate
from flipside.schemas.state import OrderState
from flipside.utils.numbers import parse_float, parse_int

AMOUNT_FIELDS = (
    "item_subtotal",
    "shipping_handling",
    "ebay_collected_tax",
    "fv_fixed",
    "fv_variable",
    "international_fee",
    "gross_amount",
    "net_amount",
)
TEXT_FIELDS = ("date", "item_title", "item_id", "buyer_username", "buyer_name", "city", "state", "zip")

def read_order_form(form: Mapping[str, Any]):
    fields = {name: form.get(name) for name in TEXT_FIELDS}
    fields["quantity"] = parse_int(form.get("quantity"))
    for name in AMOUNT_FIELDS:
        fields[name] = parse_float(form.get(name))
    return fields

async def update_order(order_number: str, prev_state: OrderState | None, form: Mapping[str, Any], agent: PostgresAgent | None = None) -> OrderState:
    order, errors = OrderUpdate.safe_parse(read_order_form(form))
    if errors:
        logger.warning("Order {} update rejected: {}", order_number, errors)
        return OrderState(errors=errors, message="Missing or Invalid Fields. Failed to Update Order.")

    try:
        await (agent or default_agent()).update_order(order_number, order)
    except Exception:
        logger.exception("Failed to update order {}", order_number)
        return OrderState(message="Database Error: Failed to Update Order.")

    revalidate_path(paths.SALES)
    return OrderState(message="Updated Order.", redirect=paths.SALES)

async def delete_order(order_number: str, agent: PostgresAgent | None = None) -> OrderState:
    try:
        await (agent or default_agent()).delete_order(order_number)
    except Exception:
        logger.exception("Failed to delete order {}", order_number)
        return OrderState(message="Database Error: Failed to Delete Order.")

    revalidate_path(paths.SALES)
    return OrderState(message="Deleted Order.")
