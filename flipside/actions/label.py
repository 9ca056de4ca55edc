from typing import Any, Mapping
from loguru import logger

from flipside import paths
from flipside.agents.postgres import PostgresAgent, default_agent
from flipside.cache import revalidate_path
from flipside.schemas.label import LabelData, LabelUpdate
from flipside.schemas.state import LabelState
from flipside.utils.numbers import parse_float

def read_label_form(form: Mapping[str, Any]):
    return {
        "shipping_service": form.get("shipping_service"),
        "cost": parse_float(form.get("cost")),
        "date": form.get("date"),
        "buyer_username": form.get("buyer_username"),
        "notes": form.get("notes", ""),
    }

async def create_label(order_number: str, prev_state: LabelState | None, form: Mapping[str, Any], agent: PostgresAgent | None = None) -> LabelState:
    fields = read_label_form(form)
    fields["tracking_number"] = form.get("tracking_number")
    fields["order_number"] = order_number
    label, errors = LabelData.safe_parse(fields)
    if errors:
        logger.warning("Label for order {} rejected: {}", order_number, errors)
        return LabelState(errors=errors, message="Missing Fields. Failed to Create Label.")

    try:
        await (agent or default_agent()).insert_label(label)
    except Exception:
        logger.exception("Failed to create label for order {}", order_number)
        return LabelState(message="Database Error: Failed to Create Label.")

    revalidate_path(paths.labels(order_number))
    return LabelState(message="Created Label.", redirect=paths.labels(order_number))

async def update_label(tracking_number: str, order_number: str, prev_state: LabelState | None, form: Mapping[str, Any], agent: PostgresAgent | None = None) -> LabelState:
    label, errors = LabelUpdate.safe_parse(read_label_form(form))
    if errors:
        logger.warning("Label {} update rejected: {}", tracking_number, errors)
        return LabelState(errors=errors, message="Missing Fields. Failed to Update Label.")

    try:
        await (agent or default_agent()).update_label(tracking_number, label)
    except Exception:
        logger.exception("Failed to update label {}", tracking_number)
        return LabelState(message="Database Error: Failed to Update Label.")

    revalidate_path(paths.labels(order_number))
    return LabelState(message="Updated Label.", redirect=paths.labels(order_number))

async def delete_label(tracking_number: str, order_number: str, agent: PostgresAgent | None = None) -> LabelState:
    try:
        await (agent or default_agent()).delete_label(tracking_number)
    except Exception:
        logger.exception("Failed to delete label {}", tracking_number)
        return LabelState(message="Database Error: Failed to Delete Label.")

    revalidate_path(paths.labels(order_number))
    return LabelState(message="Deleted Label.")
