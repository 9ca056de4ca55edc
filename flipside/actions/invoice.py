from datetime import date
from typing import Any, Mapping
from loguru import logger

from flipside import paths
from flipside.agents.postgres import PostgresAgent, default_agent
from flipside.cache import revalidate_path
from flipside.models.invoice import InvoiceBase
from flipside.schemas.invoice import InvoiceForm
from flipside.schemas.state import InvoiceState

def _invoice_fields(form: Mapping[str, Any]):
    return {
        "customer_id": form.get("customer_id"),
        "amount": form.get("amount"),
        "status": form.get("status"),
    }

async def create_invoice(prev_state: InvoiceState | None, form: Mapping[str, Any], agent: PostgresAgent | None = None) -> InvoiceState:
    invoice, errors = InvoiceForm.safe_parse(_invoice_fields(form))
    if errors:
        logger.warning("Invoice create rejected: {}", errors)
        return InvoiceState(errors=errors, message="Missing Fields. Failed to Create Invoice.")

    try:
        await (agent or default_agent()).insert_invoice(InvoiceBase(
            customer_id=invoice.customer_id,
            amount=invoice.amount_in_cents,
            status=invoice.status,
            date=date.today().isoformat(),
        ))
    except Exception:
        logger.exception("Failed to create invoice")
        return InvoiceState(message="Database Error: Failed to Create Invoice.")

    revalidate_path(paths.INVOICES)
    return InvoiceState(message="Created Invoice.", redirect=paths.INVOICES)

async def update_invoice(invoice_id: str, prev_state: InvoiceState | None, form: Mapping[str, Any], agent: PostgresAgent | None = None) -> InvoiceState:
    invoice, errors = InvoiceForm.safe_parse(_invoice_fields(form))
    if errors:
        logger.warning("Invoice {} update rejected: {}", invoice_id, errors)
        return InvoiceState(errors=errors, message="Missing Fields. Failed to Update Invoice.")

    try:
        await (agent or default_agent()).update_invoice(
            invoice_id,
            customer_id=invoice.customer_id,
            amount=invoice.amount_in_cents,
            status=invoice.status,
        )
    except Exception:
        logger.exception("Failed to update invoice {}", invoice_id)
        return InvoiceState(message="Database Error: Failed to Update Invoice.")

    revalidate_path(paths.INVOICES)
    return InvoiceState(message="Updated Invoice.", redirect=paths.INVOICES)

async def delete_invoice(invoice_id: str, agent: PostgresAgent | None = None) -> InvoiceState:
    try:
        await (agent or default_agent()).delete_invoice(invoice_id)
    except Exception:
        logger.exception("Failed to delete invoice {}", invoice_id)
        return InvoiceState(message="Database Error: Failed to Delete Invoice.")

    revalidate_path(paths.INVOICES)
    return InvoiceState(message="Deleted Invoice.")
