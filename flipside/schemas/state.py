from typing import Literal, Mapping
from pydantic import BaseModel, ValidationError

FieldErrors = dict[str, list[str]]

class FormState(BaseModel):
    """Result handed back to the form that submitted a mutation or upload.

    ``errors`` maps a field name to the messages to show under it, ``message``
    is the page-level feedback and ``redirect`` names the route the client
    should navigate to after a successful create or update.
    """
    errors: FieldErrors | None = None
    message: str | None = None
    redirect: str | None = None

class InvoiceState(FormState):
    kind: Literal["invoice"] = "invoice"

class OrderState(FormState):
    kind: Literal["order"] = "order"

class PurchaseState(FormState):
    kind: Literal["purchase"] = "purchase"

class RefundState(FormState):
    kind: Literal["refund"] = "refund"

class LabelState(FormState):
    kind: Literal["label"] = "label"

def flatten_errors(error: ValidationError, messages: Mapping[str, str] | None = None) -> FieldErrors:
    """Group pydantic errors by top-level field, one message per distinct failure."""
    messages = messages or {}
    field_errors: FieldErrors = {}
    for detail in error.errors():
        if not detail["loc"]:
            continue
        field = str(detail["loc"][0])
        message = messages.get(field, detail["msg"])
        bucket = field_errors.setdefault(field, [])
        if message not in bucket:
            bucket.append(message)
    return field_errors
