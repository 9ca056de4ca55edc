from decimal import Decimal, InvalidOperation, ROUND_HALF_UP
from typing import Annotated, Any, ClassVar, Literal
from pydantic import BeforeValidator, Field

from flipside.schemas.base import FormSchema

def coerce_amount(value: Any):
    if value is None or (isinstance(value, str) and not value.strip()):
        return Decimal(0)
    if isinstance(value, bool):
        return Decimal(int(value))
    try:
        return Decimal(str(value).strip())
    except InvalidOperation:
        return value

class InvoiceForm(FormSchema):
    customer_id: str
    amount: Annotated[Decimal, BeforeValidator(coerce_amount), Field(gt=0, decimal_places=2)]
    status: Literal["pending", "paid"]

    error_messages: ClassVar[dict[str, str]] = {
        "customer_id": "Please select a customer.",
        "amount": "Please enter an amount greater than $0.",
        "status": "Please select an invoice status.",
    }

    @property
    def amount_in_cents(self) -> int:
        return int((self.amount * 100).quantize(Decimal(1), rounding=ROUND_HALF_UP))
