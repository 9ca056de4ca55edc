from typing import Annotated, ClassVar
from pydantic import AfterValidator

from flipside.schemas.base import FormSchema, check_date

class RefundData(FormSchema):
    id: int
    gross_amount: float
    refund_type: str
    fv_fixed_credit: float
    fv_variable_credit: float
    ebay_tax_refunded: float
    net_amount: float
    date: Annotated[str, AfterValidator(check_date)]

    error_messages: ClassVar[dict[str, str]] = {
        "id": "Please enter a valid refund ID.",
        "gross_amount": "Please enter a valid gross amount.",
        "refund_type": "Please select a refund type.",
        "fv_fixed_credit": "Please enter a valid fixed credit amount.",
        "fv_variable_credit": "Please enter a valid variable credit amount.",
        "ebay_tax_refunded": "Please enter a valid eBay tax refunded amount.",
        "net_amount": "Please enter a valid net amount.",
        "date": "Please enter a valid date.",
    }
