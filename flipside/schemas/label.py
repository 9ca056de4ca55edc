from typing import Annotated, ClassVar
from pydantic import AfterValidator

from flipside.schemas.base import FormSchema, check_date

class LabelUpdate(FormSchema):
    shipping_service: str
    cost: float
    date: Annotated[str, AfterValidator(check_date)]
    buyer_username: str
    notes: str = ""

    error_messages: ClassVar[dict[str, str]] = {
        "tracking_number": "Please enter a valid tracking number.",
        "order_number": "Please enter a valid order number.",
        "shipping_service": "Please enter a valid shipping service.",
        "cost": "Please enter a valid cost.",
        "date": "Please enter a valid date.",
        "buyer_username": "Please enter a valid buyer username.",
        "notes": "Please enter valid notes.",
    }

class LabelData(LabelUpdate):
    tracking_number: str
    order_number: str
