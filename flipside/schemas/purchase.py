from typing import Annotated, ClassVar
from pydantic import AfterValidator

from flipside.schemas.base import FormSchema, check_date

class PurchaseUpdate(FormSchema):
    date: Annotated[str, AfterValidator(check_date)]
    platform: str
    seller_username: str
    listing_title: str
    individual_price: float
    quantity: int
    shipping_price: float
    tax: float
    total: float
    amount_refunded: float

    error_messages: ClassVar[dict[str, str]] = {
        "item_id": "Please enter a valid item ID.",
        "date": "Please enter a valid date.",
        "platform": "Please enter a valid platform.",
        "seller_username": "Please enter a valid seller username.",
        "listing_title": "Please enter a valid listing title.",
        "individual_price": "Please enter a valid individual price.",
        "quantity": "Please enter a valid quantity.",
        "shipping_price": "Please enter a valid shipping price.",
        "tax": "Please enter a valid tax.",
        "total": "Please enter a valid total.",
        "amount_refunded": "Please enter a valid amount refunded.",
    }

class PurchaseData(PurchaseUpdate):
    item_id: str
