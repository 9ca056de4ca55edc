from typing import Annotated, ClassVar
from pydantic import AfterValidator

from flipside.schemas.base import FormSchema, check_date

class OrderUpdate(FormSchema):
    date: Annotated[str, AfterValidator(check_date)]
    item_title: str
    item_id: str
    buyer_username: str
    buyer_name: str
    city: str
    state: str
    zip: str
    quantity: int
    item_subtotal: float
    shipping_handling: float
    ebay_collected_tax: float
    fv_fixed: float
    fv_variable: float
    international_fee: float
    gross_amount: float
    net_amount: float

    error_messages: ClassVar[dict[str, str]] = {
        "order_number": "Please enter a valid order number.",
        "date": "Please enter a valid date.",
        "item_title": "Please enter a valid item title.",
        "item_id": "Please enter a valid item ID.",
        "buyer_username": "Please enter a valid buyer username.",
        "buyer_name": "Please enter a valid buyer name.",
        "city": "Please enter a valid city.",
        "state": "Please enter a valid state.",
        "zip": "Please enter a valid ZIP code.",
        "quantity": "Please enter a valid quantity.",
        "item_subtotal": "Please enter a valid item subtotal.",
        "shipping_handling": "Please enter a valid shipping and handling cost.",
        "ebay_collected_tax": "Please enter a valid eBay collected tax.",
        "fv_fixed": "Please enter a valid fixed final value fee.",
        "fv_variable": "Please enter a valid variable final value fee.",
        "international_fee": "Please enter a valid international fee.",
        "gross_amount": "Please enter a valid gross amount.",
        "net_amount": "Please enter a valid net amount.",
    }

class OrderData(OrderUpdate):
    order_number: str
