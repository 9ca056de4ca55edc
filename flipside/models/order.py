from sqlmodel import SQLModel, Field

class OrderBase(SQLModel):
    date: str
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

class Order(OrderBase, table=True):
    __tablename__ = "orders"
    order_number: str = Field(primary_key=True)
