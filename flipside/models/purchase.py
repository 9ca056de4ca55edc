from sqlmodel import SQLModel, Field

class PurchaseBase(SQLModel):
    date: str
    platform: str
    seller_username: str
    listing_title: str
    individual_price: float
    quantity: int
    shipping_price: float
    tax: float
    total: float
    amount_refunded: float

class Purchase(PurchaseBase, table=True):
    __tablename__ = "purchases"
    item_id: str = Field(primary_key=True)
