from sqlmodel import SQLModel, Field

class LabelBase(SQLModel):
    order_number: str = Field(index=True)
    shipping_service: str
    cost: float
    date: str
    buyer_username: str
    notes: str = Field(default="")

class Label(LabelBase, table=True):
    __tablename__ = "labels"
    tracking_number: str = Field(primary_key=True)
