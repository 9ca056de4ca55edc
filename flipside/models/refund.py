from sqlmodel import SQLModel, Field

class RefundBase(SQLModel):
    gross_amount: float
    refund_type: str
    fv_fixed_credit: float
    fv_variable_credit: float
    ebay_tax_refunded: float
    net_amount: float
    date: str

class Refund(RefundBase, table=True):
    __tablename__ = "refunds"
    id: int = Field(primary_key=True)
