import uuid
from sqlmodel import SQLModel, Field

class InvoiceBase(SQLModel):
    customer_id: str
    amount: int
    status: str
    date: str

class Invoice(InvoiceBase, table=True):
    __tablename__ = "invoices"
    id: uuid.UUID = Field(default_factory=uuid.uuid4, primary_key=True)
