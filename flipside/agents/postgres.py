import uuid
from sqlalchemy import delete, update
from sqlalchemy.ext.asyncio import create_async_engine
from sqlmodel import SQLModel, select
from sqlmodel.ext.asyncio.session import AsyncSession

from flipside.config import settings
from flipside.models.invoice import Invoice, InvoiceBase
from flipside.models.label import Label
from flipside.models.order import Order
from flipside.models.purchase import Purchase
from flipside.models.refund import Refund
from flipside.models.user import User
from flipside.schemas.label import LabelData, LabelUpdate
from flipside.schemas.order import OrderData, OrderUpdate
from flipside.schemas.purchase import PurchaseData, PurchaseUpdate
from flipside.schemas.refund import RefundData

class PostgresAgent:
    """One session and one statement per call; nothing is held across calls."""

    def __init__(self, database_url: str | None = None, **engine_options):
        self.engine = create_async_engine(database_url or settings.DATABASE_URL, **engine_options)

    async def get_session(self):
        async with AsyncSession(self.engine) as session:
            yield session

    async def create_tables(self):
        async with self.engine.begin() as conn:
            await conn.run_sync(SQLModel.metadata.create_all)

    async def dispose(self):
        await self.engine.dispose()

    async def _add(self, row: SQLModel):
        async for db in self.get_session():
            db.add(row)
            await db.commit()
            await db.refresh(row)
        return row

    async def _execute(self, statement):
        async for db in self.get_session():
            await db.exec(statement)
            await db.commit()

    async def _all(self, statement):
        rows = []
        async for db in self.get_session():
            rows = list((await db.exec(statement)).all())
        return rows

    # invoices

    async def insert_invoice(self, invoice: InvoiceBase):
        return await self._add(Invoice(**invoice.model_dump()))

    async def update_invoice(self, invoice_id: str, customer_id: str, amount: int, status: str):
        await self._execute(
            update(Invoice)
            .where(Invoice.id == uuid.UUID(invoice_id))
            .values(customer_id=customer_id, amount=amount, status=status)
        )

    async def delete_invoice(self, invoice_id: str):
        await self._execute(delete(Invoice).where(Invoice.id == uuid.UUID(invoice_id)))

    async def list_invoices(self):
        return await self._all(select(Invoice).order_by(Invoice.date.desc()))

    # orders

    async def insert_order(self, order: OrderData):
        return await self._add(Order(**order.model_dump()))

    async def update_order(self, order_number: str, order: OrderUpdate):
        await self._execute(
            update(Order).where(Order.order_number == order_number).values(**order.model_dump())
        )

    async def delete_order(self, order_number: str):
        await self._execute(delete(Order).where(Order.order_number == order_number))

    async def list_orders(self):
        return await self._all(select(Order).order_by(Order.date.desc()))

    # purchases

    async def insert_purchase(self, purchase: PurchaseData):
        return await self._add(Purchase(**purchase.model_dump()))

    async def update_purchase(self, item_id: str, purchase: PurchaseUpdate):
        await self._execute(
            update(Purchase).where(Purchase.item_id == item_id).values(**purchase.model_dump())
        )

    async def delete_purchase(self, item_id: str):
        await self._execute(delete(Purchase).where(Purchase.item_id == item_id))

    async def list_purchases(self):
        return await self._all(select(Purchase).order_by(Purchase.date.desc()))

    # refunds

    async def insert_refund(self, refund: RefundData):
        return await self._add(Refund(**refund.model_dump()))

    async def list_refunds(self):
        return await self._all(select(Refund).order_by(Refund.date.desc()))

    # labels

    async def insert_label(self, label: LabelData):
        return await self._add(Label(**label.model_dump()))

    async def update_label(self, tracking_number: str, label: LabelUpdate):
        await self._execute(
            update(Label).where(Label.tracking_number == tracking_number).values(**label.model_dump())
        )

    async def delete_label(self, tracking_number: str):
        await self._execute(delete(Label).where(Label.tracking_number == tracking_number))

    async def list_labels(self, order_number: str):
        return await self._all(
            select(Label).where(Label.order_number == order_number).order_by(Label.date.desc())
        )

    # users

    async def insert_user(self, email: str, password_hash: str):
        return await self._add(User(email=email, password=password_hash))

    async def get_user_by_email(self, email: str):
        async for db in self.get_session():
            statement = select(User).where(User.email == email)
            result = (await db.exec(statement)).first()
        return result


_default_agent: PostgresAgent | None = None

def default_agent() -> PostgresAgent:
    """Process-wide agent for callers that are not handed one; built on first use."""
    global _default_agent
    if _default_agent is None:
        _default_agent = PostgresAgent()
    return _default_agent
