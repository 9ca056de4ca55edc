"""Fakes and row builders shared by the tests."""

from __future__ import annotations

from typing import Any


class RecordingAgent:
    """Stands in for PostgresAgent and remembers every statement it was asked to run."""

    def __init__(self, fail_on: int | None = None) -> None:
        self.calls: list[tuple[str, Any]] = []
        self.fail_on = fail_on

    def _record(self, name: str, payload: Any) -> None:
        if self.fail_on is not None and len(self.calls) + 1 == self.fail_on:
            raise RuntimeError("connection reset by peer")
        self.calls.append((name, payload))

    async def insert_order(self, order: Any) -> None:
        self._record("insert_order", order)

    async def insert_purchase(self, purchase: Any) -> None:
        self._record("insert_purchase", purchase)

    async def insert_refund(self, refund: Any) -> None:
        self._record("insert_refund", refund)

    async def insert_invoice(self, invoice: Any) -> None:
        self._record("insert_invoice", invoice)

    async def update_order(self, order_number: str, order: Any) -> None:
        self._record("update_order", (order_number, order))

    async def delete_order(self, order_number: str) -> None:
        self._record("delete_order", order_number)


class BrokenAgent:
    """Every statement fails the way a dropped database connection would."""

    def __getattr__(self, name: str) -> Any:
        async def fail(*args: Any, **kwargs: Any) -> None:
            raise ConnectionError("could not connect to server")

        return fail


def order_row(**overrides: Any) -> dict[str, Any]:
    row: dict[str, Any] = {
        "order_number": "12-10000-00001",
        "date": 44927,
        "item_title": "Vintage Pyrex Bowl",
        "item_id": 256000000001,
        "buyer_username": "thrifty_buyer",
        "buyer_name": "Dana Smith",
        "city": "Portland",
        "state": "OR",
        "zip": 97201,
        "quantity": 1,
        "item_subtotal": 45.0,
        "shipping_handling": 12.5,
        "ebay_collected_tax": 3.6,
        "fv_fixed": 0.3,
        "fv_variable": 7.73,
        "international_fee": 0,
        "gross_amount": 61.1,
        "net_amount": 49.47,
    }
    row.update(overrides)
    return row


def purchase_row(**overrides: Any) -> dict[str, Any]:
    row: dict[str, Any] = {
        "item_id": 1001,
        "date": 44930.25,
        "platform": "Goodwill",
        "seller_username": "gw_store_42",
        "listing_title": "Lot of 3 Pyrex Bowls",
        "individual_price": 12.99,
        "quantity": 3,
        "shipping_price": 9.5,
        "tax": 1.2,
        "total": 49.67,
        "amount_refunded": 0,
    }
    row.update(overrides)
    return row


def refund_row(**overrides: Any) -> dict[str, Any]:
    row: dict[str, Any] = {
        "id": 7001,
        "gross_amount": 61.1,
        "refund_type": "Full",
        "fv_fixed_credit": 0.3,
        "fv_variable_credit": 7.73,
        "ebay_tax_refunded": 3.6,
        "net_amount": 49.47,
        "date": 44940,
    }
    row.update(overrides)
    return row
