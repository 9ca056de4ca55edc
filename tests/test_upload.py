from __future__ import annotations

import asyncio

from flipside import paths
from flipside.agents.postgres import PostgresAgent
from flipside.cache import view_cache
from flipside.upload.order import normalize_order, upload_orders
from flipside.upload.purchase import upload_purchases
from flipside.upload.refund import upload_refunds
from helpers import BrokenAgent, RecordingAgent, order_row, purchase_row, refund_row


def test_normalize_order_converts_serial_and_identifiers() -> None:
    row = normalize_order(order_row(date=44927.5, zip=97201.0))

    assert row["date"] == "2023-01-01"
    assert row["item_id"] == "256000000001"
    assert row["zip"] == "97201"
    assert row["state"] == "OR"


def test_string_dates_are_left_alone() -> None:
    row = normalize_order(order_row(date="2023-03-04"))

    assert row["date"] == "2023-03-04"


def test_unpadded_string_date_is_normalized_on_upload() -> None:
    recorder = RecordingAgent()

    state = asyncio.run(upload_orders([order_row(date="2023-1-5")], recorder))

    assert state.message == "Successfully uploaded order data."
    assert [order.date for _, order in recorder.calls] == ["2023-01-05"]


def test_valid_orders_are_inserted_in_input_order() -> None:
    recorder = RecordingAgent()
    rows = [order_row(order_number=f"12-10000-0000{i}", date=44927 + i) for i in range(3)]

    state = asyncio.run(upload_orders(rows, recorder))

    assert state.message == "Successfully uploaded order data."
    assert state.errors is None
    assert [name for name, _ in recorder.calls] == ["insert_order"] * 3
    assert [order.order_number for _, order in recorder.calls] == [
        "12-10000-00000",
        "12-10000-00001",
        "12-10000-00002",
    ]
    assert [order.date for _, order in recorder.calls] == ["2023-01-01", "2023-01-02", "2023-01-03"]


def test_invalid_middle_row_persists_nothing() -> None:
    recorder = RecordingAgent()
    rows = [
        order_row(order_number="a"),
        order_row(order_number="b", quantity="one", buyer_name=None),
        order_row(order_number="c"),
    ]

    state = asyncio.run(upload_orders(rows, recorder))

    assert recorder.calls == []
    assert state.message == "Failed to upload order data."
    assert state.errors == {
        "quantity": ["Please enter a valid quantity."],
        "buyer_name": ["Please enter a valid buyer name."],
    }


def test_first_invalid_row_is_the_one_reported() -> None:
    rows = [
        order_row(order_number="a"),
        order_row(order_number="b", city=12),
        order_row(order_number="c", net_amount="lots"),
    ]

    state = asyncio.run(upload_orders(rows, RecordingAgent()))

    assert state.errors == {"city": ["Please enter a valid city."]}


def test_insert_failure_keeps_earlier_rows_and_hides_cause() -> None:
    recorder = RecordingAgent(fail_on=2)
    rows = [order_row(order_number=str(i)) for i in range(3)]

    state = asyncio.run(upload_orders(rows, recorder))

    assert state.message == "Database Error: Failed to upload order data."
    assert state.errors is None
    assert [order.order_number for _, order in recorder.calls] == ["0"]


def test_upload_orders_into_database(agent: PostgresAgent) -> None:
    asyncio.run(view_cache.get_or_load(paths.SALES, agent.list_orders))
    rows = [order_row(order_number="1"), order_row(order_number="2", date=44928)]

    state = asyncio.run(upload_orders(rows, agent))

    stored = sorted(asyncio.run(agent.list_orders()), key=lambda o: o.order_number)
    assert state.message == "Successfully uploaded order data."
    assert [(o.order_number, o.date, o.zip) for o in stored] == [("1", "2023-01-01", "97201"), ("2", "2023-01-02", "97201")]
    assert paths.SALES not in view_cache


def test_duplicate_order_number_commits_rows_before_it(agent: PostgresAgent) -> None:
    rows = [order_row(order_number="1"), order_row(order_number="2"), order_row(order_number="1")]

    state = asyncio.run(upload_orders(rows, agent))

    assert state.message == "Database Error: Failed to upload order data."
    assert sorted(o.order_number for o in asyncio.run(agent.list_orders())) == ["1", "2"]


def test_upload_purchases() -> None:
    recorder = RecordingAgent()

    state = asyncio.run(upload_purchases([purchase_row(), purchase_row(item_id=1002.0)], recorder))

    assert state.kind == "purchase"
    assert state.message == "Successfully uploaded purchase data."
    assert [(p.item_id, p.date) for _, p in recorder.calls] == [("1001", "2023-01-04"), ("1002", "2023-01-04")]


def test_upload_purchases_rejects_text_price() -> None:
    state = asyncio.run(upload_purchases([purchase_row(individual_price="12.99")], RecordingAgent()))

    assert state.message == "Failed to upload purchase data."
    assert state.errors == {"individual_price": ["Please enter a valid individual price."]}


def test_upload_refunds(agent: PostgresAgent) -> None:
    state = asyncio.run(upload_refunds([refund_row(), refund_row(id=7002, refund_type="Partial")], agent))

    refunds = sorted(asyncio.run(agent.list_refunds()), key=lambda r: r.id)
    assert state.message == "Successfully uploaded refund data."
    assert [(r.id, r.refund_type, r.date) for r in refunds] == [(7001, "Full", "2023-01-14"), (7002, "Partial", "2023-01-14")]


def test_upload_refunds_database_error() -> None:
    state = asyncio.run(upload_refunds([refund_row()], BrokenAgent()))

    assert state.message == "Database Error: Failed to upload refund data."


def test_empty_upload_succeeds_without_inserts() -> None:
    recorder = RecordingAgent()

    state = asyncio.run(upload_refunds([], recorder))

    assert state.message == "Successfully uploaded refund data."
    assert recorder.calls == []
