from typing import Any, Awaitable, Callable, Iterable
from loguru import logger

from flipside.cache import revalidate_path
from flipside.schemas.base import FormSchema
from flipside.schemas.state import FormState
from flipside.utils.excel import format_serial_date

def normalize_date(row: dict[str, Any]):
    value = row.get("date")
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        row["date"] = format_serial_date(value)
    return row

async def upload_rows(
    kind: str,
    rows: Iterable[dict[str, Any]],
    normalize: Callable[[dict[str, Any]], dict[str, Any]],
    schema: type[FormSchema],
    insert: Callable[[Any], Awaitable[Any]],
    state: type[FormState],
    listing_path: str,
):
    """Validate every row, then insert them one by one in input order.

    The first invalid row aborts the upload before anything is written. A
    failed insert stops the loop; rows inserted before it stay committed.
    """
    normalized = [normalize(dict(row)) for row in rows]
    logger.info("Uploading {} {} rows", len(normalized), kind)

    records = []
    for index, row in enumerate(normalized):
        record, errors = schema.safe_parse(row)
        if errors:
            logger.warning("Failed to upload {} data: row {} invalid: {}", kind, index + 1, errors)
            return state(errors=errors, message=f"Failed to upload {kind} data.")
        records.append(record)

    inserted = 0
    try:
        for record in records:
            await insert(record)
            inserted += 1
    except Exception:
        logger.exception("Failed to upload {} data after {} of {} rows", kind, inserted, len(records))
        return state(message=f"Database Error: Failed to upload {kind} data.")

    logger.info("Uploaded {} {} rows", inserted, kind)
    revalidate_path(listing_path)
    return state(message=f"Successfully uploaded {kind} data.")
