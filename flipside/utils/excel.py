import math
from datetime import datetime, timedelta

# Days between the 1900 spreadsheet epoch (with its phantom 1900-02-29) and 1970-01-01.
UNIX_EPOCH_SERIAL = 25569
SECONDS_PER_DAY = 86400
# Keeps fractions such as exactly noon from truncating one second short.
FRACTION_EPSILON = 0.0000001

def excel_serial_to_datetime(serial: float) -> datetime:
    """Convert a spreadsheet date serial into a naive local datetime."""
    whole_days = math.floor(serial)
    day = datetime(1970, 1, 1) + timedelta(days=whole_days - UNIX_EPOCH_SERIAL)

    fractional_day = serial - whole_days + FRACTION_EPSILON
    total_seconds = math.floor(SECONDS_PER_DAY * fractional_day)
    seconds = total_seconds % 60
    total_seconds -= seconds
    hours = total_seconds // 3600
    minutes = (total_seconds // 60) % 60

    return day + timedelta(hours=hours, minutes=minutes, seconds=seconds)

def format_serial_date(serial: float) -> str:
    return excel_serial_to_datetime(serial).strftime("%Y-%m-%d")
