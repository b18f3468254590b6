"""
Group parsed program rows by training day and order them within each day.
"""

import math
import re

# Mirrors parseInt: optional sign followed by leading digits, rest ignored
ORDER_NR_RE = re.compile(r"^\s*([+-]?\d+)")


def order_number(record):
    """
    Numeric sort key for a record's activityOrderNr.

    Missing or non-numeric values sort last (math.inf) so they keep their
    relative parse order after all numbered rows.
    """
    match = ORDER_NR_RE.match(record.get("activityOrderNr", "") or "")
    if not match:
        return math.inf
    return int(match.group(1))


def group_by_day(records):
    """
    Bucket records by activityDay.

    Days keep first-seen order. Each bucket is stably sorted by order number,
    so rows sharing an order number stay in parse order.

    Args:
        records: Parsed records from parse_csv

    Returns:
        Dict of day name -> list of records
    """
    grouped = {}
    for record in records:
        grouped.setdefault(record.get("activityDay", ""), []).append(record)

    return {day: sorted(rows, key=order_number) for day, rows in grouped.items()}
