import re
from datetime import date, datetime
from typing import Dict, Iterable, List

from shared import config

from .models import OrderLine

DATE_FORMAT = "%d/%m/%Y"
_DATE_PATTERN = re.compile(r"\d{2}/\d{2}/\d{4}")


class DateFormatError(ValueError):
    def __init__(self, text: str):
        self.text = text
        super().__init__(f"Invalid date {text!r}, expected dd/MM/yyyy")


class NoSalesError(ValueError):
    pass


def parse_date(text: str) -> date:
    if not isinstance(text, str) or not _DATE_PATTERN.fullmatch(text):
        raise DateFormatError(text)
    try:
        return datetime.strptime(text, DATE_FORMAT).date()
    except ValueError:
        raise DateFormatError(text) from None


def distinct_product_ids(entries: Iterable[OrderLine]) -> List[str]:
    seen: Dict[str, None] = {}
    for line in entries:
        seen.setdefault(line.product_id, None)
    return list(seen)


def pick_top_product(
    counts: Dict[str, int],
    names: Dict[str, str],
    unknown_name: str = config.UNKNOWN_PRODUCT_NAME,
) -> str:
    """
    Highest count wins; equal counts go to the alphabetically first name.
    Ids missing from ``names`` compete under ``unknown_name``.
    """
    if not counts:
        raise NoSalesError("No sales to pick a top product from")

    candidates = [(-count, names.get(pid, unknown_name)) for pid, count in counts.items()]
    _, name = min(candidates)
    return name
