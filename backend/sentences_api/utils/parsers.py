"""Parsers for user supplied filter values.

Both helpers raise `ValueError` with a short message on bad input so
controllers can turn it into a 400 response.
"""

import re
from datetime import date, datetime
from ..models import Difficulty

ISO_DATE_FORMAT = "%Y-%m-%d"
_ISO_DATE_RE = re.compile(r"\d{4}-\d{2}-\d{2}", re.ASCII)


def parse_difficulty(value: str) -> Difficulty:
    """Return the `Difficulty` named by `value`, ignoring case.

    >>> parse_difficulty("medium")
    <Difficulty.MEDIUM: 'MEDIUM'>
    """
    if not isinstance(value, str) or not value.strip():
        raise ValueError("difficulty is required")
    try:
        return Difficulty[value.strip().upper()]
    except KeyError:
        allowed = ", ".join(d.value for d in Difficulty)
        raise ValueError(f"unknown difficulty '{value}'; expected one of {allowed}")


def parse_iso_date(value: str) -> date:
    """Parse a strict `YYYY-MM-DD` calendar date.

    Unpadded fields and surrounding whitespace are rejected.
    """
    if not isinstance(value, str):
        raise ValueError("date must be a string")
    if not _ISO_DATE_RE.fullmatch(value):
        raise ValueError(f"invalid date '{value}'; expected YYYY-MM-DD")
    try:
        return datetime.strptime(value, ISO_DATE_FORMAT).date()
    except ValueError:
        raise ValueError(f"invalid date '{value}'; expected YYYY-MM-DD")
