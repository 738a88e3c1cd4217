"""Display formatting helpers."""

import math
from datetime import datetime, timezone
from typing import Optional, Union

from babel.numbers import format_currency as babel_format_currency

INVALID_DATE = "Invalid Date"


def class_names(*classes: Optional[str]) -> str:
    """Join the truthy class names with single spaces."""
    return " ".join(c for c in classes if c)


def shorten_address(address: str, start_chars: int = 4, end_chars: Optional[int] = None) -> str:
    """Shorten an address by replacing its middle with an ellipsis.

    Args:
        address: Address to shorten
        start_chars: Characters kept at the start
        end_chars: Characters kept at the end (defaults to start_chars)
    """
    if end_chars is None:
        end_chars = start_chars
    if len(address) <= start_chars + end_chars:
        return address
    tail = address[-end_chars:] if end_chars else ""
    return f"{address[:start_chars]}...{tail}"


def _parse_timestamp(value: str) -> Optional[datetime]:
    if not isinstance(value, str) or not value:
        return None
    text = value.strip()
    if text.endswith(("Z", "z")):
        text = text[:-1] + "+00:00"
    try:
        parsed = datetime.fromisoformat(text)
    except ValueError:
        return None
    # Offset-less timestamps are treated as UTC
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed


def _plural(count: int, unit: str) -> str:
    return f"{count} {unit}{'' if count == 1 else 's'}"


def calculate_duration(start_iso: str, end_iso: str) -> str:
    """Describe the time between two ISO 8601 timestamps.

    Returns whole seconds below a minute, whole minutes below an hour and
    whole hours otherwise, e.g. "30 seconds", "1 minute", "3 hours".
    Returns "Invalid Date" if either timestamp cannot be parsed.
    """
    start = _parse_timestamp(start_iso)
    end = _parse_timestamp(end_iso)
    if start is None or end is None:
        return INVALID_DATE

    seconds = math.floor((end - start).total_seconds())
    if seconds < 60:
        return _plural(seconds, "second")

    minutes = seconds // 60
    if minutes < 60:
        return _plural(minutes, "minute")

    return _plural(minutes // 60, "hour")


def format_currency(value: Union[int, float], currency: str = "NGN", locale: str = "en-NG") -> str:
    """Format a number as a currency string for a locale.

    Accepts BCP 47 locale tags ("en-NG") as well as POSIX ones ("en_NG").
    """
    return babel_format_currency(value, currency, locale=locale.replace("-", "_"))


def format_number_with_commas(num: Union[int, float]) -> str:
    """Insert thousands separators into the integer part of a number."""
    text = str(num)
    sign = "-" if text.startswith("-") else ""
    integer, dot, fraction = text.lstrip("-").partition(".")
    if not integer.isdigit():
        return text
    return f"{sign}{int(integer):,}{dot}{fraction}"
