"""Utility modules for noblocks."""

from noblocks.utils.formatting import (
    calculate_duration,
    format_currency,
    shorten_address,
)
from noblocks.utils.nonce import generate_time_based_nonce

__all__ = [
    "calculate_duration",
    "format_currency",
    "generate_time_based_nonce",
    "shorten_address",
]
