"""Time-based nonces for request correlation.

A nonce is the current time in milliseconds in base36, followed by random
base36 characters. It sorts roughly by creation time and rarely collides,
but it is NOT a security token.
"""

import random
import string
import time

BASE36_ALPHABET = string.digits + string.ascii_lowercase

_rng = random.SystemRandom()


def to_base36(value: int) -> str:
    """Encode a non-negative integer in base36 (0-9a-z)."""
    if value < 0:
        raise ValueError("base36 encoding requires a non-negative integer")
    if value == 0:
        return "0"

    digits = []
    while value:
        value, remainder = divmod(value, 36)
        digits.append(BASE36_ALPHABET[remainder])
    return "".join(reversed(digits))


def generate_time_based_nonce(length: int = 16) -> str:
    """Generate a nonce string.

    Args:
        length: Number of random base36 characters to append

    Returns:
        base36(current time in ms) + random component
    """
    if length < 0:
        raise ValueError("length must be non-negative")

    time_component = to_base36(time.time_ns() // 1_000_000)
    random_component = "".join(_rng.choices(BASE36_ALPHABET, k=length))
    return time_component + random_component
