"""Random values for unique page titles and fuzzed block content."""

from __future__ import annotations

import random
import string

_CHARACTERS = string.ascii_uppercase + string.ascii_lowercase + string.digits


def random_string(length: int) -> str:
    """Return *length* random ASCII letters and digits."""
    if length < 0:
        msg = f"length must be non-negative, got {length}"
        raise ValueError(msg)
    return "".join(random.choice(_CHARACTERS) for _ in range(length))


def random_int(min_value: int, max_value: int) -> int:
    """Return a random integer in the inclusive range [min_value, max_value]."""
    if min_value > max_value:
        msg = f"min_value ({min_value}) is greater than max_value ({max_value})"
        raise ValueError(msg)
    return random.randint(min_value, max_value)


def random_boolean() -> bool:
    return random.random() < 0.5
