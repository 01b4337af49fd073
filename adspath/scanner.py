"""Marker Scanner - priority ordered search for structural markers."""

import string
from typing import Sequence

_ASCII_LOWER = str.maketrans(string.ascii_uppercase, string.ascii_lowercase)


def ascii_lower(value: str) -> str:
    """Lower-case ASCII letters only, so positions match the original string."""
    return value.translate(_ASCII_LOWER)


def first_marker_index(haystack: str, markers: Sequence[str], start: int = 0) -> int:
    """Return the position of the first marker, checked in priority order.

    Each marker is searched for case-insensitively from ``start``. The first
    marker in ``markers`` that occurs anywhere wins, even when a lower
    priority marker occurs earlier in ``haystack``.

    Args:
        haystack: String to search
        markers: Lower-case markers, highest priority first
        start: Position to start searching from

    Returns:
        Index of the winning marker or -1 when none occurs

    Examples:
        >>> first_marker_index("o=Org,cn=Name", ("cn=", "o="))
        6
    """
    lowered = ascii_lower(haystack)
    for marker in markers:
        index = lowered.find(marker, start)
        if index != -1:
            return index
    return -1
