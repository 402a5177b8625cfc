"""Edit distance between strings after confusable normalization."""

from __future__ import annotations

from typing import Mapping, Optional

from .confusables import as_confusable_map
from .levenshtein import levenshtein_distance

__all__ = [
    "confusable_similarity",
    "get_confusable_distance",
    "is_confusable_match",
]


def get_confusable_distance(a: str, b: str, table: Optional[Mapping[str, str]] = None) -> int:
    """Levenshtein distance between ``a`` and ``b`` once both are normalized.

        >>> get_confusable_distance("paypa1", "paypal")
        0
    """
    mapping = as_confusable_map(table)
    return levenshtein_distance(mapping.apply(a), mapping.apply(b))


def confusable_similarity(a: str, b: str, table: Optional[Mapping[str, str]] = None) -> float:
    """Score in ``[0, 1]``: ``1 - distance / longest length``.

    Normalization is length preserving, so the raw lengths are the normalized
    ones.
    """
    longest = max(len(a), len(b))
    if longest == 0:
        return 1.0
    return 1.0 - get_confusable_distance(a, b, table) / longest


def is_confusable_match(
    a: str,
    b: str,
    *,
    max_distance: Optional[int] = None,
    max_ratio: Optional[float] = None,
    table: Optional[Mapping[str, str]] = None,
) -> bool:
    """True when ``a`` and ``b`` are within the given thresholds.

    ``max_distance`` bounds the absolute distance, ``max_ratio`` bounds
    ``distance / longest length``. Both must hold when both are given; with
    neither, the strings must normalize to the same text.
    """
    if max_distance is not None and max_distance < 0:
        raise ValueError("max_distance must be non-negative")
    if max_ratio is not None and max_ratio < 0:
        raise ValueError("max_ratio must be non-negative")

    distance = get_confusable_distance(a, b, as_confusable_map(table))
    if max_distance is None and max_ratio is None:
        return distance == 0
    if max_distance is not None and distance > max_distance:
        return False
    if max_ratio is not None:
        longest = max(len(a), len(b))
        if longest and distance / longest > max_ratio:
            return False
    return True
