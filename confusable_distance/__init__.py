from .confusables import (
    ConfusableMap,
    as_confusable_map,
    decode_compact,
    decode_flat,
    encode_compact,
    get_normalization_map,
    load_table,
    normalize_confusables,
)
from .distance import confusable_similarity, get_confusable_distance, is_confusable_match
from .errors import ConfusablesDataError, ConfusablesError, ConfusablesUpdateError
from .levenshtein import levenshtein_distance

__version__ = "0.1.0"

__all__ = [
    "ConfusableMap",
    "ConfusablesDataError",
    "ConfusablesError",
    "ConfusablesUpdateError",
    "as_confusable_map",
    "confusable_similarity",
    "decode_compact",
    "decode_flat",
    "encode_compact",
    "get_confusable_distance",
    "get_normalization_map",
    "is_confusable_match",
    "levenshtein_distance",
    "load_table",
    "normalize_confusables",
]
