"""Mapping of visually confusable characters to a canonical representative.

The table is decoded from ``(canonical, confusables)`` pairs (see
``confusables_data``) or from a flat ``confusable -> canonical`` mapping. Only
single code point canonicals are kept, so normalization maps every input code
point to exactly one output code point.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from threading import Lock
from types import MappingProxyType
from typing import Dict, Iterable, Iterator, List, Mapping, Optional, Tuple, Union

from .confusables_data import COMPACT_CONFUSABLES
from .errors import ConfusablesDataError
from .settings import get_settings

log = logging.getLogger(__name__)

__all__ = [
    "ConfusableMap",
    "as_confusable_map",
    "decode_compact",
    "decode_flat",
    "encode_compact",
    "get_normalization_map",
    "load_table",
    "normalize_confusables",
    "reset_normalization_map",
]

CompactTable = Iterable[Tuple[str, str]]


class ConfusableMap(Mapping[str, str]):
    """Read-only ``confusable -> canonical`` lookup.

    Every canonical character maps to itself, and applying the map to its own
    output is a no-op.
    """

    __slots__ = ("_data",)

    def __init__(self, data: Mapping[str, str]) -> None:
        self._data: Mapping[str, str] = MappingProxyType(dict(data))

    def __getitem__(self, ch: str) -> str:
        return self._data[ch]

    def __iter__(self) -> Iterator[str]:
        return iter(self._data)

    def __len__(self) -> int:
        return len(self._data)

    def __repr__(self) -> str:
        return f"ConfusableMap({len(self._data)} entries)"

    def canonical(self, ch: str) -> str:
        return self._data.get(ch, ch)

    def is_canonical(self, ch: str) -> bool:
        return self._data.get(ch, ch) == ch

    def apply(self, text: str) -> str:
        lookup = self._data.get
        return "".join([lookup(ch, ch) for ch in text])


def _resolve_chains(mapping: Dict[str, str]) -> None:
    """Point every entry at the end of its chain so the map is idempotent."""

    for start in list(mapping):
        target = mapping[start]
        if mapping.get(target, target) == target:
            continue
        seen = {start}
        while mapping.get(target, target) != target:
            if target in seen:
                raise ConfusablesDataError(
                    f"confusable cycle through U+{ord(target):04X}"
                )
            seen.add(target)
            target = mapping[target]
        mapping[start] = target


def decode_compact(compact: CompactTable) -> ConfusableMap:
    """Expand ``(canonical, confusables)`` pairs into a ``ConfusableMap``.

    Each character of ``confusables`` maps to ``canonical``; ``canonical`` maps
    to itself unless an earlier pair already assigned it.
    """
    mapping: Dict[str, str] = {}
    skipped = 0
    for canonical, confusables in compact:
        if len(canonical) != 1:
            skipped += 1
            continue
        for ch in confusables:
            mapping[ch] = canonical
        if canonical not in mapping:
            mapping[canonical] = canonical

    _resolve_chains(mapping)
    if skipped:
        log.debug("skipped %d multi code point canonical groups", skipped)
    return ConfusableMap(mapping)


def encode_compact(mapping: Mapping[str, str]) -> List[Tuple[str, str]]:
    """Group a flat ``confusable -> canonical`` mapping by canonical.

    Groups keep first-seen order. Self mappings are left out since decoding
    adds them back.
    """
    groups: Dict[str, List[str]] = {}
    for src, dst in mapping.items():
        members = groups.setdefault(dst, [])
        if src != dst:
            members.append(src)
    return [(canonical, "".join(members)) for canonical, members in groups.items()]


def decode_flat(mapping: Mapping[str, str]) -> ConfusableMap:
    """Build a ``ConfusableMap`` from a flat ``confusable -> canonical`` mapping.

    Keys that are not a single code point are ignored.
    """
    single = {src: dst for src, dst in mapping.items() if len(src) == 1}
    if len(single) != len(mapping):
        log.debug("skipped %d multi code point confusables", len(mapping) - len(single))
    return decode_compact(encode_compact(single))


def load_table(path: Union[str, Path]) -> ConfusableMap:
    """Load a JSON table: an object is a flat table, an array a compact one."""

    path = Path(path)
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except OSError as exc:
        raise ConfusablesDataError(f"cannot read confusables table {path}") from exc
    except json.JSONDecodeError as exc:
        raise ConfusablesDataError(f"confusables table {path} is not valid JSON") from exc

    if isinstance(data, dict):
        if not all(isinstance(k, str) and isinstance(v, str) for k, v in data.items()):
            raise ConfusablesDataError("flat confusables table must map strings to strings")
        return decode_flat(data)

    if isinstance(data, list):
        pairs: List[Tuple[str, str]] = []
        for item in data:
            if (
                not isinstance(item, (list, tuple))
                or len(item) != 2
                or not all(isinstance(part, str) for part in item)
            ):
                raise ConfusablesDataError(
                    "compact confusables table entries must be [canonical, confusables]"
                )
            pairs.append((item[0], item[1]))
        return decode_compact(pairs)

    raise ConfusablesDataError("confusables table must be a JSON object or array")


_map: Optional[ConfusableMap] = None
_map_lock = Lock()


def _load_default_map() -> ConfusableMap:
    path = get_settings().confusables_path
    if path is not None:
        table = load_table(path)
        log.info("loaded confusables table", extra={"path": str(path), "entries": len(table)})
    else:
        table = decode_compact(COMPACT_CONFUSABLES)
        log.debug("decoded bundled confusables table", extra={"entries": len(table)})
    return table


def get_normalization_map() -> ConfusableMap:
    """Return the shared table, building it once on first use."""

    global _map
    table = _map
    if table is None:
        with _map_lock:
            if _map is None:
                _map = _load_default_map()
            table = _map
    return table


def reset_normalization_map() -> None:
    """Drop the shared table so the next lookup rebuilds it (tests only)."""

    global _map
    with _map_lock:
        _map = None


def as_confusable_map(table: Optional[Mapping[str, str]] = None) -> ConfusableMap:
    """Return ``table`` as a ``ConfusableMap``, or the shared table when None.

    Plain mappings go through ``decode_flat``: multi code point entries are
    dropped and chains are resolved.
    """
    if table is None:
        return get_normalization_map()
    if isinstance(table, ConfusableMap):
        return table
    return decode_flat(table)


def normalize_confusables(text: str, table: Optional[Mapping[str, str]] = None) -> str:
    """Replace each confusable character in ``text`` with its canonical form.

    Characters missing from the table pass through unchanged.
    """
    return as_confusable_map(table).apply(text)
