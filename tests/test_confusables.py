from __future__ import annotations

import json
import threading
from pathlib import Path

import pytest

from confusable_distance import confusables as confusables_mod
from confusable_distance.confusables import (
    ConfusableMap,
    as_confusable_map,
    decode_compact,
    decode_flat,
    encode_compact,
    get_normalization_map,
    load_table,
    normalize_confusables,
    reset_normalization_map,
)
from confusable_distance.confusables_data import COMPACT_CONFUSABLES
from confusable_distance.errors import ConfusablesDataError


def test_digits_fold_to_letters() -> None:
    assert normalize_confusables("0") == "O"
    assert normalize_confusables("1") == "l"
    assert normalize_confusables("00") == "OO"
    assert normalize_confusables("l0gin") == "lOgin"
    assert normalize_confusables("1001") == "lOOl"
    assert normalize_confusables("010101") == "OlOlOl"


def test_unmapped_characters_pass_through() -> None:
    assert normalize_confusables("") == ""
    assert normalize_confusables("hello") == "hello"
    assert normalize_confusables("café") == "café"
    assert normalize_confusables("hello🙂") == "hello🙂"
    assert normalize_confusables("test!@#$") == "test!@#$"


def test_canonical_characters_are_fixed_points() -> None:
    assert normalize_confusables("O") == "O"
    assert normalize_confusables("lll") == "lll"
    assert normalize_confusables("0O0") == "OOO"
    assert normalize_confusables("1l1") == "lll"


def test_homoglyph_scripts_fold_to_latin() -> None:
    # Cyrillic а, о and Greek Ρ, Ο
    assert normalize_confusables("pаypаl") == "paypal"
    assert normalize_confusables("gооgle") == "google"
    assert normalize_confusables("ΡΟ") == "PO"
    assert normalize_confusables("ＡＢＣ") == "ABC"
    assert normalize_confusables("𝐚𝐝𝐦𝐢𝐧") == "ad𝐦in"  # bold m has no single code point canonical


def test_capital_i_and_pipe_fold_to_small_l() -> None:
    assert normalize_confusables("I|1l") == "llll"


def test_brand_spoofs() -> None:
    assert normalize_confusables("paypa1") == "paypal"
    assert normalize_confusables("he1lo") == "hello"
    assert normalize_confusables("g00gle") == "gOOgle"
    assert normalize_confusables("test@1.0") == "test@l.O"
    assert normalize_confusables("user1@example.c0m") == "userl@example.cOm"


def test_length_preserved_per_code_point() -> None:
    text = "𝐀1ｂ0" + "x" * 5
    assert len(normalize_confusables(text)) == len(text)


def test_long_input() -> None:
    text = "a" * 1000 + "0" + "b" * 1000
    assert normalize_confusables(text) == "a" * 1000 + "O" + "b" * 1000
    assert normalize_confusables("test1" * 100) == "testl" * 100


def test_idempotent_on_bundled_table() -> None:
    table = get_normalization_map()
    for sample in ("paypa1", "1234567890", "hello world", "ΑΒΓ𝐈ｌ|"):
        once = normalize_confusables(sample)
        assert normalize_confusables(once) == once
    for key in table:
        canonical = table[key]
        assert table[canonical] == canonical


def test_every_canonical_maps_to_itself() -> None:
    table = decode_compact(COMPACT_CONFUSABLES)
    for canonical, _ in COMPACT_CONFUSABLES:
        assert table[canonical] == canonical
        assert table.is_canonical(canonical)


def test_decode_compact_keeps_first_assignment_of_canonical() -> None:
    table = decode_compact([("a", "α"), ("a", "а")])
    assert table == {"α": "a", "а": "a", "a": "a"}

    # "a" is already a confusable of "X"; its own group must not reset it.
    table = decode_compact([("X", "a"), ("a", "b")])
    assert table["a"] == "X"
    assert table["b"] == "X"

    # A canonical that is later listed as a confusable is redirected, and the
    # chain through it is collapsed so the map stays idempotent.
    table = decode_compact([("l", "1"), ("L", "l")])
    assert table["1"] == "L"
    assert table["l"] == "L"
    assert table["L"] == "L"


def test_decode_compact_skips_multi_code_point_canonicals() -> None:
    table = decode_compact([("rn", "m"), ("O", "0")])
    assert "m" not in table
    assert "rn" not in table
    assert table["0"] == "O"


def test_decode_compact_rejects_cycles() -> None:
    with pytest.raises(ConfusablesDataError):
        decode_compact([("a", "b"), ("b", "a")])


def test_flat_and_compact_encodings_agree() -> None:
    flat = {"0": "O", "1": "l", "I": "l", "а": "a"}
    compact = [("O", "0"), ("l", "1I"), ("a", "а")]
    assert decode_flat(flat) == decode_compact(compact)
    assert encode_compact(flat) == compact


def test_decode_flat_ignores_multi_code_point_entries() -> None:
    table = decode_flat({"m": "rn", "ab": "x", "0": "O"})
    assert dict(table) == {"0": "O", "O": "O"}


def test_map_is_read_only() -> None:
    table = decode_compact([("O", "0")])
    assert isinstance(table, ConfusableMap)
    with pytest.raises(TypeError):
        table["x"] = "y"  # type: ignore[index]
    assert table.canonical("?") == "?"
    assert table.apply("0?") == "O?"
    assert len(table) == 2


def test_explicit_table_is_used_instead_of_shared_one() -> None:
    assert normalize_confusables("0x", {"x": "y"}) == "0y"
    assert normalize_confusables("0", decode_compact([("Q", "0")])) == "Q"


def test_plain_mapping_table_keeps_length_and_idempotence() -> None:
    assert normalize_confusables("m", {"m": "rn"}) == "m"
    assert normalize_confusables("mx", {"m": "rn", "x": "y"}) == "my"

    chained = {"a": "b", "b": "c"}
    once = normalize_confusables("ab", chained)
    assert once == "cc"
    assert normalize_confusables(once, chained) == once


def test_as_confusable_map_decodes_plain_mappings() -> None:
    assert as_confusable_map() is get_normalization_map()
    table = decode_compact([("Q", "0")])
    assert as_confusable_map(table) is table
    converted = as_confusable_map({"a": "b", "b": "c", "ab": "x"})
    assert isinstance(converted, ConfusableMap)
    assert dict(converted) == {"a": "c", "b": "c", "c": "c"}


def test_plain_mapping_table_with_cycle_is_rejected() -> None:
    with pytest.raises(ConfusablesDataError):
        normalize_confusables("a", {"a": "b", "b": "a"})


def test_load_table_flat_json(tmp_path: Path) -> None:
    path = tmp_path / "flat.json"
    path.write_text(json.dumps({"0": "O", "5": "S"}), encoding="utf-8")
    table = load_table(path)
    assert table["5"] == "S"
    assert table["S"] == "S"


def test_load_table_compact_json(tmp_path: Path) -> None:
    path = tmp_path / "compact.json"
    path.write_text(json.dumps([["O", "0"], ["l", "1"]], ensure_ascii=False), encoding="utf-8")
    assert load_table(path) == decode_compact([("O", "0"), ("l", "1")])


@pytest.mark.parametrize(
    "payload",
    ['"nope"', "[[1, 2]]", '[["O"]]', '{"0": 1}', "not json"],
)
def test_load_table_rejects_bad_input(tmp_path: Path, payload: str) -> None:
    path = tmp_path / "bad.json"
    path.write_text(payload, encoding="utf-8")
    with pytest.raises(ConfusablesDataError):
        load_table(path)


def test_load_table_missing_file(tmp_path: Path) -> None:
    with pytest.raises(ConfusablesDataError):
        load_table(tmp_path / "missing.json")


def test_shared_map_honours_confusables_path(tmp_path: Path, monkeypatch) -> None:
    path = tmp_path / "table.json"
    path.write_text(json.dumps({"x": "y"}), encoding="utf-8")
    monkeypatch.setenv("CONFUSABLES_PATH", str(path))
    reset_normalization_map()
    assert normalize_confusables("x0") == "y0"


def test_shared_map_is_built_once_across_threads(monkeypatch) -> None:
    calls = []
    real_loader = confusables_mod._load_default_map
    gate = threading.Barrier(8)

    def counting_loader():
        calls.append(1)
        return real_loader()

    monkeypatch.setattr(confusables_mod, "_load_default_map", counting_loader)
    reset_normalization_map()

    results = []

    def worker() -> None:
        gate.wait()
        results.append(get_normalization_map())

    threads = [threading.Thread(target=worker) for _ in range(8)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    assert len(calls) == 1
    assert all(r is results[0] for r in results)
