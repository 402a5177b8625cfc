"""Refresh the bundled confusable table from Unicode's ``confusables.txt``.

The source format is one mapping per line::

    0030 ;	004F ;	MA	# ( 0 → O ) DIGIT ZERO → LATIN CAPITAL LETTER O

Targets may be several code points long. They are kept in the generated
artifact and dropped when the table is decoded.
"""

from __future__ import annotations

import json
import logging
import os
import tempfile
from pathlib import Path
from typing import Dict, List, Literal, Optional, Sequence, Tuple, Union

import httpx

from .confusables import decode_compact, encode_compact
from .errors import ConfusablesDataError, ConfusablesUpdateError
from .logs import bind
from .settings import DEFAULT_HTTP_TIMEOUT_S, Settings, get_settings

log = logging.getLogger(__name__)

OutputFormat = Literal["python", "json"]

DEFAULT_DATA_PATH = Path(__file__).with_name("confusables_data.py")

# Entries every usable table must contain.
_SANITY_CHECKS: Tuple[Tuple[str, str], ...] = (("0", "O"), ("1", "l"))


def parse_confusables(text: str) -> Dict[str, str]:
    """Parse ``confusables.txt`` into a flat ``source -> target`` mapping."""

    result: Dict[str, str] = {}
    for lineno, raw in enumerate(text.splitlines(), start=1):
        line = raw.lstrip("\ufeff").split("#", 1)[0].strip()
        if not line:
            continue
        fields = line.split(";")
        if len(fields) < 2:
            continue
        src = fields[0].strip()
        dst = fields[1].strip()
        if not src or not dst:
            continue
        try:
            source = chr(int(src, 16))
            target = "".join(chr(int(code, 16)) for code in dst.split())
        except ValueError as exc:
            raise ConfusablesDataError(f"line {lineno}: invalid code point in {raw!r}") from exc
        result[source] = target
    return result


def fetch_confusables(
    url: str,
    *,
    client: Optional[httpx.Client] = None,
    timeout: float = DEFAULT_HTTP_TIMEOUT_S,
) -> str:
    """Download the source file; any transport or HTTP error is fatal."""

    owns_client = client is None
    http = client or httpx.Client(timeout=timeout, follow_redirects=True)
    try:
        response = http.get(url)
        response.raise_for_status()
        return response.text
    except httpx.HTTPStatusError as exc:
        raise ConfusablesUpdateError(
            f"fetching {url} failed with status {exc.response.status_code}"
        ) from exc
    except httpx.HTTPError as exc:
        raise ConfusablesUpdateError(f"fetching {url} failed: {exc}") from exc
    finally:
        if owns_client:
            http.close()


def _py_literal(value: str) -> str:
    out: List[str] = ['"']
    for ch in value:
        cp = ord(ch)
        if 0x20 <= cp < 0x7F and ch not in '"\\':
            out.append(ch)
        elif cp <= 0xFFFF:
            out.append(f"\\u{cp:04x}")
        else:
            out.append(f"\\U{cp:08x}")
    out.append('"')
    return "".join(out)


def render_data_module(pairs: Sequence[Tuple[str, str]], *, source: str) -> str:
    """Python source for ``confusables_data.py`` holding ``pairs``."""

    lines = [
        '"""Compact confusable table: ``(canonical, confusables)`` pairs.',
        "",
        "Generated by ``confusable-distance update``; do not edit by hand.",
        f"Source: {source}",
        '"""',
        "",
        "from typing import Tuple",
        "",
        "COMPACT_CONFUSABLES: Tuple[Tuple[str, str], ...] = (",
    ]
    for canonical, confusables in pairs:
        lines.append(f"    ({_py_literal(canonical)}, {_py_literal(confusables)}),")
    lines.append(")")
    return "\n".join(lines) + "\n"


def render_json(pairs: Sequence[Tuple[str, str]]) -> str:
    return json.dumps([list(pair) for pair in pairs], ensure_ascii=False, indent=2) + "\n"


def _atomic_write(path: Path, content: str) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    fd, tmp_name = tempfile.mkstemp(prefix=f".{path.name}.", dir=str(path.parent))
    try:
        with os.fdopen(fd, "w", encoding="utf-8") as fh:
            fh.write(content)
        os.replace(tmp_name, path)
    except BaseException:
        Path(tmp_name).unlink(missing_ok=True)
        raise


def build_compact_table(text: str) -> List[Tuple[str, str]]:
    """Parse and group ``confusables.txt``, checking the result is usable."""

    try:
        flat = parse_confusables(text)
    except ConfusablesDataError as exc:
        raise ConfusablesUpdateError(f"cannot parse confusables source: {exc}") from exc
    if not flat:
        raise ConfusablesUpdateError("confusables source contained no mappings")

    pairs = encode_compact(flat)
    try:
        table = decode_compact(pairs)
    except ConfusablesDataError as exc:
        raise ConfusablesUpdateError(f"confusables source does not decode: {exc}") from exc

    for confusable, expected in _SANITY_CHECKS:
        if table.canonical(confusable) != expected:
            raise ConfusablesUpdateError(
                f"sanity check failed: {confusable!r} should map to {expected!r}"
            )
    return pairs


def update_confusables(
    *,
    url: Optional[str] = None,
    output: Union[str, Path, None] = None,
    fmt: OutputFormat = "python",
    client: Optional[httpx.Client] = None,
    settings: Optional[Settings] = None,
) -> Path:
    """Fetch, parse and write a fresh table; the old file is kept on failure."""

    cfg = settings or get_settings()
    source_url = url or cfg.confusables_url
    if fmt == "python":
        target = Path(output) if output is not None else DEFAULT_DATA_PATH
    elif fmt == "json":
        if output is None:
            raise ValueError("json output needs an explicit path")
        target = Path(output)
    else:
        raise ValueError(f"unknown output format: {fmt!r}")

    ulog = bind(log, url=source_url, output=str(target))
    ulog.info("fetching confusables source")
    text = fetch_confusables(source_url, client=client, timeout=cfg.http_timeout_s)
    pairs = build_compact_table(text)

    if fmt == "python":
        content = render_data_module(pairs, source=source_url)
    else:
        content = render_json(pairs)
    _atomic_write(target, content)
    ulog.info("wrote confusables table", extra={"groups": len(pairs)})
    return target
