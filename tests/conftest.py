# tests/conftest.py
from __future__ import annotations

import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from confusable_distance.confusables import reset_normalization_map  # noqa: E402

_ENV_VARS = (
    "CONFUSABLES_PATH",
    "CONFUSABLES_URL",
    "CONFUSABLES_HTTP_TIMEOUT_S",
    "LOG_LEVEL",
    "LOG_JSON",
)


@pytest.fixture(autouse=True)
def _isolated_table(monkeypatch):
    # Every test starts from the bundled table and a clean environment.
    for name in _ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    reset_normalization_map()
    yield
    reset_normalization_map()
