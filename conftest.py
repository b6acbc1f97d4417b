"""Root conftest: environment for Settings must exist before mitrai_chat is imported."""
from __future__ import annotations

import os
from pathlib import Path

_REQUIRED_DEFAULTS = {
    "POSTGRES_USER": "mitrai",
    "POSTGRES_PASSWORD": "mitrai",
    "POSTGRES_DB": "mitrai_test",
}


def _load_env_file(path: Path) -> None:
    for line in path.read_text().splitlines():
        line = line.strip()
        if not line or line.startswith("#"):
            continue
        key, _, value = line.partition("=")
        os.environ.setdefault(key.strip(), value.strip())


_env_test = Path(__file__).resolve().parent / ".env.test"
if _env_test.exists():
    _load_env_file(_env_test)
for _key, _value in _REQUIRED_DEFAULTS.items():
    os.environ.setdefault(_key, _value)
