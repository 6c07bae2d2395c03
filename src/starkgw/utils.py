from __future__ import annotations

import json
from pathlib import Path
from typing import Any


def parse_felt_list(value: str, name: str = "calldata") -> list[str]:
    """Parse a JSON array of felts given on the command line into strings."""
    try:
        parsed: Any = json.loads(value)
    except json.JSONDecodeError as exc:
        raise ValueError(f"{name} must be a JSON array: {exc}") from exc
    if not isinstance(parsed, list):
        raise ValueError(f"{name} must be a JSON array")
    for item in parsed:
        if isinstance(item, bool) or not isinstance(item, (int, str)):
            raise ValueError(f"{name} items must be integers or strings, got: {item!r}")
    return [str(item) for item in parsed]


def format_size(num_bytes: int) -> str:
    if num_bytes < 1024:
        return f"{num_bytes} B"
    if num_bytes < 1024 * 1024:
        return f"{num_bytes / 1024:.1f} KB"
    return f"{num_bytes / (1024 * 1024):.1f} MB"


def load_json(path: Path) -> Any:
    with path.open("r", encoding="utf-8") as f:
        return json.load(f)


def write_json(path: Path, payload: Any) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    with path.open("w", encoding="utf-8") as f:
        json.dump(payload, f, indent=2, sort_keys=True)
