"""Load a store's initial records from a static JSON file.

Two shapes are accepted::

    [{"id": 1, "label": "Learn TS", "done": false}, ...]

    {"name": "Work", "records": [...]}

``task`` and ``complete`` are read as aliases of ``label`` and ``done``.
"""
from __future__ import annotations

import json
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, List, Optional

from pydantic import ValidationError

from recstore.common.logging import get_logger

from .models import Record

logger = get_logger("recstore.seed")

_ALIASES = {"task": "label", "complete": "done"}


class SeedFormatError(ValueError):
    """Raised when a seed file exists but cannot be turned into records."""


@dataclass
class Seed:
    name: Optional[str] = None
    records: List[Record] = field(default_factory=list)


def _normalize(raw: Any) -> Any:
    if not isinstance(raw, dict):
        return raw
    out = dict(raw)
    for alias, canonical in _ALIASES.items():
        if alias in out and canonical not in out:
            out[canonical] = out.pop(alias)
    return out


def parse_seed(data: Any, source: str = "<seed>") -> Seed:
    """Build a Seed from already-decoded JSON."""
    name = None
    if isinstance(data, dict):
        name = data.get("name")
        items = data.get("records", [])
    else:
        items = data
    if not isinstance(items, list):
        raise SeedFormatError(f"{source}: expected a list of records")
    if name is not None and not isinstance(name, str):
        raise SeedFormatError(f"{source}: 'name' must be a string")

    records = []
    for index, raw in enumerate(items):
        try:
            records.append(Record.model_validate(_normalize(raw)))
        except ValidationError as e:
            raise SeedFormatError(f"{source}: record #{index} is invalid: {e}") from e
    return Seed(name=name, records=records)


def load_seed(path: Path | str) -> Seed:
    """Read seed records from ``path``; a missing file yields an empty seed."""
    path = Path(path)
    if not path.exists():
        logger.info("seed_missing", extra={"path": str(path)})
        return Seed()
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except (json.JSONDecodeError, UnicodeDecodeError) as e:
        raise SeedFormatError(f"{path}: not valid JSON: {e}") from e
    except OSError as e:
        raise SeedFormatError(f"{path}: cannot be read: {e}") from e
    seed = parse_seed(data, source=str(path))
    logger.info("seed_loaded", extra={"path": str(path), "records": len(seed.records)})
    return seed
