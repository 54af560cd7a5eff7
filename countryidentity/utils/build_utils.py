"""Helpers for reading and tabulating the static country table."""

from pathlib import Path
from typing import Dict, Optional, Sequence

import yaml

ALIAS_COLUMNS = 10


def load_yaml_file(path: Path) -> dict:
    """Parse a UTF-8 YAML data file; an empty file gives None."""
    if not path.exists():
        raise FileNotFoundError(f"Required file not found: {path}")

    with open(path, "r", encoding="utf-8") as f:
        return yaml.safe_load(f)


def expand_aliases(aliases: Optional[Sequence[str]], max_columns: int = ALIAS_COLUMNS) -> Dict[str, str]:
    """Spread a country's alternate names over alias1..aliasN columns.

    Missing slots are empty strings; names beyond the last column are dropped.

    Examples:
        >>> expand_aliases(("Swaziland", "Kingdom of Eswatini"))["alias2"]
        'Kingdom of Eswatini'
    """
    aliases = list(aliases or ())[:max_columns]
    aliases += [""] * (max_columns - len(aliases))
    return {f"alias{i}": str(alias) for i, alias in enumerate(aliases, 1)}


__all__ = [
    "ALIAS_COLUMNS",
    "load_yaml_file",
    "expand_aliases",
]
