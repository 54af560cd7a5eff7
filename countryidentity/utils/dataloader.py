"""Shared data loading utilities for the countries module.

This module provides common data loading patterns with fallback search
across an explicit path, an environment variable, and package data.
"""

import os
from pathlib import Path
from typing import List, Optional, Tuple

import pandas as pd

from countryidentity.utils.build_utils import load_yaml_file


def find_data_file(
    module_file: str,
    filenames: List[str],
    env_var: Optional[str] = None,
) -> Optional[Path]:
    """Find data file by searching standard locations.

    Search priority:
    1. Environment variable (if env_var is given and set to an existing file)
    2. Module-local data: {module_dir}/data/

    Args:
        module_file: __file__ from the calling module
        filenames: List of candidate filenames to search for (e.g., ['countries.yaml'])
        env_var: Optional environment variable holding an explicit data path

    Returns:
        Path to found file, or None if not found

    Examples:
        >>> # From countries/countryindex.py (data is in countries/data/)
        >>> path = find_data_file(__file__, ['countries.yaml'],
        ...                       env_var='COUNTRYIDENTITY_DATA_PATH')
    """
    # Priority 1: Environment override
    if env_var:
        env_path = os.environ.get(env_var)
        if env_path and Path(env_path).exists():
            return Path(env_path)

    # Priority 2: Module-local data (e.g., countryidentity/countries/data/)
    data_dir = Path(module_file).parent / "data"
    for filename in filenames:
        p = data_dir / filename
        if p.exists():
            return p

    return None


def load_records_file(file_path: Path, yaml_key: str) -> List[dict]:
    """Load entity records from a YAML or CSV file based on extension.

    YAML files hold a list of records under ``yaml_key``. CSV files hold one
    row per record; every column is read as a string and empty cells stay
    empty (so codes like "NA" for Namibia are not read as missing).

    Args:
        file_path: Path to YAML or CSV file
        yaml_key: Top-level key holding the record list in YAML files

    Returns:
        List of record dicts

    Raises:
        ValueError: If file extension is not .yaml, .yml or .csv, or the
            YAML file has no list under yaml_key
    """
    if file_path.suffix in (".yaml", ".yml"):
        data = load_yaml_file(file_path) or {}
        records = data.get(yaml_key)
        if not isinstance(records, list):
            raise ValueError(f"Expected a list under '{yaml_key}' in {file_path}")
        return records
    elif file_path.suffix == ".csv":
        df = pd.read_csv(file_path, dtype=str, keep_default_na=False)
        return df.to_dict(orient="records")
    else:
        raise ValueError(f"Unsupported file format: {file_path.suffix}. Use .yaml or .csv")


def format_not_found_error(
    dataset: str,
    searched_locations: List[Tuple[str, Path]],
    fix_instructions: List[str],
) -> str:
    """Message for a FileNotFoundError listing where the data was looked for."""
    searched = [f"  {i}. {desc}: {path}" for i, (desc, path) in enumerate(searched_locations, 1)]
    fixes = [f"  • {instruction}" for instruction in fix_instructions]
    return "\n".join(
        [f"No {dataset} data found.", "Searched:", *searched, "To fix:", *fixes]
    )


__all__ = [
    "find_data_file",
    "load_records_file",
    "format_not_found_error",
]
