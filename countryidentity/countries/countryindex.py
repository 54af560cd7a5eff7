"""Static country table and the precomputed variant index.

The table is loaded once from countries/data/countries.yaml and the index is
built once from it behind a lock. Both are memoized for the process lifetime
and never mutated afterwards, so readers need no locking.

Data Loading Priority:
  1. Explicit path (if path provided)
  2. COUNTRYIDENTITY_DATA_PATH environment variable
  3. Module-local data: countryidentity/countries/data/countries.yaml
"""

from __future__ import annotations

import logging
import os
import re
import threading
from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path
from typing import Dict, Iterable, Optional, Tuple, Union

from countryidentity.countries.countrynormalize import normalize_country_name
from countryidentity.countries.countrypatterns import derive_variants
from countryidentity.utils.dataloader import (
    find_data_file,
    load_records_file,
    format_not_found_error,
)

logger = logging.getLogger(__name__)

DATA_PATH_ENV_VAR = "COUNTRYIDENTITY_DATA_PATH"

_CODE_RE = re.compile(r"^[A-Z]{2}$")

_INDEX_LOCK = threading.Lock()


@dataclass(frozen=True)
class CountryRecord:
    """One row of the static country table. names[0] is the display name."""

    code: str
    names: Tuple[str, ...]

    @property
    def name(self) -> str:
        return self.names[0]

    @property
    def aliases(self) -> Tuple[str, ...]:
        return self.names[1:]


@dataclass(frozen=True)
class NormalizedVariantSet:
    """Derived, normalized forms of every name of one country."""

    code: str
    canonical_normalized: str
    variants: Tuple[str, ...]


@dataclass(frozen=True)
class CountryIndex:
    """Read-only lookup structures built from the country table.

    Attributes:
        records: Country table, in table order
        by_code: ISO2 code -> record
        literal: Lowercased raw name -> code (first record listing it wins)
        names: Raw-lowercased, normalized and derived variant -> code.
            Explicit names of every country are inserted before any derived
            variant, and no key is ever overwritten.
        variant_sets: Per-country normalized variants, in table order
    """

    records: Tuple[CountryRecord, ...]
    by_code: Dict[str, CountryRecord]
    literal: Dict[str, str]
    names: Dict[str, str]
    variant_sets: Tuple[NormalizedVariantSet, ...]

    def __len__(self) -> int:
        return len(self.records)


def _parse_record(entry: dict, position: int) -> CountryRecord:
    """Turn one YAML/CSV entry into a CountryRecord.

    YAML entries carry a ``names`` list; CSV rows (as written by
    list_countries) carry ``name`` plus ``alias1``...``aliasN`` columns.
    """
    if not isinstance(entry, dict):
        raise ValueError(f"Country entry #{position} is not a mapping: {entry!r}")

    code = str(entry.get("code") or "").strip().upper()
    if not _CODE_RE.match(code):
        raise ValueError(f"Country entry #{position} has invalid code: {entry.get('code')!r}")

    if "names" in entry:
        raw_names = entry["names"] or []
        if isinstance(raw_names, str):
            raw_names = [raw_names]
    else:
        alias_cols = sorted(
            (k for k in entry if k.startswith("alias") and k[5:].isdigit()),
            key=lambda k: int(k[5:]),
        )
        raw_names = [entry.get("name")] + [entry[k] for k in alias_cols]

    names = tuple(str(n).strip() for n in raw_names if n is not None and str(n).strip())
    if not names:
        raise ValueError(f"Country {code} has no names")

    return CountryRecord(code=code, names=names)


def parse_country_records(entries: Iterable[dict]) -> Tuple[CountryRecord, ...]:
    """Validate and convert raw entries, preserving their order.

    Raises:
        ValueError: On invalid codes, duplicate codes, or records without names
    """
    records = []
    seen = set()
    for position, entry in enumerate(entries, 1):
        record = _parse_record(entry, position)
        if record.code in seen:
            raise ValueError(f"Duplicate country code: {record.code}")
        seen.add(record.code)
        records.append(record)
    return tuple(records)


@lru_cache(maxsize=1)
def load_countries(path: Optional[Union[str, Path]] = None) -> Tuple[CountryRecord, ...]:
    """Load the static country table into memory.

    Uses LRU cache to load the table once and reuse it.

    Args:
        path: Optional path to a countries .yaml or .csv file. If None, uses
              COUNTRYIDENTITY_DATA_PATH or the packaged countries.yaml

    Returns:
        Tuple of CountryRecord in table order

    Raises:
        FileNotFoundError: If no countries data found in any location
        ValueError: If the file format or any record is invalid

    Examples:
        >>> records = load_countries()
        >>> records[0]
        CountryRecord(code='AD', names=('Andorra',))
    """
    if path is None:
        found_path = find_data_file(
            module_file=__file__,
            filenames=["countries.yaml", "countries.csv"],
            env_var=DATA_PATH_ENV_VAR,
        )

        if found_path is None:
            error_msg = format_not_found_error(
                dataset="countries",
                searched_locations=[
                    ("Environment variable", os.environ.get(DATA_PATH_ENV_VAR, "Not set")),
                    ("Module-local data", Path(__file__).parent / "data"),
                ],
                fix_instructions=[
                    f"Set {DATA_PATH_ENV_VAR} to a countries .yaml or .csv file",
                    "Or reinstall the package so countries/data/countries.yaml is present",
                ],
            )
            raise FileNotFoundError(error_msg)

        path = found_path

    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Required file not found: {path}")

    records = parse_country_records(load_records_file(path, yaml_key="countries"))
    logger.info(f"Loaded {len(records)} countries from {path}")
    return records


def build_variant_set(record: CountryRecord) -> NormalizedVariantSet:
    """Derive every normalized variant of a record's names."""
    variants = []
    for raw in record.names:
        for variant in derive_variants(raw):
            if variant not in variants:
                variants.append(variant)

    return NormalizedVariantSet(
        code=record.code,
        canonical_normalized=normalize_country_name(record.name),
        variants=tuple(variants),
    )


def build_country_index(records: Iterable[CountryRecord]) -> CountryIndex:
    """Build the lookup structures for a country table.

    Insertion order into the flat name map:
      (a) every raw name, lowercased
      (b) every normalized name
      (c) derived government-pattern variants
    Each pass covers all countries before the next begins, and a key keeps
    the first code written to it.
    """
    records = tuple(records)
    by_code = {r.code: r for r in records}
    if len(by_code) != len(records):
        raise ValueError("Duplicate country codes in table")

    literal: Dict[str, str] = {}
    names: Dict[str, str] = {}

    for record in records:
        for raw in record.names:
            key = raw.strip().lower()
            literal.setdefault(key, record.code)
            names.setdefault(key, record.code)

    for record in records:
        for raw in record.names:
            key = normalize_country_name(raw)
            if key:
                names.setdefault(key, record.code)

    variant_sets = tuple(build_variant_set(r) for r in records)
    for variant_set in variant_sets:
        for variant in variant_set.variants:
            names.setdefault(variant, variant_set.code)

    for code in names.values():
        assert code in by_code, f"Index entry points at unknown code {code}"

    logger.info(f"Built country index: {len(records)} countries, {len(names)} name keys")

    return CountryIndex(
        records=records,
        by_code=by_code,
        literal=literal,
        names=names,
        variant_sets=variant_sets,
    )


@lru_cache(maxsize=1)
def _cached_country_index(path: Optional[Union[str, Path]]) -> CountryIndex:
    return build_country_index(load_countries(path))


def load_country_index(path: Optional[Union[str, Path]] = None) -> CountryIndex:
    """Build (once) and return the country index for the loaded table.

    Callers racing on the first call wait for a single build.
    """
    with _INDEX_LOCK:
        return _cached_country_index(path)


def clear_cache() -> None:
    """Clear the memoized country table and index.

    Useful for testing or when the data path changes.
    """
    with _INDEX_LOCK:
        _cached_country_index.cache_clear()
        load_countries.cache_clear()
    logger.info("Cleared countries loader cache")


__all__ = [
    "DATA_PATH_ENV_VAR",
    "CountryRecord",
    "NormalizedVariantSet",
    "CountryIndex",
    "parse_country_records",
    "load_countries",
    "build_variant_set",
    "build_country_index",
    "load_country_index",
    "clear_cache",
]
