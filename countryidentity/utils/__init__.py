"""Shared utilities for CountryIdentity package."""

from countryidentity.utils.dataloader import (
    find_data_file,
    load_records_file,
    format_not_found_error,
)
from countryidentity.utils.normalize import (
    fold_diacritics,
    collapse_whitespace,
    slugify_name,
    normalize_quotes,
)
from countryidentity.utils.build_utils import (
    load_yaml_file,
    expand_aliases,
)

__all__ = [
    # Data loading
    "find_data_file",
    "load_records_file",
    "format_not_found_error",
    # Normalization
    "fold_diacritics",
    "collapse_whitespace",
    "slugify_name",
    "normalize_quotes",
    # Build utilities
    "load_yaml_file",
    "expand_aliases",
]
