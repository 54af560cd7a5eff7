"""Country Identity - Country code, flag and name resolution

Public API for converting between ISO 3166-1 alpha-2 codes, flag emoji and
free-form country names.

Usage:
    from countryidentity import code, name, flag

    code("Korea, Republic of")   # Returns: 'KR'
    code("🇨🇱")                  # Returns: 'CL'
    name("GB")                   # Returns: 'United Kingdom'
    flag("Republic of Moldova")  # Returns: '🇲🇩'

    # Explain a resolution
    resolve_country("St. Lucia")  # Returns: {'final': 'LC', 'decision': 'normalized', ...}
"""

__version__ = "0.0.1"

# ============================================================================
# Country Resolution API
# ============================================================================

from .countries.countryapi import (
    code,                  # Flag or name -> ISO code
    name,                  # Flag or code -> display name
    flag,                  # Code or name -> flag emoji
    code_to_name,          # ISO code -> display name
    code_to_flag,          # ISO code -> flag emoji
    flag_to_code,          # Flag emoji -> ISO code
    name_to_code,          # Country name -> ISO code
    is_code,               # Validate ISO code
    is_country_flag,       # Validate flag emoji
    country_identifier,    # Any identifier -> ISO code
    country_identifiers,   # Batch resolution of multiple countries
    resolve_country,       # Resolution with decision and score
    match_country,         # Get top-K candidate matches
    list_countries,        # List/filter countries as a DataFrame
)

from .countries.countryindex import (
    load_countries,        # Load the static country table
    clear_cache,           # Drop memoized table and index
)

# ============================================================================
# Building blocks
# ============================================================================

from .countries.countrynormalize import normalize_country_name
from .countries.countrypatterns import derive_variants
from .countries.countryscoring import score_name

__all__ = [
    # Version
    "__version__",

    # ========================================================================
    # PRIMARY APIS - Start here!
    # ========================================================================
    "code",
    "name",
    "flag",

    # ========================================================================
    # Direct conversions
    # ========================================================================
    "code_to_name",
    "code_to_flag",
    "flag_to_code",
    "name_to_code",
    "is_code",
    "is_country_flag",

    # ========================================================================
    # Identifier-style resolution
    # ========================================================================
    "country_identifier",
    "country_identifiers",
    "resolve_country",
    "match_country",
    "list_countries",
    "load_countries",
    "clear_cache",

    # ========================================================================
    # Building blocks
    # ========================================================================
    "normalize_country_name",
    "derive_variants",
    "score_name",
]
