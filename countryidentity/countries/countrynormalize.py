"""
Country Name Normalization Functions
------------------------------------

Folds a raw country name into a canonical comparable form:
  - ASCII apostrophes and quotes
  - Diacritic folding ("Côte" -> "cote", "Curaçao" -> "curacao")
  - Lowercase
  - "&" -> "and"
  - "St" / "St." -> "saint"
  - Whitespace runs collapsed to a single space

Examples:
  >>> normalize_country_name("Côte d'Ivoire")
  "cote d'ivoire"

  >>> normalize_country_name("St. Kitts & Nevis")
  'saint kitts and nevis'

  >>> normalize_country_name("  United   States ")
  'united states'
"""

import re

from countryidentity.utils.normalize import (
    fold_diacritics,
    collapse_whitespace,
    normalize_quotes,
    slugify_name,
)


AMPERSAND_RE = re.compile(r"\s*&\s*")
SAINT_RE = re.compile(r"\bst\.?\s+")


def normalize_country_name(s: str) -> str:
    """
    Normalization for exact-key lookup and fuzzy matching.

    Pure and idempotent: normalizing an already normalized string returns it
    unchanged. Empty or whitespace-only input yields "".

    Args:
        s: Raw country name

    Returns:
        Normalized string for matching

    Examples:
        >>> normalize_country_name("Bosnia & Herzegovina")
        'bosnia and herzegovina'

        >>> normalize_country_name("St Lucia")
        'saint lucia'

        >>> normalize_country_name("Virgin Islands, U.S.")
        'virgin islands, u.s.'

        >>> normalize_country_name("   ")
        ''
    """
    if not s:
        return ""

    s = normalize_quotes(s).strip()
    if not s:
        return ""

    s = fold_diacritics(s).lower()
    s = AMPERSAND_RE.sub(" and ", s)
    s = SAINT_RE.sub("saint ", s)

    return collapse_whitespace(s)


def slugify_country_name(s: str) -> str:
    """
    Create URL/key-safe slug for country names.

    Examples:
        >>> slugify_country_name("Côte d'Ivoire")
        'cote-divoire'

        >>> slugify_country_name("Bosnia and Herzegovina")
        'bosnia-and-herzegovina'
    """
    if not s:
        return ""

    return slugify_name(s)


__all__ = [
    "normalize_country_name",
    "slugify_country_name",
]
