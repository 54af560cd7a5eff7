"""Country entity resolution API.

Public API for converting between ISO 3166-1 alpha-2 codes, flag emoji, and
country names. Every function returns None (or False) instead of raising when
the input does not identify exactly one country.
"""

from typing import Iterable, List, Optional

import pandas as pd

from countryidentity.countries.countryflags import flag_to_letters, letters_to_flag
from countryidentity.countries.countryindex import (
    load_countries,
    load_country_index,
)
from countryidentity.countries.countrynormalize import (
    normalize_country_name,
    slugify_country_name,
)
from countryidentity.countries.countryresolver import (
    name_to_code as _name_to_code,
    resolve_country as _resolve_country,
    topk_matches as _topk_matches,
)
from countryidentity.utils.build_utils import expand_aliases


# ---- Validity predicates ----

def is_code(code: Optional[str]) -> bool:
    """True if code (any case, surrounding whitespace ignored) is a known ISO2 code.

    Examples:
        >>> is_code("us")
        True

        >>> is_code("XX")
        False

        >>> is_code(None)
        False
    """
    if code is None:
        return False
    return code.strip().upper() in load_country_index().by_code


def is_country_flag(flag: str) -> bool:
    """True if flag is the emoji of a known country.

    Examples:
        >>> is_country_flag("🇨🇱")
        True

        >>> is_country_flag("🇿🇿")
        False
    """
    return flag_to_code(flag) is not None


# ---- Single-direction conversions ----

def code_to_name(code: str) -> Optional[str]:
    """Display name for an ISO2 code.

    Examples:
        >>> code_to_name("ci")
        "Côte d'Ivoire"
    """
    if code is None:
        return None
    record = load_country_index().by_code.get(code.strip().upper())
    return record.name if record else None


def code_to_flag(code: str) -> Optional[str]:
    """Flag emoji for a valid ISO2 code; None for anything else.

    Examples:
        >>> code_to_flag("us")
        '🇺🇸'

        >>> code_to_flag("XX") is None
        True
    """
    if not is_code(code):
        return None
    return letters_to_flag(code.strip().upper())


def flag_to_code(flag: str) -> Optional[str]:
    """ISO2 code for a country flag emoji.

    Examples:
        >>> flag_to_code("🇬🇧")
        'GB'

        >>> flag_to_code("🏴") is None
        True
    """
    letters = flag_to_letters(flag)
    if letters is None:
        return None
    return letters if letters in load_country_index().by_code else None


def name_to_code(name: str) -> Optional[str]:
    """ISO2 code for a country name in any common format.

    Handles case, diacritics, "&" vs "and", "St." vs "Saint", comma-reversed
    official names ("Korea, Republic of") and government titles
    ("Kingdom of Spain"). Ambiguous input ("Korea", "United") gives None.

    Examples:
        >>> name_to_code("St. Kitts & Nevis")
        'KN'

        >>> name_to_code("Republic of Korea")
        'KR'

        >>> name_to_code("Korea") is None
        True
    """
    return _name_to_code(name)


# ---- Auto-detecting conversions ----

def code(input: str) -> Optional[str]:
    """ISO2 code from a flag emoji or a country name.

    Examples:
        >>> code("🇨🇱")
        'CL'

        >>> code("UK")
        'GB'
    """
    return flag_to_code(input) or name_to_code(input)


def name(input: str) -> Optional[str]:
    """Display name from a flag emoji or an ISO2 code.

    Examples:
        >>> name("🇬🇧")
        'United Kingdom'

        >>> name("KP")
        'North Korea'
    """
    flag_code = flag_to_code(input)
    if flag_code is not None:
        return code_to_name(flag_code)
    return code_to_name(input)


def flag(input: str) -> Optional[str]:
    """Flag emoji from an ISO2 code or a country name.

    Examples:
        >>> flag("JP")
        '🇯🇵'

        >>> flag("Republic of Moldova")
        '🇲🇩'
    """
    if is_code(input):
        return code_to_flag(input)
    resolved = name_to_code(input)
    return code_to_flag(resolved) if resolved else None


# ---- Identifier-style API ----

def country_identifier(name: str) -> Optional[str]:
    """Get canonical ISO identifier for a country.

    Resolves flags, ISO2 codes, country names and common variations to
    ISO 3166-1 alpha-2 codes.

    Args:
        name: Country flag, code or name (e.g., "🇺🇸", "us", "United States")

    Returns:
        ISO 3166-1 alpha-2 code (e.g., "US") or None if not recognized

    Examples:
        >>> country_identifier("United States of America")
        'US'

        >>> country_identifier("us")
        'US'

        >>> country_identifier("Holland")
        'NL'
    """
    if is_code(name):
        return name.strip().upper()
    return code(name)


def country_identifiers(names: Iterable[str]) -> List[Optional[str]]:
    """Batch resolve country identifiers to ISO 3166-1 alpha-2 codes.

    Examples:
        >>> country_identifiers(["USA", "Holland", "England"])
        ['US', 'NL', 'GB']
    """
    return [country_identifier(n) for n in names]


def resolve_country(name: str) -> dict:
    """Resolve a country name with the decision trail.

    Returns:
        Dict with query, final (ISO2 or None), decision and score.
        See countryresolver.resolve_country.

    Examples:
        >>> result = resolve_country("Kingdom of Spain")
        >>> result["final"], result["decision"], result["score"]
        ('ES', 'government_pattern', 1.0)
    """
    return _resolve_country(name)


def match_country(name: str, *, k: int = 5) -> List[dict]:
    """Top-K candidates + scores (for review UIs).

    Args:
        name: Country name to match
        k: Number of top candidates to return. Default 5.

    Returns:
        List of dicts with code, name, flag and score (0-1),
        ordered by descending score.

    Examples:
        >>> match_country("Vatican", k=1)
        [{'code': 'VA', 'name': 'Vatican City', 'flag': '🇻🇦', 'score': 0.5833333333333334}]
    """
    by_code = load_country_index().by_code
    return [
        {
            "code": c,
            "name": by_code[c].name,
            "flag": letters_to_flag(c),
            "score": score,
        }
        for c, score in _topk_matches(name, k=k)
    ]


def list_countries(search: Optional[str] = None) -> pd.DataFrame:
    """List countries in table order, optionally filtered by a name search.

    Args:
        search: Optional substring matched against normalized names and aliases

    Returns:
        DataFrame with columns code, name, name_norm, country_key, flag and
        alias1...alias10

    Examples:
        >>> list_countries(search="guinea")[["code", "name"]].values
        array([['GN', 'Guinea'], ['GQ', 'Equatorial Guinea'],
               ['GW', 'Guinea-Bissau'], ['PG', 'Papua New Guinea']], dtype=object)
    """
    rows = []
    for record in load_countries():
        rows.append({
            "code": record.code,
            "name": record.name,
            "name_norm": normalize_country_name(record.name),
            "country_key": slugify_country_name(record.name),
            "flag": letters_to_flag(record.code),
            **expand_aliases(list(record.aliases)),
        })
    df = pd.DataFrame(rows)

    if search:
        needle = normalize_country_name(search)
        alias_cols = [c for c in df.columns if c.startswith("alias")]
        mask = df["name_norm"].str.contains(needle, regex=False)
        for col in alias_cols:
            mask |= df[col].map(normalize_country_name).str.contains(needle, regex=False)
        df = df[mask].reset_index(drop=True)

    return df


__all__ = [
    "is_code",
    "is_country_flag",
    "code_to_name",
    "code_to_flag",
    "flag_to_code",
    "name_to_code",
    "code",
    "name",
    "flag",
    "country_identifier",
    "country_identifiers",
    "resolve_country",
    "match_country",
    "list_countries",
]
