"""Shared text normalization utilities.

This module provides generic normalization helpers used by the
countries resolution modules.
"""

import re
import unicodedata

from unidecode import unidecode


_WHITESPACE_RE = re.compile(r"\s+")


def _is_latin(ch: str) -> bool:
    return unicodedata.name(ch, "").startswith("LATIN")


def fold_diacritics(s: str) -> str:
    """Transliterate extended Latin characters to their base ASCII form.

    Uses NFKD decomposition and drops combining marks, then passes the Latin
    letters that do not decompose (ø, æ, ß, ł, ...) through unidecode.
    Characters outside the Latin alphabet are left untouched.

    Args:
        s: Raw text

    Returns:
        Text with diacritics removed

    Examples:
        >>> fold_diacritics("Côte d'Ivoire")
        "Cote d'Ivoire"

        >>> fold_diacritics("Curaçao")
        'Curacao'

        >>> fold_diacritics("Færøerne")
        'Faeroerne'
    """
    if not s:
        return ""

    s = unicodedata.normalize("NFKD", s)
    s = "".join(ch for ch in s if not unicodedata.combining(ch))
    return "".join(unidecode(ch) if not ch.isascii() and _is_latin(ch) else ch for ch in s)


def collapse_whitespace(s: str) -> str:
    """Collapse every whitespace run to a single space and trim.

    Examples:
        >>> collapse_whitespace("  United \\t  States ")
        'United States'
    """
    return _WHITESPACE_RE.sub(" ", s).strip()


def slugify_name(s: str) -> str:
    """Create URL/key-safe slug.

    Transformations:
      - Strip whitespace
      - Lowercase
      - Fold diacritics
      - Replace spaces and underscores with hyphens
      - Remove all non-alphanumeric except hyphens
      - Collapse multiple hyphens to single hyphen
      - Strip leading/trailing hyphens

    Args:
        s: Text to slugify

    Returns:
        Slug suitable for URLs, keys, filenames

    Examples:
        >>> slugify_name("Côte d'Ivoire")
        'cote-divoire'

        >>> slugify_name("Holy See (Vatican City State)")
        'holy-see-vatican-city-state'
    """
    if not s:
        return ""

    s = fold_diacritics(s.strip()).lower()

    # Replace spaces and underscores with hyphens
    s = re.sub(r"[\s_]+", "-", s)

    # Remove all non-alphanumeric except hyphens
    s = re.sub(r"[^a-z0-9\-]", "", s)

    # Collapse multiple hyphens
    s = re.sub(r"-+", "-", s)

    return s.strip("-")


def normalize_quotes(s: str) -> str:
    """Normalize typographic quotes and apostrophes to ASCII.

    Examples:
        >>> normalize_quotes("Côte d\\u2019Ivoire")
        "Côte d'Ivoire"

        >>> normalize_quotes("\\u201cquoted\\u201d")
        '"quoted"'
    """
    s = s.replace("‘", "'").replace("’", "'").replace("ʼ", "'")
    s = s.replace("“", '"').replace("”", '"')
    return s


__all__ = [
    "fold_diacritics",
    "collapse_whitespace",
    "slugify_name",
    "normalize_quotes",
]
