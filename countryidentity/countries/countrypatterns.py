"""
Government-Pattern Stripping
----------------------------

Derives additional normalized variants of a country name by removing
state-title prefixes/suffixes ("Republic of", "Kingdom of", " Islands")
and by reversing comma-separated clauses ("Korea, Republic of" ->
"republic of korea").

Stripped fragments are only kept when they still identify something:
single generic words ("republic", "island") and bare terms shared by
several countries ("korea", "congo") are rejected.

Examples:
  >>> derive_variants("Moldova, Republic of")
  ['moldova, republic of', 'republic of moldova', 'moldova']

  >>> derive_variants("Cayman Islands")
  ['cayman islands', 'cayman']

  >>> derive_variants("Korea, Republic of")
  ['korea, republic of', 'republic of korea']
"""

from typing import List

from countryidentity.countries.countrynormalize import normalize_country_name


# Words too common across country names to identify a country on their own
GENERIC_WORDS = frozenset({
    "united",
    "republic",
    "democratic",
    "kingdom",
    "state",
    "states",
    "island",
    "islands",
    "federation",
    "socialist",
    "islamic",
    "the",
    "of",
    "and",
    "new",
    "north",
    "south",
    "east",
    "west",
    "saint",
    "st",
})

# Bare terms that legitimately name more than one country
AMBIGUOUS_TERMS = frozenset({
    "korea",
    "guinea",
    "congo",
    "virgin",
    "samoa",
    "sudan",
})

# Ordered state-title prefixes, applied to normalized names
GOVERNMENT_PREFIXES = (
    "the ",
    "republic of ",
    "democratic republic of ",
    "people's republic of ",
    "kingdom of ",
    "principality of ",
    "federation of ",
    "state of ",
    "commonwealth of ",
    "united states of ",
    "islamic republic of ",
    "socialist republic of ",
)

GOVERNMENT_SUFFIXES = (
    " republic",
    " federation",
    " kingdom",
    " islands",
    " island",
)

MIN_VARIANT_LENGTH = 4


def is_generic_word(word: str) -> bool:
    """True if word is on the generic stoplist."""
    return word in GENERIC_WORDS


def _is_acceptable_variant(candidate: str, original: str) -> bool:
    if not candidate or candidate == original:
        return False
    if len(candidate) < MIN_VARIANT_LENGTH:
        return False
    if " " not in candidate and is_generic_word(candidate):
        return False
    return candidate not in AMBIGUOUS_TERMS


def strip_government_patterns(name_norm: str) -> List[str]:
    """
    Apply each prefix/suffix pattern once to an already normalized name.

    Args:
        name_norm: Normalized country name

    Returns:
        Accepted stripped variants, in pattern order, without duplicates

    Examples:
        >>> strip_government_patterns("kingdom of spain")
        ['spain']

        >>> strip_government_patterns("united kingdom")
        []
    """
    variants: List[str] = []

    for prefix in GOVERNMENT_PREFIXES:
        if name_norm.startswith(prefix):
            stripped = name_norm[len(prefix):].strip()
            if _is_acceptable_variant(stripped, name_norm) and stripped not in variants:
                variants.append(stripped)

    for suffix in GOVERNMENT_SUFFIXES:
        if name_norm.endswith(suffix):
            stripped = name_norm[:-len(suffix)].strip()
            if _is_acceptable_variant(stripped, name_norm) and stripped not in variants:
                variants.append(stripped)

    return variants


def reverse_comma_clauses(name_norm: str) -> str:
    """
    Reverse comma-separated clauses: "korea, republic of" -> "republic of korea".

    Returns the input unchanged when it has no ", " separator.
    """
    if ", " not in name_norm:
        return name_norm
    parts = name_norm.split(", ")
    return " ".join(reversed(parts))


def derive_variants(raw_name: str) -> List[str]:
    """
    Derive every normalized variant of a country name.

    Always includes the plain normalized form (first). Comma-separated names
    add their clause-reversed form, which is stripped of government patterns
    too; then the patterns are applied to the normalized form itself.

    Args:
        raw_name: Country name as written (any case, diacritics, "&", "St.")

    Returns:
        Deduplicated list of normalized variants, in derivation order.
        Empty if the name normalizes to "".

    Examples:
        >>> derive_variants("Republic of North Macedonia")
        ['republic of north macedonia', 'north macedonia']

        >>> derive_variants("Virgin Islands, British")
        ['virgin islands, british', 'british virgin islands', 'british virgin']
    """
    base = normalize_country_name(raw_name)
    if not base:
        return []

    variants = [base]

    def add(variant: str) -> None:
        if variant and variant not in variants:
            variants.append(variant)

    if "," in base:
        reversed_form = reverse_comma_clauses(base)
        add(reversed_form)
        for variant in strip_government_patterns(reversed_form):
            add(variant)

    for variant in strip_government_patterns(base):
        add(variant)

    return variants


__all__ = [
    "GENERIC_WORDS",
    "AMBIGUOUS_TERMS",
    "GOVERNMENT_PREFIXES",
    "GOVERNMENT_SUFFIXES",
    "is_generic_word",
    "strip_government_patterns",
    "reverse_comma_clauses",
    "derive_variants",
]
