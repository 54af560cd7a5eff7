"""Country name resolution orchestrator.

Single pass over increasingly loose strategies, stopping at the first hit:
  1. Empty input                -> no match
  2. Literal name lookup        (case-insensitive, first country listed wins)
  3. Normalized fast path       (diacritics, "&", "St.", whitespace)
  4. Government-pattern lookup  ("Republic of Moldova" -> "moldova")
  5. Ambiguity guard            (only generic words -> no match)
  6. Fuzzy scan over every country's variants
  7. Threshold decision         (stricter for single-word input)
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional, Tuple

from countryidentity.countries.countryindex import CountryIndex, load_country_index
from countryidentity.countries.countrynormalize import normalize_country_name
from countryidentity.countries.countrypatterns import derive_variants, is_generic_word
from countryidentity.countries.countryscoring import score_name

logger = logging.getLogger(__name__)

SINGLE_WORD_THRESHOLD = 0.4
MULTI_WORD_THRESHOLD = 0.2


def _best_variant_score(query_norm: str, canonical: str, variants) -> float:
    best = score_name(query_norm, canonical)
    for variant in variants:
        if best >= 1.0:
            break
        best = max(best, score_name(query_norm, variant))
    return best


def fuzzy_best_match(query_norm: str, index: CountryIndex) -> Tuple[Optional[str], float]:
    """Highest-scoring country for a normalized query.

    Ties keep the first country in table order; a perfect 1.0 stops the scan.

    Returns:
        (code, score), or (None, 0.0) if nothing scores above zero
    """
    best_code: Optional[str] = None
    best_score = 0.0

    for variant_set in index.variant_sets:
        score = _best_variant_score(query_norm, variant_set.canonical_normalized, variant_set.variants)
        if score > best_score:
            best_code, best_score = variant_set.code, score
            if best_score >= 1.0:
                break

    return best_code, best_score


def resolve_country(name: str, index: Optional[CountryIndex] = None) -> Dict[str, Any]:
    """Resolve a country name to an ISO2 code, with an explanation.

    Args:
        name: Country name in any common format
        index: Country index to search (default: the packaged table)

    Returns:
        Dict with:
          - query: {"name": raw input, "name_norm": normalized input}
          - final: ISO2 code, or None
          - decision: "empty" | "exact" | "normalized" | "government_pattern"
                      | "ambiguous" | "fuzzy" | "below_threshold"
          - score: match confidence in [0, 1]

    Examples:
        >>> resolve_country("Republic of Moldova")["final"]
        'MD'

        >>> resolve_country("Korea")["decision"]
        'below_threshold'
    """
    if index is None:
        index = load_country_index()

    raw = (name or "").strip()
    result: Dict[str, Any] = {
        "query": {"name": name, "name_norm": ""},
        "final": None,
        "decision": "empty",
        "score": 0.0,
    }

    if not raw:
        return result

    # Literal names, first listed country wins
    code = index.literal.get(raw.lower())
    if code:
        return _decide(result, code, "exact", 1.0)

    query_norm = normalize_country_name(raw)
    result["query"]["name_norm"] = query_norm
    if not query_norm:
        return result

    # Normalized fast path
    code = index.names.get(query_norm)
    if code:
        return _decide(result, code, "normalized", 1.0)

    # Government-pattern variants of the input itself
    for variant in derive_variants(raw):
        code = index.names.get(variant)
        if code:
            return _decide(result, code, "government_pattern", 1.0)

    tokens = query_norm.split()
    if all(is_generic_word(token) for token in tokens):
        result["decision"] = "ambiguous"
        logger.debug(f"Rejected generic country query {raw!r}")
        return result

    code, score = fuzzy_best_match(query_norm, index)
    threshold = SINGLE_WORD_THRESHOLD if len(tokens) == 1 else MULTI_WORD_THRESHOLD
    if code is not None and score >= threshold:
        return _decide(result, code, "fuzzy", score)

    result["decision"] = "below_threshold"
    result["score"] = score
    logger.debug(f"No country match for {raw!r} (best {code} at {score:.3f} < {threshold})")
    return result


def _decide(result: Dict[str, Any], code: str, decision: str, score: float) -> Dict[str, Any]:
    result["final"] = code
    result["decision"] = decision
    result["score"] = score
    logger.debug(f"Resolved {result['query']['name']!r} -> {code} ({decision}, {score:.3f})")
    return result


def name_to_code(name: str, index: Optional[CountryIndex] = None) -> Optional[str]:
    """ISO2 code for a country name, or None if unknown or ambiguous."""
    return resolve_country(name, index=index)["final"]


def topk_matches(
    name: str,
    k: int = 5,
    index: Optional[CountryIndex] = None,
) -> List[Tuple[str, float]]:
    """Return top-K countries with their best fuzzy scores.

    Useful for review UIs and understanding resolution decisions. Scores use
    the same scorer as the fuzzy fallback; countries scoring 0 are omitted.

    Returns:
        List of (code, score) tuples, ordered by descending score, then table order

    Examples:
        >>> topk_matches("Vatican", k=1)
        [('VA', 0.5833333333333334)]
    """
    if index is None:
        index = load_country_index()

    query_norm = normalize_country_name(name or "")
    if not query_norm or k <= 0:
        return []

    scored = []
    for position, variant_set in enumerate(index.variant_sets):
        score = _best_variant_score(query_norm, variant_set.canonical_normalized, variant_set.variants)
        if score > 0:
            scored.append((score, position, variant_set.code))

    scored.sort(key=lambda x: (-x[0], x[1]))
    return [(code, score) for score, _, code in scored[:k]]


__all__ = [
    "SINGLE_WORD_THRESHOLD",
    "MULTI_WORD_THRESHOLD",
    "fuzzy_best_match",
    "resolve_country",
    "name_to_code",
    "topk_matches",
]
