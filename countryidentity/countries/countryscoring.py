"""Similarity scoring for country name matching.

Scores a normalized query against a normalized candidate name in [0, 1].
Rules are applied in order and the first applicable one decides:

  1. Equal strings                          -> 1.0
  2. Length ratio below MIN_LENGTH_RATIO    -> 0.0
  3. Candidate contains query               -> len(query) / len(candidate),
     short fragments that cover little of the candidate are penalized
  4. Query contains candidate               -> len(candidate) / len(query)
  5. Word-set (Jaccard) overlap, penalized for single-word queries against
     multi-word names and for overlaps made only of generic words

The constants set where ambiguity rejection falls ("Guinea" against
"Equatorial Guinea", "Republic of X" against "Republic of Y").
"""

from __future__ import annotations

from countryidentity.countries.countrypatterns import GENERIC_WORDS


MIN_LENGTH_RATIO = 0.2

SHORT_FRAGMENT_LENGTH = 6
SHORT_FRAGMENT_RATIO = 0.6
SHORT_FRAGMENT_PENALTY = 0.3

SINGLE_WORD_PENALTY = 0.2
GENERIC_OVERLAP_PENALTY = 0.1


def word_overlap_score(query_norm: str, candidate_norm: str) -> float:
    """Jaccard similarity of the two word sets, with ambiguity penalties.

    Examples:
        >>> word_overlap_score("virgin islands us", "us virgin islands")
        1.0

        >>> round(word_overlap_score("republic of chad", "republic of peru"), 3)
        0.05
    """
    query_words = query_norm.split()
    candidate_words = candidate_norm.split()
    query_set = set(query_words)
    candidate_set = set(candidate_words)

    union = query_set | candidate_set
    if not union:
        return 0.0

    shared = query_set & candidate_set
    score = len(shared) / len(union)

    if len(query_words) == 1 and len(candidate_words) > 1:
        score *= SINGLE_WORD_PENALTY
    elif shared and not (shared - GENERIC_WORDS):
        score *= GENERIC_OVERLAP_PENALTY

    return score


def score_name(query_norm: str, candidate_norm: str) -> float:
    """Score a normalized query against a normalized candidate name.

    Not generally commutative: rule 3 penalizes short queries, rule 4 does not
    penalize short candidates.

    Args:
        query_norm: Normalized user input
        candidate_norm: Normalized country name or variant

    Returns:
        Score in [0, 1]

    Examples:
        >>> score_name("united states", "united states")
        1.0

        >>> round(score_name("vatican", "vatican city"), 3)
        0.583

        >>> round(score_name("guinea", "equatorial guinea"), 3)
        0.106

        >>> score_name("uk", "united kingdom of great britain")
        0.0
    """
    if query_norm == candidate_norm:
        return 1.0

    query_len = len(query_norm)
    candidate_len = len(candidate_norm)
    if not query_len or not candidate_len:
        return 0.0

    if min(query_len, candidate_len) / max(query_len, candidate_len) < MIN_LENGTH_RATIO:
        return 0.0

    if query_norm in candidate_norm:
        score = query_len / candidate_len
        if query_len <= SHORT_FRAGMENT_LENGTH and score < SHORT_FRAGMENT_RATIO:
            score *= SHORT_FRAGMENT_PENALTY
        return score

    if candidate_norm in query_norm:
        return candidate_len / query_len

    return word_overlap_score(query_norm, candidate_norm)


__all__ = [
    "MIN_LENGTH_RATIO",
    "SHORT_FRAGMENT_LENGTH",
    "SHORT_FRAGMENT_RATIO",
    "SHORT_FRAGMENT_PENALTY",
    "SINGLE_WORD_PENALTY",
    "GENERIC_OVERLAP_PENALTY",
    "word_overlap_score",
    "score_name",
]
