"""Regional-indicator flag emoji arithmetic.

A flag emoji is two regional-indicator symbols (U+1F1E6..U+1F1FF), one per
letter of the ISO2 code, each offset from its ASCII capital by FLAG_OFFSET.
These helpers only do the arithmetic; whether a code exists is checked by
the caller against the country table.
"""

from typing import Optional

FLAG_OFFSET = 127397  # ord("🇦") - ord("A")

REGIONAL_INDICATOR_A = 0x1F1E6
REGIONAL_INDICATOR_Z = 0x1F1FF


def letters_to_flag(code: str) -> str:
    """Map two ASCII capitals to their flag emoji.

    Examples:
        >>> letters_to_flag("US")
        '🇺🇸'
    """
    return "".join(chr(ord(ch) + FLAG_OFFSET) for ch in code)


def flag_to_letters(flag: str) -> Optional[str]:
    """Decode a flag emoji to its two capitals, or None if it is not one.

    Examples:
        >>> flag_to_letters("🇯🇵")
        'JP'

        >>> flag_to_letters("🎌") is None
        True
    """
    flag = (flag or "").strip()
    if len(flag) != 2:
        return None

    letters = []
    for ch in flag:
        cp = ord(ch)
        if not REGIONAL_INDICATOR_A <= cp <= REGIONAL_INDICATOR_Z:
            return None
        letters.append(chr(cp - FLAG_OFFSET))
    return "".join(letters)


__all__ = [
    "FLAG_OFFSET",
    "letters_to_flag",
    "flag_to_letters",
]
