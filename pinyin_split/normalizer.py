"""
Pinyin normalization for pinyin-split.

Raw user input is canonicalized before any dictionary lookup:
- lowercase
- tone numbers (any ASCII digit) removed
- tone marks and the umlaut folded away (ā -> a, ü -> u)
- runs of spaces/tabs collapsed to a single space
- newlines kept, since each line is converted independently
"""

import re
import unicodedata
from typing import List

# Whitespace other than newline
_SPACE_RUN = re.compile(r"[^\S\n]+")
_ALL_SPACE = re.compile(r"\s+")
_DIGITS = re.compile(r"[0-9]")
# Combining Diacritical Marks block (tone marks, diaeresis)
_DIACRITICS = re.compile("[\u0300-\u036f]")


def _fold_marks(text: str) -> str:
    """Remove tone marks and the diaeresis from Latin letters."""
    decomposed = unicodedata.normalize('NFD', text)
    return unicodedata.normalize('NFC', _DIACRITICS.sub('', decomposed))


def normalize(raw: str) -> str:
    """
    Canonicalize raw Pinyin input.

    Spaces are kept because they mark phrase boundaries supplied by the user.
    The result is not trimmed; callers strip lines as needed.

    Args:
        raw: User supplied text

    Returns:
        Normalized text (idempotent: normalize(normalize(x)) == normalize(x))

    Example:
        >>> normalize("Ni3  Hao3")
        'ni hao'
        >>> normalize("lǜ")
        'lu'
    """
    if not raw:
        return ""

    text = _fold_marks(raw.lower())
    text = _DIGITS.sub('', text)
    return _SPACE_RUN.sub(' ', text)


def normalize_compact(raw: str) -> str:
    """Normalize and drop all whitespace, for no-space keys like 'nihao'."""
    return _ALL_SPACE.sub('', normalize(raw))


def collapse_line(line: str) -> str:
    """Trim a single line and collapse its internal whitespace."""
    return _ALL_SPACE.sub(' ', line).strip()


def split_lines(normalized: str) -> List[str]:
    """Split normalized text into trimmed lines (blank lines kept as '')."""
    return [collapse_line(line) for line in normalized.split('\n')]
