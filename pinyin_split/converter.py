"""
Converter module for pinyin-split.

This module implements the core Pinyin -> Chinese conversion using greedy
longest-match segmentation over the dictionary keys.
"""

import logging
from dataclasses import dataclass
from typing import List, Optional

from pinyin_split.dictionary import Dictionary, DictionaryEntry
from pinyin_split.normalizer import normalize, split_lines
from pinyin_split.syllables import match_syllables

logger = logging.getLogger(__name__)


# =============================================================================
# Constants
# =============================================================================

SOURCE_DICTIONARY = "dictionary"
SOURCE_SYLLABLE = "syllable"
SOURCE_PASSTHROUGH = "passthrough"


# =============================================================================
# Segment Data Structure
# =============================================================================

@dataclass(slots=True)
class Segment:
    """
    A converted span of a token.

    Attributes:
        surface: The Pinyin span as it appears in the token
        start: Start position in the token
        end: End position in the token
        text: Output text (Chinese characters, or the raw character)
        source: How the span was matched (dictionary, syllable, passthrough)
        entry: The dictionary entry used, None for passthrough
    """
    surface: str
    start: int
    end: int
    text: str
    source: str
    entry: Optional[DictionaryEntry] = None

    @property
    def converted(self) -> bool:
        return self.entry is not None


# =============================================================================
# Segmentation
# =============================================================================

def _match_at(dictionary: Dictionary, token: str, i: int) -> Segment:
    key = dictionary.longest_prefix(token, i)
    if key is not None:
        entry = dictionary.first(key)
        return Segment(key, i, i + len(key), entry.chinese, SOURCE_DICTIONARY, entry)

    # Syllable fallback. A syllable only converts when it is also a key,
    # which the longest_prefix scan above would already have found.
    for syllable in match_syllables(token, i):
        entry = dictionary.first(syllable)
        if entry is not None:
            logger.debug(f"Syllable fallback matched {syllable!r} at {i} in {token!r}")
            return Segment(syllable, i, i + len(syllable), entry.chinese, SOURCE_SYLLABLE, entry)

    char = token[i]
    return Segment(char, i, i + 1, char, SOURCE_PASSTHROUGH)


def segment(dictionary: Dictionary, token: str) -> List[Segment]:
    """
    Split a space-free token into dictionary spans, left to right.

    At each position the longest matching key wins. Positions no key covers
    fall back to the syllable table, then to passing the raw character through.

    Args:
        dictionary: Loaded dictionary
        token: Normalized token without spaces

    Returns:
        List of Segment objects covering the whole token

    Example:
        >>> d = Dictionary.from_mapping({"a": ["阿 (a)"], "ab": ["甲乙 (ab)"]})
        >>> [s.surface for s in segment(d, "abc")]
        ['ab', 'c']
    """
    segments = []
    i = 0
    while i < len(token):
        seg = _match_at(dictionary, token, i)
        segments.append(seg)
        i = seg.end
    return segments


def convert_token(dictionary: Dictionary, token: str) -> str:
    """Convert a single space-free token. Chinese output has no separators."""
    return ''.join(seg.text for seg in segment(dictionary, token))


def convert_line(dictionary: Dictionary, line: str) -> str:
    """
    Convert one normalized line.

    If the whole line (with its single spaces) is a key, that entry wins.
    Otherwise each space-separated token is converted on its own and the
    results are joined with single spaces.
    """
    if not line:
        return ""

    entry = dictionary.first(line)
    if entry is not None:
        return entry.chinese

    return ' '.join(
        convert_token(dictionary, token)
        for token in line.split(' ')
        if token
    )


# =============================================================================
# Main API
# =============================================================================

def convert(dictionary: Dictionary, pinyin_text: str) -> str:
    """
    Convert Pinyin text to Chinese characters.

    Each line is converted independently; blank lines stay blank and the
    output has as many lines as the input. Never raises for str input:
    anything unmatched passes through unchanged.

    Args:
        dictionary: Loaded dictionary
        pinyin_text: Raw Pinyin (tones as numbers or marks, any case)

    Returns:
        Converted text

    Example:
        >>> from pinyin_split.dictionary import load_fallback_dictionary
        >>> convert(load_fallback_dictionary(), "ni3 hao3")
        '你好'
    """
    lines = split_lines(normalize(pinyin_text))
    return '\n'.join(convert_line(dictionary, line) for line in lines)
