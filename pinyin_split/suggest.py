"""
Suggestion finder for pinyin-split.

Returns candidate entries for partial Pinyin input, in three tiers:
1. Exact key match (only that key's entries)
2. Keys starting with the input
3. Keys containing the input elsewhere
"""

from typing import List

from pinyin_split.dictionary import Dictionary, DictionaryEntry
from pinyin_split.normalizer import collapse_line, normalize

DEFAULT_LIMIT = 10


def suggest(
    dictionary: Dictionary,
    partial_input: str,
    limit: int = DEFAULT_LIMIT,
) -> List[DictionaryEntry]:
    """
    Find candidate entries for partial Pinyin input.

    Keys are visited in lexicographic order. All entries of a key are appended
    before the limit is checked, then the result is clipped to the limit.

    Args:
        dictionary: Loaded dictionary
        partial_input: Raw partial input (e.g. "zhong", "ni3 h")
        limit: Maximum number of entries to return

    Returns:
        Up to limit entries, best tier first

    Example:
        >>> from pinyin_split.dictionary import load_fallback_dictionary
        >>> [e.chinese for e in suggest(load_fallback_dictionary(), "hao", limit=2)]
        ['好', '号']
    """
    query = collapse_line(normalize(partial_input))
    if not query or limit < 1:
        return []

    if query in dictionary:
        return list(dictionary[query][:limit])

    suggestions: List[DictionaryEntry] = []

    for key in dictionary.keys_with_prefix(query):
        suggestions.extend(dictionary[key])
        if len(suggestions) >= limit:
            return suggestions[:limit]

    for key in dictionary:
        if query in key and not key.startswith(query):
            suggestions.extend(dictionary[key])
            if len(suggestions) >= limit:
                break

    return suggestions[:limit]
