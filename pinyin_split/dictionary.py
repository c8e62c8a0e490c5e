"""
Pinyin Dictionary for pinyin-split.

This module provides the immutable dictionary used by the converter and the
suggestion finder. The dictionary is built from CC-CEDICT and maps:
- Normalized Pinyin keys ("nihao", or phrase keys like "ni hao")
- To an ordered tuple of DictionaryEntry values (first entry is the default)

Keys are indexed in a marisa_trie.Trie for longest-prefix and prefix queries.
The persisted form is a JSON object written by scripts/build_dictionary.py.
"""

import json
import logging
import re
from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path
from types import MappingProxyType
from typing import Any, Dict, Iterator, List, Optional, Tuple, Union

import marisa_trie

from pinyin_split.normalizer import collapse_line, normalize

logger = logging.getLogger(__name__)


class DictionaryFormatError(ValueError):
    """Raised when a persisted dictionary does not match the expected format."""
    pass


# ============================================================================
# Entry
# ============================================================================

# "汉字 (meaning)"; the gloss runs to the last closing parenthesis
DISPLAY_PATTERN = re.compile(r"^([^\s(]+)\s*\((.+)\)\s*$")

NO_MEANING = "No meaning available"


@dataclass(frozen=True, slots=True)
class DictionaryEntry:
    """
    A single candidate for a Pinyin key.

    Attributes:
        chinese: The Chinese text (simplified characters)
        gloss: First English meaning from CC-CEDICT
    """
    chinese: str
    gloss: str

    def __str__(self) -> str:
        return f"{self.chinese} ({self.gloss})"

    @classmethod
    def parse(cls, display: str) -> "DictionaryEntry":
        """
        Parse the display form "<chinese> (<gloss>)".

        Strings that don't follow the format are split on the first space;
        the remainder (without parentheses) becomes the gloss.

        Example:
            >>> DictionaryEntry.parse("你好 (hello)")
            DictionaryEntry(chinese='你好', gloss='hello')
        """
        match = DISPLAY_PATTERN.match(display)
        if match:
            return cls(chinese=match.group(1), gloss=match.group(2))

        parts = display.split(' ')
        chinese = parts[0] or display
        gloss = ' '.join(parts[1:]).replace('(', '').replace(')', '')
        return cls(chinese=chinese, gloss=gloss or NO_MEANING)

    def to_dict(self) -> Dict[str, str]:
        return {"chinese": self.chinese, "gloss": self.gloss}


EntryLike = Union[str, Dict[str, Any], DictionaryEntry]


def coerce_entry(value: EntryLike) -> DictionaryEntry:
    """Convert a persisted value (display string or object) to a DictionaryEntry."""
    if isinstance(value, DictionaryEntry):
        return value
    if isinstance(value, str):
        return DictionaryEntry.parse(value)
    if isinstance(value, dict):
        chinese = value.get("chinese")
        if not isinstance(chinese, str) or not chinese:
            raise DictionaryFormatError(f"Entry has no 'chinese' text: {value!r}")
        gloss = value.get("gloss") or NO_MEANING
        return DictionaryEntry(chinese=chinese, gloss=str(gloss))
    raise DictionaryFormatError(f"Unsupported entry type: {type(value).__name__}")


def normalize_key(key: str) -> str:
    """Canonical form of a dictionary key (no tones, lowercase, single spaces)."""
    return collapse_line(normalize(key))


# ============================================================================
# Dictionary
# ============================================================================

class Dictionary(Mapping):
    """
    Immutable mapping from normalized Pinyin key to candidate entries.

    Iteration order is lexicographic by key. Built once and shared read-only;
    nothing mutates it after construction.

    Example:
        >>> d = Dictionary.from_mapping({"ni hao": ["你好 (hello)"]})
        >>> d.first("ni hao").chinese
        '你好'
    """

    __slots__ = ("_entries", "_trie", "_max_key_length")

    def __init__(self, entries: Mapping):
        merged: Dict[str, List[DictionaryEntry]] = {}
        for raw_key, values in entries.items():
            if isinstance(values, (str, dict, DictionaryEntry)):
                raise DictionaryFormatError(f"Entries for {raw_key!r} must be a list")
            key = normalize_key(raw_key)
            if not key:
                logger.debug(f"Skipping empty key {raw_key!r}")
                continue
            bucket = merged.setdefault(key, [])
            for value in values:
                entry = coerce_entry(value)
                if entry not in bucket:
                    bucket.append(entry)

        ordered = {
            key: tuple(merged[key])
            for key in sorted(merged)
            if merged[key]
        }
        self._entries = MappingProxyType(ordered)
        self._trie = marisa_trie.Trie(list(ordered))
        self._max_key_length = max((len(k) for k in ordered), default=0)

    @classmethod
    def from_mapping(cls, mapping: Mapping) -> "Dictionary":
        """Build from a dict of key -> list of display strings, objects or entries."""
        return cls(mapping)

    # Mapping protocol

    def __getitem__(self, key: str) -> Tuple[DictionaryEntry, ...]:
        return self._entries[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, key: object) -> bool:
        return key in self._entries

    def __repr__(self) -> str:
        return f"Dictionary({len(self)} keys)"

    # Lookups

    @property
    def max_key_length(self) -> int:
        return self._max_key_length

    def first(self, key: str) -> Optional[DictionaryEntry]:
        """Default (first listed) entry for key, or None."""
        entries = self._entries.get(key)
        return entries[0] if entries else None

    def longest_prefix(self, text: str, start: int = 0) -> Optional[str]:
        """
        Longest key that is a prefix of text[start:].

        Two different keys of the same length can't both be prefixes of the
        same string, so the result is unique.

        Args:
            text: Text being segmented
            start: Position to match at

        Returns:
            The matched key, or None
        """
        window = text[start:start + self._max_key_length]
        if not window:
            return None
        prefixes = self._trie.prefixes(window)
        if not prefixes:
            return None
        return max(prefixes, key=len)

    def keys_with_prefix(self, prefix: str) -> List[str]:
        """All keys starting with prefix, in lexicographic order."""
        return sorted(self._trie.keys(prefix))

    def has_prefix(self, prefix: str) -> bool:
        """Check if any key starts with the given prefix."""
        try:
            next(iter(self._trie.iterkeys(prefix)))
            return True
        except StopIteration:
            return False

    def to_dict(self) -> Dict[str, Tuple[DictionaryEntry, ...]]:
        return dict(self._entries)


# ============================================================================
# Persistence
# ============================================================================

def get_dictionary_path() -> Path:
    """Get the default dictionary path."""
    return Path(__file__).parent / "data" / "cedict.json"


def read_dictionary(path: Path) -> Dictionary:
    """
    Read a persisted dictionary.

    Values may be display strings "<chinese> (<gloss>)" or objects
    {"chinese": ..., "gloss": ...}.

    Raises:
        FileNotFoundError: If the file doesn't exist
        DictionaryFormatError: If the file isn't a valid dictionary
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(
            f"Dictionary not found at {path}. "
            "Run 'python scripts/build_dictionary.py' to build it."
        )

    try:
        with open(path, 'r', encoding='utf-8') as f:
            data = json.load(f)
    except (json.JSONDecodeError, UnicodeDecodeError) as e:
        raise DictionaryFormatError(f"Invalid JSON in {path}: {e}") from e

    if not isinstance(data, dict):
        raise DictionaryFormatError(
            f"Expected a JSON object at top level of {path}, got {type(data).__name__}"
        )
    for key, values in data.items():
        if not isinstance(values, list):
            raise DictionaryFormatError(f"Entries for {key!r} must be a list")

    return Dictionary(data)


def load_dictionary(path: Optional[Path] = None, fallback: bool = True) -> Dictionary:
    """
    Load the dictionary.

    Args:
        path: Path to the JSON file. Uses default if not specified.
        fallback: Use the built-in fallback dictionary if loading fails

    Returns:
        The loaded Dictionary

    Raises:
        FileNotFoundError: If the file doesn't exist and fallback is False
        DictionaryFormatError: If the file is malformed and fallback is False
    """
    if path is None:
        path = get_dictionary_path()

    try:
        dictionary = read_dictionary(path)
    except (OSError, DictionaryFormatError) as e:
        if not fallback:
            raise
        logger.warning(f"Failed to load dictionary ({e}); using built-in fallback")
        return load_fallback_dictionary()

    logger.info(f"Loaded dictionary from {path} ({len(dictionary):,} keys)")
    return dictionary


def load_fallback_dictionary() -> Dictionary:
    """Build the small embedded dictionary used when loading fails."""
    from pinyin_split.fallback import FALLBACK_ENTRIES
    return Dictionary(FALLBACK_ENTRIES)


def save_dictionary(
    entries: Mapping,
    path: Path,
    structured: bool = False,
) -> None:
    """
    Save a dictionary as pretty-printed JSON sorted by key.

    Args:
        entries: Mapping of key -> iterable of DictionaryEntry
        path: Output path
        structured: Write {"chinese", "gloss"} objects instead of display strings
    """
    data = {}
    for key in sorted(entries):
        values = [coerce_entry(v) for v in entries[key]]
        if structured:
            data[key] = [v.to_dict() for v in values]
        else:
            data[key] = [str(v) for v in values]

    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)

    # A failed write leaves the existing file untouched
    tmp_path = path.with_suffix(path.suffix + ".tmp")
    try:
        with open(tmp_path, 'w', encoding='utf-8') as f:
            json.dump(data, f, ensure_ascii=False, indent=2)
        tmp_path.replace(path)
    except BaseException:
        tmp_path.unlink(missing_ok=True)
        raise
