"""
pinyin-split: Pinyin to Chinese character converter

Segments concatenated Pinyin ("nihao", "wo3 ai4 ni3") into dictionary words
by greedy longest match and converts each to Chinese characters.
Uses a JSON dictionary built from CC-CEDICT.

Basic Usage:
    import pinyin_split

    dictionary = pinyin_split.load_dictionary()
    print(pinyin_split.convert(dictionary, "ni3 hao3"))    # 你好
    for entry in pinyin_split.suggest(dictionary, "zhong"):
        print(entry.chinese, entry.gloss)
"""

import time
from pathlib import Path
from typing import Optional, Tuple

from pinyin_split.converter import Segment, convert, segment
from pinyin_split.dictionary import (
    Dictionary,
    DictionaryEntry,
    DictionaryFormatError,
    load_dictionary,
    load_fallback_dictionary,
)
from pinyin_split.normalizer import normalize, normalize_compact
from pinyin_split.suggest import suggest

__version__ = "0.1.0"


def warm_up(path: Optional[Path] = None, verbose: bool = False) -> Tuple[float, dict, Dictionary]:
    """
    Load the dictionary and report timing.

    Args:
        path: Dictionary path. Uses default if not specified.
        verbose: If True, print timing information

    Returns:
        Tuple of (total_time_seconds, timing_details_dict, dictionary)
    """
    timings = {}
    total_start = time.perf_counter()

    if verbose:
        print("Loading pinyin-split dictionary...")

    t0 = time.perf_counter()
    dictionary = load_dictionary(path)
    timings['dictionary'] = (time.perf_counter() - t0) * 1000

    if verbose:
        print(f"  Dictionary:     {timings['dictionary']:>7.1f}ms ({len(dictionary):,} keys)")

    total_time = time.perf_counter() - total_start
    timings['total'] = total_time * 1000

    if verbose:
        print(f"Total warm-up:    {timings['total']:>7.1f}ms")

    return total_time, timings, dictionary


def get_version() -> str:
    """Get the library version."""
    return __version__


__all__ = [
    # Data classes
    "Dictionary",
    "DictionaryEntry",
    "Segment",
    # API
    "convert",
    "segment",
    "suggest",
    "normalize",
    "normalize_compact",
    "load_dictionary",
    "load_fallback_dictionary",
    "warm_up",
    "get_version",
    # Exceptions
    "DictionaryFormatError",
    # Version
    "__version__",
]
