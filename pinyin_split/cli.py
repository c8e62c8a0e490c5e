"""
CLI interface for pinyin-split.

Usage:
    pinyin-split "ni3 hao3"
    pinyin-split -d "woaini"
    pinyin-split --suggest "zhong"
    pinyin-split --json "ni hao"
"""

import argparse
import json
import sys
from pathlib import Path
from typing import List

from pinyin_split import __version__
from pinyin_split.converter import SOURCE_DICTIONARY, Segment, convert, segment
from pinyin_split.dictionary import Dictionary, DictionaryEntry, load_dictionary
from pinyin_split.normalizer import normalize, split_lines
from pinyin_split.suggest import DEFAULT_LIMIT, suggest


# ============================================================================
# Segment Views
# ============================================================================

def line_segments(dictionary: Dictionary, line: str) -> List[List[Segment]]:
    """Segments per token of a normalized line, honoring whole-line keys."""
    entry = dictionary.first(line)
    if entry is not None:
        return [[Segment(line, 0, len(line), entry.chinese, SOURCE_DICTIONARY, entry)]]
    return [segment(dictionary, token) for token in line.split(' ') if token]


# ============================================================================
# Output Formatting
# ============================================================================

def format_default(dictionary: Dictionary, text: str) -> str:
    return convert(dictionary, text)


def format_detailed(dictionary: Dictionary, text: str) -> str:
    """
    Detailed output with one row per segment.

    Format: surface → 汉字 (source) gloss
    """
    lines = [convert(dictionary, text), "─" * 40]

    for line in split_lines(normalize(text)):
        for token_segments in line_segments(dictionary, line):
            for seg in token_segments:
                gloss = seg.entry.gloss if seg.entry else ""
                lines.append(f"{seg.surface} → {seg.text} ({seg.source}) {gloss}".rstrip())

    return "\n".join(lines)


def format_json(dictionary: Dictionary, text: str) -> str:
    """Format conversion as JSON with per-segment details."""
    data = {"input": text, "output": convert(dictionary, text), "lines": []}

    for line in split_lines(normalize(text)):
        tokens = []
        for token_segments in line_segments(dictionary, line):
            tokens.append([
                {
                    "surface": seg.surface,
                    "text": seg.text,
                    "source": seg.source,
                    "gloss": seg.entry.gloss if seg.entry else None,
                    "start": seg.start,
                    "end": seg.end,
                }
                for seg in token_segments
            ])
        data["lines"].append({"normalized": line, "tokens": tokens})

    return json.dumps(data, ensure_ascii=False, indent=2)


def format_suggestions(entries: List[DictionaryEntry], as_json: bool = False) -> str:
    """Numbered list of suggestions (1-9, then 0 for the tenth)."""
    if as_json:
        return json.dumps([e.to_dict() for e in entries], ensure_ascii=False, indent=2)
    if not entries:
        return "No suggestions found"

    lines = []
    for index, entry in enumerate(entries):
        number = index + 1 if index < 9 else (0 if index == 9 else '')
        lines.append(f"{number}. {entry.chinese}\t{entry.gloss}")
    return "\n".join(lines)


# ============================================================================
# Main
# ============================================================================

def main(argv=None):
    parser = argparse.ArgumentParser(
        prog="pinyin-split",
        description="Convert Pinyin to Chinese characters",
    )
    parser.add_argument(
        "text",
        nargs="?",
        help="Pinyin text to convert",
    )
    parser.add_argument(
        "--dict", "-D",
        type=Path,
        default=None,
        dest="dict_path",
        help="Path to the dictionary JSON (default: bundled cedict.json)",
    )
    parser.add_argument(
        "--suggest", "-S",
        action="store_true",
        help="List candidate characters instead of converting",
    )
    parser.add_argument(
        "--limit", "-n",
        type=int,
        default=DEFAULT_LIMIT,
        help=f"Maximum number of suggestions (default: {DEFAULT_LIMIT})",
    )
    parser.add_argument(
        "--detail", "-d",
        action="store_true",
        help="Show how the input was segmented",
    )
    parser.add_argument(
        "--json", "-j",
        action="store_true",
        help="Output as JSON",
    )
    parser.add_argument(
        "--version", "-v",
        action="version",
        version=f"pinyin-split {__version__}",
    )

    args = parser.parse_args(argv)

    if args.text is None:
        # Read from stdin
        text = sys.stdin.read().strip()
    else:
        text = args.text

    if not text:
        parser.print_help()
        sys.exit(1)

    try:
        dictionary = load_dictionary(args.dict_path)

        if args.suggest:
            print(format_suggestions(suggest(dictionary, text, args.limit), args.json))
        elif args.json:
            print(format_json(dictionary, text))
        elif args.detail:
            print(format_detailed(dictionary, text))
        else:
            print(format_default(dictionary, text))

    except Exception as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
