"""
CC-CEDICT parsing for the dictionary builder.

Corpus lines look like:

    中國 中国 [Zhong1 guo2] /China/Middle Kingdom/

Each line becomes a (key, entry) pair where the key is the tone-stripped
Pinyin with syllables concatenated ("zhongguo") and the entry holds the
simplified characters with the first gloss.
"""

import codecs
import gzip
import logging
import re
from dataclasses import dataclass
from typing import BinaryIO, Dict, Iterable, Iterator, List, Optional

from pinyin_split.dictionary import DictionaryEntry

logger = logging.getLogger(__name__)


# ============================================================================
# Line Grammar
# ============================================================================

# Traditional Simplified [Pinyin] /first gloss/...
CEDICT_LINE = re.compile(r"^(.+?) (.+?) \[(.+?)\] /([^/]+?)/")

COMMENT_MARKER = '#'

# Tone numbers; CC-CEDICT writes the neutral tone as 5
TONE_DIGITS = re.compile(r"[0-9]")

# Bytes read from the compressed stream per chunk
CHUNK_SIZE = 64 * 1024

PROGRESS_INTERVAL = 10000


@dataclass(slots=True)
class CedictLine:
    """A parsed corpus line."""
    traditional: str
    simplified: str
    pinyin: str
    gloss: str

    @property
    def key(self) -> str:
        return pinyin_key(self.pinyin)

    @property
    def entry(self) -> DictionaryEntry:
        return DictionaryEntry(chinese=self.simplified, gloss=self.gloss)


def plain_syllable(syllable: str) -> str:
    """
    Strip the tone number from a syllable and fold ü to u.

    Example:
        >>> plain_syllable("Lu:4")
        'lu'
    """
    plain = TONE_DIGITS.sub('', syllable.lower())
    return plain.replace('ü', 'u').replace('u:', 'u')


def pinyin_key(pinyin: str) -> str:
    """
    Build the dictionary key from CC-CEDICT Pinyin.

    Example:
        >>> pinyin_key("Zhong1 guo2")
        'zhongguo'
    """
    return ''.join(plain_syllable(s) for s in pinyin.split(' '))


def parse_line(line: str) -> Optional[CedictLine]:
    """
    Parse one corpus line.

    Returns:
        CedictLine, or None for blank, comment and malformed lines
    """
    if not line.strip() or line.startswith(COMMENT_MARKER):
        return None

    match = CEDICT_LINE.match(line)
    if not match:
        return None

    traditional, simplified, pinyin, gloss = match.groups()
    return CedictLine(traditional, simplified, pinyin, gloss)


# ============================================================================
# Streaming
# ============================================================================

def iter_lines(chunks: Iterable[str]) -> Iterator[str]:
    """
    Split text chunks into lines, carrying partial lines across chunks.

    The final line is yielded even without a trailing newline.
    """
    remainder = ''
    for chunk in chunks:
        buffer = remainder + chunk
        lines = buffer.split('\n')
        remainder = lines.pop()
        for line in lines:
            yield line.rstrip('\r')
    if remainder:
        yield remainder.rstrip('\r')


def iter_text_chunks(stream: BinaryIO, chunk_size: int = CHUNK_SIZE) -> Iterator[str]:
    """Decode a binary stream as UTF-8 in chunks (multi-byte safe)."""
    decoder = codecs.getincrementaldecoder('utf-8')()
    while True:
        data = stream.read(chunk_size)
        if not data:
            break
        yield decoder.decode(data)
    tail = decoder.decode(b'', final=True)
    if tail:
        yield tail


def read_corpus_lines(path, chunk_size: int = CHUNK_SIZE) -> Iterator[str]:
    """
    Stream lines from a corpus file.

    Gzip files (by .gz suffix) are decompressed incrementally; anything else
    is read as plain UTF-8 text.

    Raises:
        OSError: If the file can't be read or the gzip stream is corrupt
    """
    opener = gzip.open if str(path).endswith('.gz') else open
    with opener(path, 'rb') as stream:
        yield from iter_lines(iter_text_chunks(stream, chunk_size))


# ============================================================================
# Building
# ============================================================================

def build_from_lines(lines: Iterable[str]) -> Dict[str, List[DictionaryEntry]]:
    """
    Accumulate corpus lines into key -> entries, sorted by key.

    Duplicate entries for the same key are skipped; first-seen order is kept.
    Malformed lines are dropped.
    """
    entries: Dict[str, List[DictionaryEntry]] = {}
    count = 0
    skipped = 0

    for line in lines:
        parsed = parse_line(line)
        if parsed is None:
            if line.strip() and not line.startswith(COMMENT_MARKER):
                skipped += 1
                logger.debug(f"Skipping malformed line: {line!r}")
            continue

        key = parsed.key
        if not key:
            skipped += 1
            continue

        bucket = entries.setdefault(key, [])
        entry = parsed.entry
        if entry not in bucket:
            bucket.append(entry)

        count += 1
        if count % PROGRESS_INTERVAL == 0:
            logger.info(f"  Processed {count} entries...")

    logger.info(f"Parsed {count} entries into {len(entries)} keys ({skipped} malformed lines skipped)")
    return {key: entries[key] for key in sorted(entries)}
