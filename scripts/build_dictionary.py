#!/usr/bin/env python3
"""
Dictionary Builder for pinyin-split.

This script builds the Pinyin dictionary from CC-CEDICT.
It downloads the gzipped corpus, streams it line by line, and saves
a JSON object mapping tone-less Pinyin keys to "<chinese> (<gloss>)" entries.

Usage:
    python scripts/build_dictionary.py [--input PATH] [--output PATH]
"""

import argparse
import logging
import shutil
import sys
import tempfile
import time
import urllib.request
import zlib
from pathlib import Path

# Add parent to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from pinyin_split.cedict import build_from_lines, read_corpus_lines
from pinyin_split.dictionary import get_dictionary_path, save_dictionary

logging.basicConfig(level=logging.INFO, format='%(asctime)s - %(levelname)s - %(message)s')
logger = logging.getLogger(__name__)


# ============================================================================
# Paths
# ============================================================================

CEDICT_URL = "https://www.mdbg.net/chinese/export/cedict/cedict_1_0_ts_utf-8_mdbg.txt.gz"
DEFAULT_OUTPUT = get_dictionary_path()
DOWNLOAD_TIMEOUT = 60


# ============================================================================
# Download
# ============================================================================

def download_cedict(url: str, dest: Path, timeout: float = DOWNLOAD_TIMEOUT) -> Path:
    """
    Download the CC-CEDICT archive to dest.

    Raises:
        OSError: On network failure or a non-200 response
    """
    logger.info(f"Downloading CC-CEDICT from {url}...")

    with urllib.request.urlopen(url, timeout=timeout) as response:
        status = getattr(response, 'status', 200)
        if status != 200:
            raise OSError(f"Failed to download: HTTP {status}")
        with open(dest, 'wb') as f:
            shutil.copyfileobj(response, f)

    size = dest.stat().st_size / (1024 * 1024)
    logger.info(f"Downloaded {dest.name} ({size:.1f} MB)")
    return dest


# ============================================================================
# Main
# ============================================================================

def build(corpus: Path, output: Path, structured: bool = False) -> int:
    """Parse corpus and save the dictionary. Returns the number of keys."""
    logger.info(f"Parsing {corpus}...")
    entries = build_from_lines(read_corpus_lines(corpus))

    save_dictionary(entries, output, structured=structured)
    size = output.stat().st_size / (1024 * 1024)
    logger.info(f"Saved {len(entries)} unique Pinyin keys to {output} ({size:.1f} MB)")
    return len(entries)


def main(argv=None):
    parser = argparse.ArgumentParser(
        description="Build the pinyin-split dictionary from CC-CEDICT"
    )
    parser.add_argument(
        '--input', '-i',
        type=Path,
        default=None,
        help="Local CC-CEDICT file (.gz or plain text); skips the download"
    )
    parser.add_argument(
        '--url', '-u',
        default=CEDICT_URL,
        help=f"CC-CEDICT download URL (default: {CEDICT_URL})"
    )
    parser.add_argument(
        '--output', '-o',
        type=Path,
        default=DEFAULT_OUTPUT,
        help=f"Output dictionary path (default: {DEFAULT_OUTPUT})"
    )
    parser.add_argument(
        '--structured', '-s',
        action='store_true',
        help='Write {"chinese", "gloss"} objects instead of display strings'
    )
    parser.add_argument(
        '--keep-download', '-k',
        type=Path,
        default=None,
        help="Save the downloaded archive to this path instead of a temp file"
    )

    args = parser.parse_args(argv)

    if args.input is not None and not args.input.exists():
        logger.error(f"CC-CEDICT file not found: {args.input}")
        sys.exit(1)

    start_time = time.time()

    with tempfile.TemporaryDirectory() as tmp:
        try:
            if args.input is not None:
                corpus = args.input
            else:
                dest = args.keep_download or Path(tmp) / "cedict.txt.gz"
                corpus = download_cedict(args.url, dest)

            build(corpus, args.output, structured=args.structured)
        except (OSError, EOFError, zlib.error, UnicodeDecodeError) as e:
            logger.error(f"Build failed: {e}")
            sys.exit(1)

    elapsed = time.time() - start_time
    logger.info(f"Build completed in {elapsed:.1f} seconds")


if __name__ == '__main__':
    main()
