import sys
from pathlib import Path

import pytest

# Add the parent directory to path to import pinyin_split
sys.path.insert(0, str(Path(__file__).parent.parent))

from pinyin_split.dictionary import Dictionary, load_fallback_dictionary, save_dictionary
from pinyin_split.fallback import FALLBACK_ENTRIES


@pytest.fixture(scope="session")
def fallback_dictionary():
    """The built-in vocabulary (ni, hao, wo ai ni, zhongguo, ...)."""
    return load_fallback_dictionary()


@pytest.fixture
def toy_dictionary():
    """Small dictionary for longest-match checks."""
    return Dictionary.from_mapping({
        "a": ["阿 (a)"],
        "ab": ["甲乙 (ab)"],
        "abc d": ["短语 (phrase)"],
        "ni": ["你 (you)"],
    })


@pytest.fixture
def dictionary_file(tmp_path):
    """The fallback vocabulary persisted as display-string JSON."""
    path = tmp_path / "cedict.json"
    save_dictionary(Dictionary.from_mapping(FALLBACK_ENTRIES), path)
    return path
