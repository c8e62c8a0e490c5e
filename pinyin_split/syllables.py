"""
Fallback Pinyin syllable table.

Used by the converter when no dictionary key matches at the current position.
A syllable only produces characters when the same string is also a dictionary
key; otherwise the raw character passes through.
"""

from typing import FrozenSet, Tuple

# =============================================================================
# Syllables (grouped by final)
# =============================================================================

SYLLABLES: FrozenSet[str] = frozenset([
    # Bare finals
    'a', 'o', 'e', 'ai', 'ei', 'ao', 'ou', 'an', 'en', 'ang', 'eng', 'er',
    'uai', 'iao', 'iou', 'ian', 'uan', 'van', 'iang', 'uang', 'ing',
    'ong', 'iong', 'n', 'ng', 'm',
    # -a
    'ba', 'pa', 'ma', 'fa', 'da', 'ta', 'na', 'la', 'ga', 'ka', 'ha',
    'za', 'ca', 'sa', 'zha', 'cha', 'sha', 'ra', 'wa', 'ya',
    # -i
    'bi', 'pi', 'mi', 'di', 'ti', 'ni', 'li', 'gi', 'ki', 'hi', 'ji', 'qi', 'xi',
    # -o / -e
    'bo', 'po', 'mo', 'fo', 'wo', 'yo',
    'de', 'te', 'ne', 'le', 'ge', 'ke', 'he', 'ze', 'ce', 'se',
    'zhe', 'che', 'she', 're', 'we', 'ye',
    # -u
    'bu', 'pu', 'mu', 'fu', 'du', 'tu', 'nu', 'lu', 'gu', 'ku', 'hu',
    'zu', 'cu', 'su', 'zhu', 'chu', 'shu', 'ru', 'wu', 'yu',
    # -ai
    'bai', 'pai', 'mai', 'dai', 'tai', 'nai', 'lai', 'gai', 'kai', 'hai',
    'zai', 'cai', 'sai', 'zhai', 'chai', 'shai',
    # -ei
    'bei', 'pei', 'mei', 'fei', 'dei', 'tei', 'nei', 'lei', 'gei', 'kei',
    'hei', 'zei', 'sei', 'zhei', 'shei',
    # -ao
    'bao', 'pao', 'mao', 'dao', 'tao', 'nao', 'lao', 'gao', 'kao', 'hao',
    'zao', 'cao', 'sao', 'zhao', 'chao', 'shao', 'rao',
    # -an
    'ban', 'pan', 'man', 'fan', 'dan', 'tan', 'nan', 'lan', 'gan', 'kan',
    'han', 'zan', 'can', 'san', 'zhan', 'chan', 'shan', 'ran',
    # -ang
    'bang', 'pang', 'mang', 'fang', 'dang', 'tang', 'nang', 'lang', 'gang',
    'kang', 'hang', 'zang', 'cang', 'sang', 'zhang', 'chang', 'shang', 'rang',
    # -ia / -ie / -iao
    'bia', 'pia', 'mia', 'dia', 'nia', 'lia', 'jia', 'qia', 'xia',
    'bie', 'pie', 'mie', 'die', 'tie', 'nie', 'lie', 'jie', 'qie', 'xie',
    'biao', 'piao', 'miao', 'diao', 'tiao', 'niao', 'liao', 'jiao', 'qiao', 'xiao',
    # -in / -ing
    'bin', 'pin', 'min', 'nin', 'lin', 'jin', 'qin', 'xin',
    'bing', 'ping', 'ming', 'ding', 'ting', 'ling', 'jing', 'qing', 'ying',
])

MAX_SYLLABLE_LENGTH = max(len(s) for s in SYLLABLES)


def is_syllable(text: str) -> bool:
    """Check if text is a syllable in the fallback table."""
    return text in SYLLABLES


def match_syllables(text: str, start: int = 0) -> Tuple[str, ...]:
    """
    Syllables that match text at position start, longest first.

    Args:
        text: Token being segmented
        start: Position to match at

    Returns:
        Matching syllables ordered by descending length
    """
    window = text[start:start + MAX_SYLLABLE_LENGTH]
    return tuple(
        window[:n] for n in range(len(window), 0, -1)
        if window[:n] in SYLLABLES
    )
