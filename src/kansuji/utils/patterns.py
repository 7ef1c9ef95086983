"""
漢数字の連続部分を扱う正規表現パターン定義

設計方針:
- パターンとシンプルなヘルパ関数のみを提供
- 数値の解釈は持たない（core.parser / core.formatter 側で行う）
"""

import re
from typing import Callable, List, Tuple

from .tables import NUMERAL_ALPHABET, POSITIONAL_DIGITS

# ==============================================================================
# 漢数字パターン
# ==============================================================================

# 漢数字・単位の連続部分（最長一致）
# 一千九百五十七年 → 一千九百五十七
NUMERAL_RUN_PATTERN = re.compile(f'[{NUMERAL_ALPHABET}]+')


def find_numeral_runs(text: str) -> List[str]:
    """
    文字列中の漢数字の連続部分を左から順に抽出する

    Examples:
        >>> find_numeral_runs('令和三年五百')
        ['三', '五百']
    """
    return NUMERAL_RUN_PATTERN.findall(text)


def replace_numeral_runs(text: str, func: Callable[[str], str]) -> str:
    """
    漢数字の連続部分をそれぞれ func の結果で置換する

    連続部分以外の文字はそのまま残る。
    """
    return NUMERAL_RUN_PATTERN.sub(lambda m: func(m.group(0)), text)


def split_positional_prefix(text: str) -> Tuple[str, str]:
    """
    先頭の位取り数字（〇零一〜九）部分と残りに分割する

    Examples:
        >>> split_positional_prefix('二〇二三年')
        ('二〇二三', '年')
        >>> split_positional_prefix('令和五年')
        ('', '令和五年')
    """
    i = 0
    while i < len(text) and text[i] in POSITIONAL_DIGITS:
        i += 1
    return text[:i], text[i:]
