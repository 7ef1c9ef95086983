"""
位取り表記 ⇔ 大数表記 の変換

- to_positional:   一千九百五十七 → 一九五七（文字列中のすべての漢数字部分）
- to_large_number: 一九五七 → 一千九百五十七（先頭の数字部分のみ）
"""

import logging
from typing import List, Sequence

from ..config import MAX_LARGE_NUMBER_DIGITS
from ..utils.errors import KansujiArgumentError, require_text
from ..utils.patterns import replace_numeral_runs, split_positional_prefix
from ..utils.tables import DIGIT_GLYPHS, DIGIT_VALUES, GROUP_UNITS, POSITION_UNITS
from .parser import parse_run

logger = logging.getLogger(__name__)


def _require_magnitude(value) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise KansujiArgumentError(f"value must be int, not {type(value).__name__}")
    if value < 0:
        raise KansujiArgumentError(f"value must be non-negative: {value}")
    return value


# ==============================================================================
# 位取り表記
# ==============================================================================

def render_positional(value: int) -> str:
    """
    整数を位取り表記の漢数字にする

    Examples:
        >>> render_positional(2023)
        '二〇二三'
        >>> render_positional(0)
        '〇'
    """
    value = _require_magnitude(value)
    return ''.join(DIGIT_GLYPHS[int(d)] for d in str(value))


def to_positional(text: str) -> str:
    """
    文字列中の漢数字部分をすべて位取り表記に変換

    漢数字以外の文字はそのまま残す。零は「〇」1文字になる。

    Args:
        text: 変換対象の文字列

    Returns:
        変換後の文字列

    Examples:
        >>> to_positional('一千九百五十七')
        '一九五七'
        >>> to_positional('二千二十三年')
        '二〇二三年'
    """
    text = require_text(text)
    return replace_numeral_runs(text, lambda run: render_positional(parse_run(run)))


# ==============================================================================
# 大数表記
# ==============================================================================

# 十・百の前の「一」は書かない（一三 → 十三、一〇三 → 百三）。千は一千のまま
_IMPLICIT_ONE_POSITIONS = frozenset({2, 3})


def _format_group(digits: Sequence[int]) -> str:
    """4桁以内の数字列に十・百・千を付ける（〇の位は省略）"""
    length = len(digits)
    parts = []
    for idx, d in enumerate(digits):
        pos = length - idx
        if pos > 1:
            if d == 0:
                continue
            if not (d == 1 and pos in _IMPLICIT_ONE_POSITIONS):
                parts.append(DIGIT_GLYPHS[d])
            parts.append(POSITION_UNITS[pos])
        elif d > 0 or length == 1:
            parts.append(DIGIT_GLYPHS[d])
    return ''.join(parts)


def _format_digits(digits: List[int]) -> str:
    if len(digits) <= 4:
        return _format_group(digits)

    # 5桁以上は右から4桁ずつ区切り、万・億・兆・京を付ける
    groups = []
    end = len(digits)
    while end > 0:
        groups.append(digits[max(0, end - 4):end])
        end -= 4

    parts = []
    for group_idx in reversed(range(len(groups))):
        group = groups[group_idx]
        if not any(group):
            continue
        parts.append(_format_group(group) + GROUP_UNITS[group_idx])
    return ''.join(parts)


def render_large_number(value: int) -> str:
    """
    整数を大数表記の漢数字にする

    Examples:
        >>> render_large_number(1957)
        '一千九百五十七'
        >>> render_large_number(35000)
        '三万五千'
    """
    value = _require_magnitude(value)
    digits = [int(d) for d in str(value)]
    if len(digits) > MAX_LARGE_NUMBER_DIGITS:
        raise KansujiArgumentError(f"value exceeds the 京 range: {value}")
    return _format_digits(digits)


def to_large_number(text: str) -> str:
    """
    先頭の位取り表記部分を大数表記に変換

    先頭の数字（〇零一〜九）部分だけを対象とし、残りはそのまま付け足す。
    文字列の途中にある数字部分は変換しない。

    Examples:
        >>> to_large_number('一九五七')
        '一千九百五十七'
        >>> to_large_number('二〇二三年')
        '二千二十三年'
        >>> to_large_number('令和五年')
        '令和五年'
    """
    text = require_text(text)
    num_part, suffix = split_positional_prefix(text)
    if not num_part:
        return suffix

    if len(num_part) > MAX_LARGE_NUMBER_DIGITS:
        logger.debug(f"Leaving {num_part!r} unchanged: no unit above 京")
        return text

    digits = [DIGIT_VALUES[c] for c in num_part]
    return _format_digits(digits) + suffix
