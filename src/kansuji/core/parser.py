"""
漢数字 → 数値 の再帰下降パーサ

大単位（京・兆・億・万）で左右に分割して再帰し、
大単位を含まない部分は小単位（十・百・千）を左から積み上げる。

    一京二兆三億四万五千六百七十八
    → 一 × 京 + (二 × 兆 + (三 × 億 + (四 × 万 + 五千六百七十八)))
"""

import logging
from typing import Optional

from ..utils.errors import require_text
from ..utils.patterns import find_numeral_runs
from ..utils.tables import DIGIT_VALUES, LARGE_UNITS, SMALL_UNITS
from .substitution import to_shoji

logger = logging.getLogger(__name__)


def parse_run(run: str) -> int:
    """
    漢数字の連続部分を整数に変換

    対応形式:
    - 単位付き: 二十三 → 23, 三万五千 → 35000
    - 位取り: 一二三 → 123
    - 単位のみ: 十 → 10, 万 → 10000

    大単位は分割のたびに京 → 兆 → 億 → 万 の順に探し、
    最初に見つかった位置で分割する。単位の左側が空なら 1 とみなす。

    Args:
        run: 漢数字（零〇一〜九十百千万億兆京）のみからなる文字列

    Returns:
        整数値（空文字列は 0）

    Examples:
        >>> parse_run('一兆二千三百四十五億')
        1234500000000
        >>> parse_run('万')
        10000
    """
    total = 0
    rest = run

    # 右側はループで読み進める。左側には分割に使った単位以上の大単位が
    # 含まれないため、再帰の深さは大単位の種類数までに収まる
    while True:
        for unit_char, unit_value in LARGE_UNITS:
            idx = rest.find(unit_char)
            if idx < 0:
                continue
            left = rest[:idx]
            left_value = parse_run(left) if left else 1
            total += left_value * unit_value
            rest = rest[idx + 1:]
            break
        else:
            return total + _parse_small_units(rest)


def _parse_small_units(run: str) -> int:
    """十・百・千のみを含む漢数字をパース（二十三 → 23）"""
    total = 0
    current: Optional[int] = None

    for char in run:
        if char in DIGIT_VALUES:
            digit = DIGIT_VALUES[char]
            # 数字の連続は位取りとして読む（一二三 → 123）
            current = digit if current is None else current * 10 + digit
        elif char in SMALL_UNITS:
            # 十 単独など、直前に数字がなければ 1
            multiplier = 1 if current is None else current
            total += multiplier * SMALL_UNITS[char]
            current = None
        else:
            logger.debug(f"Skipping non-numeral character {char!r} in {run!r}")

    if current is not None:
        total += current
    return total


def parse_kansuji(text: str) -> int:
    """
    文字列中の漢数字部分を数値に変換

    大字は通常漢数字に直してから解釈する。
    漢数字の連続部分が複数ある場合は最後の部分を採用し、
    見つからなければ 0 を返す。

    Examples:
        >>> parse_kansuji('令和三年五百')
        500
        >>> parse_kansuji('拾弐')
        12
    """
    text = require_text(text)
    runs = find_numeral_runs(to_shoji(text))
    if not runs:
        logger.debug(f"No numeral run found in {text!r}")
        return 0
    return parse_run(runs[-1])
