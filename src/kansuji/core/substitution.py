"""
1文字単位の置換（大字 ⇔ 通常漢数字、漢数字 → 算用数字）
"""

from typing import Mapping

from ..utils.errors import require_text
from ..utils.tables import (
    DAIJI_TO_NORMAL,
    KANJI_TO_ARABIC,
    NORMAL_NUMERIC_CHARS,
    NORMAL_TO_DAIJI,
)


def transliterate(text: str, table: Mapping[str, str]) -> str:
    """表にある文字だけを置換し、それ以外はそのまま残す"""
    return ''.join(table.get(char, char) for char in text)


def to_shoji(text: str) -> str:
    """
    大字を通常漢数字に変換

    Examples:
        >>> to_shoji('弐拾参')
        '二十三'
    """
    return transliterate(require_text(text), DAIJI_TO_NORMAL)


def to_daiji(text: str) -> str:
    """
    通常漢数字をすべて大字に変換

    Examples:
        >>> to_daiji('二三年四月')
        '弐参年肆月'
    """
    return transliterate(require_text(text), NORMAL_TO_DAIJI)


def normalize(text: str) -> str:
    """
    大字を通常漢数字に変換し、数値のみの文字列では逆に大字へ変換

    通常漢数字 → 大字の変換は、文字列全体が通常漢数字だけで
    構成される場合に限る（1文字ずつの判定ではない）。

    Examples:
        >>> normalize('壱拾参')
        '一十三'
        >>> normalize('一二三')
        '壱弐参'
        >>> normalize('二三年')
        '二三年'
    """
    text = require_text(text)
    numeric_only = bool(text) and all(char in NORMAL_NUMERIC_CHARS for char in text)

    result = []
    for char in text:
        if char in DAIJI_TO_NORMAL:
            result.append(DAIJI_TO_NORMAL[char])
        elif numeric_only and char in NORMAL_TO_DAIJI:
            result.append(NORMAL_TO_DAIJI[char])
        else:
            result.append(char)
    return ''.join(result)


def to_arabic(text: str) -> str:
    """
    漢数字・大字を1文字ずつ算用数字に置換（位取りは考慮しない）

    Examples:
        >>> to_arabic('参年A')
        '3年A'
        >>> to_arabic('拾一')
        '11'
    """
    return transliterate(require_text(text), KANJI_TO_ARABIC)
