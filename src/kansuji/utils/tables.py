"""
wafu-kansuji: 漢数字の対応表

変換処理で参照する静的な対応表を一元管理するモジュール。
- 大字 ⇔ 通常漢数字
- 漢数字 ⇔ 数値 / アラビア数字
- 小単位（十百千）・大単位（万億兆京）

すべての表はモジュール読み込み時に一度だけ構築され、以後変更されない。
"""

from types import MappingProxyType
from typing import Dict, FrozenSet, Mapping, Tuple

# ==============================================================================
# 大字 ⇔ 通常漢数字
# ==============================================================================

_DAIJI_PAIRS: Tuple[Tuple[str, str], ...] = (
    ('壱', '一'),
    ('弐', '二'),
    ('参', '三'),
    ('肆', '四'),
    ('伍', '五'),
    ('陸', '六'),
    ('漆', '七'),
    ('捌', '八'),
    ('玖', '九'),
    ('拾', '十'),
    ('佰', '百'),
    ('阡', '千'),
    ('萬', '万'),
)

DAIJI_TO_NORMAL: Mapping[str, str] = MappingProxyType(dict(_DAIJI_PAIRS))

NORMAL_TO_DAIJI: Mapping[str, str] = MappingProxyType(
    {normal: daiji for daiji, normal in _DAIJI_PAIRS}
)

# normalize() で「数値のみの文字列」と判定する通常漢数字
NORMAL_NUMERIC_CHARS: FrozenSet[str] = frozenset(NORMAL_TO_DAIJI)

# ==============================================================================
# 数字・単位
# ==============================================================================

DIGIT_VALUES: Mapping[str, int] = MappingProxyType({
    '零': 0, '〇': 0,
    '一': 1,
    '二': 2,
    '三': 3,
    '四': 4,
    '五': 5,
    '六': 6,
    '七': 7,
    '八': 8,
    '九': 9,
})

SMALL_UNITS: Mapping[str, int] = MappingProxyType({
    '十': 10,
    '百': 100,
    '千': 1000,
})

# 大単位は必ず大きい順に走査する（京 > 兆 > 億 > 万）
LARGE_UNITS: Tuple[Tuple[str, int], ...] = (
    ('京', 10 ** 16),
    ('兆', 10 ** 12),
    ('億', 10 ** 8),
    ('万', 10 ** 4),
)

# ==============================================================================
# 書式化用
# ==============================================================================

# 0-9 → 位取り表記の漢数字
DIGIT_GLYPHS: Tuple[str, ...] = tuple('〇一二三四五六七八九')

# 4桁グループ内の位置（右から1始まり）→ 単位
POSITION_UNITS: Mapping[int, str] = MappingProxyType({
    2: '十',
    3: '百',
    4: '千',
})

# 4桁グループの番号（右から0始まり）→ 大単位。0 は単位なし
GROUP_UNITS: Tuple[str, ...] = ('',) + tuple(char for char, _ in reversed(LARGE_UNITS))

# ==============================================================================
# 文字単位の算用数字変換
# ==============================================================================

# 位取りを考慮しない1文字ずつの置換表。十・拾は "1" に写す
KANJI_TO_ARABIC: Mapping[str, str] = MappingProxyType({
    '零': '0', '〇': '0',
    '一': '1', '壱': '1', '十': '1', '拾': '1',
    '二': '2', '弐': '2',
    '三': '3', '参': '3',
    '四': '4', '肆': '4',
    '五': '5', '伍': '5',
    '六': '6', '陸': '6',
    '七': '7', '漆': '7',
    '八': '8', '捌': '8',
    '九': '9', '玖': '9',
})

# ==============================================================================
# 文字集合
# ==============================================================================

NUMERAL_ALPHABET: str = '零〇一二三四五六七八九十百千万億兆京'

POSITIONAL_DIGITS: FrozenSet[str] = frozenset('〇零一二三四五六七八九')


def as_plain_dict() -> Dict[str, Dict]:
    """対応表を YAML 出力可能な素の dict にまとめる"""
    return {
        'daiji_to_normal': dict(DAIJI_TO_NORMAL),
        'normal_to_daiji': dict(NORMAL_TO_DAIJI),
        'digit_values': dict(DIGIT_VALUES),
        'small_units': dict(SMALL_UNITS),
        'large_units': {char: value for char, value in LARGE_UNITS},
        'kanji_to_arabic': dict(KANJI_TO_ARABIC),
    }
