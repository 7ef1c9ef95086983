"""
wafu-kansuji ユーティリティモジュール
"""

from .errors import (
    KansujiArgumentError,
    require_text,
)
from .patterns import (
    NUMERAL_RUN_PATTERN,
    find_numeral_runs,
    replace_numeral_runs,
    split_positional_prefix,
)
from .tables import (
    DAIJI_TO_NORMAL,
    NORMAL_TO_DAIJI,
    DIGIT_VALUES,
    SMALL_UNITS,
    LARGE_UNITS,
    KANJI_TO_ARABIC,
)

__all__ = [
    # errors
    'KansujiArgumentError',
    'require_text',
    # patterns
    'NUMERAL_RUN_PATTERN',
    'find_numeral_runs',
    'replace_numeral_runs',
    'split_positional_prefix',
    # tables
    'DAIJI_TO_NORMAL',
    'NORMAL_TO_DAIJI',
    'DIGIT_VALUES',
    'SMALL_UNITS',
    'LARGE_UNITS',
    'KANJI_TO_ARABIC',
]
