import os

from .utils.tables import GROUP_UNITS

# Text I/O
DEFAULT_ENCODING = "utf-8"

# Logging
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"
LOG_LEVEL = os.environ.get("KANSUJI_LOG_LEVEL", "WARNING")

# 大数表記にできる最大桁数（京 までの4桁グループ）
MAX_LARGE_NUMBER_DIGITS = 4 * len(GROUP_UNITS)
