"""
日誌設定
"""

import logging
import sys
from typing import Optional, Union

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%H:%M:%S"


def setup_logging(level: Union[int, str] = logging.INFO, log_file: Optional[str] = None):
    """
    設定根 logger

    Args:
        level: 日誌等級（數字或 'INFO' 等名稱）
        log_file: 另外寫入的檔案路徑
    """
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            raise ValueError("未知的日誌等級")

    handlers = [logging.StreamHandler(sys.stdout)]
    if log_file:
        handlers.append(logging.FileHandler(log_file, encoding="utf-8"))

    logging.basicConfig(level=level, format=LOG_FORMAT, datefmt=DATE_FORMAT,
                        handlers=handlers, force=True)
