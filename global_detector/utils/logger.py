"""ロギング設定モジュール。"""

import logging
import sys
from pathlib import Path
from typing import Optional

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def setup_logging(level: str = "WARNING", log_file: Optional[str] = None) -> logging.Logger:
    """ルートロガーを設定する。

    標準出力は検出レポート専用のため、コンソールログは標準エラーに出す。
    未知のレベル名はWARNINGとして扱う。

    Args:
        level: ログレベル名（DEBUG, INFO, WARNING, ERROR, CRITICAL）
        log_file: 追加で書き出すログファイル（省略可）

    Returns:
        ルートロガー
    """
    log_level = getattr(logging, level.upper(), logging.WARNING)
    formatter = logging.Formatter(LOG_FORMAT)

    handlers = [logging.StreamHandler(sys.stderr)]
    if log_file:
        log_path = Path(log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)
        handlers.append(logging.FileHandler(log_path, encoding="utf-8"))

    root_logger = logging.getLogger()
    root_logger.setLevel(log_level)
    root_logger.handlers.clear()
    for handler in handlers:
        handler.setLevel(log_level)
        handler.setFormatter(formatter)
        root_logger.addHandler(handler)

    return root_logger
