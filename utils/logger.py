"""
日誌模組
統一的 logging 設定，同時輸出到 console 與檔案。

支援：
- Console 輸出（人類可讀格式）
- 檔案輸出（純文字 + 可選 JSON 結構化格式）
- 每筆紀錄標上目前執行中的測試案例（由 pytest plugin 設定）
- 環境變數控制:
    LOG_LEVEL: console 日誌等級 (預設 INFO)
    LOG_JSON: 設為 "1" 啟用 JSON 結構化日誌檔
    LOG_DIR: 日誌目錄 (預設 reports/)
"""

import json
import logging
import os
import sys
from contextvars import ContextVar
from datetime import datetime, timezone
from pathlib import Path

LOG_DIR = Path(
    os.getenv("LOG_DIR", Path(__file__).resolve().parent.parent / "reports")
)
LOG_DIR.mkdir(parents=True, exist_ok=True)

LOGGER_NAME = "ui_test"

NO_CASE = "-"

_current_case: ContextVar[str] = ContextVar("current_case", default=NO_CASE)


def set_current_case(name: str | None) -> None:
    """設定目前的測試案例名稱；None 表示離開案例"""
    _current_case.set(name or NO_CASE)


def current_case() -> str:
    return _current_case.get()


class CaseFilter(logging.Filter):
    """把目前的測試案例名稱寫進 record.case"""

    def filter(self, record: logging.LogRecord) -> bool:
        record.case = current_case()
        return True


class JsonFormatter(logging.Formatter):
    """JSON 結構化日誌格式器，一行一筆紀錄"""

    def format(self, record: logging.LogRecord) -> str:
        log_entry = {
            "timestamp": datetime.fromtimestamp(
                record.created, tz=timezone.utc
            ).isoformat(),
            "level": record.levelname,
            "message": record.getMessage(),
            "logger": record.name,
            "case": getattr(record, "case", NO_CASE),
            "module": record.module,
            "function": record.funcName,
            "line": record.lineno,
        }
        if record.exc_info and record.exc_info[1]:
            log_entry["exception"] = self.formatException(record.exc_info)
        return json.dumps(log_entry, ensure_ascii=False)


def _create_logger() -> logging.Logger:
    _logger = logging.Logger(LOGGER_NAME)
    _logger.setLevel(logging.DEBUG)
    _logger.addFilter(CaseFilter())

    console_level = getattr(
        logging, os.getenv("LOG_LEVEL", "INFO").upper(), logging.INFO
    )

    fmt = logging.Formatter(
        "[%(asctime)s] %(levelname)-7s [%(case)s] %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    console = logging.StreamHandler(sys.stdout)
    console.setLevel(console_level)
    console.setFormatter(fmt)
    _logger.addHandler(console)

    file_handler = logging.FileHandler(LOG_DIR / "test.log", encoding="utf-8")
    file_handler.setLevel(logging.DEBUG)
    file_handler.setFormatter(fmt)
    _logger.addHandler(file_handler)

    # 設 LOG_JSON=1 啟用
    if os.getenv("LOG_JSON", "").strip() == "1":
        json_handler = logging.FileHandler(
            LOG_DIR / "test.json.log", encoding="utf-8"
        )
        json_handler.setLevel(logging.DEBUG)
        json_handler.setFormatter(JsonFormatter())
        _logger.addHandler(json_handler)

    return _logger


logger = _create_logger()
