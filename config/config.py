"""
設定管理模組
統一管理瀏覽器、目標網址、等待時間與互動策略等設定。
支援透過環境變數覆蓋預設值，方便 CI/CD 整合。
環境變數一律帶 UI_ 前綴（UI_BROWSER、UI_BASE_URL ...），
避免讀到系統或其他工具的同名變數（例如 xdg 的 BROWSER）。
支援設定值驗證，提前發現設定錯誤。
"""

import os
from pathlib import Path

BASE_DIR = Path(__file__).resolve().parent.parent
CONFIG_DIR = Path(__file__).resolve().parent

SUPPORTED_BROWSERS = ("chrome", "firefox")

# script: 以 JS dispatchEvent 觸發 click（不經過可見性/遮擋檢查）
# native: 以 ActionChains 模擬真實滑鼠事件
CLICK_STRATEGIES = ("script", "native")

# xpath: 原生 contains() 定位
# script: 以 JS 掃描候選節點的 textContent
TEXT_LOOKUPS = ("xpath", "script")

ENV_PREFIX = "UI_"


class ConfigValidationError(Exception):
    """設定值驗證失敗"""

    def __init__(self, errors: list[str]):
        self.errors = errors
        msg = "設定驗證失敗:\n" + "\n".join(f"  - {e}" for e in errors)
        super().__init__(msg)


def _env(name: str, default: str) -> str:
    return os.getenv(ENV_PREFIX + name, default)


def _env_bool(name: str, default: str = "false") -> bool:
    return _env(name, default).strip().lower() in ("1", "true", "yes")


def _env_int(name: str, default: str):
    """整數設定；無法轉換時保留原字串，交給 Config.validate() 回報"""
    raw = _env(name, default)
    try:
        return int(raw)
    except ValueError:
        return raw


def _is_number(value) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


class Config:
    """框架全域設定"""

    # 目標網站
    BASE_URL = _env(
        "BASE_URL", "http://speak-ukrainian.eastus2.cloudapp.azure.com/dev/"
    )

    # 瀏覽器
    BROWSER = _env("BROWSER", "chrome").lower()
    HEADLESS = _env_bool("HEADLESS")
    WINDOW_SIZE = _env("WINDOW_SIZE", "1920,1080")

    # 超時設定 (秒)
    EXPLICIT_WAIT = _env_int("EXPLICIT_WAIT", "10")
    PAGE_LOAD_TIMEOUT = _env_int("PAGE_LOAD_TIMEOUT", "30")

    # 互動策略
    CLICK_STRATEGY = _env("CLICK_STRATEGY", "script").lower()
    TEXT_LOOKUP = _env("TEXT_LOOKUP", "xpath").lower()

    # 截圖與報告
    SCREENSHOT_DIR = BASE_DIR / "screenshots"
    REPORT_DIR = BASE_DIR / "reports"

    @classmethod
    def window_size(cls) -> tuple[int, int]:
        """將 WINDOW_SIZE 解析為 (width, height)；JSON 可能給非字串值"""
        try:
            width, height = (int(v) for v in str(cls.WINDOW_SIZE).split(","))
        except ValueError:
            raise ConfigValidationError(
                [f"WINDOW_SIZE 格式應為 寬,高: {cls.WINDOW_SIZE}"]
            )
        return width, height

    @classmethod
    def validate(cls) -> None:
        """
        驗證目前的設定值。

        Raises:
            ConfigValidationError: 任一設定值不在允許範圍內
        """
        errors: list[str] = []

        if cls.BROWSER not in SUPPORTED_BROWSERS:
            errors.append(f"不支援的瀏覽器: {cls.BROWSER}")
        if cls.CLICK_STRATEGY not in CLICK_STRATEGIES:
            errors.append(f"不支援的點擊策略: {cls.CLICK_STRATEGY}")
        if cls.TEXT_LOOKUP not in TEXT_LOOKUPS:
            errors.append(f"不支援的文字查找策略: {cls.TEXT_LOOKUP}")
        for name in ("EXPLICIT_WAIT", "PAGE_LOAD_TIMEOUT"):
            value = getattr(cls, name)
            if not _is_number(value) or value <= 0:
                errors.append(f"{name} 必須是大於 0 的數字: {value!r}")
        if not str(cls.BASE_URL).startswith(("http://", "https://")):
            errors.append(f"BASE_URL 必須是 http(s) 網址: {cls.BASE_URL}")

        try:
            cls.window_size()
        except ConfigValidationError as e:
            errors.extend(e.errors)

        if errors:
            raise ConfigValidationError(errors)
