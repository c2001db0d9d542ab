"""
截圖工具
測試失敗時自動截圖，方便比對當下的瀏覽器畫面。
"""

import re
from datetime import datetime

from config.config import Config
from utils.logger import logger


def _safe_name(name: str) -> str:
    """pytest 參數化名稱可能含有 [ ] / 等字元，轉成檔名安全的格式"""
    return re.sub(r"[^\w\-]+", "_", name).strip("_") or "screenshot"


def take_screenshot(driver, name: str) -> str:
    """
    擷取瀏覽器畫面並儲存到 screenshots 目錄。

    Args:
        driver: Selenium WebDriver 實例
        name: 截圖名稱（不含副檔名）

    Returns:
        截圖檔案的完整路徑
    """
    Config.SCREENSHOT_DIR.mkdir(parents=True, exist_ok=True)
    timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
    filename = f"{_safe_name(name)}_{timestamp}.png"
    filepath = Config.SCREENSHOT_DIR / filename
    driver.save_screenshot(str(filepath))
    logger.info(f"截圖已儲存: {filepath}")
    return str(filepath)
