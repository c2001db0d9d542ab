"""
Driver 生命週期管理

負責建立、取得、關閉瀏覽器 WebDriver。整個測試 session 共用一個瀏覽器，
測試之間以重新導航 + 清除 cookie 重設狀態，而不是重開瀏覽器。

支援：
- Chrome / Firefox，driver binary 由 webdriver-manager 下載
- Headless 模式、視窗大小、頁面載入逾時
- 執行緒安全（每個執行緒獨立 driver）
- 目標網站連線前健康檢查
"""

import threading
import urllib.error
import urllib.request

from selenium import webdriver
from selenium.webdriver.chrome.service import Service as ChromeService
from selenium.webdriver.firefox.service import Service as FirefoxService
from webdriver_manager.chrome import ChromeDriverManager
from webdriver_manager.firefox import GeckoDriverManager

from config.config import Config
from core.exceptions import DriverStartError
from utils.logger import logger


class DriverManager:
    """
    管理 Selenium WebDriver 的建立與銷毀

    使用 thread-local storage 確保各執行緒的 driver 互不干擾。
    """

    _local = threading.local()

    # ── 目標網站健康檢查 ──

    @classmethod
    def health_check(cls, url: str | None = None, timeout: float = 5.0) -> bool:
        """
        檢查目標網站是否可連線。

        Args:
            url: 目標網址，預設讀取 Config.BASE_URL
            timeout: 連線逾時秒數

        Returns:
            True = 回應 2xx/3xx, False = 無法連線或錯誤狀態
        """
        url = url or Config.BASE_URL
        try:
            req = urllib.request.Request(url, method="GET")
            with urllib.request.urlopen(req, timeout=timeout) as resp:
                return 200 <= resp.status < 400
        except (urllib.error.URLError, OSError, TimeoutError):
            return False

    # ── Driver 建立 ──

    @staticmethod
    def _chrome_options(headless: bool, width: int, height: int):
        options = webdriver.ChromeOptions()
        if headless:
            options.add_argument("--headless=new")
        options.add_argument(f"--window-size={width},{height}")
        options.add_argument("--disable-notifications")
        return options

    @staticmethod
    def _firefox_options(headless: bool, width: int, height: int):
        options = webdriver.FirefoxOptions()
        if headless:
            options.add_argument("-headless")
        options.add_argument(f"--width={width}")
        options.add_argument(f"--height={height}")
        return options

    @classmethod
    def create_driver(
        cls,
        browser: str | None = None,
        headless: bool | None = None,
    ) -> webdriver.Remote:
        """
        根據瀏覽器類型建立 WebDriver。

        失敗時不重試，直接拋出 DriverStartError。

        Args:
            browser: 'chrome' 或 'firefox'，預設讀取 Config.BROWSER
            headless: 是否無頭模式，預設讀取 Config.HEADLESS

        Returns:
            WebDriver 實例
        """
        browser = (browser or Config.BROWSER).lower()
        headless = Config.HEADLESS if headless is None else headless
        width, height = Config.window_size()

        try:
            if browser == "chrome":
                drv = webdriver.Chrome(
                    service=ChromeService(ChromeDriverManager().install()),
                    options=cls._chrome_options(headless, width, height),
                )
            elif browser == "firefox":
                drv = webdriver.Firefox(
                    service=FirefoxService(GeckoDriverManager().install()),
                    options=cls._firefox_options(headless, width, height),
                )
            else:
                raise ValueError(f"不支援的瀏覽器: {browser}")
        except Exception as e:
            raise DriverStartError(browser, e) from e

        drv.set_page_load_timeout(Config.PAGE_LOAD_TIMEOUT)

        cls._local.driver = drv
        logger.info(f"Driver 已建立: {browser} (headless={headless})")

        return drv

    @classmethod
    def quit_driver(cls) -> None:
        """
        關閉當前執行緒的 driver。

        關閉失敗只記錄 log，不往外拋。
        """
        drv = getattr(cls._local, "driver", None)
        if drv is None:
            return
        try:
            drv.quit()
            logger.info("Driver 已關閉")
        except Exception as e:
            logger.error(f"關閉 driver 失敗: {type(e).__name__}: {e}")
        finally:
            cls._local.driver = None
