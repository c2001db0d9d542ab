"""
瀏覽器測試 pytest plugin

由根目錄 conftest.py 以 pytest_plugins 載入，也可以單獨 `-p core.browser_plugin` 使用。

提供：
- 命令列參數 (--env, --browser, --headless, --base-url, --click-strategy, --text-lookup, --run-e2e)
- 啟動時合併環境設定、寫回 Config 並驗證
- browser fixture：整個 session 共用一個瀏覽器（建立一次、結束時關閉）
- driver fixture：每個測試前重新載入首頁、測試後清除 cookie
- 日誌標上目前執行中的測試案例
- 失敗時自動截圖（含 Allure 報告附件）
- e2e 測試預設略過，加 --run-e2e 才會真的開瀏覽器
"""

import os

import pytest

from config.config import (
    CLICK_STRATEGIES,
    SUPPORTED_BROWSERS,
    TEXT_LOOKUPS,
    Config,
    ConfigValidationError,
)
from core import BasePage, DriverManager, env
from utils.allure_helper import attach_page_state
from utils.logger import logger, set_current_case
from utils.screenshot import take_screenshot


# ── 命令列參數 ──

def pytest_addoption(parser):
    """新增自訂命令列參數"""
    group = parser.getgroup("ui", "瀏覽器 UI 測試")
    group.addoption(
        "--env",
        action="store",
        default=os.getenv("TEST_ENV", "dev"),
        help="測試環境: 對應 config/env/<env>.json",
    )
    group.addoption(
        "--browser",
        action="store",
        default=None,
        choices=SUPPORTED_BROWSERS,
        help="瀏覽器: chrome 或 firefox",
    )
    group.addoption(
        "--headless",
        action="store_true",
        default=None,
        help="以無頭模式啟動瀏覽器",
    )
    group.addoption(
        "--base-url",
        action="store",
        default=None,
        help="覆寫目標網站網址",
    )
    group.addoption(
        "--click-strategy",
        action="store",
        default=None,
        choices=CLICK_STRATEGIES,
        help="script: JS dispatch click / native: 模擬真實滑鼠",
    )
    group.addoption(
        "--text-lookup",
        action="store",
        default=None,
        choices=TEXT_LOOKUPS,
        help="xpath: 原生 contains() / script: JS 掃描 textContent",
    )
    group.addoption(
        "--run-e2e",
        action="store_true",
        default=os.getenv("RUN_E2E", "").strip() == "1",
        help="執行需要真實瀏覽器與網路的 e2e 測試",
    )


# ── 框架初始化 ──

def pytest_configure(config):
    """pytest 啟動時：合併環境設定並寫回 Config"""
    env.switch(config.getoption("--env"))
    env.apply(Config, overrides={
        "base_url": config.getoption("--base-url"),
        "browser": config.getoption("--browser"),
        "headless": config.getoption("--headless"),
        "click_strategy": config.getoption("--click-strategy"),
        "text_lookup": config.getoption("--text-lookup"),
    })
    try:
        Config.validate()
    except ConfigValidationError as e:
        raise pytest.UsageError(str(e))
    logger.info(
        f"測試環境: {env.env_name} | {Config.BROWSER} "
        f"(headless={Config.HEADLESS}) → {Config.BASE_URL}"
    )


def pytest_collection_modifyitems(config, items):
    """未指定 --run-e2e 時略過 e2e 測試"""
    if config.getoption("--run-e2e"):
        return
    skip_e2e = pytest.mark.skip(reason="需要 --run-e2e 才會執行")
    for item in items:
        if "e2e" in item.keywords:
            item.add_marker(skip_e2e)


# ── Browser session ──

@pytest.fixture(scope="session")
def browser():
    """
    整個測試 session 共用的瀏覽器。

    建立失敗視為整個 suite 的 setup 失敗，不重試。
    關閉失敗只記錄 log。
    """
    logger.info(f"===== 建立 {Config.BROWSER} driver =====")
    if not DriverManager.health_check(Config.BASE_URL):
        logger.warning(f"目標網站健康檢查失敗: {Config.BASE_URL}，仍嘗試連線...")
    try:
        drv = DriverManager.create_driver()
        drv.get(Config.BASE_URL)
    except Exception as e:
        logger.exception("Suite setup 失敗")
        DriverManager.quit_driver()
        pytest.fail(f"Setup failed: {e}", pytrace=False)

    yield drv

    logger.info("===== 關閉 driver =====")
    DriverManager.quit_driver()


@pytest.fixture(scope="function")
def driver(browser):
    """
    每個測試前重新載入首頁，測試後清除 cookie。

    不重開瀏覽器，只重設頁面狀態，讓每個測試都從未登入的首頁開始。
    """
    page = BasePage(browser)
    page.open(Config.BASE_URL)
    yield browser
    page.delete_all_cookies()


# ── 測試生命週期 Hook ──

def pytest_runtest_logstart(nodeid, location):
    set_current_case(nodeid)


def pytest_runtest_logfinish(nodeid, location):
    set_current_case(None)


@pytest.hookimpl(tryfirst=True, hookwrapper=True)
def pytest_runtest_makereport(item, call):
    """測試失敗時：截圖 + Allure 附件"""
    outcome = yield
    report = outcome.get_result()

    if report.when != "call" or not report.failed:
        return

    test_name = item.name
    logger.error(f"測試失敗: {test_name}")

    driver = item.funcargs.get("driver")
    if driver is None:
        return
    try:
        take_screenshot(driver, f"FAIL_{test_name}")
        attach_page_state(driver, test_name)
    except Exception as e:
        logger.warning(f"失敗截圖未能保存: {type(e).__name__}: {e}")
