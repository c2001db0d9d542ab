"""
pytest 全域 fixtures

瀏覽器生命週期、命令列參數與失敗截圖都在 core.browser_plugin；
這裡只放 Page Object 層的 fixture。
"""

import pytest

from pages.home_page import HomePage

pytest_plugins = ["core.browser_plugin", "pytester"]


@pytest.fixture
def home_page(driver) -> HomePage:
    """已載入的首頁 Page Object"""
    return HomePage(driver)
