"""
Allure 報告整合輔助
封裝 Allure 常用的步驟標記與附件功能。
"""

import functools

import allure

from utils.logger import logger


def allure_step(title: str):
    """
    裝飾器：將函式標記為 Allure step，同時寫一行 log。

    用法：
        @allure_step("開啟登入視窗")
        def open_login_modal(self): ...
    """
    def decorator(func):
        @allure.step(title)
        @functools.wraps(func)
        def wrapper(*args, **kwargs):
            logger.info(f"步驟: {title}")
            return func(*args, **kwargs)
        return wrapper
    return decorator


def attach_screenshot(driver, name: str = "截圖") -> None:
    """將瀏覽器截圖附加到 Allure 報告"""
    png = driver.get_screenshot_as_png()
    allure.attach(png, name=name, attachment_type=allure.attachment_type.PNG)


def attach_text(text: str, name: str = "log") -> None:
    """將文字附加到 Allure 報告"""
    allure.attach(text, name=name, attachment_type=allure.attachment_type.TEXT)


def attach_page_state(driver, test_name: str) -> None:
    """失敗時附加截圖、目前網址與 HTML 原始碼"""
    attach_screenshot(driver, f"失敗截圖: {test_name}")
    attach_text(driver.current_url, "目前網址")
    allure.attach(
        driver.page_source,
        name="頁面結構 (HTML)",
        attachment_type=allure.attachment_type.HTML,
    )
