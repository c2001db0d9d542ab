"""
首頁 Page Object

Header 右上角的使用者圖示會展開下拉選單，
選單中的「Увійти」項目開啟登入視窗。
"""

from selenium.webdriver.common.by import By
from selenium.webdriver.remote.webelement import WebElement

from core.base_page import BasePage
from core.exceptions import ElementNotVisibleError
from pages.login_modal import LoginModal
from utils.allure_helper import allure_step


class HomePage(BasePage):
    """首頁"""

    # ── Locators ──
    USER_ICON = (By.CSS_SELECTOR, "svg[data-icon='user']")
    DROPDOWN_MENU = (By.CSS_SELECTOR, ".ant-dropdown-menu")
    MENU_ITEM_CSS = "li[role='menuitem'] div"

    LOGIN_MENU_TEXT = "Увійти"

    # ── 頁面操作 ──

    @allure_step("點擊使用者圖示")
    def open_user_menu(self) -> WebElement:
        """點擊使用者圖示，回傳展開後的下拉選單"""
        self.click(self.USER_ICON)
        return self.wait_for_visible(self.DROPDOWN_MENU)

    def find_menu_item(self, text: str) -> WebElement:
        return self.find_by_text(self.MENU_ITEM_CSS, text)

    @allure_step("開啟登入視窗")
    def open_login_modal(self) -> LoginModal:
        """使用者圖示 → 下拉選單 → 「Увійти」，回傳 LoginModal"""
        self.open_user_menu()
        item = self.find_menu_item(self.LOGIN_MENU_TEXT)
        self.scroll_into_view(item)
        self.click_element(item)
        return LoginModal(
            self.driver,
            timeout=self.timeout,
            click_strategy=self.click_strategy,
            text_lookup=self.text_lookup,
        )

    # ── 頁面驗證 ──

    def is_user_menu_displayed(self) -> bool:
        try:
            return self.wait_for_visible(self.DROPDOWN_MENU).is_displayed()
        except ElementNotVisibleError:
            return False
