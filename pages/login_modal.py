"""
登入視窗 Page Object

由 HomePage.open_login_modal() 取得，包含 email / 密碼欄位與登入按鈕。
"""

from selenium.webdriver.common.by import By

from core.base_page import BasePage
from utils.allure_helper import allure_step


class LoginModal(BasePage):
    """登入視窗"""

    # ── Locators ──
    HEADER = (By.CSS_SELECTOR, ".login-header")
    EMAIL_INPUT = (By.CSS_SELECTOR, "#basic_email")
    PASSWORD_INPUT = (By.CSS_SELECTOR, "#basic_password")
    LOGIN_BUTTON = (By.CSS_SELECTOR, ".login-button")
    SUCCESS_MESSAGE = (By.CSS_SELECTOR, ".ant-message-success")

    # ── 讀取 ──

    def get_header_text(self) -> str:
        return self.get_text(self.HEADER)

    def get_email_placeholder(self) -> str | None:
        return self.get_attribute(self.EMAIL_INPUT, "placeholder")

    def get_password_placeholder(self) -> str | None:
        return self.get_attribute(self.PASSWORD_INPUT, "placeholder")

    def get_email_value(self) -> str | None:
        return self.get_attribute(self.EMAIL_INPUT, "value")

    def get_password_value(self) -> str | None:
        return self.get_attribute(self.PASSWORD_INPUT, "value")

    # ── 頁面操作 ──

    def enter_email(self, email: str) -> "LoginModal":
        self.input_text(self.EMAIL_INPUT, email)
        return self

    def enter_password(self, password: str) -> "LoginModal":
        self.input_text(self.PASSWORD_INPUT, password)
        return self

    @allure_step("填寫登入表單")
    def fill_credentials(self, email: str, password: str) -> "LoginModal":
        return self.enter_email(email).enter_password(password)

    @allure_step("送出登入表單")
    def submit(self) -> None:
        self.click(self.LOGIN_BUTTON)

    # ── 頁面驗證 ──

    def is_login_button_enabled(self) -> bool:
        return self.wait_for_visible(self.LOGIN_BUTTON).is_enabled()

    def is_success_message_displayed(self) -> bool:
        """等待登入成功提示出現；逾時時拋出 ElementNotVisibleError"""
        return self.wait_for_visible(self.SUCCESS_MESSAGE).is_displayed()
