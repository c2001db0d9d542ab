"""
Page Object 基底類別

所有 Page Object 都繼承此類，提供通用的元素操作方法。
已整合：
- 明確等待（presence / visible / clickable）
- 可設定的點擊策略（script / native）
- 可設定的文字查找策略（xpath / script）
- 自訂 Exception
"""

from selenium.common.exceptions import (
    JavascriptException,
    StaleElementReferenceException,
)
from selenium.webdriver.common.action_chains import ActionChains
from selenium.webdriver.common.by import By
from selenium.webdriver.remote.webelement import WebElement
from selenium.webdriver.support import expected_conditions as EC
from selenium.webdriver.support.ui import WebDriverWait

from config.config import Config
from core.exceptions import (
    ElementClickTimeoutError,
    ElementNotClickableError,
    ElementNotFoundError,
    ElementNotVisibleError,
    ElementWithTextNotFoundError,
)
from utils.logger import logger
from utils.wait_helper import FluentWait

SCROLL_INTO_VIEW_JS = "arguments[0].scrollIntoView(true);"

DISPATCH_CLICK_JS = (
    "arguments[0].dispatchEvent(new MouseEvent('click', "
    "{bubbles: true, cancelable: true, view: window}));"
)

FIND_BY_TEXT_JS = (
    "return Array.from(document.querySelectorAll(arguments[0]))"
    ".find(element => element.textContent.includes(arguments[1])) || null;"
)


def xpath_literal(text: str) -> str:
    """把任意字串轉成 XPath 字串常值（處理單雙引號）"""
    if "'" not in text:
        return f"'{text}'"
    if '"' not in text:
        return f'"{text}"'
    parts = text.split("'")
    return "concat(" + ", \"'\", ".join(f"'{p}'" for p in parts) + ")"


class BasePage:
    """
    Page Object 基底類別

    提供：
    - 元素等待與查找
    - 點擊、輸入、讀取文字/屬性等通用操作
    - 以文字內容定位元素
    - Cookie 清除、頁面導航
    """

    def __init__(self, driver, timeout: int | None = None,
                 click_strategy: str | None = None,
                 text_lookup: str | None = None):
        self.driver = driver
        self.timeout = timeout or Config.EXPLICIT_WAIT
        self.click_strategy = click_strategy or Config.CLICK_STRATEGY
        self.text_lookup = text_lookup or Config.TEXT_LOOKUP
        self.wait = WebDriverWait(driver, self.timeout)

    # ── 導航 ──

    def open(self, url: str) -> None:
        """載入指定網址"""
        logger.info(f"開啟頁面: {url}")
        self.driver.get(url)

    def delete_all_cookies(self) -> None:
        """清除目前網域的所有 cookie"""
        self.driver.delete_all_cookies()
        logger.debug("已清除所有 cookie")

    # ── 元素查找 ──

    def find_element(self, locator: tuple) -> WebElement:
        """等待元素出現在 DOM 並回傳"""
        try:
            return self.wait.until(EC.presence_of_element_located(locator))
        except Exception:
            raise ElementNotFoundError(locator, self.timeout)

    def wait_for_clickable(self, locator: tuple) -> WebElement:
        """等待元素可點擊"""
        try:
            return self.wait.until(EC.element_to_be_clickable(locator))
        except Exception:
            raise ElementClickTimeoutError(locator, self.timeout)

    def wait_for_visible(self, locator: tuple) -> WebElement:
        """等待元素可見"""
        try:
            return self.wait.until(EC.visibility_of_element_located(locator))
        except Exception:
            raise ElementNotVisibleError(locator)

    def find_by_text(self, css: str, text: str) -> WebElement:
        """
        在符合 css 的候選節點中，找出 textContent 包含 text 的第一個。

        text_lookup="xpath" 時使用原生 contains() 定位；
        text_lookup="script" 時以 JS 掃描 querySelectorAll 的結果。
        兩者都會輪詢到 timeout 為止。

        Raises:
            ElementWithTextNotFoundError: 逾時仍找不到
        """
        if self.text_lookup == "xpath":
            return self._find_by_text_xpath(css, text)
        return self._find_by_text_script(css, text)

    def _find_by_text_xpath(self, css: str, text: str) -> WebElement:
        xpath = f"{css_to_xpath(css)}[contains(., {xpath_literal(text)})]"
        logger.debug(f"以 XPath 查找文字 '{text}': {xpath}")
        try:
            return self.wait.until(
                EC.presence_of_element_located((By.XPATH, xpath))
            )
        except Exception:
            raise ElementWithTextNotFoundError(css, text, self.timeout)

    def _find_by_text_script(self, css: str, text: str) -> WebElement:
        logger.debug(f"以 JS 掃描文字 '{text}': {css}")
        try:
            return (
                FluentWait()
                .timeout(self.timeout)
                .polling(0.25)
                .ignoring(JavascriptException, StaleElementReferenceException)
                .message(f"找不到包含 '{text}' 的元素")
                .until(lambda: self.driver.execute_script(FIND_BY_TEXT_JS, css, text))
                .wait()
            )
        except TimeoutError:
            raise ElementWithTextNotFoundError(css, text, self.timeout)

    # ── 元素操作 ──

    def scroll_into_view(self, element: WebElement) -> None:
        """將元素捲動到可視範圍"""
        self.driver.execute_script(SCROLL_INTO_VIEW_JS, element)

    @staticmethod
    def ensure_clickable(element: WebElement | None) -> WebElement:
        """
        點擊前的共同檢查：元素存在、可見且可用。

        Raises:
            ElementNotClickableError: element 為 None、未顯示或未啟用
        """
        if element is None or not element.is_displayed() or not element.is_enabled():
            raise ElementNotClickableError(element)
        return element

    def js_click(self, element: WebElement | None) -> None:
        """以 JS dispatch 一個合成的 click 事件（不經過瀏覽器的遮擋檢查）"""
        self.ensure_clickable(element)
        self.driver.execute_script(DISPATCH_CLICK_JS, element)

    def native_click(self, element: WebElement | None) -> None:
        """以 ActionChains 模擬真實滑鼠移動與點擊"""
        self.ensure_clickable(element)
        ActionChains(self.driver).move_to_element(element).click().perform()

    def click_element(self, element: WebElement | None) -> None:
        """依 click_strategy 點擊已取得的元素"""
        if self.click_strategy == "native":
            self.native_click(element)
        else:
            self.js_click(element)

    def click(self, locator: tuple) -> WebElement:
        """等待可點擊 → 捲動 → 點擊，回傳被點擊的元素"""
        logger.info(f"點擊元素: {locator}")
        element = self.wait_for_clickable(locator)
        self.scroll_into_view(element)
        self.click_element(element)
        return element

    def input_text(self, locator: tuple, text: str, clear: bool = False) -> WebElement:
        """等待可見後輸入文字，回傳輸入框元素"""
        logger.info(f"輸入文字: '{text}' -> {locator}")
        element = self.wait_for_visible(locator)
        if clear:
            element.clear()
        element.send_keys(text)
        return element

    def get_text(self, locator: tuple) -> str:
        """取得可見元素的文字"""
        return self.wait_for_visible(locator).text

    def get_attribute(self, locator: tuple, attribute: str) -> str | None:
        """取得元素屬性（DOM property 優先，與 WebElement.get_attribute 相同）"""
        return self.find_element(locator).get_attribute(attribute)


def css_to_xpath(css: str) -> str:
    """
    把簡單的 CSS 後代選擇器轉成 XPath。

    支援 tag、tag[attr='value']、以空白分隔的後代關係，
    例如 "li[role='menuitem'] div" → "//li[@role='menuitem']//div"。
    其他語法請直接改用 text_lookup="script"。
    """
    steps = []
    for part in css.split():
        if "[" in part:
            tag, _, rest = part.partition("[")
            attr, _, value = rest.rstrip("]").partition("=")
            value = value.strip("'\"")
            steps.append(f"{tag or '*'}[@{attr}={xpath_literal(value)}]")
        else:
            steps.append(part)
    return "//" + "//".join(steps)
