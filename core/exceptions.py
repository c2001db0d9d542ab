"""
自訂 Exception 體系

統一的錯誤處理階層，讓每種失敗都有明確的分類與訊息。
上層可以 catch 大類別 (如 UiFrameworkError)，
也可以精準 catch 子類別 (如 ElementNotClickableError)。

Exception 樹：
    UiFrameworkError
    ├── DriverError
    │   └── DriverStartError
    └── PageError
        ├── ElementNotFoundError
        ├── ElementNotClickableError
        ├── ElementClickTimeoutError
        ├── ElementNotVisibleError
        └── ElementWithTextNotFoundError
"""


class UiFrameworkError(Exception):
    """框架所有例外的基底，catch 這個就能攔截一切框架錯誤"""

    def __init__(self, message: str = "", context: dict | None = None):
        self.context = context or {}
        super().__init__(message)


# ── Driver 相關 ──

class DriverError(UiFrameworkError):
    """Driver 相關錯誤"""


class DriverStartError(DriverError):
    """無法啟動瀏覽器"""

    def __init__(self, browser: str = "", original: Exception | None = None):
        self.original = original
        msg = f"無法啟動瀏覽器: {browser}"
        if original:
            msg += f" ({type(original).__name__}: {original})"
        super().__init__(msg, context={"browser": browser})


# ── Page / Element 相關 ──

class PageError(UiFrameworkError):
    """頁面操作相關錯誤"""


class ElementNotFoundError(PageError):
    """找不到指定元素"""

    def __init__(self, locator: tuple = (), timeout: int = 0):
        msg = f"找不到元素: {locator}"
        if timeout:
            msg += f" (等待 {timeout}s)"
        super().__init__(msg, context={"locator": locator, "timeout": timeout})


class ElementNotClickableError(PageError):
    """
    元素無法點擊

    target 可以是 locator tuple，或是 None / 未顯示 / 未啟用的 WebElement。
    """

    def __init__(self, target=None):
        super().__init__(f"元素無法點擊: {target}", context={"target": target})


class ElementClickTimeoutError(PageError):
    """等待元素進入可點擊狀態逾時"""

    def __init__(self, locator: tuple = (), timeout: int = 0):
        msg = f"等待元素可點擊逾時: {locator}"
        if timeout:
            msg += f" (等待 {timeout}s)"
        super().__init__(msg, context={"locator": locator, "timeout": timeout})


class ElementNotVisibleError(PageError):
    """元素不可見"""

    def __init__(self, locator: tuple = ()):
        super().__init__(f"元素不可見: {locator}", context={"locator": locator})


class ElementWithTextNotFoundError(PageError):
    """候選元素中沒有包含指定文字的節點"""

    def __init__(self, css: str = "", text: str = "", timeout: int = 0):
        msg = f"找不到包含文字 '{text}' 的元素: {css}"
        if timeout:
            msg += f" (等待 {timeout}s)"
        super().__init__(
            msg, context={"css": css, "text": text, "timeout": timeout}
        )
