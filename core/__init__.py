"""
core — 框架核心

統一匯出所有核心元件，方便外部 import。

用法：
    from core import BasePage, DriverManager, env
    from core import ElementNotClickableError, ElementNotVisibleError
"""

from core.base_page import BasePage
from core.driver_manager import DriverManager
from core.env_manager import env
from core.exceptions import (
    DriverError,
    DriverStartError,
    ElementClickTimeoutError,
    ElementNotClickableError,
    ElementNotFoundError,
    ElementNotVisibleError,
    ElementWithTextNotFoundError,
    PageError,
    UiFrameworkError,
)

__all__ = [
    # Driver / Page
    "DriverManager",
    "BasePage",
    # Infrastructure
    "env",
    # Exceptions
    "UiFrameworkError",
    "DriverError",
    "DriverStartError",
    "PageError",
    "ElementNotFoundError",
    "ElementNotClickableError",
    "ElementClickTimeoutError",
    "ElementNotVisibleError",
    "ElementWithTextNotFoundError",
]
