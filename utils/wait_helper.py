"""
等待工具
提供通用的條件輪詢與 Fluent Wait。
WebDriverWait 只接受 driver 條件，這裡的等待器可以等任何 callable，
例如以 JS 掃描 DOM 的結果。

用法：
    from utils.wait_helper import wait_for, FluentWait

    # 簡易等待
    wait_for(lambda: driver.execute_script(script), timeout=10)

    # Fluent Wait（可鏈式設定）
    item = (
        FluentWait()
        .timeout(10)
        .polling(0.3)
        .ignoring(StaleElementReferenceException)
        .message("選單項目未出現")
        .until(lambda: driver.execute_script(script))
        .wait()
    )
"""

import time
from typing import Callable, TypeVar

T = TypeVar("T")


def wait_for(
    condition: Callable[[], T],
    timeout: float = 10,
    interval: float = 0.5,
    message: str = "",
    ignored: tuple = (),
) -> T:
    """
    等待某個條件成立。

    Args:
        condition: 回傳值為 truthy 時視為成立的 callable
        timeout: 最長等待秒數
        interval: 輪詢間隔秒數
        message: 超時時顯示的錯誤訊息
        ignored: 視為「尚未成立」的例外類型，不記錄為最後例外

    Returns:
        condition 的回傳值

    Raises:
        TimeoutError: 超過 timeout 仍未成立
    """
    end_time = time.time() + timeout
    last_exception = None

    while True:
        try:
            result = condition()
            if result:
                return result
        except ignored:
            pass
        except Exception as e:
            last_exception = e
        if time.time() >= end_time:
            break
        time.sleep(interval)

    error = message or f"等待逾時 ({timeout}s)"
    if last_exception:
        error += f" | 最後的例外: {last_exception}"
    raise TimeoutError(error)


class FluentWait:
    """
    Fluent Wait — 可鏈式設定的等待器

    比 wait_for() 可讀性更好：
    - 自訂輪詢間隔
    - 指定要忽略的例外類型
    """

    def __init__(self):
        self._timeout: float = 10.0
        self._interval: float = 0.5
        self._condition: Callable | None = None
        self._message: str = ""
        self._ignored: tuple = ()

    def timeout(self, seconds: float) -> "FluentWait":
        """設定最大等待秒數"""
        self._timeout = seconds
        return self

    def polling(self, interval: float) -> "FluentWait":
        """設定輪詢間隔秒數"""
        self._interval = interval
        return self

    def ignoring(self, *exception_types: type) -> "FluentWait":
        """設定要忽略的例外類型"""
        self._ignored = exception_types
        return self

    def message(self, msg: str) -> "FluentWait":
        """設定逾時錯誤訊息"""
        self._message = msg
        return self

    def until(self, condition: Callable[[], T]) -> "FluentWait":
        """設定等待條件"""
        self._condition = condition
        return self

    def wait(self) -> T:
        """執行等待，回傳條件的回傳值"""
        if self._condition is None:
            raise ValueError("必須先呼叫 .until(condition) 設定等待條件")
        return wait_for(
            self._condition,
            timeout=self._timeout,
            interval=self._interval,
            message=self._message or f"Fluent wait 逾時 ({self._timeout}s)",
            ignored=self._ignored,
        )
