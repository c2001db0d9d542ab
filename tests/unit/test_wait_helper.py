"""
utils/wait_helper.py 單元測試

驗證 wait_for 與 FluentWait 的輪詢、忽略例外、逾時訊息。
time 模組以 mock 取代，不會真的等待。
"""

from unittest.mock import MagicMock, patch

import pytest

from utils.wait_helper import FluentWait, wait_for


@pytest.fixture
def fake_time():
    with patch("utils.wait_helper.time") as mock_time:
        mock_time.time.return_value = 0
        yield mock_time


@pytest.mark.unit
class TestWaitFor:
    """wait_for"""

    @pytest.mark.unit
    def test_returns_first_truthy_value(self, fake_time):
        condition = MagicMock(side_effect=[None, "", "found"])

        assert wait_for(condition, timeout=5) == "found"
        assert condition.call_count == 3
        assert fake_time.sleep.call_count == 2

    @pytest.mark.unit
    def test_timeout_raises_with_message(self, fake_time):
        fake_time.time.side_effect = [0, 1, 6]

        with pytest.raises(TimeoutError, match="選單未出現"):
            wait_for(lambda: None, timeout=5, message="選單未出現")

    @pytest.mark.unit
    def test_timeout_includes_last_exception(self, fake_time):
        fake_time.time.side_effect = [0, 6]

        def boom():
            raise RuntimeError("js error")

        with pytest.raises(TimeoutError, match="js error"):
            wait_for(boom, timeout=5)

    @pytest.mark.unit
    def test_ignored_exceptions_are_not_reported(self, fake_time):
        fake_time.time.side_effect = [0, 6]

        def stale():
            raise KeyError("stale")

        with pytest.raises(TimeoutError) as exc_info:
            wait_for(stale, timeout=5, ignored=(KeyError,))

        assert "stale" not in str(exc_info.value)

    @pytest.mark.unit
    def test_zero_timeout_checks_once(self, fake_time):
        condition = MagicMock(return_value=None)

        with pytest.raises(TimeoutError):
            wait_for(condition, timeout=0)

        condition.assert_called_once()


@pytest.mark.unit
class TestFluentWait:
    """FluentWait"""

    @pytest.mark.unit
    def test_chain_returns_value(self, fake_time):
        result = (
            FluentWait()
            .timeout(3)
            .polling(0.1)
            .until(lambda: 42)
            .wait()
        )
        assert result == 42

    @pytest.mark.unit
    def test_polling_interval_is_used(self, fake_time):
        condition = MagicMock(side_effect=[None, 1])

        FluentWait().polling(0.25).until(condition).wait()

        fake_time.sleep.assert_called_once_with(0.25)

    @pytest.mark.unit
    def test_ignoring_and_message(self, fake_time):
        fake_time.time.side_effect = [0, 1, 11]
        condition = MagicMock(side_effect=[ValueError("x"), None])

        with pytest.raises(TimeoutError, match="找不到登入按鈕"):
            (
                FluentWait()
                .timeout(10)
                .ignoring(ValueError)
                .message("找不到登入按鈕")
                .until(condition)
                .wait()
            )

    @pytest.mark.unit
    def test_wait_without_condition_raises(self):
        with pytest.raises(ValueError):
            FluentWait().wait()
