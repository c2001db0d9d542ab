"""
config/config.py 單元測試

驗證 Config.validate 的檢查項目與 window_size 解析。
"""

import pytest

from config.config import Config, ConfigValidationError


@pytest.fixture
def valid_config(monkeypatch):
    """將 Config 設為一組合法值，測試結束後自動還原"""
    monkeypatch.setattr(Config, "BASE_URL", "http://example.test/dev/")
    monkeypatch.setattr(Config, "BROWSER", "chrome")
    monkeypatch.setattr(Config, "CLICK_STRATEGY", "script")
    monkeypatch.setattr(Config, "TEXT_LOOKUP", "xpath")
    monkeypatch.setattr(Config, "EXPLICIT_WAIT", 10)
    monkeypatch.setattr(Config, "PAGE_LOAD_TIMEOUT", 30)
    monkeypatch.setattr(Config, "WINDOW_SIZE", "1920,1080")
    return Config


@pytest.mark.unit
class TestConfigValidate:
    """Config.validate"""

    @pytest.mark.unit
    def test_valid_config_passes(self, valid_config):
        valid_config.validate()

    @pytest.mark.unit
    def test_unsupported_browser(self, valid_config, monkeypatch):
        monkeypatch.setattr(Config, "BROWSER", "safari")

        with pytest.raises(ConfigValidationError) as exc_info:
            valid_config.validate()

        assert any("safari" in e for e in exc_info.value.errors)

    @pytest.mark.unit
    def test_unsupported_click_strategy(self, valid_config, monkeypatch):
        monkeypatch.setattr(Config, "CLICK_STRATEGY", "magic")

        with pytest.raises(ConfigValidationError):
            valid_config.validate()

    @pytest.mark.unit
    def test_non_positive_wait(self, valid_config, monkeypatch):
        monkeypatch.setattr(Config, "EXPLICIT_WAIT", 0)

        with pytest.raises(ConfigValidationError):
            valid_config.validate()

    @pytest.mark.unit
    @pytest.mark.parametrize("value", ["abc", "10", None, True])
    def test_non_numeric_wait(self, valid_config, monkeypatch, value):
        """設定檔或環境變數給了非數字時回報驗證錯誤，而不是 TypeError"""
        monkeypatch.setattr(Config, "EXPLICIT_WAIT", value)

        with pytest.raises(ConfigValidationError) as exc_info:
            valid_config.validate()

        assert exc_info.value.errors == [f"EXPLICIT_WAIT 必須是大於 0 的數字: {value!r}"]

    @pytest.mark.unit
    def test_numeric_window_size_is_reported(self, valid_config, monkeypatch):
        """JSON 或環境變數給了 1920（int）時回報格式錯誤"""
        monkeypatch.setattr(Config, "WINDOW_SIZE", 1920)

        with pytest.raises(ConfigValidationError) as exc_info:
            valid_config.validate()

        assert exc_info.value.errors == ["WINDOW_SIZE 格式應為 寬,高: 1920"]

    @pytest.mark.unit
    def test_collects_all_errors(self, valid_config, monkeypatch):
        """多個錯誤一次回報"""
        monkeypatch.setattr(Config, "BASE_URL", "ftp://example.test")
        monkeypatch.setattr(Config, "TEXT_LOOKUP", "css")
        monkeypatch.setattr(Config, "WINDOW_SIZE", "big")

        with pytest.raises(ConfigValidationError) as exc_info:
            valid_config.validate()

        assert len(exc_info.value.errors) == 3
        assert "設定驗證失敗" in str(exc_info.value)


@pytest.mark.unit
class TestWindowSize:
    """Config.window_size"""

    @pytest.mark.unit
    def test_parse(self, monkeypatch):
        monkeypatch.setattr(Config, "WINDOW_SIZE", "1280,720")

        assert Config.window_size() == (1280, 720)

    @pytest.mark.unit
    @pytest.mark.parametrize("value", ["1280", "a,b", "1,2,3"])
    def test_invalid_format(self, monkeypatch, value):
        monkeypatch.setattr(Config, "WINDOW_SIZE", value)

        with pytest.raises(ConfigValidationError):
            Config.window_size()
