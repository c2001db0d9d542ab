"""
Environment Manager — 多環境設定繼承

支援 dev / staging 等多套環境，透過繼承合併設定。
不用每個環境都寫一份完整的設定，只需覆寫差異。

設定查找順序：
    1. 環境變數 UI_<KEY> (最高優先，例如 UI_EXPLICIT_WAIT)
    2. config/env/{env_name}.json (環境專用)
    3. config/env/base.json (基底)
    4. 程式碼內建預設值

用法：
    from core.env_manager import env

    # 讀取（自動合併）
    url = env.get("base_url")

    # 切換環境
    env.switch("dev")

    # 套用到 Config（pytest 啟動時由 core.browser_plugin 呼叫）
    env.apply(Config, overrides={"browser": "firefox"})
"""

from __future__ import annotations

import json
import os
from copy import deepcopy
from pathlib import Path

from config.config import ENV_PREFIX
from utils.logger import logger

_CONFIG_DIR = Path(__file__).resolve().parent.parent / "config"
_ENV_DIR = _CONFIG_DIR / "env"


def _deep_merge(base: dict, override: dict) -> dict:
    """深層合併兩個 dict，override 覆蓋 base"""
    merged = deepcopy(base)
    for key, value in override.items():
        if key in merged and isinstance(merged[key], dict) and isinstance(value, dict):
            merged[key] = _deep_merge(merged[key], value)
        else:
            merged[key] = deepcopy(value)
    return merged


# 內建預設值
_DEFAULTS = {
    "base_url": "http://speak-ukrainian.eastus2.cloudapp.azure.com/dev/",
    "browser": "chrome",
    "headless": False,
    "window_size": "1920,1080",
    "explicit_wait": 10,
    "page_load_timeout": 30,
    "click_strategy": "script",
    "text_lookup": "xpath",
}


class EnvManager:
    """
    多環境設定管理

    合併順序: 預設值 → base.json → {env}.json → 環境變數覆蓋
    """

    def __init__(self, env_dir: Path | None = None):
        self._env_name: str = os.getenv("TEST_ENV", "dev")
        self._env_dir = env_dir or _ENV_DIR
        self._config: dict = {}
        self._loaded = False

    @property
    def env_name(self) -> str:
        return self._env_name

    def switch(self, env_name: str) -> None:
        """切換環境並重新載入"""
        logger.info(f"切換環境: {self._env_name} → {env_name}")
        self._env_name = env_name
        self._loaded = False
        self._load()

    def get(self, key: str, default=None):
        """
        取得設定值，支援 dot notation。

        範例:
            env.get("base_url")        → "http://..."
            env.get("explicit_wait")   → 10
        """
        self._ensure_loaded()

        # 先檢查環境變數覆蓋 (加前綴，用底線替代 dot)
        env_key = ENV_PREFIX + key.upper().replace(".", "_")
        env_val = os.getenv(env_key)
        if env_val is not None:
            return self._cast(env_val)

        parts = key.split(".")
        value = self._config
        for part in parts:
            if isinstance(value, dict) and part in value:
                value = value[part]
            else:
                return default
        return value

    def set(self, key: str, value) -> None:
        """動態設定值（runtime only，不寫檔）"""
        self._ensure_loaded()
        parts = key.split(".")
        target = self._config
        for part in parts[:-1]:
            target = target.setdefault(part, {})
        target[parts[-1]] = value

    def apply(self, config_cls, overrides: dict | None = None) -> None:
        """
        將合併後的設定寫回 Config 類別屬性。

        只處理頂層 key，且 Config 上必須有對應的大寫屬性。
        overrides 中值為 None 的項目視為未指定。

        Args:
            config_cls: 通常是 config.config.Config
            overrides: 命令列參數等最高優先的覆寫值
        """
        self._ensure_loaded()
        overrides = {k: v for k, v in (overrides or {}).items() if v is not None}

        for key in self._config:
            attr = key.upper()
            if not hasattr(config_cls, attr):
                continue
            value = overrides[key] if key in overrides else self.get(key)
            if isinstance(value, str) and attr in ("BROWSER", "CLICK_STRATEGY", "TEXT_LOOKUP"):
                value = value.lower()
            setattr(config_cls, attr, value)

        logger.debug(
            f"設定已套用 [{self._env_name}]: "
            f"base_url={config_cls.BASE_URL}, browser={config_cls.BROWSER}, "
            f"click={config_cls.CLICK_STRATEGY}, text_lookup={config_cls.TEXT_LOOKUP}"
        )

    # ── 內部方法 ──

    def _ensure_loaded(self) -> None:
        if not self._loaded:
            self._load()

    def _load(self) -> None:
        """載入並合併設定"""
        config = deepcopy(_DEFAULTS)

        base_file = self._env_dir / "base.json"
        if base_file.exists():
            config = _deep_merge(config, self._read_json(base_file))

        env_file = self._env_dir / f"{self._env_name}.json"
        if env_file.exists():
            config = _deep_merge(config, self._read_json(env_file))
        else:
            logger.warning(f"找不到環境設定檔: {env_file}，使用基底設定")

        self._config = config
        self._loaded = True
        logger.debug(f"環境設定已載入: {self._env_name}")

    @staticmethod
    def _read_json(path: Path) -> dict:
        with open(path, encoding="utf-8") as f:
            data = json.load(f)
        # 移除 _comment 欄位
        return {k: v for k, v in data.items() if not k.startswith("_")}

    @staticmethod
    def _cast(value: str):
        """嘗試將環境變數字串轉為適當型別"""
        if value.lower() in ("true", "yes"):
            return True
        if value.lower() in ("false", "no"):
            return False
        try:
            return int(value)
        except ValueError:
            pass
        try:
            return float(value)
        except ValueError:
            pass
        return value


# 全域 singleton
env = EnvManager()
