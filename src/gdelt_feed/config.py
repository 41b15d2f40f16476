"""
GDELT 数据流配置模块
统一管理订阅源地址、过滤选项和 HTTP 超时
"""

import os
from typing import Iterable, List, Optional

from dotenv import load_dotenv

from .cameo_codes import DEFAULT_ALLOWED_ROOT_CODES
from .exceptions import ConfigurationError

# ================= 订阅源配置 =================

# 最近 15 分钟 CSV 文件清单 - 英文（每 15 分钟更新）
LAST_UPDATE_URL = "http://data.gdeltproject.org/gdeltv2/lastupdate.txt"

# 最近 15 分钟 CSV 文件清单 - GDELT Translingual（每 15 分钟更新）
LAST_UPDATE_TRANSLATION_URL = "http://data.gdeltproject.org/gdeltv2/lastupdate-translation.txt"

DEFAULT_MAX_TITLE_LENGTH = 150
DEFAULT_HTTP_TIMEOUT = 60.0

_TRUE_VALUES = {"true", "1", "yes", "on"}
_FALSE_VALUES = {"false", "0", "no", "off"}


class FeedConfig:
    """GDELT 订阅源与过滤配置类"""

    def __init__(self,
                 allowed_root_codes: Optional[Iterable[str]] = None,
                 skip_duplicates: bool = True,
                 skip_future_events: bool = True,
                 translingual: bool = False,
                 max_title_length: Optional[int] = DEFAULT_MAX_TITLE_LENGTH,
                 last_update_url: str = LAST_UPDATE_URL,
                 last_update_translation_url: str = LAST_UPDATE_TRANSLATION_URL,
                 http_timeout: float = DEFAULT_HTTP_TIMEOUT):
        """
        初始化配置

        Args:
            allowed_root_codes: 允许的 CAMEO 根事件代码（None 使用默认列表，空列表表示不限）
            skip_duplicates: 是否跳过 SourceURL 重复的事件
            skip_future_events: 是否跳过 DATEADDED 晚于当前时间的事件
            translingual: 是否同时获取 Translingual 订阅源
            max_title_length: 标题最大长度（按 Unicode 字符计，None 表示不限）
            last_update_url: 英文订阅源清单地址
            last_update_translation_url: Translingual 订阅源清单地址
            http_timeout: 单次 HTTP 请求超时（秒）
        """
        if allowed_root_codes is None:
            allowed_root_codes = DEFAULT_ALLOWED_ROOT_CODES
        self.allowed_root_codes: List[str] = list(allowed_root_codes)
        self.skip_duplicates = skip_duplicates
        self.skip_future_events = skip_future_events
        self.translingual = translingual
        self.max_title_length = max_title_length
        self.last_update_url = last_update_url
        self.last_update_translation_url = last_update_translation_url
        self.http_timeout = http_timeout

    def feed_urls(self) -> List[str]:
        """按处理顺序返回需要轮询的清单地址（主订阅源在前）"""
        urls = [self.last_update_url]
        if self.translingual:
            urls.append(self.last_update_translation_url)
        return urls

    def __repr__(self) -> str:
        return (f"FeedConfig(allowed_root_codes={self.allowed_root_codes!r}, "
                f"skip_duplicates={self.skip_duplicates}, "
                f"skip_future_events={self.skip_future_events}, "
                f"translingual={self.translingual}, "
                f"max_title_length={self.max_title_length})")

    @classmethod
    def from_env(cls) -> 'FeedConfig':
        """从环境变量（及 .env 文件）创建配置"""
        load_dotenv()

        codes_str = os.getenv("GDELT_ALLOWED_ROOT_CODES")
        allowed_root_codes = None
        if codes_str is not None:
            allowed_root_codes = [c.strip() for c in codes_str.split(",") if c.strip()]

        return cls(
            allowed_root_codes=allowed_root_codes,
            skip_duplicates=_env_bool("GDELT_SKIP_DUPLICATES", True),
            skip_future_events=_env_bool("GDELT_SKIP_FUTURE_EVENTS", True),
            translingual=_env_bool("GDELT_TRANSLINGUAL", False),
            max_title_length=_env_int("GDELT_MAX_TITLE_LENGTH", DEFAULT_MAX_TITLE_LENGTH),
            last_update_url=os.getenv("GDELT_LAST_UPDATE_URL", LAST_UPDATE_URL),
            last_update_translation_url=os.getenv(
                "GDELT_LAST_UPDATE_TRANSLATION_URL", LAST_UPDATE_TRANSLATION_URL),
            http_timeout=_env_float("GDELT_HTTP_TIMEOUT", DEFAULT_HTTP_TIMEOUT),
        )


def _env_bool(name: str, default: bool) -> bool:
    value = os.getenv(name)
    if value is None or not value.strip():
        return default
    value = value.strip().lower()
    if value in _TRUE_VALUES:
        return True
    if value in _FALSE_VALUES:
        return False
    raise ConfigurationError(f"invalid boolean for {name}: {value!r}")


def _env_int(name: str, default: int) -> int:
    value = os.getenv(name)
    if value is None or not value.strip():
        return default
    try:
        return int(value)
    except ValueError:
        raise ConfigurationError(f"invalid integer for {name}: {value!r}")


def _env_float(name: str, default: float) -> float:
    value = os.getenv(name)
    if value is None or not value.strip():
        return default
    try:
        return float(value)
    except ValueError:
        raise ConfigurationError(f"invalid number for {name}: {value!r}")


# 全局默认配置实例
default_config = FeedConfig()
