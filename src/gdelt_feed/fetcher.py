"""
GDELT 最新事件获取模块
从 lastupdate 清单获取 Event → GKG → 关联 → 过滤 的完整数据流

公开方法：
    - fetch_latest_events: 获取最新事件的唯一入口
    - poll_feed: 轮询单个订阅源，返回 FetchResult
"""

import logging
from dataclasses import dataclass, field
from datetime import datetime
from typing import Iterable, List, Optional, Union

import requests

from .archive import fetch_archive
from .config import DEFAULT_HTTP_TIMEOUT, FeedConfig, default_config
from .correlator import correlate
from .event_reader import read_events
from .exceptions import BadStatusCodeError, FeedFetchError, GDELTFeedError
from .filters import filter_events
from .gkg_reader import read_articles
from .manifest import fetch_manifest
from .model import EventModel


# ================= 轮询结果 =================

@dataclass
class FeedOk:
    """订阅源获取成功"""
    url: str
    events: List[EventModel] = field(default_factory=list)


@dataclass
class UpstreamUnavailable:
    """上游返回非 200（软失败，该订阅源视为 0 条事件）"""
    url: str
    status_code: int


@dataclass
class HardFailure:
    """其他任何错误（整个调用失败）"""
    url: str
    error: Exception


FetchResult = Union[FeedOk, UpstreamUnavailable, HardFailure]


def poll_feed(manifest_url: str,
              session: Optional[requests.Session] = None,
              timeout: float = DEFAULT_HTTP_TIMEOUT) -> FetchResult:
    """
    轮询单个订阅源：清单 → export → gkg → 关联

    Args:
        manifest_url: lastupdate 清单地址
        session: 可选的 requests.Session
        timeout: 单次请求超时（秒）

    Returns:
        FeedOk / UpstreamUnavailable / HardFailure
    """
    try:
        manifest = fetch_manifest(manifest_url, session=session, timeout=timeout)

        logging.info(f"📥 下载 export: {manifest.export.url}")
        events = read_events(fetch_archive(manifest.export, session=session, timeout=timeout))

        logging.info(f"📥 下载 GKG: {manifest.gkg.url}")
        articles = read_articles(fetch_archive(manifest.gkg, session=session, timeout=timeout))

        return FeedOk(url=manifest_url, events=correlate(events, articles))
    except BadStatusCodeError as e:
        return UpstreamUnavailable(url=manifest_url, status_code=e.status_code)
    except (GDELTFeedError, requests.RequestException) as e:
        return HardFailure(url=manifest_url, error=e)


def fetch_latest_events_from(manifest_urls: Iterable[str],
                             config: Optional[FeedConfig] = None,
                             session: Optional[requests.Session] = None,
                             now: Optional[datetime] = None) -> List[EventModel]:
    """
    依次轮询多个订阅源，按顺序合并后过滤

    Raises:
        FeedFetchError: 任一订阅源硬失败
    """
    config = config or default_config
    merged: List[EventModel] = []

    for url in manifest_urls:
        result = poll_feed(url, session=session, timeout=config.http_timeout)
        if isinstance(result, UpstreamUnavailable):
            logging.warning(f"⚠️ 获取 GDELT 最新事件失败 (HTTP {result.status_code}): {url}")
            continue
        if isinstance(result, HardFailure):
            logging.error(f"❌ 获取 GDELT 最新事件失败: {url}: {result.error}")
            raise FeedFetchError(
                f"failed to get latest events from {url!r}: {result.error}", context=url
            ) from result.error
        logging.info(f"✓ {url}: {len(result.events)} 个事件")
        merged.extend(result.events)

    return filter_events(merged, config, now=now)


def fetch_latest_events(config: Optional[FeedConfig] = None,
                        session: Optional[requests.Session] = None,
                        now: Optional[datetime] = None) -> List[EventModel]:
    """
    获取最新的 GDELT 事件

    主订阅源总是获取；config.translingual 为 True 时再获取 Translingual 订阅源。
    两个订阅源依次获取，主订阅源的事件排在前面（影响重复 URL 的判定）。

    Args:
        config: 配置（None 则使用 default_config）
        session: 可选的 requests.Session
        now: 判断未来事件用的当前时间（None 则使用 UTC 当前时间）

    Returns:
        过滤后的事件列表

    Examples:
        events = fetch_latest_events()

        events = fetch_latest_events(FeedConfig(translingual=True, allowed_root_codes=[]))
    """
    config = config or default_config
    return fetch_latest_events_from(config.feed_urls(), config=config, session=session, now=now)
