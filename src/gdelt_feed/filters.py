"""
事件过滤模块

按固定顺序对每个事件应用过滤条件，第一个不满足的条件即排除该事件：
1. 必须有 SourceURL、关联文章和非空标题
2. DATEADDED 必须能解析为时间
3. （可选）排除晚于当前时间的事件
4. （可选）排除标题长度（按 Unicode 字符计）超过上限的事件
5. （可选）只保留允许的 CAMEO 根事件代码
6. （可选）排除本次运行中已出现过的 SourceURL

注意：已访问 URL 集合只记录通过全部条件的事件。被前面条件排除的事件
（例如标题过长）不会被记录，因此与它 URL 相同的后续事件仍可能通过。
"""

import logging
from datetime import datetime, timezone
from typing import Iterable, List, Optional, Set

from .config import FeedConfig, default_config
from .model import EventModel


def is_event_code_allowed(allowed_root_codes: Optional[Iterable[str]], root_code: str) -> bool:
    """允许列表为空或 None 时不限制"""
    if not allowed_root_codes:
        return True
    return root_code in set(allowed_root_codes)


def filter_events(events: Iterable[EventModel],
                  config: Optional[FeedConfig] = None,
                  now: Optional[datetime] = None) -> List[EventModel]:
    """
    过滤事件，保持原有相对顺序

    Args:
        events: 已关联文章的事件（主订阅源在前）
        config: 过滤配置（None 则使用 default_config）
        now: 当前时间（None 则使用 UTC 当前时间；不带时区的按 UTC 处理）

    Returns:
        通过全部条件的事件列表
    """
    config = config or default_config
    if now is None:
        now = datetime.now(timezone.utc)
    elif now.tzinfo is None:
        now = now.replace(tzinfo=timezone.utc)
    allowed = set(config.allowed_root_codes)

    result: List[EventModel] = []
    visited_urls: Set[str] = set()
    total = 0

    for event in events:
        total += 1
        article = event.gkg_article
        if not event.source_url or article is None or not article.extras.page_title:
            continue
        try:
            published_at = event.date_added_time()
        except ValueError:
            continue
        if config.skip_future_events and published_at > now:
            continue
        if (config.max_title_length is not None
                and len(article.extras.page_title) > config.max_title_length):
            continue
        if not is_event_code_allowed(allowed, event.event_root_code):
            continue
        if config.skip_duplicates and event.source_url in visited_urls:
            continue
        result.append(event)
        visited_urls.add(event.source_url)

    logging.info(f"✓ 过滤完成: {total} 个事件 → {len(result)} 个")
    return result
