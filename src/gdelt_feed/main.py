"""
GDELT 最新事件获取主程序
获取最近 15 分钟的事件并打印标题、链接和发布时间
"""

import logging
import os
import sys
from typing import List

import pandas as pd

from .cameo_codes import get_event_root_name
from .config import FeedConfig
from .exceptions import FeedFetchError
from .fetcher import fetch_latest_events
from .logging_config import setup_logging
from .model import EventModel

# 输出表格的列（保持顺序）
OUTPUT_COLUMNS = [
    "event_id", "url", "headline", "image_url", "published_at",
    "event_root_code", "quad_class", "goldstein_scale", "avg_tone",
    "action_geo_name", "action_geo_country", "action_geo_country_iso",
    "action_geo_lat", "action_geo_long",
]


def events_to_dataframe(events: List[EventModel]) -> pd.DataFrame:
    """把过滤后的事件展开为 DataFrame"""
    rows = []
    for e in events:
        article = e.gkg_article
        try:
            country_iso = e.action_geo.country_code_iso()
        except ValueError:
            country_iso = ""
        rows.append({
            "event_id": e.global_event_id,
            "url": e.source_url,
            "headline": article.extras.page_title if article else "",
            "image_url": article.sharing_image if article else "",
            "published_at": e.published_at,
            "event_root_code": e.event_root_code,
            "quad_class": e.quad_class,
            "goldstein_scale": e.goldstein_scale.as_optional(),
            "avg_tone": e.avg_tone,
            "action_geo_name": e.action_geo.full_name,
            "action_geo_country": e.action_geo.country_code,
            "action_geo_country_iso": country_iso,
            "action_geo_lat": e.action_geo.lat.as_optional(),
            "action_geo_long": e.action_geo.long.as_optional(),
        })
    return pd.DataFrame(rows, columns=OUTPUT_COLUMNS)


def main() -> int:
    """主函数"""
    setup_logging(level=os.getenv("GDELT_LOG_LEVEL", "INFO"), log_dir=os.getenv("GDELT_LOG_DIR"))

    config = FeedConfig.from_env()
    logging.info("=" * 60)
    logging.info("🚀 获取 GDELT 最新事件")
    logging.info(f"   {config!r}")
    logging.info("=" * 60)

    try:
        events = fetch_latest_events(config)
    except FeedFetchError as e:
        logging.error(f"❌ 获取最新事件失败: {e}")
        return 1

    logging.info(f"处理 {len(events)} 个事件")
    for e in events:
        logging.info(f"   EventID {e.global_event_id} | {e.published_at} | {get_event_root_name(e.event_root_code)} | "
                     f"{e.gkg_article.extras.page_title} | {e.source_url}")

    df = events_to_dataframe(events)
    if not df.empty:
        with pd.option_context("display.max_columns", None, "display.width", 200):
            logging.info("\n" + df[["event_id", "published_at", "event_root_code",
                                    "action_geo_country_iso", "headline"]].to_string(index=False))
    return 0


if __name__ == "__main__":
    sys.exit(main())
