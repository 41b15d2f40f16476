"""
Event 与 GKG 文章关联模块
通过 Event.source_url == Article.document_identifier 建立关联
"""

import logging
from typing import Dict, List

from .exceptions import CorrelationError
from .model import ArticleModel, EventModel


def index_articles(articles: List[ArticleModel]) -> Dict[str, ArticleModel]:
    """按 DocumentIdentifier 建立索引，重复的标识符抛出 CorrelationError"""
    index: Dict[str, ArticleModel] = {}
    for article in articles:
        if article.document_identifier in index:
            raise CorrelationError(
                f"duplicate document identifier in articles: {article.document_identifier!r}",
                context=article.id,
            )
        index[article.document_identifier] = article
    return index


def correlate(events: List[EventModel], articles: List[ArticleModel]) -> List[EventModel]:
    """
    为每个事件挂上对应的 GKG 文章

    找不到文章的事件保持 gkg_article 为 None。返回传入的同一个列表。
    """
    index = index_articles(articles)
    matched = 0
    for event in events:
        article = index.get(event.source_url)
        if article is None:
            continue
        event.gkg_article = article
        matched += 1
    logging.info(f"✓ 事件关联完成: {matched}/{len(events)} 个事件找到文章")
    return events
