"""
GDELT GKG 表（gkg.csv）解析模块

每行 27 列，这里只使用:
    0   GKGRECORDID
    4   DocumentIdentifier（关联 Event 的 SOURCEURL）
    18  SharingImage
    26  Extras（XML 片段，包含 <PAGE_TITLE>）

公开方法：
    - read_articles: 解析整个文件
    - parse_article_row: 解析单行
    - parse_article_extras: 从 Extras 中提取网页标题
"""

import html
import re
from typing import IO, List, Optional, Pattern, Union

from .csv_reader import expect_columns, read_records
from .model import ArticleExtras, ArticleModel

GKG_COLUMNS = 27

PAGE_TITLE_RE = re.compile(r"<PAGE_TITLE>(.*?)</PAGE_TITLE>")
WHITESPACE_RE = re.compile(r"\s+")


def read_articles(stream: Union[IO[bytes], IO[str]],
                  title_re: Optional[Pattern[str]] = None,
                  whitespace_re: Optional[Pattern[str]] = None) -> List[ArticleModel]:
    """解析 gkg.csv 内容，无法解析的行记录警告后跳过；正则可替换"""
    return read_records(
        stream,
        lambda fields: parse_article_row(fields, title_re=title_re, whitespace_re=whitespace_re),
        "GKG",
    )


def parse_article_row(fields: List[str],
                      title_re: Optional[Pattern[str]] = None,
                      whitespace_re: Optional[Pattern[str]] = None) -> ArticleModel:
    """解析单行 GKG 记录，列数不是 27 时抛出 RecordError"""
    expect_columns(fields, GKG_COLUMNS)
    return ArticleModel(
        id=fields[0],
        document_identifier=fields[4],
        sharing_image=fields[18].strip(),
        extras=parse_article_extras(fields[26], title_re=title_re, whitespace_re=whitespace_re),
    )


def parse_article_extras(extras_xml: str,
                         title_re: Optional[Pattern[str]] = None,
                         whitespace_re: Optional[Pattern[str]] = None) -> ArticleExtras:
    """
    从 Extras 中提取网页标题

    处理步骤：
    1. 匹配第一个 <PAGE_TITLE>...</PAGE_TITLE>（没有则标题为空）
    2. HTML 实体反转义
    3. 连续空白合并为一个空格，去掉首尾空白

    示例:
        "<PAGE_TITLE>Tom &amp; Jerry\\n  News</PAGE_TITLE>" → "Tom & Jerry News"
    """
    match = (title_re or PAGE_TITLE_RE).search(extras_xml)
    if match is None:
        return ArticleExtras()
    title = html.unescape(match.group(1))
    title = (whitespace_re or WHITESPACE_RE).sub(" ", title)
    return ArticleExtras(page_title=title.strip())
