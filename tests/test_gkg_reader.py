"""
GKG 表（gkg.csv）解析单元测试
"""

import io
import logging
import re

import pytest

from gdelt_feed.exceptions import RecordError
from gdelt_feed.gkg_reader import parse_article_extras, parse_article_row, read_articles


def _tsv(rows):
    return io.BytesIO("".join("\t".join(r) + "\n" for r in rows).encode("utf-8"))


class TestParseArticleRow:
    """测试单行解析"""

    def test_fields(self, article_row):
        article = parse_article_row(article_row(url="https://example.com/a", title="Hello"))

        assert article.id == "20230615120000-1"
        assert article.document_identifier == "https://example.com/a"
        assert article.sharing_image == "https://example.com/img/1.jpg"
        assert article.extras.page_title == "Hello"

    def test_wrong_column_count(self, article_row):
        with pytest.raises(RecordError, match="expected 27 CSV columns, actual 28"):
            parse_article_row(article_row() + ["extra"])


class TestParseArticleExtras:
    """测试网页标题提取"""

    def test_missing_title(self):
        assert parse_article_extras("<PAGE_AUTHORS>Someone</PAGE_AUTHORS>").page_title == ""

    def test_empty_input(self):
        assert parse_article_extras("").page_title == ""

    def test_html_unescape(self):
        extras = "<PAGE_TITLE>Tom &amp; Jerry &quot;live&quot; &#8211; News</PAGE_TITLE>"
        assert parse_article_extras(extras).page_title == 'Tom & Jerry "live" – News'

    def test_whitespace_collapsed(self):
        extras = "<PAGE_TITLE>  Breaking \t news:   protests  in   Paris  </PAGE_TITLE>"
        assert parse_article_extras(extras).page_title == "Breaking news: protests in Paris"

    def test_first_match_only(self):
        extras = "<PAGE_TITLE>First</PAGE_TITLE><PAGE_TITLE>Second</PAGE_TITLE>"
        assert parse_article_extras(extras).page_title == "First"

    def test_unicode_title(self):
        extras = "<PAGE_TITLE>乌克兰 基辅 发生爆炸</PAGE_TITLE>"
        assert parse_article_extras(extras).page_title == "乌克兰 基辅 发生爆炸"

    def test_injected_pattern(self):
        pattern = re.compile(r"<TITLE>(.*?)</TITLE>")
        assert parse_article_extras("<TITLE>x</TITLE>", title_re=pattern).page_title == "x"


class TestReadArticles:
    """测试整文件解析"""

    def test_bad_row_skipped(self, article_row, caplog):
        rows = [
            article_row(url="https://a.example/1"),
            article_row()[:10],
            article_row(url="https://a.example/2"),
        ]
        with caplog.at_level(logging.WARNING):
            articles = read_articles(_tsv(rows))

        assert [a.document_identifier for a in articles] == ["https://a.example/1", "https://a.example/2"]
        assert "row=1" in caplog.text

    def test_quotes_inside_field(self, article_row):
        """字段中间的引号按普通字符处理"""
        rows = [article_row(title='He said "no" to talks')]
        articles = read_articles(_tsv(rows))
        assert articles[0].extras.page_title == 'He said "no" to talks'

    def test_unclosed_quote_costs_one_row(self, article_row):
        rows = [
            article_row(url="https://a.example/1", record_id="1"),
            article_row(url="https://a.example/2", record_id='"2'),
            article_row(url="https://a.example/3", record_id="3"),
            article_row(url="https://a.example/4", record_id="4"),
        ]
        articles = read_articles(_tsv(rows))
        assert [a.id for a in articles] == ["1", "3", "4"]

    def test_injected_patterns(self, article_row):
        row = article_row()
        row[26] = "<TITLE>Breaking_news__today</TITLE>"
        articles = read_articles(_tsv([row]),
                                 title_re=re.compile(r"<TITLE>(.*?)</TITLE>"),
                                 whitespace_re=re.compile(r"_+"))
        assert articles[0].extras.page_title == "Breaking news today"
