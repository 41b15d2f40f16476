"""
测试公共 fixture
构造 Event/GKG 行、内存 zip 包以及不联网的假 HTTP session
"""

import hashlib
import io
import struct
import zipfile
from datetime import datetime, timezone
from typing import Dict, List, Optional, Tuple

import pytest
import requests

BASE_URL = "http://data.gdeltproject.org/gdeltv2"

_EVENT_ROW = [
    "1100000001", "20230614", "202306", "2023", "2023.4466",
    # Actor1
    "USA", "UNITED STATES", "USA", "", "", "", "", "GOV", "", "",
    # Actor2
    "RUS", "RUSSIA", "RUS", "", "", "", "", "MIL", "", "",
    # IsRootEvent, EventCode, EventBaseCode, EventRootCode, QuadClass
    "1", "190", "190", "19", "4",
    # GoldsteinScale, NumMentions, NumSources, NumArticles, AvgTone
    "-10.0", "10", "1", "10", "-5.5",
    # Actor1Geo
    "1", "United States", "US", "US", "", "39.828175", "-98.5795", "US",
    # Actor2Geo
    "4", "Moscow, Moskva, Russia", "RS", "RS48", "", "55.7522", "37.6156", "-2960561",
    # ActionGeo
    "4", "Kyiv, Kyyiv, Misto, Ukraine", "UP", "UP12", "", "50.4333", "30.5167", "-1044367",
    # DATEADDED, SOURCEURL
    "20230615120000", "https://example.com/news/1",
]


def build_event_row(overrides: Optional[Dict[int, str]] = None) -> List[str]:
    row = list(_EVENT_ROW)
    for index, value in (overrides or {}).items():
        row[index] = value
    return row


def build_article_row(url: str = "https://example.com/news/1",
                      title: str = "Example headline",
                      record_id: str = "20230615120000-1",
                      image: str = "https://example.com/img/1.jpg") -> List[str]:
    row = [""] * 27
    row[0] = record_id
    row[1] = "20230615120000"
    row[2] = "1"
    row[3] = "example.com"
    row[4] = url
    row[18] = f"  {image} "
    row[26] = f"<PAGE_PRECISEPUBTIMESTAMP>20230615115500</PAGE_PRECISEPUBTIMESTAMP><PAGE_TITLE>{title}</PAGE_TITLE>"
    return row


def to_tsv(rows: List[List[str]]) -> bytes:
    return "".join("\t".join(row) + "\n" for row in rows).encode("utf-8")


def make_zip(entries: Dict[str, bytes]) -> bytes:
    buf = io.BytesIO()
    with zipfile.ZipFile(buf, "w", zipfile.ZIP_DEFLATED) as zf:
        for name, data in entries.items():
            zf.writestr(name, data)
    return buf.getvalue()


def md5_hex(content: bytes) -> str:
    return hashlib.md5(content).hexdigest()


def corrupt_deflate(content: bytes) -> bytes:
    """把 zip 第一个条目压缩数据的首字节改成无效的 deflate 块类型（目录保持不变）"""
    name_len, extra_len = struct.unpack("<HH", content[26:30])
    offset = 30 + name_len + extra_len
    return content[:offset] + b"\xff" + content[offset + 1:]


class FakeResponse:
    def __init__(self, status_code: int, content: bytes = b""):
        self.status_code = status_code
        self.content = content
        self.closed = False

    def close(self):
        self.closed = True


class FakeSession:
    """按 URL 返回预设响应；未知 URL 模拟连接错误"""

    def __init__(self, routes: Optional[Dict[str, Tuple[int, bytes]]] = None):
        self.routes = dict(routes or {})
        self.calls: List[Tuple[str, float]] = []

    def get(self, url, timeout=None):
        self.calls.append((url, timeout))
        if url not in self.routes:
            raise requests.ConnectionError(f"no route to {url}")
        status, content = self.routes[url]
        return FakeResponse(status, content)

    @property
    def urls(self) -> List[str]:
        return [url for url, _ in self.calls]


def build_feed_routes(manifest_url: str,
                      stamp: str,
                      event_rows: List[List[str]],
                      article_rows: List[List[str]]) -> Dict[str, Tuple[int, bytes]]:
    """构造一次轮询需要的全部响应：清单 + export + mentions + gkg"""
    export_zip = make_zip({f"{stamp}.export.CSV": to_tsv(event_rows)})
    mentions_zip = make_zip({f"{stamp}.mentions.CSV": b""})
    gkg_zip = make_zip({f"{stamp}.gkg.csv": to_tsv(article_rows)})

    export_url = f"{BASE_URL}/{stamp}.export.CSV.zip"
    mentions_url = f"{BASE_URL}/{stamp}.mentions.CSV.zip"
    gkg_url = f"{BASE_URL}/{stamp}.gkg.csv.zip"

    manifest = "\n".join([
        f"{len(export_zip)} {md5_hex(export_zip)} {export_url}",
        f"{len(mentions_zip)} {md5_hex(mentions_zip)} {mentions_url}",
        f"{len(gkg_zip)} {md5_hex(gkg_zip)} {gkg_url}",
    ]) + "\n"

    return {
        manifest_url: (200, manifest.encode("utf-8")),
        export_url: (200, export_zip),
        mentions_url: (200, mentions_zip),
        gkg_url: (200, gkg_zip),
    }


@pytest.fixture
def event_row():
    """返回 Event 行构造函数，可按列号覆盖字段"""
    return build_event_row


@pytest.fixture
def article_row():
    """返回 GKG 行构造函数"""
    return build_article_row


@pytest.fixture
def feed_routes():
    """返回订阅源响应构造函数"""
    return build_feed_routes


@pytest.fixture
def fake_session():
    """返回假 session 构造函数"""
    return FakeSession


@pytest.fixture
def zip_bytes():
    """返回内存 zip 构造函数"""
    return make_zip


@pytest.fixture
def corrupt_zip():
    """返回损坏 zip 压缩数据的函数"""
    return corrupt_deflate


@pytest.fixture
def fixed_now():
    return datetime(2023, 6, 15, 13, 0, 0, tzinfo=timezone.utc)
