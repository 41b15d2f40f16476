"""
lastupdate 清单获取与解析

清单格式（3 行，空格分隔）:
    <size> <md5> <url>
    150383 297a16b493de7cf6ca809a7cc31d0b93 http://data.gdeltproject.org/gdeltv2/20230615120000.export.CSV.zip
    ...

公开方法：
    - fetch_manifest: 下载并解析清单
    - parse_manifest: 解析清单文本
"""

import re
from typing import Optional

import requests

from .config import DEFAULT_HTTP_TIMEOUT
from .exceptions import ManifestError
from .http_client import http_get
from .model import FileReference, Manifest

_EXPORT_SUFFIX = ".export.CSV.zip"
_MENTIONS_SUFFIX = ".mentions.CSV.zip"
_GKG_SUFFIX = ".gkg.csv.zip"

_SIZE_RE = re.compile(r"[+-]?[0-9]+")


def fetch_manifest(url: str,
                   session: Optional[requests.Session] = None,
                   timeout: float = DEFAULT_HTTP_TIMEOUT) -> Manifest:
    """
    下载并解析 lastupdate 清单

    Raises:
        BadStatusCodeError: 清单地址返回非 200
        ManifestError: 清单格式错误
    """
    body = http_get(url, session=session, timeout=timeout)
    try:
        return parse_manifest(body.decode("utf-8"))
    except UnicodeDecodeError as e:
        raise ManifestError(f"failed to parse response from {url!r}: {e}", context=url) from e
    except ManifestError as e:
        raise ManifestError(f"failed to parse response from {url!r}: {e}", context=url) from e


def parse_manifest(text: str) -> Manifest:
    """解析清单文本，必须恰好 3 行且每行 3 个字段"""
    rows = text.strip().split("\n")
    if len(rows) != 3:
        raise ManifestError(f"want 3 rows, got {len(rows)}")

    manifest = Manifest()
    for row in rows:
        _parse_manifest_row(row, manifest)
    return manifest


def _parse_manifest_row(row: str, manifest: Manifest):
    fields = row.split(" ")
    if len(fields) != 3:
        raise ManifestError(f"want 3 fields, got {len(fields)}: {row!r}")

    if not _SIZE_RE.fullmatch(fields[0]):
        raise ManifestError(f"failed to parse Size field as int: {fields[0]!r}")

    ref = FileReference(size=int(fields[0]), md5sum=fields[1], url=fields[2])
    if ref.url.endswith(_EXPORT_SUFFIX):
        manifest.export = ref
    elif ref.url.endswith(_MENTIONS_SUFFIX):
        manifest.mentions = ref
    elif ref.url.endswith(_GKG_SUFFIX):
        manifest.gkg = ref
    else:
        raise ManifestError(f"unexpected suffix for URL: {ref.url!r}")
