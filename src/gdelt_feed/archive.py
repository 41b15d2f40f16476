"""
压缩包下载与校验

流程：下载 → 校验字节数 → 校验 MD5 → 解压唯一的内部文件
任何一步失败都是硬失败（非 200 除外，见 BadStatusCodeError）
"""

import hashlib
import io
import logging
import zipfile
import zlib
from typing import Optional

import requests

from .config import DEFAULT_HTTP_TIMEOUT
from .exceptions import ArchiveError, IntegrityError
from .http_client import http_get
from .model import FileReference


def fetch_archive(ref: FileReference,
                  session: Optional[requests.Session] = None,
                  timeout: float = DEFAULT_HTTP_TIMEOUT) -> io.BytesIO:
    """
    下载清单引用的压缩包并返回内部文件内容

    Args:
        ref: 清单中的文件引用
        session: 可选的 requests.Session
        timeout: 请求超时（秒）

    Returns:
        解压后内容的字节流
    """
    content = http_get(ref.url, session=session, timeout=timeout)
    try:
        verify_size(content, ref.size)
        verify_md5(content, ref.md5sum)
    except IntegrityError as e:
        raise IntegrityError(f"failed to validate {ref.url!r}: {e}", context=ref.url) from e
    logging.debug(f"✓ 校验通过: {ref.url} ({len(content)} bytes)")
    return open_single_entry(content)


def verify_size(content: bytes, expected: int):
    if len(content) != expected:
        raise IntegrityError(f"expected content size {expected}, actual {len(content)}")


def verify_md5(content: bytes, expected: str):
    actual = hashlib.md5(content).hexdigest()
    if actual != expected.lower():
        raise IntegrityError(f"md5 sum: expected {expected!r}, actual {actual!r}")


def open_single_entry(content: bytes) -> io.BytesIO:
    """打开 zip 内容，要求恰好一个内部文件，返回其解压后的字节流"""
    try:
        with zipfile.ZipFile(io.BytesIO(content)) as zf:
            entries = zf.infolist()
            if len(entries) != 1:
                raise ArchiveError(f"ambiguous archive: want 1 file in zip, got {len(entries)}")
            try:
                return io.BytesIO(zf.read(entries[0]))
            except (zlib.error, EOFError, NotImplementedError, RuntimeError) as e:
                raise ArchiveError(f"failed to decompress {entries[0].filename!r}: {e}") from e
    except zipfile.BadZipFile as e:
        raise ArchiveError(f"zip reader error: {e}") from e
