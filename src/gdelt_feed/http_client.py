"""
HTTP 下载工具
清单和压缩包都通过这里获取；非 200 响应统一转为 BadStatusCodeError
"""

import logging
from typing import Optional

import requests

from .config import DEFAULT_HTTP_TIMEOUT
from .exceptions import BadStatusCodeError


def http_get(url: str,
             session: Optional[requests.Session] = None,
             timeout: float = DEFAULT_HTTP_TIMEOUT) -> bytes:
    """
    GET 请求并返回完整响应体

    Args:
        url: 请求地址
        session: 可选的 requests.Session（None 则使用 requests 模块）
        timeout: 请求超时（秒）

    Returns:
        响应体字节

    Raises:
        BadStatusCodeError: 状态码不是 200
        requests.RequestException: 网络错误
    """
    client = session if session is not None else requests
    logging.debug(f"📥 GET {url}")
    response = client.get(url, timeout=timeout)
    try:
        if response.status_code != 200:
            raise BadStatusCodeError(response.status_code, url)
        return response.content
    finally:
        response.close()
