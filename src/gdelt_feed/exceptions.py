"""
GDELT 数据流异常定义

错误分三层：
- 行级：RecordError，单行 CSV 解析失败，只跳过该行
- 订阅源级（软失败）：BadStatusCodeError，上游返回非 200，该订阅源返回 0 条事件
- 订阅源级（硬失败）：其余异常，整个调用失败

用法: from gdelt_feed.exceptions import GDELTFeedError, BadStatusCodeError
"""

from typing import Any, Optional


class GDELTFeedError(Exception):
    """所有 gdelt_feed 异常的基类"""

    def __init__(self, message: str, context: Optional[Any] = None):
        super().__init__(message)
        self.context = context


class BadStatusCodeError(GDELTFeedError):
    """上游 HTTP 响应状态码不是 200"""

    def __init__(self, status_code: int, url: str = ""):
        super().__init__(f"bad HTTP response status code {status_code}", context=url)
        self.status_code = status_code
        self.url = url


class ManifestError(GDELTFeedError):
    """lastupdate 清单格式错误"""
    pass


class IntegrityError(GDELTFeedError):
    """下载内容的大小或 MD5 校验不一致"""
    pass


class ArchiveError(GDELTFeedError):
    """压缩包无法打开，或内部文件数量不是 1"""
    pass


class RecordError(GDELTFeedError):
    """单行 CSV 记录解析失败（仅在读取器内部使用）"""
    pass


class CorrelationError(GDELTFeedError):
    """GKG 文章中存在重复的 DocumentIdentifier"""
    pass


class ConfigurationError(GDELTFeedError):
    """环境变量配置无效"""
    pass


class FeedFetchError(GDELTFeedError):
    """返回给调用方的硬失败"""
    pass
