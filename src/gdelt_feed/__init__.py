"""
GDELT 实时数据流模块
获取 GDELT 2.0 每 15 分钟发布的 Event 与 GKG 文件，校验、解析、关联并过滤
"""

from .config import FeedConfig, default_config, LAST_UPDATE_URL, LAST_UPDATE_TRANSLATION_URL

from .exceptions import (
    GDELTFeedError,
    BadStatusCodeError,
    ManifestError,
    IntegrityError,
    ArchiveError,
    RecordError,
    CorrelationError,
    ConfigurationError,
    FeedFetchError
)

from .fetcher import (
    fetch_latest_events,
    fetch_latest_events_from,
    poll_feed,
    FeedOk,
    UpstreamUnavailable,
    HardFailure
)

from .cameo_codes import all_cameo_codes

from .model import (
    EventModel,
    ActorModel,
    GeoLocationModel,
    GeoType,
    NullableFloat,
    parse_nullable_float,
    ArticleModel,
    ArticleExtras,
    FileReference,
    Manifest
)

__all__ = [
    # 配置
    'FeedConfig', 'default_config', 'LAST_UPDATE_URL', 'LAST_UPDATE_TRANSLATION_URL',
    # 异常
    'GDELTFeedError', 'BadStatusCodeError', 'ManifestError', 'IntegrityError',
    'ArchiveError', 'RecordError', 'CorrelationError', 'ConfigurationError', 'FeedFetchError',
    # 获取
    'fetch_latest_events', 'fetch_latest_events_from', 'poll_feed',
    'FeedOk', 'UpstreamUnavailable', 'HardFailure',
    # CAMEO
    'all_cameo_codes',
    # Models
    'EventModel', 'ActorModel', 'GeoLocationModel', 'GeoType',
    'NullableFloat', 'parse_nullable_float',
    'ArticleModel', 'ArticleExtras', 'FileReference', 'Manifest'
]
