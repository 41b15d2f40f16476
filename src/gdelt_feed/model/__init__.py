"""
GDELT 数据模型模块
定义 Event、GKG 文章和 lastupdate 清单的数据模型类
"""

from .event_model import (
    EventModel, ActorModel, GeoLocationModel, GeoType,
    NullableFloat, NULL_FLOAT, parse_nullable_float, parse_date_added
)
from .gkg_model import ArticleModel, ArticleExtras
from .manifest_model import FileReference, Manifest

__all__ = [
    'EventModel', 'ActorModel', 'GeoLocationModel', 'GeoType',
    'NullableFloat', 'NULL_FLOAT', 'parse_nullable_float', 'parse_date_added',
    'ArticleModel', 'ArticleExtras',
    'FileReference', 'Manifest'
]
