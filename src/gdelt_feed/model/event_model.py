"""
GDELT Event 表数据模型
Event 表（物理行为层）：记录"谁对谁做了什么"

对应 export.CSV 中的一行（61 列）
"""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import IntEnum
from typing import List, Mapping, Optional

from ..cameo_codes import all_cameo_codes
from ..fips_codes import lookup_iso_code
from .gkg_model import ArticleModel

# DATEADDED 格式：YYYYMMDDHHMMSS（UTC）
DATE_ADDED_FORMAT = "%Y%m%d%H%M%S"


@dataclass(frozen=True)
class NullableFloat:
    """
    可为空的浮点数

    字段说明:
    - value: 数值（valid 为 False 时无意义）
    - valid: 是否有值
    """
    value: float = 0.0
    valid: bool = False

    def as_optional(self) -> Optional[float]:
        return self.value if self.valid else None


NULL_FLOAT = NullableFloat()


def parse_nullable_float(text: str) -> NullableFloat:
    """
    解析可为空的浮点数

    示例:
        ""      → NULL_FLOAT
        "12.5"  → NullableFloat(12.5, True)
        "abc"   → ValueError
    """
    if not text:
        return NULL_FLOAT
    if text != text.strip() or "_" in text:
        raise ValueError(f"invalid float {text!r}")
    return NullableFloat(value=float(text), valid=True)


class GeoType(IntEnum):
    """地理匹配精度"""
    NONE = 0
    COUNTRY = 1
    US_STATE = 2
    US_CITY = 3
    WORLD_CITY = 4
    WORLD_STATE = 5

    @classmethod
    def from_int(cls, value: int) -> 'GeoType':
        """整数转 GeoType，超出 0..5 抛出 ValueError"""
        try:
            return cls(value)
        except ValueError:
            raise ValueError(f"unexpected GeoType value {value}")

    def __str__(self) -> str:
        return _GEO_TYPE_NAMES[self]


_GEO_TYPE_NAMES = {
    GeoType.NONE: "",
    GeoType.COUNTRY: "COUNTRY",
    GeoType.US_STATE: "USSTATE",
    GeoType.US_CITY: "USCITY",
    GeoType.WORLD_CITY: "WORLDCITY",
    GeoType.WORLD_STATE: "WORLDSTATE",
}


@dataclass
class ActorModel:
    """
    行为者数据模型

    字段说明:
    - code: CAMEO 完整代码，包含地理、宗教、族群和角色等信息
    - name: 规范名称（如 "UNITED NATIONS" 或人名）
    - country_code: 国家代码（CAMEO 三字母）
    - known_group_code: 已知组织代码（如 IGO、NGO、叛乱组织）
    - ethnic_code: 族群代码
    - religion1_code / religion2_code: 宗教代码
    - type1_code / type2_code / type3_code: 类型代码
    """
    code: str = ""
    name: str = ""
    country_code: str = ""
    known_group_code: str = ""
    ethnic_code: str = ""
    religion1_code: str = ""
    religion2_code: str = ""
    type1_code: str = ""
    type2_code: str = ""
    type3_code: str = ""


@dataclass
class GeoLocationModel:
    """
    地理位置数据模型

    字段说明:
    - geo_type: 地理精度级别
    - full_name: 完整地名（国家为国名；州为 "州, 国家"；其余为 "城市, 州, 国家"）
    - country_code: FIPS 10-4 两字母国家代码
    - adm1_code: 一级行政区代码
    - adm2_code: 二级行政区代码
    - lat: 纬度
    - long: 经度
    - feature_id: 地理特征 ID (GNS/GNIS ID)
    """
    geo_type: GeoType = GeoType.NONE
    full_name: str = ""
    country_code: str = ""
    adm1_code: str = ""
    adm2_code: str = ""
    lat: NullableFloat = NULL_FLOAT
    long: NullableFloat = NULL_FLOAT
    feature_id: str = ""

    def country_code_iso(self, table: Optional[Mapping[str, str]] = None) -> str:
        """返回 ISO 3166-1 国家代码，未知 FIPS 代码抛出 ValueError"""
        return lookup_iso_code(self.country_code, table)


@dataclass
class EventModel:
    """
    GDELT Event 表数据模型

    字段说明:
    - global_event_id: 事件唯一标识符
    - day / month_year / year / fraction_date: 事件日期的几种表示
    - actor1 / actor2: 参与者信息
    - is_root_event: 是否为文章首段事件
    - event_code: 具体 CAMEO 行为代码
    - event_base_code: 二级分类代码（一、二级事件与 event_code 相同）
    - event_root_code: 根分类代码
    - quad_class: 事件四分类
    - goldstein_scale: 事件对国家稳定性的影响分值（可为空）
    - num_mentions / num_sources / num_articles: 提及、来源、文章数量
    - avg_tone: 平均情感基调
    - actor1_geo / actor2_geo / action_geo: 地理信息
    - date_added: 加入数据库的时间（YYYYMMDDHHMMSS，UTC）
    - source_url: 发现该事件的第一个新闻链接
    - gkg_article: 关联的 GKG 文章（关联前为 None）
    """
    global_event_id: int = 0
    day: int = 0
    month_year: int = 0
    year: int = 0
    fraction_date: float = 0.0
    actor1: ActorModel = field(default_factory=ActorModel)
    actor2: ActorModel = field(default_factory=ActorModel)
    is_root_event: int = 0
    event_code: str = ""
    event_base_code: str = ""
    event_root_code: str = ""
    quad_class: int = 0
    goldstein_scale: NullableFloat = NULL_FLOAT
    num_mentions: int = 0
    num_sources: int = 0
    num_articles: int = 0
    avg_tone: float = 0.0
    actor1_geo: GeoLocationModel = field(default_factory=GeoLocationModel)
    actor2_geo: GeoLocationModel = field(default_factory=GeoLocationModel)
    action_geo: GeoLocationModel = field(default_factory=GeoLocationModel)
    date_added: int = 0
    source_url: str = ""
    gkg_article: Optional[ArticleModel] = field(default=None, repr=False)

    def date_added_time(self) -> datetime:
        """DATEADDED 转 UTC 时间，值不是 14 位或日期无效时抛出 ValueError"""
        return parse_date_added(self.date_added)

    @property
    def published_at(self) -> Optional[datetime]:
        """发布时间（date_added_time 的无异常版本）"""
        try:
            return self.date_added_time()
        except ValueError:
            return None

    def all_cameo_codes(self) -> List[str]:
        """从宽到窄的全部 CAMEO 代码"""
        return all_cameo_codes(self.event_root_code, self.event_base_code, self.event_code)


def parse_date_added(value: int) -> datetime:
    """
    解析 DATEADDED

    示例:
        20230615120000 → 2023-06-15 12:00:00+00:00
        2023061512000  → ValueError（13 位）
    """
    text = str(value)
    if len(text) != 14 or not text.isdigit():
        raise ValueError(f"unexpected DateAdded value {value}")
    return datetime.strptime(text, DATE_ADDED_FORMAT).replace(tzinfo=timezone.utc)
