"""
GDELT Event 表（export.CSV）解析模块

每行 61 列：
    0-4     GLOBALEVENTID, Day, MonthYear, Year, FractionDate
    5-14    Actor1（10 列）
    15-24   Actor2（10 列）
    25-34   IsRootEvent, EventCode, EventBaseCode, EventRootCode, QuadClass,
            GoldsteinScale, NumMentions, NumSources, NumArticles, AvgTone
    35-42   Actor1Geo（8 列）
    43-50   Actor2Geo（8 列）
    51-58   ActionGeo（8 列）
    59      DATEADDED (YYYYMMDDHHMMSS)
    60      SOURCEURL

公开方法：
    - read_events: 解析整个文件
    - parse_event_row: 解析单行
"""

from typing import IO, List, Union

from .csv_reader import expect_columns, parse_float, parse_int, parse_uint64, read_records
from .exceptions import RecordError
from .model import (
    ActorModel, EventModel, GeoLocationModel, GeoType,
    parse_date_added, parse_nullable_float
)

EVENT_COLUMNS = 61


def read_events(stream: Union[IO[bytes], IO[str]]) -> List[EventModel]:
    """解析 export.CSV 内容，无法解析的行记录警告后跳过"""
    return read_records(stream, parse_event_row, "export")


def parse_event_row(fields: List[str]) -> EventModel:
    """
    解析单行 Event 记录

    Raises:
        RecordError: 列数不是 61 或任一字段无法解析
    """
    expect_columns(fields, EVENT_COLUMNS)

    event = EventModel()
    event.global_event_id = parse_uint64(fields[0], "GlobalEventID")
    event.day = parse_int(fields[1], "Day")
    event.month_year = parse_int(fields[2], "MonthYear")
    event.year = parse_int(fields[3], "Year")
    event.fraction_date = parse_float(fields[4], "FractionDate")

    event.actor1 = _read_actor(fields[5:15])
    event.actor2 = _read_actor(fields[15:25])

    event.is_root_event = parse_int(fields[25], "IsRootEvent")
    event.event_code = fields[26]
    event.event_base_code = fields[27]
    event.event_root_code = fields[28]
    event.quad_class = parse_int(fields[29], "QuadClass")

    try:
        event.goldstein_scale = parse_nullable_float(fields[30])
    except ValueError:
        raise RecordError(f"failed to parse GoldsteinScale {fields[30]!r}")

    event.num_mentions = parse_int(fields[31], "NumMentions")
    event.num_sources = parse_int(fields[32], "NumSources")
    event.num_articles = parse_int(fields[33], "NumArticles")
    event.avg_tone = parse_float(fields[34], "AvgTone")

    event.actor1_geo = _read_geo(fields[35:43], "Actor1Geo")
    event.actor2_geo = _read_geo(fields[43:51], "Actor2Geo")
    event.action_geo = _read_geo(fields[51:59], "ActionGeo")

    event.date_added = parse_uint64(fields[59], "DATEADDED")
    if event.date_added != 0:
        try:
            parse_date_added(event.date_added)
        except ValueError:
            raise RecordError(f"failed to parse DATEADDED {fields[59]!r}")

    event.source_url = fields[60]
    return event


def _read_actor(fields: List[str]) -> ActorModel:
    return ActorModel(
        code=fields[0],
        name=fields[1],
        country_code=fields[2],
        known_group_code=fields[3],
        ethnic_code=fields[4],
        religion1_code=fields[5],
        religion2_code=fields[6],
        type1_code=fields[7],
        type2_code=fields[8],
        type3_code=fields[9],
    )


def _read_geo(fields: List[str], name: str) -> GeoLocationModel:
    """解析 8 列地理信息块：Type, FullName, CountryCode, ADM1, ADM2, Lat, Long, FeatureID"""
    try:
        geo_type = GeoType.from_int(parse_int(fields[0], "Type"))
        lat = parse_nullable_float(fields[5])
        long = parse_nullable_float(fields[6])
    except (RecordError, ValueError) as e:
        raise RecordError(f"failed to read {name}: {e}")

    return GeoLocationModel(
        geo_type=geo_type,
        full_name=fields[1],
        country_code=fields[2],
        adm1_code=fields[3],
        adm2_code=fields[4],
        lat=lat,
        long=long,
        feature_id=fields[7],
    )
