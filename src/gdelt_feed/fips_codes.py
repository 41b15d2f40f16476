"""
FIPS 10-4 → ISO 3166-1 国家代码映射

GDELT 地理字段使用 FIPS 10-4 国家代码（非 ISO）:
CH=中国, JA=日本, KS=韩国, US=美国, RS=俄罗斯, UP=乌克兰, UK=英国, GM=德国

映射表作为数据文件随包发布（data/fips_to_iso.json），导入时加载一次。
需要替换映射表时（例如测试），把另一个 Mapping 传给 lookup_iso_code 即可。
"""

import json
import os
from types import MappingProxyType
from typing import Mapping, Optional

_DEFAULT_TABLE_PATH = os.path.join(os.path.dirname(__file__), "data", "fips_to_iso.json")


def load_fips_table(path: Optional[str] = None) -> Mapping[str, str]:
    """
    加载 FIPS 10-4 → ISO 3166-1 alpha-2 映射表

    Args:
        path: JSON 文件路径（None 则使用包内数据文件）

    Returns:
        只读映射
    """
    with open(path or _DEFAULT_TABLE_PATH, encoding="utf-8") as f:
        table = json.load(f)
    return MappingProxyType({str(k): str(v) for k, v in table.items()})


def lookup_iso_code(fips_code: str, table: Optional[Mapping[str, str]] = None) -> str:
    """
    FIPS 10-4 代码转 ISO 3166-1 代码

    空代码返回空字符串；未知代码抛出 ValueError。
    """
    if not fips_code:
        return ""
    if table is None:
        table = FIPS_TO_ISO
    try:
        return table[fips_code]
    except KeyError:
        raise ValueError(f"unknown FIPS 10-4 country code {fips_code!r}")


# 进程级只读映射表
FIPS_TO_ISO: Mapping[str, str] = load_fips_table()
