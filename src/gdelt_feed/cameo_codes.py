"""
GDELT CAMEO (Conflict and Mediation Event Observations) 编码工具

CAMEO 是一个三级分类体系：
- EventRootCode: 根类别（20 类，如 "02" 呼吁）
- EventBaseCode: 二级类别（如 "025" 呼吁让步）
- EventCode: 具体行为（如 "0251" 呼吁放宽行政制裁）

对于二级或一级事件，GDELT 会把较窄的代码填成与较宽代码相同的值。
注意：所有代码都按字符串处理，以保留前导零
"""

from typing import Dict, List, Tuple

# ============================================================================
# QuadClass - 事件性质（4个基本象限）
# ============================================================================

QUAD_CLASS_MAP: Dict[int, Tuple[str, str]] = {
    1: ("口头合作", "Verbal Cooperation"),
    2: ("物质合作", "Material Cooperation"),
    3: ("口头冲突", "Verbal Conflict"),
    4: ("物质冲突", "Material Conflict"),
}


def get_quad_class_name(quad_class: int, lang: str = "zh") -> str:
    """获取 QuadClass 名称"""
    if quad_class not in QUAD_CLASS_MAP:
        return "未知"
    return QUAD_CLASS_MAP[quad_class][0 if lang == "zh" else 1]


# ============================================================================
# EventRootCode - 根类别
# 格式: {code: (中文名, 英文名)}
# ============================================================================

EVENT_ROOT_CODE_MAP: Dict[str, Tuple[str, str]] = {
    "01": ("发表声明", "Make public statement"),
    "02": ("呼吁", "Appeal"),
    "03": ("表达合作意向", "Express intent to cooperate"),
    "04": ("磋商", "Consult"),
    "05": ("外交合作", "Engage in diplomatic cooperation"),
    "06": ("物质合作", "Engage in material cooperation"),
    "07": ("提供援助", "Provide aid"),
    "08": ("让步", "Yield"),
    "09": ("调查", "Investigate"),
    "10": ("要求", "Demand"),
    "11": ("反对", "Disapprove"),
    "12": ("拒绝", "Reject"),
    "13": ("威胁", "Threaten"),
    "14": ("抗议", "Protest"),
    "15": ("展示武力", "Exhibit military posture"),
    "16": ("降低关系", "Reduce relations"),
    "17": ("施加强制", "Coerce"),
    "18": ("攻击", "Assault"),
    "19": ("战斗", "Fight"),
    "20": ("大规模暴力", "Engage in unconventional mass violence"),
}

# 默认只保留冲突类事件：威胁、抗议、展示武力、强制、攻击、战斗、大规模暴力
DEFAULT_ALLOWED_ROOT_CODES: List[str] = ["13", "14", "15", "17", "18", "19", "20"]


def get_event_root_name(root_code: str, lang: str = "zh") -> str:
    """获取 EventRootCode 名称"""
    root_code = str(root_code).zfill(2)
    if root_code not in EVENT_ROOT_CODE_MAP:
        return "未知"
    return EVENT_ROOT_CODE_MAP[root_code][0 if lang == "zh" else 1]


def all_cameo_codes(root_code: str, base_code: str, event_code: str) -> List[str]:
    """
    按从宽到窄的顺序返回事件的全部 CAMEO 代码，每一级只保留一个

    较窄代码为空或与上一级相同时立即停止。

    示例:
        all_cameo_codes("02", "02", "02")     → ["02"]
        all_cameo_codes("02", "025", "0251")  → ["02", "025", "0251"]
        all_cameo_codes("", "", "")           → []
    """
    codes: List[str] = []
    if not root_code:
        return codes
    codes.append(root_code)
    if not base_code or base_code == root_code:
        return codes
    codes.append(base_code)
    if not event_code or event_code == base_code or event_code == root_code:
        return codes
    codes.append(event_code)
    return codes
