"""
GDELT GKG 表数据模型
GKG 表（叙事与语境层）：这里只保留关联事件所需的文章元数据
"""

from dataclasses import dataclass, field


@dataclass
class ArticleExtras:
    """
    Extras 列中提取的信息

    字段说明:
    - page_title: 网页标题（来自 <PAGE_TITLE>，可能为空）
    """
    page_title: str = ""


@dataclass
class ArticleModel:
    """
    GDELT GKG 文章数据模型

    字段说明:
    - id: GKG 记录唯一标识符 (GKGRECORDID)
    - document_identifier: 文章 URL，关联 Event 的 SOURCEURL
    - sharing_image: 分享图片 URL
    - extras: Extras 列解析结果
    """
    id: str = ""
    document_identifier: str = ""
    sharing_image: str = ""
    extras: ArticleExtras = field(default_factory=ArticleExtras)
