"""
lastupdate 清单数据模型
每次轮询的清单列出三个压缩包：export、mentions、gkg
"""

from dataclasses import dataclass, field


@dataclass(frozen=True)
class FileReference:
    """
    清单中的单个文件引用

    字段说明:
    - size: 压缩包字节数
    - md5sum: MD5 十六进制字符串
    - url: 下载地址
    """
    size: int = 0
    md5sum: str = ""
    url: str = ""


@dataclass
class Manifest:
    """一次轮询的三个文件引用（mentions 会被解析但目前不使用）"""
    export: FileReference = field(default_factory=FileReference)
    mentions: FileReference = field(default_factory=FileReference)
    gkg: FileReference = field(default_factory=FileReference)
