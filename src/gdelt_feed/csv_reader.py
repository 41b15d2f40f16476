"""
GDELT 制表符分隔文件读取工具

export.CSV 和 gkg.csv 都没有表头、以 \\t 分隔。
引号按宽松规则处理：单行格式错误只跳过该行，不中断整个文件。
"""

import csv
import io
import logging
import re
from typing import IO, Callable, Iterator, List, Tuple, TypeVar, Union

from .exceptions import RecordError

# GKG 的 V2 字段可能非常大
csv.field_size_limit(2 ** 31 - 1)

T = TypeVar("T")

_INT_RE = re.compile(r"[+-]?[0-9]+")
_UINT_RE = re.compile(r"[0-9]+")
_UINT64_MAX = 2 ** 64 - 1


def _as_text(stream: Union[IO[bytes], IO[str]]) -> IO[str]:
    if isinstance(stream, io.TextIOBase):
        return stream
    return io.TextIOWrapper(stream, encoding="utf-8", errors="replace", newline="\n")


def split_line(line: str) -> List[str]:
    """把一行物理文本拆成字段；未闭合的引号不会跨行"""
    for fields in csv.reader([line], delimiter="\t", strict=False):
        return fields
    return []


def iter_rows(stream: Union[IO[bytes], IO[str]]) -> Iterator[Tuple[int, List[str]]]:
    """
    逐行读取制表符分隔记录，返回 (行号, 字段列表)

    每条记录就是一行物理文本，格式错误只影响该行；空行直接跳过。
    无法拆分的行（csv.Error）记录警告后跳过。
    """
    for row_index, line in enumerate(_as_text(stream)):
        line = line.rstrip("\r\n")
        if not line:
            continue
        try:
            fields = split_line(line)
        except csv.Error as e:
            logging.warning(f"⚠️ 跳过无法读取的 CSV 行 [row={row_index}]: {e}")
            continue
        yield row_index, fields


def read_records(stream: Union[IO[bytes], IO[str]],
                 parse_row: Callable[[List[str]], T],
                 label: str) -> List[T]:
    """
    读取整个文件并逐行转换为模型对象

    Args:
        stream: 解压后的文件内容（字节流或文本流）
        parse_row: 单行解析函数，失败时抛出 RecordError
        label: 日志中使用的文件类型名称

    Returns:
        成功解析的记录列表（保持文件中的顺序）
    """
    records: List[T] = []
    skipped = 0
    for row_index, fields in iter_rows(stream):
        try:
            records.append(parse_row(fields))
        except RecordError as e:
            skipped += 1
            logging.warning(f"⚠️ 跳过 GDELT {label} 记录 [row={row_index}]: {e}")
    logging.info(f"✓ GDELT {label} 解析完成: {len(records)} 条（跳过 {skipped} 条）")
    return records


def expect_columns(fields: List[str], count: int):
    if len(fields) != count:
        raise RecordError(f"expected {count} CSV columns, actual {len(fields)}")


def parse_int(text: str, name: str) -> int:
    if not _INT_RE.fullmatch(text):
        raise RecordError(f"failed to parse {name} {text!r}")
    return int(text)


def parse_uint64(text: str, name: str) -> int:
    if not _UINT_RE.fullmatch(text) or int(text) > _UINT64_MAX:
        raise RecordError(f"failed to parse {name} {text!r}")
    return int(text)


def parse_float(text: str, name: str) -> float:
    if not text or text != text.strip() or "_" in text:
        raise RecordError(f"failed to parse {name} {text!r}")
    try:
        return float(text)
    except ValueError:
        raise RecordError(f"failed to parse {name} {text!r}")
