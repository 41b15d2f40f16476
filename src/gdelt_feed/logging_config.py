"""
日志配置
控制台彩色输出；可选按日期写文件，保留最近 N 天
"""

import glob
import logging
import os
import sys
from datetime import datetime

LOG_FILE_PREFIX = "gdelt"


class PrettyFormatter(logging.Formatter):
    """
    美化格式化器（控制台用，带颜色）
    """
    COLORS = {
        "DEBUG": "\033[36m",     # 青色
        "INFO": "\033[32m",      # 绿色
        "WARNING": "\033[33m",   # 黄色
        "ERROR": "\033[31m",     # 红色
        "CRITICAL": "\033[35m",  # 紫色
    }
    RESET = "\033[0m"

    def format(self, record: logging.LogRecord) -> str:
        color = self.COLORS.get(record.levelname, self.RESET)
        timestamp = datetime.fromtimestamp(record.created).strftime("%H:%M:%S")
        message = f"{color}{timestamp} {record.levelname:7}{self.RESET} {record.getMessage()}"
        if record.exc_info:
            message += "\n" + self.formatException(record.exc_info)
        return message


class FileFormatter(logging.Formatter):
    """
    文件格式化器

    输出示例：
    2026-01-23 11:00:00 | WARNING | ⚠️ 跳过 GDELT export 记录 [row=12]: expected 61 CSV columns, actual 60
    """
    def format(self, record: logging.LogRecord) -> str:
        timestamp = datetime.fromtimestamp(record.created).strftime("%Y-%m-%d %H:%M:%S")
        message = f"{timestamp} | {record.levelname:7} | {record.getMessage()}"
        if record.exc_info:
            message += "\n" + self.formatException(record.exc_info)
        return message


def cleanup_old_logs(log_dir: str, prefix: str, backup_count: int) -> int:
    """删除超过保留天数的旧日志，返回删除的文件数"""
    pattern = os.path.join(log_dir, f"{prefix}_*.log")
    log_files = sorted(glob.glob(pattern), reverse=True)

    removed = 0
    for old_file in log_files[backup_count:]:
        try:
            os.remove(old_file)
            removed += 1
        except OSError as e:
            logging.warning(f"⚠️ 无法删除旧日志 {old_file}: {e}")
    return removed


def setup_logging(
    level: str = "INFO",
    log_dir: str = None,
    backup_count: int = 30
):
    """
    配置日志

    Args:
        level: 日志级别
        log_dir: 日志目录（None 则只输出到控制台）
        backup_count: 保留的天数（默认30天）

    日志文件命名：
        - logs/gdelt_2026-01-23.log  (今天)
        - logs/gdelt_2026-01-22.log  (昨天)
        - ...
    """
    root_logger = logging.getLogger()
    root_logger.setLevel(getattr(logging, level.upper()))

    # 移除现有处理器
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setFormatter(PrettyFormatter())
    root_logger.addHandler(console_handler)

    if log_dir:
        os.makedirs(log_dir, exist_ok=True)

        today = datetime.now().strftime("%Y-%m-%d")
        log_file = os.path.join(log_dir, f"{LOG_FILE_PREFIX}_{today}.log")

        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setFormatter(FileFormatter())
        root_logger.addHandler(file_handler)

        cleanup_old_logs(log_dir, LOG_FILE_PREFIX, backup_count)

    # 降低第三方库的日志级别
    logging.getLogger("urllib3").setLevel(logging.WARNING)
    logging.getLogger("requests").setLevel(logging.WARNING)
