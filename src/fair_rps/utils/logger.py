"""
日志工具模块
Logger Utility Module
"""
import logging
import sys
from pathlib import Path
from typing import Optional, Dict, Any

BASE_LOGGER_NAME = "FairRPS"
DEFAULT_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'


def get_log_level(level_str: str) -> int:
    """
    从字符串获取日志级别

    Args:
        level_str: 日志级别字符串（DEBUG, INFO, WARNING, ERROR, CRITICAL）

    Returns:
        int: 日志级别
    """
    level_map = {
        'DEBUG': logging.DEBUG,
        'INFO': logging.INFO,
        'WARNING': logging.WARNING,
        'ERROR': logging.ERROR,
        'CRITICAL': logging.CRITICAL
    }
    return level_map.get(str(level_str).upper(), logging.INFO)


def setup_logger(
    name: str = BASE_LOGGER_NAME,
    log_file: Optional[str] = None,
    level: int = logging.WARNING,
    format_string: Optional[str] = None
) -> logging.Logger:
    """
    设置日志记录器

    子记录器（FairRPS.xxx）不挂处理器，日志向上传递给 FairRPS，
    这样级别和输出只需在一处配置。

    Args:
        name: 日志记录器名称
        log_file: 日志文件路径（可选）
        level: 日志级别
        format_string: 日志格式字符串（可选）

    Returns:
        logging.Logger: 配置好的日志记录器
    """
    logger = logging.getLogger(name)

    if name.startswith(BASE_LOGGER_NAME + "."):
        return logger

    logger.setLevel(level)

    # 避免重复添加处理器
    if logger.handlers:
        return logger

    formatter = logging.Formatter(format_string or DEFAULT_FORMAT)

    # 控制台处理器（stderr，不与游戏输出混在一起）
    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(level)
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    # 文件处理器（如果指定）
    if log_file:
        log_path = Path(log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_file, encoding='utf-8')
        file_handler.setLevel(level)
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    return logger


def setup_logger_from_config(config: Dict[str, Any], name: str = BASE_LOGGER_NAME) -> logging.Logger:
    """
    从配置字典设置日志记录器

    已存在的处理器会被替换，以便命令行或配置文件覆盖默认级别。

    Args:
        config: 配置字典（包含level、file和format键）
        name: 日志记录器名称

    Returns:
        logging.Logger: 配置好的日志记录器
    """
    level = get_log_level(config.get('level', 'WARNING'))
    log_file = config.get('file')
    format_string = config.get('format')

    logger = logging.getLogger(name)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    return setup_logger(name=name, log_file=log_file, level=level,
                        format_string=format_string)


# 默认日志记录器
default_logger = setup_logger()
