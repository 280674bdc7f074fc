"""
Prize Wheel - 配置管理器

负责设置文件 (settings/wheel.json) 的加载，以及条目列表的解析。
缺失或损坏的设置文件一律回退到默认值，不会中断启动。
"""

import json
import os
import copy
import logging

from .constants import SETTINGS_FILE, DEFAULT_SETTINGS
from models.wheel_model import Entry

logger = logging.getLogger(__name__)


def load_settings(path: str = SETTINGS_FILE) -> dict:
    """加载设置。不存在则返回默认值；未知字段忽略。"""
    result = copy.deepcopy(DEFAULT_SETTINGS)
    if not os.path.exists(path):
        return result
    try:
        with open(path, 'r', encoding='utf-8') as f:
            data = json.load(f)
        if not isinstance(data, dict):
            raise ValueError(f"顶层必须是对象，实际为 {type(data).__name__}")
        for k in DEFAULT_SETTINGS:
            if k in data:
                result[k] = data[k]
        logger.info(f"设置加载成功: {path}")
    except (OSError, ValueError) as e:
        logger.error(f"设置加载失败: {e}")
    return result


def parse_entries(raw) -> list:
    """将设置/命令行中的条目转换为 Entry 列表。

    接受字符串或 {"label": ...} 字典；其他类型跳过并记录警告。
    raw 为 None 时返回空列表。
    """
    entries = []
    for item in raw or []:
        if isinstance(item, Entry):
            entries.append(item)
        elif isinstance(item, str):
            entries.append(Entry(label=item))
        elif isinstance(item, dict):
            entry = Entry.from_dict(item)
            entries.append(Entry(label=str(entry.label)))
        else:
            logger.warning(f"忽略无效条目: {item!r}")
    return entries
