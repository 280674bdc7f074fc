"""
Prize Wheel i18n

语言包位于 locales/<lang>.json，嵌套键按 "a.b" 访问:
    load_locale("zh-CN")
    t("app.surface_error", width=0, height=0)

找不到请求的语言时回退到 en，get_lang() 返回实际生效的语言。
"""

import json
import os
import sys
import logging

logger = logging.getLogger(__name__)

FALLBACK_LANG = "en"

if getattr(sys, 'frozen', False):
    LOCALES_DIR = os.path.join(os.path.dirname(sys.executable), "locales")
else:
    LOCALES_DIR = os.path.join(
        os.path.dirname(os.path.dirname(os.path.abspath(__file__))), "locales")

_catalog = {}
_active = FALLBACK_LANG


def _walk(node, prefix=""):
    for key, value in node.items():
        path = f"{prefix}.{key}" if prefix else key
        if isinstance(value, dict):
            yield from _walk(value, path)
        else:
            yield path, value


def available_locales(locales_dir=LOCALES_DIR) -> list:
    """列出目录中可用的语言代码（按名称排序）"""
    try:
        names = os.listdir(locales_dir)
    except OSError:
        return []
    return sorted(name[:-5] for name in names if name.endswith(".json"))


def load_locale(lang=FALLBACK_LANG, locales_dir=LOCALES_DIR) -> str:
    """切换语言包，返回实际加载的语言代码"""
    global _catalog, _active
    if lang not in available_locales(locales_dir):
        logger.warning(f"未找到语言包 {lang!r}，回退到 {FALLBACK_LANG}")
        lang = FALLBACK_LANG

    path = os.path.join(locales_dir, f"{lang}.json")
    try:
        with open(path, "r", encoding="utf-8") as f:
            _catalog = dict(_walk(json.load(f)))
    except (OSError, ValueError) as e:
        logger.error(f"语言包加载失败 {path}: {e}")
        _catalog = {}
    _active = lang
    logger.info(f"语言包: {lang} ({len(_catalog)} 条)")
    return lang


def get_lang() -> str:
    return _active


def t(msg_id, **kwargs):
    """翻译；缺失的键原样返回，占位符不匹配时返回未格式化文本"""
    text = _catalog.get(msg_id, msg_id)
    if kwargs:
        try:
            text = text.format(**kwargs)
        except (KeyError, IndexError, ValueError):
            pass
    return text
