"""
Prize Wheel (PyQt6) - Entry Point
"""

import sys
import os
import argparse
import logging
import random

# 确保工作目录为脚本/EXE 所在目录（无论从哪里启动）
if getattr(sys, 'frozen', False):
    os.chdir(os.path.dirname(sys.executable))
else:
    os.chdir(os.path.dirname(os.path.abspath(__file__)))

from core.constants import LOG_FILE, SETTINGS_FILE

# 配置日志
logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
    filename=LOG_FILE,
    filemode='w'
)
logger = logging.getLogger(__name__)

from core.i18n import available_locales, get_lang, load_locale, t
from core.config_manager import load_settings, parse_entries


def _parse_args(argv=None):
    parser = argparse.ArgumentParser(description=t('cli.description'))
    parser.add_argument('labels', nargs='*', help=t('cli.labels'))
    parser.add_argument('--settings', default=SETTINGS_FILE, help=t('cli.settings'))
    parser.add_argument('--lang', default=None,
                        help=t('cli.lang', langs=', '.join(available_locales())))
    parser.add_argument('--seed', type=int, default=None, help=t('cli.seed'))
    return parser.parse_args(argv)


def main(argv=None):
    # 先按默认语言加载，帮助文本可翻译；读取设置后再切换
    load_locale('en')
    args = _parse_args(argv)
    settings = load_settings(args.settings)
    load_locale(args.lang or settings['language'])
    logger.info(f"界面语言: {get_lang()}")

    entries = parse_entries(args.labels or settings['entries'])

    from PyQt6.QtWidgets import QApplication
    from scene.wheel_surface import SurfaceUnavailableError
    from views.wheel_window import WheelWindow

    app = QApplication(sys.argv)
    app.setApplicationName(t('app.title'))

    try:
        window = WheelWindow(
            entries=entries,
            surface_size=settings['surface_size'],
            frame_interval=settings['frame_interval'],
            rng=random.Random(args.seed),
        )
    except SurfaceUnavailableError as e:
        logger.critical(f"绘图表面不可用: {e}", exc_info=True)
        print(t('app.error_msg', error=str(e)), file=sys.stderr)
        return 1

    window.show()
    return app.exec()


if __name__ == "__main__":
    sys.exit(main())
