"""
Prize Wheel - 全局常量与默认值
"""

from core.i18n import t

# === 应用信息 ===
APP_VERSION = "0.1.0"
SETTINGS_FILE = "settings/wheel.json"
LOG_FILE = "prize_wheel.log"


def get_app_title():
    """返回本地化的应用标题。"""
    return t("app.title")


# === 默认设置 ===
DEFAULT_SETTINGS = {
    "language":       "en",
    "entries":        [],
    "frame_interval": 16,     # 帧间隔 (ms)，~60fps
    "surface_size":   900,    # 画布边长 (px)，需容纳 r=420 + 描边 20
}

# === 配色 ===
COLOR_BG = "#202020"          # 窗口背景：深灰，衬托白色外圈
COLOR_EDGE = "white"
COLOR_SHADOW = "black"
COLOR_PIECE_OUTLINE = "white"
COLOR_LABEL = "white"
COLOR_SHAFT_FILL = "royalblue"
COLOR_SHAFT_BORDER = "white"
COLOR_PLAY_SIGN = "white"

# 扇面颜色: HSL，色相 = 扇面角度（度）
PIECE_SATURATION = 1.0
PIECE_LIGHTNESS = 0.66

# === 轮盘外圈 ===
EDGE_RADIUS = 420
EDGE_WIDTH = 40

# 内阴影圈 (bezel)
EDGE_SHADOW_RADIUS = 400
EDGE_SHADOW_BLUR = 15
EDGE_SHADOW_OFFSET = (10, 10)

# === 扇面 ===
PIECE_RADIUS = 400
PIECE_OUTLINE_WIDTH = 20
LABEL_OFFSET_X = 100        # 沿扇面中线的文字起点 (px)
LABEL_MAX_WIDTH = 250       # 超出则水平压缩
LABEL_FONT_FAMILY = "Arial"
LABEL_FONT_PX = 50

# === 中心转轴 ===
SHAFT_RADIUS = 50           # 视觉半径 = 点击半径
SHAFT_BORDER_WIDTH = 30
PLAY_SIGN_SIDE = 30

# === 旋转物理 ===
SPIN_BASE_DELTA = 0.75      # 初始增量 = 0.75 + random() ∈ [0.75, 1.75)
SPIN_DECAY = 0.966          # 每帧增量衰减系数
SPIN_STOP_THRESHOLD = 0.005  # 增量低于此值即停止
FRAME_INTERVAL = DEFAULT_SETTINGS["frame_interval"]
