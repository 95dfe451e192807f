from __future__ import annotations

import logging
import os
from pathlib import Path

from path_utils import get_base_path

# =========================
# 화면
# =========================
SCREEN_WIDTH = 400
SCREEN_HEIGHT = 600
FPS = 60
# 물리 스텝은 렌더 FPS와 별개로 고정 60Hz
SIM_STEP_MS = 1000.0 / 60.0
MAX_STEPS_PER_FRAME = 5

# =========================
# 새 / 물리 (px/step 단위)
# =========================
BIRD_X = 80
BIRD_SIZE = 32
GRAVITY = 0.18
INITIAL_GRAVITY = 0.08  # 시작 직후엔 훨씬 천천히 떨어진다
INITIAL_GRAVITY_DURATION = 60  # steps (~1s)
FLAP = -5.0
AUTO_FLAP_RATIO = 0.7
AUTO_FLAP_INTERVAL = 18  # 스페이스를 누르고 있을 때 자동 날갯짓 간격
BIRD_ANIM_SPEED = 5  # 작을수록 빠름

# =========================
# 파이프
# =========================
PIPE_WIDTH = 60
PIPE_GAP = 180
PIPE_SPEED = 1.2
PIPE_SPACING = 200
PIPE_COUNT = 3
PIPE_FIRST_X = 400
GAP_TOP_MIN = 50
GAP_RANGE_MARGIN = 100

# =========================
# 일시정지 카운트다운 (벽시계 기준)
# =========================
COUNTDOWN_START = 3
COUNTDOWN_STEP_MS = 1000

# =========================
# 경로 / 환경변수
# =========================
ASSET_DIR = get_base_path() / "assets"
FRAME_DIR = ASSET_DIR / "frames"
MUSIC_DIR = ASSET_DIR / "music"
BGM_FILE = MUSIC_DIR / "bg_music.mp3"
FLAP_SFX_FILE = MUSIC_DIR / "flap_sound.mp3"
POINT_SFX_FILE = MUSIC_DIR / "cross_pipe.mp3"
DEATH_SFX_FILE = MUSIC_DIR / "death.mp3"

PREFS_FILE_NAME = "prefs.json"

FONT_CANDIDATES = [
    "Pretendard",
    "Apple SD Gothic Neo",
    "Malgun Gothic",
    "NanumGothic",
    "Noto Sans CJK KR",
    "Arial Unicode MS",
]


def get_state_dir() -> Path:
    """최고 점수/스킨 정보를 저장할 디렉토리. `FLAPPY_STATE_DIR`로 덮어쓸 수 있다."""
    override = os.getenv("FLAPPY_STATE_DIR", "").strip()
    if override:
        return Path(override)
    return Path.home() / ".flappy_arcade"


def is_muted() -> bool:
    return os.getenv("FLAPPY_MUTE", "").strip().lower() in ("1", "true", "yes", "on")


def get_log_level() -> int:
    """`FLAPPY_LOG_LEVEL` 이름을 로깅 레벨로. 모르는 이름이면 WARNING."""
    level = logging.getLevelName(os.getenv("FLAPPY_LOG_LEVEL", "WARNING").strip().upper())
    return level if isinstance(level, int) else logging.WARNING
