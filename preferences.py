"""최고 점수와 스킨 선택을 JSON 파일 하나에 저장한다(FLAPPY_STATE_DIR/prefs.json)."""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterable, Optional

from settings import PREFS_FILE_NAME, get_state_dir

logger = logging.getLogger(__name__)

DEFAULT_SKIN_ID = 0


@dataclass
class Preferences:
    high_score: int = 0
    unlocked_ids: set[int] = field(default_factory=lambda: {DEFAULT_SKIN_ID})
    selected_id: int = DEFAULT_SKIN_ID


def _parse_cosmetics(raw: object) -> tuple[set[int], int]:
    unlocked = {DEFAULT_SKIN_ID}
    selected = DEFAULT_SKIN_ID
    if not isinstance(raw, dict):
        return unlocked, selected
    ids = raw.get("unlockedIds")
    if isinstance(ids, list):
        unlocked.update(i for i in ids if isinstance(i, int) and not isinstance(i, bool) and i >= 0)
    sel = raw.get("selectedId")
    if isinstance(sel, int) and not isinstance(sel, bool) and sel in unlocked:
        selected = sel
    return unlocked, selected


class PreferenceStore:
    """읽기는 시작 시 1회, 쓰기는 값이 바뀔 때마다 동기로. 실패해도 게임은 계속된다."""

    def __init__(self, path: Optional[Path] = None) -> None:
        self.path = path or (get_state_dir() / PREFS_FILE_NAME)
        self._data: dict = {}

    def load(self) -> Preferences:
        try:
            if not self.path.exists():
                return Preferences()
            payload = json.loads(self.path.read_text(encoding="utf-8"))
        except (OSError, ValueError) as e:
            logger.warning("preferences unreadable (%s), using defaults: %s", self.path, e)
            return Preferences()
        if not isinstance(payload, dict):
            logger.warning("preferences file %s is not an object, using defaults", self.path)
            return Preferences()

        self._data = payload
        high = payload.get("highScore", 0)
        if not isinstance(high, int) or isinstance(high, bool) or high < 0:
            high = 0
        unlocked, selected = _parse_cosmetics(payload.get("cosmetics"))
        return Preferences(high_score=high, unlocked_ids=unlocked, selected_id=selected)

    def save_high_score(self, score: int) -> None:
        self._data["highScore"] = int(score)
        self._write()

    def save_cosmetics(self, unlocked_ids: Iterable[int], selected_id: int) -> None:
        self._data["cosmetics"] = {"unlockedIds": sorted(set(unlocked_ids)), "selectedId": int(selected_id)}
        self._write()

    def _write(self) -> None:
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            self.path.write_text(json.dumps(self._data, indent=2), encoding="utf-8")
        except OSError as e:
            # 저장 실패는 치명적이지 않다: 이번 세션은 메모리 값으로 계속
            logger.warning("could not persist preferences to %s: %s", self.path, e)
