from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Iterable, List, Optional, Tuple

from path_utils import skin_frame_paths
from preferences import DEFAULT_SKIN_ID, PreferenceStore
from settings import FRAME_DIR

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CosmeticSkin:
    """상점에 노출되는 새 스킨 하나."""

    id: int
    display_name: str
    unlock_cost: int
    frames: Tuple[Path, ...]
    # 프레임 이미지가 없을 때 도형으로 그릴 색
    color: Tuple[int, int, int]


def default_catalog(frame_dir: Path = FRAME_DIR) -> List[CosmeticSkin]:
    return [
        CosmeticSkin(0, "Yellow", 0, tuple(skin_frame_paths(frame_dir, range(1, 9))), (255, 220, 60)),
        CosmeticSkin(1, "Red", 20, tuple(skin_frame_paths(frame_dir, range(9, 17))), (235, 80, 70)),
        CosmeticSkin(2, "Blue", 40, tuple(skin_frame_paths(frame_dir, range(17, 25))), (80, 150, 240)),
    ]


class SelectResult(Enum):
    SELECTED = "selected"
    PURCHASED = "purchased"
    REJECTED = "rejected"


class CosmeticStore:
    def __init__(
        self,
        store: PreferenceStore,
        *,
        catalog: Optional[List[CosmeticSkin]] = None,
        unlocked_ids: Iterable[int] = (DEFAULT_SKIN_ID,),
        selected_id: int = DEFAULT_SKIN_ID,
    ) -> None:
        self.store = store
        self._catalog = list(catalog) if catalog is not None else default_catalog()
        known = {skin.id for skin in self._catalog}
        # 카탈로그에 없는 id는 버리고, 기본 스킨은 항상 보유
        self.unlocked_ids: set[int] = {i for i in unlocked_ids if i in known} | {DEFAULT_SKIN_ID}
        self.selected_id = selected_id if selected_id in self.unlocked_ids else DEFAULT_SKIN_ID

    def catalog(self) -> List[CosmeticSkin]:
        return list(self._catalog)

    def get(self, skin_id: int) -> Optional[CosmeticSkin]:
        return next((s for s in self._catalog if s.id == skin_id), None)

    @property
    def selected(self) -> CosmeticSkin:
        skin = self.get(self.selected_id)
        assert skin is not None
        return skin

    def attempt_select(self, skin_id: int, score: int) -> SelectResult:
        """보유 중이면 선택, 아니면 score로 살 수 있을 때만 해금+선택. 못 사면 아무 일도 없다."""
        skin = self.get(skin_id)
        if skin is None:
            return SelectResult.REJECTED

        if skin_id in self.unlocked_ids:
            self.selected_id = skin_id
            self.store.save_cosmetics(self.unlocked_ids, self.selected_id)
            return SelectResult.SELECTED

        if score < skin.unlock_cost:
            logger.debug("skin %s needs %d, have %d", skin.display_name, skin.unlock_cost, score)
            return SelectResult.REJECTED

        self.unlocked_ids = self.unlocked_ids | {skin_id}
        self.selected_id = skin_id
        self.store.save_cosmetics(self.unlocked_ids, self.selected_id)
        return SelectResult.PURCHASED
