from __future__ import annotations

import logging
from pathlib import Path
from typing import Dict, Optional

import pygame

from settings import BGM_FILE, DEATH_SFX_FILE, FLAP_SFX_FILE, POINT_SFX_FILE

logger = logging.getLogger(__name__)


class SilentAudio:
    """소리를 내지 않는 오디오. 테스트나 FLAPPY_MUTE=1일 때 사용."""

    def flap(self) -> None:
        pass

    def point(self) -> None:
        pass

    def death(self) -> None:
        pass

    def start_music(self) -> None:
        pass

    def stop_music(self) -> None:
        pass


class AudioCues:
    """pygame.mixer 기반 효과음 3종 + 배경음 루프.

    파일이 없거나 오디오 장치가 없어도 조용히 무음으로 동작한다(게임은 계속 실행).
    """

    def __init__(
        self,
        *,
        flap_file: Path = FLAP_SFX_FILE,
        point_file: Path = POINT_SFX_FILE,
        death_file: Path = DEATH_SFX_FILE,
        bgm_file: Path = BGM_FILE,
        bgm_volume: float = 0.5,
    ) -> None:
        self._files = {"flap": flap_file, "point": point_file, "death": death_file}
        self._sounds: Dict[str, Optional[pygame.mixer.Sound]] = {}
        self.bgm_file = bgm_file
        self.bgm_volume = bgm_volume

    def _ensure_mixer(self) -> bool:
        try:
            if pygame.mixer.get_init() is None:
                pygame.mixer.init()
            return True
        except pygame.error as e:
            logger.warning("audio device unavailable: %s", e)
            return False

    def _load(self, key: str) -> Optional[pygame.mixer.Sound]:
        # 한 번 실패한 효과음은 None으로 캐시해서 다시 시도하지 않는다
        if key in self._sounds:
            return self._sounds[key]
        path = self._files[key]
        sound: Optional[pygame.mixer.Sound] = None
        if not path.exists():
            logger.warning("missing sound asset: %s", path)
        elif self._ensure_mixer():
            try:
                sound = pygame.mixer.Sound(path.as_posix())
            except Exception as e:
                logger.warning("could not load sound %s: %s", path, e)
        self._sounds[key] = sound
        return sound

    def _play(self, key: str) -> None:
        sound = self._load(key)
        if sound is None:
            return
        try:
            sound.stop()  # 처음부터 다시 재생
            sound.play()
        except Exception as e:
            logger.debug("sound %s failed to play: %s", key, e)

    def flap(self) -> None:
        self._play("flap")

    def point(self) -> None:
        self._play("point")

    def death(self) -> None:
        self._play("death")

    def start_music(self) -> None:
        """배경음을 처음부터 루프 재생한다."""
        if not self.bgm_file.exists():
            return
        if not self._ensure_mixer():
            return
        try:
            pygame.mixer.music.load(self.bgm_file.as_posix())
            pygame.mixer.music.set_volume(self.bgm_volume)
            pygame.mixer.music.play(-1)
        except Exception as e:
            logger.warning("background music failed: %s", e)

    def stop_music(self) -> None:
        if pygame.mixer.get_init() is None:
            return
        try:
            pygame.mixer.music.stop()
        except Exception as e:
            logger.debug("stopping music failed: %s", e)
