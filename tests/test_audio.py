from __future__ import annotations

import logging
from pathlib import Path

from audio import AudioCues, SilentAudio


def test_missing_sound_files_play_silently(tmp_path: Path, caplog) -> None:
    cues = AudioCues(
        flap_file=tmp_path / "flap.mp3",
        point_file=tmp_path / "point.mp3",
        death_file=tmp_path / "death.mp3",
        bgm_file=tmp_path / "bgm.mp3",
    )

    with caplog.at_level(logging.WARNING, logger="audio"):
        cues.flap()
        cues.flap()
        cues.point()
        cues.death()
        cues.start_music()
        cues.stop_music()

    # 없는 파일은 한 번만 경고한다
    assert caplog.text.count("flap.mp3") == 1


def test_silent_audio_accepts_every_cue() -> None:
    audio = SilentAudio()
    for name in ("flap", "point", "death", "start_music", "stop_music"):
        getattr(audio, name)()
