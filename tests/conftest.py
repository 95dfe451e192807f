from __future__ import annotations

import random
from pathlib import Path

import pytest

from game_state import GameStateMachine
from preferences import PreferenceStore


class RecordingAudio:
    """호출된 오디오 큐 이름을 순서대로 기록한다."""

    def __init__(self) -> None:
        self.calls: list[str] = []

    def flap(self) -> None:
        self.calls.append("flap")

    def point(self) -> None:
        self.calls.append("point")

    def death(self) -> None:
        self.calls.append("death")

    def start_music(self) -> None:
        self.calls.append("start_music")

    def stop_music(self) -> None:
        self.calls.append("stop_music")


@pytest.fixture
def prefs_path(tmp_path: Path) -> Path:
    return tmp_path / "state" / "prefs.json"


@pytest.fixture
def prefs(prefs_path: Path) -> PreferenceStore:
    return PreferenceStore(prefs_path)


@pytest.fixture
def audio() -> RecordingAudio:
    return RecordingAudio()


@pytest.fixture
def machine(prefs: PreferenceStore, audio: RecordingAudio) -> GameStateMachine:
    return GameStateMachine(audio=audio, prefs=prefs, rng=random.Random(1234))
