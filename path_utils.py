"""
PyInstaller 빌드 환경에서도 에셋 경로를 올바르게 찾기 위한 유틸리티
"""
import sys
from pathlib import Path


def get_base_path() -> Path:
    """
    에셋(frames/, music/)을 찾을 기준 경로를 반환합니다.
    PyInstaller로 묶인 경우 압축이 풀린 sys._MEIPASS를,
    그렇지 않으면 이 파일이 있는 프로젝트 루트를 사용합니다.
    """
    if getattr(sys, "frozen", False):
        return Path(sys._MEIPASS)
    return Path(__file__).resolve().parent


def skin_frame_paths(frame_dir: Path, frame_numbers: range) -> list[Path]:
    """스킨 애니메이션 프레임(frame-N.png) 경로 목록."""
    return [frame_dir / f"frame-{n}.png" for n in frame_numbers]
