"""Detector — накопление периодов и поиск групп пересечений."""

from .coincidence_detector import (
    CoincidenceDetector,
    DetectorConfig,
)

__all__ = [
    "CoincidenceDetector",
    "DetectorConfig",
]
