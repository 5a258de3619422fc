"""Detector package for Vulngate."""

from .base import Detector
from .engine import detect, scan_file
from .rules import DETECTOR_CLASSES, build_detectors

__all__ = ["DETECTOR_CLASSES", "Detector", "build_detectors", "detect", "scan_file"]
