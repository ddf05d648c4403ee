"""Configuration helpers for lineup slots and verdict thresholds."""

from .slots import SLOT_ORDER, SlotRequirements
from .thresholds import Thresholds

__all__ = [
    "SLOT_ORDER",
    "SlotRequirements",
    "Thresholds",
]
