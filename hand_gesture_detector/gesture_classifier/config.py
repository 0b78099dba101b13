"""
Threshold table and limits for the skin-ratio classifier.
"""

from dataclasses import dataclass
from typing import Optional, Tuple

from .types import OPEN_PALM, FIST, POINTING, PEACE_SIGN, THUMBS_UP


@dataclass(frozen=True)
class ThresholdRule:
    """
    A gesture candidate scored on the skin ratio.

    Both bounds are strict; None leaves that side open.
    """

    label: str
    lower: Optional[float]
    upper: Optional[float]
    score: int

    def matches(self, skin_ratio: float) -> bool:
        if self.lower is not None and not skin_ratio > self.lower:
            return False
        if self.upper is not None and not skin_ratio < self.upper:
            return False
        return True

    def score_for(self, skin_ratio: float) -> int:
        return self.score if self.matches(skin_ratio) else 0


# Order matters: earlier rules win ties.
DEFAULT_THRESHOLDS: Tuple[ThresholdRule, ...] = (
    ThresholdRule(OPEN_PALM, lower=0.15, upper=None, score=85),
    ThresholdRule(FIST, lower=0.05, upper=0.10, score=75),
    ThresholdRule(POINTING, lower=0.04, upper=0.08, score=70),
    ThresholdRule(PEACE_SIGN, lower=0.09, upper=0.13, score=65),
    ThresholdRule(THUMBS_UP, lower=0.06, upper=0.09, score=60),
)


@dataclass(frozen=True)
class ClassifierConfig:
    """Fixed decision parameters of the gesture classifier."""

    no_hand_ratio: float = 0.05  # Below this ratio no hand is reported
    min_gesture_score: int = 50  # Winning score must exceed this
    thresholds: Tuple[ThresholdRule, ...] = DEFAULT_THRESHOLDS

    def __post_init__(self):
        if not 0.0 <= self.no_hand_ratio <= 1.0:
            raise ValueError("no_hand_ratio must be in [0, 1]")
        if not 0 <= self.min_gesture_score <= 100:
            raise ValueError("min_gesture_score must be in [0, 100]")
        if not self.thresholds:
            raise ValueError("thresholds must not be empty")
        for rule in self.thresholds:
            if not 0 <= rule.score <= 100:
                raise ValueError(f"score for {rule.label!r} must be in [0, 100]")
        # Accept lists but store an immutable tuple
        object.__setattr__(self, "thresholds", tuple(self.thresholds))
