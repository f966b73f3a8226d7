"""Local stand-in classifier used when no model endpoint is available.

The rule below has no predictive value. It exists so the UI can be exercised
offline, and every result it produces is flagged as a placeholder.
"""

from __future__ import annotations

import random
from statistics import mean, pvariance
from typing import Optional

from app.schemas import FeatureVector, PredictionResult

from .base import BaseClassifier

MEAN_THRESHOLD = 0.15
VARIANCE_THRESHOLD = 0.05
CONFIDENCE_RANGE = (0.70, 1.00)


class HeuristicClassifier(BaseClassifier):
    """Label a vector "Mine" when both its mean and variance are high."""

    name = "heuristic"

    def __init__(self, rng: Optional[random.Random] = None) -> None:
        self._rng = rng or random.Random()

    @staticmethod
    def summarize(vector: FeatureVector) -> tuple[float, float]:
        """Return the mean and population variance of the vector."""
        values = vector.values
        return mean(values), pvariance(values)

    async def classify(self, vector: FeatureVector) -> PredictionResult:
        avg, variance = self.summarize(vector)
        is_mine = avg > MEAN_THRESHOLD and variance > VARIANCE_THRESHOLD
        low, high = CONFIDENCE_RANGE
        return PredictionResult(
            label="Mine" if is_mine else "Rock",
            confidence=self._rng.uniform(low, high),
            classifier=self.name,
            code="M" if is_mine else "R",
            placeholder=True,
        )
