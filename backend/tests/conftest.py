"""Pytest configuration and fixtures."""
import math
import sys
from pathlib import Path
from typing import List, Optional

import pytest

# Add backend to path
backend_path = Path(__file__).parent.parent
sys.path.insert(0, str(backend_path))

from app.classifiers import BaseClassifier  # noqa: E402
from app.errors import ClassifierError  # noqa: E402
from app.samples import SAMPLE_RECORDS  # noqa: E402
from app.schemas import FeatureVector, PredictionResult  # noqa: E402


class RecordingClassifier(BaseClassifier):
    """Classifier double that records every vector it receives."""

    name = "recording"

    def __init__(
        self,
        result: Optional[PredictionResult] = None,
        error: Optional[ClassifierError] = None,
    ) -> None:
        self.result = result or PredictionResult(label="Rock", classifier=self.name, code="R")
        self.error = error
        self.calls: List[FeatureVector] = []

    async def classify(self, vector: FeatureVector) -> PredictionResult:
        self.calls.append(vector)
        if self.error is not None:
            raise self.error
        return self.result


@pytest.fixture
def recording_classifier():
    """Classifier double returning a Rock label."""
    return RecordingClassifier()


@pytest.fixture
def rock_sample():
    """The sample vector labelled Rock."""
    return next(sample for sample in SAMPLE_RECORDS if sample.label == "Rock")


@pytest.fixture
def mine_sample():
    """The sample vector labelled Mine."""
    return next(sample for sample in SAMPLE_RECORDS if sample.label == "Mine")


def spread_vector(center: float, variance: float, length: int = 60) -> List[float]:
    """Alternate center +/- sqrt(variance) so mean and population variance are exact."""
    offset = math.sqrt(variance)
    return [center + offset if index % 2 == 0 else center - offset for index in range(length)]


@pytest.fixture(name="spread_vector")
def spread_vector_fixture():
    """Factory for vectors with a chosen mean and variance."""
    return spread_vector
