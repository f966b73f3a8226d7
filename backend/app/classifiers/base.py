from abc import ABC, abstractmethod

from app.schemas import FeatureVector, PredictionResult


class BaseClassifier(ABC):
    """
    Abstract classifier interface. All classifiers implement an async classify method.
    """

    name: str = "base"

    @abstractmethod
    async def classify(self, vector: FeatureVector) -> PredictionResult:
        raise NotImplementedError("Subclasses must implement classify()")
