"""Base classes and interfaces for parsers."""

from abc import ABC, abstractmethod

from app.schemas import FeatureVector


class BaseParser(ABC):
    """Abstract base class for feature parsers."""

    @abstractmethod
    def parse(self, source: str) -> FeatureVector:
        """Parse the provided source and return a validated feature vector."""
        raise NotImplementedError
