"""Parser utilities for converting raw form input into feature vectors."""

from .base import BaseParser
from .feature_parser import FeatureParser

__all__ = ["BaseParser", "FeatureParser"]
