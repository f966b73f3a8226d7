"""Classifier backends mapping feature vectors to Mine/Rock labels."""

from .base import BaseClassifier
from .factory import create_classifier
from .heuristic import HeuristicClassifier
from .remote import RemoteClassifier

__all__ = ["BaseClassifier", "HeuristicClassifier", "RemoteClassifier", "create_classifier"]
