"""Select the classifier backend from the application settings."""

import logging

from app.config import Settings

from .base import BaseClassifier
from .heuristic import HeuristicClassifier
from .remote import RemoteClassifier

logger = logging.getLogger(__name__)


def create_classifier(settings: Settings) -> BaseClassifier:
    backend = settings.classifier_backend
    if backend == "remote":
        logger.info("Using remote classifier at %s", settings.classifier_base_url)
        return RemoteClassifier(
            settings.classifier_base_url,
            timeout=settings.classifier_timeout_seconds,
        )
    if backend == "heuristic":
        logger.warning("Using heuristic placeholder classifier; results are not model predictions")
        return HeuristicClassifier()
    raise ValueError(f"Unknown classifier backend: {backend}")
