# -*- coding: utf-8 -*-
"""Client for the hosted sonar model (``POST /predict``)."""

from __future__ import annotations

import logging
from typing import Any, Optional

import httpx

from app.errors import NetworkError, ResponseError
from app.schemas import FeatureVector, PredictionResult

from .base import BaseClassifier

logger = logging.getLogger(__name__)

MINE_CODE = "M"


class RemoteClassifier(BaseClassifier):
    """Forward the vector to the external model and translate its answer.

    A single request is made per call. No retries, and no timeout unless one
    is configured.
    """

    name = "remote"

    def __init__(
        self,
        base_url: str,
        timeout: Optional[float] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        self.base_url = base_url
        self.timeout = timeout
        self._transport = transport

    @property
    def predict_url(self) -> str:
        """Full URL for the /predict endpoint."""
        return f"{self.base_url.rstrip('/')}/predict"

    async def classify(self, vector: FeatureVector) -> PredictionResult:
        payload = {"features": vector.values}
        logger.debug("POST %s with %d features", self.predict_url, len(vector))

        try:
            async with httpx.AsyncClient(
                timeout=httpx.Timeout(self.timeout),
                transport=self._transport,
            ) as client:
                response = await client.post(self.predict_url, json=payload)
                response.raise_for_status()
        except httpx.HTTPStatusError as exc:
            status = exc.response.status_code
            logger.warning("Prediction service returned HTTP %s", status)
            raise NetworkError(
                f"Prediction service returned HTTP {status}.", status_code=status
            ) from exc
        except httpx.HTTPError as exc:
            logger.warning("Prediction request to %s failed: %s", self.predict_url, exc)
            raise NetworkError(f"Prediction request failed: {exc}") from exc

        code = self._extract_code(response)
        label = "Mine" if code == MINE_CODE else "Rock"
        return PredictionResult(label=label, classifier=self.name, code=code)

    @staticmethod
    def _extract_code(response: httpx.Response) -> str:
        try:
            data: Any = response.json()
        except ValueError as exc:
            raise ResponseError("Prediction service returned a non-JSON response.") from exc

        if not isinstance(data, dict):
            raise ResponseError("Prediction service returned an unexpected payload.")

        code = data.get("prediction")
        if not isinstance(code, str):
            raise ResponseError("Prediction service response has no 'prediction' code.")
        return code.strip()
