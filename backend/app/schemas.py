"""Pydantic models exchanged between the parser, the classifiers and the API."""

from __future__ import annotations

from typing import List, Literal, Optional, Union

from pydantic import BaseModel, Field, StrictFloat, StrictInt

Label = Literal["Mine", "Rock"]

PREVIEW_VALUES = 5


class FeatureVector(BaseModel):
    """Ordered sonar return measurements."""

    values: List[float]

    def __len__(self) -> int:
        return len(self.values)


class PredictionResult(BaseModel):
    """Classification outcome returned to the client."""

    label: Label
    confidence: Optional[float] = Field(default=None, ge=0.0, le=1.0)
    classifier: str
    code: Optional[str] = None
    placeholder: bool = False


class PredictRequest(BaseModel):
    """JSON body accepted by ``POST /api/predict``."""

    features: Union[str, List[Union[StrictInt, StrictFloat]]]


class SampleRecord(BaseModel):
    """Hard-coded example input shown in the test data table."""

    model_config = {"frozen": True}

    features: str
    label: Label
    description: Optional[str] = None

    @property
    def feature_count(self) -> int:
        return len(self.features.split(","))

    @property
    def preview(self) -> str:
        tokens = self.features.split(",")
        if len(tokens) > PREVIEW_VALUES:
            return ", ".join(tokens[:PREVIEW_VALUES]) + "..."
        return self.features
