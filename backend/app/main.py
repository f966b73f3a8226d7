# -*- coding: utf-8 -*-

import logging
from typing import List, Sequence, Union

from fastapi import Depends, FastAPI, Form, HTTPException
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import HTMLResponse

from app.classifiers import BaseClassifier, create_classifier
from app.config import Settings, load_settings
from app.errors import ClassifierError, InputValidationError
from app.parsers import FeatureParser
from app.samples import SAMPLE_RECORDS
from app.schemas import PredictionResult, PredictRequest, SampleRecord
from app.ui import PageState, render_page
from app.utils.logging import configure_logging

APP_VERSION = "1.0.0"

SETTINGS = load_settings()
configure_logging(SETTINGS.log_level)

logger = logging.getLogger(__name__)

CLASSIFIER = create_classifier(SETTINGS)

app = FastAPI(title="Sonar Mine vs Rock Classifier", version=APP_VERSION)

app.add_middleware(
    CORSMiddleware,
    allow_origins=SETTINGS.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# =============================================================================
# DEPENDENCIES
# =============================================================================


def get_settings() -> Settings:
    return SETTINGS


def get_classifier() -> BaseClassifier:
    return CLASSIFIER


def get_feature_parser(settings: Settings = Depends(get_settings)) -> FeatureParser:
    return FeatureParser(strict=settings.strict_validation)


def get_samples() -> List[SampleRecord]:
    return SAMPLE_RECORDS


# =============================================================================
# PREDICTION FLOW
# =============================================================================


async def _predict(
    features: Union[str, Sequence[float]],
    parser: FeatureParser,
    classifier: BaseClassifier,
) -> PredictionResult:
    """Parse/validate the input and run it through the classifier.

    Input problems raise before the classifier is touched, so malformed input
    never reaches the network.
    """
    if isinstance(features, str):
        vector = parser.parse(features)
    else:
        vector = parser.validate(features)

    result = await classifier.classify(vector)
    logger.info("Prediction via %s: %s", classifier.name, result.label)
    return result


# =============================================================================
# ENDPOINTS
# =============================================================================


@app.get("/", response_class=HTMLResponse)
async def index(
    classifier: BaseClassifier = Depends(get_classifier),
    samples: List[SampleRecord] = Depends(get_samples),
):
    return HTMLResponse(render_page(PageState(), samples, classifier.name))


@app.post("/", response_class=HTMLResponse)
async def submit_form(
    features: str = Form(""),
    parser: FeatureParser = Depends(get_feature_parser),
    classifier: BaseClassifier = Depends(get_classifier),
    samples: List[SampleRecord] = Depends(get_samples),
):
    """Handle the HTML form and re-render the page with the outcome."""
    state = PageState(features=features)
    status_code = 200
    try:
        state.result = await _predict(features, parser, classifier)
    except InputValidationError as exc:
        logger.info("Rejected form input: %s", exc)
        state.error = str(exc)
        status_code = 422
    except ClassifierError as exc:
        logger.warning("Prediction failed: %s", exc)
        state.error = f"Prediction failed: {exc}"
        status_code = 502

    return HTMLResponse(render_page(state, samples, classifier.name), status_code=status_code)


@app.post("/api/predict", response_model=PredictionResult)
async def predict(
    payload: PredictRequest,
    parser: FeatureParser = Depends(get_feature_parser),
    classifier: BaseClassifier = Depends(get_classifier),
):
    """
    Classify a sonar return as Mine or Rock
    - features: comma-separated text or a list of numbers
    """
    try:
        return await _predict(payload.features, parser, classifier)
    except InputValidationError as exc:
        logger.info("Rejected API input: %s", exc)
        raise HTTPException(status_code=422, detail=str(exc)) from exc
    except ClassifierError as exc:
        logger.warning("Prediction failed: %s", exc)
        raise HTTPException(status_code=502, detail=f"Prediction failed: {exc}") from exc


@app.get("/api/samples", response_model=List[SampleRecord])
async def list_samples(samples: List[SampleRecord] = Depends(get_samples)):
    return samples


@app.get("/api/info")
async def info(
    settings: Settings = Depends(get_settings),
    classifier: BaseClassifier = Depends(get_classifier),
):
    return {
        "message": "Sonar Mine vs Rock Classifier API",
        "version": APP_VERSION,
        "classifier": classifier.name,
        "strict_validation": settings.strict_validation,
    }


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host=SETTINGS.host, port=SETTINGS.port)
