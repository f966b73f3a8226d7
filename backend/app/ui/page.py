# -*- coding: utf-8 -*-
"""Server-rendered prediction form, result panel and sample table."""

from __future__ import annotations

import logging
from html import escape
from pathlib import Path
from string import Template
from typing import List, Optional, Sequence

from pydantic import BaseModel

from app.schemas import PredictionResult, SampleRecord

logger = logging.getLogger(__name__)

_WEB_DIR = Path(__file__).resolve().parent / "web"

PAGE_TITLE = "Sonar Mine vs Rock Prediction"
COPY_RESET_MS = 1500


def _load_web_asset(filename: str) -> str:
    asset_path = _WEB_DIR / filename
    try:
        return asset_path.read_text(encoding="utf-8")
    except FileNotFoundError:
        logger.warning("Web asset not found: %s", asset_path)
    except OSError:
        logger.warning("Web asset could not be read: %s", asset_path, exc_info=True)
    return ""


PAGE_CSS = _load_web_asset("sonar.css")
PAGE_SCRIPT = _load_web_asset("sonar-ui.js")


class PageState(BaseModel):
    """What the page shows for a single request."""

    features: str = ""
    result: Optional[PredictionResult] = None
    error: Optional[str] = None


def _build_error_html(error: Optional[str]) -> str:
    if not error:
        return ""
    return f"<div class=\"alert alert-error\" role=\"alert\">{escape(error)}</div>"


def _build_confidence_html(confidence: Optional[float]) -> str:
    if confidence is None:
        return ""
    percent = max(0.0, min(confidence, 1.0)) * 100
    return (
        "<div class=\"confidence\">"
        f"<div class=\"confidence-bar\" role=\"progressbar\" aria-valuemin=\"0\" aria-valuemax=\"100\" aria-valuenow=\"{percent:.0f}\">"
        f"<span class=\"confidence-fill\" style=\"width: {percent:.1f}%\"></span>"
        "</div>"
        f"<span class=\"confidence-text\">Confidence: {percent:.1f}%</span>"
        "</div>"
    )


def _build_result_html(result: Optional[PredictionResult]) -> str:
    if result is None:
        return ""

    notice = ""
    if result.placeholder:
        notice = (
            "<p class=\"placeholder-notice\">Demo placeholder: this label comes from a "
            "mean/variance rule, not from a trained model.</p>"
        )

    return (
        "<section class=\"result\" data-result>"
        f"<div class=\"result-label\">Prediction: <span class=\"label-{escape(result.label.lower())}\">"
        f"{escape(result.label)}</span></div>"
        f"{_build_confidence_html(result.confidence)}"
        f"{notice}"
        "</section>"
    )


def _build_samples_html(samples: Sequence[SampleRecord]) -> str:
    if not samples:
        return "<p class=\"empty-state\">No test data available.</p>"

    rows: List[str] = []
    for index, sample in enumerate(samples):
        full_text = escape(sample.features, quote=True)
        rows.append(
            """
            <tr>
                <td><span title="{full}">{preview}</span></td>
                <td>{label}</td>
                <td>
                    <button type="button" class="copy-button" data-copy="{full}" data-row="{index}">Copy</button>
                </td>
            </tr>
            """.strip().format(
                full=full_text,
                preview=escape(sample.preview),
                label=escape(sample.label),
                index=index,
            )
        )

    return (
        "<table class=\"samples\">"
        "<thead><tr><th>Features</th><th>Expected Label</th><th>Copy</th></tr></thead>"
        f"<tbody>{''.join(rows)}</tbody>"
        "</table>"
    )


_PAGE_TEMPLATE = Template(
    """<!DOCTYPE html>
<html lang="en">
<head>
<meta charset="utf-8">
<meta name="viewport" content="width=device-width, initial-scale=1">
<title>$title</title>
<style>$css</style>
</head>
<body>
<main class="container" data-copy-reset-ms="$copy_reset_ms">
<h1>$title</h1>
<form method="post" action="/" class="predict-form" data-predict-form>
<input type="text" name="features" value="$features" placeholder="Enter features, comma-separated" autocomplete="off">
<button type="submit" data-submit>Predict</button>
</form>
$error
$result
<section class="test-data">
<h2>Test Data</h2>
$samples
</section>
$footer
</main>
<script>$script</script>
</body>
</html>
"""
)


def render_page(state: PageState, samples: Sequence[SampleRecord], classifier_name: str) -> str:
    """Render the full HTML document for the given state."""
    footer = f"<footer class=\"footer\">Classifier: {escape(classifier_name)}</footer>"
    return _PAGE_TEMPLATE.substitute(
        title=escape(PAGE_TITLE),
        css=PAGE_CSS,
        copy_reset_ms=COPY_RESET_MS,
        features=escape(state.features, quote=True),
        error=_build_error_html(state.error),
        result=_build_result_html(state.result),
        samples=_build_samples_html(samples),
        footer=footer,
        script=PAGE_SCRIPT,
    )
