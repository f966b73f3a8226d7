"""Tests for FastAPI endpoints."""
import httpx
import pytest
from fastapi.testclient import TestClient

from app.classifiers import HeuristicClassifier, RemoteClassifier
from app.config import Settings
from app.errors import NetworkError, ResponseError
from app.main import app, get_classifier, get_settings
from app.schemas import PredictionResult


@pytest.fixture
def use_classifier():
    """Swap the configured classifier for the duration of a test."""

    def _use(classifier):
        app.dependency_overrides[get_classifier] = lambda: classifier
        return classifier

    yield _use
    app.dependency_overrides.clear()


@pytest.fixture
def client(use_classifier, recording_classifier):
    """Create a test client whose classifier records its calls."""
    use_classifier(recording_classifier)
    return TestClient(app)


class TestPage:
    """Test suite for the HTML form endpoints."""

    def test_index(self, client, rock_sample):
        """GET / renders the empty form and test data."""
        response = client.get("/")

        assert response.status_code == 200
        assert response.headers["content-type"].startswith("text/html")
        assert "Sonar Mine vs Rock Prediction" in response.text
        assert rock_sample.features in response.text

    def test_empty_submission_shows_error_without_classifying(self, client, recording_classifier):
        """Blank input is rejected before the classifier is called."""
        response = client.post("/", data={"features": "   "})

        assert response.status_code == 422
        assert "Please enter some data before predicting." in response.text
        assert recording_classifier.calls == []

    def test_missing_field_is_treated_as_empty(self, client, recording_classifier):
        """A form without the field behaves like an empty submission."""
        response = client.post("/", data={})

        assert response.status_code == 422
        assert recording_classifier.calls == []

    def test_successful_submission(self, client, recording_classifier, rock_sample):
        """A valid submission renders the label and keeps the input text."""
        response = client.post("/", data={"features": rock_sample.features})

        assert response.status_code == 200
        assert "Prediction:" in response.text
        assert ">Rock</span>" in response.text
        assert f'value="{rock_sample.features}"' in response.text
        assert len(recording_classifier.calls) == 1
        assert len(recording_classifier.calls[0]) == 60

    def test_shape_error_is_displayed(self, client, recording_classifier):
        """Too few values produce a user-visible message."""
        response = client.post("/", data={"features": "0.1, 0.2"})

        assert response.status_code == 422
        assert "Expected exactly 60 values, got 2." in response.text
        assert recording_classifier.calls == []

    def test_classifier_failure_is_displayed(self, client, recording_classifier, mine_sample):
        """Network problems become a single message on the page."""
        recording_classifier.error = NetworkError("Prediction request failed: timed out")

        response = client.post("/", data={"features": mine_sample.features})

        assert response.status_code == 502
        assert "Prediction failed: Prediction request failed: timed out" in response.text
        assert "data-result" not in response.text

    def test_heuristic_submission_shows_confidence(self, use_classifier, mine_sample):
        """The placeholder classifier renders a confidence bar and a notice."""
        use_classifier(HeuristicClassifier())
        client = TestClient(app)

        response = client.post("/", data={"features": mine_sample.features})

        assert response.status_code == 200
        assert 'class="confidence-bar"' in response.text
        assert "Demo placeholder" in response.text


class TestPredictAPI:
    """Test suite for POST /api/predict."""

    def test_predict_from_text(self, client, rock_sample):
        """Comma-separated text is accepted."""
        response = client.post("/api/predict", json={"features": rock_sample.features})

        assert response.status_code == 200
        data = response.json()
        assert data["label"] == "Rock"
        assert data["confidence"] is None
        assert data["classifier"] == "recording"

    def test_predict_from_list(self, client, recording_classifier):
        """A list of numbers is accepted."""
        response = client.post("/api/predict", json={"features": [0.25] * 60})

        assert response.status_code == 200
        assert recording_classifier.calls[0].values == [0.25] * 60

    def test_predict_from_integer_list(self, client, recording_classifier):
        """JSON integers are numbers too."""
        response = client.post("/api/predict", json={"features": [0, 1] * 30})

        assert response.status_code == 200
        assert recording_classifier.calls[0].values == [0.0, 1.0] * 30

    @pytest.mark.parametrize(
        "features, fragment",
        [
            ("", "Please enter some data"),
            ("0.1, abc", "abc"),
            (",".join(["0.1"] * 59), "Expected exactly 60 values, got 59."),
            ([0.5] * 59 + [1.5], "out of range"),
        ],
    )
    def test_invalid_input(self, client, recording_classifier, features, fragment):
        """Input errors return 422 and never reach the classifier."""
        response = client.post("/api/predict", json={"features": features})

        assert response.status_code == 422
        assert fragment in response.json()["detail"]
        assert recording_classifier.calls == []

    @pytest.mark.parametrize(
        "payload",
        [
            {"values": [0.1]},
            {"features": [True] * 60},
            {"features": [0.5] * 59 + [False]},
            {"features": ["0.5"] * 60},
            {"features": 0.5},
        ],
    )
    def test_invalid_payload(self, client, recording_classifier, payload):
        """Payloads that do not match the schema are rejected by FastAPI."""
        response = client.post("/api/predict", json=payload)

        assert response.status_code == 422
        assert recording_classifier.calls == []

    @pytest.mark.parametrize("error", [NetworkError("down"), ResponseError("garbled")])
    def test_classifier_errors(self, client, recording_classifier, mine_sample, error):
        """Classifier failures return 502 with a readable message."""
        recording_classifier.error = error

        response = client.post("/api/predict", json={"features": mine_sample.features})

        assert response.status_code == 502
        assert response.json()["detail"] == f"Prediction failed: {error}"

    @pytest.mark.parametrize("code, label", [("M", "Mine"), ("R", "Rock")])
    def test_remote_classifier_end_to_end(self, use_classifier, mine_sample, code, label):
        """The remote backend maps the upstream code into a label."""
        seen = []

        def handler(request: httpx.Request) -> httpx.Response:
            seen.append(request)
            return httpx.Response(200, json={"prediction": code})

        use_classifier(
            RemoteClassifier("https://sonar.example.test", transport=httpx.MockTransport(handler))
        )
        client = TestClient(app)

        response = client.post("/api/predict", json={"features": mine_sample.features})

        assert response.status_code == 200
        assert response.json()["label"] == label
        assert response.json()["code"] == code
        assert len(seen) == 1

    def test_lenient_validation(self, client, recording_classifier):
        """With strict validation off, any length and range is forwarded."""
        app.dependency_overrides[get_settings] = lambda: Settings(strict_validation=False)

        response = client.post("/api/predict", json={"features": "0.1, 2.5, -1"})

        assert response.status_code == 200
        assert recording_classifier.calls[0].values == [0.1, 2.5, -1.0]

    def test_custom_result_passthrough(self, client, recording_classifier):
        """Whatever the classifier returns is serialized unchanged."""
        recording_classifier.result = PredictionResult(
            label="Mine", confidence=0.9, classifier="recording", code="M", placeholder=True
        )

        response = client.post("/api/predict", json={"features": [0.5] * 60})

        assert response.json() == {
            "label": "Mine",
            "confidence": 0.9,
            "classifier": "recording",
            "code": "M",
            "placeholder": True,
        }


class TestInfoEndpoints:
    """Test suite for the read-only endpoints."""

    def test_samples(self, client, rock_sample, mine_sample):
        """The sample list is returned verbatim."""
        response = client.get("/api/samples")

        assert response.status_code == 200
        data = response.json()
        assert [item["label"] for item in data] == ["Rock", "Mine"]
        assert data[0]["features"] == rock_sample.features
        assert data[1]["features"] == mine_sample.features

    def test_info(self, client):
        """Info reports the active classifier and validation mode."""
        response = client.get("/api/info")

        assert response.status_code == 200
        data = response.json()
        assert data["message"] == "Sonar Mine vs Rock Classifier API"
        assert data["version"] == "1.0.0"
        assert data["classifier"] == "recording"
        assert isinstance(data["strict_validation"], bool)
