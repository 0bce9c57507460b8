"""Tests for mock plant analysis and submission persistence."""

import random
from unittest.mock import MagicMock

import pytest
from postgrest import APIError

from routes.deps import submission_store
from services.analysis import RANDOM_ISSUES, predict_issues
from services.submissions import SubmissionSaveError, SubmissionStore


class FakeStore:
    def __init__(self, error: SubmissionSaveError | None = None):
        self.error = error
        self.saved = []

    def save(self, user_id, image_url, predictions):
        if self.error:
            raise self.error
        self.saved.append((user_id, image_url, predictions))
        return "sub-123"


@pytest.fixture
def store(app):
    fake = FakeStore()
    app.dependency_overrides[submission_store] = lambda: fake
    return fake


@pytest.mark.parametrize(
    "url, first_issue, confidence",
    [
        ("https://cdn.example/leaf-powdery.jpg", "Powdery Mildew", 0.87),
        ("https://cdn.example/YELLOWING.png", "Nitrogen Deficiency", 0.75),
        ("https://cdn.example/brown_spot.jpg", "Leaf Spot", 0.82),
        ("https://cdn.example/insect-damage.jpg", "Aphids", 0.85),
    ],
)
def test_keyword_predictions(url, first_issue, confidence):
    predictions = predict_issues(url)
    assert len(predictions) == 3
    assert predictions[0].issue == first_issue
    assert predictions[0].confidence == confidence


def test_random_predictions():
    predictions = predict_issues("https://cdn.example/photo.jpg", random.Random(7))
    assert [p.confidence for p in predictions] == [0.7, 0.55, 0.4]
    assert len({p.issue for p in predictions}) == 3
    assert all(p.issue in RANDOM_ISSUES for p in predictions)
    assert predictions[0].notes == f"Potential {predictions[0].issue.lower()} detected"


def test_analyze_plant_saves_submission(client, store):
    resp = client.post(
        "/api/analyze-plant",
        json={"image_url": "https://cdn.example/powdery.jpg", "user_id": "user-1"},
    )
    assert resp.status_code == 200
    body = resp.json()
    assert body["submission_id"] == "sub-123"
    assert body["save_error"] is None
    assert body["predictions"][0] == {
        "issue": "Powdery Mildew",
        "confidence": 0.87,
        "notes": "White powdery spots on leaves, usually in humid areas",
    }
    assert store.saved[0][0] == "user-1"


def test_analyze_plant_save_failure_is_not_fatal(client, store):
    store.error = SubmissionSaveError("permission denied for table", code="42501", hint="Check RLS")

    resp = client.post(
        "/api/analyze-plant",
        json={"image_url": "https://cdn.example/pest.jpg", "user_id": "user-1"},
    )
    assert resp.status_code == 200
    body = resp.json()
    assert body["submission_id"].startswith("temp-")
    assert body["save_error"] == {"message": "permission denied for table", "code": "42501", "hint": "Check RLS"}
    assert body["predictions"][0]["issue"] == "Aphids"


@pytest.mark.parametrize("payload", [{"image_url": "https://x/y.jpg"}, {"user_id": "u"}, {}])
def test_analyze_plant_requires_fields(client, store, payload):
    resp = client.post("/api/analyze-plant", json=payload)
    assert resp.status_code == 400
    assert resp.json() == {"error": "Missing image_url or user_id"}


def test_analyze_plant_rejects_non_json(client, store):
    resp = client.post("/api/analyze-plant", content=b"not json", headers={"Content-Type": "application/json"})
    assert resp.status_code == 400


def test_store_without_credentials_fails_to_save():
    with pytest.raises(SubmissionSaveError, match="not configured"):
        SubmissionStore(None, None).save("u", "https://x/y.jpg", [])


def _store_with_client(execute):
    store = SubmissionStore("https://example.supabase.co", "anon-key")
    client = MagicMock()
    client.table.return_value.insert.return_value.execute.side_effect = execute
    store._client = client
    return store, client


def test_store_inserts_row_and_returns_id():
    store, client = _store_with_client(lambda: MagicMock(data=[{"id": 42}]))
    predictions = predict_issues("https://x/white.jpg")

    assert store.save("user-1", "https://x/white.jpg", predictions) == "42"
    client.table.assert_called_once_with("user_submissions")
    row = client.table.return_value.insert.call_args.args[0]
    assert row["predicted_issues"] == ["Powdery Mildew", "Leaf Spot", "Nitrogen Deficiency"]
    assert row["confidence"] == [0.87, 0.65, 0.40]


def test_store_rejects_row_without_id():
    store, _ = _store_with_client(lambda: MagicMock(data=[{"user_id": "user-1"}]))

    with pytest.raises(SubmissionSaveError, match="without an id"):
        store.save("user-1", "https://x/y.jpg", [])


def test_analyze_plant_row_without_id_is_not_fatal(client, app):
    supabase_store, _ = _store_with_client(lambda: MagicMock(data=[{"user_id": "user-1"}]))
    app.dependency_overrides[submission_store] = lambda: supabase_store

    resp = client.post(
        "/api/analyze-plant",
        json={"image_url": "https://cdn.example/leaf.jpg", "user_id": "user-1"},
    )
    assert resp.status_code == 200
    body = resp.json()
    assert body["submission_id"].startswith("temp-")
    assert body["save_error"]["message"] == "Supabase returned a submission row without an id"
    assert len(body["predictions"]) == 3


def test_store_wraps_api_errors():
    def execute():
        raise APIError({"message": "relation does not exist", "code": "42P01", "hint": None, "details": None})

    store, _ = _store_with_client(execute)
    with pytest.raises(SubmissionSaveError) as excinfo:
        store.save("user-1", "https://x/y.jpg", [])
    assert excinfo.value.code == "42P01"
    assert excinfo.value.to_dict()["message"] == "relation does not exist"
