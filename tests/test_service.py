import pytest
from fastapi.testclient import TestClient

import evaluation_service


@pytest.fixture
def client():
    return TestClient(evaluation_service.app)


def test_root_and_health(client):
    assert client.get("/health").json()["status"] == "ok"
    info = client.get("/").json()
    assert info["service"] == "CV Evaluation Engine"
    assert "ruleset_hash" in info["scoring_version"]


def test_evaluate(client, cv_payload):
    response = client.post("/evaluate", json=cv_payload)
    assert response.status_code == 200
    body = response.json()
    assert body["overallScore"] == 96
    assert body["atsScore"] == 100
    assert body["keywordsToAdd"] == ["Project management", "Team leadership", "Process optimization"]


def test_evaluate_verbose(client, cv_payload):
    response = client.post("/evaluate", params={"verbose": "true"}, json=cv_payload)
    assert response.status_code == 200
    body = response.json()
    assert body["evaluation"]["overallScore"] == 96
    assert body["dimensions"]["content"] == 85
    assert body["deductions"][0]["dimension"] == "content"
    assert len(body["determinism"]["contentHash"]) == 64


def test_evaluate_rejects_invalid_document(client, cv_payload):
    cv_payload["experience"] = "lots"
    response = client.post("/evaluate", json=cv_payload)
    assert response.status_code == 400
    body = response.json()
    assert body["error"] == "Validation failed"
    assert any(d["field"] == "experience" for d in body["details"])


def test_evaluate_merge(client, cv_payload):
    response = client.post("/evaluate/merge", json={
        "cv": cv_payload,
        "enhancement": {"overallScore": 70, "quickWins": ["Use the STAR method"]},
        "listStrategy": "concatenate",
    })
    assert response.status_code == 200
    body = response.json()
    assert body["overallScore"] == 83
    assert body["atsScore"] == 100
    assert body["quickWins"][-1] == "Use the STAR method"


def test_evaluate_merge_rejects_invalid_cv(client):
    response = client.post("/evaluate/merge", json={"cv": {"personal": {}}, "enhancement": {}})
    assert response.status_code == 400


def test_validate_bullet(client):
    response = client.post("/validate/bullet", json={"bullet": "responsible for various tasks"})
    assert response.status_code == 200
    body = response.json()
    assert body["valid"] is False
    assert "No quantification found" in body["issues"]

    response = client.post("/validate/bullet", json={
        "bullet": "Entwickelte neue Features und steigerte die Performance um 30%",
        "language": "de",
    })
    assert response.json() == {"valid": True, "issues": []}


def test_validate_date(client):
    assert client.post("/validate/date", json={"date": "01.2024"}).json() == {"date": "01.2024", "valid": True}
    assert client.post("/validate/date", json={"date": "2024-01"}).json()["valid"] is False


def test_api_key_enforced_when_configured(client, cv_payload, monkeypatch):
    monkeypatch.setattr(evaluation_service, "API_KEY", "secret")

    assert client.post("/evaluate", json=cv_payload).status_code == 401
    assert client.post("/evaluate", json=cv_payload, headers={"x-api-key": "wrong"}).status_code == 401
    assert client.post("/evaluate", json=cv_payload, headers={"x-api-key": "secret"}).status_code == 200
    assert client.get("/health").status_code == 200


def test_service_info_requires_api_key(client, monkeypatch):
    monkeypatch.setattr(evaluation_service, "API_KEY", "secret")

    assert client.get("/").status_code == 401
    assert client.get("/", headers={"x-api-key": "secret"}).status_code == 200
    assert client.get("/docs").status_code == 200
