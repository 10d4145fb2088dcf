from __future__ import annotations

import pytest
from fastapi.testclient import TestClient

from kommacheck.core.config import DEFAULT_NLP_MODEL, Settings
from kommacheck.main import create_app


pytest.importorskip("spacy")
pytest.importorskip(DEFAULT_NLP_MODEL)


def test_backend_startup_loads_nlp_pipeline_and_exposes_metadata() -> None:
    settings = Settings(
        environment="test",
        app_name="kommacheck-backend-test",
        host="127.0.0.1",
        port=8001,
        nlp_model=DEFAULT_NLP_MODEL,
    )

    app = create_app(settings=settings)

    with TestClient(app) as client:
        health = client.get("/api/health")
        assert health.status_code == 200
        assert health.json()["components"]["nlp"] == "ok"

        response = client.post("/api/check", json={"text": "Das ist ein Satz. Er ist kurz."})
        assert response.status_code == 200
        assert response.json()["sentence_count"] == 2

    metadata = app.state.nlp_adapter.metadata()
    assert metadata["model"] == DEFAULT_NLP_MODEL
    assert "spacy" in metadata
