"""API tests for the ERD router."""

from fastapi.testclient import TestClient

from app.main import app

client = TestClient(app)

MODELS = {
    "models": [
        {
            "name": "Foo",
            "columns": [
                {"name": "id", "type": "integer", "null": False},
                {"name": "title", "type": "string", "limit": 80},
                {"name": "bar_id", "type": "integer"},
                {"name": "created_at", "type": "datetime"},
            ],
        },
        {
            "name": "Bar",
            "columns": [{"name": "id", "type": "integer", "null": False}],
            "associations": [{"name": "foos", "macro": "has_many", "owner": "Bar"}],
        },
    ]
}


def test_root():
    """The app answers on its root."""
    response = client.get("/")
    assert response.status_code == 200
    assert response.json() == {"message": "Erdify API"}


def test_root_erd():
    """The router answers on its prefix."""
    response = client.get("/api/erd/")
    assert response.status_code == 200


def test_attributes():
    """Attributes are classified and sorted by name."""
    response = client.post(
        "/api/erd/attributes", params={"model": "Foo", "adapter": "sqlite"}, json=MODELS
    )
    assert response.status_code == 200
    data = response.json()
    assert [attr["name"] for attr in data] == ["bar_id", "created_at", "id", "title"]
    assert data[0]["foreign_key"] is True
    assert data[1]["timestamp"] is True
    assert data[2]["primary_key"] is True
    assert data[2]["type_description"] == "integer\u200a\u2217"
    assert data[3]["type_description"] == "string (80)"
    assert data[3]["limit"] == 80


def test_attributes_unknown_model():
    """Unknown models give 404."""
    response = client.post(
        "/api/erd/attributes", params={"model": "Baz", "adapter": "sqlite"}, json=MODELS
    )
    assert response.status_code == 404


def test_attributes_unknown_adapter():
    """Unknown adapters give 400."""
    response = client.post(
        "/api/erd/attributes", params={"model": "Foo", "adapter": "oracle"}, json=MODELS
    )
    assert response.status_code == 400
    assert "oracle" in response.json()["message"]


def test_attributes_duplicate_models():
    """Duplicate model names give 400."""
    payload = {"models": MODELS["models"] + [MODELS["models"][0]]}
    response = client.post(
        "/api/erd/attributes", params={"model": "Foo", "adapter": "sqlite"}, json=payload
    )
    assert response.status_code == 400
