"""
Tests for the café API.
"""

import pytest

from cafe_api.repositories import DEFAULT_CAFES


def names(response):
    """Split a comma-separated body, treating an empty body as no cafés."""
    body = response.text.strip()
    return body.split(",") if body else []


@pytest.mark.parametrize(
    "url, message",
    [
        ("/cafe", "unknown city"),
        ("/cafe?city=omsk", "unknown city"),
        ("/cafe?city=", "unknown city"),
        ("/cafe?city=Moscow", "unknown city"),
        ("/cafe?city=omsk&count=na", "unknown city"),
        ("/cafe?city=tula&count=na", "incorrect count"),
        ("/cafe?city=tula&count=-1", "incorrect count"),
        ("/cafe?city=tula&count=1.5", "incorrect count"),
    ],
)
def test_cafe_negative(client, url, message):
    """Bad city or count is rejected with a fixed plain-text message."""
    response = client.get(url)
    assert response.status_code == 400
    assert response.text.strip() == message


@pytest.mark.parametrize(
    "params",
    [
        {"count": "2", "city": "moscow"},
        {"city": "tula"},
        {"city": "moscow", "search": "ложка"},
        {"city": "moscow", "count": ""},
    ],
)
def test_cafe_when_ok(client, params):
    """Valid requests succeed."""
    response = client.get("/cafe", params=params)
    assert response.status_code == 200
    assert response.headers["content-type"].startswith("text/plain")


@pytest.mark.parametrize(
    "count, want",
    [
        (0, 0),
        (1, 1),
        (2, 2),
        (100, len(DEFAULT_CAFES["moscow"])),
    ],
)
def test_cafe_count(client, count, want):
    """count limits the result, a count above the list size returns everything."""
    response = client.get("/cafe", params={"city": "moscow", "count": count})
    assert response.status_code == 200
    assert len(names(response)) == want
    assert names(response) == list(DEFAULT_CAFES["moscow"][:want])


def test_cafe_count_zero_is_empty_body(client):
    response = client.get("/cafe?city=moscow&count=0")
    assert response.status_code == 200
    assert response.text == ""


def test_cafe_without_count_returns_all(client):
    response = client.get("/cafe", params={"city": "tula"})
    assert response.text == "Кофе с собой,Дом завтрака"


@pytest.mark.parametrize(
    "search, want_count",
    [
        ("фасоль", 0),
        ("кофе", 2),
        ("вилка", 1),
    ],
)
def test_cafe_search(client, search, want_count):
    """search keeps only cafés containing the substring."""
    response = client.get("/cafe", params={"city": "moscow", "search": search})
    assert response.status_code == 200
    found = names(response)
    assert len(found) == want_count
    assert all(search in name for name in found)


def test_cafe_search_preserves_order_and_applies_count(client):
    response = client.get("/cafe", params={"city": "moscow", "search": "кофе", "count": 1})
    assert response.status_code == 200
    assert response.text == "Мир кофе"


def test_cafe_is_idempotent(client):
    """Identical requests yield identical responses."""
    params = {"city": "moscow", "search": "кофе", "count": 5}
    first = client.get("/cafe", params=params)
    second = client.get("/cafe", params=params)
    assert first.status_code == second.status_code == 200
    assert first.text == second.text


def test_root(client):
    """Test root endpoint."""
    response = client.get("/")
    assert response.status_code == 200
    data = response.json()
    assert data["name"] == "Café API"
    assert data["cities"] == ["moscow", "tula"]


def test_health(client):
    """Test health check endpoint."""
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json() == {"status": "healthy", "cities": 2, "cafes": 8}


def test_dataset_loaded_from_path(tmp_path, monkeypatch):
    """Without an injected repository the lifespan loads CAFE_DATASET_PATH."""
    from fastapi.testclient import TestClient

    from cafe_api.api import dependencies
    from cafe_api.api.app import create_app
    from cafe_api.config import Settings

    path = tmp_path / "cafes.json"
    path.write_text('{"kazan": ["Чак-чак", "Эчпочмак"]}', encoding="utf-8")
    monkeypatch.setattr(dependencies, "settings", Settings(cafe_dataset_path=str(path)))

    with TestClient(create_app()) as client:
        assert client.get("/cafe", params={"city": "kazan", "count": 1}).text == "Чак-чак"
        response = client.get("/cafe", params={"city": "moscow"})
        assert response.status_code == 400
        assert response.text == "unknown city"


def test_injected_repository_survives_restart():
    """An app built with a repository serves it on every startup."""
    from fastapi.testclient import TestClient

    from cafe_api.api.app import create_app
    from cafe_api.repositories import InMemoryCafeRepository

    app = create_app(repository=InMemoryCafeRepository.create({"kazan": ["Чак-чак"]}))

    for _ in range(2):
        with TestClient(app) as client:
            response = client.get("/cafe", params={"city": "kazan"})
            assert response.status_code == 200
            assert response.text == "Чак-чак"


@pytest.mark.parametrize(
    "url, status_code, body",
    [
        ("/cafe?city=tula&city=omsk", 200, "Кофе с собой,Дом завтрака"),
        ("/cafe?city=omsk&city=tula", 400, "unknown city"),
        ("/cafe?city=tula&count=1&count=na", 200, "Кофе с собой"),
    ],
)
def test_repeated_parameter_uses_first_value(client, url, status_code, body):
    response = client.get(url)
    assert response.status_code == status_code
    assert response.text == body
