import pytest

from producthub.core.config import DEFAULT_DATABASE_URL, Settings
from producthub.main import create_app


def test_cors_origins_are_parsed_from_comma_separated_list():
    settings = Settings(cors_origins_raw="http://a.example/, https://b.example ,,")
    assert settings.cors_origins == ["http://a.example", "https://b.example"]


@pytest.mark.parametrize("environment, expected", [("development", ["*"]), ("production", [])])
def test_cors_origins_fallback_depends_on_environment(environment, expected):
    settings = Settings(environment=environment, cors_origins_raw=None)
    assert settings.cors_origins == expected


def test_cors_origins_read_from_environment(monkeypatch):
    monkeypatch.setenv("CORS_ORIGINS", "https://admin.example")
    assert Settings().cors_origins == ["https://admin.example"]


def test_heroku_style_database_url_is_rewritten():
    settings = Settings(database_url="postgres://u:p@db:5432/catalog")
    assert settings.database_url == "postgresql+psycopg://u:p@db:5432/catalog"


def test_blank_database_url_falls_back_to_default():
    assert Settings(database_url="").database_url == DEFAULT_DATABASE_URL


def test_docs_disabled_outside_development():
    from fastapi.testclient import TestClient

    app = create_app(Settings(environment="production", database_url="sqlite://"))
    with TestClient(app) as client:
        assert client.get("/docs").status_code == 404
        assert client.get("/health/live").status_code == 200


def test_static_frontend_is_served_with_spa_fallback(tmp_path):
    from fastapi.testclient import TestClient

    (tmp_path / "index.html").write_text("<html>admin</html>")
    app = create_app(Settings(database_url="sqlite://", static_dir=str(tmp_path)))
    with TestClient(app) as client:
        assert "admin" in client.get("/").text
        assert "admin" in client.get("/products/some-client-route").text
        assert client.get("/api/products").status_code == 200
