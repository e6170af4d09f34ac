from app.core.config import PROJECT_ROOT, Settings


def test_defaults():
    config = Settings(_env_file=None)
    assert config.PORT == 8080
    assert config.API_PREFIX == ""
    assert config.INDEX_FILE == "index.html"
    assert config.STATIC_DIR == str(PROJECT_ROOT / "web")


def test_environment_overrides(monkeypatch):
    monkeypatch.setenv("PORT", "9090")
    monkeypatch.setenv("STATIC_DIR", "/srv/www")
    monkeypatch.setenv("API_PREFIX", "api/")
    monkeypatch.setenv("LOG_LEVEL", "debug")

    config = Settings(_env_file=None)
    assert config.PORT == 9090
    assert config.STATIC_DIR == "/srv/www"
    assert config.API_PREFIX == "/api"
    assert config.LOG_LEVEL == "DEBUG"
