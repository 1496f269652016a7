from appointments.config import BASE_DIR, Settings


def test_relative_sqlite_path_is_anchored_at_project_root():
    settings = Settings(database_url="sqlite:///./data/app.db")
    assert settings.resolved_database_url == f"sqlite:///{BASE_DIR / 'data/app.db'}"


def test_other_urls_unchanged():
    url = "postgresql://user:pw@db/appointments"
    assert Settings(database_url=url).resolved_database_url == url


def test_redis_is_optional(monkeypatch):
    monkeypatch.delenv("REDIS_URL", raising=False)
    assert Settings(_env_file=None).redis_url is None
