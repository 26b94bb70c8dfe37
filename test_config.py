from config import Settings


def test_defaults(monkeypatch):
    for name in ("HOST", "PORT", "FRONTEND_ORIGINS", "LOG_LEVEL", "BOOK_ID_LENGTH"):
        monkeypatch.delenv(name, raising=False)
    config = Settings(_env_file=None)
    assert config.HOST == "localhost"
    assert config.PORT == 9000
    assert config.BOOK_ID_LENGTH == 16
    assert config.allow_origins == ["*"]


def test_allow_origins_split(monkeypatch):
    monkeypatch.setenv("FRONTEND_ORIGINS", "http://a.test, http://b.test,,")
    config = Settings(_env_file=None)
    assert config.allow_origins == ["http://a.test", "http://b.test"]


def test_port_from_env(monkeypatch):
    monkeypatch.setenv("PORT", "8080")
    assert Settings(_env_file=None).PORT == 8080
