import pytest

from updock.config.settings import Settings


def test_defaults(monkeypatch):
    for name in ("UPDOCK_REGISTRY_URL", "UPDOCK_PAGE_SIZE", "UPDOCK_TIMEOUT", "UPDOCK_MAX_TAGS", "UPDOCK_LOG"):
        monkeypatch.delenv(name, raising=False)
    s = Settings()
    assert s.registry_url == "https://hub.docker.com"
    assert s.page_size == 100
    assert s.request_timeout == 30.0
    assert s.max_tags is None
    assert s.log_level == "WARNING"


def test_environment_overrides(monkeypatch):
    monkeypatch.setenv("UPDOCK_REGISTRY_URL", "https://mirror.example/")
    monkeypatch.setenv("UPDOCK_PAGE_SIZE", "25")
    monkeypatch.setenv("UPDOCK_TIMEOUT", "2.5")
    monkeypatch.setenv("UPDOCK_MAX_TAGS", "500")
    monkeypatch.setenv("UPDOCK_LOG", "debug")
    s = Settings()
    assert s.registry_url == "https://mirror.example"
    assert s.page_size == 25
    assert s.request_timeout == 2.5
    assert s.max_tags == 500
    assert s.log_level == "DEBUG"


def test_invalid_integer(monkeypatch):
    monkeypatch.setenv("UPDOCK_MAX_TAGS", "many")
    with pytest.raises(ValueError, match="UPDOCK_MAX_TAGS"):
        Settings()


def test_invalid_timeout(monkeypatch):
    monkeypatch.setenv("UPDOCK_TIMEOUT", "soon")
    with pytest.raises(ValueError, match="UPDOCK_TIMEOUT"):
        Settings()
