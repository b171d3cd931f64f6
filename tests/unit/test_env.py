import pytest

from gql_client.env import client_from_env, headers_from_env, timeout_from_env


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch):
    for name in ("GQL_CLIENT_ENDPOINT", "GQL_CLIENT_TIMEOUT_SECONDS", "GQL_CLIENT_HEADERS_JSON"):
        monkeypatch.delenv(name, raising=False)


def test_client_from_env(monkeypatch):
    monkeypatch.setenv("GQL_CLIENT_ENDPOINT", " https://example.com/graphql ")
    monkeypatch.setenv("GQL_CLIENT_TIMEOUT_SECONDS", "12.5")
    monkeypatch.setenv("GQL_CLIENT_HEADERS_JSON", '{"Authorization": "Bearer abc"}')
    with client_from_env() as client:
        assert client.endpoint == "https://example.com/graphql"
        assert client.timeout_seconds == 12.5
        assert client.headers == {"Authorization": "Bearer abc"}


def test_missing_endpoint():
    with pytest.raises(ValueError, match="GQL_CLIENT_ENDPOINT"):
        client_from_env()


def test_timeout_default_and_invalid(monkeypatch):
    assert timeout_from_env() == 30.0
    monkeypatch.setenv("GQL_CLIENT_TIMEOUT_SECONDS", "soon")
    with pytest.raises(ValueError):
        timeout_from_env()
    monkeypatch.setenv("GQL_CLIENT_TIMEOUT_SECONDS", "0")
    with pytest.raises(ValueError):
        timeout_from_env()


@pytest.mark.parametrize("raw", ["not json", '["a"]', '{"X-Count": 1}'])
def test_invalid_headers_ignored(monkeypatch, raw):
    monkeypatch.setenv("GQL_CLIENT_HEADERS_JSON", raw)
    assert headers_from_env() == {}
