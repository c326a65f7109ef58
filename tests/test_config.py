import sys
from unittest.mock import patch

import httpx
import pytest
from loguru import logger
from pydantic import ValidationError

from instance_metadata import DEFAULT_BASE_URL, Client, ClientConfig, InvalidURL


def test_config_defaults(monkeypatch: pytest.MonkeyPatch) -> None:
    for var in ("BASE_URL", "TIMEOUT", "DEBUG"):
        monkeypatch.delenv(f"INSTANCE_METADATA_{var}", raising=False)
    config = ClientConfig()
    assert config.base_url == DEFAULT_BASE_URL
    assert config.timeout is None
    assert config.debug is False


def test_config_from_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("INSTANCE_METADATA_BASE_URL", "http://127.0.0.1:1338/")
    monkeypatch.setenv("INSTANCE_METADATA_TIMEOUT", "1.5")
    config = ClientConfig()
    assert config.base_url == "http://127.0.0.1:1338/"
    assert config.timeout == 1.5


def test_config_rejects_negative_timeout() -> None:
    with pytest.raises(ValidationError):
        ClientConfig(timeout=-1)


def test_client_does_not_read_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("INSTANCE_METADATA_BASE_URL", "http://127.0.0.1:1338/")
    with Client() as client:
        assert str(client.base_url) == DEFAULT_BASE_URL


def test_from_config() -> None:
    config = ClientConfig(base_url="http://127.0.0.1:1338/", timeout=1.5)
    with Client.from_config(config) as client:
        assert str(client.base_url) == "http://127.0.0.1:1338/"
        assert client.http.timeout == httpx.Timeout(1.5)
    assert client.http.is_closed


def test_from_config_without_timeout_keeps_httpx_default() -> None:
    with Client.from_config(ClientConfig(timeout=None)) as client:
        assert client.http.timeout == httpx.Timeout(timeout=5.0)


def test_from_config_invalid_base_url() -> None:
    with pytest.raises(InvalidURL):
        Client.from_config(ClientConfig(base_url="169.254.169.254"))


def test_from_config_debug_enables_logging() -> None:
    with patch("instance_metadata.client.enable_debug_logging", return_value=7) as enable, patch(
        "instance_metadata.client.disable_debug_logging"
    ) as disable:
        client = Client.from_config(ClientConfig(debug=True))
        enable.assert_called_once_with(sys.stderr)
        disable.assert_not_called()
        client.close()
        client.close()
    disable.assert_called_once_with(7)


def _handler_count() -> int:
    return len(logger._core.handlers)  # type: ignore[attr-defined]


def test_debug_clients_do_not_leak_log_handlers() -> None:
    before = _handler_count()
    for _ in range(3):
        Client.from_config(ClientConfig(debug=True)).close()
    assert _handler_count() == before

    with Client.from_config(ClientConfig(debug=True)):
        assert _handler_count() == before + 1
    assert _handler_count() == before


def test_default_http_clients_follow_redirects() -> None:
    with Client() as client:
        assert client.http.follow_redirects
    with Client.from_config(ClientConfig(timeout=1.0)) as client:
        assert client.http.follow_redirects


def test_caller_owned_http_client_is_not_closed() -> None:
    http_client = httpx.Client()
    with Client(http_client=http_client) as client:
        assert client.http is http_client
    assert not http_client.is_closed
    with Client.from_config(ClientConfig(timeout=3.0), http_client=http_client):
        pass
    assert not http_client.is_closed
    http_client.close()


def test_own_http_client_is_closed() -> None:
    client = Client()
    client.close()
    assert client.http.is_closed
