"""
Tests for hub connection options.
"""
import pytest
from pydantic import ValidationError

from frames_sdk.hub import DEFAULT_HUB_HTTP_URL, HubOptions


def test_defaults():
    options = HubOptions()

    assert options.hub_http_url == DEFAULT_HUB_HTTP_URL
    assert options.hub_request_options == {}


def test_aliases_and_trailing_slash():
    options = HubOptions.model_validate({
        "hubHttpUrl": "https://hub.example.com/",
        "hubRequestOptions": {"headers": {"api_key": "k"}},
    })

    assert options.hub_http_url == "https://hub.example.com"
    assert options.hub_request_options == {"headers": {"api_key": "k"}}


@pytest.mark.parametrize("url", [
    "http://localhost:2281",
    "http://127.0.0.1:2281",
    "http://[::1]:2281",
])
def test_plain_http_allowed_for_loopback(url):
    assert HubOptions(hub_http_url=url).hub_http_url == url


def test_plain_http_rejected_for_remote_hosts():
    with pytest.raises(ValidationError, match="must use HTTPS"):
        HubOptions(hub_http_url="http://hub.example.com:2281")


def test_plain_http_allowed_with_insecure_override(monkeypatch):
    monkeypatch.setenv("FRAMES_INSECURE_HUB", "1")

    assert HubOptions(hub_http_url="http://hub.example.com:2281").hub_http_url == "http://hub.example.com:2281"


def test_invalid_url_rejected():
    with pytest.raises(ValidationError, match="Invalid hub URL"):
        HubOptions(hub_http_url="hub.example.com")


def test_from_env(monkeypatch):
    monkeypatch.setenv("FRAMES_HUB_HTTP_URL", "https://hub.example.com")
    monkeypatch.setenv("FRAMES_HUB_API_KEY", "secret")
    monkeypatch.setenv("FRAMES_HUB_TIMEOUT", "2.5")

    options = HubOptions.from_env()

    assert options.hub_http_url == "https://hub.example.com"
    assert options.hub_request_options == {"headers": {"api_key": "secret"}, "timeout": 2.5}


def test_from_env_defaults():
    options = HubOptions.from_env()

    assert options.hub_http_url == DEFAULT_HUB_HTTP_URL
    assert options.hub_request_options == {}
