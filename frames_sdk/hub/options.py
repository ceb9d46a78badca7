"""
Connection options for hub HTTP APIs.
"""
import os
import urllib.parse
from typing import Any, Dict

from pydantic import BaseModel, Field, field_validator

DEFAULT_HUB_HTTP_URL = "https://nemes.farcaster.xyz:2281"


class HubOptions(BaseModel):
    """
    Where and how to reach a hub.

    hub_request_options are passed as keyword arguments to every
    requests call made against the hub (headers, timeout, verify, ...).
    """
    hub_http_url: str = Field(DEFAULT_HUB_HTTP_URL, alias="hubHttpUrl")
    hub_request_options: Dict[str, Any] = Field(default_factory=dict, alias="hubRequestOptions")

    class Config:
        populate_by_name = True

    @field_validator("hub_http_url")
    @classmethod
    def _validate_hub_http_url(cls, url: str) -> str:
        """
        Validate the hub URL is secure.

        Raises:
            ValueError: If URL uses plain HTTP against a non-local host
        """
        parsed = urllib.parse.urlparse(url)
        if parsed.scheme not in ("http", "https") or not parsed.hostname:
            raise ValueError(f"Invalid hub URL '{url}'")

        # Treat loopback IPv6 address as local as well
        is_local = parsed.hostname in ("localhost", "127.0.0.1", "::1")
        if parsed.scheme != "https" and not is_local:
            if os.environ.get("FRAMES_INSECURE_HUB") != "1":
                raise ValueError(
                    f"Hub URL must use HTTPS for security (got: {parsed.scheme}://). "
                    "Set FRAMES_INSECURE_HUB=1 to allow HTTP for development."
                )
        return url.rstrip("/")

    @classmethod
    def from_env(cls) -> "HubOptions":
        """
        Build options from the environment.

        FRAMES_HUB_HTTP_URL overrides the hub URL, FRAMES_HUB_API_KEY is sent
        as an ``api_key`` header and FRAMES_HUB_TIMEOUT sets a request timeout
        in seconds.
        """
        request_options: Dict[str, Any] = {}

        api_key = os.environ.get("FRAMES_HUB_API_KEY")
        if api_key:
            request_options["headers"] = {"api_key": api_key}

        timeout = os.environ.get("FRAMES_HUB_TIMEOUT")
        if timeout:
            request_options["timeout"] = float(timeout)

        return cls(
            hub_http_url=os.environ.get("FRAMES_HUB_HTTP_URL") or DEFAULT_HUB_HTTP_URL,
            hub_request_options=request_options,
        )
