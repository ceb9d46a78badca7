"""
HTTP client for the hub APIs used to validate and enrich frame actions.
"""
import logging
from dataclasses import dataclass
from typing import Any, Dict, Optional

import requests

from ..message import PayloadLike, coerce_payload, message_bytes_from_hex
from ..models import UserData
from ._rate_limited_log import warn_hub_failure
from .exceptions import HubConnectionError, HubResponseError
from .options import HubOptions

logger = logging.getLogger(__name__)

REACTION_TYPE_LIKE = 1
REACTION_TYPE_RECAST = 2

USER_DATA_ADD = "MESSAGE_TYPE_USER_DATA_ADD"

# Hub user data types mapped to UserData fields
USER_DATA_FIELDS = {
    "USER_DATA_TYPE_PFP": "profile_image",
    "USER_DATA_TYPE_DISPLAY": "display_name",
    "USER_DATA_TYPE_USERNAME": "username",
    "USER_DATA_TYPE_BIO": "bio",
}


def _is_success(response: requests.Response) -> bool:
    # response.ok is also true for 3xx
    return 200 <= response.status_code < 300


@dataclass
class ValidationResult:
    """
    Outcome of a hub message validation.

    message holds the hub's JSON rendering of the message when valid.
    """
    is_valid: bool
    message: Optional[Dict[str, Any]] = None


class HubClient:
    """
    Client for a hub's HTTP API.

    All requests go through one requests.Session and carry the caller's
    hub_request_options. No retries are configured; a failing hub fails
    the call.
    """

    def __init__(
        self,
        options: Optional[HubOptions] = None,
        session: Optional[requests.Session] = None,
        logger: Optional[logging.Logger] = None
    ):
        """
        Initialize the HubClient

        Args:
            options: Hub URL and request options (defaults to HubOptions())
            session: Optional requests session to reuse
            logger: Optional logger instance to use for debug logging
        """
        self.options = options or HubOptions()
        self.hub_http_url = self.options.hub_http_url
        self.session = session or requests.Session()
        self.logger = logger or logging.getLogger(__name__)

    def __enter__(self) -> "HubClient":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    def close(self) -> None:
        """Close the underlying HTTP session."""
        self.session.close()

    def _request(self, method: str, path: str, **kwargs) -> requests.Response:
        """
        Send a request to the hub with the configured request options.

        Headers given here are defaults; headers from hub_request_options
        take precedence.

        Raises:
            HubConnectionError: If the request fails at the transport level
        """
        url = f"{self.hub_http_url}{path}"
        request_kwargs = dict(self.options.hub_request_options)

        headers = dict(kwargs.pop("headers", None) or {})
        headers.update(request_kwargs.pop("headers", None) or {})
        if headers:
            request_kwargs["headers"] = headers
        request_kwargs.update(kwargs)

        self.logger.debug(f"Hub request: {method} {url} params={kwargs.get('params')}")
        try:
            return self.session.request(method, url, **request_kwargs)
        except requests.Timeout as e:
            self.logger.error(f"Hub request timed out: {method} {path}: {e}")
            raise HubConnectionError(f"Hub request timed out: {method} {path}: {e}") from e
        except requests.RequestException as e:
            self.logger.error(f"Hub request failed: {method} {path}: {e}")
            raise HubConnectionError(f"Hub request failed: {method} {path}: {e}") from e

    def _json(self, response: requests.Response, endpoint: str) -> Dict[str, Any]:
        """
        Parse a JSON object from a hub response.

        Raises:
            HubResponseError: If the body is not a JSON object
        """
        try:
            body = response.json()
        except ValueError as e:
            raise HubResponseError(
                f"Invalid JSON response from {endpoint}: {e}",
                status_code=response.status_code
            ) from e
        if not isinstance(body, dict):
            raise HubResponseError(
                f"Unexpected response from {endpoint}: expected an object, got {type(body).__name__}",
                status_code=response.status_code
            )
        return body

    def _exists(self, response: requests.Response, endpoint: str) -> bool:
        """
        Interpret a lookup response: 2xx means the record exists.

        Any other status reads as "does not exist". 5xx statuses are also
        logged since they usually mean the hub is failing rather than that
        the record is missing.
        """
        if _is_success(response):
            return True
        if response.status_code >= 500:
            warn_hub_failure(self.hub_http_url, endpoint, response.status_code, self.logger)
        return False

    def _raise_for_status(self, response: requests.Response, endpoint: str) -> None:
        """
        Raises:
            HubResponseError: If the status is not 2xx
        """
        if not _is_success(response):
            raise HubResponseError(
                f"{endpoint} failed with status {response.status_code}",
                status_code=response.status_code
            )

    def validate_message(self, message_bytes: bytes) -> ValidationResult:
        """
        Ask the hub to validate a signed message.

        Args:
            message_bytes: Raw protobuf message bytes

        Returns:
            ValidationResult with is_valid set from the hub's verdict

        Raises:
            HubConnectionError: If the hub cannot be reached
            HubResponseError: If the hub's answer is not a JSON object
        """
        response = self._request(
            "POST",
            "/v1/validateMessage",
            data=message_bytes,
            headers={"Content-Type": "application/octet-stream"},
        )
        body = self._json(response, "validateMessage")
        if body.get("valid"):
            return ValidationResult(is_valid=True, message=body.get("message"))
        self.logger.info(f"Hub rejected message (status {response.status_code})")
        return ValidationResult(is_valid=False)

    def validate_frame_message(self, payload: PayloadLike) -> ValidationResult:
        """Validate the trusted data of a frame action payload."""
        frame_payload = coerce_payload(payload)
        return self.validate_message(
            message_bytes_from_hex(frame_payload.trusted_data.message_bytes)
        )

    def link_exists(self, fid: int, target_fid: int, link_type: str = "follow") -> bool:
        """Return True if fid has a link of link_type to target_fid."""
        response = self._request(
            "GET",
            "/v1/linkById",
            params={"fid": fid, "target_fid": target_fid, "link_type": link_type},
        )
        return self._exists(response, "linkById")

    def reaction_exists(
        self,
        fid: int,
        reaction_type: int,
        target_fid: int,
        target_hash: str
    ) -> bool:
        """Return True if fid reacted with reaction_type to the given cast."""
        response = self._request(
            "GET",
            "/v1/reactionById",
            params={
                "fid": fid,
                "reaction_type": reaction_type,
                "target_fid": target_fid,
                "target_hash": target_hash,
            },
        )
        return self._exists(response, "reactionById")

    def get_address_for_fid(self, fid: int) -> Optional[str]:
        """
        Get the first verified address of a user.

        Args:
            fid: User FID

        Returns:
            Address string, or None if the user has no verifications

        Raises:
            HubConnectionError: If the hub cannot be reached
            HubResponseError: If the hub answers with an error or bad JSON
        """
        response = self._request("GET", "/v1/verificationsByFid", params={"fid": fid})
        self._raise_for_status(response, "verificationsByFid")
        messages = self._json(response, "verificationsByFid").get("messages") or []
        if not messages:
            return None

        data = messages[0].get("data") or {}
        body = data.get("verificationAddAddressBody") or data.get("verificationAddEthAddressBody") or {}
        return body.get("address")

    def get_user_data_for_fid(self, fid: int) -> Optional[UserData]:
        """
        Get the profile data of a user.

        When a user data type was set more than once, the value with the
        latest timestamp wins.

        Args:
            fid: User FID

        Returns:
            UserData, or None if the user has published no user data

        Raises:
            HubConnectionError: If the hub cannot be reached
            HubResponseError: If the hub answers with an error or bad JSON
        """
        response = self._request("GET", "/v1/userDataByFid", params={"fid": fid})
        self._raise_for_status(response, "userDataByFid")
        messages = self._json(response, "userDataByFid").get("messages") or []
        if not messages:
            return None

        latest: Dict[str, Dict[str, Any]] = {}
        for message in messages:
            data = message.get("data") or {}
            if data.get("type") != USER_DATA_ADD:
                continue
            body = data.get("userDataBody") or {}
            field = USER_DATA_FIELDS.get(body.get("type"))
            if field is None:
                continue
            timestamp = data.get("timestamp", 0)
            current = latest.get(field)
            if current is None or current["timestamp"] < timestamp:
                latest[field] = {"value": body.get("value"), "timestamp": timestamp}

        return UserData(**{field: entry["value"] for field, entry in latest.items()})
