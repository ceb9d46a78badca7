"""
In-memory hub that answers the hub HTTP endpoints through requests_mock.
"""
from typing import Any, Dict, Iterable, Optional, Tuple

TEST_HUB_URL = "https://hub.example.com"
TEST_ADDRESS = "0x8ba1f109551bd432803012645ac136ddd64dba72"

_NOT_FOUND = {"errCode": "not_found", "presentable": False, "name": "NotFound"}


class HubStub:
    """
    Realistic hub behaviour for tests.

    links holds (fid, target_fid) follow pairs, reactions holds
    (fid, reaction_type, target_fid, target_hash) tuples and user_data maps
    hub user data types to (value, timestamp).
    """

    def __init__(
        self,
        valid: bool = True,
        links: Iterable[Tuple[int, int]] = (),
        reactions: Iterable[Tuple[int, int, int, str]] = (),
        address: Optional[str] = None,
        user_data: Optional[Dict[str, Tuple[str, int]]] = None
    ):
        self.valid = valid
        self.links = set(links)
        self.reactions = set(reactions)
        self.address = address
        self.user_data = user_data or {}
        self.routes = {}

    def install(self, mocker, hub_url: str = TEST_HUB_URL, wrap=None) -> "HubStub":
        """
        Register all hub endpoints on a requests_mock Mocker or Adapter.

        wrap, when given, decorates every response callback.
        """
        wrap = wrap or (lambda callback: callback)
        endpoints = [
            ("validateMessage", "POST", self._validate),
            ("linkById", "GET", self._link),
            ("reactionById", "GET", self._reaction),
            ("verificationsByFid", "GET", self._verifications),
            ("userDataByFid", "GET", self._user_data),
        ]
        self.routes = {
            name: mocker.register_uri(method, f"{hub_url}/v1/{name}", json=wrap(callback))
            for name, method, callback in endpoints
        }
        return self

    @staticmethod
    def _int_param(request, name: str) -> int:
        return int(request.qs[name][0])

    def _validate(self, request, context) -> Dict[str, Any]:
        context.headers["Content-Type"] = "application/json"
        if not self.valid:
            return {"valid": False, "message": None}
        return {"valid": True, "message": {"data": {"type": "MESSAGE_TYPE_FRAME_ACTION"}}}

    def _link(self, request, context) -> Dict[str, Any]:
        key = (self._int_param(request, "fid"), self._int_param(request, "target_fid"))
        if request.qs.get("link_type") == ["follow"] and key in self.links:
            return {"data": {"type": "MESSAGE_TYPE_LINK_ADD", "fid": key[0],
                             "linkBody": {"type": "follow", "targetFid": key[1]}}}
        context.status_code = 404
        return _NOT_FOUND

    def _reaction(self, request, context) -> Dict[str, Any]:
        key = (
            self._int_param(request, "fid"),
            self._int_param(request, "reaction_type"),
            self._int_param(request, "target_fid"),
            request.qs["target_hash"][0],
        )
        if key in self.reactions:
            return {"data": {"type": "MESSAGE_TYPE_REACTION_ADD", "fid": key[0]}}
        context.status_code = 404
        return _NOT_FOUND

    def _verifications(self, request, context) -> Dict[str, Any]:
        fid = self._int_param(request, "fid")
        if not self.address:
            return {"messages": [], "nextPageToken": ""}
        return {
            "messages": [{
                "data": {
                    "type": "MESSAGE_TYPE_VERIFICATION_ADD_ETH_ADDRESS",
                    "fid": fid,
                    "verificationAddAddressBody": {"address": self.address},
                },
            }],
            "nextPageToken": "",
        }

    def _user_data(self, request, context) -> Dict[str, Any]:
        fid = self._int_param(request, "fid")
        return {
            "messages": [
                {
                    "data": {
                        "type": "MESSAGE_TYPE_USER_DATA_ADD",
                        "fid": fid,
                        "timestamp": timestamp,
                        "userDataBody": {"type": data_type, "value": value},
                    },
                }
                for data_type, (value, timestamp) in self.user_data.items()
            ],
            "nextPageToken": "",
        }
