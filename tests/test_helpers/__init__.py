from .message_factory import (
    build_frame_action_message,
    frame_payload,
    TEST_REQUESTER_FID,
    TEST_CASTER_FID,
    TEST_CAST_HASH,
)
from .hub_stub import HubStub, TEST_HUB_URL, TEST_ADDRESS

__all__ = [
    "build_frame_action_message",
    "frame_payload",
    "TEST_REQUESTER_FID",
    "TEST_CASTER_FID",
    "TEST_CAST_HASH",
    "HubStub",
    "TEST_HUB_URL",
    "TEST_ADDRESS",
]
