"""
Pytest fixtures for the frames SDK tests.
"""
import pytest
from cryptography.hazmat.primitives.asymmetric.ed25519 import Ed25519PrivateKey

from frames_sdk.hub import HubClient, HubOptions
from tests.test_helpers import (
    HubStub,
    TEST_ADDRESS,
    TEST_CASTER_FID,
    TEST_CAST_HASH,
    TEST_HUB_URL,
    TEST_REQUESTER_FID,
    build_frame_action_message,
    frame_payload,
)


@pytest.fixture(autouse=True)
def _clean_hub_env(monkeypatch):
    """Keep developer hub settings out of the tests."""
    for name in ("FRAMES_HUB_HTTP_URL", "FRAMES_HUB_API_KEY",
                 "FRAMES_HUB_TIMEOUT", "FRAMES_INSECURE_HUB"):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def signer_key():
    """Generate an Ed25519 signer key for test messages"""
    return Ed25519PrivateKey.generate()


@pytest.fixture
def frame_message(signer_key):
    """A signed frame action with input text and a cast id"""
    return build_frame_action_message(
        fid=TEST_REQUESTER_FID,
        button_index=2,
        input_text="gm frens",
        cast_id=(TEST_CASTER_FID, TEST_CAST_HASH),
        private_key=signer_key,
    )


@pytest.fixture
def payload(frame_message):
    """The JSON body a client POSTs for frame_message"""
    return frame_payload(frame_message)


@pytest.fixture
def hub_options():
    return HubOptions(hub_http_url=TEST_HUB_URL)


@pytest.fixture
def hub_client(hub_options):
    client = HubClient(hub_options)
    yield client
    client.close()


@pytest.fixture
def hub(requests_mock):
    """
    A hub where the requester follows the caster (not the other way
    round), liked but did not recast the cast, has one verified address
    and a profile.
    """
    cast_hash = "0x" + TEST_CAST_HASH.hex()
    stub = HubStub(
        valid=True,
        links={(TEST_REQUESTER_FID, TEST_CASTER_FID)},
        reactions={(TEST_REQUESTER_FID, 1, TEST_CASTER_FID, cast_hash)},
        address=TEST_ADDRESS,
        user_data={
            "USER_DATA_TYPE_DISPLAY": ("Alice", 100),
            "USER_DATA_TYPE_USERNAME": ("alice", 100),
            "USER_DATA_TYPE_PFP": ("https://img.example.com/alice.png", 100),
            "USER_DATA_TYPE_BIO": ("building frames", 100),
        },
    )
    return stub.install(requests_mock)
