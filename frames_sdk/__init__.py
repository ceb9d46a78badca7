"""
frames SDK - parse and validate frame action messages.
"""
from .version import __version__
from .exceptions import FramesError, MessageDecodeError, InvalidFrameMessageError
from .models import (
    FrameActionPayload,
    TrustedData,
    CastId,
    UserData,
    FrameActionDataParsed,
    FrameActionHubContext,
    FrameActionDataParsedAndHubContext,
)
from .message import parse_frame_action, decode_message_bytes, normalize_cast_id
from .frame_message import get_frame_message, get_hub_context
from .hub import (
    HubClient,
    HubOptions,
    ValidationResult,
    DEFAULT_HUB_HTTP_URL,
    HubError,
    HubConnectionError,
    HubResponseError,
)

__all__ = [
    "__version__",
    "FramesError",
    "MessageDecodeError",
    "InvalidFrameMessageError",
    "FrameActionPayload",
    "TrustedData",
    "CastId",
    "UserData",
    "FrameActionDataParsed",
    "FrameActionHubContext",
    "FrameActionDataParsedAndHubContext",
    "parse_frame_action",
    "decode_message_bytes",
    "normalize_cast_id",
    "get_frame_message",
    "get_hub_context",
    "HubClient",
    "HubOptions",
    "ValidationResult",
    "DEFAULT_HUB_HTTP_URL",
    "HubError",
    "HubConnectionError",
    "HubResponseError",
]
