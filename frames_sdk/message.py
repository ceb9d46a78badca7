"""
Decoding of signed frame action messages.
"""
import binascii
import logging
from typing import Any, Dict, Union

from google.protobuf.message import DecodeError

from .exceptions import MessageDecodeError
from .models import CastId, FrameActionDataParsed, FrameActionPayload
from .proto import Message

logger = logging.getLogger(__name__)

PayloadLike = Union[FrameActionPayload, Dict[str, Any]]


def coerce_payload(payload: PayloadLike) -> FrameActionPayload:
    """
    Accept either a FrameActionPayload or the raw JSON body as a dict.

    Raises:
        MessageDecodeError: If the dict has no trustedData.messageBytes
    """
    if isinstance(payload, FrameActionPayload):
        return payload
    try:
        return FrameActionPayload.model_validate(payload)
    except ValueError as e:
        raise MessageDecodeError(f"Invalid frame action payload: {e}") from e


def message_bytes_from_hex(message_hex: str) -> bytes:
    """
    Convert the hex-encoded trusted data to raw bytes.

    Args:
        message_hex: Hex string, with or without 0x prefix

    Returns:
        Raw message bytes

    Raises:
        MessageDecodeError: If the string is not valid hex
    """
    if message_hex.startswith("0x"):
        message_hex = message_hex[2:]
    try:
        return bytes.fromhex(message_hex)
    except ValueError as e:
        raise MessageDecodeError(f"Trusted data is not valid hex: {e}") from e


def decode_message_bytes(message_hex: str) -> Message:
    """
    Decode hex-encoded trusted data into a protocol Message.

    Raises:
        MessageDecodeError: If the hex or the protobuf bytes are malformed
    """
    raw = message_bytes_from_hex(message_hex)
    try:
        return Message.FromString(raw)
    except DecodeError as e:
        raise MessageDecodeError(f"Trusted data is not a valid message: {e}") from e


def normalize_cast_id(cast_id) -> CastId:
    """Convert a protobuf CastId into a CastId model with a 0x hex hash."""
    return CastId(fid=cast_id.fid, hash="0x" + binascii.hexlify(cast_id.hash).decode("ascii"))


def parse_frame_action(payload: PayloadLike) -> FrameActionDataParsed:
    """
    Extract button index, input text, requester FID and cast id from a
    frame action payload.

    The result depends only on the trusted data bytes; untrustedData is
    ignored.

    Args:
        payload: FrameActionPayload or its JSON body as a dict

    Returns:
        Parsed frame action data

    Raises:
        MessageDecodeError: If the trusted data cannot be decoded or is not
            a frame action message
    """
    frame_payload = coerce_payload(payload)
    message = decode_message_bytes(frame_payload.trusted_data.message_bytes)

    if not message.HasField("data"):
        raise MessageDecodeError("Message has no data")
    if not message.data.HasField("frame_action_body"):
        raise MessageDecodeError("Message data has no frame action body")

    body = message.data.frame_action_body
    try:
        input_text = body.input_text.decode("utf-8") if body.input_text else None
    except UnicodeDecodeError as e:
        raise MessageDecodeError(f"Input text is not valid UTF-8: {e}") from e

    cast_id = normalize_cast_id(body.cast_id) if body.HasField("cast_id") else None

    parsed = FrameActionDataParsed(
        button_index=body.button_index,
        input_text=input_text,
        requester_fid=message.data.fid,
        cast_id=cast_id,
    )
    logger.debug(
        f"Parsed frame action: fid={parsed.requester_fid} button={parsed.button_index}"
    )
    return parsed
