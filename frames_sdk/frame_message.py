"""
Parse frame action payloads and enrich them with hub context.
"""
import logging
from concurrent.futures import FIRST_EXCEPTION, ThreadPoolExecutor, wait
from typing import Any, Callable, Dict, Optional, Union

from .hub.client import HubClient, REACTION_TYPE_LIKE, REACTION_TYPE_RECAST
from .hub.options import HubOptions
from .message import PayloadLike, coerce_payload, message_bytes_from_hex, parse_frame_action
from .models import (
    FrameActionDataParsed,
    FrameActionDataParsedAndHubContext,
    FrameActionHubContext,
)

logger = logging.getLogger(__name__)


def _run_all(calls: Dict[str, Callable[[], Any]], drain: bool = False) -> Dict[str, Any]:
    """
    Run independent calls concurrently and collect their results by name.

    The first call to raise aborts the join: pending calls are cancelled
    and the exception propagates. Calls already running have their results
    discarded; with drain they are waited for before the exception leaves,
    otherwise they finish in the background.
    """
    executor = ThreadPoolExecutor(max_workers=len(calls), thread_name_prefix="hub")
    try:
        futures = {executor.submit(fn): name for name, fn in calls.items()}
        done, pending = wait(futures, return_when=FIRST_EXCEPTION)
        for future in done:
            error = future.exception()
            if error is not None:
                for other in pending:
                    other.cancel()
                logger.debug(f"Hub call '{futures[future]}' failed: {error}")
                raise error
        return {name: future.result() for future, name in futures.items()}
    finally:
        executor.shutdown(wait=drain, cancel_futures=True)


def get_hub_context(
    client: HubClient,
    message_bytes: bytes,
    parsed: FrameActionDataParsed,
    drain: bool = False
) -> FrameActionHubContext:
    """
    Fetch validation, relationship and profile facts for a parsed frame action.

    All hub lookups are issued at once. Follow relationships are always
    true when the requester is the cast author. Without a cast id the
    cast-relative lookups are not sent and read as false.

    Pass drain=True when the client is closed right after this call, so
    lookups still running on a failure finish before the session goes away.

    Raises:
        HubError: If any lookup fails; no partial context is returned
    """
    requester_fid = parsed.requester_fid
    cast_id = parsed.cast_id
    is_self = cast_id is not None and cast_id.fid == requester_fid

    calls: Dict[str, Callable[[], Any]] = {
        "validation": lambda: client.validate_message(message_bytes),
        "verified_address": lambda: client.get_address_for_fid(requester_fid),
        "user_data": lambda: client.get_user_data_for_fid(requester_fid),
    }
    if cast_id is not None:
        calls.update({
            "requester_follows_caster":
                lambda: client.link_exists(requester_fid, cast_id.fid) or is_self,
            "caster_follows_requester":
                lambda: client.link_exists(cast_id.fid, requester_fid) or is_self,
            "liked_cast":
                lambda: client.reaction_exists(
                    requester_fid, REACTION_TYPE_LIKE, cast_id.fid, cast_id.hash
                ),
            "recasted_cast":
                lambda: client.reaction_exists(
                    requester_fid, REACTION_TYPE_RECAST, cast_id.fid, cast_id.hash
                ),
        })

    results = _run_all(calls, drain=drain)

    verified_address = results["verified_address"]
    return FrameActionHubContext(
        is_valid=results["validation"].is_valid,
        requester_follows_caster=results.get("requester_follows_caster", False),
        caster_follows_requester=results.get("caster_follows_requester", False),
        liked_cast=results.get("liked_cast", False),
        recasted_cast=results.get("recasted_cast", False),
        requester_verified_addresses=[verified_address] if verified_address else [],
        requester_user_data=results["user_data"],
    )


def get_frame_message(
    payload: PayloadLike,
    options: Optional[Union[HubOptions, Dict[str, Any]]] = None,
    fetch_hub_context: bool = True,
    client: Optional[HubClient] = None
) -> Union[FrameActionDataParsed, FrameActionDataParsedAndHubContext]:
    """
    Return the frame action data (button index, input text, ...) from the
    message trusted data, optionally validated and enriched by a hub.

    If the result's is_valid is False, none of its fields should be trusted.

    Args:
        payload: FrameActionPayload or its JSON body as a dict
        options: Hub options, as HubOptions or a dict of its fields
        fetch_hub_context: Whether to validate the message and fetch hub
            context (default: True)
        client: HubClient to use; when given, options are ignored

    Returns:
        FrameActionDataParsedAndHubContext when fetch_hub_context is True,
        otherwise FrameActionDataParsed

    Raises:
        MessageDecodeError: If the trusted data cannot be decoded
        HubError: If any hub lookup fails
    """
    parsed = parse_frame_action(payload)
    if not fetch_hub_context:
        return parsed

    message_bytes = message_bytes_from_hex(coerce_payload(payload).trusted_data.message_bytes)

    if client is not None:
        context = get_hub_context(client, message_bytes, parsed)
    else:
        if isinstance(options, dict):
            options = HubOptions.model_validate(options)
        with HubClient(options) as owned_client:
            context = get_hub_context(owned_client, message_bytes, parsed, drain=True)

    return FrameActionDataParsedAndHubContext.model_validate(
        {**parsed.model_dump(), **context.model_dump()}
    )
