#!/usr/bin/env python3
"""
Greet the user who pressed a frame button, using their hub profile.

Reads the frame action POST body (JSON) from the file given as the first
argument, or from stdin, and prints the frame text that would be rendered.

Hub configuration comes from the environment:
    FRAMES_HUB_HTTP_URL, FRAMES_HUB_API_KEY, FRAMES_HUB_TIMEOUT
"""
import json
import logging
import sys
from typing import Any, Dict

from frames_sdk import HubOptions, InvalidFrameMessageError, get_frame_message

INITIAL_STATE = {"said_gm": False}


def reducer(state: Dict[str, Any], action: Dict[str, Any]) -> Dict[str, Any]:
    """Any button press means the user said GM."""
    return {"said_gm": True}


def render(payload: Dict[str, Any], state: Dict[str, Any]) -> str:
    frame_message = get_frame_message(payload, options=HubOptions.from_env())
    if not frame_message.is_valid:
        raise InvalidFrameMessageError("Invalid frame payload")

    state = reducer(state, {"button_index": frame_message.button_index})
    logging.info(f"state is: {state}")

    display_name = frame_message.requester_user_data.display_name if frame_message.requester_user_data else None
    status = "you're OG!" if frame_message.requester_fid < 20_000 else "welcome to the Farcaster!"
    lines = [f"GM, {display_name}! Your FID is {frame_message.requester_fid}, {status}"]
    if not state["said_gm"]:
        lines.append("[Say GM]")
    return "\n".join(lines)


def main():
    logging.basicConfig(level=logging.INFO)
    if len(sys.argv) > 1:
        with open(sys.argv[1]) as f:
            payload = json.load(f)
    else:
        payload = json.load(sys.stdin)

    print(render(payload, dict(INITIAL_STATE)))


if __name__ == "__main__":
    main()
