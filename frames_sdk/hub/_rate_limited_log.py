"""
Rate-limited warnings for failing hub endpoints.

Hub lookups run on worker threads, and a failing hub answers every lookup
with an error. Each (hub, endpoint) pair is reported at most once per
window, whatever status codes it returns in between.
"""
import logging
import threading
from typing import Optional

from cachetools import TTLCache

logger = logging.getLogger(__name__)

# Seconds during which repeat failures of the same endpoint stay quiet
HUB_FAILURE_LOG_WINDOW = 3600

_reported_failures = TTLCache(maxsize=100, ttl=HUB_FAILURE_LOG_WINDOW)
_reported_failures_lock = threading.Lock()


def warn_hub_failure(
    hub_url: str,
    endpoint: str,
    status_code: int,
    logger_instance: Optional[logging.Logger] = None
) -> bool:
    """
    Warn that a hub endpoint answered a lookup with a server error.

    Args:
        hub_url: Base URL of the hub
        endpoint: Endpoint name, e.g. "linkById"
        status_code: HTTP status the hub returned
        logger_instance: Logger to use (defaults to module logger)

    Returns:
        True if the warning was emitted, False if it was suppressed
    """
    key = (hub_url, endpoint)
    with _reported_failures_lock:
        if key in _reported_failures:
            return False
        _reported_failures[key] = status_code

    (logger_instance or logger).warning(
        f"Hub {hub_url} returned {status_code} for {endpoint}; treating lookup as not found. "
        f"Further failures of this endpoint are not logged for {HUB_FAILURE_LOG_WINDOW}s."
    )
    return True
