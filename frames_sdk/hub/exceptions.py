"""
Exceptions for the hub module.
"""
from typing import Optional

from ..exceptions import FramesError


class HubError(FramesError):
    """Base exception for hub-related errors."""
    pass


class HubConnectionError(HubError):
    """Raised when a request to the hub fails at the transport level."""
    pass


class HubResponseError(HubError):
    """Raised when the hub returns a response that cannot be interpreted."""

    def __init__(self, message: str, status_code: Optional[int] = None):
        self.status_code = status_code
        super().__init__(message)
