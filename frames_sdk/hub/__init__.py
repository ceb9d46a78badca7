"""
Hub module for the frames SDK.

This module provides the HTTP client used to validate frame action messages
and to look up social-graph and profile facts about the requester.
"""
from .client import HubClient, ValidationResult, REACTION_TYPE_LIKE, REACTION_TYPE_RECAST
from .exceptions import HubError, HubConnectionError, HubResponseError
from .options import HubOptions, DEFAULT_HUB_HTTP_URL

__all__ = ['HubClient', 'HubOptions', 'ValidationResult', 'DEFAULT_HUB_HTTP_URL',
           'REACTION_TYPE_LIKE', 'REACTION_TYPE_RECAST', 'HubError',
           'HubConnectionError', 'HubResponseError']
