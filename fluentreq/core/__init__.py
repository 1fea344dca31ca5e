"""Core fluentreq modules."""
from .config import DEFAULT_PORTS, ApiBase, InternalApiConfig, parse_api_base
from .exceptions import (
    RequestBuilderError,
    ConstructionError,
    IncompleteURIError,
    ConfigurationError,
    TransportError,
)
from .request import Request, RequestBuilder, builder

__all__ = [
    'DEFAULT_PORTS',
    'ApiBase',
    'InternalApiConfig',
    'parse_api_base',
    'RequestBuilderError',
    'ConstructionError',
    'IncompleteURIError',
    'ConfigurationError',
    'TransportError',
    'Request',
    'RequestBuilder',
    'builder',
]
