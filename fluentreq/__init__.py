"""
fluentreq - Fluent builder for immutable HTTP request descriptors.

Usage:
    >>> import fluentreq
    >>> 
    >>> request = (fluentreq.builder()
    ...            .with_scheme('https')
    ...            .with_host('api.example.com')
    ...            .with_port(443)
    ...            .with_path('/v1/search')
    ...            .with_query_parameters({'q': 'jazz', 'limit': 10})
    ...            .build())
    >>> request.get_url()
    'https://api.example.com/v1/search?q=jazz&limit=10'
"""
import logging

from .core.config import DEFAULT_PORTS, ApiBase, InternalApiConfig, parse_api_base
from .core.exceptions import (
    RequestBuilderError,
    ConstructionError,
    IncompleteURIError,
    ConfigurationError,
    TransportError,
)
from .core.request import Callback, Transport, Request, RequestBuilder, builder, merge_field

# Short alias
Builder = RequestBuilder

__version__ = '1.0.0'


def setup_logging(level=logging.INFO):
    """
    Configure logging for fluentreq modules.
    
    Args:
        level: Logging level (default: logging.INFO)
    """
    loggers = [
        'fluentreq',
        'fluentreq.builder',
        'fluentreq.request',
    ]
    
    for logger_name in loggers:
        logger = logging.getLogger(logger_name)
        logger.setLevel(level)
        logger.propagate = True


__all__ = [
    'RequestBuilder',
    'Builder',  # Alias
    'builder',
    'Request',
    'Transport',
    'Callback',
    'merge_field',
    'InternalApiConfig',
    'ApiBase',
    'DEFAULT_PORTS',
    'parse_api_base',
    'RequestBuilderError',
    'ConstructionError',
    'IncompleteURIError',
    'ConfigurationError',
    'TransportError',
    'setup_logging',
]
