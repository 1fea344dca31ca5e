"""Fluent builder for Request objects."""
from typing import Any, Mapping, Optional, Union

from ..config import InternalApiConfig, parse_api_base
from ..logging import get_logger
from .merge import merge_field
from .request import Request


logger = get_logger('builder')


class RequestBuilder:
    """
    Accumulates request fields and produces an immutable Request.

    Every with_* method returns the builder so calls can be chained.
    Scalar fields are overwritten; query parameters, body parameters
    and headers follow the merge rule in merge_field().

    Example:
        >>> request = (RequestBuilder()
        ...            .with_scheme('https')
        ...            .with_host('api.example.com')
        ...            .with_port(443)
        ...            .with_headers({'Accept': 'application/json'})
        ...            .with_auth('token')
        ...            .build())
        >>> request.headers['Authorization']
        'Bearer token'
    """

    def __init__(self):
        """Initialize an empty builder."""
        self.host: Optional[str] = None
        self.port: Optional[int] = None
        self.path_prefix: Optional[str] = None
        self.scheme: Optional[str] = None
        self.path: Optional[str] = None
        self.query_parameters: Any = None
        self.body_parameters: Any = None
        self.headers: Any = None

    def with_host(self, host: str) -> 'RequestBuilder':
        self.host = host
        return self

    def with_port(self, port: int) -> 'RequestBuilder':
        self.port = port
        return self

    def with_path_prefix(self, path_prefix: str) -> 'RequestBuilder':
        self.path_prefix = path_prefix
        return self

    def with_scheme(self, scheme: str) -> 'RequestBuilder':
        self.scheme = scheme
        return self

    def with_path(self, path: str) -> 'RequestBuilder':
        self.path = path
        return self

    def with_query_parameters(self, *params: Any) -> 'RequestBuilder':
        """Merge each argument into the query parameters, left to right."""
        for value in params:
            self.query_parameters = merge_field(self.query_parameters, value)
        return self

    def with_body_parameters(self, *params: Any) -> 'RequestBuilder':
        """Merge each argument into the body parameters, left to right."""
        for value in params:
            self.body_parameters = merge_field(self.body_parameters, value)
        return self

    def with_headers(self, *headers: Any) -> 'RequestBuilder':
        """Merge each argument into the headers, left to right."""
        for value in headers:
            self.headers = merge_field(self.headers, value)
        return self

    def with_auth(self, access_token: Optional[str]) -> 'RequestBuilder':
        """Add a bearer Authorization header when a token is given."""
        if access_token:
            self.with_headers({'Authorization': f"Bearer {access_token}"})
        return self

    def with_internal_api(
        self,
        config: Union[InternalApiConfig, Mapping[str, Any], None]
    ) -> 'RequestBuilder':
        """
        Point the builder at an internal API.

        Sets host, port and scheme from config.api_base, the path prefix to
        the base path followed by config.api_path_prefix (no slash
        normalization), and merges the API key and control headers.
        A config that is neither an InternalApiConfig nor a mapping leaves
        the builder untouched.

        Args:
            config: InternalApiConfig or a mapping with apiBase, apiKey,
                apiPathPrefix and optional waitFor, noCache, noQueue

        Raises:
            ConfigurationError: If the mapping lacks apiBase/apiKey or the
                base URL cannot be parsed
        """
        if isinstance(config, Mapping):
            config = InternalApiConfig.from_dict(config)
        elif not isinstance(config, InternalApiConfig):
            logger.debug(f"Ignoring internal API config of type {type(config).__name__}")
            return self

        base = parse_api_base(config.api_base)
        logger.debug(f"Using internal API at {base.scheme}://{base.host}:{base.port}")

        return (self
                .with_host(base.host)
                .with_port(base.port)
                .with_scheme(base.scheme)
                .with_path_prefix(base.path + config.api_path_prefix)
                .with_headers(config.to_headers()))

    def build(self) -> Request:
        """Freeze the current fields into a Request."""
        request = Request(self)
        logger.debug(f"Built {request!r}")
        return request


def builder() -> RequestBuilder:
    """Create a new RequestBuilder."""
    return RequestBuilder()
