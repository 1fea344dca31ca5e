"""
Internal API configuration.

Describes how a builder is pointed at an internal API: base URL, path
prefix, API key and the optional cache/queue control headers.
"""
import math
from dataclasses import dataclass
from typing import Any, Dict, Mapping, NamedTuple, Optional
from urllib.parse import urlsplit

from .exceptions import ConfigurationError


DEFAULT_PORTS: Dict[str, int] = {
    'http': 80,
    'https': 443,
}


class ApiBase(NamedTuple):
    """Components parsed from an API base URL."""
    scheme: str
    host: str
    port: Optional[int]
    path: str


def parse_api_base(url: str) -> ApiBase:
    """
    Parse an absolute API base URL.

    The port falls back to the scheme default (80 for http, 443 for https)
    and an empty http(s) path becomes '/'.

    Args:
        url: Absolute URL such as 'https://api.example.com/v1'

    Returns:
        ApiBase with scheme, host, port and path

    Raises:
        ConfigurationError: If the URL is not absolute or has an invalid port
    """
    if not isinstance(url, str):
        raise ConfigurationError(f"API base must be a string, got {type(url).__name__}")

    parts = urlsplit(url)
    if not parts.scheme or not parts.hostname:
        raise ConfigurationError(f"API base is not an absolute URL: {url!r}")

    try:
        port = parts.port
    except ValueError as e:
        raise ConfigurationError(f"Invalid port in API base {url!r}") from e

    scheme = parts.scheme.lower()
    if port is None:
        port = DEFAULT_PORTS.get(scheme)

    path = parts.path
    if not path and scheme in DEFAULT_PORTS:
        path = '/'

    host = parts.hostname
    if ':' in host:
        # IPv6 literal
        host = f"[{host}]"

    return ApiBase(scheme=scheme, host=host, port=port, path=path)


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def format_value(value: Any) -> str:
    """Render a scalar the way it appears in headers and query strings."""
    if isinstance(value, bool):
        return 'true' if value else 'false'
    if isinstance(value, float) and math.isnan(value):
        return 'NaN'
    if isinstance(value, float) and math.isinf(value):
        return 'Infinity' if value > 0 else '-Infinity'
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


@dataclass
class InternalApiConfig:
    """
    Internal API configuration.

    Attributes:
        api_base: Absolute base URL (apiBase)
        api_key: Key sent as 'x-api-key' (apiKey)
        api_path_prefix: Appended verbatim to the base URL path (apiPathPrefix)
        wait_for: Sent as 'x-wait-for' when numeric (waitFor)
        no_cache: Sends 'x-no-cache: true' when exactly True (noCache)
        no_queue: Sends 'x-no-queue: true' when exactly True (noQueue)

    Example:
        >>> config = InternalApiConfig(
        ...     api_base="https://api.example.com/v1",
        ...     api_key="secret",
        ...     api_path_prefix="/widgets"
        ... )
        >>> config.to_headers()
        {'x-api-key': 'secret'}
    """
    api_base: str
    api_key: str
    api_path_prefix: str = ''
    wait_for: Optional[float] = None
    no_cache: bool = False
    no_queue: bool = False

    def to_headers(self) -> Dict[str, str]:
        """Build the headers implied by this configuration."""
        headers = {'x-api-key': self.api_key}
        if _is_number(self.wait_for):
            headers['x-wait-for'] = format_value(self.wait_for)
        if self.no_cache is True:
            headers['x-no-cache'] = 'true'
        if self.no_queue is True:
            headers['x-no-queue'] = 'true'
        return headers

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> 'InternalApiConfig':
        """Create from a camelCase or snake_case mapping."""
        def pick(camel: str, snake: str, default: Any = None) -> Any:
            if camel in data:
                return data[camel]
            return data.get(snake, default)

        api_base = pick('apiBase', 'api_base')
        api_key = pick('apiKey', 'api_key')
        if api_base is None:
            raise ConfigurationError("Internal API config is missing 'apiBase'")
        if api_key is None:
            raise ConfigurationError("Internal API config is missing 'apiKey'")

        prefix = pick('apiPathPrefix', 'api_path_prefix', '')
        return cls(
            api_base=api_base,
            api_key=api_key,
            api_path_prefix='' if prefix is None else prefix,
            wait_for=pick('waitFor', 'wait_for'),
            no_cache=pick('noCache', 'no_cache', False),
            no_queue=pick('noQueue', 'no_queue', False),
        )
