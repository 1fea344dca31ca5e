"""
Immutable request descriptor.

A Request is a read-only snapshot of a RequestBuilder. It renders its
URI/URL and hands itself to a transport through execute().
"""
import asyncio
from typing import Any, Mapping, Optional, TYPE_CHECKING

from ..config import DEFAULT_PORTS, format_value
from ..exceptions import ConstructionError, IncompleteURIError, TransportError
from ..logging import get_logger
from .protocols import Callback, Transport

if TYPE_CHECKING:
    from .request_builder import RequestBuilder


logger = get_logger('request')


class Request:
    """
    Immutable HTTP request descriptor.

    Fields are copied by reference from the builder at build time, so
    mappings merged later on the same builder may show up here too.

    Example:
        >>> request = (RequestBuilder()
        ...            .with_scheme('https')
        ...            .with_host('api.example.com')
        ...            .with_port(443)
        ...            .with_path('/v1/items')
        ...            .build())
        >>> request.get_uri()
        'https://api.example.com/v1/items'
    """

    __slots__ = (
        '_host',
        '_port',
        '_path_prefix',
        '_scheme',
        '_path',
        '_query_parameters',
        '_body_parameters',
        '_headers',
    )

    def __init__(self, builder: 'RequestBuilder'):
        """
        Snapshot the builder's fields.

        Args:
            builder: Source builder

        Raises:
            ConstructionError: If no builder is supplied
        """
        if builder is None:
            raise ConstructionError("No builder supplied to constructor")

        self._host = builder.host
        self._port = builder.port
        self._path_prefix = builder.path_prefix
        self._scheme = builder.scheme
        self._path = builder.path
        self._query_parameters = builder.query_parameters
        self._body_parameters = builder.body_parameters
        self._headers = builder.headers

    @property
    def host(self) -> Optional[str]:
        return self._host

    @property
    def port(self) -> Optional[int]:
        return self._port

    @property
    def path_prefix(self) -> Optional[str]:
        return self._path_prefix

    @property
    def scheme(self) -> Optional[str]:
        return self._scheme

    @property
    def path(self) -> Optional[str]:
        return self._path

    @property
    def query_parameters(self) -> Any:
        return self._query_parameters

    @property
    def body_parameters(self) -> Any:
        """Body payload, passed to the transport uninterpreted."""
        return self._body_parameters

    @property
    def headers(self) -> Optional[Mapping[str, str]]:
        return self._headers

    def get_uri(self) -> str:
        """
        Build scheme://host[:port][path_prefix][path].

        The port is left out only when it is the default for the scheme.

        Raises:
            IncompleteURIError: If scheme, host or port is unset
        """
        missing = tuple(
            name for name, value in (
                ('scheme', self._scheme),
                ('host', self._host),
                ('port', self._port),
            )
            if not value
        )
        if missing:
            raise IncompleteURIError(
                f"Missing components necessary to construct URI: {', '.join(missing)}",
                missing=missing
            )

        uri = f"{self._scheme}://{self._host}"
        if DEFAULT_PORTS.get(self._scheme) != self._port:
            uri += f":{self._port}"
        if self._path_prefix:
            uri += self._path_prefix
        if self._path:
            uri += self._path
        return uri

    def get_query_parameter_string(self) -> str:
        """
        Render query parameters as '?k1=v1&k2=v2'.

        Keys whose value is None are skipped; nothing is URL-encoded.
        Returns an empty string when no query parameters are set.
        """
        params = self._query_parameters
        if params is None:
            return ''
        if isinstance(params, (str, bytes)):
            text = params.decode() if isinstance(params, bytes) else params
            return f"?{text}"
        if isinstance(params, Mapping):
            items = params.items()
        else:
            items = enumerate(params)
        return '?' + '&'.join(
            f"{key}={format_value(value)}"
            for key, value in items
            if value is not None
        )

    def get_url(self) -> str:
        """Build the URI followed by the query string, if any."""
        uri = self.get_uri()
        if self._query_parameters is not None:
            return uri + self.get_query_parameter_string()
        return uri

    def execute(self, method: Transport, callback: Optional[Callback] = None) -> Optional['asyncio.Future']:
        """
        Run a transport for this request.

        With a callback, calls method(self, callback) and returns None.
        Without one, returns an asyncio.Future settled by the first
        callback(error, result) the transport makes: rejected when error
        is truthy, otherwise resolved with result. The transport may call
        back from any thread.

        Args:
            method: Transport called as method(request, callback)
            callback: Optional completion handler

        Returns:
            None when a callback is given, otherwise a Future

        Raises:
            RuntimeError: If no callback is given outside a running event loop
        """
        if callback is not None:
            logger.debug(f"Executing {self!r} with callback")
            method(self, callback)
            return None

        loop = asyncio.get_running_loop()
        future = loop.create_future()

        def settle(error: Any, result: Any) -> None:
            if future.done():
                logger.debug(f"Ignoring callback for already settled {self!r}")
                return
            if error:
                if not isinstance(error, BaseException):
                    error = TransportError(str(error), detail=error)
                future.set_exception(error)
            else:
                future.set_result(result)

        def on_complete(error: Any = None, result: Any = None) -> None:
            try:
                running = asyncio.get_running_loop()
            except RuntimeError:
                running = None
            if running is loop:
                settle(error, result)
            else:
                loop.call_soon_threadsafe(settle, error, result)

        logger.debug(f"Executing {self!r}")
        try:
            method(self, on_complete)
        except Exception as e:
            # Raising transports reject the future
            settle(e, None)
        return future

    async def execute_async(self, method: Transport) -> Any:
        """Await the result of execute(method)."""
        return await self.execute(method)

    def __repr__(self) -> str:
        try:
            return f"Request(url={self.get_url()!r})"
        except IncompleteURIError:
            return (
                f"Request(scheme={self._scheme!r}, host={self._host!r}, "
                f"port={self._port!r}, path={self._path!r})"
            )
