"""
Transport protocols.

A transport performs the actual network call for a Request and reports
the outcome exactly once through the callback it is given.
"""
from typing import Any, Callable, Optional, Protocol, TYPE_CHECKING, runtime_checkable

if TYPE_CHECKING:
    from .request import Request


Callback = Callable[[Optional[Any], Any], None]


@runtime_checkable
class Transport(Protocol):
    """
    Protocol for transport functions passed to Request.execute().

    Any callable with this signature qualifies, plain functions included.
    """

    def __call__(self, request: 'Request', callback: Callback) -> None:
        """
        Perform the request.

        Args:
            request: Request to send
            callback: Must be called once as callback(error, result)
        """
        ...
