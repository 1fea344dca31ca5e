"""Request building, rendering and execution."""
from .merge import merge_field
from .protocols import Callback, Transport
from .request import Request
from .request_builder import RequestBuilder, builder

__all__ = [
    'merge_field',
    'Callback',
    'Transport',
    'Request',
    'RequestBuilder',
    'builder',
]
