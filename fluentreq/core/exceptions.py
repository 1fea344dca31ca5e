"""
Custom exceptions for request building and execution.

Validation errors (construction, incomplete URI, configuration) are raised
synchronously where they are detected. TransportError is never raised by
fluentreq itself; transports use it to report failures through the
execute() callback or future.
"""
from typing import Optional, Any, Tuple


class RequestBuilderError(Exception):
    """Base exception for all fluentreq errors."""
    
    def __init__(self, message: str, error_code: Optional[int] = None) -> None:
        """
        Initialize the exception.
        
        Args:
            message: Error message
            error_code: Numeric error code (if available)
        """
        self.error_code = error_code
        super().__init__(message)


class ConstructionError(RequestBuilderError):
    """Exception raised when a Request is created without a builder."""
    pass


class IncompleteURIError(RequestBuilderError):
    """Exception raised when host, port or scheme is missing for a URI."""
    
    def __init__(
        self, 
        message: str, 
        missing: Tuple[str, ...] = (), 
        error_code: Optional[int] = None
    ) -> None:
        """
        Initialize the exception.
        
        Args:
            message: Error message
            missing: Names of the unset components
            error_code: Numeric error code (if available)
        """
        self.missing = tuple(missing)
        super().__init__(message, error_code)


class ConfigurationError(RequestBuilderError):
    """Exception raised for an unusable internal API configuration."""
    pass


class TransportError(RequestBuilderError):
    """Exception reported by a transport through the execute() channel."""
    
    def __init__(
        self, 
        message: str, 
        detail: Any = None, 
        error_code: Optional[int] = None
    ) -> None:
        """
        Initialize the exception.
        
        Args:
            message: Error message
            detail: Raw error value passed by the transport (if any)
            error_code: Numeric error code (if available)
        """
        self.detail = detail
        super().__init__(message, error_code)
