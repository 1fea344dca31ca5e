"""Pytest fixtures for fluentreq tests."""
import pytest

from fluentreq import RequestBuilder


@pytest.fixture
def builder():
    """Returns an empty builder."""
    return RequestBuilder()


@pytest.fixture
def https_builder():
    """Returns a builder with a complete https destination."""
    return (RequestBuilder()
            .with_scheme('https')
            .with_host('api.example.com')
            .with_port(443))


@pytest.fixture
def internal_api_config():
    """Returns a camelCase internal API configuration."""
    return {
        'apiBase': 'https://api.example.com/v1',
        'apiPathPrefix': '/widgets',
        'apiKey': 'k',
    }


@pytest.fixture
def ok_transport():
    """Returns a transport that succeeds with the request URL."""
    calls = []

    def transport(request, callback):
        calls.append(request)
        callback(None, {'url': request.get_url()})

    transport.calls = calls
    return transport


@pytest.fixture
def failing_transport():
    """Returns a transport that reports a ValueError."""
    error = ValueError('connection refused')

    def transport(request, callback):
        callback(error, None)

    transport.error = error
    return transport
