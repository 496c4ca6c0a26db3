"""Pytest fixtures for MambuPy tests."""
import pytest
import requests
from unittest.mock import AsyncMock, MagicMock, Mock, patch

from mambupy.core.api import APIConfig, SessionFactory


def _make_response(status: int, body: bytes = b"", content_type: str = "application/json") -> requests.Response:
    """Builds a ``requests`` response without touching the network."""
    response = requests.Response()
    response.status_code = status
    response._content = body
    response.headers["Content-Type"] = content_type
    response.encoding = requests.utils.get_encoding_from_headers(response.headers)
    return response


def _make_async_session(status: int = 200, body: bytes = b"", charset: str = "utf-8") -> MagicMock:
    """Builds an aiohttp-like session whose ``request`` yields one response."""
    response = MagicMock()
    response.status = status
    response.charset = charset
    response.read = AsyncMock(return_value=body)

    request_ctx = MagicMock()
    request_ctx.__aenter__ = AsyncMock(return_value=response)
    request_ctx.__aexit__ = AsyncMock(return_value=None)

    session = MagicMock()
    session.request = MagicMock(return_value=request_ctx)
    session.close = AsyncMock()
    return session


@pytest.fixture
def api_config():
    """Configuration for a test tenant, without application key."""
    return APIConfig(domain="host", username="api", password="secret")


@pytest.fixture
def app_key_config(api_config):
    """Configuration with application key ``myapp``."""
    return api_config.with_application_key("myapp")


@pytest.fixture
def sync_session():
    """
    Real ``requests.Session`` whose ``send`` is mocked.

    Requests are still prepared by requests itself, so tests can inspect
    the final URL, headers and body of ``session.send.call_args``.
    """
    session = requests.Session()
    session.send = Mock(return_value=_make_response(200, b'{"ok":true}'))
    session.close = Mock()
    with patch.object(SessionFactory, 'create_sync_session', return_value=session) as factory:
        session.factory = factory
        yield session


@pytest.fixture
def async_session():
    """aiohttp-like session returned by ``SessionFactory.create_async_session``."""
    session = _make_async_session(200, b'{"ok":true}')
    with patch.object(SessionFactory, 'create_async_session', AsyncMock(return_value=session)) as factory:
        session.factory = factory
        yield session


@pytest.fixture
def sample_client_body():
    """Returns a sample client payload as sent by the API."""
    return '{"encodedKey":"8a33ae","id":"123","firstName":"Ana","lastName":"Bo"}'


@pytest.fixture
def sample_error_body():
    """Returns a sample error payload as sent by the API."""
    return '{"returnCode":301,"returnStatus":"INVALID_CLIENT_ID"}'


@pytest.fixture
def make_response():
    """Factory for offline ``requests`` responses."""
    return _make_response


@pytest.fixture
def make_async_session():
    """Factory for aiohttp-like sessions."""
    return _make_async_session
