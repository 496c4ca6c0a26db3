"""Mambu API errors and exceptions."""
from .api_errors import MambuAPIError, HttpStatusError, TransportError

__all__ = [
    'MambuAPIError',
    'HttpStatusError',
    'TransportError',
]
