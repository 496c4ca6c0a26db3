"""Authentication for API requests."""
from .credentials import BasicAuthCredentials

__all__ = [
    'BasicAuthCredentials',
]
