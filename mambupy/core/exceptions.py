"""
Custom exceptions for Mambu API operations.

This module defines the base exception classes shared by the package.
"""
from typing import Optional


class MambuException(Exception):
    """Base exception for all Mambu-related errors."""
    
    def __init__(self, message: str, error_code: Optional[int] = None) -> None:
        """
        Initialize the exception.
        
        Args:
            message: Error message
            error_code: Numeric error code (if available)
        """
        self.error_code = error_code
        self.message = message
        super().__init__(message)


class ConfigError(MambuException):
    """Exception raised for invalid client configuration."""
    pass


class MalformedURLError(MambuException):
    """Exception raised when a request URL cannot be used."""
    
    def __init__(self, url: str, reason: str) -> None:
        """
        Initialize the exception.
        
        Args:
            url: The offending URL
            reason: Why the URL was rejected
        """
        self.url = url
        super().__init__(f"Malformed URL {url!r}: {reason}")
