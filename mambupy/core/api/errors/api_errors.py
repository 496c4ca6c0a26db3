"""Mambu API errors and exceptions."""
from typing import Optional

from ...exceptions import MambuException


class MambuAPIError(MambuException):
    """
    Exception raised for failed Mambu API calls.
    
    Carries the HTTP status code and the raw response body when the server
    answered, or the underlying cause when the request never completed.
    """
    
    def __init__(
        self,
        message: str,
        status_code: Optional[int] = None,
        body: Optional[str] = None,
        cause: Optional[BaseException] = None
    ) -> None:
        self.status_code = status_code
        self.body = body
        self.cause = cause
        super().__init__(message, status_code)
    
    @property
    def is_transport_error(self) -> bool:
        """True when no HTTP status is available."""
        return self.status_code is None


class HttpStatusError(MambuAPIError):
    """The server responded with a non-success status."""
    
    def __init__(self, status_code: int, body: str) -> None:
        super().__init__(
            f"Mambu API error: status={status_code} response={body}",
            status_code=status_code,
            body=body
        )


class TransportError(MambuAPIError):
    """The request could not be completed (bad URL, connect or read failure)."""
    
    def __init__(self, cause: BaseException) -> None:
        super().__init__(f"Transport error: {cause}", cause=cause)
        self.__cause__ = cause
