"""
Result type for API calls.

An ``ApiCallResult`` is either an ``ApiSuccess`` holding the response body or
an ``ApiFailure`` holding the ``MambuAPIError`` that describes what went wrong.
"""
from dataclasses import dataclass
from typing import Optional, Union

from .errors import MambuAPIError, HttpStatusError, TransportError


@dataclass(frozen=True)
class ApiSuccess:
    """Successful call: the body text exactly as received."""
    body: str
    status_code: int
    
    @property
    def ok(self) -> bool:
        return True
    
    def unwrap(self) -> str:
        """Return the body."""
        return self.body


@dataclass(frozen=True)
class ApiFailure:
    """Failed call: an HTTP status error or a transport error."""
    error: MambuAPIError
    
    @property
    def ok(self) -> bool:
        return False
    
    @property
    def status_code(self) -> Optional[int]:
        return self.error.status_code
    
    @property
    def body(self) -> Optional[str]:
        return self.error.body
    
    @property
    def is_http_error(self) -> bool:
        return isinstance(self.error, HttpStatusError)
    
    @property
    def is_transport_error(self) -> bool:
        return isinstance(self.error, TransportError)
    
    def unwrap(self) -> str:
        """Raise the wrapped error."""
        raise self.error


ApiCallResult = Union[ApiSuccess, ApiFailure]
