"""Mambu API module: configuration, request execution and errors."""
from .config import APIConfig
from .auth import BasicAuthCredentials
from .errors import MambuAPIError, HttpStatusError, TransportError
from .result import ApiCallResult, ApiSuccess, ApiFailure
from .session import SessionFactory
from .request import (
    HttpMethod,
    ParamsMap,
    URLHelper,
    ResponseHandler,
    RequestExecutor,
    APPLICATION_KEY_PARAM
)
from .async_executor import AsyncRequestExecutor

__all__ = [
    # Executors
    'RequestExecutor',
    'AsyncRequestExecutor',
    
    # Requests
    'HttpMethod',
    'ParamsMap',
    'URLHelper',
    'ResponseHandler',
    'SessionFactory',
    'APPLICATION_KEY_PARAM',
    
    # Authentication
    'BasicAuthCredentials',
    
    # Configuration
    'APIConfig',
    
    # Results and errors
    'ApiCallResult',
    'ApiSuccess',
    'ApiFailure',
    'MambuAPIError',
    'HttpStatusError',
    'TransportError',
]
