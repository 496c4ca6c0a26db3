"""
MambuPy - Python client for the Mambu banking platform REST API.

Usage:
    >>> from mambupy import MambuClient, APIConfig
    >>> 
    >>> mambu = MambuClient(APIConfig(domain="demo.mambu.com", username="api", password="secret"))
    >>> body = mambu.get("clients/123", {"fullDetails": "true"})
"""
import logging
from .client import MambuClient

# Configuration
from .core.api import (
    APIConfig,
    RequestExecutor,
    AsyncRequestExecutor,
    BasicAuthCredentials,
    HttpMethod,
    ParamsMap,
    URLHelper,
    APPLICATION_KEY_PARAM
)

# Results and errors
from .core.api import (
    ApiCallResult,
    ApiSuccess,
    ApiFailure,
    MambuAPIError,
    HttpStatusError,
    TransportError
)
from .core.exceptions import MambuException, ConfigError, MalformedURLError
from .core.date_utils import format_date

__version__ = '1.0.0'


def setup_logging(level=logging.INFO):
    """
    Configure logging for mambupy modules.
    
    This ensures that all mambupy loggers are properly configured
    to show log messages at the specified level.
    
    Args:
        level: Logging level (default: logging.INFO)
    """
    loggers = [
        'mambupy',
        'mambupy.api',
        'mambupy.client',
        'mambupy.cli',
    ]
    
    for logger_name in loggers:
        logger = logging.getLogger(logger_name)
        logger.setLevel(level)
        logger.propagate = True


__all__ = [
    'MambuClient',
    'APIConfig',
    'RequestExecutor',
    'AsyncRequestExecutor',
    'BasicAuthCredentials',
    'HttpMethod',
    'ParamsMap',
    'URLHelper',
    'APPLICATION_KEY_PARAM',
    'ApiCallResult',
    'ApiSuccess',
    'ApiFailure',
    'MambuAPIError',
    'HttpStatusError',
    'TransportError',
    'MambuException',
    'ConfigError',
    'MalformedURLError',
    'format_date',
    'setup_logging',
]
