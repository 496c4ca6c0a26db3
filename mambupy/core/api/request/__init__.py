"""Request building, execution and response handling."""
from .http_method import HttpMethod
from .params import ParamsMap
from .url_helper import URLHelper
from .response_handler import ResponseHandler
from .request_executor import RequestExecutor, APPLICATION_KEY_PARAM

__all__ = [
    'HttpMethod',
    'ParamsMap',
    'URLHelper',
    'ResponseHandler',
    'RequestExecutor',
    'APPLICATION_KEY_PARAM',
]
