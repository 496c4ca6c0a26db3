"""HTTP methods supported by the request executor."""
from enum import Enum


class HttpMethod(Enum):
    """HTTP request methods."""
    GET = "GET"
    POST = "POST"
