"""
MambuClient - High-level client for the Mambu REST API.

Example:
    >>> config = APIConfig(domain="demo.mambu.com", username="api", password="secret")
    >>> mambu = MambuClient(config)
    >>> body = mambu.get("clients/123", {"fullDetails": "true"})
"""
from typing import Mapping, Optional

from .core.api import (
    APIConfig,
    ApiCallResult,
    HttpMethod,
    RequestExecutor,
)
from .core.logging import get_logger

logger = get_logger(__name__)

Params = Optional[Mapping[str, Optional[str]]]


class MambuClient:
    """
    Builds resource URLs for a tenant and runs them through a ``RequestExecutor``.

    Resource services (clients, loans, savings...) sit on top of this class:
    they only need a path, the parameters and the method.
    """

    def __init__(self, config: Optional[APIConfig] = None, executor: Optional[RequestExecutor] = None):
        self._config = config or APIConfig.from_env()
        self._executor = executor or RequestExecutor(self._config)
        logger.debug(f"Client ready for {self._config.domain}")

    @property
    def config(self) -> APIConfig:
        return self._config

    @property
    def executor(self) -> RequestExecutor:
        return self._executor

    def set_authorization(self, username: str, password: str) -> None:
        """Rotates the credentials used by subsequent calls."""
        self._executor.set_authorization(username, password)

    def url(self, path: str) -> str:
        """Absolute URL of an API resource."""
        return self._config.api_url(path)

    def execute(self, path: str, params: Params = None, method: HttpMethod = HttpMethod.GET) -> ApiCallResult:
        """Runs a call and returns the result instead of raising."""
        return self._executor.execute(self.url(path), params, method)

    def get(self, path: str, params: Params = None) -> str:
        """GET a resource and return the body."""
        return self._executor.execute_request(self.url(path), params, HttpMethod.GET)

    def post(self, path: str, params: Params = None) -> str:
        """POST a form to a resource and return the body."""
        return self._executor.execute_request(self.url(path), params, HttpMethod.POST)

    def __repr__(self) -> str:
        return f"MambuClient(domain={self._config.domain!r})"
