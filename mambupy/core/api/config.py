"""
API configuration module.

Provides the configuration object handed to the request executors.
Replaces process-wide settings: build one ``APIConfig`` at startup and
pass it to every executor or client that needs it.
"""
from dataclasses import dataclass, field, replace
from typing import Optional, Dict
import logging
import os

from ..exceptions import ConfigError

ENV_PREFIX = 'MAMBU_'


@dataclass(frozen=True)
class APIConfig:
    """
    Complete API configuration.

    Attributes:
        domain: Tenant host, e.g. ``demo.mambu.com``
        username: API user name for Basic Authentication
        password: API user password
        application_key: Optional key identifying the integration; sent as
            the ``appkey`` parameter on every call when set
        protocol: URL scheme used by ``api_url``
        api_path: Path prefix of the REST API
        user_agent: Value of the ``User-Agent`` header
        timeout: Per-call deadline in seconds; ``None`` waits indefinitely
        log_level: Level applied to the package loggers by the client
    """
    domain: Optional[str] = None
    username: Optional[str] = None
    password: Optional[str] = field(default=None, repr=False)
    application_key: Optional[str] = None
    protocol: str = 'https'
    api_path: str = 'api'
    user_agent: str = 'mambupy/1.0.0'
    timeout: Optional[float] = None
    log_level: int = logging.INFO

    def __post_init__(self):
        if self.protocol not in ('http', 'https'):
            raise ConfigError(f"Unsupported protocol: {self.protocol}")
        if self.timeout is not None and self.timeout <= 0:
            raise ConfigError("timeout must be positive")

    @classmethod
    def default(cls) -> 'APIConfig':
        """Create default configuration."""
        return cls()

    @classmethod
    def from_env(cls, environ: Optional[Dict[str, str]] = None, **kwargs) -> 'APIConfig':
        """
        Create configuration from ``MAMBU_*`` environment variables.

        Reads MAMBU_DOMAIN, MAMBU_USERNAME, MAMBU_PASSWORD, MAMBU_APP_KEY and
        MAMBU_TIMEOUT. Explicit keyword arguments win over the environment.
        """
        env = os.environ if environ is None else environ
        values = {
            'domain': env.get(f'{ENV_PREFIX}DOMAIN'),
            'username': env.get(f'{ENV_PREFIX}USERNAME'),
            'password': env.get(f'{ENV_PREFIX}PASSWORD'),
            'application_key': env.get(f'{ENV_PREFIX}APP_KEY'),
        }
        timeout = env.get(f'{ENV_PREFIX}TIMEOUT')
        if timeout:
            try:
                values['timeout'] = float(timeout)
            except ValueError:
                raise ConfigError(f"{ENV_PREFIX}TIMEOUT must be a number, got {timeout!r}")
        values.update(kwargs)
        return cls(**values)

    def with_application_key(self, application_key: Optional[str]) -> 'APIConfig':
        """Copy of this configuration with another application key."""
        return replace(self, application_key=application_key)

    @property
    def has_credentials(self) -> bool:
        return self.username is not None

    @property
    def base_url(self) -> str:
        """Root URL of the REST API for the configured domain."""
        if not self.domain:
            raise ConfigError("domain is not configured")
        return f"{self.protocol}://{self.domain.strip('/')}/{self.api_path.strip('/')}"

    def api_url(self, path: str) -> str:
        """Absolute URL of an API resource, e.g. ``api_url('clients/123')``."""
        return f"{self.base_url}/{path.lstrip('/')}"
