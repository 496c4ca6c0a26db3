"""
Request executor for the Mambu REST API.

Turns a URL, an ordered parameter map and an HTTP method into a single
Basic-Authenticated request and classifies the response.

Example:
    >>> executor = RequestExecutor(APIConfig(username="api", password="secret"))
    >>> body = executor.execute_request(
    ...     "https://demo.mambu.com/api/clients/123",
    ...     ParamsMap().add_param("fullDetails", "true"),
    ...     HttpMethod.GET
    ... )
"""
import logging
from typing import Mapping, Optional, Tuple, Union

import requests

from ..auth import BasicAuthCredentials
from ..config import APIConfig
from ..errors import HttpStatusError, TransportError
from ..result import ApiCallResult, ApiFailure, ApiSuccess
from ..session import SessionFactory
from ...exceptions import MalformedURLError
from ...logging import get_logger
from .http_method import HttpMethod
from .params import ParamsMap
from .response_handler import ResponseHandler
from .url_helper import FORM_CONTENT_TYPE, URLHelper

APPLICATION_KEY_PARAM = 'appkey'

Params = Optional[Mapping[str, Optional[str]]]


class BaseRequestExecutor:
    """
    State and rules shared by the blocking and asynchronous executors.

    Holds the credentials, the configuration and the URL helper, injects the
    application key and maps outcomes onto ``ApiCallResult``.
    """

    def __init__(self, config: Optional[APIConfig] = None, url_helper: Optional[URLHelper] = None):
        self._config = config or APIConfig.default()
        self._url_helper = url_helper or URLHelper()
        self._credentials = BasicAuthCredentials()
        if self._config.has_credentials:
            self._credentials.set_authorization(self._config.username, self._config.password or "")
        self._logger = get_logger('mambupy.api')
        # Root logger unconfigured; otherwise inherit its level
        if not logging.getLogger().handlers:
            self._logger.setLevel(self._config.log_level)

    @property
    def config(self) -> APIConfig:
        return self._config

    @property
    def credentials(self) -> BasicAuthCredentials:
        return self._credentials

    def set_authorization(self, username: str, password: str) -> None:
        """Sets or rotates the credentials used by subsequent calls."""
        self._credentials.set_authorization(username, password)

    @staticmethod
    def _split_args(
        params: Union[Params, HttpMethod],
        method: Optional[HttpMethod]
    ) -> Tuple[Params, HttpMethod]:
        # execute_request(url, method) form
        if isinstance(params, HttpMethod):
            return None, params
        return params, method or HttpMethod.GET

    def _prepare_params(self, params: Params) -> ParamsMap:
        """Copies the caller's parameters and adds the application key."""
        prepared = ParamsMap(params or {})
        application_key = self._config.application_key
        if application_key is not None and APPLICATION_KEY_PARAM not in prepared:
            prepared[APPLICATION_KEY_PARAM] = application_key
            self._logger.debug("Added application key to request parameters")
        return prepared

    def _build_target(self, url: str, params: ParamsMap, method: HttpMethod) -> str:
        """Final request URL; only GET carries parameters in the query string."""
        if method is HttpMethod.GET and params:
            return self._url_helper.build_url_with_params(url, params)
        return self._url_helper.validate_url(url)

    def _classify(self, method: HttpMethod, status: int, body: str) -> ApiCallResult:
        if ResponseHandler.is_success(method, status):
            self._logger.info(f"{method.value} status={status}")
            self._logger.debug(f"Response={body[:1000] if len(body) > 1000 else body}")
            return ApiSuccess(body=body, status_code=status)

        self._logger.warning(f"{method.value} error status={status} response={body}")
        return ApiFailure(HttpStatusError(status, body))

    def _transport_failure(self, error: BaseException) -> ApiFailure:
        if isinstance(error, MalformedURLError):
            self._logger.error(f"Malformed URL: {error}")
        else:
            self._logger.error(f"Network error: {error}")
        return ApiFailure(TransportError(error))


class RequestExecutor(BaseRequestExecutor):
    """
    Blocking request executor.

    Every call opens its own ``requests`` session, performs exactly one
    attempt and closes the session. The executor itself can be shared
    between threads.
    """

    def execute_request(
        self,
        url: str,
        params: Union[Params, HttpMethod] = None,
        method: Optional[HttpMethod] = None
    ) -> str:
        """
        Executes a request and returns the response body.

        Args:
            url: Absolute resource URL
            params: Ordered parameters (``None`` values are omitted), or the
                method when called as ``execute_request(url, method)``
            method: ``HttpMethod.GET`` (default) or ``HttpMethod.POST``

        Returns:
            The body text exactly as received

        Raises:
            HttpStatusError: The server answered with a non-success status
            TransportError: The request could not be completed
        """
        return self.execute(url, params, method).unwrap()

    def execute(
        self,
        url: str,
        params: Union[Params, HttpMethod] = None,
        method: Optional[HttpMethod] = None
    ) -> ApiCallResult:
        """Executes a request and returns an ``ApiSuccess`` or ``ApiFailure``."""
        params, method = self._split_args(params, method)
        prepared_params = self._prepare_params(params)

        try:
            status, body = self._send(url, prepared_params, method)
        except (MalformedURLError, requests.RequestException) as e:
            return self._transport_failure(e)

        return self._classify(method, status, body)

    def _build_request(self, url: str, params: ParamsMap, method: HttpMethod) -> requests.Request:
        target = self._build_target(url, params, method)

        if method is HttpMethod.GET:
            self._logger.debug(f"GET {url} params={list(params.keys())}")
            return requests.Request('GET', target, auth=self._credentials)
        if method is HttpMethod.POST:
            self._logger.debug(f"POST {url} params={list(params.keys())}")
            if not params:
                return requests.Request('POST', target, auth=self._credentials)
            # Non-empty map gets a form entity even if every value is None
            return requests.Request(
                'POST',
                target,
                auth=self._credentials,
                headers={'Content-Type': FORM_CONTENT_TYPE},
                data=self._url_helper.encode_form_body(params)
            )
        raise ValueError(f"Unsupported HTTP method: {method}")

    def _send(self, url: str, params: ParamsMap, method: HttpMethod) -> Tuple[int, str]:
        request = self._build_request(url, params, method)

        session = SessionFactory.create_sync_session(self._config.user_agent)
        try:
            prepared = session.prepare_request(request)
            settings = session.merge_environment_settings(prepared.url, {}, None, None, None)
            response = session.send(prepared, timeout=self._config.timeout, **settings)
            return response.status_code, ResponseHandler.read_body(response)
        finally:
            session.close()
