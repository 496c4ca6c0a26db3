"""
Async request executor.

Same contract as ``RequestExecutor`` on top of ``aiohttp``: one fresh
``ClientSession`` per call, a single attempt, no timeout unless the
configuration sets one.

Example:
    >>> executor = AsyncRequestExecutor(APIConfig(username="api", password="secret"))
    >>> body = await executor.execute_request(
    ...     "https://demo.mambu.com/api/loans",
    ...     {"accountHolderKey": "abc123"},
    ...     HttpMethod.POST
    ... )
"""
import asyncio
from typing import Optional, Tuple, Union

import aiohttp
import yarl
from requests.utils import requote_uri

from .request import HttpMethod, ParamsMap, ResponseHandler
from .request.url_helper import FORM_CONTENT_TYPE
from .request.request_executor import BaseRequestExecutor, Params
from .result import ApiCallResult
from .session import SessionFactory
from ..exceptions import MalformedURLError


class AsyncRequestExecutor(BaseRequestExecutor):
    """Asynchronous request executor."""

    async def execute_request(
        self,
        url: str,
        params: Union[Params, HttpMethod] = None,
        method: Optional[HttpMethod] = None
    ) -> str:
        """
        Executes a request and returns the response body.

        Raises:
            HttpStatusError: The server answered with a non-success status
            TransportError: The request could not be completed
        """
        result = await self.execute(url, params, method)
        return result.unwrap()

    async def execute(
        self,
        url: str,
        params: Union[Params, HttpMethod] = None,
        method: Optional[HttpMethod] = None
    ) -> ApiCallResult:
        """Executes a request and returns an ``ApiSuccess`` or ``ApiFailure``."""
        params, method = self._split_args(params, method)
        prepared_params = self._prepare_params(params)

        try:
            status, body = await self._send(url, prepared_params, method)
        except (MalformedURLError, aiohttp.ClientError, asyncio.TimeoutError) as e:
            return self._transport_failure(e)

        return self._classify(method, status, body)

    async def _send(self, url: str, params: ParamsMap, method: HttpMethod) -> Tuple[int, str]:
        target = self._build_target(url, params, method)
        headers = self._credentials.authorization_header()
        data = None

        if method is HttpMethod.POST and params:
            data = self._url_helper.encode_form_body(params)
            headers['Content-Type'] = FORM_CONTENT_TYPE
        elif method not in (HttpMethod.GET, HttpMethod.POST):
            raise ValueError(f"Unsupported HTTP method: {method}")

        self._logger.debug(f"{method.value} {url} params={list(params.keys())}")

        session = await SessionFactory.create_async_session(
            self._config.user_agent,
            self._config.timeout
        )
        try:
            # Quote the caller's path like requests does; existing escapes are kept
            async with session.request(
                method.value,
                yarl.URL(requote_uri(target), encoded=True),
                headers=headers,
                data=data
            ) as response:
                content = await response.read()
                return response.status, ResponseHandler.decode_body(content, response.charset)
        finally:
            await session.close()
