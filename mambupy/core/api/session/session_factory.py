"""Session factory using Factory Pattern."""
from typing import Optional

import aiohttp
import requests
from requests.adapters import HTTPAdapter


class SessionFactory:
    """Factory for creating HTTP sessions."""

    @staticmethod
    def create_sync_session(user_agent: str) -> requests.Session:
        """Creates a synchronous HTTP session that makes a single attempt."""
        session = requests.Session()
        session.headers['User-Agent'] = user_agent
        session.mount('http://', HTTPAdapter(max_retries=0))
        session.mount('https://', HTTPAdapter(max_retries=0))
        return session

    @staticmethod
    async def create_async_session(
        user_agent: str,
        timeout: Optional[float] = None
    ) -> aiohttp.ClientSession:
        """Creates an asynchronous HTTP session; ``timeout=None`` never expires."""
        return aiohttp.ClientSession(
            headers={'User-Agent': user_agent},
            timeout=aiohttp.ClientTimeout(total=timeout)
        )
