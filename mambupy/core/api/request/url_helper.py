"""URL and form encoding for API requests."""
from typing import List, Mapping, Optional, Tuple
from urllib.parse import urlencode, urlsplit

from ...exceptions import MalformedURLError

SUPPORTED_SCHEMES = ("http", "https")

FORM_CONTENT_TYPE = "application/x-www-form-urlencoded; charset=UTF-8"


class URLHelper:
    """Builds request URLs and form bodies from parameter maps."""

    @staticmethod
    def validate_url(url: str) -> str:
        """
        Checks that the URL has an http(s) scheme and a host.

        Raises:
            MalformedURLError: If the URL cannot be requested
        """
        if not url or not isinstance(url, str):
            raise MalformedURLError(str(url), "empty URL")
        try:
            parts = urlsplit(url)
        except ValueError as e:
            raise MalformedURLError(url, str(e))
        if parts.scheme.lower() not in SUPPORTED_SCHEMES:
            raise MalformedURLError(url, "missing or unsupported scheme")
        if not parts.netloc:
            raise MalformedURLError(url, "missing host")
        return url

    @staticmethod
    def _pairs(params: Optional[Mapping[str, Optional[str]]]) -> List[Tuple[str, str]]:
        if not params:
            return []
        return [(name, value) for name, value in params.items() if value is not None]

    def build_url_with_params(
        self,
        base_url: str,
        params: Optional[Mapping[str, Optional[str]]]
    ) -> str:
        """
        Appends the encoded query string to ``base_url``.

        Pairs keep the caller's insertion order; ``None`` values are skipped.
        """
        self.validate_url(base_url)
        query = urlencode(self._pairs(params))
        if not query:
            return base_url
        separator = "&" if "?" in base_url else "?"
        return f"{base_url}{separator}{query}"

    def build_form_body(
        self,
        params: Optional[Mapping[str, Optional[str]]]
    ) -> List[Tuple[str, str]]:
        """Name/value pairs for an ``application/x-www-form-urlencoded`` body."""
        return self._pairs(params)

    def encode_form_body(self, params: Optional[Mapping[str, Optional[str]]]) -> str:
        """The form body as an encoded string."""
        return urlencode(self.build_form_body(params), encoding="utf-8")
