"""Response handler for API responses."""
from typing import Optional

from .http_method import HttpMethod

SUCCESS_STATUSES = {
    HttpMethod.GET: frozenset({200}),
    HttpMethod.POST: frozenset({200, 201}),
}

DEFAULT_CHARSET = "utf-8"


class ResponseHandler:
    """Classifies response statuses and decodes response bodies."""
    
    @staticmethod
    def is_success(method: HttpMethod, status: int) -> bool:
        """GET succeeds on 200 only, POST on 200 or 201."""
        return status in SUCCESS_STATUSES[method]
    
    @staticmethod
    def charset_from_content_type(content_type: Optional[str]) -> Optional[str]:
        """The ``charset`` parameter of a Content-Type header, if declared."""
        if not content_type:
            return None
        for param in content_type.split(";")[1:]:
            name, _, value = param.strip().partition("=")
            if name.strip().lower() == "charset":
                return value.strip().strip("\"'") or None
        return None
    
    @staticmethod
    def decode_body(content: Optional[bytes], charset: Optional[str] = None) -> str:
        """Decodes a raw body; no entity gives an empty string."""
        if not content:
            return ""
        try:
            return content.decode(charset or DEFAULT_CHARSET, errors="replace")
        except LookupError:
            # Unknown charset name
            return content.decode(DEFAULT_CHARSET, errors="replace")
    
    @staticmethod
    def read_body(response) -> str:
        """
        Reads the full body of a ``requests`` response.
        
        Only a charset declared in Content-Type is used. ``response.encoding``
        is ignored because requests assumes ISO-8859-1 for undeclared text.
        """
        charset = ResponseHandler.charset_from_content_type(response.headers.get("Content-Type"))
        return ResponseHandler.decode_body(response.content, charset)
