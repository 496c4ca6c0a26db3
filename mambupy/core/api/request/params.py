"""Ordered request parameters."""
from collections import OrderedDict
from datetime import date
from typing import Optional, Iterator, Tuple
from urllib.parse import urlencode

from ...date_utils import format_date


class ParamsMap(OrderedDict):
    """
    Ordered mapping of parameter names to string values.
    
    A ``None`` value means the parameter is left out of the request
    entirely; an empty string is sent as ``name=``.
    
    Example:
        >>> params = ParamsMap().add_param("fullDetails", "true")
        >>> params.to_url_string()
        'fullDetails=true'
    """
    
    def add_param(self, name: str, value: Optional[str]) -> 'ParamsMap':
        """Adds or replaces a parameter, keeping its original position."""
        self[name] = value
        return self
    
    def add_date_param(self, name: str, value: Optional[date]) -> 'ParamsMap':
        """Adds a date parameter formatted as ``yyyy-MM-dd``."""
        self[name] = format_date(value)
        return self
    
    def wire_items(self) -> Iterator[Tuple[str, str]]:
        """Yields the (name, value) pairs that go on the wire."""
        for name, value in self.items():
            if value is not None:
                yield name, value
    
    def to_url_string(self) -> str:
        """Percent-encoded ``name=value&...`` string of the wire pairs."""
        return urlencode(list(self.wire_items()))
