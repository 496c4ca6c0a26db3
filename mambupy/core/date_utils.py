"""Formats dates into the ISO day format expected by the Mambu API."""
from datetime import date, datetime
from typing import Optional, Union

DATE_FORMAT = "%Y-%m-%d"


def format_date(value: Optional[Union[date, datetime]]) -> Optional[str]:
    """
    Format a date as ``yyyy-MM-dd``.
    
    Datetimes are truncated to their day. ``None`` is passed through so that
    an unset date parameter stays omitted from the request.
    """
    if value is None:
        return None
    return value.strftime(DATE_FORMAT)
