"""Tests for date formatting."""
from datetime import date, datetime

from mambupy.core.date_utils import DATE_FORMAT, format_date


class TestFormatDate:
    """Test suite for format_date."""
    
    def test_date(self):
        assert format_date(date(2013, 1, 5)) == "2013-01-05"
    
    def test_datetime_truncated(self):
        assert format_date(datetime(2013, 11, 30, 18, 45, 10)) == "2013-11-30"
    
    def test_none(self):
        assert format_date(None) is None
    
    def test_format(self):
        assert DATE_FORMAT == "%Y-%m-%d"
