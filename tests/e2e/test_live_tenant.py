"""
E2E Test: calls against a real Mambu tenant.

Runs only when MAMBU_DOMAIN, MAMBU_USERNAME and MAMBU_PASSWORD are set.
"""
import os
import logging

import pytest

from mambupy import MambuClient, APIConfig, HttpStatusError, setup_logging

pytestmark = pytest.mark.skipif(
    not all(os.environ.get(name) for name in ("MAMBU_DOMAIN", "MAMBU_USERNAME", "MAMBU_PASSWORD")),
    reason="MAMBU_DOMAIN, MAMBU_USERNAME and MAMBU_PASSWORD are required"
)

setup_logging(logging.INFO)


@pytest.fixture(scope="module")
def mambu():
    return MambuClient(APIConfig.from_env())


def test_list_branches(mambu):
    """Test a plain GET returns a JSON array."""
    body = mambu.get("branches", {"limit": "5"})
    
    assert body.lstrip().startswith("[")


def test_unknown_client_is_http_error(mambu):
    """Test an unknown id surfaces the server error body."""
    with pytest.raises(HttpStatusError) as exc_info:
        mambu.get("clients/does-not-exist-0000")
    
    assert exc_info.value.status_code >= 400
    assert "returnCode" in exc_info.value.body
