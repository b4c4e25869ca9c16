"""Pytest configuration for cache_headers tests."""
import pytest

from cache_headers import HeaderController


@pytest.fixture
def response_headers():
    """Empty outbound header map."""
    return {}


@pytest.fixture
def make_controller(response_headers):
    """Factory for a controller over the shared response_headers map."""

    def _make(request_headers=None, header_names=None, **kwargs):
        return HeaderController(
            request_headers or {},
            response_headers,
            header_names,
            **kwargs,
        )

    return _make
