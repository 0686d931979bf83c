"""Test utilities for urlshort applications.

    from urlshort.testing import TestClient, make_request
"""

from urlshort.testing.client import TestClient, make_request

__all__ = ["TestClient", "make_request"]
