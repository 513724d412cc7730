"""Test utilities for onion applications.

    from onion.testing import TestClient
"""

from onion.testing.client import TestClient, TestResponse

__all__ = [
    "TestClient",
    "TestResponse",
]
