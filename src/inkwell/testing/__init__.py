"""Test utilities for inkwell applications::

    from inkwell.testing import TestClient
"""

from inkwell.testing.client import ResponseAborted, TestClient

__all__ = ["ResponseAborted", "TestClient"]
