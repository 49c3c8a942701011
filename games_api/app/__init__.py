"""
Application package for the Games API.

Layout follows the usual split: ``core`` (settings, logging, errors and
the document store), ``schemas`` (pydantic models), ``services``
(operations on the games collection) and ``api/v1`` (FastAPI routes).
"""

from .main import app  # noqa: F401
