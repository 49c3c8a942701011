"""
Top-level package for the Games API.

The HTTP service lives in ``games_api.app`` and a small HTTP client for
it in ``games_api.client``.
"""

__all__ = []
