"""
Test fixtures and utilities for the translator test suite.

Unit tests only: the service is replaced by httpx.MockTransport responses
built with the factories below.
"""

from .factories import DetectResponseFactory, TranslateResponseFactory

__all__ = [
    "DetectResponseFactory",
    "TranslateResponseFactory",
]
