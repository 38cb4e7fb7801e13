"""
Unit test fixtures with mocked transport.

Unit tests should be:
- Fast (no network)
- Isolated (httpx.MockTransport instead of the real service)
- Deterministic (no flakiness)
"""

import json

import httpx
import pytest

from text_translator.implementations.microsoft_translator import MicrosoftTranslator
from text_translator.implementations.translator_pre_processor import TranslatorPreProcessor
from text_translator.services.alignment.document_assembler import DocumentAssembler


class RecordingHandler:
    """MockTransport handler that records requests and replays canned responses."""

    def __init__(self, responses: list[httpx.Response]):
        self.responses = list(responses)
        self.requests: list[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        return self.responses.pop(0)

    def body(self, index: int = 0):
        return json.loads(self.requests[index].content)


@pytest.fixture
def pre_processor():
    return TranslatorPreProcessor()


@pytest.fixture
def assembler(pre_processor):
    return DocumentAssembler(pre_processor)


@pytest.fixture
def make_translator():
    """Factory returning (translator, handler) wired to a mock transport."""

    def _make(*responses: httpx.Response, **kwargs) -> tuple[MicrosoftTranslator, RecordingHandler]:
        handler = RecordingHandler(list(responses))
        client = httpx.AsyncClient(transport=httpx.MockTransport(handler))
        translator = MicrosoftTranslator(api_key="test-key", http_client=client, **kwargs)
        return translator, handler

    return _make
