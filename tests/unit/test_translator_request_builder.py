"""Unit tests for TranslatorRequestBuilder."""

import json

import pytest

from text_translator.implementations.translator_request_builder import TranslatorRequestBuilder
from text_translator.schemas.translator_schemas import TranslatorRequestItem


class TestTranslatorRequestBuilder:
    """Covers URLs, query parameters, headers and bodies."""

    @pytest.fixture
    def builder(self):
        return TranslatorRequestBuilder(api_key="secret-key")

    @pytest.mark.parametrize("api_key", ["", "   "])
    def test_blank_api_key_is_rejected(self, api_key):
        with pytest.raises(ValueError, match="API key is required"):
            TranslatorRequestBuilder(api_key=api_key)

    def test_translate_request_asks_for_alignment(self, builder):
        request = builder.build_translate_request("en", "fr", [TranslatorRequestItem(text="Hello")])

        assert request.method == "POST"
        assert request.url.host == "api.cognitive.microsofttranslator.com"
        assert request.url.path == "/translate"
        assert request.url.params["api-version"] == "3.0"
        assert request.url.params["includeAlignment"] == "true"
        assert request.url.params["includeSentenceLength"] == "true"
        assert request.url.params["from"] == "en"
        assert request.url.params["to"] == "fr"
        assert json.loads(request.content) == [{"text": "Hello"}]

    def test_requests_carry_key_and_trace_headers(self, builder):
        request = builder.build_detect_request([TranslatorRequestItem(text="Hallo")])

        assert request.headers["Ocp-Apim-Subscription-Key"] == "secret-key"
        assert request.headers["Content-Type"] == "application/json"
        assert request.headers["X-ClientTraceId"]
        assert "Ocp-Apim-Subscription-Region" not in request.headers

    def test_trace_id_is_unique_per_request(self, builder):
        first = builder.build_detect_request([TranslatorRequestItem(text="a")])
        second = builder.build_detect_request([TranslatorRequestItem(text="a")])

        assert first.headers["X-ClientTraceId"] != second.headers["X-ClientTraceId"]

    def test_region_header_is_sent_when_configured(self):
        builder = TranslatorRequestBuilder(api_key="secret-key", region="westeurope")

        request = builder.build_translate_request("en", "de", [])

        assert request.headers["Ocp-Apim-Subscription-Region"] == "westeurope"
        assert json.loads(request.content) == []

    def test_detect_request(self, builder):
        request = builder.build_detect_request([TranslatorRequestItem(text="Hallo"), TranslatorRequestItem()])

        assert request.url.path == "/detect"
        assert dict(request.url.params) == {"api-version": "3.0"}
        assert json.loads(request.content) == [{"text": "Hallo"}, {"text": ""}]

    def test_languages_request_does_not_send_key(self, builder):
        request = builder.build_languages_request()

        assert request.method == "GET"
        assert request.url.path == "/languages"
        assert request.url.params["scope"] == "translation"
        assert "Ocp-Apim-Subscription-Key" not in request.headers

    def test_custom_endpoint_and_version(self):
        builder = TranslatorRequestBuilder(api_key="k", endpoint="https://translator.example.test/", api_version="3.1")

        request = builder.build_detect_request([])

        assert str(request.url).startswith("https://translator.example.test/detect?")
        assert request.url.params["api-version"] == "3.1"
