"""
Unit tests for locale utilities
"""

import pytest
from unittest.mock import Mock

from simple_loc.utils.language import (
    get_accept_language,
    match_language,
    normalize_language,
    parse_accept_language_header,
)

AVAILABLE = ["de", "en", "pt-BR"]


def make_request(headers=None, query=None):
    request = Mock()
    request.headers = headers or {}
    request.query_params = query or {}
    return request


class TestNormalizeLanguage:
    @pytest.mark.parametrize(
        "raw, expected",
        [
            ("en", "en"),
            ("EN", "en"),
            ("en-us", "en-US"),
            ("pt_BR", "pt-BR"),
            ("de;q=0.8", "de"),
            ("fr_FR.UTF-8", "fr-FR"),
            ("  ko  ", "ko"),
        ],
    )
    def test_normalization(self, raw, expected):
        assert normalize_language(raw) == expected

    @pytest.mark.parametrize("raw", [None, "", "   ", "-"])
    def test_empty_input(self, raw):
        assert normalize_language(raw) is None


class TestMatchLanguage:
    def test_exact_match(self):
        assert match_language("pt_br", AVAILABLE) == "pt-BR"

    def test_primary_subtag_match(self):
        assert match_language("de-CH", AVAILABLE) == "de"
        assert match_language("pt", AVAILABLE) == "pt-BR"

    def test_no_match(self):
        assert match_language("ja", AVAILABLE) is None
        assert match_language(None, AVAILABLE) is None


class TestAcceptLanguage:
    def test_parse_header_orders_by_quality(self):
        assert parse_accept_language_header("en;q=0.5, de, fr;q=0.8") == ["de", "fr", "en"]

    def test_parse_header_ignores_wildcards_and_bad_quality(self):
        assert parse_accept_language_header("*, de;q=abc") == ["de"]

    def test_parse_empty_header(self):
        assert parse_accept_language_header("") == []

    def test_header_selects_first_available(self):
        request = make_request(headers={"Accept-Language": "ja, de-AT;q=0.9, en;q=0.8"})
        assert get_accept_language(request, AVAILABLE, "en") == "de"

    def test_query_param_override(self):
        request = make_request(headers={"Accept-Language": "de"}, query={"locale": "pt-br"})
        assert get_accept_language(request, AVAILABLE, "en") == "pt-BR"

    def test_unknown_query_param_falls_through_to_header(self):
        request = make_request(headers={"Accept-Language": "de"}, query={"lang": "ja"})
        assert get_accept_language(request, AVAILABLE, "en") == "de"

    def test_missing_header_uses_default(self):
        assert get_accept_language(make_request(), AVAILABLE, "en") == "en"
