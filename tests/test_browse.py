"""Tests for listing filters, sort orders and search suggestions."""

from __future__ import annotations

import pytest

from src.marketmatch.browse import (
    ProviderFilters,
    RequestFilters,
    browse_providers,
    browse_requests,
    provider_suggestions,
    request_suggestions,
    sort_providers,
    sort_requests,
)
from src.marketmatch.engine import load_sample_providers, load_sample_requests
from src.marketmatch.models import Provider


@pytest.fixture
def providers():
    return load_sample_providers()


@pytest.fixture
def requests():
    return load_sample_requests()


@pytest.fixture
def ahmed(providers):
    return next(p for p in providers if p.id == "prov-ahmed-hassan")


def _ids(items):
    return [getattr(i, "request", i).id for i in items]


class TestProviderFilters:
    def test_default_sorted_by_rating(self, providers):
        assert _ids(browse_providers(providers)) == [
            "prov-ahmed-hassan",
            "prov-mona-adel",
            "prov-karim-saleh",
            "prov-yasmin-farouk",
            "prov-omar-nabil",
        ]

    def test_search_by_skill(self, providers):
        result = browse_providers(providers, ProviderFilters(search_query="PLUMB"))
        assert set(_ids(result)) == {
            "prov-ahmed-hassan", "prov-mona-adel", "prov-yasmin-farouk",
        }

    def test_search_by_name(self, providers):
        result = browse_providers(providers, ProviderFilters(search_query="karim"))
        assert _ids(result) == ["prov-karim-saleh"]

    def test_category(self, providers):
        result = browse_providers(providers, ProviderFilters(category="electrical"))
        assert _ids(result) == ["prov-karim-saleh"]

    def test_governorate_and_rating(self, providers):
        result = browse_providers(
            providers, ProviderFilters(governorate="Cairo", min_rating=4.7),
        )
        assert _ids(result) == ["prov-ahmed-hassan"]

    def test_response_time(self, providers):
        result = browse_providers(providers, ProviderFilters(response_time="4h"))
        assert _ids(result) == ["prov-ahmed-hassan", "prov-mona-adel"]

    def test_available_only(self, providers):
        result = browse_providers(providers, ProviderFilters(availability="available"))
        assert len(result) == 3

    def test_price_range_overlap(self, providers):
        result = browse_providers(
            providers,
            ProviderFilters(price_range={"min": 0, "max": 120}, sort_by="price_low"),
        )
        assert _ids(result) == ["prov-omar-nabil", "prov-yasmin-farouk"]

    def test_unknown_response_time(self, providers):
        silent = Provider(id="prov-silent", location={"governorate": "Cairo"})
        pool = [silent, *providers]
        result = browse_providers(pool, ProviderFilters(response_time="24h"))
        assert "prov-silent" not in _ids(result)
        assert _ids(sort_providers(pool, "response"))[-1] == "prov-silent"

    def test_verification_level(self, providers):
        result = browse_providers(providers, ProviderFilters(verification_level="approved"))
        assert _ids(result) == ["prov-ahmed-hassan"]


class TestProviderSort:
    @pytest.mark.parametrize(
        "sort_by, expected",
        [
            ("response", ["prov-ahmed-hassan", "prov-mona-adel", "prov-karim-saleh",
                          "prov-yasmin-farouk", "prov-omar-nabil"]),
            ("experience", ["prov-ahmed-hassan", "prov-karim-saleh", "prov-mona-adel",
                            "prov-yasmin-farouk", "prov-omar-nabil"]),
            ("price_high", ["prov-karim-saleh", "prov-ahmed-hassan", "prov-mona-adel",
                            "prov-yasmin-farouk", "prov-omar-nabil"]),
            ("distance", ["prov-ahmed-hassan", "prov-mona-adel", "prov-karim-saleh",
                          "prov-yasmin-farouk", "prov-omar-nabil"]),
        ],
    )
    def test_orders(self, providers, sort_by, expected):
        assert _ids(sort_providers(providers, sort_by)) == expected

    def test_unknown_key(self, providers):
        with pytest.raises(ValueError):
            sort_providers(providers, "popularity")


class TestRequestBrowse:
    def test_matched_for_provider(self, requests, ahmed):
        result = browse_requests(requests, provider=ahmed)
        assert _ids(result) == [
            "req-leaking-pipe", "req-heater-install", "req-bathroom-pipes",
        ]

    def test_closed_requests_hidden(self, requests, ahmed):
        result = browse_requests(
            requests, RequestFilters(show_matched_only=False), provider=ahmed,
        )
        assert "req-garden-fountain" not in _ids(result)

    def test_no_provider_matched_only_is_empty(self, requests):
        assert browse_requests(requests) == []

    def test_no_provider_recent(self, requests):
        result = browse_requests(
            requests, RequestFilters(show_matched_only=False, sort_by="recent"),
        )
        assert _ids(result) == [
            "req-leaking-pipe", "req-heater-install",
            "req-bathroom-pipes", "req-rewire-flat",
        ]
        assert all(m.score == 0.0 for m in result)

    def test_urgent_sort_is_stable(self, requests, ahmed):
        result = browse_requests(
            requests,
            RequestFilters(show_matched_only=False, sort_by="urgent"),
            provider=ahmed,
        )
        assert _ids(result) == [
            "req-leaking-pipe", "req-heater-install",
            "req-rewire-flat", "req-bathroom-pipes",
        ]

    def test_fewest_offers_first(self, requests, ahmed):
        result = browse_requests(
            requests,
            RequestFilters(show_matched_only=False, sort_by="offers"),
            provider=ahmed,
        )
        assert _ids(result) == [
            "req-rewire-flat", "req-bathroom-pipes",
            "req-leaking-pipe", "req-heater-install",
        ]

    def test_budget_filter_skips_requests_without_budget(self, requests, ahmed):
        result = browse_requests(
            requests,
            RequestFilters(
                show_matched_only=False,
                budget_range={"min": 0, "max": 200},
                sort_by="budget_high",
            ),
            provider=ahmed,
        )
        assert _ids(result) == ["req-bathroom-pipes", "req-rewire-flat"]

    def test_urgency_filter(self, requests, ahmed):
        result = browse_requests(requests, RequestFilters(urgency="asap"), provider=ahmed)
        assert _ids(result) == ["req-leaking-pipe"]
        assert result[0].score == pytest.approx(1.0)

    def test_unknown_key(self):
        with pytest.raises(ValueError):
            sort_requests([], "nearest")


class TestSuggestions:
    def test_provider_suggestions_limited(self, providers):
        assert provider_suggestions(providers, "a") == [
            "Ahmed", "Hassan", "pipe-repair", "water-heaters", "Mona",
        ]

    def test_request_suggestions(self, requests):
        assert request_suggestions(requests, "pipe") == [
            "Leaking kitchen pipe", "pipe-repair", "Bathroom pipe replacement",
        ]

    def test_empty_query(self, providers, requests):
        assert provider_suggestions(providers, "") == []
        assert request_suggestions(requests, "") == []
