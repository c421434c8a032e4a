"""Unit tests for RetrievalService: query shape, ordering, and reporting."""

from __future__ import annotations

import logging
from typing import Any

import pytest

from conftest import FakeVectorStore
from docsearch.errors import QueryError
from docsearch.models import QueryMatch
from docsearch.retrieval.retriever import RetrievalService


SAMPLE_HITS: list[dict[str, Any]] = [
    {
        "url": "https://www.loveandlemons.com/homemade-pizza/",
        "content": "Homemade pizza dough recipe with yeast, flour and olive oil.",
        "certainty": 0.85,
    },
    {
        "url": "https://stardewvalleywiki.com/Crops",
        "content": "Crops are plants grown from seeds.",
        "certainty": 0.4,
    },
]


@pytest.fixture()
def store() -> FakeVectorStore:
    return FakeVectorStore(hits=SAMPLE_HITS)


@pytest.fixture()
def service(store: FakeVectorStore) -> RetrievalService:
    return RetrievalService(store, collection="DocumentationPage", min_certainty=0.7)


class TestSearch:
    def test_query_parameters(self, store: FakeVectorStore, service: RetrievalService) -> None:
        service.search("pizza dough recipe")
        assert store.last_query == {
            "collection": "DocumentationPage",
            "concepts": ["pizza dough recipe"],
            "certainty": 0.7,
            "fields": ["url", "content"],
        }

    def test_default_threshold(self, store: FakeVectorStore) -> None:
        RetrievalService(store).search("anything")
        assert store.last_query is not None
        assert store.last_query["certainty"] == 0.7

    def test_pizza_scenario(self, service: RetrievalService) -> None:
        matches = service.search("pizza dough recipe")
        assert matches == [
            QueryMatch(
                url="https://www.loveandlemons.com/homemade-pizza/",
                content=SAMPLE_HITS[0]["content"],
                certainty=0.85,
            )
        ]

    def test_matches_respect_threshold(self, service: RetrievalService) -> None:
        assert all(m.certainty >= 0.7 for m in service.search("anything"))

    def test_store_order_preserved(self) -> None:
        hits = [
            {"url": "https://b", "content": "b", "certainty": 0.75},
            {"url": "https://a", "content": "a", "certainty": 0.95},
        ]
        service = RetrievalService(FakeVectorStore(hits=hits))
        assert [m.url for m in service.search("q")] == ["https://b", "https://a"]

    def test_empty_result_is_not_an_error(self) -> None:
        service = RetrievalService(FakeVectorStore(hits=[]))
        assert service.search("nothing matches") == []

    def test_certainty_rounding_above_one_is_accepted(self) -> None:
        hits = [{"url": "https://a", "content": "x", "certainty": 1.0000000596046448}]
        matches = RetrievalService(FakeVectorStore(hits=hits)).search("x")

        assert [m.url for m in matches] == ["https://a"]
        assert "Certainty: 1.00" in RetrievalService.report("x", matches)

    def test_search_logs_prompt_at_debug_only(self, service: RetrievalService, caplog: pytest.LogCaptureFixture) -> None:
        caplog.set_level(logging.DEBUG, logger="docsearch.retrieval.retriever")
        service.search("pizza dough recipe")

        assert caplog.records
        assert all(r.levelno == logging.DEBUG for r in caplog.records if r.name == "docsearch.retrieval.retriever")
        assert "Searching for relevant documentation" not in caplog.text

    def test_missing_fields_default_to_empty(self) -> None:
        service = RetrievalService(FakeVectorStore(hits=[{"url": None, "content": None, "certainty": 0.9}]))
        match = service.search("q")[0]
        assert match.url == ""
        assert match.content == ""

    def test_query_failure_propagates(self, store: FakeVectorStore, service: RetrievalService) -> None:
        store.fail_on.add("near_text")
        with pytest.raises(QueryError):
            service.search("pizza")


class TestReport:
    def test_ranked_report(self, service: RetrievalService) -> None:
        matches = service.search("pizza dough recipe")
        text = RetrievalService.report("pizza dough recipe", matches)

        assert 'Found 1 relevant documentation link(s) for prompt: "pizza dough recipe"' in text
        assert " 1. URL: https://www.loveandlemons.com/homemade-pizza/" in text
        assert "Certainty: 0.85" in text

    def test_certainty_rounded_to_two_places(self) -> None:
        matches = [
            QueryMatch(url="https://a", certainty=0.91234),
            QueryMatch(url="https://b", certainty=0.7),
        ]
        text = RetrievalService.report("q", matches)
        assert " 1. URL: https://a\n    Certainty: 0.91" in text
        assert " 2. URL: https://b\n    Certainty: 0.70" in text

    def test_empty_report(self) -> None:
        text = RetrievalService.report("knitting", [])
        assert "No relevant documentation found for: knitting" in text
        assert "Found" not in text
