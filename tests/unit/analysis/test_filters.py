"""Unit tests for the filter/visibility resolver."""

import pytest

from certmap.analysis.filters import (
    ViewResolver,
    count_matching,
    matches_text,
    resolve_visible,
    search_suggestions,
    vendor_domains,
    vendor_levels,
)
from certmap.core.types import FilterState, LinkType, Vendor
from certmap.graph.builder import build_flow_elements, build_vendor_graph


@pytest.fixture
def aws_graph(rich_catalog):
    return build_vendor_graph(rich_catalog, Vendor.AWS)


def ids(items):
    return [item.id for item in items]


class TestResolveVisible:
    def test_example_scenario(self, catalog):
        graph = build_flow_elements(catalog.certs, catalog.links)
        visible = resolve_visible(graph, FilterState(level="Associate"))
        assert ids(visible.nodes) == ["a2"]
        assert visible.edges == []

    def test_empty_filters_are_identity(self, aws_graph):
        visible = resolve_visible(aws_graph, FilterState())
        assert visible.nodes == aws_graph.nodes
        assert visible.edges == aws_graph.edges

    def test_hiding_recommended_keeps_required(self, aws_graph):
        visible = resolve_visible(aws_graph, FilterState(show_recommended=False))
        assert ids(visible.nodes) == ids(aws_graph.nodes)
        assert ids(visible.edges) == ["saa-sap"]

    def test_level_uses_display_level(self, aws_graph):
        assert ids(resolve_visible(aws_graph, FilterState(level="Foundational")).nodes) == ["clf"]
        assert resolve_visible(aws_graph, FilterState(level="Fundamentals")).nodes == []
        assert ids(resolve_visible(aws_graph, FilterState(level="Associate")).nodes) == ["saa", "dva", "mla"]

    def test_domain_filter(self, aws_graph):
        visible = resolve_visible(aws_graph, FilterState(domain="Cloud"))
        assert ids(visible.nodes) == ["clf", "saa", "dva", "sap"]
        assert ids(visible.edges) == ["clf-saa", "saa-sap", "dva-sap"]

    def test_edge_needs_both_endpoints(self, aws_graph):
        visible = resolve_visible(aws_graph, FilterState(domain="Security"))
        assert ids(visible.nodes) == ["scs"]
        assert visible.edges == []

    def test_filters_combine(self, aws_graph):
        state = FilterState(level="Associate", domain="Cloud", query="developer")
        assert ids(resolve_visible(aws_graph, state).nodes) == ["dva"]

    def test_no_match_is_not_an_error(self, aws_graph):
        visible = resolve_visible(aws_graph, FilterState(query="mainframe"))
        assert visible.nodes == []
        assert visible.edges == []

    @pytest.mark.parametrize("state", [
        FilterState(),
        FilterState(level="Associate"),
        FilterState(domain="Cloud"),
        FilterState(query="architect"),
    ])
    def test_recommended_toggle_is_monotonic(self, aws_graph, state):
        shown = resolve_visible(aws_graph, state.with_changes(show_recommended=True))
        hidden = resolve_visible(aws_graph, state.with_changes(show_recommended=False))
        visible_ids = shown.node_ids

        assert hidden.edge_ids <= shown.edge_ids
        assert {e.id for e in shown.edges if e.type == LinkType.REQUIRED} == hidden.edge_ids
        assert all(e.source in visible_ids and e.target in visible_ids for e in shown.edges)


class TestTextMatching:
    @pytest.mark.parametrize("query, expected", [
        ("architect", ["saa", "sap"]),
        ("  SAA-C03 ", ["saa"]),
        ("resilient", ["saa"]),
        ("devops", ["dva"]),
        ("data&ai", ["mla"]),
        ("aws", ["clf", "saa", "dva", "mla", "sap", "scs"]),
    ])
    def test_query_fields(self, aws_graph, query, expected):
        assert ids(resolve_visible(aws_graph, FilterState(query=query)).nodes) == expected

    def test_empty_query_matches(self, rich_catalog):
        assert matches_text(rich_catalog.certs[0], "   ")


class TestFilterOptions:
    def test_levels(self, rich_catalog):
        aws = [c for c in rich_catalog.certs if c.vendor == Vendor.AWS]
        assert vendor_levels(aws) == ["All", "Associate", "Foundational", "Professional", "Specialty"]

    def test_domains_skip_missing(self, rich_catalog):
        aws = [c for c in rich_catalog.certs if c.vendor == Vendor.AWS]
        assert vendor_domains(aws) == ["All", "Cloud", "Machine Learning", "Security"]
        azure = [c for c in rich_catalog.certs if c.vendor == Vendor.AZURE]
        assert vendor_domains(azure) == ["All"]

    def test_empty_vendor(self):
        assert vendor_levels([]) == ["All"]
        assert vendor_domains([]) == ["All"]


class TestSuggestions:
    def test_suggestions_in_input_order(self, rich_catalog):
        suggestions = search_suggestions(rich_catalog.certs, "associate")
        assert [s.id for s in suggestions] == ["saa", "dva", "mla"]
        assert suggestions[0].code == "SAA-C03"
        assert suggestions[2].code == "—"

    def test_limit(self, rich_catalog):
        assert len(search_suggestions(rich_catalog.certs, "associate", limit=2)) == 2

    @pytest.mark.parametrize("limit", [0, -1])
    def test_non_positive_limit_has_no_suggestions(self, rich_catalog, limit):
        assert search_suggestions(rich_catalog.certs, "associate", limit=limit) == []

    def test_blank_query_has_no_suggestions(self, rich_catalog):
        assert search_suggestions(rich_catalog.certs, " ") == []

    def test_count_matching(self, rich_catalog):
        assert count_matching(rich_catalog.certs, "") == len(rich_catalog.certs)
        assert count_matching(rich_catalog.certs, "azure") == 1


class TestViewResolver:
    def test_equal_states_share_result(self, aws_graph):
        resolver = ViewResolver(aws_graph)
        first = resolver.resolve(FilterState(level="Associate"))
        assert resolver.resolve(FilterState(level="Associate")) is first
        assert resolver.resolve(FilterState(vendor=Vendor.AZURE, level="Associate")) is first
        assert resolver.resolve(FilterState(level="Specialty")) is not first

    def test_options(self, aws_graph):
        resolver = ViewResolver(aws_graph)
        assert resolver.levels()[0] == "All"
        assert "Cloud" in resolver.domains()
        assert resolver.suggestions("security")[0].id == "scs"

    def test_clear(self, aws_graph):
        resolver = ViewResolver(aws_graph)
        first = resolver.resolve(FilterState())
        resolver.clear()
        assert resolver.cached_states() == 0
        assert resolver.resolve(FilterState()) is not first

    def test_cache_is_bounded(self, aws_graph):
        resolver = ViewResolver(aws_graph, cache_size=2)
        first = resolver.resolve(FilterState(query="a"))
        for query in ("ar", "arc", "arch"):
            resolver.resolve(FilterState(query=query))
        assert resolver.cached_states() == 2
        assert resolver.resolve(FilterState(query="a")) is not first

    def test_query_whitespace_shares_entry(self, aws_graph):
        resolver = ViewResolver(aws_graph)
        first = resolver.resolve(FilterState(query="cloud"))
        assert resolver.resolve(FilterState(query="  cloud ")) is first
        assert resolver.cached_states() == 1
