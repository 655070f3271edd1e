"""Unit tests for the track grouping view."""

from certmap.analysis.tracks import group_by_track
from certmap.core.types import Level, Vendor
from certmap.graph.builder import select_vendor


class TestGroupByTrack:
    def test_groups_in_domain_order(self, rich_catalog):
        certs, _ = select_vendor(rich_catalog, Vendor.AWS)
        groups = group_by_track(certs)

        assert [g.domain for g in groups] == ["Cloud", "Machine Learning", "Security"]
        cloud = groups[0]
        assert list(cloud.levels) == [Level.FUNDAMENTALS, Level.ASSOCIATE, Level.PROFESSIONAL_EXPERT]
        assert [c.id for c in cloud.levels[Level.ASSOCIATE]] == ["saa", "dva"]
        assert cloud.count == 4

    def test_single_domain(self, rich_catalog):
        certs, _ = select_vendor(rich_catalog, Vendor.AWS)
        groups = group_by_track(certs, domain="Security")
        assert [g.domain for g in groups] == ["Security"]

    def test_query_drops_empty_groups(self, rich_catalog):
        certs, _ = select_vendor(rich_catalog, Vendor.AWS)
        groups = group_by_track(certs, query="machine")
        assert [g.domain for g in groups] == ["Machine Learning"]

    def test_certs_without_domain_have_no_track(self, rich_catalog):
        certs, _ = select_vendor(rich_catalog, Vendor.AZURE)
        assert group_by_track(certs) == []
