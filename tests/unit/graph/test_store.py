"""Unit tests for the rustworkx-backed CertGraph."""

import pytest

from certmap.core.errors import IntegrityFault
from certmap.core.types import Cert, CertLink
from certmap.graph.store import CertGraph


@pytest.fixture
def graph(rich_catalog):
    return CertGraph.from_catalog(rich_catalog)


def cert(cert_id: str) -> Cert:
    return Cert.model_validate(
        {"id": cert_id, "vendor": "AWS", "level": "Associate", "title": cert_id, "roles": ["General"]}
    )


class TestCertGraph:
    def test_counts_and_stats(self, graph):
        stats = graph.get_stats()
        assert stats["total_certs"] == 7
        assert stats["total_links"] == 5
        assert stats["links_by_type"] == {"required": 1, "recommended": 4}
        assert stats["orphans"] == 1  # mla

    def test_prerequisites(self, graph):
        assert graph.prerequisites("sap") == {"saa", "clf", "dva", "az900"}
        assert graph.prerequisites("sap", required_only=True) == {"saa"}
        assert graph.prerequisites("clf") == {"az900"}
        assert graph.prerequisites("unknown") == set()

    def test_unlocks(self, graph):
        assert graph.unlocks("clf") == {"saa", "sap", "scs"}
        assert graph.unlocks("clf", required_only=True) == set()
        assert graph.unlocks("saa", required_only=True) == {"sap"}

    def test_learning_path_is_topological_and_stable(self, graph):
        path = graph.learning_path("sap")
        assert path == ["dva", "az900", "clf", "saa", "sap"]
        assert graph.learning_path("sap") == path

    def test_learning_path_required_only(self, graph):
        assert graph.learning_path("sap", required_only=True) == ["saa", "sap"]
        assert graph.learning_path("mla") == ["mla"]
        assert graph.learning_path("missing") == []

    def test_cycle_is_a_fault(self):
        graph = CertGraph()
        graph.add_cert(cert("a"))
        graph.add_cert(cert("b"))
        graph.add_link(CertLink(id="ab", source_id="a", target_id="b", type="required"))
        graph.add_link(CertLink(id="ba", source_id="b", target_id="a", type="required"))
        with pytest.raises(IntegrityFault, match="cycle"):
            graph.learning_path("a")

    def test_cycle_behind_an_entry_cert_is_a_fault(self):
        graph = CertGraph()
        for cert_id in ("x", "a", "b"):
            graph.add_cert(cert(cert_id))
        graph.add_link(CertLink(id="xa", source_id="x", target_id="a", type="required"))
        graph.add_link(CertLink(id="ab", source_id="a", target_id="b", type="required"))
        graph.add_link(CertLink(id="ba", source_id="b", target_id="a", type="required"))
        with pytest.raises(IntegrityFault, match="form a cycle"):
            graph.learning_path("a")
        # The entry cert itself sits outside the cycle
        assert graph.learning_path("x", required_only=True) == ["x"]

    def test_unknown_endpoint_is_a_fault(self):
        graph = CertGraph()
        graph.add_cert(cert("a"))
        with pytest.raises(IntegrityFault, match="ghost"):
            graph.add_link(CertLink(id="ag", source_id="a", target_id="ghost", type="required"))

    def test_add_cert_replaces(self):
        graph = CertGraph()
        graph.add_cert(cert("a"))
        graph.add_cert(cert("a").model_copy(update={"title": "Renamed"}))
        assert graph.cert_count == 1
        assert graph.get_cert("a").title == "Renamed"
        assert graph.get_cert("b") is None
