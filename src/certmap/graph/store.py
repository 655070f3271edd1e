"""
Certification Graph backed by rustworkx.

Answers path questions over the whole catalog (across vendors):

- which certifications lead to a given one (ancestors),
- which certifications a given one unlocks (descendants),
- in which order to take them (learning path).

It manages the bimap between cert ids and rustworkx integer indices.
Queries can be restricted to ``required`` links only.
"""

from typing import Any, Dict, Iterator, List, Set

import rustworkx as rx

from ..core.errors import IntegrityFault
from ..core.types import Catalog, Cert, CertLink, LinkType


class CertGraph:
    """
    Directed graph of certifications (nodes) and links (edges).

    Edges point from prerequisite to the certification it leads to.
    """

    def __init__(self):
        self._graph = rx.PyDiGraph(multigraph=True)
        self._id_to_idx: Dict[str, int] = {}
        self._idx_to_id: Dict[int, str] = {}

    @classmethod
    def from_catalog(cls, catalog: Catalog) -> "CertGraph":
        graph = cls()
        for cert in catalog.certs:
            graph.add_cert(cert)
        for link in catalog.links:
            graph.add_link(link)
        return graph

    def add_cert(self, cert: Cert) -> None:
        """Add or replace a certification."""
        if cert.id in self._id_to_idx:
            self._graph[self._id_to_idx[cert.id]] = cert
            return
        idx = self._graph.add_node(cert)
        self._id_to_idx[cert.id] = idx
        self._idx_to_id[idx] = cert.id

    def add_link(self, link: CertLink) -> None:
        """
        Add a directed link.

        Raises:
            IntegrityFault: If either endpoint is unknown.
        """
        for endpoint in (link.source_id, link.target_id):
            if endpoint not in self._id_to_idx:
                raise IntegrityFault(f"Link {link.id!r} references unknown cert {endpoint!r}")
        self._graph.add_edge(self._id_to_idx[link.source_id], self._id_to_idx[link.target_id], link)

    def get_cert(self, cert_id: str) -> Cert | None:
        idx = self._id_to_idx.get(cert_id)
        if idx is None:
            return None
        return self._graph[idx]

    def has_cert(self, cert_id: str) -> bool:
        return cert_id in self._id_to_idx

    def _view(self, required_only: bool) -> rx.PyDiGraph:
        if not required_only:
            return self._graph
        # Same node indices, recommended edges dropped
        view = self._graph.copy()
        for edge_idx in list(view.edge_indices()):
            if view.get_edge_data_by_index(edge_idx).type != LinkType.REQUIRED:
                view.remove_edge_from_index(edge_idx)
        return view

    def prerequisites(self, cert_id: str, required_only: bool = False) -> Set[str]:
        """All certs from which ``cert_id`` is reachable."""
        if cert_id not in self._id_to_idx:
            return set()
        indices = rx.ancestors(self._view(required_only), self._id_to_idx[cert_id])
        return {self._idx_to_id[idx] for idx in indices}

    def unlocks(self, cert_id: str, required_only: bool = False) -> Set[str]:
        """All certs reachable from ``cert_id``."""
        if cert_id not in self._id_to_idx:
            return set()
        indices = rx.descendants(self._view(required_only), self._id_to_idx[cert_id])
        return {self._idx_to_id[idx] for idx in indices}

    def learning_path(self, cert_id: str, required_only: bool = False) -> List[str]:
        """
        Prerequisites of ``cert_id`` followed by the cert itself, each
        appearing after everything that leads to it.

        Ties are broken by catalog order so the path is stable.

        Raises:
            IntegrityFault: If the prerequisites contain a cycle.
        """
        if cert_id not in self._id_to_idx:
            return []
        graph = self._view(required_only)
        target = self._id_to_idx[cert_id]
        members = rx.ancestors(graph, target) | {target}
        subgraph = graph.subgraph(sorted(members))
        # The sort returns a partial order on cycles instead of raising
        if not rx.is_directed_acyclic_graph(subgraph):
            raise IntegrityFault(f"Prerequisites of {cert_id!r} form a cycle")
        order = rx.lexicographical_topological_sort(
            subgraph, key=lambda cert: f"{self._id_to_idx[cert.id]:08d}"
        )
        return [cert.id for cert in order]

    def iter_certs(self) -> Iterator[Cert]:
        return iter(self._graph.nodes())

    def iter_links(self) -> Iterator[CertLink]:
        return iter(self._graph.edges())

    @property
    def cert_count(self) -> int:
        return self._graph.num_nodes()

    @property
    def link_count(self) -> int:
        return self._graph.num_edges()

    def get_stats(self) -> Dict[str, Any]:
        orphans = len([
            n for n in self._graph.node_indices()
            if self._graph.in_degree(n) == 0 and self._graph.out_degree(n) == 0
        ])
        links_by_type: Dict[str, int] = {link_type.value: 0 for link_type in LinkType}
        for link in self.iter_links():
            links_by_type[link.type.value] += 1
        return {
            "total_certs": self.cert_count,
            "total_links": self.link_count,
            "links_by_type": links_by_type,
            "orphans": orphans,
        }
