"""
Filter / Visibility Resolver.

Derives the visible subgraph of one vendor's graph from a FilterState.
A node is visible when it passes the level, domain and text filters; an
edge is visible when both of its endpoints are visible and its type is
allowed by ``show_recommended``. Every combination of filters is valid,
including ones that leave nothing visible.
"""

import logging
from functools import lru_cache
from itertools import islice
from typing import List, NamedTuple, Sequence, Set, Tuple

from ..config import DEFAULT_SUGGESTION_LIMIT, DEFAULT_VIEW_CACHE_SIZE
from ..core.types import ALL, Cert, FilterState, FlowEdge, FlowGraph, LinkType, VisibleGraph

logger = logging.getLogger(__name__)


class Suggestion(NamedTuple):
    """One row of the search-as-you-type dropdown."""
    id: str
    code: str
    title: str


def search_text(cert: Cert) -> str:
    """Lower-cased haystack the free-text query is matched against."""
    parts = [
        cert.title,
        cert.exam or "",
        cert.vendor.value,
        cert.level.value,
        " ".join(role.value for role in cert.roles),
        cert.description or "",
    ]
    return " ".join(parts).lower()


def matches_text(cert: Cert, query: str) -> bool:
    """Case-insensitive substring match. An empty query matches everything."""
    q = query.strip()
    if not q:
        return True
    return q.lower() in search_text(cert)


def is_cert_visible(cert: Cert, state: FilterState) -> bool:
    if state.level != ALL and cert.display_level != state.level:
        return False
    if state.domain != ALL and cert.domain != state.domain:
        return False
    return matches_text(cert, state.query)


def is_edge_visible(edge: FlowEdge, visible_ids: Set[str], show_recommended: bool) -> bool:
    if edge.source not in visible_ids or edge.target not in visible_ids:
        return False
    return edge.type == LinkType.REQUIRED or show_recommended


def resolve_visible(graph: FlowGraph, state: FilterState) -> VisibleGraph:
    """
    Compute the visible nodes and edges of ``graph`` under ``state``.

    ``state.vendor`` is not consulted: the graph is expected to hold a
    single vendor already (see ``graph.builder.select_vendor``).
    """
    nodes = [node for node in graph.nodes if is_cert_visible(node.cert, state)]
    visible_ids = {node.id for node in nodes}
    edges = [
        edge for edge in graph.edges
        if is_edge_visible(edge, visible_ids, state.show_recommended)
    ]
    return VisibleGraph(nodes=nodes, edges=edges)


def vendor_levels(certs: Sequence[Cert]) -> List[str]:
    """Level filter options: "All" followed by the distinct display levels, sorted."""
    return [ALL] + sorted({cert.display_level for cert in certs})


def vendor_domains(certs: Sequence[Cert]) -> List[str]:
    """Domain filter options: "All" followed by the distinct non-empty domains, sorted."""
    return [ALL] + sorted({cert.domain for cert in certs if cert.domain})


def search_suggestions(
    certs: Sequence[Cert],
    query: str,
    limit: int = DEFAULT_SUGGESTION_LIMIT,
) -> List[Suggestion]:
    """Certs matching the query, in input order. Nothing for an empty query."""
    if not query.strip() or limit <= 0:
        return []
    matching = (cert for cert in certs if matches_text(cert, query))
    return [
        Suggestion(cert.id, cert.exam or cert.code or "—", cert.title)
        for cert in islice(matching, limit)
    ]


def count_matching(certs: Sequence[Cert], query: str) -> int:
    """Number of certs matching the free-text query alone."""
    return sum(1 for cert in certs if matches_text(cert, query))


class ViewResolver:
    """
    Resolves visibility for one vendor graph, memoized by filter state.

    Equal filter states share one result. The cache is bounded to the
    ``cache_size`` most recently used states, so a long stream of
    distinct queries does not grow it without limit.
    """

    def __init__(self, graph: FlowGraph, cache_size: int = DEFAULT_VIEW_CACHE_SIZE):
        self.graph = graph
        self._resolve_key = lru_cache(maxsize=cache_size)(self._resolve_uncached)

    @property
    def certs(self) -> List[Cert]:
        return [node.cert for node in self.graph.nodes]

    def _resolve_uncached(self, key: Tuple[str, str, str, bool]) -> VisibleGraph:
        level, domain, query, show_recommended = key
        logger.debug(f"Resolving visibility for {key!r}")
        state = FilterState(level=level, domain=domain, query=query, show_recommended=show_recommended)
        return resolve_visible(self.graph, state)

    def resolve(self, state: FilterState) -> VisibleGraph:
        # Vendor is irrelevant here and must not split the cache
        key = (state.level, state.domain, state.normalized_query, state.show_recommended)
        return self._resolve_key(key)

    def cached_states(self) -> int:
        """Number of filter states currently memoized."""
        return self._resolve_key.cache_info().currsize

    def levels(self) -> List[str]:
        return vendor_levels(self.certs)

    def domains(self) -> List[str]:
        return vendor_domains(self.certs)

    def suggestions(self, query: str, limit: int = DEFAULT_SUGGESTION_LIMIT) -> List[Suggestion]:
        return search_suggestions(self.certs, query, limit)

    def clear(self) -> None:
        self._resolve_key.cache_clear()
