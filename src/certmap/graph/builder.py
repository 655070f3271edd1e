"""
Graph Builder.

Converts validated certifications and links into positioned nodes and
styled edges for one vendor. The builder trusts its input to satisfy the
catalog invariants, with one exception: an edge whose endpoint is not in
the node set is refused loudly, never emitted as a dangling reference.
"""

import logging
from typing import Dict, List, Sequence, Tuple

from ..core.errors import IntegrityFault
from ..core.types import Catalog, Cert, CertLink, EdgeStyle, FlowEdge, FlowGraph, FlowNode, LinkType, Vendor
from .layout import LayoutOptions, compute_positions

logger = logging.getLogger(__name__)

EDGE_STYLES: Dict[LinkType, EdgeStyle] = {
    LinkType.REQUIRED: EdgeStyle(
        stroke="#f1f5f9",
        stroke_width=2.5,
        marker_color="#f1f5f9",
    ),
    LinkType.RECOMMENDED: EdgeStyle(
        stroke="#64748b",
        stroke_width=1.5,
        dash="6 4",
        marker_color="#64748b",
    ),
}


def edge_style_for(link_type: LinkType) -> EdgeStyle:
    """Heavy solid stroke for required links, light dashed for recommended."""
    return EDGE_STYLES[LinkType(link_type)]


def select_vendor(catalog: Catalog, vendor: Vendor | str) -> Tuple[List[Cert], List[CertLink]]:
    """
    Slice the catalog down to one vendor.

    Links survive only when both endpoints belong to the vendor, so the
    result can be handed to build_flow_elements without faults.
    """
    vendor = Vendor(vendor)
    certs = [cert for cert in catalog.certs if cert.vendor == vendor]
    cert_ids = {cert.id for cert in certs}
    links = [
        link for link in catalog.links
        if link.source_id in cert_ids and link.target_id in cert_ids
    ]
    return certs, links


def build_flow_elements(
    certs: Sequence[Cert],
    links: Sequence[CertLink],
    options: LayoutOptions | None = None,
) -> FlowGraph:
    """
    Assemble the node/edge graph.

    Args:
        certs: Certifications to place, in display order.
        links: Links between those certifications.
        options: Layout spacing.

    Returns:
        FlowGraph with one node per cert and one edge per link.

    Raises:
        IntegrityFault: If a link references a cert missing from ``certs``.
    """
    positions = compute_positions(certs, options)

    nodes = [
        FlowNode(id=cert.id, position=positions[cert.id], cert=cert)
        for cert in certs
    ]

    edges: List[FlowEdge] = []
    for link in links:
        for endpoint in (link.source_id, link.target_id):
            if endpoint not in positions:
                raise IntegrityFault(
                    f"Link {link.id!r} references {endpoint!r}, which is not in the node set"
                )
        edges.append(
            FlowEdge(
                id=link.id,
                source=link.source_id,
                target=link.target_id,
                type=link.type,
                style=edge_style_for(link.type),
                label=link.training_title,
                url=link.training_url,
            )
        )

    logger.debug(f"Assembled graph: {len(nodes)} nodes, {len(edges)} edges")
    return FlowGraph(nodes=nodes, edges=edges)


def build_vendor_graph(
    catalog: Catalog,
    vendor: Vendor | str,
    options: LayoutOptions | None = None,
) -> FlowGraph:
    """Select a vendor and assemble its graph in one step."""
    certs, links = select_vendor(catalog, vendor)
    return build_flow_elements(certs, links, options)
