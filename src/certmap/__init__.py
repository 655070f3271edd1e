"""
certmap: IT vendor certification paths as a directed graph.

Validates a certification catalog, lays it out per vendor and level,
assembles a styled node/edge graph and derives the visible subgraph
for a given filter state.
"""

from .analysis.filters import ViewResolver, resolve_visible
from .core.errors import CertmapError, IntegrityFault, SchemaError
from .core.types import Catalog, Cert, CertLink, FilterState, FlowGraph, VisibleGraph
from .graph.builder import build_flow_elements, select_vendor
from .graph.layout import LayoutOptions, compute_positions
from .parsing.catalog import load_catalog, load_default_catalog, parse_imported_data

__version__ = "0.1.0"

__all__ = [
    "Catalog",
    "Cert",
    "CertLink",
    "CertmapError",
    "FilterState",
    "FlowGraph",
    "IntegrityFault",
    "LayoutOptions",
    "SchemaError",
    "ViewResolver",
    "VisibleGraph",
    "build_flow_elements",
    "compute_positions",
    "load_catalog",
    "load_default_catalog",
    "parse_imported_data",
    "resolve_visible",
    "select_vendor",
]
