"""
Visualization Export.

Hands the visible subgraph to a rendering surface, either as a plain JSON
document or as a self-contained HTML page drawn with vis-network. Node
positions come from the layout engine and physics is disabled, so the
page shows exactly the computed grid.
"""

import html
import json
import webbrowser
from pathlib import Path
from typing import Any, Dict, List, Sequence

from ..core.types import FlowEdge, FlowGraph, FlowNode

HTML_TEMPLATE = """<!DOCTYPE html>
<html lang="en">
<head>
    <meta charset="UTF-8">
    <meta name="viewport" content="width=device-width, initial-scale=1.0">
    <title>__TITLE__</title>
    <script src="https://unpkg.com/vis-network/standalone/umd/vis-network.min.js"></script>
    <style>
        :root {
            --bg-base: #0f172a;
            --bg-panel: rgba(15, 23, 42, 0.9);
            --border: rgba(148, 163, 184, 0.2);
            --text-primary: #e2e8f0;
            --text-secondary: #94a3b8;
            --font-sans: -apple-system, BlinkMacSystemFont, "Segoe UI", "Inter", Roboto, sans-serif;
        }
        * { box-sizing: border-box; }
        body {
            margin: 0;
            height: 100vh;
            background: var(--bg-base);
            color: var(--text-primary);
            font-family: var(--font-sans);
            overflow: hidden;
        }
        #graph { width: 100%; height: 100%; }
        .legend {
            position: absolute;
            top: 16px;
            left: 16px;
            background: var(--bg-panel);
            border: 1px solid var(--border);
            border-radius: 14px;
            padding: 12px 14px;
            font-size: 12px;
            color: var(--text-secondary);
        }
        .legend h1 { font-size: 14px; margin: 0 0 8px; color: var(--text-primary); }
        .legend .row { display: flex; align-items: center; gap: 12px; margin-top: 6px; }
        .legend .required { width: 40px; height: 3px; background: #f1f5f9; }
        .legend .recommended { width: 40px; border-top: 2px dashed #64748b; }
    </style>
</head>
<body>
    <div id="graph"></div>
    <div class="legend">
        <h1>__TITLE__</h1>
        <div id="summary"></div>
        <div class="row"><span class="required"></span><b>Required</b></div>
        <div class="row"><span class="recommended"></span><b>Recommended</b></div>
    </div>
    <script>
        const rawData = __GRAPH_DATA__;

        document.getElementById('summary').textContent =
            rawData.nodes.length + ' certifications, ' + rawData.edges.length + ' links';

        const nodes = new vis.DataSet(rawData.nodes);
        const edges = new vis.DataSet(rawData.edges);

        const network = new vis.Network(
            document.getElementById('graph'),
            { nodes: nodes, edges: edges },
            {
                physics: false,
                interaction: { hover: true },
                nodes: {
                    shape: 'box',
                    widthConstraint: { maximum: 260 },
                    font: { color: '#e2e8f0', multi: 'md' },
                    color: { background: '#1e293b', border: '#6366f1' },
                    margin: 10,
                },
            }
        );

        network.on('click', function (params) {
            if (params.edges.length && !params.nodes.length) {
                const edge = edges.get(params.edges[0]);
                if (edge && edge.url) window.open(edge.url, '_blank', 'noreferrer');
            }
        });
    </script>
</body>
</html>
"""


def node_to_dict(node: FlowNode) -> Dict[str, Any]:
    return {
        "id": node.id,
        "position": {"x": node.position.x, "y": node.position.y},
        "cert": node.cert.to_wire(),
    }


def edge_to_dict(edge: FlowEdge) -> Dict[str, Any]:
    data: Dict[str, Any] = {
        "id": edge.id,
        "source": edge.source,
        "target": edge.target,
        "type": edge.type.value,
        "style": edge.style.model_dump(),
    }
    if edge.label:
        data["label"] = edge.label
    if edge.url:
        data["url"] = edge.url
    return data


def to_render_payload(
    graph: FlowGraph,
    levels: Sequence[str] = (),
    domains: Sequence[str] = (),
) -> Dict[str, Any]:
    """JSON-ready document of a (visible) graph plus its filter options."""
    return {
        "nodes": [node_to_dict(node) for node in graph.nodes],
        "edges": [edge_to_dict(edge) for edge in graph.edges],
        "levels": list(levels),
        "domains": list(domains),
    }


def _vis_node(node: FlowNode) -> Dict[str, Any]:
    cert = node.cert
    code = cert.exam or cert.code
    label = f"*{cert.title}*" if not code else f"*{cert.title}*\n{code}"
    tooltip = [cert.display_level]
    if cert.domain:
        tooltip.append(cert.domain)
    if cert.price:
        tooltip.append(cert.price)
    return {
        "id": node.id,
        "label": label,
        "title": " | ".join(tooltip),
        "group": cert.level.value,
        "x": node.position.x,
        "y": node.position.y,
    }


def _vis_edge(edge: FlowEdge) -> Dict[str, Any]:
    style = edge.style
    data: Dict[str, Any] = {
        "id": edge.id,
        "from": edge.source,
        "to": edge.target,
        "title": edge.type.value,
        "color": {"color": style.stroke},
        "width": style.stroke_width,
        "dashes": [int(part) for part in style.dash.split()] if style.dash else False,
        "arrows": {"to": {"enabled": True, "type": "arrow"}},
    }
    if edge.label:
        data["label"] = edge.label
    if edge.url:
        data["url"] = edge.url
    return data


def to_vis_data(graph: FlowGraph) -> Dict[str, List[Dict[str, Any]]]:
    """Translate a graph into vis-network DataSet items."""
    return {
        "nodes": [_vis_node(node) for node in graph.nodes],
        "edges": [_vis_edge(edge) for edge in graph.edges],
    }


def generate_html(graph: FlowGraph, title: str = "IT Certification Paths") -> str:
    """Generate the HTML content for the graph visualization."""
    json_data = json.dumps(to_vis_data(graph))
    # Keep embedded data from closing the script block
    json_data = json_data.replace("</", "<\\/")
    return HTML_TEMPLATE.replace("__TITLE__", html.escape(title)).replace("__GRAPH_DATA__", json_data)


def write_html(graph: FlowGraph, output_path: Path | str, title: str = "IT Certification Paths") -> Path:
    out_file = Path(output_path)
    out_file.write_text(generate_html(graph, title), encoding="utf-8")
    return out_file


def open_visualization(graph: FlowGraph, output_path: Path | str = "certmap.html") -> str:
    """Generate the visualization and open it in the browser."""
    out_file = write_html(graph, output_path)
    webbrowser.open(out_file.resolve().as_uri())
    return str(out_file)
