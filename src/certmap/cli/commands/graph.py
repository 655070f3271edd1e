"""
Graph Command - Export the visible graph.

Creates an HTML file with an interactive graph using vis-network,
a JSON document for other rendering surfaces, or prints the JSON
to stdout.
"""

import json
from pathlib import Path

import click

from ...analysis.filters import ViewResolver
from ...core.errors import CertmapError
from ...graph.builder import build_vendor_graph
from ...graph.layout import LayoutOptions
from ...graph.visualize import to_render_payload, write_html
from ..utils import build_state, echo_error, echo_info, echo_success, fail, filter_options, get_app


@click.command()
@filter_options
@click.option("-o", "--output", default="certmap.html", show_default=True,
              help="Output file (.html or .json)")
@click.option("--json", "json_mode", is_flag=True, help="Print the graph as JSON to stdout")
@click.pass_context
def graph(
    ctx: click.Context,
    vendor: str | None,
    level: str,
    domain: str,
    query: str,
    hide_recommended: bool,
    output: str,
    json_mode: bool,
):
    """
    Generate an interactive visualization or raw graph data.
    """
    app = get_app(ctx)
    state = build_state(app, vendor, level, domain, query, hide_recommended)

    try:
        catalog = app.load()
        full = build_vendor_graph(catalog, state.vendor, LayoutOptions.from_config(app.config))
    except CertmapError as e:
        fail(e)

    resolver = ViewResolver(full)
    visible = resolver.resolve(state)
    payload = to_render_payload(visible, resolver.levels(), resolver.domains())

    if json_mode:
        click.echo(json.dumps({"vendor": state.vendor.value, **payload}, indent=2))
        return

    output_path = Path(output)
    if output_path.suffix == ".html":
        write_html(visible, output_path, title=f"{state.vendor.value} Certification Paths")
        echo_success(f"Generated: {output_path}")
        echo_info(f"Open: {output_path.absolute().as_uri()}")
    elif output_path.suffix == ".json":
        output_path.write_text(json.dumps(payload, indent=2), encoding="utf-8")
        echo_success(f"Generated: {output_path}")
    else:
        echo_error(f"Unsupported format: {output_path.suffix}")
        click.echo("Supported: .html, .json")
        ctx.exit(1)
