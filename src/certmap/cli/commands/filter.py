"""
Filter Command - List the certifications visible under a filter state.
"""

import click
from rich.console import Console
from rich.table import Table

from ...analysis.filters import ViewResolver
from ...core.errors import CertmapError
from ...graph.builder import build_vendor_graph
from ...graph.layout import LayoutOptions
from ..utils import build_state, echo_warning, fail, filter_options, get_app

console = Console()


@click.command()
@filter_options
@click.option("--options", "show_options", is_flag=True, help="Also list the available levels and domains")
@click.pass_context
def filter_certs(
    ctx: click.Context,
    vendor: str | None,
    level: str,
    domain: str,
    query: str,
    hide_recommended: bool,
    show_options: bool,
):
    """
    Show the certifications and links that pass the filters.
    """
    app = get_app(ctx)
    state = build_state(app, vendor, level, domain, query, hide_recommended)

    try:
        full = build_vendor_graph(app.load(), state.vendor, LayoutOptions.from_config(app.config))
    except CertmapError as e:
        fail(e)

    resolver = ViewResolver(full)
    visible = resolver.resolve(state)

    if show_options:
        console.print(f"[bold]Levels:[/bold] {', '.join(resolver.levels())}")
        console.print(f"[bold]Domains:[/bold] {', '.join(resolver.domains())}")

    if not visible.nodes:
        echo_warning(f"No {state.vendor.value} certifications match the filters")
        return

    table = Table(title=f"{state.vendor.value}: {len(visible.nodes)} of {len(full.nodes)} certifications")
    table.add_column("ID", style="cyan")
    table.add_column("Exam")
    table.add_column("Title")
    table.add_column("Level")
    table.add_column("Domain", style="dim")
    for node in visible.nodes:
        cert = node.cert
        table.add_row(cert.id, cert.exam or cert.code or "—", cert.title, cert.display_level, cert.domain or "")
    console.print(table)

    for edge in visible.edges:
        arrow = "──▶" if edge.is_required else "╌╌▶"
        label = f"  [dim]{edge.label}[/dim]" if edge.label else ""
        console.print(f"  {edge.source} {arrow} {edge.target} ({edge.type.value}){label}")
