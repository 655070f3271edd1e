"""
Search Command - Search-as-you-type suggestions for one vendor.
"""

import click

from ...analysis.filters import count_matching, search_suggestions
from ...config import DEFAULT_SUGGESTION_LIMIT
from ...core.errors import CertmapError
from ...graph.builder import select_vendor
from ..utils import VENDOR_CHOICE, echo_info, echo_warning, fail, get_app, resolve_vendor


@click.command()
@click.argument("query")
@click.option("--vendor", type=VENDOR_CHOICE, default=None, help="Vendor to search (default from config)")
@click.option(
    "-n", "--limit",
    type=click.IntRange(min=1),
    default=DEFAULT_SUGGESTION_LIMIT,
    show_default=True,
    help="Maximum suggestions",
)
@click.pass_context
def search(ctx: click.Context, query: str, vendor: str | None, limit: int):
    """
    Suggest certifications matching QUERY.
    """
    app = get_app(ctx)
    selected = resolve_vendor(app, vendor)
    try:
        certs, _ = select_vendor(app.load(), selected)
    except CertmapError as e:
        fail(e)

    suggestions = search_suggestions(certs, query, limit)
    if not suggestions:
        echo_warning("No results found")
        return

    for suggestion in suggestions:
        click.echo(f"{suggestion.code:<12} {suggestion.title}  " + click.style(f"[{suggestion.id}]", dim=True))
    echo_info(f"{count_matching(certs, query)} certifications for {selected.value}")
