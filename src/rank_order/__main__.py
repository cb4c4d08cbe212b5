"""CLI entry point for rank-order."""

import json
import logging
import sys

import click

from rank_order.config import OrderConfig
from rank_order.errors import GraphFormatError, LayeringError, MissingRankError
from rank_order.ir.graph import RankedGraph
from rank_order.order import check_layering, count_crossings, init_order
from rank_order.order.base import Layering


def _format_layering(layering: Layering, as_json: bool) -> str:
    if as_json:
        return json.dumps(layering) + "\n"
    return "".join(f"{idx}: {' '.join(layer)}\n" for idx, layer in enumerate(layering))


@click.command()
@click.argument("input", required=False, type=click.Path(exists=True))
@click.option("--no-align", "no_align", is_flag=True, help="Skip the alternating-layer alignment pass")
@click.option("--missing-order", "missing_order", type=int, default=None, help="Order for entity nodes without one")
@click.option("--json", "as_json", is_flag=True, help="Print the layering as a JSON array of arrays")
@click.option("--crossings", "crossings", is_flag=True, help="Report edge crossings of the layering on stderr")
@click.option("--check", "check", is_flag=True, help="Verify every simple node sits once in its rank's layer")
@click.option("--output", "-o", "output", type=str, default=None, help="Write output to this file instead of stdout")
@click.option("--verbose", "-v", "verbose", is_flag=True, help="Enable debug logging")
def main(
    input: str | None,
    no_align: bool,
    missing_order: int | None,
    as_json: bool,
    crossings: bool,
    check: bool,
    output: str | None,
    verbose: bool,
) -> None:
    """Compute the initial per-rank node order of a ranked JSON graph."""
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")

    if input:
        try:
            with open(input) as f:
                text = f.read()
        except OSError as e:
            click.echo(f"error: cannot read '{input}': {e}", err=True)
            sys.exit(1)
    else:
        text = sys.stdin.read()

    try:
        graph = RankedGraph.from_json(text)
    except GraphFormatError as e:
        click.echo(f"graph error: {e}", err=True)
        sys.exit(1)

    try:
        layering = init_order(graph, OrderConfig(align=not no_align, missing_order=missing_order))
    except MissingRankError as e:
        click.echo(f"error: {e}", err=True)
        sys.exit(1)

    if check:
        try:
            check_layering(layering, graph)
        except LayeringError as e:
            click.echo(f"check failed: {e}", err=True)
            sys.exit(1)

    if crossings:
        click.echo(f"crossings: {count_crossings(layering, graph)}", err=True)

    rendered = _format_layering(layering, as_json)
    if output:
        try:
            with open(output, "w") as f:
                f.write(rendered)
        except OSError as e:
            click.echo(f"error: cannot write '{output}': {e}", err=True)
            sys.exit(1)
    else:
        click.echo(rendered, nl=False)


if __name__ == "__main__":
    main()
