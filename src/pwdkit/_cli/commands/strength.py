import dataclasses

import click
from rich.console import Console
from rich.table import Table
from rich.text import Text

from ...service import level_for_score, score_factors
from ...util.model import model_dump_json
from ..render import LEVEL_STYLES

__all__ = ["strength"]


@click.command()
@click.argument("password")
@click.option(
    "-d",
    "--details",
    is_flag=True,
    help="Show how much each factor contributed to the score.",
)
@click.option("--json", "as_json", is_flag=True, help="Print the result as JSON.")
def strength(password: str, details: bool, as_json: bool) -> None:
    """Score PASSWORD from 0 to 100 and classify it as weak, medium or strong."""
    factors = score_factors(password)
    score = factors.total
    level = level_for_score(score)

    if as_json:
        click.echo(
            model_dump_json({"score": score, "level": level, "factors": factors})
        )
        return

    console = Console(highlight=False)
    console.print(Text(f"{score}/100 ({level})", style=LEVEL_STYLES[level]))

    if details:
        table = Table("factor", "points")
        for fld in dataclasses.fields(factors):
            if fld.name == "ceiling":
                continue
            table.add_row(fld.name, "%.2f" % getattr(factors, fld.name))
        table.add_row("ceiling", str(factors.ceiling))
        console.print(table)
