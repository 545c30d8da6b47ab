from logging import getLogger
from typing import Any

import click
from rich.console import Console

from ..._conf import Settings
from ...service import validate_password_against_rules
from ...util.model import model_dump_json
from ..render import RecordRenderer, RecordStyle

__all__ = ["validate"]

logger = getLogger(__name__)

CountOption = int | None


@click.command()
@click.argument("password")
@click.option("--min-length", type=click.IntRange(min=0), help="Minimum length.")
@click.option("--max-length", type=click.IntRange(min=0), help="Maximum length.")
@click.option(
    "--uppercase",
    "uppercase_count",
    type=click.IntRange(min=0),
    help="Minimum uppercase letters.",
)
@click.option(
    "--lowercase",
    "lowercase_count",
    type=click.IntRange(min=0),
    help="Minimum lowercase letters.",
)
@click.option(
    "--numbers", "numbers_count", type=click.IntRange(min=0), help="Minimum digits."
)
@click.option(
    "--special",
    "special_characters_count",
    type=click.IntRange(min=0),
    help="Minimum non-alphanumeric characters.",
)
@click.option("--json", "as_json", is_flag=True, help="Print the result as JSON.")
@click.pass_context
def validate(
    ctx: click.Context,
    password: str,
    min_length: CountOption,
    max_length: CountOption,
    uppercase_count: CountOption,
    lowercase_count: CountOption,
    numbers_count: CountOption,
    special_characters_count: CountOption,
    as_json: bool,
) -> None:
    """
    Check PASSWORD against the configured rules, overridden by the given options.

    Exits with status 1 when at least one rule is violated.
    """
    settings: Settings = ctx.obj
    overrides: dict[str, Any] = {
        key: value
        for key, value in {
            "min_length": min_length,
            "max_length": max_length,
            "uppercase_count": uppercase_count,
            "lowercase_count": lowercase_count,
            "numbers_count": numbers_count,
            "special_characters_count": special_characters_count,
        }.items()
        if value is not None
    }
    rules = settings.rules.model_copy(update=overrides)
    logger.debug("validating against %r", rules)

    result = validate_password_against_rules(password, rules)

    if as_json:
        click.echo(model_dump_json(result, by_alias=True))
    else:
        renderer = RecordRenderer()
        if result.is_valid:
            renderer.add_record("Password satisfies all rules", RecordStyle.SUCCESS)
        for error in result.errors:
            renderer.add_record(error, RecordStyle.CRITICAL)
        Console(highlight=False).print(renderer.compose_renderable())

    if not result.is_valid:
        ctx.exit(1)
