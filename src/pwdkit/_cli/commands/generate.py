from logging import getLogger

import click
import pydantic

from ... import dto, exc
from ..._conf import Settings
from ...service import PasswordGenerator
from ...util.model import convert_errors, format_errors
from ...util.random import default_source, secure_source
from ..exc import CLIError

__all__ = ["generate"]

logger = getLogger(__name__)

CountOption = int | None


@click.command()
@click.option(
    "-l",
    "--length",
    type=int,
    help="Password length. Defaults to the configured length (12).",
)
@click.option(
    "--uppercase", "uppercase_count", type=int, help="Minimum uppercase letters."
)
@click.option(
    "--lowercase", "lowercase_count", type=int, help="Minimum lowercase letters."
)
@click.option("--numbers", "numbers_count", type=int, help="Minimum digits.")
@click.option(
    "--special",
    "special_characters_count",
    type=int,
    help="Minimum special characters (!@#$%^&*).",
)
@click.option(
    "-n",
    "--count",
    type=click.IntRange(min=1),
    default=1,
    show_default=True,
    help="Number of passwords to generate.",
)
@click.option(
    "--secure/--no-secure",
    default=None,
    help="Draw characters from the operating system's randomness source.",
)
@click.pass_obj
def generate(
    settings: Settings,
    length: int | None,
    uppercase_count: CountOption,
    lowercase_count: CountOption,
    numbers_count: CountOption,
    special_characters_count: CountOption,
    count: int,
    secure: bool | None,
) -> None:
    """
    Generate passwords without confusing characters (i, l, 1, L, o, 0, O).

    Character classes without a count option are left out of the password, unless
    no count option is given at all, in which case every class appears at least
    once.
    """
    try:
        request = dto.GenerationRequest(
            length=settings.generator.length if length is None else length,
            uppercase_count=uppercase_count,
            lowercase_count=lowercase_count,
            numbers_count=numbers_count,
            special_characters_count=special_characters_count,
        )
    except pydantic.ValidationError as ex:
        raise CLIError(format_errors(convert_errors(ex))) from ex

    if secure is None:
        secure = settings.generator.secure_random

    logger.debug("generating %d password(s), secure=%r", count, secure)
    generator = PasswordGenerator(secure_source() if secure else default_source())

    try:
        passwords = [generator.generate(request) for _ in range(count)]
    except exc.GenerationError as ex:
        raise CLIError(str(ex)) from ex

    for password in passwords:
        click.echo(password)
