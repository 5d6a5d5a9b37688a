from collections.abc import Callable

import click
import tomlkit
from pydantic import TypeAdapter

from fixed_decimal.config import settings
from fixed_decimal.constants import MAX_DECIMAL_PLACES, MIN_DECIMAL_PLACES
from fixed_decimal.decimal import Decimal, decimal_type
from fixed_decimal.exceptions import DecimalError
from fixed_decimal.version import __version__

PRECISION = click.IntRange(MIN_DECIMAL_PLACES, MAX_DECIMAL_PLACES)

OPERATIONS: dict[str, str] = {
    "+": "add",
    "-": "sub",
    "*": "mul",
    "/": "div",
    "%": "rem",
}


def _parse(value: str, decimal_places: int, *, truncate: bool = False) -> Decimal:
    try:
        return decimal_type(decimal_places).from_str(value, truncate=truncate)
    except DecimalError as exc:
        raise click.ClickException(str(exc)) from exc


@click.group()
@click.version_option(version=__version__)
def cli() -> None: ...


@cli.command("parse")
@click.argument("value")
@click.option("--places", type=PRECISION, default=6, show_default=True, help="Decimal places")
@click.option(
    "--truncate",
    is_flag=True,
    help="Discard fractional digits beyond the precision instead of rejecting the value",
)
def parse(value: str, places: int, *, truncate: bool) -> None:
    """
    Parse VALUE and show its canonical form and atomic value.
    """

    decimal = _parse(value, places, truncate=truncate)
    click.echo(f"{decimal} (atomics: {decimal.atomics})")


@cli.command("convert")
@click.argument("value")
@click.option("--from", "from_places", type=PRECISION, required=True, help="Source decimal places")
@click.option("--to", "to_places", type=PRECISION, required=True, help="Target decimal places")
def convert(value: str, from_places: int, to_places: int) -> None:
    """
    Convert VALUE between precisions. Scaling down truncates.
    """

    source = _parse(value, from_places)
    try:
        click.echo(source.to_precision(to_places))
    except DecimalError as exc:
        raise click.ClickException(str(exc)) from exc


@cli.command("calc")
@click.argument("left")
@click.argument("operator", type=click.Choice(list(OPERATIONS)))
@click.argument("right")
@click.option("--places", type=PRECISION, default=6, show_default=True, help="Decimal places")
@click.option(
    "--mode",
    type=click.Choice(["raise", "checked", "saturating"]),
    default="raise",
    show_default=True,
    help="Overflow handling",
)
def calc(left: str, operator: str, right: str, places: int, mode: str) -> None:
    """
    Evaluate LEFT OPERATOR RIGHT at a fixed precision.
    """

    lhs = _parse(left, places)
    rhs = _parse(right, places)
    method_name = OPERATIONS[operator]

    match mode:
        case "checked":
            method_name = f"checked_{method_name}"
        case "saturating":
            if method_name not in {"add", "sub", "mul"}:
                msg = f"Saturating mode is not available for {operator!r}"
                raise click.UsageError(msg)
            method_name = f"saturating_{method_name}"
        case _:
            ...

    operation: Callable[[Decimal], Decimal | None] = getattr(lhs, method_name)
    try:
        result = operation(rhs)
    except DecimalError as exc:
        raise click.ClickException(str(exc)) from exc

    click.echo("None" if result is None else result)


@cli.group()
def config() -> None:
    """
    Configuration commands
    """


@config.command("show")
@click.option(
    "--json",
    "output_format",
    flag_value="json",
    type=str,
    help="Show configuration in JSON format",
)
@click.option(
    "--toml",
    "output_format",
    flag_value="toml",
    type=str,
    help="Show configuration in TOML format (default)",
    default=True,
)
def config_show(output_format: str) -> None:
    """
    Display the current configuration in JSON or TOML (default) format.
    """

    match output_format:
        case "json":
            click.echo(
                TypeAdapter(dict).dump_json(
                    settings.model_dump(),
                    indent=2,
                ),
            )
        case "toml":
            click.echo(
                tomlkit.dumps(
                    settings.model_dump(),
                ),
            )
        case _:
            ...
