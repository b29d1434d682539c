"""peoplegen CLI entry point."""

import sys

import click
from pydantic import ValidationError

from ..generator import PeopleGenerator
from ..messages import message_handler
from ..models import FileFormat, HeaderFormat, JsonFormat, Params
from ..writer import write_people
from .helpers import setup_logging, validation_message

ENVVAR_PREFIX = "PEOPLEGEN"


@click.command(context_settings=dict(help_option_names=["-h", "--help"]))
@click.argument("total", type=click.IntRange(min=0))
@click.option(
    "-F",
    "--file-format",
    type=click.Choice([f.value for f in FileFormat], case_sensitive=False),
    default=FileFormat.CSV.value,
    show_default=True,
    help="Output format",
)
@click.option(
    "-H",
    "--header-format",
    type=click.Choice([h.value for h in HeaderFormat]),
    default=HeaderFormat.SNAKE_CASE.value,
    show_default=True,
    help="Naming convention for CSV headers and JSON keys",
)
@click.option(
    "-d", "--delimiter", default=",", show_default=True, help="CSV field delimiter"
)
@click.option(
    "--header/--no-header", default=True, show_default=True, help="CSV header row"
)
@click.option("-s", "--ssn", "ssns", is_flag=True, help="Include social security numbers")
@click.option("-S", "--salary", "salaries", is_flag=True, help="Include salaries")
@click.option(
    "-j",
    "--json-format",
    type=click.Choice([j.value for j in JsonFormat]),
    default=JsonFormat.LINES.value,
    show_default=True,
    help="JSON layout: one array, or one object per line",
)
@click.option("-P", "--pretty", is_flag=True, help="Pretty-printed JSON array")
@click.option(
    "-o",
    "--output",
    "output_file",
    type=click.Path(dir_okay=False),
    default=None,
    help="Output file (default: stdout)",
)
@click.option("--male", "male_percent", type=int, help="Percentage of males")
@click.option("--female", "female_percent", type=int, help="Percentage of females")
@click.option("--year-min", type=int, default=1940, show_default=True, help="Earliest birth year")
@click.option("--year-max", type=int, default=2000, show_default=True, help="Latest birth year")
@click.option("--salary-min", type=int, default=20_000, show_default=True, help="Lowest salary")
@click.option("--salary-max", type=int, default=500_000, show_default=True, help="Highest salary")
@click.option(
    "--middle-names",
    "middle_name_percent",
    type=int,
    default=50,
    show_default=True,
    help="Percentage of people with a middle name",
)
@click.option("--seed", type=int, help="Random seed for reproducible output")
@click.option("-v", "--verbose", is_flag=True, help="Report progress on stderr")
@click.option("--debug", is_flag=True, help="Debug logging on stderr")
def cli(total, debug, **options):
    """Generate TOTAL fake people and write them as CSV or JSON.

    Examples:
        peoplegen 100                              # CSV to stdout
        peoplegen -s -S -o people.csv 10000        # With SSNs and salaries
        peoplegen -F json -j array -P 20           # Pretty JSON array
        peoplegen -F json --female 70 -H camelCase 1000
    """
    if debug:
        setup_logging(debug=True)

    try:
        params = Params(total_people=total, **options)
    except ValidationError as e:
        raise click.UsageError(validation_message(e))

    msg = message_handler(params.verbose)
    people = PeopleGenerator(params).generate()
    result = write_people(
        people, params.to_serialization_config(), msg, total=params.total_people
    )

    if not result.ok:
        click.echo(f"Error: {result.message}", err=True)
        if result.output_written:
            click.echo(
                f"Error: {result.records} records were written before the "
                f"failure; the output is incomplete",
                err=True,
            )
        sys.exit(1)


def main():
    """Entry point for CLI."""
    cli(auto_envvar_prefix=ENVVAR_PREFIX)


if __name__ == "__main__":
    main()
