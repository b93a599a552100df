"""Command-line interface for tablefmt."""

import logging
import sys
from typing import IO, Any

import click

from .config import FormatterSettings, TableDefinition
from .demo.reports import REPORT_NAMES, DemoReports, sample_data
from .exceptions import TableDefinitionError


@click.group()
@click.version_option(package_name="tablefmt")
@click.option(
    "--log-level",
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR"], case_sensitive=False),
    default=None,
    help="Log level (default: TABLEFMT_LOG_LEVEL or WARNING)",
)
def cli(log_level: str | None) -> None:
    """tablefmt fixed-width text table CLI."""
    settings = FormatterSettings.from_environment()
    level = (log_level or settings.log_level).upper()
    logging.basicConfig(
        level=getattr(logging, level, logging.WARNING),
        format="%(asctime)s %(levelname)s %(name)s %(message)s",
    )


@cli.command()
@click.option(
    "--definition",
    "-d",
    "definition_path",
    required=True,
    type=click.Path(exists=True, dir_okay=False),
    help="YAML table definition (columns, widths, alignments, title).",
)
@click.option(
    "--input",
    "-i",
    "input_file",
    type=click.File("r"),
    default="-",
    help="Delimited rows to render (default: stdin)",
)
@click.option(
    "--delimiter",
    default="\t",
    show_default="TAB",
    help="Cell delimiter in the input rows",
)
@click.option(
    "--header/--no-header",
    default=True,
    help="Draw the label header (default: enabled)",
)
def render(definition_path: str, input_file: IO[Any], delimiter: str, header: bool) -> None:
    """Render delimited rows as a table."""
    definition = _load_definition(definition_path)
    table = definition.to_builder().build()
    if not table.columns:
        click.echo("Error: column spec defines no columns", err=True)
        sys.exit(1)

    formatter = table.formatter(FormatterSettings.from_environment())
    if definition.title:
        formatter.text(definition.title)
    if header:
        formatter.header()
    for line in input_file:
        line = line.rstrip("\r\n")
        if line:
            values = line.split(delimiter)
            # short rows would end without a line break
            values += [" "] * (len(table.columns) - len(values))
            formatter.row(*values)
    formatter.footer()

    if not formatter.print(sys.stdout):
        click.echo("Error: failed to write table", err=True)
        sys.exit(1)


@cli.command()
@click.argument(
    "report",
    type=click.Choice([*REPORT_NAMES, "all"]),
    default="all",
)
def demo(report: str) -> None:
    """Print the demo reports (customers, articles, orders, showcase)."""
    reports = DemoReports()
    data = sample_data()
    names = REPORT_NAMES if report == "all" else [report]

    if report == "all":
        click.echo(
            f"({len(data.customers)}) Customer objects built.\n"
            f"({len(data.articles)}) Article objects built.\n"
            f"({len(data.orders)}) Order objects built.\n---"
        )
    for name in names:
        reports.render(name, data).print(sys.stdout)


def _load_definition(file_path: str) -> TableDefinition:
    """Load and validate a YAML table definition."""
    with open(file_path) as f:
        content = f.read()
    try:
        return TableDefinition.from_yaml(content)
    except TableDefinitionError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)


if __name__ == "__main__":
    cli()
