from __future__ import annotations

import click
from rich.table import Table
from rich.text import Text

from querydeps.cli.console import console, err_console
from querydeps.cli.context import ExitCode
from querydeps.cli.options import action_input_options, inputs_from_options
from querydeps.exceptions import QueryDepsError
from querydeps.parser import validate_query
from querydeps.workflow import parse_inputs


@click.command()
@action_input_options
def validate(**options: str) -> None:
    """Parse and validate queries without running vlt.

    Examples:
        query-deps validate --queries "$(cat queries.txt)"
        query-deps validate --query ':outdated' --view json
    """
    try:
        queries = parse_inputs(inputs_from_options(**options))
    except QueryDepsError as e:
        err_console.print(Text(f"Error: {e.message}", style="red"))
        raise SystemExit(ExitCode.FAILURE) from e

    table = Table(title="Parsed queries")
    table.add_column("#", justify="right")
    table.add_column("Selector")
    table.add_column("Flags")
    table.add_column("Status")

    invalid = 0
    for index, query in enumerate(queries, start=1):
        errors = validate_query(query)
        if errors:
            invalid += 1
            status = Text("; ".join(errors), style="red")
        else:
            status = Text("ok", style="green")
        table.add_row(
            str(index),
            Text(query.selector),
            Text(" ".join(query.flags) or "-"),
            status,
        )

    console.print(table)

    if invalid:
        err_console.print(f"{invalid} of {len(queries)} queries are invalid")
        raise SystemExit(ExitCode.FAILURE)
