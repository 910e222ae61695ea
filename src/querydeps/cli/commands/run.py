from __future__ import annotations

import click

from querydeps.actions import ActionsContext
from querydeps.cli.context import CLIContext, ExitCode, async_command
from querydeps.cli.options import action_input_options, inputs_from_options
from querydeps.exceptions import QueryDepsError
from querydeps.logging import get_logger
from querydeps.runners import CommandRunner, VltRunner
from querydeps.workflow import run_action


@click.command()
@action_input_options
@click.pass_context
@async_command
async def run(ctx: click.Context, **options: str) -> None:
    """Run vlt queries and gate on their result counts.

    This is the action entry point: inputs default to the INPUT_* variables
    GitHub Actions sets, outputs and the step summary go to GITHUB_OUTPUT and
    GITHUB_STEP_SUMMARY.

    Examples:
        query-deps run --query ':malware' --expect-results 0
        query-deps run --queries "$(cat queries.txt)"
    """
    logger = get_logger(__name__)
    cli_ctx: CLIContext = ctx.obj["cli_ctx"]
    config = cli_ctx.config
    actions = ActionsContext()

    runner = VltRunner(
        binary=config.vlt_binary,
        command_runner=CommandRunner(timeout=config.timeout_seconds),
        max_retries=config.max_retries,
        retry_delay=config.retry_delay,
    )

    try:
        results = await run_action(
            inputs_from_options(**options), runner, actions, config
        )
    except QueryDepsError as e:
        logger.error("action_failed", error=e.message)
        actions.set_failed(f"Action failed: {e.message}")
        raise SystemExit(ExitCode.FAILURE) from e

    if actions.failed:
        raise SystemExit(ExitCode.FAILURE)

    click.echo(f"✅ All {len(results)} queries passed!")
