"""CLI commands for raising a condition and seeing where it is handled."""

from __future__ import annotations

from pathlib import Path

import click

from exdispatch.application.dispatch_condition import DispatchConditionHandler
from exdispatch.application.dto import ClauseDTO, ConditionSpec
from exdispatch.application.propagate_condition import PropagateConditionHandler
from exdispatch.domain.exceptions import DomainException
from exdispatch.infrastructure.bootstrap import handler_block_repository


def _condition_options(func):
    """Options shared by every command that raises a condition."""
    func = click.option(
        "--application",
        is_flag=True,
        default=False,
        help="Raise as an application error (needs --code in [-20999, -20000] and --message).",
    )(func)
    func = click.option("--message", default=None, help="Error message.")(func)
    func = click.option("--code", type=int, default=None, help="Error code, e.g. -2292.")(func)
    func = click.option("-i", "--identifier", default=None, help="Exception name, e.g. NO_DATA_FOUND.")(func)
    return func


def _echo_clause(clause: ClauseDTO) -> None:
    suffix = f"  -> {clause.action}" if clause.action else ""
    click.echo(f"Handled by clause {clause.position}: {clause.when}{suffix}")


@click.command("dispatch")
@click.option("--block", "block_name", required=True, help="Handler block to raise in.")
@_condition_options
@click.pass_context
def dispatch(
    ctx: click.Context,
    block_name: str,
    identifier: str | None,
    code: int | None,
    message: str | None,
    application: bool,
) -> None:
    """Raise a condition in a block and show which clause handles it.

    Exits with status 1 when the condition is unhandled.
    """
    spec = ConditionSpec(identifier=identifier, code=code, message=message, application=application)
    handler = DispatchConditionHandler(block_repo=handler_block_repository(ctx.obj))

    try:
        dto = handler.handle(block_name, spec)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Condition: {dto.condition}  (SQLCODE={dto.sqlcode}, SQLERRM={dto.sqlerrm})")
    if dto.clause is not None:
        _echo_clause(dto.clause)
        return

    click.echo(f"Unhandled in block '{dto.block_name}'.")
    ctx.exit(1)


@click.command("propagate")
@click.option(
    "--block",
    "block_names",
    required=True,
    multiple=True,
    help="Handler block; repeat from innermost to outermost.",
)
@_condition_options
@click.pass_context
def propagate(
    ctx: click.Context,
    block_names: tuple[str, ...],
    identifier: str | None,
    code: int | None,
    message: str | None,
    application: bool,
) -> None:
    """Raise a condition in the innermost block and follow it outwards.

    Exits with status 1 when no block handles the condition.
    """
    spec = ConditionSpec(identifier=identifier, code=code, message=message, application=application)
    handler = PropagateConditionHandler(block_repo=handler_block_repository(ctx.obj))

    try:
        dto = handler.handle(list(block_names), spec)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Condition: {dto.condition}  (SQLCODE={dto.sqlcode}, SQLERRM={dto.sqlerrm})")
    click.echo(f"Path: {' -> '.join(dto.trail)}")
    if dto.clause is not None:
        click.echo(f"Caught in block '{dto.scope_name}' (depth {dto.depth})")
        _echo_clause(dto.clause)
        return

    click.echo("Unhandled in every block; terminating.")
    ctx.exit(1)
