"""CLI commands for the HandlerBlock aggregate."""

from __future__ import annotations

import re
from pathlib import Path

import click

from exdispatch.application.define_block import DefineHandlerBlockHandler
from exdispatch.application.dto import ClauseSpec, HandlerBlockDTO
from exdispatch.application.list_blocks import ListHandlerBlocksHandler
from exdispatch.application.show_block import ShowHandlerBlockHandler
from exdispatch.domain.exceptions import DomainException
from exdispatch.infrastructure.bootstrap import handler_block_repository

_OR_SPLIT = re.compile(r",|\s+OR\s+", flags=re.IGNORECASE)


def _parse_when(raw: str) -> ClauseSpec:
    """Parse 'NO_DATA_FOUND OR TOO_MANY_ROWS=log' into a ClauseSpec."""
    names_part, _, action = raw.partition("=")
    names = [n.strip() for n in _OR_SPLIT.split(names_part) if n.strip()]
    if not names:
        raise click.BadParameter(
            f"Invalid clause '{raw}'. Expected 'NAME[,NAME...][=action]' or 'OTHERS'."
        )
    return ClauseSpec(matches=names, action=action.strip() or None)


def _parse_bindings(raw: tuple[str, ...]) -> dict[str, int]:
    """Parse ('FK_VIOLATION:-2292', ...) into {name: code}."""
    result: dict[str, int] = {}
    for pair in raw:
        pair = pair.strip()
        if ":" not in pair:
            raise click.BadParameter(
                f"Invalid binding '{pair}'. Expected 'ExceptionName:Code'."
            )
        name, code_str = pair.split(":", 1)
        try:
            code = int(code_str)
        except ValueError:
            raise click.BadParameter(
                f"Invalid code '{code_str}' for exception '{name}'."
            )
        result[name.strip()] = code
    return result


def _display_block(dto: HandlerBlockDTO) -> None:
    """Shared formatting for displaying a handler block."""
    click.echo(f"Block: {dto.name}")
    if dto.exceptions:
        click.echo(f"Declared: {', '.join(dto.exceptions)}")
    for name, code in dto.bindings.items():
        click.echo(f"  PRAGMA EXCEPTION_INIT({name}, {code})")
    click.echo()
    click.echo(f"  {'Pos':>3}  {'Clause':<45} {'Action'}")
    click.echo(f"  {'-'*65}")
    for clause in dto.clauses:
        click.echo(f"  {clause.position:>3}  {clause.when:<45} {clause.action or ''}")


@click.command("define")
@click.option("--name", required=True, help="Handler block name.")
@click.option(
    "--when",
    "whens",
    required=True,
    multiple=True,
    help="Clause as 'NAME[,NAME...][=action]'; 'OTHERS' for the catch-all. Repeat in order.",
)
@click.option("--exception", "exceptions", multiple=True, help="Declare a user exception.")
@click.option("--bind", "bindings", multiple=True, help="Bind a declared exception as 'Name:Code'.")
@click.option("--replace", is_flag=True, default=False, help="Overwrite an existing block.")
@click.pass_obj
def block_define(
    data_dir: Path | None,
    name: str,
    whens: tuple[str, ...],
    exceptions: tuple[str, ...],
    bindings: tuple[str, ...],
    replace: bool,
) -> None:
    """Define a handler block (ordered WHEN clauses)."""
    specs = [_parse_when(raw) for raw in whens]
    bound = _parse_bindings(bindings)

    handler = DefineHandlerBlockHandler(block_repo=handler_block_repository(data_dir))

    try:
        dto = handler.handle(
            name=name,
            clauses=specs,
            exceptions=list(exceptions),
            bindings=bound,
            replace=replace,
        )
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Handler block '{dto.name}' saved ({len(dto.clauses)} clauses)")
    click.echo()
    _display_block(dto)


@click.command("show")
@click.option("--name", required=True, help="Handler block to display.")
@click.pass_obj
def block_show(data_dir: Path | None, name: str) -> None:
    """Show details of a handler block."""
    handler = ShowHandlerBlockHandler(block_repo=handler_block_repository(data_dir))

    try:
        dto = handler.handle(name)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    _display_block(dto)


@click.command("list")
@click.pass_obj
def block_list(data_dir: Path | None) -> None:
    """List stored handler blocks."""
    handler = ListHandlerBlocksHandler(block_repo=handler_block_repository(data_dir))
    blocks = handler.handle()

    if not blocks:
        click.echo("No handler blocks defined.")
        return

    click.echo(f"{'Block':<30} {'Clauses':>8} {'Catch-all':>10}")
    click.echo("-" * 50)
    for dto in blocks:
        has_catch_all = "yes" if dto.has_catch_all else "no"
        click.echo(f"{dto.name:<30} {len(dto.clauses):>8} {has_catch_all:>10}")
