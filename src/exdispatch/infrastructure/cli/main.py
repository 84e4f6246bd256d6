from pathlib import Path

import click

from exdispatch.infrastructure.bootstrap import configure_logging
from exdispatch.infrastructure.cli.block_commands import block_define, block_list, block_show
from exdispatch.infrastructure.cli.dispatch_commands import dispatch, propagate


@click.group()
@click.option(
    "--data-dir",
    type=click.Path(file_okay=False, path_type=Path),
    default=None,
    help="Directory holding handler_blocks.json.",
)
@click.option("-v", "--verbose", is_flag=True, default=False, help="Enable debug logging.")
@click.pass_context
def cli(ctx: click.Context, data_dir: Path | None, verbose: bool) -> None:
    """exdispatch — exception handler dispatch"""
    configure_logging(verbose)
    ctx.obj = data_dir


@cli.group()
def block() -> None:
    """Manage handler blocks."""


# Register subcommands
block.add_command(block_define)
block.add_command(block_list)
block.add_command(block_show)
cli.add_command(dispatch)
cli.add_command(propagate)
