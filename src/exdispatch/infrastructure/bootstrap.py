"""Composition root — wires concrete implementations to domain interfaces.

This is the only place in the codebase that knows about *all* layers.
Every other module depends only on abstractions.
"""

from __future__ import annotations

import logging
import os
from pathlib import Path

from exdispatch.infrastructure.persistence.json_handler_block_repository import (
    JsonHandlerBlockRepository,
)

DATA_DIR_ENV = "EXDISPATCH_DATA_DIR"
BLOCKS_FILE = "handler_blocks.json"

# Resolve data directory relative to the project root.
# When installed in editable mode the project root is the repo root.
_DEFAULT_DATA_DIR = Path(__file__).resolve().parents[3] / "data"


def data_dir(override: Path | None = None) -> Path:
    """Explicit override, then $EXDISPATCH_DATA_DIR, then ``<repo>/data``."""
    if override is not None:
        return override
    env = os.environ.get(DATA_DIR_ENV)
    if env:
        return Path(env)
    return _DEFAULT_DATA_DIR


def handler_block_repository(override: Path | None = None) -> JsonHandlerBlockRepository:
    return JsonHandlerBlockRepository(data_dir(override) / BLOCKS_FILE)


def configure_logging(verbose: bool = False) -> None:
    level = logging.DEBUG if verbose else logging.WARNING
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    # basicConfig is a no-op once the root logger has handlers
    logging.getLogger().setLevel(level)
