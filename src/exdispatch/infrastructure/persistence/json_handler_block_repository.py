"""JSON-file-backed implementation of HandlerBlockRepository."""

from __future__ import annotations

import json
import logging
from pathlib import Path

from exdispatch.domain.model.declarations import ExceptionDeclarations
from exdispatch.domain.model.handler import HandlerBlock, HandlerClause
from exdispatch.domain.repository.handler_block_repository import (
    HandlerBlockRepository,
)

logger = logging.getLogger(__name__)


class JsonHandlerBlockRepository(HandlerBlockRepository):

    def __init__(self, file_path: Path) -> None:
        self._file_path = file_path
        self._ensure_file()

    # --- HandlerBlockRepository interface -------------------------------------

    def get_by_name(self, name: str) -> HandlerBlock | None:
        for raw in self._load_raw():
            if raw["name"].lower() == name.strip().lower():
                return self._to_domain(raw)
        return None

    def list_all(self) -> list[HandlerBlock]:
        return [self._to_domain(raw) for raw in self._load_raw()]

    def save(self, block: HandlerBlock) -> None:
        blocks = self._load_raw()

        # Upsert: replace if exists, otherwise append
        replaced = False
        for i, raw in enumerate(blocks):
            if raw["name"].lower() == block.name.lower():
                blocks[i] = self._to_raw(block)
                replaced = True
                break
        if not replaced:
            blocks.append(self._to_raw(block))

        self._persist_raw(blocks)
        logger.debug("Wrote %d handler block(s) to %s", len(blocks), self._file_path)

    # --- Serialization --------------------------------------------------------

    @staticmethod
    def _to_raw(block: HandlerBlock) -> dict:
        return {
            "name": block.name,
            "clauses": [
                {
                    "matches": sorted(clause.matches),
                    "action": clause.action,
                }
                for clause in block.clauses
            ],
            "exceptions": sorted(block.declarations.names),
            "bindings": block.declarations.as_dict(),
        }

    @staticmethod
    def _to_domain(raw: dict) -> HandlerBlock:
        clauses = tuple(
            HandlerClause(
                matches=frozenset(c["matches"]),
                position=i,
                action=c.get("action"),
            )
            for i, c in enumerate(raw["clauses"])
        )
        declarations = ExceptionDeclarations.of(
            raw.get("exceptions", []),
            {name: int(code) for name, code in raw.get("bindings", {}).items()},
        )
        return HandlerBlock(name=raw["name"], clauses=clauses, declarations=declarations)

    # --- File helpers ---------------------------------------------------------

    def _load_raw(self) -> list[dict]:
        return json.loads(self._file_path.read_text(encoding="utf-8"))

    def _persist_raw(self, blocks: list[dict]) -> None:
        self._file_path.write_text(
            json.dumps(blocks, indent=2) + "\n", encoding="utf-8"
        )

    def _ensure_file(self) -> None:
        if not self._file_path.exists():
            self._file_path.parent.mkdir(parents=True, exist_ok=True)
            self._file_path.write_text("[]", encoding="utf-8")
            logger.info("Created handler block store at %s", self._file_path)
