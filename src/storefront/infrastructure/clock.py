"""JSON-file-backed block clock, the default Clock.

The tick only moves when the host mines blocks; the ledger itself
never advances it.
"""

from __future__ import annotations

import json
from pathlib import Path

from storefront.domain.ports import Clock
from storefront.infrastructure.logging import get_logger

logger = get_logger(__name__)


class JsonBlockClock(Clock):

    def __init__(self, file_path: Path) -> None:
        self._file_path = file_path
        self._ensure_file()

    def current_tick(self) -> int:
        return self._load_raw()["tick"]

    def mine(self, blocks: int = 1) -> int:
        """Advance the clock by *blocks* ticks and return the new tick."""
        if blocks < 1:
            raise ValueError(f"Must mine at least one block, got {blocks}")
        tick = self.current_tick() + blocks
        self._persist_raw({"tick": tick})
        logger.info("blocks_mined", blocks=blocks, tick=tick)
        return tick

    # --- File helpers ---------------------------------------------------------

    def _load_raw(self) -> dict:
        return json.loads(self._file_path.read_text(encoding="utf-8"))

    def _persist_raw(self, raw: dict) -> None:
        self._file_path.write_text(json.dumps(raw, indent=2) + "\n", encoding="utf-8")

    def _ensure_file(self) -> None:
        if not self._file_path.exists():
            self._file_path.parent.mkdir(parents=True, exist_ok=True)
            self._persist_raw({"tick": 0})
