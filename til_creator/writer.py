from __future__ import annotations

import logging
from pathlib import Path

log = logging.getLogger(__name__)


class FileWriter:
    """Writes a rendered entry to disk, replacing whatever was there."""

    def write(self, target: Path, content: str) -> Path:
        folder = target.parent
        if not folder.exists():
            folder.mkdir(parents=True, exist_ok=True)
            log.info("Created folder %s", folder)
        with target.open("w", encoding="utf-8") as handle:
            handle.write(content)
        log.info("Wrote %d characters to %s", len(content), target)
        return target
