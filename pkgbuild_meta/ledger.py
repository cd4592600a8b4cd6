"""Append-only record of every version that has been built."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import List

from .utils import append_text, read_text, write_text

logger = logging.getLogger(__name__)


class VersionLedger:
    """One version per line, first-seen order, never rewritten."""

    def __init__(self, path: Path) -> None:
        self.path = path

    def versions(self) -> List[str]:
        if not self.path.exists():
            return []
        entries = (line.strip() for line in read_text(self.path).split("\n"))
        return [entry for entry in entries if entry]

    def __contains__(self, version: object) -> bool:
        return version in self.versions()

    def record_version(self, version: str) -> bool:
        """Append ``version`` unless it is already recorded."""

        # Entries are matched after trimming, so a padded version would never match.
        if not version or version != version.strip() or "\n" in version:
            raise ValueError(f"Version {version!r} cannot be recorded in the ledger.")

        if not self.path.exists():
            write_text(self.path, version)
            logger.info("Wrote versions")
            return True

        if version in self.versions():
            logger.debug("Version %s already recorded in %s", version, self.path)
            return False

        append_text(self.path, f"\n{version}")
        logger.info("Wrote versions")
        return True
