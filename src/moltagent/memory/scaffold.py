"""Create the memory directory and seed it with default files. Idempotent."""

from __future__ import annotations

import json
import logging
from collections.abc import Callable
from dataclasses import dataclass, field
from pathlib import Path

logger = logging.getLogger(__name__)

# Callback for user-facing progress lines
NoticeCallback = Callable[[str], None]


@dataclass
class ScaffoldReport:
    """Which files a scaffolding pass wrote and which it left alone."""

    created: list[str] = field(default_factory=list)
    skipped: list[str] = field(default_factory=list)


def ensure_memory_dir(path: Path) -> bool:
    """Create *path* and any missing parents. Returns True if it was created."""
    if path.is_dir():
        return False
    path.mkdir(parents=True, exist_ok=True)
    logger.debug("Created memory directory %s", path)
    return True


def _serialize(content: dict | list | str) -> str:
    if isinstance(content, str):
        return content
    return json.dumps(content, indent=2, ensure_ascii=False)


def scaffold_files(
    memory_dir: Path,
    files: dict[str, dict | list | str],
    notify: NoticeCallback = print,
) -> ScaffoldReport:
    """Write each file in *files* unless it already exists.

    Uses exclusive-create opens, so a file that appears between runs (or
    from a concurrent run) is never overwritten. Files written before a
    failure stay on disk.
    """
    report = ScaffoldReport()
    for filename, content in files.items():
        path = memory_dir / filename
        text = _serialize(content)
        try:
            with path.open("x", encoding="utf-8") as f:
                f.write(text)
        except FileExistsError:
            notify(f"⏭ Skipping {filename} (already exists)")
            report.skipped.append(filename)
            continue
        logger.debug("Wrote %s (%d chars)", path, len(text))
        notify(f"✓ Created {filename}")
        report.created.append(filename)
    return report
