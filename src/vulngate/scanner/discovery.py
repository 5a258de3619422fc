"""Source-file discovery for the pattern detector."""

from __future__ import annotations

import logging
import os
from pathlib import Path

logger = logging.getLogger(__name__)


def discover_source_files(
    root: Path,
    *,
    extensions: tuple[str, ...],
    exclude_dirs: tuple[str, ...],
    max_file_mb: int,
) -> list[Path]:
    """Recursively list source files under *root*.

    Hidden directories and directories named in *exclude_dirs* are pruned.
    Only files whose suffix is in *extensions* and whose size does not
    exceed *max_file_mb* are returned, sorted by their path relative to root.
    """
    resolved_root = root.resolve()
    allowed_suffixes = {ext.lower() for ext in extensions}
    excluded = set(exclude_dirs)
    size_limit_bytes = max_file_mb * 1024 * 1024
    discovered: list[Path] = []

    for dirpath, dirnames, filenames in os.walk(resolved_root):
        dirnames[:] = sorted(name for name in dirnames if not name.startswith(".") and name not in excluded)
        for filename in filenames:
            path = Path(dirpath) / filename
            if path.suffix.lower() not in allowed_suffixes:
                continue
            try:
                if not path.is_file() or path.stat().st_size > size_limit_bytes:
                    logger.debug("Skipping %s (not a regular file or above size limit)", path)
                    continue
            except OSError:
                continue
            discovered.append(path)

    return sorted(discovered, key=lambda path: relative_display_path(path, resolved_root))


def relative_display_path(path: Path, root: Path) -> str:
    """Render *path* relative to *root* when possible."""
    try:
        return path.relative_to(root).as_posix()
    except ValueError:
        return path.as_posix()
