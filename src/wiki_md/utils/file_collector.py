"""
Input File Collector

Finds the HTML pages a run should convert.

A directory is walked recursively (no depth limit, symlinks followed without
cycle detection) and every file whose extension is exactly ``html`` is kept.
Any other path is returned as-is, whatever its extension, so a single page can
be converted by naming it directly.
"""

import logging
from pathlib import Path

from ..errors import CollectionError

logger = logging.getLogger(__name__)

HTML_SUFFIX = ".html"


def collect_files(path: Path) -> list[Path]:
    """Collect the input files under ``path``.

    Args:
        path: Folder to walk, or a single file

    Returns:
        Collected file paths, in sorted walk order

    Raises:
        CollectionError: If a directory cannot be listed
    """
    if not path.is_dir():
        return [path]

    try:
        entries = sorted(path.iterdir())
    except OSError as e:
        raise CollectionError(path, e.strerror or str(e)) from e

    result = []
    for entry in entries:
        if entry.is_dir():
            result.extend(collect_files(entry))
        elif entry.suffix == HTML_SUFFIX:
            result.append(entry)

    logger.debug("Collected %d file(s) from %s", len(result), path)
    return result
