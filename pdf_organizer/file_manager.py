"""
Local document discovery.

Walks a directory tree and returns paths of files with a supported
extension. Failures are logged and produce an empty (or partial) list,
never an exception.
"""

import logging
import os
from pathlib import Path
from typing import Iterable, List, Union

logger = logging.getLogger(__name__)

DEFAULT_EXTENSIONS = (".pdf",)


def find_documents(
    root: Union[str, Path],
    extensions: Iterable[str] = DEFAULT_EXTENSIONS
) -> List[str]:
    """
    Recursively find documents under root.

    Args:
        root: Directory to scan
        extensions: Accepted file extensions (case-insensitive, with dot)

    Returns:
        Sorted list of file paths (empty if root is missing or unreadable)
    """
    root_path = Path(root)
    wanted = {ext.lower() for ext in extensions}

    if not root_path.exists():
        logger.error(f"Directory not found: {root_path}")
        return []
    if not root_path.is_dir():
        logger.error(f"Not a directory: {root_path}")
        return []

    def on_error(err: OSError):
        logger.error(f"Filesystem error accessing {err.filename}: {err.strerror}")

    paths = []
    for dirpath, _dirnames, filenames in os.walk(root_path, onerror=on_error):
        for name in filenames:
            path = Path(dirpath) / name
            if path.suffix.lower() in wanted and path.is_file():
                paths.append(str(path))

    paths.sort()
    logger.debug(f"Found {len(paths)} documents under {root_path} (extensions={sorted(wanted)})")
    return paths
