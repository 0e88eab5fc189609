"""On-disk storage for Saigai Watch: the preference file and exported pages.

Writes go through a temp file in the destination directory followed by
``os.replace``, so a reader never sees a half-written preference file or page.
"""

from __future__ import annotations

import contextlib
import json
import logging
import os
import tempfile
from pathlib import Path
from typing import Any, Optional

logger = logging.getLogger(__name__)


def _atomic_write_text(path: Path, text: str) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    fd, tmp_name = tempfile.mkstemp(prefix=f".{path.name}.", suffix=".tmp", dir=path.parent)
    try:
        with os.fdopen(fd, "w", encoding="utf-8") as tmp:
            tmp.write(text)
        os.replace(tmp_name, path)
    except OSError:
        with contextlib.suppress(FileNotFoundError):
            os.unlink(tmp_name)
        raise


def save_json(data: Any, path: str | Path, indent: int = 2) -> None:
    """Serialize ``data`` and replace ``path`` with it.

    Raises:
        TypeError, ValueError: ``data`` cannot be encoded as JSON.
        OSError: The file could not be written.
    """
    path = Path(path)
    text = json.dumps(data, indent=indent, ensure_ascii=False)
    try:
        _atomic_write_text(path, text)
    except OSError as exc:
        logger.error("Could not write %s: %s", path, exc)
        raise
    logger.debug("Wrote %s (%d bytes)", path, len(text))


def load_json(path: str | Path) -> Optional[Any]:
    """Decoded contents of ``path``, or None when absent or unreadable."""
    path = Path(path)
    try:
        with open(path, "r", encoding="utf-8") as f:
            return json.load(f)
    except FileNotFoundError:
        logger.debug("No file at %s", path)
    except (json.JSONDecodeError, OSError) as exc:
        logger.warning("Ignoring unreadable JSON file %s: %s", path, exc)
    return None


def write_page(html_content: str, output_path: str | Path) -> bool:
    """Write a rendered HTML page.

    Returns:
        True when the page is on disk, False if the write failed (logged).
    """
    output_path = Path(output_path)
    try:
        _atomic_write_text(output_path, html_content)
    except OSError as exc:
        logger.error("Page export to %s failed: %s", output_path, exc)
        return False
    logger.info("Page written to %s", output_path)
    return True
