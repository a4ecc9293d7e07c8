"""
Writing the generated changelog to disk.
"""

import datetime
import logging
from pathlib import Path
from typing import Optional, Union

from .errors import OutputError

logger = logging.getLogger("thanks-contributors.output")

TIMESTAMP_FORMAT = "%Y-%m-%d_%H-%M-%S"


def current_timestamp(now: Optional[datetime.datetime] = None) -> str:
    """Timestamp used as the output filename, in UTC."""
    now = now or datetime.datetime.now(datetime.timezone.utc)
    return now.strftime(TIMESTAMP_FORMAT)


def write_changelog(text: str, output_dir: Union[str, Path] = "output",
                    timestamp: Optional[str] = None) -> Path:
    """
    Write the changelog to ``<output_dir>/<timestamp>.md``.

    Args:
        text: Markdown content
        output_dir: Target directory, created if missing
        timestamp: Filename stem; defaults to the current time

    Returns:
        Path of the written file

    Raises:
        OutputError: If the directory or the file cannot be written
    """
    directory = Path(output_dir)
    path = directory / f"{timestamp or current_timestamp()}.md"
    try:
        directory.mkdir(parents=True, exist_ok=True)
        with open(path, "w", encoding="utf-8") as f:
            f.write(text)
    except OSError as e:
        logger.error("Failed to write %s: %s", path, e)
        raise OutputError(f"Failed to write changelog to {path}: {e}") from e

    logger.info("Wrote %d characters to %s", len(text), path)
    return path
