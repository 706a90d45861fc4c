"""
Append-only progress log.

Each saved result is one human-readable line:

    Zero Gravity - Score: 3

The file is opened in append mode for every call and closed again, so there
is no long-lived handle to share between threads.
"""

from pathlib import Path
from typing import Union

from .logger import logger


def format_progress_line(lesson_name: str, score: int) -> str:
    return f"{lesson_name} - Score: {score}\n"


class ProgressLog:
    """Writes lesson/score lines to a single file."""

    def __init__(self, file_path: Union[str, Path]) -> None:
        self.file_path = Path(file_path)

    def append(self, lesson_name: str, score: int) -> bool:
        """
        Append one progress line.

        Returns True when the line was written. Failures are logged and
        reported as False; they are never raised to the caller.
        """
        line = format_progress_line(lesson_name, score)
        try:
            with open(self.file_path, "a", encoding="utf-8") as handle:
                handle.write(line)
        except OSError as e:
            logger.error(f"Could not append progress to {self.file_path}: {e}", exc_info=True)
            return False

        logger.io(f"Saved progress: {line.rstrip()} → {self.file_path}")
        return True
