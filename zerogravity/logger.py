"""
Colored console diagnostics for the Zero Gravity Lesson.

Every line carries a wall-clock time, the seconds since start-up and a short
category tag, so a session can be followed screen by screen:

    14:02:11.387 (+   3.2s) [ NAV] welcome → lesson
    14:02:19.004 (+  10.8s) [ API] → Calling page/summary (topic: 'Quasar')

Usage:
    from zerogravity.logger import logger

    logger.nav("welcome", "lesson")
    logger.error("Failed to append progress", exc_info=True)
"""

import sys
import time
import traceback
from datetime import datetime
from typing import Optional, TextIO

# Dialogue and tags use emoji and box characters
for _stream in (sys.stdout, sys.stderr):
    if hasattr(_stream, "reconfigure"):
        try:
            _stream.reconfigure(encoding="utf-8")
        except (ValueError, OSError):
            pass


class Ansi:
    """The handful of terminal escapes the logger uses."""
    RESET = "\033[0m"
    BOLD = "\033[1m"
    DIM = "\033[2m"
    RED = "\033[91m"
    GREEN = "\033[92m"
    YELLOW = "\033[93m"
    BLUE = "\033[94m"
    MAGENTA = "\033[95m"
    CYAN = "\033[96m"
    WHITE = "\033[37m"


class DebugLogger:
    """
    Category logger writing to stdout (tracebacks go to stderr).

    Tags: ENV, NAV, UI, QUIZ, CHAT, API, IO, IMG, TASK, and OK / WARN / ERR /
    DBG for general status. Set `enabled` to False to silence everything.
    """

    def __init__(self, enabled: bool = True, out: Optional[TextIO] = None,
                 err: Optional[TextIO] = None):
        self.enabled = enabled
        self._out = out
        self._err = err
        self._started = datetime.now()

    @property
    def out(self) -> TextIO:
        return self._out or sys.stdout

    @property
    def err(self) -> TextIO:
        return self._err or sys.stderr

    def _stamp(self) -> str:
        now = datetime.now()
        elapsed = (now - self._started).total_seconds()
        return f"{now:%H:%M:%S}.{now.microsecond // 1000:03d} (+{elapsed:>6.1f}s)"

    def _log(self, tag: str, color: str, message: str, exc_info: bool = False) -> None:
        if not self.enabled:
            return

        stamp = self._stamp()
        indent = " " * (len(stamp) + 8)
        first, *rest = message.split("\n")
        print(f"{Ansi.DIM}{stamp}{Ansi.RESET} {color}{Ansi.BOLD}[{tag:>4}]{Ansi.RESET} {first}",
              file=self.out, flush=True)
        for line in rest:
            print(f"{indent}{line}", file=self.out, flush=True)

        if exc_info:
            for line in traceback.format_exc().splitlines():
                if line.strip():
                    print(f"{indent}{Ansi.RED}{line}{Ansi.RESET}", file=self.err, flush=True)

    # ---- configuration ----
    def env(self, message: str, **kwargs) -> None:
        self._log("ENV", Ansi.MAGENTA, message, **kwargs)

    def env_success(self, message: str, **kwargs) -> None:
        self._log("ENV", Ansi.GREEN, f"✓ {message}", **kwargs)

    # ---- screens ----
    def nav(self, from_screen: Optional[str], to_screen: str, **kwargs) -> None:
        """Log a screen transition (`from_screen` is None at start-up)."""
        self._log("NAV", Ansi.BLUE, f"{from_screen or '∅'} → {to_screen}", **kwargs)

    def ui(self, message: str, **kwargs) -> None:
        self._log("UI", Ansi.BLUE, message, **kwargs)

    def quiz(self, message: str, **kwargs) -> None:
        self._log("QUIZ", Ansi.MAGENTA, message, **kwargs)

    def chat(self, message: str, **kwargs) -> None:
        self._log("CHAT", Ansi.CYAN, message, **kwargs)

    # ---- summary service ----
    def api_call(self, endpoint: str, topic: Optional[str] = None, **kwargs) -> None:
        suffix = f" (topic: {topic!r})" if topic else ""
        self._log("API", Ansi.CYAN, f"→ Calling {endpoint}{suffix}", **kwargs)

    def api_response(self, endpoint: str, duration_ms: Optional[float] = None, **kwargs) -> None:
        suffix = f" ({duration_ms:.0f}ms)" if duration_ms else ""
        self._log("API", Ansi.CYAN, f"← Response from {endpoint}{suffix}", **kwargs)

    def api_error(self, message: str, **kwargs) -> None:
        self._log("API", Ansi.RED, f"✗ {message}", **kwargs)

    # ---- files ----
    def io(self, message: str, **kwargs) -> None:
        """Progress file activity."""
        self._log("IO", Ansi.YELLOW, message, **kwargs)

    def img(self, message: str, **kwargs) -> None:
        """Image and cursor assets."""
        self._log("IMG", Ansi.YELLOW, message, **kwargs)

    # ---- worker threads ----
    def task_start(self, task_name: str, **kwargs) -> None:
        self._log("TASK", Ansi.WHITE, f"⚡ {task_name}", **kwargs)

    def task_complete(self, task_name: str, duration_ms: Optional[float] = None, **kwargs) -> None:
        suffix = f" ({duration_ms:.0f}ms)" if duration_ms else ""
        self._log("TASK", Ansi.GREEN, f"✓ {task_name} done{suffix}", **kwargs)

    def task_error(self, task_name: str, error: str, **kwargs) -> None:
        self._log("TASK", Ansi.RED, f"✗ {task_name} failed: {error}", **kwargs)

    # ---- status ----
    def success(self, message: str, **kwargs) -> None:
        self._log("OK", Ansi.GREEN, f"✓ {message}", **kwargs)

    def warning(self, message: str, **kwargs) -> None:
        self._log("WARN", Ansi.YELLOW, f"⚠ {message}", **kwargs)

    def error(self, message: str, **kwargs) -> None:
        self._log("ERR", Ansi.RED, f"✗ {message}", **kwargs)

    def debug(self, message: str, **kwargs) -> None:
        self._log("DBG", Ansi.DIM, message, **kwargs)

    # ---- decoration ----
    def separator(self, title: Optional[str] = None) -> None:
        if not self.enabled:
            return
        rule = f"{'─' * 20} {title} {'─' * 20}" if title else "─" * 60
        print(f"\n{Ansi.DIM}{rule}{Ansi.RESET}\n", file=self.out, flush=True)

    def banner(self, text: str) -> None:
        if not self.enabled:
            return
        width = max(60, len(text) + 4)
        pad = " " * ((width - len(text)) // 2)
        print(f"\n{Ansi.CYAN}{'═' * width}\n║{pad}{Ansi.BOLD}{text}{Ansi.RESET}{Ansi.CYAN}{pad}║\n"
              f"{'═' * width}{Ansi.RESET}\n", file=self.out, flush=True)


logger = DebugLogger(enabled=True)


class Timer:
    """Context manager measuring wall time in milliseconds."""

    def __init__(self):
        self.duration_ms: float = 0.0
        self._start: Optional[float] = None

    def __enter__(self) -> "Timer":
        self._start = time.perf_counter()
        return self

    def __exit__(self, *args) -> None:
        if self._start is not None:
            self.duration_ms = (time.perf_counter() - self._start) * 1000
