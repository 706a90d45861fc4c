"""
Screen navigation and shared session state.

The NavigationController is the one object every screen receives. It keeps
the latest quiz score, the progress log and the cursor resource, and decides
which registered screen is visible. It does not police which transitions are
allowed; callers only ask for the moves the lesson flow offers:

    welcome → lesson → quiz → result
    lesson ↔ chat, lesson → welcome, quiz → lesson, result → quiz
"""

from enum import Enum
from typing import Dict, List, Optional, Protocol, Union

from .logger import logger
from .progress import ProgressLog


class ScreenName(str, Enum):
    WELCOME = "welcome"
    LESSON = "lesson"
    QUIZ = "quiz"
    RESULT = "result"
    CHAT = "chat"


class Screen(Protocol):
    """What the controller needs from a screen."""

    def mount(self) -> None:
        """Become the visible screen (raise, refresh, start per-visit state)."""

    def unmount(self) -> None:
        """Stop being visible (drop per-visit state)."""


class NavigationController:
    """Owns session state and the visible screen."""

    def __init__(self, progress: ProgressLog, cursor: str = "") -> None:
        self._progress = progress
        self._cursor = cursor
        self._screens: Dict[ScreenName, Screen] = {}
        self._current: Optional[ScreenName] = None
        self._score = 0
        self._has_result = False
        self.history: List[ScreenName] = []

    # Screens ---------------------------------------------------------------

    def register(self, name: Union[ScreenName, str], screen: Screen) -> None:
        self._screens[ScreenName(name)] = screen
        logger.debug(f"  Registered screen: {ScreenName(name).value}")

    @property
    def current_screen(self) -> Optional[ScreenName]:
        return self._current

    def show_screen(self, name: Union[ScreenName, str]) -> None:
        """
        Make `name` the visible screen.

        Showing the current screen again does nothing. Unknown names are
        logged and ignored. A screen's mount() may navigate again (an empty
        quiz jumps straight to the result), so state is updated before the
        target is mounted.
        """
        try:
            target = ScreenName(name)
        except ValueError:
            logger.error(f"Unknown screen {name!r}, staying on {self._current}")
            return
        if target == self._current:
            return
        screen = self._screens.get(target)
        if screen is None:
            logger.error(f"Screen {target.value!r} is not registered")
            return

        previous = self._current
        self._current = target
        self.history.append(target)
        logger.nav(previous.value if previous else None, target.value)

        if previous is not None:
            self._screens[previous].unmount()
        screen.mount()

    # Session state ---------------------------------------------------------

    def set_score(self, score: int) -> None:
        """Store the final score of the quiz run that just finished."""
        self._score = score
        self._has_result = True
        logger.quiz(f"Score handed to session: {score}")

    def get_score(self) -> int:
        return self._score

    @property
    def has_result(self) -> bool:
        """True once a quiz run has finished in this process."""
        return self._has_result

    def progress_sink(self) -> ProgressLog:
        return self._progress

    @property
    def cursor(self) -> str:
        return self._cursor
