from typing import Optional, Sequence

from .content import WELCOME_DIALOGUE
from .navigation import NavigationController, ScreenName

NEXT_LABEL = "Next"
START_LABEL = "🚀 Start Lesson"


class DialoguePacer:
    """Steps through the welcome dialogue, then hands over to the lesson."""

    def __init__(self, controller: NavigationController, dialogue: Sequence[str] = WELCOME_DIALOGUE) -> None:
        self.controller = controller
        self.dialogue = tuple(dialogue)
        self.index = 0

    @property
    def current_line(self) -> str:
        return self.dialogue[self.index] if self.dialogue else ""

    @property
    def is_last(self) -> bool:
        return self.index >= len(self.dialogue) - 1

    @property
    def button_label(self) -> str:
        return START_LABEL if self.is_last else NEXT_LABEL

    def advance(self) -> Optional[str]:
        """Show the next line, or go to the lesson after the last one."""
        if not self.is_last:
            self.index += 1
            return self.current_line
        self.controller.show_screen(ScreenName.LESSON)
        return None

    def reset(self) -> None:
        self.index = 0
