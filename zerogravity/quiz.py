"""
Quiz state machine.

One QuizRun is one pass over the quiz bank:

    AWAITING_ANSWER --select_option--> ANSWER_LOCKED --advance--> AWAITING_ANSWER (next question)
                                                     \\--advance--> FINISHED (after the last question)

Anything else is ignored. When the run reaches FINISHED it hands its score to
the navigation controller and shows the result screen, exactly once.
"""

from typing import Dict, Optional, Sequence

from .logger import logger
from .models import OPTION_COUNT, Feedback, QuizPhase, QuizQuestion
from .navigation import NavigationController, ScreenName


class QuizRun:
    """The transient state of one traversal of the quiz bank."""

    def __init__(self, bank: Sequence[QuizQuestion], controller: NavigationController) -> None:
        self.bank = tuple(bank)
        self.controller = controller
        self.cursor = 0
        self.score = 0
        self.phase = QuizPhase.AWAITING_ANSWER if self.bank else QuizPhase.FINISHED
        self.answers: Dict[int, int] = {}           # question index -> chosen option
        self.last_feedback: Optional[Feedback] = None
        self._handed_off = False

    @property
    def total(self) -> int:
        return len(self.bank)

    @property
    def is_finished(self) -> bool:
        return self.phase == QuizPhase.FINISHED

    @property
    def current_question(self) -> Optional[QuizQuestion]:
        if self.is_finished:
            return None
        return self.bank[self.cursor]

    @property
    def position(self) -> str:
        return f"Question {min(self.cursor + 1, self.total)} of {self.total}"

    @property
    def selected_index(self) -> Optional[int]:
        """Option locked in for the current question, if any."""
        return self.answers.get(self.cursor)

    @property
    def is_last_question(self) -> bool:
        return self.cursor == self.total - 1

    def start(self) -> Optional[QuizQuestion]:
        """
        Return the first question to render.

        An empty bank finishes immediately, so this is where its score
        (zero) gets handed over.
        """
        logger.quiz(f"Quiz run started with {self.total} question(s)")
        if self.is_finished:
            self._hand_off()
        return self.current_question

    def select_option(self, index: int) -> Optional[Feedback]:
        """Lock in an answer. Returns the feedback, or None if ignored."""
        if self.phase != QuizPhase.AWAITING_ANSWER:
            return None
        if not isinstance(index, int) or isinstance(index, bool) or not 0 <= index < OPTION_COUNT:
            logger.quiz(f"Ignoring out-of-range option {index!r}")
            return None

        question = self.bank[self.cursor]
        self.answers[self.cursor] = index
        if question.is_correct(index):
            self.score += 1
            self.last_feedback = Feedback.CORRECT
        else:
            self.last_feedback = Feedback.INCORRECT
        self.phase = QuizPhase.ANSWER_LOCKED
        logger.quiz(f"Q{self.cursor + 1}: option {index} → {self.last_feedback.value} (score {self.score})")
        return self.last_feedback

    def advance(self) -> Optional[QuizQuestion]:
        """
        Move past a locked answer.

        Returns the next question, or None when the run is finished or the
        event was ignored (no answer locked yet).
        """
        if self.phase != QuizPhase.ANSWER_LOCKED:
            return None

        self.cursor += 1
        self.last_feedback = None
        if self.cursor >= self.total:
            self.phase = QuizPhase.FINISHED
            self._hand_off()
            return None

        self.phase = QuizPhase.AWAITING_ANSWER
        return self.current_question

    def _hand_off(self) -> None:
        if self._handed_off:
            return
        self._handed_off = True
        logger.quiz(f"Quiz finished: {self.score}/{self.total}")
        self.controller.set_score(self.score)
        self.controller.show_screen(ScreenName.RESULT)
