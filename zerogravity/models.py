from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple

OPTION_COUNT = 4


class Speaker(str, Enum):
    """Who produced a chat turn."""
    USER = "You"
    AVATAR = "Avatar"


class QuizPhase(str, Enum):
    """Phase of a quiz run."""
    AWAITING_ANSWER = "awaiting_answer"
    ANSWER_LOCKED = "answer_locked"
    FINISHED = "finished"


class Feedback(str, Enum):
    """Per-answer feedback emitted by the quiz."""
    CORRECT = "correct"
    INCORRECT = "incorrect"


class MedalTier(str, Enum):
    """Medal awarded on the result screen."""
    EXPERT = "Zero-G Expert"
    SILVER = "Silver Medal"
    BRONZE = "Bronze Medal"
    NONE = "No Medal"


@dataclass(frozen=True)
class QuizQuestion:
    """A multiple-choice question with exactly four options."""
    prompt: str
    options: Tuple[str, str, str, str]
    correct_index: int               # 0-based index into options

    def __post_init__(self) -> None:
        if len(self.options) != OPTION_COUNT:
            raise ValueError(
                f"Question {self.prompt!r} needs exactly {OPTION_COUNT} options, got {len(self.options)}"
            )
        if not 0 <= self.correct_index < OPTION_COUNT:
            raise ValueError(f"Question {self.prompt!r} has invalid correct_index {self.correct_index}")

    def is_correct(self, index: int) -> bool:
        return index == self.correct_index


@dataclass(frozen=True)
class ChatTurn:
    """One line of the chat transcript."""
    speaker: Speaker
    text: str
    exchange_id: Optional[int] = None   # user utterance this turn belongs to (None for the greeting)

    def render(self) -> str:
        return f"{self.speaker.value}: {self.text}"


@dataclass(frozen=True)
class Medal:
    """Result-screen feedback for a score."""
    tier: MedalTier
    message: str
    image: str                       # well-known image file name
