"""
Chat router for the avatar panel.

Each user utterance is answered by the first matching keyword rule of a small
knowledge base; anything else is looked up with the summary service. Rule
answers are appended immediately. Summary lookups run on a worker and their
reply is posted back to the UI loop, stamped with the exchange it answers.
"""

import itertools
import threading
from dataclasses import dataclass
from typing import Callable, Iterable, List, Optional, Set, Tuple

from .content import (
    CHAT_GREETING,
    CHAT_PLACEHOLDER,
    EATING_ANSWER,
    GREETING_ANSWER,
    MICROGRAVITY_ANSWER,
    SELF_INTRODUCTION,
    SUMMARY_FALLBACK,
)
from .logger import logger
from .models import ChatTurn, Speaker

Fetcher = Callable[[str], str]
Task = Callable[[], None]


def run_in_thread(work: Task) -> None:
    """Default worker: a daemon thread per lookup."""
    threading.Thread(target=work, daemon=True).start()


def run_now(callback: Task) -> None:
    """Default post-back for callers that are already on their own loop."""
    callback()


@dataclass(frozen=True)
class ChatRule:
    """Answer `response` when the normalized input contains any keyword."""
    keywords: Tuple[str, ...]
    response: str

    def matches(self, normalized: str) -> bool:
        return any(keyword in normalized for keyword in self.keywords)


# Order matters: first match wins
KNOWLEDGE_BASE: Tuple[ChatRule, ...] = (
    ChatRule(("zero gravity", "microgravity"), MICROGRAVITY_ANSWER),
    ChatRule(("who are you",), SELF_INTRODUCTION),
    ChatRule(("hello", "hi"), GREETING_ANSWER),
    ChatRule(("astronauts eat", "astronaut eat"), EATING_ANSWER),
)


def match_rule(normalized: str, rules: Iterable[ChatRule] = KNOWLEDGE_BASE) -> Optional[ChatRule]:
    for rule in rules:
        if rule.matches(normalized):
            return rule
    return None


class ChatTranscript:
    """Append-only list of chat turns with change listeners."""

    def __init__(self) -> None:
        self._turns: List[ChatTurn] = []
        self._listeners: List[Callable[[ChatTurn], None]] = []

    @property
    def turns(self) -> Tuple[ChatTurn, ...]:
        return tuple(self._turns)

    def __len__(self) -> int:
        return len(self._turns)

    def subscribe(self, listener: Callable[[ChatTurn], None]) -> None:
        self._listeners.append(listener)

    def append(self, turn: ChatTurn) -> None:
        self._turns.append(turn)
        for listener in self._listeners:
            listener(turn)


class ChatRouter:
    """
    Routes utterances to canned answers or the summary service.

    `post` must run a callback on the UI loop (Tk: ``widget.after(0, cb)``)
    and `spawn` must run work off it. Both default to sensible values for
    the desktop app; tests pass synchronous or deferred callables.
    """

    def __init__(
        self,
        transcript: ChatTranscript,
        fetch_summary: Fetcher,
        rules: Tuple[ChatRule, ...] = KNOWLEDGE_BASE,
        post: Callable[[Task], None] = run_now,
        spawn: Callable[[Task], None] = run_in_thread,
        placeholder: str = CHAT_PLACEHOLDER,
        on_busy_changed: Optional[Callable[[bool], None]] = None,
    ) -> None:
        self.transcript = transcript
        self.rules = rules
        self.placeholder = placeholder
        self.on_busy_changed = on_busy_changed
        self._fetch_summary = fetch_summary
        self._post = post
        self._spawn = spawn
        self._ids = itertools.count(1)
        self._pending: Set[int] = set()

    @property
    def pending(self) -> Set[int]:
        """Exchange ids still waiting for a summary reply."""
        return set(self._pending)

    def greet(self, text: str = CHAT_GREETING) -> None:
        """Append the one-off avatar greeting shown when the panel opens."""
        self.transcript.append(ChatTurn(Speaker.AVATAR, text))

    def ask(self, utterance: str) -> Optional[int]:
        """
        Handle one user utterance.

        Returns the exchange id, or None when the input was empty or the
        placeholder (in which case the transcript is untouched).
        """
        text = (utterance or "").strip()
        if not text or text == self.placeholder:
            return None

        exchange_id = next(self._ids)
        self.transcript.append(ChatTurn(Speaker.USER, text, exchange_id))

        rule = match_rule(text.lower(), self.rules)
        if rule is not None:
            logger.chat(f"#{exchange_id} matched rule {rule.keywords}")
            self.transcript.append(ChatTurn(Speaker.AVATAR, rule.response, exchange_id))
            return exchange_id

        logger.chat(f"#{exchange_id} no rule matched, asking summary service")
        self._pending.add(exchange_id)
        self._notify_busy()
        self._spawn(lambda: self._lookup(exchange_id, text))
        return exchange_id

    def cancel_pending(self) -> None:
        """Drop every reply still in flight (e.g. the panel was left)."""
        if not self._pending:
            return
        logger.chat(f"Dropping {len(self._pending)} pending repl{'y' if len(self._pending) == 1 else 'ies'}")
        self._pending.clear()
        self._notify_busy()

    # Worker side ---------------------------------------------------------

    def _lookup(self, exchange_id: int, topic: str) -> None:
        logger.task_start(f"summary lookup #{exchange_id}")
        try:
            reply = self._fetch_summary(topic)
        except Exception as e:
            logger.task_error(f"summary lookup #{exchange_id}", str(e))
            reply = f"{SUMMARY_FALLBACK} ({e})"
        if not reply or not reply.strip():
            reply = SUMMARY_FALLBACK
        self._post(lambda: self._deliver(exchange_id, reply))

    # UI-loop side --------------------------------------------------------

    def _deliver(self, exchange_id: int, reply: str) -> None:
        if exchange_id not in self._pending:
            logger.chat(f"#{exchange_id} reply arrived after cancel, dropped")
            return
        self._pending.discard(exchange_id)
        self.transcript.append(ChatTurn(Speaker.AVATAR, reply, exchange_id))
        logger.task_complete(f"summary lookup #{exchange_id}")
        self._notify_busy()

    def _notify_busy(self) -> None:
        if self.on_busy_changed is not None:
            self.on_busy_changed(bool(self._pending))
