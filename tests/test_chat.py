from zerogravity.chat import KNOWLEDGE_BASE, ChatRouter, ChatTranscript, match_rule
from zerogravity.content import (
    CHAT_GREETING,
    CHAT_PLACEHOLDER,
    EATING_ANSWER,
    GREETING_ANSWER,
    MICROGRAVITY_ANSWER,
    SELF_INTRODUCTION,
    SUMMARY_FALLBACK,
)
from zerogravity.models import Speaker


class RecordingFetcher:
    def __init__(self, reply="A quasar is a very bright galactic nucleus.", error=None) -> None:
        self.reply = reply
        self.error = error
        self.topics = []

    def __call__(self, topic: str) -> str:
        self.topics.append(topic)
        if self.error is not None:
            raise self.error
        return self.reply


class DeferredLoop:
    """Collects posted callbacks so a test decides when the UI loop runs them."""

    def __init__(self) -> None:
        self.queue = []

    def post(self, callback) -> None:
        self.queue.append(callback)

    def run(self) -> None:
        while self.queue:
            self.queue.pop(0)()


def make_router(fetcher, post=None, **kwargs):
    transcript = ChatTranscript()
    kwargs.setdefault("spawn", lambda work: work())
    if post is not None:
        kwargs["post"] = post
    return transcript, ChatRouter(transcript, fetcher, **kwargs)


def test_greeting_rule_makes_no_network_call() -> None:
    fetcher = RecordingFetcher()
    transcript, router = make_router(fetcher)

    router.ask("Hello there")

    assert fetcher.topics == []
    assert [t.speaker for t in transcript.turns] == [Speaker.USER, Speaker.AVATAR]
    assert transcript.turns[-1].text == GREETING_ANSWER


def test_keyword_inside_sentence_matches_microgravity_rule() -> None:
    fetcher = RecordingFetcher()
    transcript, router = make_router(fetcher)

    router.ask("Tell me about zero gravity please")

    assert fetcher.topics == []
    assert transcript.turns[-1].text == MICROGRAVITY_ANSWER


def test_rules_are_case_insensitive_and_ordered() -> None:
    assert match_rule("who are you?").response == SELF_INTRODUCTION
    # "microgravity" wins over "hi" even though both match
    assert match_rule("hi, what is microgravity").response == MICROGRAVITY_ANSWER
    assert match_rule("what do astronauts eat").response == EATING_ANSWER
    assert match_rule("quasar") is None

    transcript, router = make_router(RecordingFetcher())
    router.ask("WHO ARE YOU")
    assert transcript.turns[-1].text == SELF_INTRODUCTION


def test_hi_matches_as_substring() -> None:
    # Substring matching: "this" contains "hi"
    assert match_rule("this is a test").response == GREETING_ANSWER


def test_unmatched_question_uses_summary() -> None:
    fetcher = RecordingFetcher()
    transcript, router = make_router(fetcher)

    exchange = router.ask("  Quasar ")

    assert fetcher.topics == ["Quasar"]
    user, avatar = transcript.turns
    assert user.text == "Quasar"
    assert avatar.text == fetcher.reply
    assert user.exchange_id == avatar.exchange_id == exchange
    assert router.pending == set()


def test_summary_failure_becomes_fallback() -> None:
    fetcher = RecordingFetcher(error=ConnectionError("network down"))
    transcript, router = make_router(fetcher)

    router.ask("Quasar")

    turns = transcript.turns
    assert [t.speaker for t in turns] == [Speaker.USER, Speaker.AVATAR]
    assert turns[1].text.startswith(SUMMARY_FALLBACK)


def test_empty_summary_becomes_fallback() -> None:
    transcript, router = make_router(RecordingFetcher(reply="   "))
    router.ask("Quasar")
    assert transcript.turns[-1].text == SUMMARY_FALLBACK


def test_empty_and_placeholder_input_are_ignored() -> None:
    fetcher = RecordingFetcher()
    transcript, router = make_router(fetcher)

    assert router.ask("") is None
    assert router.ask("   ") is None
    assert router.ask(CHAT_PLACEHOLDER) is None
    assert router.ask(None) is None

    assert len(transcript) == 0
    assert fetcher.topics == []


def test_greet_adds_avatar_turn() -> None:
    transcript, router = make_router(RecordingFetcher())
    seen = []
    transcript.subscribe(seen.append)

    router.greet()

    assert seen[0].text == CHAT_GREETING
    assert seen[0].render() == f"Avatar: {CHAT_GREETING}"
    assert seen[0].exchange_id is None


def test_reply_waits_for_ui_loop() -> None:
    loop = DeferredLoop()
    busy = []
    transcript, router = make_router(RecordingFetcher(), post=loop.post, on_busy_changed=busy.append)

    exchange = router.ask("Quasar")

    assert len(transcript) == 1
    assert router.pending == {exchange}
    loop.run()
    assert len(transcript) == 2
    assert busy == [True, False]


def test_cancel_drops_late_replies() -> None:
    loop = DeferredLoop()
    transcript, router = make_router(RecordingFetcher(), post=loop.post)

    router.ask("Quasar")
    router.cancel_pending()
    loop.run()

    assert [t.speaker for t in transcript.turns] == [Speaker.USER]
    assert router.pending == set()


def test_replies_keep_their_exchange_ids() -> None:
    loop = DeferredLoop()
    transcript, router = make_router(RecordingFetcher(), post=loop.post)

    first = router.ask("Quasar")
    second = router.ask("Pulsar")
    router.ask("hello")
    loop.run()

    avatar_ids = [t.exchange_id for t in transcript.turns if t.speaker == Speaker.AVATAR]
    assert first != second
    assert avatar_ids == [3, first, second]


def test_knowledge_base_starts_with_microgravity() -> None:
    assert KNOWLEDGE_BASE[0].response == MICROGRAVITY_ANSWER
