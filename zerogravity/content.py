"""
Static lesson content for the Zero Gravity Lesson.

This module holds the scripted welcome dialogue, the lesson page, the quiz
bank and the fixed strings used by the chat panel. The screens render these
as-is; nothing here is mutated at runtime.
"""

from typing import Tuple

from .models import QuizQuestion

# ---------------------------------------------------------------------------
# Welcome dialogue (one entry per "Next" click)
# ---------------------------------------------------------------------------

DIALOGUE_SPEAKER = "🛰 Mission Control:"

WELCOME_DIALOGUE: Tuple[str, ...] = (
    "Welcome aboard, Junior Astronaut!\nThis is Mission Control speaking.",
    "Today's mission: Explore the wonders of zero gravity!",
    "Before we blast off, here's your briefing:\n"
    "In space, gravity is much weaker than on Earth. That's why astronauts feel "
    "almost weightless. They are not flying, but falling around Earth!",
    "We'll learn how this changes everything:\nhow you eat, move, and even sleep!",
    "Ready to float among the stars and become a microgravity expert?\n"
    "Click Start Lesson to suit up and begin your space mission!",
)

# ---------------------------------------------------------------------------
# Lesson page
# ---------------------------------------------------------------------------

LESSON_TITLE = "What is Zero Gravity?"

LESSON_INTRO = (
    "Astronaut: Welcome aboard the spaceship!\n"
    "Ever wondered why we float here? In space, we feel almost weightless due to "
    "something called microgravity."
)

LESSON_EXPLANATION_TITLE = "What's really happening?"

LESSON_EXPLANATION = (
    "Our spaceship and everything inside are actually falling around the Earth, "
    "but because we're all falling together, it feels like we're floating!"
)

LESSON_FACTS: Tuple[str, ...] = (
    "Liquids float in bubbles: you can't pour juice into a cup in space!",
    "Muscles and bones get weaker if astronauts don't exercise daily.",
    "Just a tiny push and you drift across the whole cabin!",
    "Fire burns in a ball, not a tall flame.",
    "Everyday tasks (like eating, brushing teeth, or sleeping) become a funny challenge!",
)

LESSON_FUN_FACT = (
    "Fun Fact: Did you know astronauts sleep in bags strapped to the walls, "
    "so they don't float away while dreaming?"
)

# ---------------------------------------------------------------------------
# Quiz bank
# ---------------------------------------------------------------------------

QUIZ_BANK: Tuple[QuizQuestion, ...] = (
    QuizQuestion(
        prompt="Why do astronauts feel weightless?",
        options=(
            "Because they are free falling around Earth",
            "Because there is no gravity in space",
            "Because they are far from Earth",
            "Because the ship pushes them up",
        ),
        correct_index=0,
    ),
    QuizQuestion(
        prompt="What is microgravity?",
        options=(
            "Very small gravity is still present",
            "No gravity at all",
            "Gravity is reversed",
            "Gravity only on Mars",
        ),
        correct_index=0,
    ),
    QuizQuestion(
        prompt="Why do astronauts have to exercise in space?",
        options=(
            "To keep bones and muscles strong",
            "To float better",
            "For fun",
            "To use equipment",
        ),
        correct_index=0,
    ),
)

FEEDBACK_CORRECT = "✅ Correct!"
FEEDBACK_INCORRECT = "❌ Oops! That's not right."

# ---------------------------------------------------------------------------
# Chat panel
# ---------------------------------------------------------------------------

CHAT_PLACEHOLDER = "Write here..."
CHAT_GREETING = "Hello! Ask me anything about zero gravity."
SUMMARY_FALLBACK = "Sorry, I couldn't find info on that topic!"

MICROGRAVITY_ANSWER = (
    "Zero gravity (microgravity) is the condition in which people or objects appear "
    "to be weightless. This occurs when everything is falling together around Earth, "
    "like astronauts and their spacecraft."
)
SELF_INTRODUCTION = "I'm your friendly astronaut avatar, here to help you explore space and science!"
GREETING_ANSWER = "Hello! I'm your space guide. Ask me anything about zero gravity or space!"
EATING_ANSWER = "They squeeze food from packets or use magnets on utensils so everything stays put."
