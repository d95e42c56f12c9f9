"""Emoji sets and productivity tips used in the terminal output."""
from __future__ import annotations

import random
from typing import Sequence

WORK = ["🍅", "💻", "📝", "🔨", "⚙️", "🧠", "🚀", "⏳", "🔍"]
SHORT_BREAK = ["☕", "🍵", "🧘", "🌱", "🌞", "💆", "🎵", "🍃", "🌈"]
LONG_BREAK = ["🌴", "🏖️", "🎮", "📚", "🍦", "🎨", "🌿", "🧁", "🎬"]
SUCCESS = ["✅", "🎉", "🏆", "💯", "🌟", "🙌", "🥳", "💪", "🌺"]
TOMATO = ["🍅"]

TIPS = [
    "The Pomodoro Technique works best when you fully commit to the task during work periods.",
    "Keep a list of small tasks to tackle during short breaks to maintain productivity momentum.",
    "Physical activity during breaks (like stretching) can boost your energy for the next Pomodoro.",
    "Try different Pomodoro lengths to find what works best for you - not everyone is optimal at 25 minutes.",
    "Use Pomodoros to estimate task completion times by tracking how many you need for similar tasks.",
    "The 'rule of three' suggests focusing on completing just three main tasks per day.",
    "Consider using noise-cancelling headphones or white noise during Pomodoros to improve focus.",
    "Hydration improves cognitive function - keep water nearby during your work sessions.",
    "For creative tasks, sometimes a longer Pomodoro (40-60 minutes) works better than the standard 25.",
    "Track your completed Pomodoros to visualize your productivity trends over time.",
    "Your most productive Pomodoro isn't always the one where you write the most code!",
]


def random_from(options: Sequence[str]) -> str:
    return random.choice(options) if options else ""


def tip_of_the_day() -> str:
    return f"\n{random_from(WORK)} Productivity Tip: {random_from(TOMATO)}\n💡 {random_from(TIPS)}\n"
