"""
mathify/math_engine/context.py
Per-slot generation context handed to every topic generator, plus the two
Question constructors generators use.
"""
from dataclasses import dataclass
from typing import List, Sequence, TypeVar

from mathify.core.models import Number, Question, display_number
from mathify.math_engine.grade_envelope import get_envelope
from mathify.math_engine.seeding import Seed

T = TypeVar("T")

ICONS = {
    "number": "🔢",
    "ordinal": "📊",
    "fraction_visual": "🍕",
    "fraction": "🍰",
    "decimal": "🔟",
    "parity": "⚖️",
    "factor": "🧩",
    "ratio": "➗",
    "compare": "🔍",
    "add": "➕",
    "subtract": "➖",
    "multiply": "✖️",
    "divide": "➗",
    "gemdas": "🧮",
    "shape": "🔷",
    "measure_shape": "📐",
    "circle": "⭕",
    "transform": "🔄",
    "money": "🪙",
    "clock": "⏰",
    "calendar": "📅",
    "length": "📏",
    "mass": "⚖️",
    "volume": "📦",
    "data": "📊",
    "probability": "🎲",
    "pattern": "🔁",
    "word_problem": "🍎",
}


@dataclass(frozen=True)
class GenerationContext:
    grade: int
    outcome: str
    index: int
    slot: int
    seed: Seed
    attempt: int = 0

    @property
    def envelope(self) -> dict:
        return get_envelope(self.grade)

    @property
    def variant(self) -> int:
        return self.index + self.attempt

    def rotate(self, items: Sequence[T]) -> T:
        return items[self.variant % len(items)]

    def mentions(self, *words: str) -> bool:
        return any(w in self.outcome for w in words)


def number_question(text: str, answer: Number, icon: str) -> Question:
    return Question(
        question=text,
        type="number",
        correct_answer=display_number(answer),
        icon=ICONS.get(icon, icon),
    )


def choice_question(text: str, options: List[str], icon: str, correct: int = 0) -> Question:
    return Question(
        question=text,
        type="multiple-choice",
        options=list(options),
        correct_answer=correct,
        icon=ICONS.get(icon, icon),
    )
