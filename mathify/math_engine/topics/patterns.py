"""
mathify/math_engine/topics/patterns.py
Generators for Patterns outcomes: repeating patterns, increasing/decreasing
sequences and doubling sequences.
"""
from mathify.core.models import Question
from mathify.math_engine.context import GenerationContext, choice_question, number_question
from mathify.math_engine.number_words import distinct_options
from mathify.math_engine.seeding import PRIME_B

EMOJI_PALETTE = ["🔴", "🔵", "🟢", "🟡", "🔺", "⬜", "⭕", "⬛"]

REPEATING = [
    (["🔴", "🔵", "🔴", "🔵"], "🔴"),
    (["🟢", "🟡", "🟢", "🟡"], "🟢"),
    (["🔺", "⬜", "🔺", "⬜"], "🔺"),
    (["⭕", "⬛", "⭕", "⬛"], "⭕"),
    ([2, 4, 2, 4], 2),
    ([1, 3, 1, 3], 1),
    ([5, 10, 5, 10], 5),
    ([1, 2, 3, 1, 2, 3], 1),
]

# step sizes offered per grade for increasing/decreasing sequences
STEPS = {
    2: [2, 3, 5, 10],
    3: [3, 4, 5, 10, 25],
    4: [6, 7, 8, 9, 25, 50],
}


def _join(seq) -> str:
    return ", ".join(str(x) for x in seq)


def _repeating(ctx: GenerationContext) -> Question:
    seq, nxt = ctx.rotate(REPEATING)
    text = f"What comes next in this repeating pattern: {_join(seq)}?"
    if isinstance(nxt, int):
        return number_question(text, nxt, "pattern")

    start = ctx.seed.draw(len(EMOJI_PALETTE))
    others = [e for e in EMOJI_PALETTE[start:] + EMOJI_PALETTE[:start] if e != nxt]
    options = distinct_options(nxt, others, lambda k: EMOJI_PALETTE[k % len(EMOJI_PALETTE)])
    return choice_question(text, options, "pattern")


def _doubling(ctx: GenerationContext) -> Question:
    start = ctx.seed.draw(5) + 1
    seq = [start * 2 ** i for i in range(4)]
    return number_question(f"What comes next in this pattern: {_join(seq)}?", start * 16, "pattern")


def _arithmetic(ctx: GenerationContext) -> Question:
    steps = STEPS[min(ctx.grade, 4)]
    step = ctx.seed.choice(steps, PRIME_B)
    span = 20 if ctx.grade == 2 else 100

    if ctx.mentions("decreasing"):
        direction = "decreasing"
    elif ctx.mentions("increasing"):
        direction = "increasing"
    else:
        direction = ctx.rotate(["increasing", "decreasing"])

    if direction == "increasing":
        start = ctx.seed.draw(span) + 1
        seq = [start + step * i for i in range(4)]
        nxt = start + step * 4
    else:
        # next term stays positive
        start = step * 4 + ctx.seed.draw(span) + 1
        seq = [start - step * i for i in range(4)]
        nxt = start - step * 4
    return number_question(f"What comes next in this pattern: {_join(seq)}?", nxt, "pattern")


def generate_pattern(ctx: GenerationContext) -> Question:
    repeating_only = ctx.mentions("repeating") and not ctx.mentions("increasing", "decreasing")
    if ctx.grade == 1 or repeating_only:
        return _repeating(ctx)
    if ctx.mentions("doubling", "geometric", "multiply"):
        return _doubling(ctx)
    return _arithmetic(ctx)
