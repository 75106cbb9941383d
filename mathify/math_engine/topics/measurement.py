"""
mathify/math_engine/topics/measurement.py
Generators for Measurement outcomes.
Handles: Philippine money (₱), time (clock, calendar, elapsed), length, mass, capacity/volume.
"""
from decimal import Decimal

from mathify.core.models import Question
from mathify.math_engine.context import GenerationContext, choice_question, number_question
from mathify.math_engine.grade_envelope import mentioned_limit
from mathify.math_engine.number_words import distinct_options, round_decimal
from mathify.math_engine.seeding import PRIME_A, PRIME_B

NON_STANDARD_UNITS = ["paper clips", "cubes", "blocks", "crayons", "hand spans"]
CAPACITY_CONTAINERS = ["pail", "jug", "basin", "kettle", "bottle"]


# ---------------------------------------------------------------------------
# Money
# ---------------------------------------------------------------------------

def generate_money(ctx: GenerationContext) -> Question:
    seed = ctx.seed
    if ctx.grade == 1:
        # Grade 1 amounts and answers stay within ₱100
        a = seed.draw(99) + 1
        b = seed.draw(min(100 - a, 99), PRIME_B) + 1
    else:
        ceiling = mentioned_limit(ctx.outcome, (100, 1000, 10000)) or ctx.envelope["money_ceiling"]
        half = max(ceiling // 2, 1)
        a = seed.draw(half) + 1
        b = seed.draw(half, PRIME_B) + 1
    larger, smaller = max(a, b), min(a, b)

    forms = [
        (f"If you have ₱{larger} and spend ₱{smaller}, how much is left?", larger - smaller),
        (f"Maria has ₱{a} and Juan has ₱{b}. How much do they have together?", a + b),
        (f"A toy costs ₱{larger}. If you have ₱{smaller}, how much more do you need?", larger - smaller),
    ]
    text, answer = ctx.rotate(forms)
    return number_question(text, answer, "money")


# ---------------------------------------------------------------------------
# Time
# ---------------------------------------------------------------------------

def _plural(n: int, word: str) -> str:
    return f"{n} {word}" if n == 1 else f"{n} {word}s"


def _clock_face(ctx: GenerationContext) -> Question:
    hour = ctx.seed.draw(12) + 1
    after = hour % 12 + 1
    before = (hour - 2) % 12 + 1
    forms = [
        (f"The clock shows {hour} o'clock. What time is it?",
         [f"{hour} o'clock", f"{after} o'clock", f"{before} o'clock", f"half past {hour}"]),
        (f"The clock shows half past {hour}. What time is it?",
         [f"half past {hour}", f"{hour} o'clock", f"{after} o'clock", f"half past {before}"]),
        (f"The clock shows quarter past {hour}. What time is it?",
         [f"quarter past {hour}", f"quarter to {hour}", f"{hour} o'clock", f"half past {hour}"]),
    ]
    text, options = forms[(ctx.variant // 2) % len(forms)]
    return choice_question(text, options, "clock")


def _calendar(ctx: GenerationContext) -> Question:
    n = ctx.seed.draw(5, PRIME_B) + 1
    forms = [
        (f"How many days are in {_plural(n, 'week')}?", 7 * n, [n, n + 7, 7 * n + 7]),
        (f"How many weeks are in {_plural(n, 'month')}? (Approximate)", 4 * n, [n, 7 * n, 2 * n]),
        (f"How many months are in {_plural(n, 'year')}?", 12 * n, [n, 6 * n, 12 * n + 6]),
    ]
    text, correct, wrong = forms[(ctx.variant // 2) % len(forms)]
    options = distinct_options(str(correct), [str(w) for w in wrong], lambda k: str(correct + k))
    return choice_question(text, options, "calendar")


def _clock_reading(ctx: GenerationContext) -> Question:
    seed = ctx.seed
    period = ctx.rotate(["a.m.", "p.m."])
    if period == "a.m.":
        hour, when = seed.draw(6) + 6, "in the morning"
    else:
        hour, when = seed.draw(9) + 1, "in the afternoon or evening"
    minute = seed.draw(60, PRIME_B)
    other = "p.m." if period == "a.m." else "a.m."
    options = [
        f"{hour}:{minute:02d} {period}",
        f"{hour}:{minute:02d} {other}",
        f"{hour % 12 + 1}:{minute:02d} {period}",
        f"{hour}:{(minute + 1) % 60:02d} {period}",
    ]
    return choice_question(
        f"The clock shows {hour}:{minute:02d} {when}. What time is it?", options, "clock"
    )


def _elapsed(ctx: GenerationContext) -> Question:
    seed = ctx.seed
    first = (seed.draw(12) + 1) * 60 + seed.draw(60, PRIME_B)
    second = (seed.draw(12, PRIME_A * PRIME_B) + 1) * 60 + seed.draw(60, PRIME_A * PRIME_B * PRIME_A)
    start, end = min(first, second), max(first, second)
    return number_question(
        f"How many minutes are between {start // 60}:{start % 60:02d} and {end // 60}:{end % 60:02d}?",
        end - start,
        "clock",
    )


def generate_time(ctx: GenerationContext) -> Question:
    non_standard = ctx.mentions("non-standard") and not ctx.mentions("minute", "a.m.", "p.m.")
    if ctx.grade == 1 or non_standard:
        # clock faces and calendar units alternate slot by slot
        return ctx.rotate([_clock_face, _calendar])(ctx)
    if ctx.mentions("elapsed", "duration", "between"):
        return _elapsed(ctx)
    return _clock_reading(ctx)


# ---------------------------------------------------------------------------
# Length, mass, capacity
# ---------------------------------------------------------------------------

def generate_length(ctx: GenerationContext) -> Question:
    seed = ctx.seed
    non_standard = ctx.mentions("non-standard") and not ctx.mentions("cm", "meter")
    if ctx.grade == 1 or non_standard:
        unit = ctx.rotate(NON_STANDARD_UNITS)
        a = seed.draw(10) + 3
        b = seed.draw(10, PRIME_B) + 3
        if ctx.variant % 2 == 0:
            return number_question(
                f"A ribbon is {a} {unit} long. Another ribbon is {b} {unit} long. What is their total length?",
                a + b,
                "length",
            )
        if a == b:
            b -= 1
        return number_question(
            f"A table is {max(a, b)} {unit} long. A chair is {min(a, b)} {unit} long. "
            f"How much longer is the table?",
            abs(a - b),
            "length",
        )

    a = seed.draw(100) + 1
    b = seed.draw(100, PRIME_B) + 1
    if ctx.mentions("convert", "meter"):
        return number_question(
            f"If a rope is {a} cm and another is {b} cm, what is the total length in meters? (Round to 1 decimal)",
            round_decimal(Decimal(a + b) / 100, 1),
            "length",
        )
    return number_question(
        f"A stick is {a} cm long and another is {b} cm long. What is their total length?", a + b, "length"
    )


def generate_mass(ctx: GenerationContext) -> Question:
    seed = ctx.seed
    if ctx.mentions("gram", "convert"):
        kg = seed.draw(9) + 1
        grams = 50 * (seed.draw(19, PRIME_B) + 1)
        return number_question(
            f"A bag of rice weighs {kg} kg and {grams} g. How many grams is that?", kg * 1000 + grams, "mass"
        )
    a = seed.draw(50) + 1
    b = seed.draw(50, PRIME_B) + 1
    return number_question(
        f"A bag weighs {a} kg and another weighs {b} kg. What is the total weight?", a + b, "mass"
    )


def generate_volume(ctx: GenerationContext) -> Question:
    seed = ctx.seed
    if ctx.mentions("liter", "litre", "milliliter", "convert"):
        liters = seed.draw(9) + 1
        container = seed.choice(CAPACITY_CONTAINERS, PRIME_B)
        return number_question(
            f"A {container} holds {liters} L of water. How many milliliters is that?", liters * 1000, "volume"
        )
    if ctx.grade <= 2 and ctx.mentions("capacity"):
        a = seed.draw(10) + 2
        b = seed.draw(10, PRIME_B) + 2
        return number_question(
            f"A pail holds {a} cups of water. A jug holds {b} cups. How many cups do they hold altogether?",
            a + b,
            "volume",
        )
    length, width = seed.draw(10) + 1, seed.draw(10, PRIME_B) + 1
    height = seed.draw(10, PRIME_A * PRIME_B) + 1
    return number_question(
        f"What is the volume of a rectangular box with length {length}, width {width}, and height {height}?",
        length * width * height,
        "volume",
    )
