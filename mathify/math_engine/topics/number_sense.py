"""
mathify/math_engine/topics/number_sense.py
Generators for Number Sense outcomes.
Handles: number recognition, ordinals, fractions, decimals, odd/even,
factors & multiples, ratio/proportion/percent, comparing numbers, place value.
"""
import re
from math import gcd
from typing import List

from mathify.core.models import Question
from mathify.math_engine.context import GenerationContext, choice_question, number_question
from mathify.math_engine.grade_envelope import mentioned_limit
from mathify.math_engine.number_words import (
    distinct_options,
    fraction_text,
    fraction_value,
    number_to_words,
    ordinal,
    round_decimal,
    simplify,
    with_commas,
)
from mathify.math_engine.seeding import PRIME_A, PRIME_B

# "denominators 2, 4, 8"
DENOMINATOR_RE = re.compile(r"denominators?\s+(\d+(?:\s*,\s*\d+)*)")

DEFAULT_DENOMINATORS = [2, 3, 4, 5, 6, 8]
PRIMES = [2, 3, 5, 7, 11, 13, 17, 19, 23, 29, 31, 37, 41, 43, 47]
COMPOSITES = [4, 6, 8, 9, 10, 12, 14, 15, 16, 18, 20, 21, 22, 24, 25, 26, 27, 28]
PERCENTS = [10, 20, 25, 50, 75]
PLACE_NAMES = ["ones", "tens", "hundreds", "thousands", "ten thousands", "hundred thousands"]
PROPORTION_ITEMS = ["notebooks", "pencils", "mangoes", "eggs", "stickers"]


def _number_ceiling(ctx: GenerationContext) -> int:
    return mentioned_limit(ctx.outcome) or ctx.envelope["number_ceiling"]


def _distinct_values(ctx: GenerationContext, ceiling: int, size: int = 4) -> List[int]:
    values: List[int] = []
    step = 0
    while len(values) < size and step < 50:
        value = ctx.seed.shifted(step * 1000).draw(ceiling) + 1
        if value not in values:
            values.append(value)
        step += 1
    k = 1
    while len(values) < size:
        value = (values[0] + k * 7) % ceiling + 1
        if value not in values:
            values.append(value)
        k += 1
    return values


def generate_number_recognition(ctx: GenerationContext) -> Question:
    ceiling = _number_ceiling(ctx)
    values = _distinct_values(ctx, ceiling)
    num = values[0]

    # Grade 1 reads the choices as number words ("thirty-two")
    render = number_to_words if ctx.grade == 1 else with_commas
    options = distinct_options(
        render(num),
        [render(v) for v in values[1:]],
        lambda k: render((num + k * 11) % ceiling + 1),
    )
    return choice_question(f"What number is this: {with_commas(num)}?", options, "number")


def generate_ordinal(ctx: GenerationContext) -> Question:
    max_ord = mentioned_limit(ctx.outcome, (10, 20, 100)) or ctx.envelope["ordinal_ceiling"]
    position = ctx.seed.draw(max_ord) + 1
    start = ctx.seed.draw(max_ord, PRIME_B)
    options = distinct_options(
        ordinal(position),
        [ordinal((start + i) % max_ord + 1) for i in range(3)],
        lambda k: ordinal((position - 1 + k) % max_ord + 1),
    )
    return choice_question(f"What is the ordinal number for position {position}?", options, "ordinal")


def _denominators(outcome: str) -> List[int]:
    m = DENOMINATOR_RE.search(outcome)
    if m:
        dens = [int(d) for d in re.findall(r"\d+", m.group(1)) if int(d) > 1]
        if dens:
            return dens
    return DEFAULT_DENOMINATORS


def generate_fraction(ctx: GenerationContext) -> Question:
    if ctx.grade == 1 or ctx.mentions("1/2", "1/4"):
        forms = [
            ("Which shape shows 1/2?", ["Half shaded", "Quarter shaded", "Full shaded", "Empty"]),
            ("Which shape shows 1/4?", ["Quarter shaded", "Half shaded", "Full shaded", "Empty"]),
            ("A sandwich is cut into 2 equal parts. What is each part called?",
             ["One half", "One quarter", "One whole", "Two wholes"]),
            ("A pizza is cut into 4 equal parts. What is each part called?",
             ["One quarter", "One half", "One whole", "Four wholes"]),
        ]
        text, options = ctx.rotate(forms)
        return choice_question(text, options, "fraction_visual")

    dens = _denominators(ctx.outcome)
    num = ctx.seed.draw(5) + 1
    den = dens[(ctx.seed.draw(len(dens), PRIME_B) + ctx.index) % len(dens)]

    if ctx.mentions("decimal", "convert"):
        return number_question(
            f"What is {num}/{den} as a decimal? (Round to 2 decimals)",
            fraction_value(num, den, 2),
            "fraction",
        )

    s_num, s_den = simplify(num, den)
    options = distinct_options(
        fraction_text(s_num, s_den),
        [f"{num}/{den}", f"{num + 1}/{den}", f"{num}/{den + 1}"],
        lambda k: f"{s_num + k}/{s_den + 2 * k}",
    )
    return choice_question(f"What is {num}/{den} in simplest form?", options, "fraction")


def generate_decimal(ctx: GenerationContext) -> Question:
    seed = ctx.seed
    forms = ["tenths", "round", "add"]
    if ctx.grade >= 5:
        forms.append("hundredths")
    form = ctx.rotate(forms)

    if form == "tenths":
        num = seed.draw(9) + 1
        return number_question(f"Write {num}/10 as a decimal.", num / 10, "decimal")
    if form == "hundredths":
        num = seed.draw(99, PRIME_B) + 1
        return number_question(f"Write {num}/100 as a decimal.", num / 100, "decimal")
    if form == "round":
        hundredths = seed.draw(1000) + 101
        value = hundredths / 100
        return number_question(
            f"Round {value:.2f} to the nearest tenth.",
            round_decimal(f"{value:.2f}", 1),
            "decimal",
        )
    a = seed.draw(90) + 10
    b = seed.draw(90, PRIME_B) + 10
    return number_question(f"What is {a / 10} + {b / 10}?", (a + b) / 10, "decimal")


def generate_odd_even(ctx: GenerationContext) -> Question:
    ceiling = min(ctx.envelope["number_ceiling"], 1000)
    target = ctx.rotate(["even", "odd"])
    base = ctx.seed.draw(max(ceiling // 2 - 4, 1)) + 2
    correct = base * 2 if target == "even" else base * 2 + 1
    # every distractor has the other parity
    wrong = [correct + 1, correct - 1, correct + 3]
    options = distinct_options(
        str(correct),
        [str(w) for w in wrong],
        lambda k: str(correct + 2 * k + 3),
    )
    return choice_question(f"Which number is {target}?", options, "parity")


def _factor_choice(ctx: GenerationContext) -> Question:
    a = ctx.seed.draw(8) + 2
    b = ctx.seed.draw(8, PRIME_B) + 2
    n = a * b
    non_factors = [x for x in range(2, n) if n % x]
    offset = ctx.seed.draw(max(len(non_factors), 1), PRIME_A * PRIME_B)
    rotated = non_factors[offset:] + non_factors[:offset]
    options = distinct_options(str(a), [str(x) for x in rotated], lambda k: str(n + k))
    return choice_question(f"Which number is a factor of {n}?", options, "factor")


def _next_multiple(ctx: GenerationContext) -> Question:
    a = ctx.seed.draw(11) + 2
    b = ctx.seed.draw(10, PRIME_B) + 1
    return number_question(f"What is the next multiple of {a} after {a * b}?", a * (b + 1), "factor")


def _gcf(ctx: GenerationContext) -> Question:
    g = ctx.seed.draw(5) + 2
    x = g * (ctx.seed.draw(9, PRIME_B) + 1)
    y = g * (ctx.seed.draw(9, PRIME_A * PRIME_B) + 1)
    return number_question(f"What is the greatest common factor of {x} and {y}?", gcd(x, y), "factor")


def _lcm(ctx: GenerationContext) -> Question:
    x = ctx.seed.draw(11) + 2
    y = ctx.seed.draw(11, PRIME_B) + 2
    return number_question(f"What is the least common multiple of {x} and {y}?", x * y // gcd(x, y), "factor")


def _prime_choice(ctx: GenerationContext) -> Question:
    prime = ctx.seed.choice(PRIMES)
    offset = ctx.seed.draw(len(COMPOSITES), PRIME_B)
    wrong = [COMPOSITES[(offset + i * 5) % len(COMPOSITES)] for i in range(3)]
    options = distinct_options(str(prime), [str(w) for w in wrong], lambda k: str(COMPOSITES[k % len(COMPOSITES)]))
    return choice_question("Which number is prime?", options, "factor")


def generate_factors_multiples(ctx: GenerationContext) -> Question:
    families = []
    if ctx.mentions("factor"):
        families += [_factor_choice, _gcf]
    if ctx.mentions("multiple"):
        families += [_next_multiple, _lcm]
    if ctx.mentions("prime"):
        families.append(_prime_choice)
    if not families:
        families = [_factor_choice, _next_multiple, _gcf, _lcm, _prime_choice]
    return ctx.rotate(families)(ctx)


def _ratio(ctx: GenerationContext) -> Question:
    g = ctx.seed.draw(5) + 2
    p, q = simplify(ctx.seed.draw(9, PRIME_B) + 1, ctx.seed.draw(9, PRIME_A * PRIME_B) + 1)
    a, b = g * p, g * q
    options = distinct_options(
        f"{p}:{q}",
        [f"{a}:{b}", f"{q}:{p}", f"{p + 1}:{q}"],
        lambda k: f"{p + k}:{q + 2 * k}",
    )
    return choice_question(f"What is the ratio {a}:{b} in simplest form?", options, "ratio")


def _proportion(ctx: GenerationContext) -> Question:
    item = ctx.seed.choice(PROPORTION_ITEMS, PRIME_B)
    unit = ctx.seed.draw(20) + 2
    n = ctx.seed.draw(5, PRIME_B) + 2
    m = ctx.seed.draw(9, PRIME_A * PRIME_B) + 2
    return number_question(
        f"If {n} {item} cost ₱{n * unit}, how much do {m} {item} cost?",
        m * unit,
        "ratio",
    )


def _percent(ctx: GenerationContext) -> Question:
    pct = ctx.seed.choice(PERCENTS, PRIME_B)
    whole = 20 * (ctx.seed.draw(10) + 1)
    return number_question(f"What is {pct}% of {whole}?", pct * whole // 100, "ratio")


def generate_ratio_proportion(ctx: GenerationContext) -> Question:
    families = []
    if ctx.mentions("ratio"):
        families.append(_ratio)
    if ctx.mentions("proportion"):
        families.append(_proportion)
    if ctx.mentions("percent"):
        families.append(_percent)
    if not families:
        families = [_ratio, _proportion, _percent]
    return ctx.rotate(families)(ctx)


def generate_compare(ctx: GenerationContext) -> Question:
    values = _distinct_values(ctx, _number_ceiling(ctx))
    target = ctx.rotate(["greatest", "smallest"])
    correct = max(values) if target == "greatest" else min(values)
    wrong = [v for v in values if v != correct]
    options = distinct_options(with_commas(correct), [with_commas(v) for v in wrong], lambda k: str(k))
    return choice_question(f"Which number is the {target}?", options, "compare")


def generate_place_value(ctx: GenerationContext) -> Question:
    ceiling = _number_ceiling(ctx)
    n = ctx.seed.draw(max(ceiling - 10, 1)) + 10
    digits = str(n)
    position = ctx.seed.draw(len(digits), PRIME_B)
    digit = int(digits[-1 - position])
    return number_question(
        f"What is the value of the digit in the {PLACE_NAMES[position]} place of {with_commas(n)}?",
        digit * 10 ** position,
        "number",
    )
