"""
mathify/math_engine/topics/operations.py
Generators for: addition, subtraction, multiplication, division, GEMDAS,
and the mixed four-operations drill.
"""
from mathify.core.models import Question
from mathify.math_engine.context import GenerationContext, number_question
from mathify.math_engine.grade_envelope import mentioned_limit, mentioned_tables
from mathify.math_engine.seeding import PRIME_A, PRIME_B


def _tables(ctx: GenerationContext) -> list:
    return mentioned_tables(ctx.outcome) or list(ctx.envelope["times_tables"])


def generate_addition(ctx: GenerationContext) -> Question:
    seed = ctx.seed
    if ctx.grade == 1:
        # Grade 1: both addends below 100 and the sum never above 100
        a = seed.draw(99) + 1
        b = seed.draw(min(100 - a, 99), PRIME_B) + 1
    else:
        max_sum = mentioned_limit(ctx.outcome) or ctx.envelope["number_ceiling"]
        half = max(max_sum // 2, 1)
        a = seed.draw(half) + 1
        b = seed.draw(half, PRIME_B) + 1
    return number_question(f"What is {a} + {b}?", a + b, "add")


def generate_subtraction(ctx: GenerationContext) -> Question:
    seed = ctx.seed
    if ctx.grade == 1:
        larger = seed.draw(99) + 1
        smaller = seed.draw(larger, PRIME_B) + 1
    else:
        max_num = (
            mentioned_limit(ctx.outcome, (100, 1000, 10000))
            or ctx.envelope["subtraction_ceiling"]
        )
        half = max(max_num // 2, 1)
        a = seed.draw(half) + 1
        b = seed.draw(half, PRIME_B) + 1
        larger, smaller = max(a, b), min(a, b)
    return number_question(f"What is {larger} - {smaller}?", larger - smaller, "subtract")


def generate_multiplication(ctx: GenerationContext) -> Question:
    tables = _tables(ctx)
    table = tables[(ctx.seed.draw(len(tables)) + ctx.index) % len(tables)]
    multiplier = ctx.seed.draw(12, PRIME_B) + 1
    return number_question(f"What is {table} × {multiplier}?", table * multiplier, "multiply")


def generate_division(ctx: GenerationContext) -> Question:
    tables = _tables(ctx)
    table = tables[(ctx.seed.draw(len(tables)) + ctx.index) % len(tables)]
    quotient = ctx.seed.draw(12, PRIME_B) + 1
    return number_question(f"What is {table * quotient} ÷ {table}?", quotient, "divide")


def generate_gemdas(ctx: GenerationContext) -> Question:
    a = ctx.seed.draw(10, PRIME_A) + 1
    b = ctx.seed.draw(10, PRIME_B) + 1
    c = ctx.seed.draw(10, PRIME_A * PRIME_B) + 1

    forms = [
        (f"{a} + {b} × {c}", a + b * c),
        (f"{a} × {b} + {c}", a * b + c),
        (f"({a} + {b}) × {c}", (a + b) * c),
    ]
    if ctx.mentions("exponent"):
        forms.append((f"{a}² + {b} × {c}", a * a + b * c))
    expression, answer = ctx.rotate(forms)
    return number_question(f"Solve: {expression} (Follow GEMDAS)", answer, "gemdas")


MIXED_ORDER = (generate_addition, generate_subtraction, generate_multiplication, generate_division)


def generate_four_operations(ctx: GenerationContext) -> Question:
    """Round-robin over the four operations by slot position in the batch."""
    return MIXED_ORDER[ctx.slot % 4](ctx)
