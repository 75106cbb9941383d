"""
mathify/math_engine/topics/problem_solving.py
Real-life word problems. Grade 1 stays inside sums of 100; later grades add
bigger numbers and, from Grade 3, multiplication and division stories.
"""
from mathify.core.models import Question
from mathify.math_engine.context import GenerationContext, number_question
from mathify.math_engine.seeding import PRIME_A, PRIME_B


def _grade_one(ctx: GenerationContext) -> Question:
    a = ctx.seed.draw(50) + 1
    b = ctx.seed.draw(min(100 - a, 49), PRIME_B) + 1
    big, small = max(a, b), min(a, b)

    forms = [
        (f"Maria has {a} apples and {b} oranges. How many fruits does she have in total?", a + b, "word_problem"),
        (f"There are {a} boys and {b} girls in a class. How many students are there?", a + b, "word_problem"),
        (f"Mom bought {a} cookies and {b} candies. How many treats did she buy?", a + b, "word_problem"),
        (f"Juan has {big} marbles. Ana has {small} marbles. How many more marbles does Juan have?",
         big - small, "word_problem"),
        (f"There are {big} birds in a tree. {small} fly away. How many birds are left?", big - small, "word_problem"),
        (f"A store has {big} toys. They sell {small} toys. How many toys are left?", big - small, "word_problem"),
        (f"Count the flowers: 🌸🌸🌸🌸🌸. If you add {a} more flowers, how many flowers are there?",
         5 + a, "word_problem"),
        (f"There are {a} stars in the sky. {b} more stars appear. How many stars are there now?", a + b,
         "word_problem"),
        (f"In the pattern: 2, 4, 6, 8, what comes next? Then add {a} to that number.", 10 + a, "pattern"),
    ]
    text, answer, icon = ctx.rotate(forms)
    return number_question(text, answer, icon)


def _later_grades(ctx: GenerationContext) -> Question:
    span = 20 if ctx.grade == 2 else 100 * (ctx.grade - 2)
    a = ctx.seed.draw(span) + 5
    b = ctx.seed.draw(span, PRIME_B) + 5
    big, small = max(a, b), min(a, b)

    forms = [
        (f"Maria has {a} apples and {b} oranges. How many fruits does she have in total?", a + b),
        (f"Juan has {big} marbles. Ana has {small} marbles. How many more marbles does Juan have?", big - small),
        (f"There are {a} boys and {b} girls in a school. How many students are there?", a + b),
        (f"A box contains {a} red balls and {b} blue balls. How many balls are in the box?", a + b),
    ]
    if ctx.grade >= 3:
        groups = ctx.seed.draw(8, PRIME_A * PRIME_B) + 2
        each = ctx.seed.draw(11, PRIME_B) + 2
        forms += [
            (f"There are {groups} bags with {each} candies in each bag. How many candies are there?",
             groups * each),
            (f"{groups * each} stickers are shared equally among {groups} friends. "
             f"How many stickers does each friend get?", each),
        ]
    text, answer = ctx.rotate(forms)
    return number_question(text, answer, "word_problem")


def generate_problem_solving(ctx: GenerationContext) -> Question:
    if ctx.grade == 1 or ctx.mentions("counting") and ctx.mentions("addition") and ctx.mentions("subtraction"):
        return _grade_one(ctx)
    return _later_grades(ctx)
