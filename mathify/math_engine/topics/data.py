"""
mathify/math_engine/topics/data.py
Generators for Data outcomes: pictographs, bar graphs, probability.
"""
from mathify.core.models import Question
from mathify.math_engine.context import GenerationContext, choice_question, number_question
from mathify.math_engine.number_words import distinct_options
from mathify.math_engine.seeding import PRIME_A, PRIME_B

PICTURE_ITEMS = ["apples", "books", "pencils", "toys", "flowers"]
MARBLE_COLORS = ["red", "blue", "green", "yellow"]
SCALES = [2, 5, 10]


def _pictograph_counting(ctx: GenerationContext) -> Question:
    item = ctx.rotate(PICTURE_ITEMS)
    a = ctx.seed.draw(8) + 2
    b = ctx.seed.draw(8, PRIME_B) + 2
    forms = [
        (f"In a pictograph, there are {a} pictures of {item}. If each picture represents 1 of the {item}, "
         f"how many {item} are there?", a),
        (f"In a pictograph, Group A has {a} pictures and Group B has {b} pictures. "
         f"How many pictures are there in total?", a + b),
        (f"In a pictograph, Group A has {a} pictures and Group B has {b} pictures. "
         f"How many pictures does the bigger group have?", max(a, b)),
    ]
    text, answer = forms[ctx.variant % len(forms)]
    return number_question(text, answer, "data")


def generate_data(ctx: GenerationContext) -> Question:
    if ctx.grade == 1 or ctx.mentions("without scale"):
        return _pictograph_counting(ctx)

    a = ctx.seed.draw(15) + 5
    b = ctx.seed.draw(15, PRIME_B) + 20
    if ctx.mentions("difference"):
        return number_question(
            f"In a bar graph, one bar shows {a} and another shows {b}. What is the difference?", b - a, "data"
        )

    scale = ctx.seed.choice(SCALES, PRIME_A * PRIME_B)
    item = ctx.seed.choice(PICTURE_ITEMS, PRIME_B)
    forms = [
        (f"In a bar graph, one bar shows {a} and another shows {b}. What is the total?", a + b),
        (f"In a pictograph, each picture stands for {scale} {item}. A row has {a} pictures. "
         f"How many {item} does the row show?", a * scale),
    ]
    text, answer = ctx.rotate(forms)
    return number_question(text, answer, "data")


def generate_probability(ctx: GenerationContext) -> Question:
    total = ctx.seed.draw(10) + 5
    # at least one marble of the other colours, so the event is never certain
    favorable = ctx.seed.draw(total - 1, PRIME_B) + 1
    color = ctx.seed.choice(MARBLE_COLORS, PRIME_A * PRIME_B)
    options = distinct_options(
        f"{favorable}/{total}",
        [f"{total}/{favorable}", f"{favorable}/{total - favorable}", f"{favorable + 1}/{total}"],
        lambda k: f"{favorable}/{total + k}",
    )
    return choice_question(
        f"In a bag with {total} marbles, {favorable} are {color}. "
        f"What is the probability of drawing a {color} marble? (Express as a fraction)",
        options,
        "probability",
    )
