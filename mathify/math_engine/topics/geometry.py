"""
mathify/math_engine/topics/geometry.py
Generators for Geometry outcomes.
Handles: shape sides/corners, area, perimeter, angles, circles, polygons, transformations.
"""
from decimal import Decimal

from mathify.core.models import Question
from mathify.math_engine.context import GenerationContext, choice_question, number_question
from mathify.math_engine.number_words import distinct_options, round_decimal
from mathify.math_engine.seeding import PRIME_A, PRIME_B

PI = Decimal("3.14")

SIDES = {
    "circle": 0,
    "triangle": 3,
    "square": 4,
    "rectangle": 4,
    "quadrilateral": 4,
    "pentagon": 5,
    "hexagon": 6,
    "octagon": 8,
}
BASIC_SHAPES = ["circle", "square", "triangle", "rectangle"]
POLYGONS = ["triangle", "square", "rectangle", "quadrilateral", "pentagon", "hexagon", "octagon"]

ANGLE_KINDS = ["Acute", "Right", "Obtuse", "Straight"]

TRANSFORMATIONS = [
    ("Reflection", "flipped to make a mirror image"),
    ("Rotation", "turned around a point"),
    ("Translation", "slid to a new position"),
    ("Dilation", "made bigger without changing its shape"),
]
TRANSFORM_SHAPES = ["triangle", "square", "arrow", "letter L", "flag"]


def _sides(ctx: GenerationContext):
    side = ctx.envelope["side_ceiling"]
    return ctx.seed.draw(side) + 1, ctx.seed.draw(side, PRIME_B) + 1


def generate_shape(ctx: GenerationContext) -> Question:
    shapes = list(BASIC_SHAPES)
    if ctx.grade >= 2:
        shapes += ["pentagon", "hexagon"]
    else:
        shapes += [s for s in ("pentagon", "hexagon") if ctx.mentions(s)]

    forms = [(f"How many sides does a {s} have?", SIDES[s]) for s in shapes]
    forms += [(f"How many corners does a {s} have?", SIDES[s]) for s in shapes if SIDES[s]]
    text, answer = ctx.rotate(forms)
    return number_question(text, answer, "shape")


def generate_area(ctx: GenerationContext) -> Question:
    length, width = _sides(ctx)

    if ctx.mentions("square"):
        text = f"What is the area of a square with side length {length}?"
        answer = length * length
    elif ctx.mentions("triangle"):
        text = f"What is the area of a triangle with base {length} and height {width}?"
        answer = length * width / 2
    elif ctx.mentions("parallelogram"):
        text = f"What is the area of a parallelogram with base {length} and height {width}?"
        answer = length * width
    elif ctx.mentions("trapezoid"):
        base2 = ctx.seed.draw(ctx.envelope["side_ceiling"], PRIME_A * PRIME_B) + 1
        text = f"What is the area of a trapezoid with bases {length} and {base2}, and height {width}?"
        answer = (length + base2) * width / 2
    else:
        text = f"What is the area of a rectangle with length {length} and width {width}?"
        answer = length * width
    return number_question(text, answer, "measure_shape")


def generate_perimeter(ctx: GenerationContext) -> Question:
    a, b = _sides(ctx)

    if ctx.mentions("square"):
        return number_question(f"What is the perimeter of a square with side length {a}?", 4 * a, "measure_shape")
    if ctx.mentions("triangle"):
        # third side respects the triangle inequality
        c = ctx.seed.between(abs(a - b) + 1, a + b - 1, PRIME_A * PRIME_B)
        return number_question(
            f"What is the perimeter of a triangle with sides {a}, {b}, and {c}?", a + b + c, "measure_shape"
        )
    return number_question(
        f"What is the perimeter of a rectangle with length {a} and width {b}?", 2 * (a + b), "measure_shape"
    )


def _angle_kind(ctx: GenerationContext) -> Question:
    kind = ctx.seed.choice(ANGLE_KINDS, PRIME_B, offset=ctx.index)
    if kind == "Acute":
        degrees = ctx.seed.between(10, 89)
    elif kind == "Obtuse":
        degrees = ctx.seed.between(91, 179)
    elif kind == "Right":
        degrees = 90
    else:
        degrees = 180
    options = [f"{kind} angle"] + [f"{k} angle" for k in ANGLE_KINDS if k != kind]
    return choice_question(f"An angle measures {degrees}°. What kind of angle is it?", options, "measure_shape")


def _missing_angle(ctx: GenerationContext) -> Question:
    a = ctx.seed.between(30, 80)
    b = ctx.seed.between(30, 80, PRIME_B)
    return number_question(
        f"Two angles of a triangle measure {a}° and {b}°. What is the third angle?",
        180 - a - b,
        "measure_shape",
    )


def _named_angle(ctx: GenerationContext) -> Question:
    name, degrees = ctx.seed.choice([("right", 90), ("straight", 180)], PRIME_B)
    return number_question(f"How many degrees are in a {name} angle?", degrees, "measure_shape")


def generate_angle(ctx: GenerationContext) -> Question:
    families = [_angle_kind, _named_angle]
    if ctx.grade >= 3 or ctx.mentions("triangle"):
        families.append(_missing_angle)
    return ctx.rotate(families)(ctx)


def generate_circle(ctx: GenerationContext) -> Question:
    radius = ctx.seed.draw(ctx.envelope["side_ceiling"]) + 1

    if ctx.mentions("circumference"):
        return number_question(
            f"What is the circumference of a circle with radius {radius}? (Use π = 3.14, round to nearest whole)",
            round_decimal(2 * PI * radius),
            "circle",
        )
    if ctx.mentions("diameter"):
        return number_question(f"What is the diameter of a circle with radius {radius}?", 2 * radius, "circle")
    return number_question(
        f"What is the area of a circle with radius {radius}? (Use π = 3.14, round to nearest whole)",
        round_decimal(PI * radius * radius),
        "circle",
    )


def generate_polygon(ctx: GenerationContext) -> Question:
    polygon = ctx.rotate(POLYGONS)
    return number_question(f"How many sides does a {polygon} have?", SIDES[polygon], "shape")


def generate_transformation(ctx: GenerationContext) -> Question:
    name, description = ctx.rotate(TRANSFORMATIONS)
    shape = ctx.seed.choice(TRANSFORM_SHAPES, PRIME_B)
    options = distinct_options(name, [t[0] for t in TRANSFORMATIONS], lambda k: "Symmetry")
    return choice_question(
        f"A {shape} is {description}. What type of transformation is this?", options, "transform"
    )
