"""
mathify/math_engine/outcome_dispatch.py
Ordered outcome-keyword dispatch: category → (rule name, predicate, generator).

Within a category the first rule whose predicate accepts the lower-cased
learning outcome wins. No category match or no rule match falls back to
DEFAULT_RULE, so every topic descriptor resolves to some generator.
"""
import logging
from typing import Callable, Dict, List, Optional, Tuple

from mathify.core.models import Question
from mathify.math_engine.context import GenerationContext
from mathify.math_engine.topics import data, geometry, measurement, number_sense, operations, patterns
from mathify.math_engine.topics.problem_solving import generate_problem_solving

logger = logging.getLogger(__name__)

Predicate = Callable[[str], bool]
Generator = Callable[[GenerationContext], Question]
Rule = Tuple[str, Predicate, Generator]


def keywords(*words: str) -> Predicate:
    def predicate(outcome: str) -> bool:
        return any(w in outcome for w in words)
    predicate.keywords = words
    return predicate


def always(outcome: str) -> bool:
    return True


always.keywords = ()


def default_outcome(grade: int) -> str:
    return f"perform addition up to {100 if grade == 1 else 1000}"


def generate_default(ctx: GenerationContext) -> Question:
    """Grade-scaled addition, used when nothing more specific matches."""
    return operations.generate_addition(
        GenerationContext(
            grade=ctx.grade,
            outcome=default_outcome(ctx.grade),
            index=ctx.index,
            slot=ctx.slot,
            seed=ctx.seed,
            attempt=ctx.attempt,
        )
    )


DEFAULT_RULE: Rule = ("default_addition", always, generate_default)

DISPATCH_TABLE: Dict[str, List[Rule]] = {
    "Number Sense": [
        ("number_recognition", keywords("count", "recognize", "represent", "whole numbers"),
         number_sense.generate_number_recognition),
        ("ordinal",            keywords("ordinal"),                   number_sense.generate_ordinal),
        ("fraction",           keywords("fraction"),                  number_sense.generate_fraction),
        ("decimal",            keywords("decimal"),                   number_sense.generate_decimal),
        ("odd_even",           keywords("odd", "even"),               number_sense.generate_odd_even),
        ("factors_multiples",  keywords("factor", "multiple"),        number_sense.generate_factors_multiples),
        ("ratio_proportion",   keywords("ratio", "proportion", "percent"),
         number_sense.generate_ratio_proportion),
        ("compare_order",      keywords("compare", "order", "greater", "less"),
         number_sense.generate_compare),
        ("place_value",        keywords("place value", "digit"),      number_sense.generate_place_value),
    ],
    "Operations": [
        ("addition",           keywords("addition", "add", "sum"),    operations.generate_addition),
        ("subtraction",        keywords("subtraction", "subtract", "difference"),
         operations.generate_subtraction),
        ("multiplication",     keywords("multiplication", "multiply", "product"),
         operations.generate_multiplication),
        ("division",           keywords("division", "divide", "quotient"), operations.generate_division),
        ("gemdas",             keywords("gemdas", "order of operations", "exponent"),
         operations.generate_gemdas),
        ("four_operations",    keywords("four operations", "operations"), operations.generate_four_operations),
    ],
    "Geometry": [
        ("shape",              keywords("shape", "2-dimensional", "2d"), geometry.generate_shape),
        ("area",               keywords("area"),                      geometry.generate_area),
        ("perimeter",          keywords("perimeter"),                 geometry.generate_perimeter),
        ("angle",              keywords("angle"),                     geometry.generate_angle),
        ("circle",             keywords("circle"),                    geometry.generate_circle),
        ("polygon",            keywords("triangle", "quadrilateral", "polygon"), geometry.generate_polygon),
        ("transformation",     keywords("symmetry", "reflection", "rotation", "translation"),
         geometry.generate_transformation),
    ],
    "Measurement": [
        ("money",              keywords("money", "philippine", "peso", "₱"), measurement.generate_money),
        ("time",               keywords("time", "hour", "minute", "elapsed"), measurement.generate_time),
        ("length",             keywords("length", "distance"),        measurement.generate_length),
        ("mass",               keywords("mass", "weight"),            measurement.generate_mass),
        ("capacity_volume",    keywords("capacity", "volume"),        measurement.generate_volume),
        ("measure",            keywords("measure"),                   measurement.generate_length),
    ],
    "Data": [
        ("graph",              keywords("pictograph", "graph", "data"), data.generate_data),
        ("probability",        keywords("probability", "outcome"),    data.generate_probability),
    ],
    "Patterns": [
        ("pattern",            keywords("pattern", "extend", "create", "sequence"), patterns.generate_pattern),
    ],
    "Problem Solving": [
        ("word_problem",       always,                                generate_problem_solving),
    ],
}

_CATEGORY_INDEX = {name.lower(): name for name in DISPATCH_TABLE}


def normalize_category(category: Optional[str]) -> Optional[str]:
    """Canonical category label, matched case-insensitively; None when unknown."""
    key = (category or "").strip().lower()
    return _CATEGORY_INDEX.get(key)


def resolve_rule(category: Optional[str], outcome: str) -> Rule:
    canonical = normalize_category(category)
    outcome = (outcome or "").lower()
    if canonical is None:
        logger.debug(f"[Dispatch] unknown category {category!r}, using default")
        return DEFAULT_RULE
    for rule in DISPATCH_TABLE[canonical]:
        name, predicate, _ = rule
        if predicate(outcome):
            logger.debug(f"[Dispatch] {canonical} → {name}")
            return rule
    logger.debug(f"[Dispatch] {canonical}: no keyword matched, using default")
    return DEFAULT_RULE
