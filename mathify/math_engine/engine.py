"""
mathify/math_engine/engine.py
Public entrypoint for curriculum question generation.

Usage:
    from mathify.math_engine.engine import generate_questions_for_topic

The topic's category and learning outcome pick one generator through the
ordered dispatch table. Each slot of the batch gets up to
MAX_ATTEMPTS_PER_SLOT seeded candidates; a candidate is kept only if it
validates and its signature is new in the batch. Multiple-choice options are
shuffled after acceptance, so option order never changes what was generated.
"""
import logging
import random
from dataclasses import replace
from typing import Any, List, Optional

from mathify.config import DEFAULT_QUESTION_COUNT
from mathify.core.models import Question, TopicConfig, as_number
from mathify.core.question_validator import validate_question
from mathify.math_engine.context import GenerationContext
from mathify.math_engine.outcome_dispatch import resolve_rule
from mathify.math_engine.seeding import Seed, resolve_seed

logger = logging.getLogger(__name__)

MAX_ATTEMPTS_PER_SLOT = 20


def shuffle_options(question: Question, rng: random.Random) -> Question:
    """Reorder multiple-choice options and move the answer index with them."""
    if question.type != "multiple-choice" or not question.options:
        return question
    correct_text = question.answer_text
    options = list(question.options)
    rng.shuffle(options)
    return replace(question, options=options, correct_answer=options.index(correct_text))


def generate_questions_for_topic(
    topic: Any,
    count: int = DEFAULT_QUESTION_COUNT,
    index: int = 0,
    seed: Optional[int] = None,
    rng: Optional[random.Random] = None,
) -> List[Question]:
    """
    Up to `count` questions for one curriculum topic, never two with the same
    signature. Fewer come back when the topic has too little variety.
    `seed` fixes the content of the batch; `rng` only affects option order.
    """
    config = TopicConfig.from_raw(topic)
    count = max(int(as_number(count, 0)), 0)
    index = int(as_number(index, 0))
    base = resolve_seed(seed)
    rng = rng or random.Random()

    outcome = config.learning_outcome.lower()
    rule_name, _, generator = resolve_rule(config.category, outcome)

    questions: List[Question] = []
    used_signatures = set()

    for slot in range(count):
        position = index + slot
        for attempt in range(MAX_ATTEMPTS_PER_SLOT):
            ctx = GenerationContext(
                grade=config.grade,
                outcome=outcome,
                index=position,
                slot=slot,
                seed=Seed.for_slot(base, position, attempt),
                attempt=attempt,
            )
            try:
                candidate = generator(ctx)
            except Exception:
                logger.exception(f"[Engine] {rule_name} failed on slot {slot}, attempt {attempt}")
                continue

            signature = candidate.signature()
            if signature in used_signatures:
                logger.debug(f"[Engine] duplicate on slot {slot}, attempt {attempt}: {candidate.question}")
                continue

            ok, error = validate_question(candidate)
            if not ok:
                logger.warning(f"[Engine] {rule_name} produced an invalid question: {error}")
                continue

            used_signatures.add(signature)
            questions.append(shuffle_options(candidate, rng))
            break

    if len(questions) < count:
        logger.warning(
            f"[Engine] {config.category}/{rule_name} grade {config.grade}: "
            f"{len(questions)} of {count} questions (limited variety)"
        )
    logger.info(
        f"[Engine] Generated {len(questions)} questions for grade {config.grade} "
        f"{config.category} ({rule_name}), seed={base}"
    )
    return questions
