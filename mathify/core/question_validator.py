"""
mathify/core/question_validator.py: generated Question validation.
Validates the wire shape against question_schema.json, then runs the
semantic checks a schema cannot express (unique options, index in range).
"""
import math
from typing import Any, Dict, Tuple, Union

from jsonschema import Draft7Validator, ValidationError

from mathify.config import QUESTION_SCHEMA
from mathify.core.models import Question

MC_OPTION_COUNT = 4

QUESTION_VALIDATOR = Draft7Validator(QUESTION_SCHEMA or {})


def question_checks(data: Dict[str, Any]) -> Dict[str, bool]:
    options = data.get("options") or []
    answer = data.get("correctAnswer")
    is_mc = data.get("type") == "multiple-choice"
    finite = isinstance(answer, (int, float)) and not isinstance(answer, bool) and math.isfinite(answer)

    return {
        "answer_finite": finite,
        "option_count_ok": (len(options) == MC_OPTION_COUNT) if is_mc else True,
        "options_unique": len(set(options)) == len(options),
        "index_in_range": (finite and int(answer) == answer and 0 <= answer < len(options)) if is_mc else True,
    }


def validate_question(question: Union[Question, Dict[str, Any]]) -> Tuple[bool, str]:
    """(ok, error); error is "" when the question is usable."""
    data = question.to_dict() if isinstance(question, Question) else question
    if not isinstance(data, dict):
        return False, "Question must be an object."

    try:
        QUESTION_VALIDATOR.validate(data)
    except ValidationError as exc:
        return False, f"Schema validation failed: {exc.message}"

    failed = [name for name, ok in question_checks(data).items() if not ok]
    if failed:
        return False, f"Semantic checks failed: {', '.join(failed)}"
    return True, ""
