"""
mathify/math_engine/grade_envelope.py
Grade-scaled numeric envelopes. Grade shapes HOW BIG the numbers get;
explicit limits written in the learning outcome win over the grade default.
"""
import re
from typing import Iterable, List, Optional

from mathify.config import GRADE_ENVELOPES
from mathify.core.models import clamp_grade

DEFAULT_ENVELOPES = {
    1: {"number_ceiling": 100, "subtraction_ceiling": 100, "money_ceiling": 100,
        "ordinal_ceiling": 10, "times_tables": [2, 3, 4, 5], "side_ceiling": 10},
    2: {"number_ceiling": 1000, "subtraction_ceiling": 1000, "money_ceiling": 1000,
        "ordinal_ceiling": 20, "times_tables": [2, 3, 4, 5, 10], "side_ceiling": 10},
    3: {"number_ceiling": 10000, "subtraction_ceiling": 10000, "money_ceiling": 10000,
        "ordinal_ceiling": 100, "times_tables": [6, 7, 8, 9], "side_ceiling": 12},
    4: {"number_ceiling": 1000000, "subtraction_ceiling": 10000, "money_ceiling": 10000,
        "ordinal_ceiling": 100, "times_tables": [6, 7, 8, 9], "side_ceiling": 15},
    5: {"number_ceiling": 1000000, "subtraction_ceiling": 10000, "money_ceiling": 10000,
        "ordinal_ceiling": 100, "times_tables": [6, 7, 8, 9], "side_ceiling": 20},
    6: {"number_ceiling": 1000000, "subtraction_ceiling": 10000, "money_ceiling": 10000,
        "ordinal_ceiling": 100, "times_tables": [6, 7, 8, 9], "side_ceiling": 20},
}

MAGNITUDES = (100, 1000, 10000, 1000000)

NUMBER_TOKEN_RE = re.compile(r"\d{1,3}(?:,\d{3})+|\d+")
TABLE_LIST_RE = re.compile(r"\d+(?:\s*,\s*\d+)+")


def get_envelope(grade: int) -> dict:
    grade = clamp_grade(grade)
    envelope = dict(DEFAULT_ENVELOPES[grade])
    configured = GRADE_ENVELOPES.get(str(grade), {})
    if isinstance(configured, dict):
        envelope.update(configured)
    return envelope


def outcome_numbers(outcome: str) -> List[int]:
    """Integer literals in the outcome text; "1,000" and "1000" both read as 1000."""
    return [int(tok.replace(",", "")) for tok in NUMBER_TOKEN_RE.findall(outcome or "")]


def mentioned_limit(outcome: str, allowed: Iterable[int] = MAGNITUDES) -> Optional[int]:
    """Largest of the `allowed` magnitudes written in the outcome, if any."""
    allowed = set(allowed)
    hits = [n for n in outcome_numbers(outcome) if n in allowed]
    return max(hits) if hits else None


def mentioned_tables(outcome: str) -> Optional[List[int]]:
    """A times-table list such as "2, 3, 4, 5, 10" written in the outcome."""
    for match in TABLE_LIST_RE.finditer(outcome or ""):
        values = [int(v) for v in re.findall(r"\d+", match.group(0))]
        if all(1 < v <= 12 for v in values):
            return values
    return None
