"""
mathify/core/models.py
Data shapes shared by the progress analyzer and the question engine.
Raw caller input (dicts from storage or the API) is normalized here so the
engine itself never has to reject a value.
"""
import math
from dataclasses import dataclass, field
from typing import Any, Dict, List, Mapping, Optional, Union

Number = Union[int, float]


def _get(raw: Any, key: str, default: Any = None) -> Any:
    if isinstance(raw, Mapping):
        return raw.get(key, default)
    return getattr(raw, key, default)


def as_number(value: Any, default: Number = 0) -> Number:
    """Coerce to a finite int/float; anything else becomes `default`."""
    if isinstance(value, bool):
        return int(value)
    if isinstance(value, (int, float)):
        return value if math.isfinite(value) else default
    if isinstance(value, str):
        try:
            parsed = float(value.strip())
        except ValueError:
            return default
        if not math.isfinite(parsed):
            return default
        return int(parsed) if parsed == int(parsed) else parsed
    return default


def clamp(value: Number, low: Number, high: Number) -> Number:
    return max(low, min(high, value))


def clamp_grade(value: Any) -> int:
    """Grade for question generation: anything unusable becomes 1, then [1, 6]."""
    grade = int(as_number(value, 1))
    if grade == 0:
        grade = 1
    return int(clamp(grade, 1, 6))


def display_number(value: Number) -> Number:
    """Collapse integral floats (4.0 -> 4) so answers read naturally."""
    if isinstance(value, float) and value.is_integer():
        return int(value)
    return value


# ---------------------------------------------------------------------------
# Inputs
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class ProgressRecord:
    topic_id: Any = None
    progress_percentage: Number = 0
    completed: bool = False
    best_score: Number = 0
    attempts: int = 0
    topic_title: str = ""

    @classmethod
    def from_raw(cls, raw: Any) -> "ProgressRecord":
        if isinstance(raw, cls):
            return raw
        return cls(
            topic_id=_get(raw, "topic_id"),
            progress_percentage=clamp(as_number(_get(raw, "progress_percentage")), 0, 100),
            completed=bool(_get(raw, "completed", False)),
            best_score=clamp(as_number(_get(raw, "best_score")), 0, 100),
            attempts=max(0, int(as_number(_get(raw, "attempts")))),
            topic_title=str(_get(raw, "topic_title") or ""),
        )


@dataclass(frozen=True)
class CurriculumTopic:
    id: Any = None
    grade: int = 1
    category: str = ""
    learning_outcome: str = ""
    order_index: Number = 0
    topic_code: str = ""
    topic_title: str = ""

    @property
    def title(self) -> str:
        if self.topic_title:
            return self.topic_title
        if self.topic_code:
            return self.topic_code
        return f"Topic {self.id}"

    @classmethod
    def from_raw(cls, raw: Any) -> "CurriculumTopic":
        if isinstance(raw, cls):
            return raw
        return cls(
            id=_get(raw, "id"),
            grade=int(as_number(_get(raw, "grade"), 1)),
            category=str(_get(raw, "category") or ""),
            learning_outcome=str(_get(raw, "learning_outcome") or ""),
            order_index=as_number(_get(raw, "order_index")),
            topic_code=str(_get(raw, "topic_code") or ""),
            topic_title=str(_get(raw, "topic_title") or ""),
        )


@dataclass(frozen=True)
class TopicConfig:
    """Topic descriptor as the question engine sees it."""
    grade: int = 1
    category: str = "Operations"
    learning_outcome: str = ""
    topic_code: str = ""

    @classmethod
    def from_raw(cls, raw: Any) -> "TopicConfig":
        if isinstance(raw, cls):
            return raw
        category = str(_get(raw, "category") or "").strip()
        return cls(
            grade=clamp_grade(_get(raw, "grade")),
            category=category or "Operations",
            learning_outcome=str(_get(raw, "learning_outcome") or ""),
            topic_code=str(_get(raw, "topic_code") or ""),
        )


@dataclass(frozen=True)
class StudentData:
    grade: Optional[int] = None
    progress: List[ProgressRecord] = field(default_factory=list)

    @classmethod
    def from_raw(cls, raw: Any) -> "StudentData":
        if isinstance(raw, cls):
            return raw
        if raw is None:
            return cls()
        grade = _get(raw, "grade")
        grade = int(as_number(grade)) if grade is not None else None
        return cls(
            grade=grade,
            progress=[ProgressRecord.from_raw(p) for p in (_get(raw, "progress") or [])],
        )


def normalize_progress(progress: Any) -> List[ProgressRecord]:
    return [ProgressRecord.from_raw(p) for p in (progress or [])]


def normalize_topics(topics: Any) -> List[CurriculumTopic]:
    return [CurriculumTopic.from_raw(t) for t in (topics or [])]


# ---------------------------------------------------------------------------
# Outputs
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class PerformanceStatistics:
    average_score: int = 0
    completion_rate: int = 0
    total_topics: int = 0
    completed_topics: int = 0
    in_progress_topics: int = 0
    not_started_topics: int = 0

    def to_dict(self) -> Dict[str, int]:
        return {
            "averageScore": self.average_score,
            "completionRate": self.completion_rate,
            "totalTopics": self.total_topics,
            "completedTopics": self.completed_topics,
            "inProgressTopics": self.in_progress_topics,
            "notStartedTopics": self.not_started_topics,
        }


@dataclass
class Question:
    question: str
    type: str
    correct_answer: Number
    icon: str
    options: Optional[List[str]] = None

    @property
    def answer_text(self) -> str:
        if self.type == "multiple-choice" and self.options:
            idx = int(self.correct_answer)
            if 0 <= idx < len(self.options):
                return self.options[idx]
        return str(display_number(self.correct_answer))

    def signature(self) -> str:
        option_part = "|".join(sorted(self.options)) if self.options else ""
        return f"{self.question}|{option_part}|{self.answer_text}"

    def to_dict(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {
            "question": self.question,
            "type": self.type,
        }
        if self.options is not None:
            data["options"] = list(self.options)
        data["correctAnswer"] = display_number(self.correct_answer)
        data["icon"] = self.icon
        return data


@dataclass
class RecommendationResult:
    summary: str
    strengths: List[str]
    weaknesses: List[str]
    recommended_topics: List[str]
    remedial_actions: List[str]
    difficulty_adjustment: str
    statistics: PerformanceStatistics
    encouragement: str = ""

    def to_dict(self) -> Dict[str, Any]:
        return {
            "summary": self.summary,
            "strengths": list(self.strengths),
            "weaknesses": list(self.weaknesses),
            "recommendedTopics": list(self.recommended_topics),
            "remedialActions": list(self.remedial_actions),
            "difficultyAdjustment": self.difficulty_adjustment,
            "statistics": self.statistics.to_dict(),
            "encouragement": self.encouragement,
        }


@dataclass
class LearningPath:
    next_topics: List[str]
    reasoning: str
    prerequisites: List[str]
    estimated_time: str

    def to_dict(self) -> Dict[str, Any]:
        return {
            "nextTopics": list(self.next_topics),
            "reasoning": self.reasoning,
            "prerequisites": list(self.prerequisites),
            "estimatedTime": self.estimated_time,
        }
