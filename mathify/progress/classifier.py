"""
mathify/progress/classifier.py
Rule-based performance classification: strengths, weaknesses, remediation,
difficulty directives and the learner-facing summary lines.
All rules read a fixed set of score bands; nothing is learned over time.
"""
from typing import Any, Iterable, List, Optional

from mathify.core.models import (
    PerformanceStatistics, ProgressRecord, display_number, normalize_progress,
)
from mathify.progress.statistics import calculate_statistics

EXCELLENT = 90
GOOD = 70
NEEDS_PRACTICE = 50
WEAK = 0

VERY_EASY, EASY, MEDIUM, HARD, VERY_HARD = 1, 2, 3, 4, 5

STRENGTH_PLACEHOLDER = "Keep practicing to build your strengths!"

REMEDIAL_ACTIONS = [
    "Review the basic concepts of the weak topics",
    "Practice more problems in those areas",
    "Take your time and don't rush",
    "Ask for help if needed",
]

DIFFICULTY_DIRECTIVES = {
    "increase": "Increase difficulty - You're ready for more challenging problems!",
    "maintain": "Maintain current difficulty - You're doing well at this level.",
    "slightly_reduce": "Slightly reduce difficulty - Focus on mastering the basics first.",
    "reduce": "Reduce difficulty - Let's go back to fundamentals and build confidence.",
}

SUMMARY_TEMPLATES = {
    "welcome": "Welcome to Grade {grade}! Start your learning journey by completing your first topic.",
    "welcome_no_grade": "Welcome! Start your learning journey by completing your first topic.",
    "excellent": (
        "Excellent work! You're performing at {average}% average with {completed} topics completed. "
        "Keep up the great progress!"
    ),
    "good": (
        "Good progress! You're averaging {average}% with {completed} topics completed. "
        "Continue practicing to improve further."
    ),
    "needs_practice": (
        "You've completed {completed} topics with a {average}% average. "
        "Focus on reviewing weak areas to improve your scores."
    ),
    "weak": (
        "You've started {total} topics. Your current average is {average}%. "
        "Let's focus on building a strong foundation - review the basics and practice more."
    ),
}

ENCOURAGEMENT = {
    "start": "Ready to start your math journey? Let's begin with your first topic!",
    "excellent": "Amazing work! You're a math superstar! Keep challenging yourself!",
    "good": "Great job! You're making excellent progress. Keep it up!",
    "needs_practice": "You're improving! Keep practicing and you'll get even better!",
    "weak": "Every expert was once a beginner. Keep practicing and you'll improve!",
}


def score_band(average_score: float) -> str:
    if average_score >= EXCELLENT:
        return "excellent"
    if average_score >= GOOD:
        return "good"
    if average_score >= NEEDS_PRACTICE:
        return "needs_practice"
    return "weak"


def _strength_label(record: ProgressRecord) -> str:
    return record.topic_title or f"Topic with {display_number(record.best_score)}% score"


def identify_strengths(progress: Iterable[Any]) -> List[str]:
    records = normalize_progress(progress)
    excellent = [p for p in records if p.best_score >= EXCELLENT and p.completed]
    if excellent:
        excellent.sort(key=lambda p: p.best_score, reverse=True)
        return [_strength_label(p) for p in excellent[:3]]

    good = [p for p in records if p.best_score >= GOOD]
    good.sort(key=lambda p: p.best_score, reverse=True)
    if good:
        return [_strength_label(p) for p in good[:3]]
    return [STRENGTH_PLACEHOLDER]


def _is_weak(record: ProgressRecord) -> bool:
    if record.best_score < GOOD and record.attempts > 0:
        return True
    return 0 < record.progress_percentage < 50


def identify_weaknesses(progress: Iterable[Any]) -> List[str]:
    weak = [p for p in normalize_progress(progress) if _is_weak(p)]
    weak.sort(key=lambda p: p.best_score)
    return [
        f"{p.topic_title or 'Unknown Topic'} "
        f"(Score: {display_number(p.best_score)}%, Progress: {display_number(p.progress_percentage)}%)"
        for p in weak[:3]
    ]


def needs_remediation(progress: Iterable[Any]) -> bool:
    records = normalize_progress(progress)
    stats = calculate_statistics(records)
    if stats.average_score < GOOD or stats.completion_rate < 50:
        return True
    return any(p.best_score < NEEDS_PRACTICE and p.attempts >= 2 for p in records)


def get_remedial_actions(weaknesses: List[str]) -> List[str]:
    if not weaknesses:
        return []
    return list(REMEDIAL_ACTIONS)


def recommend_difficulty_adjustment(stats: PerformanceStatistics) -> str:
    band = score_band(stats.average_score)
    key = {
        "excellent": "increase",
        "good": "maintain",
        "needs_practice": "slightly_reduce",
        "weak": "reduce",
    }[band]
    return DIFFICULTY_DIRECTIVES[key]


def generate_summary(stats: PerformanceStatistics, grade: Optional[int]) -> str:
    if stats.total_topics == 0:
        if grade is None:
            return SUMMARY_TEMPLATES["welcome_no_grade"]
        return SUMMARY_TEMPLATES["welcome"].format(grade=grade)
    return SUMMARY_TEMPLATES[score_band(stats.average_score)].format(
        average=stats.average_score,
        completed=stats.completed_topics,
        total=stats.total_topics,
        grade=grade,
    )


def calculate_difficulty(record: Any) -> int:
    """Difficulty level 1-5 for one topic, from that topic's own record."""
    if record is None:
        return MEDIUM
    p = ProgressRecord.from_raw(record)
    if p.progress_percentage == 0:
        return MEDIUM

    if p.best_score >= EXCELLENT and p.progress_percentage >= 90:
        return VERY_HARD
    if p.best_score >= GOOD and p.progress_percentage >= 70:
        return HARD
    if p.best_score >= NEEDS_PRACTICE or p.progress_percentage >= 50:
        return MEDIUM
    if p.best_score >= WEAK or p.progress_percentage >= 25:
        return EASY
    return VERY_EASY


def get_encouragement_message(stats: PerformanceStatistics) -> str:
    if stats.completed_topics == 0:
        return ENCOURAGEMENT["start"]
    return ENCOURAGEMENT[score_band(stats.average_score)]
