"""
mathify/progress/recommender.py
Public entrypoints for progress analysis.

Usage:
    from mathify.progress.recommender import analyze_student_performance

Callers fetch progress and catalog rows themselves and pass them in whole;
every call recomputes from that snapshot and keeps no state.
"""
import logging
from typing import Any, Iterable, List, Optional

from mathify.core.models import (
    CurriculumTopic, LearningPath, PerformanceStatistics, RecommendationResult, StudentData,
    normalize_progress, normalize_topics,
)
from mathify.progress.classifier import (
    EXCELLENT, GOOD, NEEDS_PRACTICE,
    generate_summary, get_encouragement_message, get_remedial_actions,
    identify_strengths, identify_weaknesses, needs_remediation,
    recommend_difficulty_adjustment,
)
from mathify.progress.statistics import calculate_statistics

logger = logging.getLogger(__name__)

ALL_COMPLETE = "Great job! You've completed all available topics."
REVIEW_PREREQUISITE = "Review basic concepts from previous topics"

PATH_REASONING = {
    "start": "Start with the first topic in the curriculum to build a strong foundation.",
    "excellent": (
        "You're excelling! Continue with the next topics in sequence. "
        "You may be ready to explore more advanced concepts."
    ),
    "good": "You're doing well! Follow the curriculum sequence and maintain your current pace.",
    "other": "Focus on mastering the current topics before moving forward. Review weak areas and practice more.",
}


def recommend_next_topics(
    progress: Iterable[Any],
    curriculum_topics: Iterable[Any],
    grade: Optional[int] = None,
) -> List[str]:
    """
    Up to 3 topic titles, in priority order:
    mastery skip-ahead (short-circuits), remediation-first, sequential fill.
    `grade` is accepted for call-site symmetry; the catalog is already per grade.
    """
    records = normalize_progress(progress)
    catalog = normalize_topics(curriculum_topics)
    if not catalog:
        return []

    by_id = {t.id: t for t in catalog}
    completed_ids = {p.topic_id for p in records if p.completed}
    available = sorted(
        (t for t in catalog if t.id not in completed_ids),
        key=lambda t: t.order_index,
    )

    stats = calculate_statistics(records)
    if stats.average_score >= EXCELLENT and stats.completion_rate >= 80:
        done_categories = {
            by_id[p.topic_id].category
            for p in records
            if p.completed and p.topic_id in by_id
        }
        skip_ahead = [t for t in available if t.category not in done_categories][:2]
        if skip_ahead:
            logger.debug(f"Mastery skip-ahead into {[t.category for t in skip_ahead]}")
            return [t.title for t in skip_ahead]

    chosen: List[CurriculumTopic] = []
    for p in records:
        if len(chosen) == 2:
            break
        if p.completed or p.best_score >= GOOD or p.attempts <= 0:
            continue
        topic = by_id.get(p.topic_id)
        if topic is not None and topic not in chosen:
            chosen.append(topic)

    for topic in available:
        if len(chosen) >= 3:
            break
        if topic not in chosen:
            chosen.append(topic)

    if not chosen:
        return [ALL_COMPLETE]
    return [t.title for t in chosen[:3]]


def analyze_student_performance(student_data: Any, curriculum_topics: Any) -> RecommendationResult:
    student = StudentData.from_raw(student_data)
    progress = student.progress

    stats = calculate_statistics(progress)
    strengths = identify_strengths(progress)
    weaknesses = identify_weaknesses(progress)
    recommended = recommend_next_topics(progress, curriculum_topics, student.grade)
    remediation = needs_remediation(progress)

    logger.info(
        f"Analyzed {stats.total_topics} progress records for grade {student.grade}: "
        f"average {stats.average_score}%, remediation={remediation}"
    )
    return RecommendationResult(
        summary=generate_summary(stats, student.grade),
        strengths=strengths,
        weaknesses=weaknesses,
        recommended_topics=recommended,
        remedial_actions=get_remedial_actions(weaknesses) if remediation else [],
        difficulty_adjustment=recommend_difficulty_adjustment(stats),
        statistics=stats,
        encouragement=get_encouragement_message(stats),
    )


def generate_path_reasoning(stats: PerformanceStatistics) -> str:
    if stats.completed_topics == 0:
        return PATH_REASONING["start"]
    if stats.average_score >= EXCELLENT:
        return PATH_REASONING["excellent"]
    if stats.average_score >= GOOD:
        return PATH_REASONING["good"]
    return PATH_REASONING["other"]


def estimate_time(average_score: float) -> str:
    if average_score >= EXCELLENT:
        return "1-2 weeks"
    if average_score < NEEDS_PRACTICE:
        return "3-4 weeks"
    return "2-3 weeks"


def recommend_learning_path(student_data: Any, available_topics: Any) -> LearningPath:
    student = StudentData.from_raw(student_data)
    stats = calculate_statistics(student.progress)
    return LearningPath(
        next_topics=recommend_next_topics(student.progress, available_topics, student.grade),
        reasoning=generate_path_reasoning(stats),
        prerequisites=[REVIEW_PREREQUISITE] if stats.average_score < GOOD else [],
        estimated_time=estimate_time(stats.average_score),
    )
