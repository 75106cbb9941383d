"""
mathify/progress/statistics.py
Reduces per-topic progress records into one PerformanceStatistics summary.
"""
from typing import Any, Iterable

from mathify.core.models import PerformanceStatistics, normalize_progress


def round_half_up(value: float) -> int:
    """Half-up rounding for non-negative values (74.5 -> 75, not banker's 74)."""
    return int(value + 0.5)


def calculate_statistics(progress: Iterable[Any]) -> PerformanceStatistics:
    records = normalize_progress(progress)
    if not records:
        return PerformanceStatistics()

    total = len(records)
    completed = sum(1 for p in records if p.completed)
    in_progress = sum(1 for p in records if not p.completed and p.progress_percentage > 0)
    total_score = sum(p.best_score for p in records)

    return PerformanceStatistics(
        average_score=round_half_up(total_score / total),
        completion_rate=round_half_up(completed / total * 100),
        total_topics=total,
        completed_topics=completed,
        in_progress_topics=in_progress,
        not_started_topics=total - completed - in_progress,
    )
