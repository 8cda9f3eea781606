"""
Problem Statistics Utilities
Pure helpers for aggregating, filtering and sorting a user's problem list
"""
from datetime import datetime
from typing import Iterable, List, Sequence

from models.database_models import Difficulty, ProblemStatus
from models.problem_models import DifficultyStats, FilterOptions, ProgressStats, SortOptions

DIFFICULTY_RANK = {
    Difficulty.EASY: 0,
    Difficulty.MEDIUM: 1,
    Difficulty.HARD: 2,
}

STATUS_RANK = {
    ProblemStatus.NOT_STARTED: 0,
    ProblemStatus.IN_PROGRESS: 1,
    ProblemStatus.COMPLETED: 2,
    ProblemStatus.FAILED: 3,
}

STATUS_FIELDS = {
    ProblemStatus.COMPLETED: "completed",
    ProblemStatus.IN_PROGRESS: "in_progress",
    ProblemStatus.NOT_STARTED: "not_started",
    ProblemStatus.FAILED: "failed",
}


def calculate_stats(problems: Sequence) -> ProgressStats:
    """
    Aggregate counts over the full problem list

    Args:
        problems: Problem rows (or any objects with status, difficulty, category)

    Returns:
        ProgressStats with counts by status, difficulty and category
    """
    stats = ProgressStats(total=len(problems))

    for problem in problems:
        status = ProblemStatus(problem.status)
        is_completed = status == ProblemStatus.COMPLETED

        # Count by status
        field = STATUS_FIELDS[status]
        setattr(stats, field, getattr(stats, field) + 1)

        # Count by difficulty
        bucket: DifficultyStats = getattr(stats, Difficulty(problem.difficulty).value.lower())
        bucket.total += 1
        if is_completed:
            bucket.completed += 1

        # Count by category
        category = stats.categories.setdefault(problem.category, DifficultyStats())
        category.total += 1
        if is_completed:
            category.completed += 1

    if stats.total > 0:
        stats.completion_rate = round(stats.completed / stats.total * 100)
    return stats


def _matches_search(problem, term: str) -> bool:
    if term in (problem.title or "").lower():
        return True
    if term in (problem.category or "").lower():
        return True
    return any(term in tag.lower() for tag in (problem.tags or []))


def filter_problems(problems: Iterable, options: FilterOptions) -> List:
    """Return the problems matching every filter that is set"""
    term = (options.search or "").strip().lower()
    wanted_tags = {tag.lower() for tag in options.tags}

    result = []
    for problem in problems:
        if term and not _matches_search(problem, term):
            continue
        if options.difficulty is not None and Difficulty(problem.difficulty) != options.difficulty:
            continue
        if options.status is not None and ProblemStatus(problem.status) != options.status:
            continue
        if options.category and problem.category != options.category:
            continue
        if wanted_tags and not wanted_tags.issubset({tag.lower() for tag in (problem.tags or [])}):
            continue
        if options.starred is not None and bool(problem.is_starred) != options.starred:
            continue
        result.append(problem)
    return result


def _timestamp(value) -> float:
    if value is None:
        return float("-inf")
    if isinstance(value, datetime):
        return value.timestamp()
    return float(value)


def _sort_key(field: str):
    if field == "difficulty":
        return lambda p: DIFFICULTY_RANK[Difficulty(p.difficulty)]
    if field == "status":
        return lambda p: STATUS_RANK[ProblemStatus(p.status)]
    if field in ("completed_at", "created_at", "updated_at"):
        return lambda p: _timestamp(getattr(p, field))
    if field == "attempts":
        return lambda p: p.attempts or 0
    return lambda p: (getattr(p, field) or "").lower()


def sort_problems(problems: Iterable, options: SortOptions) -> List:
    """Stable sort by a single field"""
    return sorted(
        problems,
        key=_sort_key(options.field),
        reverse=options.direction == "desc",
    )


def recent_problems(problems: Iterable, limit: int = 5) -> List:
    """Most recently updated first"""
    ordered = sorted(problems, key=lambda p: _timestamp(p.updated_at or p.created_at), reverse=True)
    return ordered[:limit]
