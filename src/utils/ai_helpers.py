"""
Prompt builders for the AI assistant agents
"""
from collections import Counter
from datetime import date
from typing import Iterable, List

from data.prompts.ai_assistant_prompts import (
    CODE_ANALYSIS_PROMPT, RECOMMENDATION_PROMPT, DAILY_PLAN_PROMPT, INSIGHTS_PROMPT
)
from models.database_models import Problem, ProblemStatus
from utils.problem_stats import calculate_stats


def _value(field) -> str:
    return getattr(field, "value", field) or ""


def _join(values: Iterable[str]) -> str:
    items = [v for v in values if v]
    return ", ".join(items) if items else "none yet"


def _counts(values: Iterable[str]) -> str:
    counter = Counter(v for v in values if v)
    if not counter:
        return "none yet"
    return ", ".join(f"{name} ({count})" for name, count in counter.most_common())


def build_code_analysis_prompt(problem: Problem) -> str:
    return CODE_ANALYSIS_PROMPT.format(
        title=problem.title,
        category=problem.category,
        difficulty=_value(problem.difficulty),
        status=_value(problem.status),
        language=problem.language or "Not specified",
        solution=problem.solution or "No code provided",
        notes=problem.notes or "No notes",
    )


def build_recommendation_prompt(problems: List[Problem]) -> str:
    completed = [p for p in problems if p.status == ProblemStatus.COMPLETED]
    in_progress = [p for p in problems if p.status == ProblemStatus.IN_PROGRESS]
    return RECOMMENDATION_PROMPT.format(
        completed=len(completed),
        in_progress=len(in_progress),
        total=len(problems),
        completed_categories=_counts(p.category for p in completed),
        completed_difficulties=_counts(_value(p.difficulty) for p in completed),
    )


def build_daily_plan_prompt(problems: List[Problem], plan_date: date) -> str:
    stats = calculate_stats(problems)
    return DAILY_PLAN_PROMPT.format(
        plan_date=plan_date.isoformat(),
        categories=_join(sorted(stats.categories)),
        completed=stats.completed,
        total=stats.total,
    )


def build_insights_prompt(problems: List[Problem]) -> str:
    stats = calculate_stats(problems)
    attempts = [p.attempts or 0 for p in problems]
    average_attempts = round(sum(attempts) / len(attempts), 2) if attempts else 0
    return INSIGHTS_PROMPT.format(
        total=stats.total,
        completed=stats.completed,
        in_progress=stats.in_progress,
        failed=stats.failed,
        average_attempts=average_attempts,
        categories=_counts(p.category for p in problems),
        difficulties=_counts(_value(p.difficulty) for p in problems),
    )
