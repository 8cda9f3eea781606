"""
AI assistant routes
Code analysis, practice recommendations, daily plans and progress insights
"""
from datetime import date
from typing import List, Optional
from fastapi import APIRouter, HTTPException
from loguru import logger

from api.dependencies import CurrentUser, DBSession
from api.app_context import code_analysis_agent, recommendation_agent, daily_plan_agent, insights_agent
from llm.base import run_agent, LLMNotConfiguredError, AIResponseError
from models.ai_models import (
    CodeAnalysis, CodeAnalysisResponse, RecommendationSet, RecommendationResponse,
    DailyPracticePlan, DailyPlanRequest, DailyPlanUpdate, DailyPlanResponse, AIInsights
)
from models.database_service import (
    get_problem_by_id, get_problems_by_user, save_analysis,
    replace_recommendations, get_recommendations,
    create_practice_plan, get_practice_plan_for_date, update_practice_plan
)
from utils.ai_helpers import (
    build_code_analysis_prompt, build_recommendation_prompt,
    build_daily_plan_prompt, build_insights_prompt
)

router = APIRouter(prefix="/api/ai", tags=["AI Assistant"])


async def _ask(agent, prompt: str):
    try:
        return await run_agent(agent, prompt)
    except LLMNotConfiguredError as e:
        logger.warning(str(e))
        raise HTTPException(status_code=503, detail="AI assistant is not configured")
    except AIResponseError as e:
        raise HTTPException(status_code=502, detail=str(e))


def _plan_response(record) -> DailyPlanResponse:
    return DailyPlanResponse(
        id=record.id,
        plan_date=record.plan_date,
        status=record.status,
        plan=DailyPracticePlan.model_validate(record.plan),
        created_at=record.created_at,
    )


@router.post("/problems/{problem_id}/analyze", response_model=CodeAnalysisResponse)
async def analyze_problem(problem_id: int, current_user: CurrentUser, db: DBSession):
    """Review the saved solution of a problem and store the result"""
    problem = get_problem_by_id(db, problem_id, current_user.id)  # type: ignore
    if not problem:
        raise HTTPException(status_code=404, detail="Problem not found")

    analysis: CodeAnalysis = await _ask(code_analysis_agent, build_code_analysis_prompt(problem))
    record = save_analysis(db, problem_id, analysis.model_dump_json(), current_user.id)  # type: ignore

    return CodeAnalysisResponse(
        problem_id=problem_id,
        analysis_id=record.id,  # type: ignore
        analysis=analysis,
        created_at=record.created_at,  # type: ignore
    )


@router.post("/recommendations", response_model=List[RecommendationResponse])
async def generate_recommendations(current_user: CurrentUser, db: DBSession):
    """Generate a fresh set of practice recommendations"""
    problems = get_problems_by_user(db, current_user.id)  # type: ignore
    result: RecommendationSet = await _ask(recommendation_agent, build_recommendation_prompt(problems))

    records = replace_recommendations(
        db, current_user.id, [r.model_dump() for r in result.recommendations]  # type: ignore
    )
    return [RecommendationResponse.model_validate(r) for r in records]


@router.get("/recommendations", response_model=List[RecommendationResponse])
async def list_recommendations(current_user: CurrentUser, db: DBSession, category: Optional[str] = None):
    """Stored recommendations, optionally for one category"""
    records = get_recommendations(db, current_user.id, category)  # type: ignore
    return [RecommendationResponse.model_validate(r) for r in records]


@router.post("/daily-plan", response_model=DailyPlanResponse, status_code=201)
async def create_daily_plan(current_user: CurrentUser, db: DBSession, payload: Optional[DailyPlanRequest] = None):
    """Generate and store a practice plan for a day (today by default)"""
    plan_date = (payload.plan_date if payload else None) or date.today()
    problems = get_problems_by_user(db, current_user.id)  # type: ignore
    plan: DailyPracticePlan = await _ask(daily_plan_agent, build_daily_plan_prompt(problems, plan_date))

    record = create_practice_plan(db, current_user.id, plan_date, plan.model_dump())  # type: ignore
    return _plan_response(record)


@router.get("/daily-plan/today", response_model=DailyPlanResponse)
async def get_today_plan(current_user: CurrentUser, db: DBSession):
    record = get_practice_plan_for_date(db, current_user.id, date.today())  # type: ignore
    if not record:
        raise HTTPException(status_code=404, detail="No practice plan for today")
    return _plan_response(record)


@router.patch("/daily-plan/{plan_id}", response_model=DailyPlanResponse)
async def edit_daily_plan(plan_id: int, payload: DailyPlanUpdate, current_user: CurrentUser, db: DBSession):
    """Update a plan's status or focus areas"""
    record = update_practice_plan(
        db, plan_id, current_user.id, status=payload.status, focus_areas=payload.focus_areas  # type: ignore
    )
    if not record:
        raise HTTPException(status_code=404, detail="Practice plan not found")
    return _plan_response(record)


@router.post("/insights", response_model=AIInsights)
async def generate_insights(current_user: CurrentUser, db: DBSession):
    """Summarize overall progress and suggest a study plan"""
    problems = get_problems_by_user(db, current_user.id)  # type: ignore
    return await _ask(insights_agent, build_insights_prompt(problems))
