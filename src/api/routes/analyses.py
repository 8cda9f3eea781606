"""
AI analysis record routes
Stores and lists opaque analysis text attached to a problem
"""
from typing import List
from fastapi import APIRouter, HTTPException

from api.dependencies import CurrentUser, DBSession
from models.database_service import get_problem_by_id, save_analysis, get_analyses
from models.problem_models import AnalysisCreate, AnalysisResponse

router = APIRouter(prefix="/api/problems/{problem_id}/analyses", tags=["AI Analyses"])


@router.get("", response_model=List[AnalysisResponse])
async def list_analyses(problem_id: int, current_user: CurrentUser, db: DBSession):
    """Analyses for a problem, newest first"""
    if not get_problem_by_id(db, problem_id, current_user.id):  # type: ignore
        raise HTTPException(status_code=404, detail="Problem not found")
    return [AnalysisResponse.model_validate(a) for a in get_analyses(db, problem_id, current_user.id)]  # type: ignore


@router.post("", response_model=AnalysisResponse, status_code=201)
async def add_analysis(problem_id: int, payload: AnalysisCreate, current_user: CurrentUser, db: DBSession):
    """Save an analysis for a problem"""
    if not get_problem_by_id(db, problem_id, current_user.id):  # type: ignore
        raise HTTPException(status_code=404, detail="Problem not found")
    record = save_analysis(db, problem_id, payload.analysis, current_user.id)  # type: ignore
    return AnalysisResponse.model_validate(record)
