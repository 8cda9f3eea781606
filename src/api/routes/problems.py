"""
Problem tracking routes
Handles problem CRUD, star toggling, status changes, filtering and statistics
"""
from typing import List, Optional
from fastapi import APIRouter, HTTPException, Query
from loguru import logger

from api.dependencies import CurrentUser, DBSession
from models.database_models import Difficulty, ProblemStatus
from models.database_service import (
    get_problems_by_user, get_problem_by_id, search_problems, create_problem,
    update_problem, change_problem_status, toggle_problem_star, delete_problem
)
from models.problem_models import (
    ProblemCreate, ProblemUpdate, ProblemResponse, ProblemListResponse, StatusChange,
    StarResponse, FilterOptions, SortOptions, SortField, ProgressStats, DashboardResponse
)
from utils.problem_stats import calculate_stats, filter_problems, sort_problems, recent_problems

router = APIRouter(prefix="/api/problems", tags=["Problems"])


@router.get("", response_model=ProblemListResponse)
async def list_problems(
    current_user: CurrentUser,
    db: DBSession,
    search: Optional[str] = None,
    difficulty: Optional[Difficulty] = None,
    status: Optional[ProblemStatus] = None,
    category: Optional[str] = None,
    tags: List[str] = Query(default=[]),
    starred: Optional[bool] = None,
    sort: SortField = "title",
    direction: str = Query(default="asc", pattern="^(asc|desc)$"),
):
    """
    List problems for the current user

    - **search**: Case-insensitive match over title, category and tags
    - **difficulty** / **status** / **category** / **tags** / **starred**: Exact filters
    - **sort** / **direction**: Sort field and direction

    Returns: The filtered view with the filtered and total counts
    """
    problems = get_problems_by_user(db, current_user.id)  # type: ignore
    options = FilterOptions(
        search=search, difficulty=difficulty, status=status,
        category=category, tags=tags, starred=starred
    )
    view = sort_problems(filter_problems(problems, options), SortOptions(field=sort, direction=direction))
    return ProblemListResponse(
        problems=[ProblemResponse.model_validate(p) for p in view],
        total=len(problems),
        filtered=len(view)
    )


@router.get("/stats", response_model=ProgressStats)
async def get_stats(current_user: CurrentUser, db: DBSession):
    """Progress statistics over all problems"""
    return calculate_stats(get_problems_by_user(db, current_user.id))  # type: ignore


@router.get("/dashboard", response_model=DashboardResponse)
async def get_dashboard(current_user: CurrentUser, db: DBSession):
    """Statistics plus the five most recently updated problems"""
    problems = get_problems_by_user(db, current_user.id)  # type: ignore
    return DashboardResponse(
        stats=calculate_stats(problems),
        recent_problems=[ProblemResponse.model_validate(p) for p in recent_problems(problems)]
    )


@router.get("/search", response_model=List[ProblemResponse])
async def search(current_user: CurrentUser, db: DBSession, q: str = Query(..., min_length=1)):
    """Search problems by title or category"""
    return [ProblemResponse.model_validate(p) for p in search_problems(db, q, current_user.id)]  # type: ignore


@router.get("/{problem_id}", response_model=ProblemResponse)
async def get_problem(problem_id: int, current_user: CurrentUser, db: DBSession):
    """Get a single problem"""
    problem = get_problem_by_id(db, problem_id, current_user.id)  # type: ignore
    if not problem:
        raise HTTPException(status_code=404, detail="Problem not found")
    return ProblemResponse.model_validate(problem)


@router.post("", response_model=ProblemResponse, status_code=201)
async def add_problem(payload: ProblemCreate, current_user: CurrentUser, db: DBSession):
    """Create a new problem"""
    problem = create_problem(db, current_user.id, payload.model_dump())  # type: ignore
    return ProblemResponse.model_validate(problem)


@router.put("/{problem_id}", response_model=ProblemResponse)
async def update_problem_endpoint(problem_id: int, payload: ProblemUpdate,
                                  current_user: CurrentUser, db: DBSession):
    """Save edits to a problem; only the supplied fields change"""
    updates = payload.model_dump(exclude_unset=True)
    # Explicit nulls on required columns are ignored
    updates = {k: v for k, v in updates.items() if v is not None}
    problem = update_problem(db, problem_id, current_user.id, updates)  # type: ignore
    if not problem:
        raise HTTPException(status_code=404, detail="Problem not found")
    return ProblemResponse.model_validate(problem)


@router.patch("/{problem_id}/status", response_model=ProblemResponse)
async def change_status(problem_id: int, payload: StatusChange,
                        current_user: CurrentUser, db: DBSession):
    """Change status and count the attempt"""
    problem = change_problem_status(db, problem_id, current_user.id, payload.status)  # type: ignore
    if not problem:
        raise HTTPException(status_code=404, detail="Problem not found")
    logger.info(f"Problem {problem_id} marked '{payload.status.value}' (attempts: {problem.attempts})")
    return ProblemResponse.model_validate(problem)


@router.post("/{problem_id}/star", response_model=StarResponse)
async def toggle_star(problem_id: int, current_user: CurrentUser, db: DBSession):
    """Toggle the star flag"""
    is_starred = toggle_problem_star(db, problem_id, current_user.id)  # type: ignore
    if is_starred is None:
        raise HTTPException(status_code=404, detail="Problem not found")
    return StarResponse(id=problem_id, is_starred=is_starred)


@router.delete("/{problem_id}")
async def delete_problem_endpoint(problem_id: int, current_user: CurrentUser, db: DBSession):
    """Delete a problem and its AI analyses"""
    success = delete_problem(db, problem_id, current_user.id)  # type: ignore
    if not success:
        raise HTTPException(status_code=404, detail="Problem not found")
    return {"message": "Problem deleted successfully"}
