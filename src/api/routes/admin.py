"""
Admin routes
Site-wide counts for administrators
"""
from typing import Dict
from fastapi import APIRouter

from api.dependencies import AdminUser, DBSession
from models.database_service import get_overview_counts

router = APIRouter(prefix="/api/admin", tags=["Admin"])


@router.get("/overview", response_model=Dict[str, int])
async def get_overview(current_user: AdminUser, db: DBSession):
    """Totals across all users"""
    return get_overview_counts(db)
