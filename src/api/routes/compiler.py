"""
Code compiler routes
Starter templates and code execution through the hosted judge
"""
from typing import List
from fastapi import APIRouter, HTTPException

from api.dependencies import CurrentUser
from models.compiler_models import CodeTemplate, CodeExecutionRequest, CodeExecutionResult
from utils.basetools.judge_tools import CODE_TEMPLATES, LANGUAGE_IDS, execute_code, is_supported_language
import logging

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/compiler", tags=["Compiler"])


@router.get("/templates", response_model=List[CodeTemplate])
def list_templates():
    """Starter code for every supported language"""
    return list(CODE_TEMPLATES.values())


@router.post("/execute", response_model=CodeExecutionResult)
def run_code(payload: CodeExecutionRequest, current_user: CurrentUser):
    """
    Run code on the judge

    Runs in the threadpool since judge polling blocks between requests.
    Falls back to mock execution (mocked=true) when the judge is unavailable.
    """
    if not is_supported_language(payload.language):
        raise HTTPException(
            status_code=400,
            detail=f"Unsupported language '{payload.language}'. Supported: {', '.join(LANGUAGE_IDS)}"
        )
    logger.info(f"User {current_user.id} running {payload.language} code")
    return execute_code(payload.language, payload.source_code, payload.stdin)
