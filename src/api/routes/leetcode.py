"""
LeetCode proxy route
Forwards question lookups to LeetCode's GraphQL endpoint so browsers avoid CORS
"""
from typing import Optional
from fastapi import APIRouter
from fastapi.responses import JSONResponse
from pydantic import BaseModel

from utils.basetools.leetcode_tools import fetch_question, LeetCodeFetchError

router = APIRouter(tags=["LeetCode"])


class LeetCodeRequest(BaseModel):
    slug: Optional[str] = None


@router.post("/leetcode")
def get_question(payload: Optional[LeetCodeRequest] = None):
    """Question details for a title slug, or {} when LeetCode has none"""
    slug = ((payload.slug if payload else None) or "").strip()
    if not slug:
        return JSONResponse(status_code=400, content={"error": "Missing slug"})
    try:
        return fetch_question(slug)
    except LeetCodeFetchError as e:
        return JSONResponse(status_code=502, content={"error": str(e)})
