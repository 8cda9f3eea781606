"""
Pydantic models for problems, notes and progress statistics
"""
from datetime import datetime
from typing import Dict, List, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator

from models.database_models import Difficulty, ProblemStatus


def split_tags(value: Union[str, List[str], None]) -> List[str]:
    """Accept a list or a comma-separated string; trim and drop empties."""
    if value is None:
        return []
    if isinstance(value, str):
        value = value.split(",")
    return [tag.strip() for tag in value if tag and tag.strip()]


# ============= PROBLEM MODELS =============

class ProblemBase(BaseModel):
    title: str
    difficulty: Difficulty
    category: str
    url: str = ""
    description: str = ""
    status: ProblemStatus = ProblemStatus.NOT_STARTED
    attempts: int = Field(default=0, ge=0)
    notes: str = ""
    solution: str = ""
    language: str = ""
    time_complexity: str = ""
    space_complexity: str = ""
    tags: List[str] = Field(default_factory=list)


class ProblemCreate(ProblemBase):
    is_starred: bool = False

    @field_validator('title', 'category')
    @classmethod
    def validate_required_text(cls, v):
        if not v or not v.strip():
            raise ValueError('Field is required')
        return v.strip()

    @field_validator('tags', mode='before')
    @classmethod
    def normalize_tags(cls, v):
        return split_tags(v)


class ProblemUpdate(BaseModel):
    """Fields left unset are not touched"""
    title: Optional[str] = None
    difficulty: Optional[Difficulty] = None
    category: Optional[str] = None
    url: Optional[str] = None
    description: Optional[str] = None
    status: Optional[ProblemStatus] = None
    attempts: Optional[int] = Field(default=None, ge=0)
    notes: Optional[str] = None
    solution: Optional[str] = None
    language: Optional[str] = None
    time_complexity: Optional[str] = None
    space_complexity: Optional[str] = None
    tags: Optional[List[str]] = None
    is_starred: Optional[bool] = None

    @field_validator('title', 'category')
    @classmethod
    def validate_required_text(cls, v):
        if v is not None and not v.strip():
            raise ValueError('Field cannot be blank')
        return v.strip() if v is not None else v

    @field_validator('tags', mode='before')
    @classmethod
    def normalize_tags(cls, v):
        return None if v is None else split_tags(v)


class StatusChange(BaseModel):
    status: ProblemStatus


class ProblemResponse(ProblemBase):
    model_config = ConfigDict(from_attributes=True)

    id: int
    is_starred: bool = False
    completed_at: Optional[datetime] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    @field_validator('url', 'description', 'notes', 'solution', 'language',
                     'time_complexity', 'space_complexity', mode='before')
    @classmethod
    def none_to_empty(cls, v):
        return v or ""

    @field_validator('tags', mode='before')
    @classmethod
    def none_to_list(cls, v):
        return v or []

    @field_validator('attempts', mode='before')
    @classmethod
    def none_to_zero(cls, v):
        return v or 0


class ProblemListResponse(BaseModel):
    problems: List[ProblemResponse]
    total: int
    filtered: int


class StarResponse(BaseModel):
    id: int
    is_starred: bool


# ============= FILTER / SORT =============

SortField = Literal[
    "title", "difficulty", "status", "category",
    "completed_at", "attempts", "created_at", "updated_at"
]


class FilterOptions(BaseModel):
    search: Optional[str] = None
    difficulty: Optional[Difficulty] = None
    status: Optional[ProblemStatus] = None
    category: Optional[str] = None
    tags: List[str] = Field(default_factory=list)
    starred: Optional[bool] = None


class SortOptions(BaseModel):
    field: SortField = "title"
    direction: Literal["asc", "desc"] = "asc"


# ============= STATS =============

class DifficultyStats(BaseModel):
    total: int = 0
    completed: int = 0


class ProgressStats(BaseModel):
    total: int = 0
    completed: int = 0
    in_progress: int = 0
    not_started: int = 0
    failed: int = 0
    easy: DifficultyStats = Field(default_factory=DifficultyStats)
    medium: DifficultyStats = Field(default_factory=DifficultyStats)
    hard: DifficultyStats = Field(default_factory=DifficultyStats)
    categories: Dict[str, DifficultyStats] = Field(default_factory=dict)
    completion_rate: int = 0


class DashboardResponse(BaseModel):
    stats: ProgressStats
    recent_problems: List[ProblemResponse]


# ============= NOTES =============

class NoteCreate(BaseModel):
    content: str
    problem_id: Optional[int] = None
    tags: List[str] = Field(default_factory=list)

    @field_validator('content')
    @classmethod
    def validate_content(cls, v):
        if not v or not v.strip():
            raise ValueError('Note content is required')
        return v

    @field_validator('tags', mode='before')
    @classmethod
    def normalize_tags(cls, v):
        return split_tags(v)


class NoteUpdate(BaseModel):
    content: Optional[str] = None
    problem_id: Optional[int] = None
    tags: Optional[List[str]] = None

    @field_validator('content')
    @classmethod
    def validate_content(cls, v):
        if v is not None and not v.strip():
            raise ValueError('Note content cannot be blank')
        return v

    @field_validator('tags', mode='before')
    @classmethod
    def normalize_tags(cls, v):
        return None if v is None else split_tags(v)


class NoteResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    problem_id: Optional[int] = None
    content: str
    tags: List[str] = Field(default_factory=list)
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    @field_validator('tags', mode='before')
    @classmethod
    def none_to_list(cls, v):
        return v or []


# ============= AI ANALYSIS RECORDS =============

class AnalysisCreate(BaseModel):
    analysis: str

    @field_validator('analysis')
    @classmethod
    def validate_analysis(cls, v):
        if not v or not v.strip():
            raise ValueError('Analysis text is required')
        return v


class AnalysisResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    problem_id: int
    analysis: str
    created_at: Optional[datetime] = None
