"""
Pydantic models for the AI assistant
Structured outputs for the code analysis, recommendation, daily plan and insight agents
"""
from datetime import date, datetime
from typing import List, Optional, Literal
from pydantic import BaseModel, ConfigDict, Field


# ============= CODE ANALYSIS =============

class CodeAnalysis(BaseModel):
    """Review of a saved solution"""
    time_complexity: str = Field(description="Big-O time complexity, e.g. O(n)")
    space_complexity: str = Field(description="Big-O space complexity, e.g. O(1)")
    code_quality: Literal["Excellent", "Good", "Fair", "Poor"]
    strengths: List[str] = Field(default_factory=list)
    weaknesses: List[str] = Field(default_factory=list)
    optimization_suggestions: List[str] = Field(default_factory=list)
    best_practices: List[str] = Field(default_factory=list)
    alternative_approaches: List[str] = Field(default_factory=list)
    performance_score: int = Field(ge=0, le=100)
    readability_score: int = Field(ge=0, le=100)
    maintainability_score: int = Field(ge=0, le=100)


class CodeAnalysisResponse(BaseModel):
    problem_id: int
    analysis_id: int
    analysis: CodeAnalysis
    created_at: Optional[datetime] = None


# ============= RECOMMENDATIONS =============

class PracticeRecommendation(BaseModel):
    category: str
    difficulty: Literal["Easy", "Medium", "Hard"]
    reason: str
    priority: Literal["High", "Medium", "Low"] = "Medium"
    estimated_time: int = Field(default=30, ge=0, description="Minutes")


class RecommendationSet(BaseModel):
    recommendations: List[PracticeRecommendation]


class RecommendationResponse(PracticeRecommendation):
    model_config = ConfigDict(from_attributes=True)

    id: int
    created_at: Optional[datetime] = None


# ============= DAILY PLAN =============

class PlannedProblem(BaseModel):
    category: str
    difficulty: Literal["Easy", "Medium", "Hard"]
    reason: str
    estimated_time: int = Field(default=30, ge=0)


class DifficultyDistribution(BaseModel):
    easy: int = 0
    medium: int = 0
    hard: int = 0


class DailyPracticePlan(BaseModel):
    """Plan body produced by the agent"""
    estimated_total_time: int = Field(ge=0, description="Minutes")
    difficulty_distribution: DifficultyDistribution
    focus_areas: List[str]
    problems: List[PlannedProblem]


PlanStatus = Literal["Pending", "In Progress", "Completed", "Skipped"]


class DailyPlanRequest(BaseModel):
    plan_date: Optional[date] = None


class DailyPlanUpdate(BaseModel):
    status: Optional[PlanStatus] = None
    focus_areas: Optional[List[str]] = None


class DailyPlanResponse(BaseModel):
    id: int
    plan_date: date
    status: PlanStatus
    plan: DailyPracticePlan
    created_at: Optional[datetime] = None


# ============= INSIGHTS =============

class OverallProgress(BaseModel):
    completion_rate: float
    average_attempts: float
    strongest_category: str
    weakest_category: str
    improvement_trend: Literal["Improving", "Stable", "Declining"]


class StudyPlan(BaseModel):
    daily_goal: int
    weekly_goal: int
    focus_areas: List[str]
    recommended_difficulty: Literal["Easy", "Medium", "Hard"]


class AIInsights(BaseModel):
    overall_progress: OverallProgress
    study_plan: StudyPlan
