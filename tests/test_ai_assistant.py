"""
Tests for the AI assistant routes

The LLM is replaced with pydantic-ai test models, so no network calls are made.
"""
import json
from datetime import date
from unittest.mock import patch

import pytest
from pydantic_ai.messages import ModelResponse, TextPart
from pydantic_ai.models.function import AgentInfo, FunctionModel
from pydantic_ai.models.test import TestModel as StubModel

import llm.base

ANALYSIS = {
    "time_complexity": "O(n)",
    "space_complexity": "O(n)",
    "code_quality": "Good",
    "strengths": ["single pass"],
    "weaknesses": [],
    "optimization_suggestions": ["none needed"],
    "best_practices": ["descriptive names"],
    "alternative_approaches": ["sort + two pointers"],
    "performance_score": 85,
    "readability_score": 90,
    "maintainability_score": 80,
}

RECOMMENDATIONS = {
    "recommendations": [
        {"category": "Graph", "difficulty": "Medium", "reason": "No graph problems yet",
         "priority": "High", "estimated_time": 40},
        {"category": "Dynamic Programming", "difficulty": "Easy", "reason": "Build intuition",
         "priority": "Medium", "estimated_time": 25},
    ]
}

PLAN = {
    "estimated_total_time": 90,
    "difficulty_distribution": {"easy": 1, "medium": 2, "hard": 0},
    "focus_areas": ["Graph", "Array"],
    "problems": [
        {"category": "Graph", "difficulty": "Medium", "reason": "BFS practice", "estimated_time": 30},
    ],
}

INSIGHTS = {
    "overall_progress": {
        "completion_rate": 50.0,
        "average_attempts": 1.5,
        "strongest_category": "Array",
        "weakest_category": "Graph",
        "improvement_trend": "Improving",
    },
    "study_plan": {
        "daily_goal": 2,
        "weekly_goal": 10,
        "focus_areas": ["Graph"],
        "recommended_difficulty": "Medium",
    },
}


def use_model(output):
    """Patch the configured model with one that returns the given output"""
    return patch.object(llm.base, "get_model", return_value=StubModel(custom_output_args=output))


def plain_text_model(messages, info: AgentInfo) -> ModelResponse:
    return ModelResponse(parts=[TextPart("Sure! Here is my analysis in prose.")])


class TestCodeAnalysis:
    """Test POST /api/ai/problems/{id}/analyze"""

    def test_analysis_is_returned_and_stored(self, client, auth_headers, make_problem):
        problem = make_problem(solution="def two_sum(): ...", language="python")

        with use_model(ANALYSIS):
            response = client.post(f"/api/ai/problems/{problem['id']}/analyze", headers=auth_headers)

        assert response.status_code == 200
        body = response.json()
        assert body["analysis"]["code_quality"] == "Good"
        assert body["problem_id"] == problem["id"]

        stored = client.get(f"/api/problems/{problem['id']}/analyses", headers=auth_headers).json()
        assert len(stored) == 1
        assert json.loads(stored[0]["analysis"])["time_complexity"] == "O(n)"

    def test_missing_problem(self, client, auth_headers):
        with use_model(ANALYSIS):
            response = client.post("/api/ai/problems/999/analyze", headers=auth_headers)
        assert response.status_code == 404

    def test_unparseable_response(self, client, auth_headers, make_problem):
        problem = make_problem()
        with patch.object(llm.base, "get_model", return_value=FunctionModel(plain_text_model)):
            response = client.post(f"/api/ai/problems/{problem['id']}/analyze", headers=auth_headers)

        assert response.status_code == 502
        assert response.json()["detail"] == "AI response was not in valid JSON format. Please try again."
        stored = client.get(f"/api/problems/{problem['id']}/analyses", headers=auth_headers).json()
        assert stored == []

    def test_not_configured(self, client, auth_headers, make_problem, monkeypatch):
        problem = make_problem()
        monkeypatch.delenv("OPENAI_API_KEY", raising=False)
        monkeypatch.delenv("LLM_PROVIDER", raising=False)
        llm.base.get_model.cache_clear()
        try:
            response = client.post(f"/api/ai/problems/{problem['id']}/analyze", headers=auth_headers)
        finally:
            llm.base.get_model.cache_clear()
        assert response.status_code == 503
        assert response.json()["detail"] == "AI assistant is not configured"


class TestRecommendations:
    """Test /api/ai/recommendations"""

    def test_generate_replaces_previous_set(self, client, auth_headers, make_problem):
        make_problem(status="Completed")

        with use_model(RECOMMENDATIONS):
            first = client.post("/api/ai/recommendations", headers=auth_headers)
            second = client.post("/api/ai/recommendations", headers=auth_headers)

        assert first.status_code == 200
        assert second.status_code == 200
        stored = client.get("/api/ai/recommendations", headers=auth_headers).json()
        assert len(stored) == 2
        assert {r["category"] for r in stored} == {"Graph", "Dynamic Programming"}

    def test_filter_by_category(self, client, auth_headers):
        with use_model(RECOMMENDATIONS):
            client.post("/api/ai/recommendations", headers=auth_headers)

        stored = client.get("/api/ai/recommendations", params={"category": "Graph"}, headers=auth_headers).json()
        assert [r["priority"] for r in stored] == ["High"]


class TestDailyPlan:
    """Test /api/ai/daily-plan"""

    def test_no_plan_today(self, client, auth_headers):
        response = client.get("/api/ai/daily-plan/today", headers=auth_headers)
        assert response.status_code == 404

    def test_create_defaults_to_today(self, client, auth_headers):
        with use_model(PLAN):
            response = client.post("/api/ai/daily-plan", headers=auth_headers)

        assert response.status_code == 201
        body = response.json()
        assert body["plan_date"] == date.today().isoformat()
        assert body["status"] == "Pending"
        assert body["plan"]["focus_areas"] == ["Graph", "Array"]

        today = client.get("/api/ai/daily-plan/today", headers=auth_headers)
        assert today.status_code == 200
        assert today.json()["id"] == body["id"]

    def test_create_for_given_date(self, client, auth_headers):
        with use_model(PLAN):
            response = client.post("/api/ai/daily-plan", json={"plan_date": "2026-01-05"}, headers=auth_headers)
        assert response.json()["plan_date"] == "2026-01-05"

    def test_update_status_and_focus(self, client, auth_headers):
        with use_model(PLAN):
            plan = client.post("/api/ai/daily-plan", headers=auth_headers).json()

        response = client.patch(
            f"/api/ai/daily-plan/{plan['id']}",
            json={"status": "Completed", "focus_areas": ["Trees"]},
            headers=auth_headers,
        )
        assert response.status_code == 200
        body = response.json()
        assert body["status"] == "Completed"
        assert body["plan"]["focus_areas"] == ["Trees"]
        assert body["plan"]["estimated_total_time"] == 90

    def test_update_invalid_status(self, client, auth_headers):
        response = client.patch("/api/ai/daily-plan/1", json={"status": "Abandoned"}, headers=auth_headers)
        assert response.status_code == 422

    def test_update_foreign_plan(self, client, auth_headers, other_auth_headers):
        with use_model(PLAN):
            plan = client.post("/api/ai/daily-plan", headers=auth_headers).json()
        response = client.patch(
            f"/api/ai/daily-plan/{plan['id']}", json={"status": "Skipped"}, headers=other_auth_headers
        )
        assert response.status_code == 404


class TestInsights:
    """Test POST /api/ai/insights"""

    def test_insights(self, client, auth_headers, make_problem):
        make_problem(status="Completed", attempts=2)
        with use_model(INSIGHTS):
            response = client.post("/api/ai/insights", headers=auth_headers)
        assert response.status_code == 200
        assert response.json()["study_plan"]["recommended_difficulty"] == "Medium"


class TestModelSelection:
    """Test provider resolution in llm.base.get_model"""

    @pytest.fixture(autouse=True)
    def clear_cache(self):
        llm.base.get_model.cache_clear()
        yield
        llm.base.get_model.cache_clear()

    def test_openai_default(self, monkeypatch):
        monkeypatch.delenv("LLM_PROVIDER", raising=False)
        monkeypatch.delenv("LLM_MODEL", raising=False)
        monkeypatch.setenv("OPENAI_API_KEY", "sk-test")
        model = llm.base.get_model()
        assert model.model_name == "gpt-4.1"

    def test_google_requires_key(self, monkeypatch):
        monkeypatch.setenv("LLM_PROVIDER", "google")
        monkeypatch.delenv("GEMINI_API_KEY", raising=False)
        with pytest.raises(llm.base.LLMNotConfiguredError):
            llm.base.get_model()

    def test_unknown_provider(self, monkeypatch):
        monkeypatch.setenv("LLM_PROVIDER", "carrier-pigeon")
        with pytest.raises(llm.base.LLMNotConfiguredError):
            llm.base.get_model()
