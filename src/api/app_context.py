from dotenv import load_dotenv

load_dotenv()

from llm.base import AgentClient

# prompts
from data.prompts.ai_assistant_prompts import ASSISTANT_SYSTEM_PROMPT

# models
from models.ai_models import CodeAnalysis, RecommendationSet, DailyPracticePlan, AIInsights

# ====== AGENTS ======
# The model is supplied per run by llm.base.run_agent so a missing key only fails AI requests.
code_analysis_agent = AgentClient(
    system_prompt=ASSISTANT_SYSTEM_PROMPT, tools=[]
).create_agent(result_type=CodeAnalysis)

recommendation_agent = AgentClient(
    system_prompt=ASSISTANT_SYSTEM_PROMPT, tools=[]
).create_agent(result_type=RecommendationSet)

daily_plan_agent = AgentClient(
    system_prompt=ASSISTANT_SYSTEM_PROMPT, tools=[]
).create_agent(result_type=DailyPracticePlan)

insights_agent = AgentClient(
    system_prompt=ASSISTANT_SYSTEM_PROMPT, tools=[]
).create_agent(result_type=AIInsights)
