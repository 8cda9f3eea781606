# ============= SYSTEM PROMPT =============

ASSISTANT_SYSTEM_PROMPT = """You are a helpful AI assistant specialized in analyzing LeetCode problems and providing coding advice.

Always answer with the structured result requested. Base every judgement on the data you are given;
when information is missing (for example no code was provided), say so in the relevant field instead of guessing.
"""

# ============= CODE ANALYSIS =============

CODE_ANALYSIS_PROMPT = """Analyze this LeetCode problem solution:

Problem: {title}
Category: {category}
Difficulty: {difficulty}
Status: {status}
Language: {language}
Code: {solution}
Notes: {notes}

Please provide a detailed analysis including:
1. Code quality assessment (Excellent/Good/Fair/Poor)
2. Time complexity analysis
3. Space complexity analysis
4. Strengths of the solution
5. Areas for improvement
6. Optimization suggestions
7. Best practices to adopt
8. Alternative approaches
9. Performance, readability and maintainability scores from 0 to 100
"""

# ============= RECOMMENDATIONS =============

RECOMMENDATION_PROMPT = """Based on the user's LeetCode progress, generate personalized practice recommendations.

Completed Problems: {completed}
In Progress Problems: {in_progress}
Total Problems: {total}

Completed problem categories: {completed_categories}
Completed problem difficulties: {completed_difficulties}

Please generate 5 personalized practice recommendations. Consider:
1. Weak areas based on completed problems
2. Difficulty progression
3. Category balance
4. Common interview topics

Each recommendation needs a category, a difficulty (Easy/Medium/Hard), the reason,
a priority (High/Medium/Low) and an estimated time in minutes.
"""

# ============= DAILY PLAN =============

DAILY_PLAN_PROMPT = """Create a daily practice plan for LeetCode problems. The plan should include:
1. 3-5 problems of varying difficulty
2. Focus on different categories
3. Estimated time for each problem
4. Learning objectives

Date: {plan_date}
Categories practiced so far: {categories}
Completed so far: {completed} of {total}

Return the total estimated time in minutes, the difficulty distribution (easy/medium/hard counts),
the focus areas and the planned problems (category, difficulty, reason, estimated time).
"""

# ============= INSIGHTS =============

INSIGHTS_PROMPT = """Analyze the user's LeetCode progress and provide insights.

Total Problems: {total}
Completed: {completed}
In Progress: {in_progress}
Failed: {failed}
Average attempts: {average_attempts}

Categories: {categories}
Difficulties: {difficulties}

Provide:
- overall progress: completion rate (percent), average attempts, strongest category,
  weakest category and improvement trend (Improving/Stable/Declining)
- study plan: daily goal, weekly goal, focus areas and recommended difficulty
"""
