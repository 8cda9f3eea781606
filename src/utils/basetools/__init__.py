"""
Base tools for talking to external services.

- judge_tools: run code on a hosted Judge0 instance, with a mock fallback
- leetcode_tools: fetch question details from LeetCode's GraphQL endpoint

Usage:
    from utils.basetools import execute_code, fetch_question

    result = execute_code("python", 'print("hi")')
    question = fetch_question("two-sum")
"""

from .judge_tools import (
    CODE_TEMPLATES,
    LANGUAGE_IDS,
    JudgeError,
    execute_code,
    is_supported_language,
    mock_execute,
)

from .leetcode_tools import (
    LeetCodeFetchError,
    fetch_question,
)
