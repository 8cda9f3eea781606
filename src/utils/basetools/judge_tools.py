"""
Judge Tools
Run solutions on a hosted Judge0 instance, with a mock executor when it is unavailable
"""
import os
import re
import time
import requests
from typing import Optional, Dict, Any
from loguru import logger

from models.compiler_models import CodeTemplate, CodeExecutionResult
from utils.config_loader import setting

DEFAULT_JUDGE0_URL = "https://judge0-ce.p.rapidapi.com"

# Judge0 language ids
LANGUAGE_IDS = {
    "javascript": 63,
    "python": 71,
    "java": 62,
    "cpp": 54,
}

STATUS_IN_QUEUE = 1
STATUS_PROCESSING = 2
STATUS_ACCEPTED = 3
PENDING_STATUSES = (STATUS_IN_QUEUE, STATUS_PROCESSING)

CODE_TEMPLATES = {
    "javascript": CodeTemplate(
        language="javascript",
        name="JavaScript",
        template="""// JavaScript code template
function solution() {
    // Your solution here
    console.log("Hello, LeetCode!");
}

// Test cases
solution();
""",
    ),
    "python": CodeTemplate(
        language="python",
        name="Python",
        template="""# Python code template
def solution():
    # Your solution here
    print("Hello, LeetCode!")

# Test cases
if __name__ == "__main__":
    solution()
""",
    ),
    "java": CodeTemplate(
        language="java",
        name="Java",
        template="""// Java code template
public class Solution {
    public static void main(String[] args) {
        // Your solution here
        System.out.println("Hello, LeetCode!");
    }
}
""",
    ),
    "cpp": CodeTemplate(
        language="cpp",
        name="C++",
        template="""// C++ code template
#include <iostream>
using namespace std;

int main() {
    // Your solution here
    cout << "Hello, LeetCode!" << endl;
    return 0;
}
""",
    ),
}

# String literal passed to each language's print call
PRINT_PATTERNS = {
    "javascript": re.compile(r"""console\.log\(\s*(["'`])(.*?)\1"""),
    "python": re.compile(r"""print\(\s*(["'])(.*?)\1"""),
    "java": re.compile(r"""System\.out\.println\(\s*(")(.*?)\1"""),
    "cpp": re.compile(r"""cout\s*<<\s*(")(.*?)\1"""),
}

MOCK_DEFAULT_OUTPUT = "Code executed successfully\n"


class JudgeError(Exception):
    """The judge could not be reached or did not finish the submission"""


def is_supported_language(language: str) -> bool:
    return language in LANGUAGE_IDS


def mock_execute(language: str, source_code: str) -> CodeExecutionResult:
    """
    Simulate a run without executing anything

    The output echoes the string literals given to the language's print call,
    one per line, or a generic success line when there are none.
    """
    pattern = PRINT_PATTERNS.get(language)
    printed = [m.group(2) for m in pattern.finditer(source_code)] if pattern else []
    output = "".join(f"{line}\n" for line in printed) if printed else MOCK_DEFAULT_OUTPUT
    return CodeExecutionResult(success=True, output=output, mocked=True)


def _headers(api_key: str) -> Dict[str, str]:
    host = setting("JUDGE0_API_HOST", ["judge", "api_host"], "judge0-ce.p.rapidapi.com")
    return {
        "Content-Type": "application/json",
        "X-RapidAPI-Key": api_key,
        "X-RapidAPI-Host": host,
    }


def _to_result(submission: Dict[str, Any]) -> CodeExecutionResult:
    status = submission.get("status") or {}
    raw_time = submission.get("time")
    raw_memory = submission.get("memory")
    execution_time = float(raw_time) * 1000 if raw_time is not None else None
    memory_usage = float(raw_memory) / 1024 if raw_memory is not None else None

    if status.get("id") == STATUS_ACCEPTED:
        return CodeExecutionResult(
            success=True,
            output=submission.get("stdout") or "",
            execution_time=execution_time,
            memory_usage=memory_usage,
        )

    error = (
        submission.get("stderr")
        or submission.get("compile_output")
        or status.get("description")
        or "Execution failed"
    )
    return CodeExecutionResult(
        success=False,
        output=submission.get("stdout") or "",
        error=error,
        execution_time=execution_time,
        memory_usage=memory_usage,
    )


def run_on_judge(language: str, source_code: str, stdin: str, api_key: str) -> CodeExecutionResult:
    """
    Submit code to Judge0 and poll until it reaches a terminal status

    Raises:
        JudgeError: A request failed or polling ran out before the run finished
    """
    base_url = setting("JUDGE0_API_URL", ["judge", "api_url"], DEFAULT_JUDGE0_URL).rstrip("/")
    max_polls = setting("JUDGE0_MAX_POLLS", ["judge", "max_polls"], 10, cast=int)
    interval = setting("JUDGE0_POLL_INTERVAL", ["judge", "poll_interval"], 1.0, cast=float)
    headers = _headers(api_key)

    payload = {
        "language_id": LANGUAGE_IDS[language],
        "source_code": source_code,
        "stdin": stdin,
    }

    try:
        response = requests.post(
            f"{base_url}/submissions",
            params={"base64_encoded": "false", "wait": "false"},
            json=payload,
            headers=headers,
            timeout=30,
        )
        response.raise_for_status()
        token = response.json().get("token")
        if not token:
            raise JudgeError("Judge did not return a submission token")

        for _ in range(max_polls):
            response = requests.get(
                f"{base_url}/submissions/{token}",
                params={"base64_encoded": "false"},
                headers=headers,
                timeout=30,
            )
            response.raise_for_status()
            submission = response.json()
            status_id = (submission.get("status") or {}).get("id")
            if status_id not in PENDING_STATUSES:
                return _to_result(submission)
            time.sleep(interval)
    except requests.exceptions.RequestException as e:
        raise JudgeError(f"Judge request failed: {e}") from e

    raise JudgeError(f"Submission {token} still pending after {max_polls} polls")


def execute_code(
    language: str, source_code: str, stdin: str = "", api_key: Optional[str] = None
) -> CodeExecutionResult:
    """
    Run code on the judge, falling back to mock execution

    The mock is used when no JUDGE0_API_KEY is configured or the judge fails.
    """
    if not is_supported_language(language):
        raise ValueError(f"Unsupported language '{language}'")

    if not api_key:
        api_key = os.getenv("JUDGE0_API_KEY")
    if not api_key:
        logger.info(f"JUDGE0_API_KEY not set, mocking {language} execution")
        return mock_execute(language, source_code)

    try:
        return run_on_judge(language, source_code, stdin, api_key)
    except JudgeError as e:
        logger.warning(f"{e}; falling back to mock execution")
        return mock_execute(language, source_code)
