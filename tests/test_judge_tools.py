"""
Unit tests for judge_tools
"""
from unittest.mock import patch, MagicMock

import pytest
import requests

from utils.basetools import judge_tools
from utils.basetools.judge_tools import JudgeError, execute_code, mock_execute, run_on_judge


def fake_response(payload):
    response = MagicMock()
    response.json.return_value = payload
    response.raise_for_status.return_value = None
    return response


@pytest.fixture
def judge_env(monkeypatch):
    monkeypatch.setenv("JUDGE0_API_URL", "https://judge.test")
    monkeypatch.setenv("JUDGE0_POLL_INTERVAL", "0")
    monkeypatch.setenv("JUDGE0_MAX_POLLS", "3")


class TestMockExecute:
    """Test mock_execute"""

    @pytest.mark.parametrize("language,code,expected", [
        ("python", 'print("Hello, LeetCode!")', "Hello, LeetCode!\n"),
        ("javascript", "console.log('a');\nconsole.log(`b`);", "a\nb\n"),
        ("java", 'System.out.println("hi");', "hi\n"),
        ("cpp", 'cout << "hey" << endl;', "hey\n"),
    ])
    def test_echoes_print_literals(self, language, code, expected):
        result = mock_execute(language, code)
        assert result.success is True
        assert result.mocked is True
        assert result.output == expected

    def test_default_output(self):
        result = mock_execute("python", "x = 1 + 1")
        assert result.output == "Code executed successfully\n"

    def test_templates_mock_cleanly(self):
        for language, template in judge_tools.CODE_TEMPLATES.items():
            assert mock_execute(language, template.template).output == "Hello, LeetCode!\n"


class TestRunOnJudge:
    """Test submit/poll against a mocked Judge0"""

    def test_accepted_after_polling(self, judge_env):
        pending = fake_response({"status": {"id": 2, "description": "Processing"}})
        done = fake_response({
            "status": {"id": 3, "description": "Accepted"},
            "stdout": "42\n", "time": "0.015", "memory": 2048,
        })
        with patch.object(judge_tools.requests, "post", return_value=fake_response({"token": "abc"})) as post, \
             patch.object(judge_tools.requests, "get", side_effect=[pending, done]) as get:
            result = run_on_judge("python", "print(42)", "", "key")

        assert result.success is True
        assert result.output == "42\n"
        assert result.execution_time == pytest.approx(15.0)
        assert result.memory_usage == pytest.approx(2.0)
        assert result.mocked is False

        assert post.call_args.args[0] == "https://judge.test/submissions"
        assert post.call_args.kwargs["json"]["language_id"] == 71
        assert post.call_args.kwargs["headers"]["X-RapidAPI-Key"] == "key"
        assert get.call_args.args[0] == "https://judge.test/submissions/abc"

    def test_compile_error(self, judge_env):
        failed = fake_response({
            "status": {"id": 6, "description": "Compilation Error"},
            "compile_output": "error: expected ';'",
        })
        with patch.object(judge_tools.requests, "post", return_value=fake_response({"token": "abc"})), \
             patch.object(judge_tools.requests, "get", return_value=failed):
            result = run_on_judge("cpp", "int main() {", "", "key")

        assert result.success is False
        assert result.error == "error: expected ';'"

    def test_status_description_when_no_output(self, judge_env):
        failed = fake_response({"status": {"id": 5, "description": "Time Limit Exceeded"}})
        with patch.object(judge_tools.requests, "post", return_value=fake_response({"token": "abc"})), \
             patch.object(judge_tools.requests, "get", return_value=failed):
            result = run_on_judge("java", "class A {}", "", "key")
        assert result.error == "Time Limit Exceeded"

    def test_polling_exhausted(self, judge_env):
        pending = fake_response({"status": {"id": 1, "description": "In Queue"}})
        with patch.object(judge_tools.requests, "post", return_value=fake_response({"token": "abc"})), \
             patch.object(judge_tools.requests, "get", return_value=pending) as get:
            with pytest.raises(JudgeError):
                run_on_judge("python", "print(1)", "", "key")
        assert get.call_count == 3

    def test_request_failure(self, judge_env):
        with patch.object(judge_tools.requests, "post", side_effect=requests.exceptions.ConnectionError("down")):
            with pytest.raises(JudgeError):
                run_on_judge("python", "print(1)", "", "key")


class TestExecuteCode:
    """Test the fallback behaviour of execute_code"""

    def test_mock_without_api_key(self, monkeypatch):
        monkeypatch.delenv("JUDGE0_API_KEY", raising=False)
        with patch.object(judge_tools.requests, "post") as post:
            result = execute_code("python", 'print("x")')
        post.assert_not_called()
        assert result.mocked is True
        assert result.output == "x\n"

    def test_falls_back_when_judge_fails(self, judge_env, monkeypatch):
        monkeypatch.setenv("JUDGE0_API_KEY", "key")
        with patch.object(judge_tools.requests, "post", side_effect=requests.exceptions.Timeout("slow")):
            result = execute_code("javascript", "console.log('ok')")
        assert result.mocked is True
        assert result.output == "ok\n"

    def test_unsupported_language(self):
        with pytest.raises(ValueError):
            execute_code("cobol", "DISPLAY 'HI'.")
