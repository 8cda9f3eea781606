"""
LeetCode Tools
Fetch question details from the public LeetCode GraphQL endpoint
"""
import requests
from typing import Dict, Any
from loguru import logger

from utils.config_loader import setting

DEFAULT_GRAPHQL_URL = "https://leetcode.com/graphql"

QUESTION_DETAIL_QUERY = """query getQuestionDetail($titleSlug: String!) {
  question(titleSlug: $titleSlug) {
    title
    difficulty
    content
    topicTags { name }
  }
}"""


class LeetCodeFetchError(Exception):
    """The GraphQL endpoint could not be reached or returned garbage"""


def fetch_question(slug: str) -> Dict[str, Any]:
    """
    Fetch a question by its title slug

    Args:
        slug: LeetCode title slug, e.g. "two-sum"

    Returns:
        The raw `question` object, or an empty dict when LeetCode has none

    Raises:
        LeetCodeFetchError: The request failed or the body was not JSON
    """
    url = setting("LEETCODE_GRAPHQL_URL", ["leetcode", "graphql_url"], DEFAULT_GRAPHQL_URL)
    payload = {"query": QUESTION_DETAIL_QUERY, "variables": {"titleSlug": slug}}

    try:
        response = requests.post(
            url,
            json=payload,
            headers={"Content-Type": "application/json"},
            timeout=30,
        )
        response.raise_for_status()
        data = response.json()
    except requests.exceptions.RequestException as e:
        logger.error(f"LeetCode request for '{slug}' failed: {e}")
        raise LeetCodeFetchError(str(e)) from e
    except ValueError as e:
        logger.error(f"LeetCode returned a non-JSON body for '{slug}'")
        raise LeetCodeFetchError("Invalid response from LeetCode") from e

    if not isinstance(data, dict):
        logger.error(f"LeetCode returned an unexpected body for '{slug}'")
        raise LeetCodeFetchError("Invalid response from LeetCode")
    payload_data = data.get("data")
    if not isinstance(payload_data, dict):
        return {}
    question = payload_data.get("question")
    return question if isinstance(question, dict) else {}
