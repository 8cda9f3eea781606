from pydantic_ai import Agent
from pydantic_ai.exceptions import UnexpectedModelBehavior
from pydantic_ai.models import Model
from pydantic_ai.models.google import GoogleModel
from pydantic_ai.models.openai import OpenAIChatModel
from pydantic_ai.providers.google import GoogleProvider
from pydantic_ai.providers.openai import OpenAIProvider
from pydantic_ai.settings import ModelSettings
from typing import List, Callable, Optional, Type, TypeVar
from functools import lru_cache
from loguru import logger
import os

from utils.config_loader import setting

T = TypeVar('T')

DEFAULT_MODELS = {
    "openai": "gpt-4.1",
    "google": "gemini-2.0-flash",
}

model_settings = ModelSettings(temperature=0.7, max_tokens=2000)


class LLMNotConfiguredError(RuntimeError):
    """No API key for the configured LLM provider"""


class AIResponseError(RuntimeError):
    """The LLM call failed or its response could not be parsed"""


@lru_cache(maxsize=1)
def get_model() -> Model:
    """Build the chat model for the configured provider on first use."""
    provider_name = str(setting("LLM_PROVIDER", ["llm", "provider"], "openai")).lower()
    if provider_name not in DEFAULT_MODELS:
        raise LLMNotConfiguredError(f"Unsupported LLM provider '{provider_name}'")
    model_name = setting("LLM_MODEL", ["llm", "model"], DEFAULT_MODELS[provider_name])

    if provider_name == "google":
        api_key = os.getenv("GEMINI_API_KEY")
        if not api_key:
            raise LLMNotConfiguredError("AI assistant is not configured (GEMINI_API_KEY missing)")
        return GoogleModel(model_name, provider=GoogleProvider(api_key=api_key))

    api_key = os.getenv("OPENAI_API_KEY")
    if not api_key:
        raise LLMNotConfiguredError("AI assistant is not configured (OPENAI_API_KEY missing)")
    return OpenAIChatModel(model_name, provider=OpenAIProvider(api_key=api_key))


class AgentClient:
    def __init__(
        self, system_prompt: str, tools: List[Callable], model: Optional[Model] = None
    ):
        self.model = model
        self.system_prompt = system_prompt
        self.tools = tools

    def create_agent(self, result_type: Optional[Type[T]] = None):
        """Creates and returns a PydanticAI Agent instance."""
        if result_type:
            agent: Agent[None, T] = Agent(
                model=self.model,
                system_prompt=self.system_prompt,
                tools=self.tools,
                output_type=result_type,  # type: ignore
                model_settings=model_settings,
            )
            return agent
        return Agent(
            model=self.model,
            system_prompt=self.system_prompt,
            tools=self.tools,
            model_settings=model_settings,
        )


async def run_agent(agent: Agent, prompt: str):
    """
    Run an agent once and return its structured output

    Raises:
        LLMNotConfiguredError: No API key for the provider
        AIResponseError: The call failed or the response did not match the output type
    """
    model = get_model()
    try:
        result = await agent.run(prompt, model=model)
    except UnexpectedModelBehavior as e:
        logger.error(f"Failed to parse AI response: {e}")
        raise AIResponseError("AI response was not in valid JSON format. Please try again.") from e
    except Exception as e:
        logger.exception("AI request failed")
        raise AIResponseError(f"AI request failed: {e}") from e
    return result.output
