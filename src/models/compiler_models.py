from pydantic import BaseModel, field_validator
from typing import Optional


class CodeTemplate(BaseModel):
    language: str
    name: str
    template: str


class CodeExecutionRequest(BaseModel):
    language: str
    source_code: str
    stdin: str = ""

    @field_validator('language')
    @classmethod
    def normalize_language(cls, v):
        return v.strip().lower()


class CodeExecutionResult(BaseModel):
    success: bool
    output: str = ""
    error: Optional[str] = None
    execution_time: Optional[float] = None  # ms
    memory_usage: Optional[float] = None  # MB
    mocked: bool = False
