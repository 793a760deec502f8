"""Pydantic models for test-bed validation reports."""

from enum import Enum

from pydantic import BaseModel, ConfigDict


class TestResultType(str, Enum):
    __test__ = False

    SUCCESS = "SUCCESS"
    FAILURE = "FAILURE"


class EmbeddingMethod(str, Enum):
    STRING = "STRING"


class AnyContent(BaseModel):
    """A named, typed piece of report context."""

    model_config = ConfigDict(frozen=True)

    name: str
    mime_type: str
    encoding: str = "UTF-8"
    embedding_method: EmbeddingMethod = EmbeddingMethod.STRING
    value: str


class ValidationCounters(BaseModel):
    model_config = ConfigDict(frozen=True)

    error_count: int = 0
    warning_count: int = 0


class TestReport(BaseModel):
    __test__ = False

    model_config = ConfigDict(frozen=True)

    result: TestResultType
    counters: ValidationCounters = ValidationCounters()
    items: tuple[AnyContent, ...] = ()
