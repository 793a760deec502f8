"""Validate-call envelope shared by the verifier and issuer services."""

from pydantic import BaseModel, Field

from vptestbed.report.models import TestReport


class InputError(ValueError):
    """The validate call could not be evaluated from the inputs it carried."""


class MissingInputError(InputError):
    pass


class LogFormatError(InputError):
    pass


class ValidateRequest(BaseModel):
    session_id: str | None = None
    inputs: dict[str, str] = Field(default_factory=dict)


class ValidationResponse(BaseModel):
    report: TestReport


def get_required_string(inputs: dict[str, str], name: str) -> str:
    """Return the named input, raising MissingInputError if it was not supplied."""
    value = inputs.get(name)
    if value is None:
        raise MissingInputError(f"No input named '{name}' was found.")
    return value


def get_optional_string(inputs: dict[str, str], name: str) -> str | None:
    return inputs.get(name)
