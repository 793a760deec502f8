"""Assemble test-bed reports from validation results."""

import json

from pydantic import BaseModel

from vptestbed.report.models import AnyContent, TestReport, TestResultType, ValidationCounters

JSON_MIME = "application/json"
TEXT_MIME = "text/plain"

LOGS_ITEM = "Verifier's Logs"
ERRORS_ITEM = "Non-recoverable errors"
WARNINGS_ITEM = "Validation warnings"


def to_json_content(name: str, data: BaseModel | dict | str) -> AnyContent:
    """Wrap a model or plain JSON data as an application/json report item."""
    if isinstance(data, BaseModel):
        value = data.model_dump_json(by_alias=True)
    else:
        value = json.dumps(data, ensure_ascii=False)
    return AnyContent(name=name, mime_type=JSON_MIME, value=value)


def build_report(
    logs: BaseModel,
    warnings: list[str],
    non_recoverable_error: str | None,
) -> TestReport:
    """Build the verifier report in one step.

    Items are ordered logs, error (if any), warnings (if any). The warning count
    is reported whether or not the run failed.
    """
    items = [to_json_content(LOGS_ITEM, logs)]
    if non_recoverable_error is not None:
        items.append(to_json_content(ERRORS_ITEM, non_recoverable_error))
    if warnings:
        items.append(AnyContent(name=WARNINGS_ITEM, mime_type=TEXT_MIME, value="\n".join(warnings)))

    return TestReport(
        result=TestResultType.FAILURE if non_recoverable_error is not None else TestResultType.SUCCESS,
        counters=ValidationCounters(
            error_count=1 if non_recoverable_error is not None else 0,
            warning_count=len(warnings),
        ),
        items=tuple(items),
    )
