"""Verifier validation service: presentation logs in, conformance report out."""

import logging
from collections.abc import Callable

from vptestbed.report.builder import build_report
from vptestbed.report.models import TestReport
from vptestbed.testbed.request import (
    ValidateRequest,
    ValidationResponse,
    get_optional_string,
    get_required_string,
)
from vptestbed.verifier.events import parse_presentation_events
from vptestbed.verifier.outcome import evaluate_outcome
from vptestbed.verifier.warnings import extract_warnings

logger = logging.getLogger(__name__)

TEXT_INPUT = "text"
EXPECTED_EVENT_INPUT = "expectedEvent"


def validate_presentation_logs(
    text: str,
    expected_event: str | None = None,
    on_error: Callable[[str], None] | None = None,
) -> TestReport:
    """Parse a verifier event log and report whether it meets the expected scenario.

    ``on_error`` is called with the non-recoverable error when one is found.
    Raises LogFormatError if the text is not a valid event log.
    """
    logs = parse_presentation_events(text)
    warnings = extract_warnings(logs.events)
    error = evaluate_outcome(logs.events, expected_event)
    if error is not None and on_error is not None:
        on_error(error)
    return build_report(logs, warnings, error)


class VerifierValidationService:
    """Handle validate calls carrying a verifier log in the ``text`` input."""

    def __init__(self, on_error: Callable[[str], None] | None = None) -> None:
        self.on_error = on_error or self._log_error

    def validate(self, request: ValidateRequest) -> ValidationResponse:
        logger.info("Received 'validate' command from test bed for session [%s]", request.session_id)

        text = get_required_string(request.inputs, TEXT_INPUT)
        expected_event = get_optional_string(request.inputs, EXPECTED_EVENT_INPUT)

        report = validate_presentation_logs(text, expected_event, self.on_error)
        logger.info(
            "Validation report created: result=%s errors=%d warnings=%d",
            report.result.value,
            report.counters.error_count,
            report.counters.warning_count,
        )
        return ValidationResponse(report=report)

    @staticmethod
    def _log_error(error: str) -> None:
        logger.info("Non-recoverable error found: %s", error)
