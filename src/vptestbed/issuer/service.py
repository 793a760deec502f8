"""Issuer validation service: credential-offer logs in, report out."""

import logging
import re

from pydantic import ValidationError

from vptestbed.issuer.models import CredentialOfferLogsTO, IssuerLogLine, IssuerLogSummary, LogStats
from vptestbed.report.builder import to_json_content
from vptestbed.report.models import TestReport, TestResultType
from vptestbed.testbed.request import (
    LogFormatError,
    ValidateRequest,
    ValidationResponse,
    get_required_string,
)

logger = logging.getLogger(__name__)

ISSUER_LOGS_ITEM = "Issuer's Logs"

LOG_LINE = re.compile(
    r"^(\d{4}-\d{2}-\d{2} \d{2}:\d{2}:\d{2},\d{3})\s+([\w.]+)\s+"
    r"(INFO|WARN|ERROR|DEBUG|TRACE)\s+(?:,\s*)?(.*)$"
)


def parse_log_line(line: str) -> IssuerLogLine | None:
    """Split a ``<timestamp> <logger> <LEVEL> <message>`` line, or None if it doesn't match."""
    m = LOG_LINE.match(line)
    if m is None:
        return None
    return IssuerLogLine(
        timestamp=m.group(1),
        logger=m.group(2),
        level=m.group(3),
        message=m.group(4),
        full_log=line,
    )


def summarize_logs(offer_logs: CredentialOfferLogsTO) -> IssuerLogSummary:
    """Parse every log line and count them by level.

    Lines in an unexpected format are skipped; ``total_count`` echoes the
    count the issuer reported.
    """
    lines: list[IssuerLogLine] = []
    counts = {"ERROR": 0, "WARN": 0, "INFO": 0}

    for raw in offer_logs.logs:
        parsed = parse_log_line(raw)
        if parsed is None:
            logger.warning(
                "Failed to retrieve required information (timestamp, logger name, level) from log %s",
                raw,
            )
            continue
        if parsed.level in counts:
            counts[parsed.level] += 1
        lines.append(parsed)

    return IssuerLogSummary(
        logs=lines,
        log_stats=LogStats(
            error_count=counts["ERROR"],
            warn_count=counts["WARN"],
            info_count=counts["INFO"],
            total_count=offer_logs.count,
        ),
    )


def validate_issuer_logs(text: str) -> TestReport:
    """Report SUCCESS if the issuer flagged its credential offer as successful."""
    try:
        offer_logs = CredentialOfferLogsTO.model_validate_json(text)
    except ValidationError as e:
        raise LogFormatError(f"Failed to load issuer's logs: {e}") from e

    summary = summarize_logs(offer_logs)
    return TestReport(
        result=TestResultType.SUCCESS if offer_logs.successful else TestResultType.FAILURE,
        items=(to_json_content(ISSUER_LOGS_ITEM, summary),),
    )


class IssuerValidationService:
    """Handle validate calls carrying issuer logs in the ``text`` input."""

    def validate(self, request: ValidateRequest) -> ValidationResponse:
        logger.info("Received 'validate' command from test bed for session [%s]", request.session_id)

        text = get_required_string(request.inputs, "text")
        report = validate_issuer_logs(text)
        logger.info("Issuer validation report created: result=%s", report.result.value)
        return ValidationResponse(report=report)
