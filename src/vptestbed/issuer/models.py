"""Pydantic models for issuer credential-offer logs."""

from pydantic import BaseModel, ConfigDict, Field


class CredentialOfferLogsTO(BaseModel):
    model_config = ConfigDict(extra="ignore")

    successful: bool = False
    count: int = 0
    logs: list[str] = Field(default_factory=list)


class IssuerLogLine(BaseModel):
    timestamp: str
    logger: str
    level: str
    message: str
    full_log: str


class LogStats(BaseModel):
    error_count: int = 0
    warn_count: int = 0
    info_count: int = 0
    total_count: int = 0


class IssuerLogSummary(BaseModel):
    logs: list[IssuerLogLine]
    log_stats: LogStats
