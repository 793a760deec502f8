"""Warning extraction from the verifier's event log."""

from collections.abc import Iterable

from vptestbed.verifier.events import (
    AttestationStatusCheckFailed,
    FailedToRetrievePresentationDefinition,
    FailedToRetrieveRequestObject,
    PresentationEvent,
    PresentationExpired,
    VerifierFailedToGetWalletResponse,
    WalletFailedToPostResponse,
)

PRESENTATION_EXPIRED_WARNING = "Presentation expired"

_CAUSE_BEARING = (
    FailedToRetrieveRequestObject,
    FailedToRetrievePresentationDefinition,
    WalletFailedToPostResponse,
    VerifierFailedToGetWalletResponse,
    AttestationStatusCheckFailed,
)


def warning_text(event: PresentationEvent) -> str | None:
    """Return the warning an event contributes, or None if it is not a warning."""
    if isinstance(event, _CAUSE_BEARING):
        return event.cause
    if isinstance(event, PresentationExpired):
        return PRESENTATION_EXPIRED_WARNING
    return None


def extract_warnings(events: Iterable[PresentationEvent]) -> list[str]:
    """Collect distinct warning texts in order of first occurrence."""
    warnings: list[str] = []
    for event in events:
        text = warning_text(event)
        if text is not None and text not in warnings:
            warnings.append(text)
    return warnings
