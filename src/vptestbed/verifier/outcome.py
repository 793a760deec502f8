"""Scenario rules deciding whether a presentation log passes."""

import logging
from collections.abc import Sequence
from typing import TypeVar

from vptestbed.verifier.events import (
    AttestationStatusCheckFailed,
    PresentationEvent,
    VerifierGotWalletResponse,
    WalletFailedToPostResponse,
    WalletResponsePosted,
)
from vptestbed.verifier.json_values import json_equal

logger = logging.getLogger(__name__)

E = TypeVar("E")


# expectedEvent labels selecting an expected-failure rule
ATTESTATION_ERROR = "attestation_error"
CERTIFICATE_ERROR = "certificate_error"

ATTESTATION_NOT_FAILED = (
    "Attestation step should fail to post response but did anyways "
    "or/and other error occurred (ex: Presentation Timeout)"
)
WALLET_DID_NOT_FAIL = (
    "Wallet should fail to post response but did anyways "
    "or/and other error occurred (ex: Presentation Timeout)"
)
QUERIES_DO_NOT_MATCH = "Wallet query and verifier query do not match"


def first_of(events: Sequence[PresentationEvent], kind: type[E]) -> E | None:
    """Return the first event of the given type, ignoring later ones."""
    return next((e for e in events if isinstance(e, kind)), None)


def evaluate_outcome(
    events: Sequence[PresentationEvent], expected_scenario: str | None = None
) -> str | None:
    """Apply the rule for the expected scenario.

    Returns the non-recoverable error, or None when the log passes. Labels other
    than the known scenarios fall back to the default wallet/verifier match rule.
    """
    if expected_scenario == ATTESTATION_ERROR:
        if first_of(events, AttestationStatusCheckFailed) is None:
            return ATTESTATION_NOT_FAILED
        return None

    if expected_scenario == CERTIFICATE_ERROR:
        if first_of(events, WalletFailedToPostResponse) is None:
            return WALLET_DID_NOT_FAIL
        return None

    if expected_scenario is not None:
        logger.debug("Unknown expected scenario '%s', applying default rule", expected_scenario)

    verifier_got = first_of(events, VerifierGotWalletResponse)
    wallet_posted = first_of(events, WalletResponsePosted)
    if verifier_got is None or wallet_posted is None:
        return QUERIES_DO_NOT_MATCH
    if not json_equal(verifier_got.wallet_response, wallet_posted.wallet_response):
        return QUERIES_DO_NOT_MATCH
    return None
