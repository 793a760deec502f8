"""Pydantic models for the verifier's presentation event log.

Each event kind is one model whose ``event`` field is a literal wire string.
Those literals are the only place the discriminators are spelled out;
``EVENT_TYPES`` is derived from them.

Models are frozen, but the freeze is shallow: ``JsonValue`` payloads are the
plain dicts and lists pydantic decoded, and nothing in vptestbed mutates them.
Each parse builds fresh payloads, so no state is shared between calls.
"""

from typing import Annotated, Literal, Union, get_args

from pydantic import BaseModel, ConfigDict, Field, JsonValue, ValidationError, model_validator

from vptestbed.testbed.request import LogFormatError
from vptestbed.verifier.json_values import is_finite_json


class _Event(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="ignore")

    timestamp: str
    actor: str

    @model_validator(mode="after")
    def reject_non_finite_numbers(self):
        # pydantic accepts NaN and Infinity literals in JsonValue; JSON does not
        for name in type(self).model_fields:
            if not is_finite_json(getattr(self, name)):
                raise ValueError(f"non-finite number in '{name}'")
        return self


class TransactionInitialized(_Event):
    event: Literal["Transaction initialized"]
    response: JsonValue


class RequestObjectRetrieved(_Event):
    event: Literal["Request object retrieved"]
    jwt: str


class FailedToRetrieveRequestObject(_Event):
    event: Literal["FailedToRetrieve request"]
    cause: str


class FailedToRetrievePresentationDefinition(_Event):
    event: Literal["Failed to retrieve presentation definition"]
    cause: str


class WalletResponsePosted(_Event):
    event: Literal["Wallet response posted"]
    wallet_response: JsonValue
    verifier_endpoint_response: JsonValue = Field(default=None, alias="verifier_response")


class WalletFailedToPostResponse(_Event):
    event: Literal["Wallet failed to post response"]
    cause: str


class VerifierGotWalletResponse(_Event):
    event: Literal["Verifier got wallet response"]
    wallet_response: JsonValue


class VerifierFailedToGetWalletResponse(_Event):
    event: Literal["Verifier failed to get wallet"]
    cause: str


class PresentationExpired(_Event):
    event: Literal["Presentation expired"]


class AttestationStatusCheckSuccessful(_Event):
    event: Literal["Attestation status check succeeded"]
    status_reference: JsonValue


class AttestationStatusCheckFailed(_Event):
    event: Literal["Attestation status check failed"]
    status_reference: JsonValue = None
    cause: str | None = None


_EVENT_MODELS = (
    TransactionInitialized,
    RequestObjectRetrieved,
    FailedToRetrieveRequestObject,
    FailedToRetrievePresentationDefinition,
    WalletResponsePosted,
    WalletFailedToPostResponse,
    VerifierGotWalletResponse,
    VerifierFailedToGetWalletResponse,
    PresentationExpired,
    AttestationStatusCheckSuccessful,
    AttestationStatusCheckFailed,
)

PresentationEvent = Annotated[Union[_EVENT_MODELS], Field(discriminator="event")]


def event_kind(model: type[_Event]) -> str:
    """Return the wire discriminator of an event model."""
    return get_args(model.model_fields["event"].annotation)[0]


EVENT_TYPES: dict[str, type[_Event]] = {event_kind(model): model for model in _EVENT_MODELS}


class PresentationEventsTO(BaseModel):
    """One transaction's event log as reported by the verifier."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    transaction_id: str
    last_updated: int
    events: tuple[PresentationEvent, ...]


def parse_presentation_events(text: str) -> PresentationEventsTO:
    """Decode the verifier's JSON log text into a typed envelope.

    Raises LogFormatError on malformed JSON, unknown event kinds or missing fields.
    """
    try:
        return PresentationEventsTO.model_validate_json(text)
    except ValidationError as e:
        raise LogFormatError(f"Failed to load verifier's logs: {e}") from e
