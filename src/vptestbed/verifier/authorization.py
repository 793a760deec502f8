"""Authorization request URIs that start a presentation in the wallet."""

from enum import Enum
from urllib.parse import urlencode

from pydantic import BaseModel, ConfigDict, Field, JsonValue, ValidationError

from vptestbed.testbed.request import LogFormatError

DEFAULT_SCHEME = "openid4vp"


class RequestUriMethod(str, Enum):
    GET = "get"
    POST = "post"


class AuthorizationData(BaseModel):
    """Authorization request details returned when the verifier initializes a transaction."""

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="ignore")

    transaction_id: str | None = None
    client_id: str
    request_object: str | None = Field(default=None, alias="request")
    request_uri: str | None = None
    request_uri_method: RequestUriMethod | None = None


def authorization_data_from_response(response: JsonValue) -> AuthorizationData:
    """Read the authorization data out of a verifier's init-transaction response."""
    try:
        return AuthorizationData.model_validate(response)
    except ValidationError as e:
        raise LogFormatError(f"Invalid authorization data: {e}") from e


def create_authorization_request_uri(scheme: str, data: AuthorizationData) -> str:
    """Build ``<scheme>://?client_id=...&request=...&request_uri=...&request_uri_method=...``.

    Parameters appear in that order, absent ones are left out, and values are
    form-encoded.
    """
    if not scheme:
        raise ValueError("scheme must not be empty")

    params = {"client_id": data.client_id}
    if data.request_object is not None:
        params["request"] = data.request_object
    if data.request_uri is not None:
        params["request_uri"] = data.request_uri
    if data.request_uri_method is not None:
        params["request_uri_method"] = data.request_uri_method.value

    return f"{scheme}://?{urlencode(params)}"
