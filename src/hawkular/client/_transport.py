"""HTTP transport and error translation for the Hawkular client."""

from __future__ import annotations

import json
from collections.abc import Mapping
from dataclasses import dataclass, field
from http import HTTPStatus
from typing import TYPE_CHECKING, Any

from pydantic import ValidationError
from requests.structures import CaseInsensitiveDict

from hawkular.client._endpoints import build_url
from hawkular.client._modifiers import RequestSpec
from hawkular.config import Parameters
from hawkular.exceptions import DecodingError, HawkularClientError
from hawkular.logger import logger
from hawkular.models.record import ErrorEnvelope

if TYPE_CHECKING:
    import requests

# Status codes accepted as success, per method
_SUCCESS_CODES: dict[str, tuple[int, ...]] = {
    "GET": (HTTPStatus.OK, HTTPStatus.NO_CONTENT),
    "POST": (HTTPStatus.OK, HTTPStatus.CREATED),
    "PUT": (HTTPStatus.OK,),
    "DELETE": (HTTPStatus.OK,),
}


@dataclass(frozen=True)
class Reply:
    """A fully read HTTP response."""

    status_code: int
    body: bytes = b""
    headers: Mapping[str, str] = field(default_factory=dict)

    @property
    def is_empty(self) -> bool:
        return self.status_code == HTTPStatus.NO_CONTENT or not self.body.strip()

    def json(self) -> Any:
        """Decode the body as JSON.

        Returns:
            Decoded JSON, or None when the reply carries no content

        Raises:
            DecodingError: If the body is not valid JSON
        """
        if self.is_empty:
            return None
        try:
            return json.loads(self.body)
        except ValueError as e:
            raise DecodingError(f"Response body is not valid JSON: {e}") from e


def parse_error_response(reply: Reply) -> HawkularClientError:
    """Translate a failed reply into a HawkularClientError.

    The message comes from the ``errorMsg`` envelope. When the body cannot be
    parsed as one, the parse failure becomes the message; the status code is
    kept in both cases.
    """
    try:
        details = ErrorEnvelope.model_validate_json(reply.body)
    except ValidationError as e:
        return HawkularClientError(reply.status_code, f"Reply could not be parsed: {e}")
    return HawkularClientError(reply.status_code, details.error_msg)


class Transport:
    """Issues requests through an injected ``requests.Session``.

    The session is used read-only and shared by every call. Responses are
    always closed before returning. Nothing is retried; exceptions raised by
    the session (connection errors, timeouts) propagate unchanged.
    """

    def __init__(self, session: requests.Session, parameters: Parameters) -> None:
        """Initialize transport.

        Args:
            session: HTTP session performing the requests
            parameters: Connection parameters (base URL, token, TLS, timeout)
        """
        self.session = session
        self.parameters = parameters

    def headers(self) -> dict[str, str]:
        hdrs = {"Content-Type": "application/json", "Accept": "application/json"}
        if self.parameters.token:
            hdrs["Authorization"] = f"Bearer {self.parameters.token}"
        return hdrs

    def url_for(self, spec: RequestSpec) -> str:
        return build_url(
            self.parameters.base_url,
            spec.tenant or self.parameters.tenant,
            spec.endpoints,
            spec.params,
        )

    def send(self, spec: RequestSpec) -> Reply:
        """Issue the request described by spec and read the whole response.

        No status policy is applied here, see ``execute``.

        Raises:
            requests.RequestException: On transport failures
        """
        target = self.url_for(spec)
        kwargs: dict[str, Any] = {
            "headers": self.headers(),
            "verify": self.parameters.verify_tls,
            "timeout": self.parameters.timeout,
        }
        if spec.body is not None:
            kwargs["json"] = spec.body

        logger.debug(f"{spec.method} {target}")
        response = self.session.request(spec.method, target, **kwargs)
        try:
            reply = Reply(
                status_code=response.status_code,
                body=response.content or b"",
                headers=CaseInsensitiveDict(response.headers),
            )
        finally:
            response.close()
        logger.debug(f"{spec.method} {target} -> {reply.status_code}")
        return reply

    def execute(self, spec: RequestSpec) -> Reply:
        """Send the request and enforce the success policy of its method.

        GET succeeds on 200 and 204, POST on 200 and 201, PUT and DELETE on 200 only.

        Raises:
            HawkularClientError: For any other status code
            requests.RequestException: On transport failures
        """
        reply = self.send(spec)
        if reply.status_code not in _SUCCESS_CODES.get(spec.method, (HTTPStatus.OK,)):
            raise parse_error_response(reply)
        return reply
