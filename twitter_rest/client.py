"""
Generic call pipeline for the Twitter REST API.

Every endpoint wrapper goes through :meth:`Client.call` (decoded result) or
:meth:`Client.call_json` (raw body). A call is built, sent through the
session's auth hook, classified, and on success decoded leniently.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, BinaryIO, Callable, Mapping, Union

import requests
from pydantic import ValidationError

from twitter_rest.config import DEFAULT_ENDPOINT, DEFAULT_TIMEOUT
from twitter_rest.decoding import decode_json, parse_json
from twitter_rest.exceptions import (
    ApiResponseError,
    ConfigurationError,
    DecodeError,
    InvalidArgumentError,
    RateLimitExceeded,
    TransportError,
)
from twitter_rest.models import ErrorReply, ErrorsReply
from twitter_rest.params import ParameterSet, as_parameters
from twitter_rest.rate_limit import RateLimitStatus
from twitter_rest.services import (
    AccountService,
    DirectMessageService,
    FollowersService,
    FriendsService,
    HelpService,
    ListService,
    SearchService,
    TweetService,
    UserService,
)
from twitter_rest.transport import FORM_CONTENT_TYPE

logger = logging.getLogger(__name__)

ALLOWED_METHODS = ("GET", "POST")

Params = Union[ParameterSet, Mapping[str, Any], None]
FilePart = tuple[str, Union[bytes, BinaryIO], str]


@dataclass(frozen=True, slots=True)
class TraceEvent:
    """Diagnostic event handed to a client's ``trace`` hook."""

    name: str
    fields: dict[str, Any] = field(default_factory=dict)


TraceHook = Callable[[TraceEvent], None]


class Client:
    """
    Twitter REST API client.

    Args:
        session: requests session carrying the authorization hook
            (see :func:`twitter_rest.transport.authorized_session`)
        endpoint: API base URL; override it to target a mock server
        timeout: Timeout in seconds passed to every request
        trace: Optional callable receiving :class:`TraceEvent` diagnostics
    """

    def __init__(
        self,
        session: requests.Session,
        *,
        endpoint: str = DEFAULT_ENDPOINT,
        timeout: float | None = DEFAULT_TIMEOUT,
        trace: TraceHook | None = None,
    ) -> None:
        if session is None:
            raise ConfigurationError("A requests session is required.")
        self.session = session
        self.endpoint = endpoint.rstrip("/")
        self.timeout = timeout
        self._trace = trace

        self.tweets = TweetService(self)
        self.direct_messages = DirectMessageService(self)
        self.users = UserService(self)
        self.account = AccountService(self)
        self.search = SearchService(self)
        self.lists = ListService(self)
        self.friends = FriendsService(self)
        self.followers = FollowersService(self)
        self.help = HelpService(self)

    def url_for(self, endpoint: str) -> str:
        return f"{self.endpoint}/{endpoint.strip('/')}.json"

    def call_json(self, method: str, endpoint: str, params: Params = None) -> bytes:
        """
        Perform an API call and return the raw JSON body of a successful response.

        Raises:
            InvalidArgumentError: If ``method`` is not GET or POST
            TransportError: If the request could not be completed
            ApiResponseError: If the API answered with a non-2xx status
        """
        if method not in ALLOWED_METHODS:
            raise InvalidArgumentError(f"Invalid method '{method}'. Must be either GET or POST.")

        parameters = as_parameters(params)
        url = self.url_for(endpoint)
        encoded = parameters.encode()
        if method == "GET":
            return self._send("GET", f"{url}?{encoded}" if encoded else url)
        return self._send(
            "POST",
            url,
            data=encoded,
            headers={"Content-Type": FORM_CONTENT_TYPE},
        )

    def call(
        self,
        method: str,
        endpoint: str,
        params: Params = None,
        destination: Any = None,
    ) -> Any:
        """
        Perform an API call and decode the response into ``destination``.

        Fields whose JSON type does not match ``destination`` are skipped and
        reported through the trace hook; only malformed JSON raises.

        Example::

            tweet = client.call("POST", "statuses/update", {"status": "Hello"}, Tweet)
        """
        raw = self.call_json(method, endpoint, params)
        return self._decode(raw, destination, endpoint)

    def call_multipart(
        self,
        endpoint: str,
        params: Params,
        files: Mapping[str, FilePart],
        destination: Any = None,
    ) -> Any:
        """POST a multipart/form-data body carrying scalar fields and file parts."""

        parameters = as_parameters(params)
        raw = self._send(
            "POST",
            self.url_for(endpoint),
            data=parameters.items(),
            files=dict(files),
        )
        return self._decode(raw, destination, endpoint)

    def _send(self, method: str, url: str, **kwargs: Any) -> bytes:
        self._emit("request", method=method, url=url)
        try:
            response = self.session.request(method, url, timeout=self.timeout, **kwargs)
        except requests.RequestException as exc:
            self._emit("transport_error", method=method, url=url, error=str(exc))
            raise TransportError(f"{method} {url} failed: {exc}") from exc

        self._emit("response", method=method, url=url, status=response.status_code)
        check_response(response)
        return response.content

    def _decode(self, raw: bytes, destination: Any, endpoint: str) -> Any:
        if destination is None:
            return None
        result = decode_json(raw, destination)
        for mismatch in result.mismatches:
            self._emit(
                "decode_mismatch",
                endpoint=endpoint,
                field=mismatch.path,
                message=mismatch.message,
            )
        return result.value

    def _emit(self, name: str, **fields: Any) -> None:
        logger.debug("%s %s", name, fields)
        if self._trace is not None:
            self._trace(TraceEvent(name, fields))


def check_response(response: requests.Response) -> None:
    """
    Raise an :class:`ApiResponseError` for any non-2xx response.

    The body is tried against the single-error shape, then the multi-error
    shape; if neither fits the error carries the status and a response dump.
    """
    status = response.status_code
    if 200 <= status <= 299:
        return

    body = response.content or b""
    rate_limit = RateLimitStatus.from_headers(response.headers)
    message, code, request = _parse_error_body(body)
    if message is None:
        message = f"A {status} code was returned. Full body response:\n{_dump(response)}"

    kwargs: dict[str, Any] = {
        "code": code,
        "status_code": status,
        "request": request,
        "body": body,
        "rate_limit": rate_limit,
    }
    if status == 429:
        raise RateLimitExceeded(
            message,
            reset_at=rate_limit.reset_at if rate_limit else None,
            **kwargs,
        )
    raise ApiResponseError(message, **kwargs)


def _parse_error_body(body: bytes) -> tuple[str | None, int | None, str | None]:
    try:
        payload = parse_json(body)
    except DecodeError:
        return None, None, None

    try:
        reply = ErrorReply.model_validate(payload)
        if reply.error:
            return reply.error, None, reply.request
    except ValidationError:
        pass

    try:
        replies = ErrorsReply.model_validate(payload)
        if replies.message:
            return replies.message, replies.code, None
    except ValidationError:
        pass

    return None, None, None


def _dump(response: requests.Response) -> str:
    lines = [f"HTTP {response.status_code} {response.reason or ''}".rstrip()]
    lines.extend(f"{key}: {value}" for key, value in response.headers.items())
    lines.append("")
    lines.append(response.text)
    return "\n".join(lines)

