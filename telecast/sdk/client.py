"""TelegramMethod -- one remote Bot API call, built from a :class:`MethodSpec`.

A method instance is created per call, executed once and discarded::

    method = TelegramMethod(token, get_method("sendMessage"), {"chat_id": 1, "text": "hi"})
    message = method.execute(exceptions=True, run_async=False)

Outgoing arguments are cast against the method's parameter schema and
projected to plain JSON (multipart form data when an :class:`InputFile` is
present).  The response envelope is validated with a Pydantic model and the
``result`` is hydrated into the method's declared return shape.

Blocking I/O uses ``requests``; asynchronous execution offloads the same call
to a worker thread via :func:`asyncio.to_thread`, as :func:`make_request` does.
"""

from __future__ import annotations

import asyncio
import json
import logging
from typing import Any, Awaitable, Dict, Mapping, Optional, Union

import requests
from pydantic import BaseModel, ValidationError

from telecast.core.caster import cast_value, cast_values, strip_arrays
from telecast.core.exceptions import RemoteCallError, TransportError
from telecast.core.files import InputFile
from telecast.core.schema import Primitive
from telecast.sdk.methods import MethodSpec

DEFAULT_API_URL = "https://api.telegram.org"
DEFAULT_TIMEOUT = 10

_sdk_logger = logging.getLogger("telecast.sdk.client")


# ── Response envelope ────────────────────────────────────────────────────────


class Envelope(BaseModel):
    """The JSON wrapper around every Bot API response."""

    ok: bool
    result: Any = None
    description: Optional[str] = None
    error_code: Optional[int] = None
    parameters: Optional[Dict[str, Any]] = None


class Failure:
    """Falsy outcome returned instead of raising when exceptions are disabled.

    ``failure.error`` holds the :class:`RemoteCallError` or
    :class:`TransportError` that would otherwise have been raised.
    """

    __slots__ = ("error",)

    def __init__(self, error: Exception) -> None:
        self.error = error

    def __bool__(self) -> bool:
        return False

    def __repr__(self) -> str:
        return f"Failure({self.error!r})"


# ── HTTP helpers ─────────────────────────────────────────────────────────────


async def make_request(method: str, url: str, **kwargs: object) -> requests.Response:
    """Run a :mod:`requests` call inside a thread to keep the event loop free.

    *method* is the HTTP verb (``"GET"``, ``"POST"``, …).
    """
    return await asyncio.to_thread(requests.request, method, url, **kwargs)


def _has_upload(value: Any) -> bool:
    if isinstance(value, InputFile):
        return True
    if isinstance(value, Mapping):
        return any(_has_upload(v) for v in value.values())
    if isinstance(value, (list, tuple)):
        return any(_has_upload(v) for v in value)
    return False


def _multipart(body: Dict[str, Any]) -> Dict[str, Any]:
    """Split *body* into form ``data`` and ``files``.

    Top-level uploads travel as their own part.  Uploads nested inside a value
    (``sendMediaGroup``'s ``media``) are attached under a generated name and
    referenced with ``attach://<name>``, as the Bot API expects.
    """
    data: Dict[str, Any] = {}
    files: Dict[str, Any] = {}

    def attach(value: Any) -> Any:
        if isinstance(value, InputFile):
            name = f"file{len(files)}"
            files[name] = value.as_multipart()
            return f"attach://{name}"
        if isinstance(value, dict):
            return {k: attach(v) for k, v in value.items()}
        if isinstance(value, list):
            return [attach(v) for v in value]
        return value

    for key, value in body.items():
        if isinstance(value, InputFile):
            files[key] = value.as_multipart()
        elif isinstance(value, (dict, list)):
            data[key] = json.dumps(attach(value), ensure_ascii=False)
        elif isinstance(value, bool):
            data[key] = "true" if value else "false"
        else:
            data[key] = str(value)
    return {"data": data, "files": files}


# ── Remote method ────────────────────────────────────────────────────────────


class TelegramMethod:
    """A single Bot API call: token + method spec + one argument mapping."""

    def __init__(
        self,
        token: str,
        spec: MethodSpec,
        arguments: Optional[Mapping[str, Any]] = None,
        api_url: str = DEFAULT_API_URL,
        timeout: float = DEFAULT_TIMEOUT,
    ) -> None:
        self._token = token
        self.spec = spec
        self.arguments = arguments or {}
        self._api_url = api_url.rstrip("/")
        self._timeout = timeout

    @property
    def url(self) -> str:
        return f"{self._api_url}/bot{self._token}/{self.spec.name}"

    # ------------------------------------------------------------------
    #  Request construction
    # ------------------------------------------------------------------

    def build_request(self) -> Dict[str, Any]:
        """Return the keyword arguments for :func:`requests.request`.

        Raises:
            TypeMismatch: If an argument does not fit the parameter schema.
        """
        request: Dict[str, Any] = {
            "method": self.spec.http_method,
            "url": self.url,
            "timeout": self._timeout,
        }
        if not self.spec.parameters:
            return request

        body = strip_arrays(cast_values(self.arguments, self.spec.parameters))
        if _has_upload(body):
            request.update(_multipart(body))
        else:
            request["json"] = body
        return request

    # ------------------------------------------------------------------
    #  Execution
    # ------------------------------------------------------------------

    def execute(self, exceptions: bool = True, run_async: bool = False) -> Union[Any, Awaitable[Any]]:
        """Run the call.

        Synchronous mode blocks and returns the hydrated result.  Asynchronous
        mode returns an awaitable resolving to the same value; the policy in
        *exceptions* is fixed when the awaitable is created.

        Raises:
            TypeMismatch: Always, for arguments (at call time) or results
                that do not fit their declared shape.
            RemoteCallError / TransportError: Only when *exceptions* is true;
                otherwise a :class:`Failure` is returned.
        """
        request = self.build_request()
        if run_async:
            return self._execute_async(request, exceptions)

        try:
            response = requests.request(**request)
        except requests.RequestException as exc:
            return self._fail(TransportError(f"{self.spec.name} request failed: {exc}", exc), exceptions)
        return self._handle_response(response, exceptions)

    async def _execute_async(self, request: Dict[str, Any], exceptions: bool) -> Any:
        method = request.pop("method")
        url = request.pop("url")
        try:
            response = await make_request(method, url, **request)
        except requests.RequestException as exc:
            return self._fail(TransportError(f"{self.spec.name} request failed: {exc}", exc), exceptions)
        return self._handle_response(response, exceptions)

    def _handle_response(self, response: requests.Response, exceptions: bool) -> Any:
        name = self.spec.name
        try:
            envelope = Envelope.model_validate(response.json())
        except (ValueError, ValidationError) as exc:
            _sdk_logger.error(
                "Undecodable API response",
                extra={"api_method": name, "status_code": response.status_code, "error": str(exc)},
            )
            if not response.ok:
                return self._fail(RemoteCallError(response.status_code), exceptions)
            return self._fail(TransportError(f"{name} returned an undecodable response", exc), exceptions)

        if not envelope.ok or not response.ok:
            error = RemoteCallError(response.status_code, envelope.model_dump(exclude_none=True))
            _sdk_logger.warning(
                "API call failed",
                extra={
                    "api_method": name,
                    "status_code": response.status_code,
                    "error_code": error.error_code,
                    "description": error.description,
                },
            )
            return self._fail(error, exceptions)

        _sdk_logger.debug("API call ok", extra={"api_method": name, "status_code": response.status_code})
        return self._cast_result(envelope.result)

    def _cast_result(self, raw: Any) -> Any:
        # Edits of inline messages answer ``true`` instead of the edited Message.
        if raw is True and not isinstance(self.spec.returns, Primitive):
            return True
        return cast_value(raw, self.spec.returns)

    def _fail(self, error: Exception, exceptions: bool) -> Failure:
        if exceptions:
            raise error
        return Failure(error)

    def __repr__(self) -> str:
        return f"TelegramMethod({self.spec.name!r}, {dict(self.arguments)!r})"
