"""
Shared request pipeline for the Cheshire Cat API client.

Every sub-client funnels its calls through :func:`execute` (JSON bodies) or
:func:`execute_upload` (multipart bodies). Both perform exactly one HTTP round
trip, read the whole response body and either return the decoded result or
raise a single classified error.
"""

import logging
import os
from typing import Any, BinaryIO, Mapping, Optional, Union

import httpx
from pydantic import BaseModel, TypeAdapter
from pydantic import ValidationError as PydanticValidationError

from .config import ClientConfig
from .exceptions import (
    APIError,
    APIFieldErrors,
    APIMessageError,
    AuthenticationError,
    InvalidURLError,
    UnknownAPIError,
    UploadMissingFileError,
)
from .models import APIFieldErrorsEnvelope, APIMessageEnvelope

logger = logging.getLogger(__name__)

JSON_CONTENT_TYPE = "application/json"

FileInput = Union[BinaryIO, str, os.PathLike]


def _to_value(v: Any) -> Any:
    """Extract string value from an enum member, or return value as-is."""
    return v.value if hasattr(v, "value") else v


def build_url(config: ClientConfig, path: str = "") -> str:
    """
    Join the config base URL and a relative path with a single slash.

    Raises:
        InvalidURLError: The result is not an absolute http(s) URL
    """
    path = path.lstrip("/")
    raw_url = f"{config.base_url}/{path}" if path else config.base_url

    try:
        url = httpx.URL(raw_url)
    except httpx.InvalidURL as e:
        raise InvalidURLError(raw_url, str(e)) from e

    if url.scheme not in ("http", "https") or not url.host:
        raise InvalidURLError(raw_url, "expected an absolute http(s) url")

    return raw_url


def encode_query(params: Optional[Mapping[str, Any]]) -> Optional[dict[str, Any]]:
    """Drop unset query parameters; return ``None`` when nothing is left."""
    if not params:
        return None

    query = {key: _to_value(value) for key, value in params.items() if value is not None and value != ""}
    return query or None


def build_headers(config: ClientConfig, content_type: Optional[str] = None) -> dict[str, str]:
    """Headers sent with every request."""
    headers = {
        "Accept": JSON_CONTENT_TYPE,
        "User-Agent": config.user_agent,
        "user_id": config.user_id,
    }
    if content_type:
        headers["Content-Type"] = content_type
    if config.auth_key:
        headers["Authorization"] = config.auth_key
    return headers


def classify_error(
    config: ClientConfig,
    status_code: int,
    body: bytes,
    *,
    fallback: bool = True,
) -> Optional[APIError]:
    """
    Match a response body against the known error envelopes.

    Shapes are tried in a fixed order and the first that parses wins:

    1. ``{"error": [{"type", "loc", "msg", "input", "url"}, ...]}``
    2. ``{"error": "text"}``
    3. status code and raw body (only when ``fallback`` is set)

    Args:
        config: Config providing the unmarshal function
        status_code: HTTP status of the response
        body: Raw response body
        fallback: Produce an :class:`UnknownAPIError` when no shape matches

    Returns:
        The classified error, or ``None`` when nothing matched and
        ``fallback`` is off
    """
    text = body.decode("utf-8", errors="replace")

    try:
        data = config.unmarshal_func(body) if body.strip() else None
    except (ValueError, TypeError):
        data = None

    if data is not None:
        try:
            envelope = APIFieldErrorsEnvelope.model_validate(data)
            return APIFieldErrors(envelope.error, status_code=status_code, body=text)
        except PydanticValidationError:
            pass

        try:
            message = APIMessageEnvelope.model_validate(data)
            return APIMessageError(message.error, status_code=status_code, body=text)
        except PydanticValidationError:
            pass

    if not fallback:
        return None

    if status_code in (401, 403):
        return AuthenticationError(status_code, text)
    return UnknownAPIError(status_code, text)


def decode_response(config: ClientConfig, body: bytes, response_type: Any = None) -> Any:
    """
    Decode a successful response body.

    Without a ``response_type`` the plain unmarshalled data is returned and an
    empty body yields ``None``.
    """
    if response_type is None:
        if not body.strip():
            return None
        return config.unmarshal_func(body)

    data = config.unmarshal_func(body)
    return TypeAdapter(response_type).validate_python(data)


def _send(
    config: ClientConfig,
    method: str,
    path: str,
    params: Optional[Mapping[str, Any]],
    response_type: Any,
    content_type: Optional[str],
    **request_kwargs: Any,
) -> Any:
    """Perform one HTTP exchange and turn the response into a result or an error."""
    if config.http_client is None:
        raise RuntimeError("Client not initialized. Use CCatClient or pass with_http_client().")

    method = _to_value(method)
    url = build_url(config, path)
    query = encode_query(params)

    logger.debug("%s %s params=%s", method, url, query)
    try:
        response = config.http_client.request(
            method,
            url,
            params=query,
            headers=build_headers(config, content_type),
            **request_kwargs,
        )
    except httpx.HTTPError as e:
        logger.warning("%s %s failed: %s", method, url, e)
        raise

    body = response.content
    error = classify_error(config, response.status_code, body, fallback=not response.is_success)
    if error is not None:
        logger.warning(
            "%s %s returned %s (%s)",
            method,
            url,
            response.status_code,
            type(error).__name__,
        )
        raise error

    return decode_response(config, body, response_type)


def execute(
    config: ClientConfig,
    method: str,
    path: str = "",
    params: Optional[Mapping[str, Any]] = None,
    payload: Any = None,
    response_type: Any = None,
) -> Any:
    """
    Send a JSON request to the API.

    Args:
        config: Config of the calling (sub-)client
        method: HTTP method
        path: Path relative to ``config.base_url``
        params: Query parameters; ``None`` and empty values are dropped
        payload: Request body, encoded with ``config.marshal_func``.
            Pydantic models are dumped first, leaving out unset fields.
        response_type: Type the response body is validated into

    Returns:
        The decoded response

    Raises:
        APIError: The server reported an error
        InvalidURLError: The request URL cannot be built
        httpx.HTTPError: The transport failed
    """
    content = None
    if payload is not None:
        if isinstance(payload, BaseModel):
            payload = payload.model_dump(mode="json", by_alias=True, exclude_none=True)
        content = config.marshal_func(payload)

    return _send(
        config,
        method,
        path,
        params,
        response_type,
        JSON_CONTENT_TYPE,
        content=content,
    )


def _file_name(file: Any, default: str) -> str:
    name = getattr(file, "name", None)
    if isinstance(name, str) and name:
        return os.path.basename(name)
    return default


def execute_upload(
    config: ClientConfig,
    method: str,
    path: str,
    file: Optional[FileInput],
    params: Optional[Mapping[str, Any]] = None,
    field_name: str = "file",
    extra_fields: Optional[Mapping[str, Any]] = None,
    response_type: Any = None,
) -> Any:
    """
    Send a multipart request carrying one file part.

    Args:
        config: Config of the calling (sub-)client
        method: HTTP method
        path: Path relative to ``config.base_url``
        file: Open binary file object, or path to a file
        params: Query parameters
        field_name: Name of the file form field
        extra_fields: Additional string form fields; ``None`` values are dropped
        response_type: Type the response body is validated into

    Raises:
        UploadMissingFileError: ``file`` is ``None``; nothing is sent
    """
    if file is None:
        raise UploadMissingFileError()

    form = {key: str(_to_value(value)) for key, value in (extra_fields or {}).items() if value is not None}

    if isinstance(file, (str, os.PathLike)):
        with open(file, "rb") as fh:
            return execute_upload(config, method, path, fh, params, field_name, extra_fields, response_type)

    return _send(
        config,
        method,
        path,
        params,
        response_type,
        None,  # multipart content type comes with its boundary from httpx
        files={field_name: (_file_name(file, field_name), file)},
        data=form or None,
    )


class ResourceClient:
    """
    Base class of the resource sub-clients.

    The sub-client keeps its own copy of the shared config with ``resource``
    appended to the base URL once, at construction time.
    """

    resource = ""

    def __init__(self, config: ClientConfig) -> None:
        self.config = config.with_resource(self.resource) if self.resource else config

    def _request(
        self,
        method: str,
        path: str = "",
        *,
        params: Optional[Mapping[str, Any]] = None,
        payload: Any = None,
        response_type: Any = None,
    ) -> Any:
        return execute(self.config, method, path, params, payload, response_type)

    def _upload(
        self,
        method: str,
        path: str,
        file: Optional[FileInput],
        *,
        extra_fields: Optional[Mapping[str, Any]] = None,
        response_type: Any = None,
    ) -> Any:
        return execute_upload(
            self.config,
            method,
            path,
            file,
            extra_fields=extra_fields,
            response_type=response_type,
        )
