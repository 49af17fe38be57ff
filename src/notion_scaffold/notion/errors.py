# src/notion_scaffold/notion/errors.py

from __future__ import annotations

import httpx
from notion_client import APIResponseError
from notion_client.errors import HTTPResponseError, RequestTimeoutError


def _code(exc: Exception) -> str:
    raw = getattr(exc, "code", None)
    return str(getattr(raw, "value", raw) or "")


def _is_auth_error(exc: Exception) -> bool:
    return isinstance(exc, APIResponseError) and _code(exc) in {"unauthorized", "restricted_resource"}


def _is_not_found_error(exc: Exception) -> bool:
    return isinstance(exc, APIResponseError) and _code(exc) == "object_not_found"


def _is_validation_error(exc: Exception) -> bool:
    return isinstance(exc, APIResponseError) and _code(exc) in {"validation_error", "invalid_json", "invalid_request"}


def _is_rate_limit_error(exc: Exception) -> bool:
    return isinstance(exc, APIResponseError) and _code(exc) == "rate_limited"


def _is_connection_error(exc: Exception) -> bool:
    return isinstance(exc, (RequestTimeoutError, httpx.TransportError))


def _hint(exc: Exception) -> str:
    if _is_auth_error(exc):
        return "check the integration token and that the parent page is shared with the integration"
    if _is_not_found_error(exc):
        return "the parent object does not exist or is not shared with the integration"
    if _is_validation_error(exc):
        return "the request body was rejected"
    if _is_rate_limit_error(exc):
        return "rate-limited by Notion"
    if _is_connection_error(exc):
        return "network/timeout error"
    return ""


def describe_error(exc: Exception) -> str:
    """
    One-line description of a failed Notion call.

    Prefers the API response body (it carries Notion's own message) and
    appends a short hint for the common failure classes.
    """
    if isinstance(exc, HTTPResponseError):
        status = getattr(exc, "status", "?")
        code = _code(exc) or exc.__class__.__name__
        body = (getattr(exc, "body", "") or "").strip() or str(exc)
        detail = f"HTTP {status} {code}: {body}"
    else:
        detail = f"{exc.__class__.__name__}: {exc}".rstrip(": ")

    hint = _hint(exc)
    return f"{detail} ({hint})" if hint else detail
