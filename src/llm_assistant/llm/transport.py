from __future__ import annotations

"""Thin synchronous HTTP layer on top of `requests`.

Every call is a single attempt with its own connection; nothing is pooled or
shared between calls, so concurrent callers never touch each other's headers
or buffers.
"""

import logging
from typing import Any, Dict

import requests

from .base import MalformedResponseError, TransportError

logger = logging.getLogger(__name__)


def _decode(resp: requests.Response) -> Any:
    try:
        return resp.json()
    except ValueError as exc:
        raise MalformedResponseError(f"Response from {resp.url} is not JSON: {exc}") from exc


def _check(resp: requests.Response) -> None:
    try:
        resp.raise_for_status()
    except requests.HTTPError as exc:
        logger.error("HTTP %s from %s: %s", resp.status_code, resp.url, resp.text[:500])
        raise TransportError(f"HTTP {resp.status_code}") from exc


def post_json(url: str, payload: Dict[str, Any], headers: Dict[str, str], timeout: float) -> Any:
    """POST `payload` as JSON and return the decoded JSON body."""
    try:
        resp = requests.post(url, json=payload, headers=headers, timeout=timeout)
    except requests.RequestException as exc:
        raise TransportError(str(exc)) from exc
    _check(resp)
    return _decode(resp)


def get_json(url: str, headers: Dict[str, str], timeout: float) -> Any:
    try:
        resp = requests.get(url, headers=headers, timeout=timeout)
    except requests.RequestException as exc:
        raise TransportError(str(exc)) from exc
    _check(resp)
    return _decode(resp)
