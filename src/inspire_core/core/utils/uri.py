"""Building platform URLs and switching between UI and API hosts.

The API for ``https://inspire.example.com`` is served from
``https://inspire-api.example.com``.
"""
from __future__ import annotations

from typing import Any, Mapping, Optional
from urllib.parse import SplitResult, urlsplit

from .types import convert_to_string

DEFAULT_BASE_URI = "https://localhost"
DEFAULT_API_SUFFIX = "-api"


def _authority(request_uri: Optional[str]) -> str:
    parts = urlsplit(request_uri or DEFAULT_BASE_URI)
    return f"{parts.scheme}://{parts.netloc}"


def build_query(parameters: Optional[Mapping[str, Any]]) -> str:
    """``?k=v&...`` with values rendered by :func:`convert_to_string`."""
    if not parameters:
        return ""
    query = "&".join(f"{key}={convert_to_string(value)}" for key, value in parameters.items())
    return f"?{query}" if query.strip() else ""


def create_api_url(
    request_uri: Optional[str],
    route_path: str,
    parameters: Optional[Mapping[str, Any]] = None,
) -> str:
    """``scheme://authority{route_path}?query`` on the host of ``request_uri``."""
    return _authority(request_uri) + route_path + build_query(parameters)


def create_ui_url(
    request_uri: Optional[str],
    module_key: str,
    parameters: Optional[Mapping[str, Any]] = None,
) -> str:
    """Deep link into a UI module: ``authority/index.html#{module_key}?query``."""
    return f"{_authority(request_uri)}/index.html#{module_key}{build_query(parameters)}"


def _split_required(uri: Optional[str]) -> SplitResult:
    if not uri or not uri.strip():
        raise ValueError("uri must not be blank")
    parts = urlsplit(uri.strip())
    if not parts.scheme or not parts.netloc:
        raise ValueError(f"Not an absolute URI: {uri!r}")
    return parts


def _split_netloc(netloc: str) -> tuple[str, str, str]:
    userinfo, at, hostport = netloc.rpartition("@")
    prefix = f"{userinfo}{at}"
    if hostport.startswith("["):
        return prefix, hostport, ""
    host, colon, port = hostport.partition(":")
    return prefix, host, f"{colon}{port}"


def _rebuild(parts: SplitResult, prefix: str, labels: list[str], port: str) -> str:
    return f"{parts.scheme}://{prefix}{'.'.join(labels)}{port}/"


def add_api_suffix_base(uri: Optional[str], api_suffix: str = DEFAULT_API_SUFFIX) -> str:
    """Append ``api_suffix`` to the first host label; returns ``scheme://authority/``."""
    parts = _split_required(uri)
    prefix, host, port = _split_netloc(parts.netloc)
    labels = host.split(".")
    if api_suffix and not labels[0].lower().endswith(api_suffix.lower()):
        labels[0] += api_suffix
    return _rebuild(parts, prefix, labels, port)


def strip_api_suffix_base(uri: Optional[str], api_suffix: str = DEFAULT_API_SUFFIX) -> str:
    """Remove a trailing ``api_suffix`` from the first host label."""
    parts = _split_required(uri)
    prefix, host, port = _split_netloc(parts.netloc)
    labels = host.split(".")
    if api_suffix and len(labels) > 1 and labels[0].lower().endswith(api_suffix.lower()):
        labels[0] = labels[0][: -len(api_suffix)]
    return _rebuild(parts, prefix, labels, port)


__all__ = [
    "DEFAULT_API_SUFFIX",
    "add_api_suffix_base",
    "build_query",
    "create_api_url",
    "create_ui_url",
    "strip_api_suffix_base",
]
