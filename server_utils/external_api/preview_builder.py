"""Build redacted previews of outbound Mixpanel requests."""

from __future__ import annotations

import json
from typing import Any, Dict, Optional

from mixpanel_component.models import EdgeeRequest


class PreviewBuilder:
    """Build standardized, JSON-ready previews of an ``EdgeeRequest``.

    Example:
        >>> preview = PreviewBuilder.build(
        ...     operation="track",
        ...     url="https://api.mixpanel.com/track",
        ...     method="POST",
        ...     auth_type="Mixpanel token",
        ... )
        >>> preview["operation"]
        'track'
    """

    @staticmethod
    def build(
        operation: str,
        url: str,
        method: str,
        auth_type: str,
        *,
        payload: Optional[Any] = None,
        headers: Optional[Dict[str, str]] = None,
        **extra: Any,
    ) -> Dict[str, Any]:
        """Build a preview object showing what would be sent.

        Args:
            operation: The Mixpanel endpoint being called (import, track, engage)
            url: The URL that would be called
            method: HTTP method
            auth_type: Authentication method description
            payload: Optional decoded request body
            headers: Optional request headers (sensitive values are redacted)
            **extra: Additional fields to include

        Returns:
            Dictionary with preview information
        """
        preview: Dict[str, Any] = {
            "operation": operation,
            "url": url,
            "method": method,
            "auth": auth_type,
        }

        if payload:
            preview["payload"] = payload

        if headers:
            preview["headers"] = _redact_sensitive_headers(headers)

        if extra:
            preview.update(extra)

        return preview

    @staticmethod
    def from_request(request: EdgeeRequest) -> Dict[str, Any]:
        """Describe *request* with its Authorization header redacted."""
        path = request.url.split("://", 1)[-1].split("/", 1)[-1]
        operation = path.split("?", 1)[0]

        if request.header("Authorization"):
            auth_type = "Basic (API secret)"
        else:
            auth_type = "Mixpanel token"

        try:
            payload: Any = json.loads(request.body)
        except ValueError:
            payload = request.body

        return PreviewBuilder.build(
            operation=operation,
            url=request.url,
            method=request.method.value,
            auth_type=auth_type,
            payload=payload,
            headers=dict(request.headers),
            forward_client_headers=request.forward_client_headers,
        )


def _redact_sensitive_headers(headers: Dict[str, str]) -> Dict[str, str]:
    """Redact sensitive information from headers."""
    sensitive_keys = {
        "authorization",
        "cookie",
        "x-api-key",
    }

    return {
        key: "***" if key.lower() in sensitive_keys else value
        for key, value in headers.items()
    }
