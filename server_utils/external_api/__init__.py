"""Host-side utilities for previewing and dispatching Mixpanel requests."""

from .error_response import (
    configuration_error,
    error_output,
    error_response,
    validation_error,
)
from .http_client import ExternalApiClient, HttpClientConfig
from .preview_builder import PreviewBuilder

__all__ = [
    "configuration_error",
    "error_output",
    "error_response",
    "validation_error",
    "ExternalApiClient",
    "HttpClientConfig",
    "PreviewBuilder",
]
