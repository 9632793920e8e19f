"""k1s0 vault service library."""

from .client import VaultService
from .config import load_service_config
from .exceptions import (
    ProtocolError,
    TransportError,
    VaultServiceError,
    VaultServiceErrorCodes,
)
from .headers import B3Header, VaultHeader, build_headers
from .http_client import HttpVaultService
from .logger import new_logger, redact_secrets
from .merger import deep_merge
from .models import (
    InitArgs,
    InitResult,
    ListResult,
    ReadResult,
    RequestOptions,
    SealStatus,
    ServiceConfig,
    StatusResult,
    UnsealArgs,
    UnsealResult,
)
from .trace_context import Sampled, TraceId, get_headers_for_trace_id
from .tracer import TracerConfig, TracerRegistry, default_registry, get_tracer_for_service

__all__ = [
    "VaultService",
    "HttpVaultService",
    "ServiceConfig",
    "load_service_config",
    "InitArgs",
    "InitResult",
    "UnsealArgs",
    "UnsealResult",
    "StatusResult",
    "SealStatus",
    "ReadResult",
    "ListResult",
    "RequestOptions",
    "deep_merge",
    "VaultHeader",
    "B3Header",
    "build_headers",
    "Sampled",
    "TraceId",
    "get_headers_for_trace_id",
    "TracerConfig",
    "TracerRegistry",
    "default_registry",
    "get_tracer_for_service",
    "new_logger",
    "redact_secrets",
    "VaultServiceError",
    "VaultServiceErrorCodes",
    "ProtocolError",
    "TransportError",
]
