"""送信ヘッダー名の定数と検証"""

from __future__ import annotations

from collections.abc import Mapping
from enum import StrEnum

from .exceptions import VaultServiceError, VaultServiceErrorCodes


class VaultHeader(StrEnum):
    """Vault API が解釈するヘッダー。"""

    TOKEN = "X-Vault-Token"


class B3Header(StrEnum):
    """Zipkin B3 伝播ヘッダー。"""

    TRACE_ID = "X-B3-TraceId"
    SPAN_ID = "X-B3-SpanId"
    PARENT_ID = "X-B3-ParentSpanId"
    SAMPLED = "X-B3-Sampled"


_KNOWN_NAMES: frozenset[str] = frozenset(h.value for h in (*VaultHeader, *B3Header))


def build_headers(values: Mapping[str, str]) -> dict[str, str]:
    """既知のヘッダー名だけからなる辞書を作る。

    Raises:
        VaultServiceError: 未知のヘッダー名、または値が文字列でない場合
    """
    headers: dict[str, str] = {}
    for name, value in values.items():
        if str(name) not in _KNOWN_NAMES:
            raise VaultServiceError(
                code=VaultServiceErrorCodes.INVALID_HEADER,
                message=f"Unknown header name: {name}",
            )
        if not isinstance(value, str):
            raise VaultServiceError(
                code=VaultServiceErrorCodes.INVALID_HEADER,
                message=f"Header {name} must be a string, got {type(value).__name__}",
            )
        headers[str(name)] = value
    return headers
