"""Zipkin B3 トレースヘッダーの生成"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from opentelemetry.trace import SpanContext, format_span_id, format_trace_id

from .headers import B3Header, build_headers


class Sampled(Enum):
    """サンプリング判定。UNKNOWN の場合はヘッダー自体を送らない。"""

    UNKNOWN = "unknown"
    TRUE = "1"
    FALSE = "0"

    @classmethod
    def of(cls, value: bool | None) -> Sampled:
        if value is None:
            return cls.UNKNOWN
        return cls.TRUE if value else cls.FALSE


@dataclass(frozen=True)
class TraceId:
    """送信リクエストに付与するトレース識別子。"""

    trace_id: str  # 16 or 32 hex chars
    span_id: str  # 16 hex chars
    parent_id: str | None = None
    sampled: Sampled = Sampled.UNKNOWN

    @classmethod
    def from_span_context(cls, ctx: SpanContext, parent_id: str | None = None) -> TraceId:
        """OpenTelemetry の SpanContext から生成する。"""
        return cls(
            trace_id=format_trace_id(ctx.trace_id),
            span_id=format_span_id(ctx.span_id),
            parent_id=parent_id,
            sampled=Sampled.of(ctx.trace_flags.sampled),
        )


def get_headers_for_trace_id(trace_id: TraceId | None) -> dict[str, str]:
    """トレース識別子を B3 ヘッダーに変換する。識別子がなければ空の辞書を返す。"""
    if trace_id is None:
        return {}
    values: dict[str, str] = {
        B3Header.TRACE_ID: trace_id.trace_id,
        B3Header.SPAN_ID: trace_id.span_id,
        B3Header.PARENT_ID: trace_id.parent_id or "",
    }
    if trace_id.sampled is not Sampled.UNKNOWN:
        values[B3Header.SAMPLED] = trace_id.sampled.value
    return build_headers(values)
