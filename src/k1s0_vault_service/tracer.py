"""サービス名ごとの Tracer レジストリ"""

from __future__ import annotations

import threading
from dataclasses import dataclass, field

from opentelemetry import trace
from opentelemetry.exporter.otlp.proto.http.trace_exporter import OTLPSpanExporter
from opentelemetry.sdk.resources import Resource
from opentelemetry.sdk.trace import SpanProcessor, TracerProvider
from opentelemetry.sdk.trace.export import (
    BatchSpanProcessor,
    ConsoleSpanExporter,
    SimpleSpanProcessor,
)
from opentelemetry.sdk.trace.sampling import TraceIdRatioBased

DEFAULT_SAMPLE_RATE = 0.1


@dataclass
class TracerConfig:
    """Tracer 生成設定。

    endpoint がなければスパンはコンソールに出力する。
    debug=True の場合は sample_rate に関わらず全件サンプリングする。
    """

    endpoint: str | None = None
    sample_rate: float = DEFAULT_SAMPLE_RATE
    debug: bool = False
    headers: dict[str, str] = field(default_factory=dict)
    http_interval_seconds: float = 1.0
    http_timeout_seconds: float = 10.0

    def __post_init__(self) -> None:
        if not 0.0 <= self.sample_rate <= 1.0:
            raise ValueError(f"sample_rate must be within [0, 1]: {self.sample_rate}")

    @property
    def effective_sample_rate(self) -> float:
        return 1.0 if self.debug else self.sample_rate


def _span_processor(config: TracerConfig) -> SpanProcessor:
    if config.endpoint:
        exporter = OTLPSpanExporter(
            endpoint=config.endpoint,
            headers=config.headers or None,
            timeout=config.http_timeout_seconds,
        )
        return BatchSpanProcessor(
            exporter,
            schedule_delay_millis=config.http_interval_seconds * 1000,
        )
    return SimpleSpanProcessor(ConsoleSpanExporter())


class TracerRegistry:
    """サービス名をキーに Tracer を 1 度だけ生成して保持する。

    同じサービス名への同時初回アクセスでも生成されるのは 1 つだけで、
    以降の呼び出しはすべて同じインスタンスを受け取る。
    """

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._tracers: dict[str, trace.Tracer] = {}
        self._providers: list[TracerProvider] = []
        self._processors: dict[str, SpanProcessor] = {}

    def get_or_create(self, service_name: str, config: TracerConfig | None = None) -> trace.Tracer:
        """登録済みの Tracer を返す。なければ config から生成して登録する。

        2 回目以降の呼び出しでは config は無視される。
        """
        with self._lock:
            tracer = self._tracers.get(service_name)
            if tracer is None:
                tracer = self._create(service_name, config or TracerConfig())
                self._tracers[service_name] = tracer
            return tracer

    def _create(self, service_name: str, config: TracerConfig) -> trace.Tracer:
        provider = TracerProvider(
            resource=Resource.create({"service.name": service_name}),
            sampler=TraceIdRatioBased(config.effective_sample_rate),
        )
        processor = _span_processor(config)
        provider.add_span_processor(processor)
        self._providers.append(provider)
        self._processors[service_name] = processor
        return provider.get_tracer(service_name)

    def span_processor(self, service_name: str) -> SpanProcessor | None:
        """サービス名の Tracer に登録したスパンプロセッサーを返す。"""
        with self._lock:
            return self._processors.get(service_name)

    def __contains__(self, service_name: object) -> bool:
        with self._lock:
            return service_name in self._tracers

    def __len__(self) -> int:
        with self._lock:
            return len(self._tracers)

    def shutdown(self) -> None:
        """生成したすべての TracerProvider を停止して登録を消去する。"""
        with self._lock:
            providers, self._providers = self._providers, []
            self._tracers.clear()
            self._processors.clear()
        for provider in providers:
            provider.shutdown()


_default_registry = TracerRegistry()


def default_registry() -> TracerRegistry:
    """プロセス全体で共有される TracerRegistry を返す。"""
    return _default_registry


def get_tracer_for_service(service_name: str, config: TracerConfig | None = None) -> trace.Tracer:
    return _default_registry.get_or_create(service_name, config)
