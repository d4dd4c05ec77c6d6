from __future__ import annotations

import json
import logging
import os
from contextlib import contextmanager
from typing import Dict, Iterator, Optional

from opentelemetry import trace
from opentelemetry.trace import Span, Status, StatusCode


SERVICE_NAME = "farm-connect"
_OTEL_INITIALIZED = False
_OTEL_INSTRUMENTED = False
_OTEL_ATTR_MAX_LEN = int(os.getenv("OTEL_ATTR_MAX_LEN", "2000"))
_LOGGER = logging.getLogger(__name__)


def _parse_pairs(raw: Optional[str]) -> Dict[str, str]:
    if not raw:
        return {}
    pairs: Dict[str, str] = {}
    for item in raw.split(","):
        key, sep, value = item.partition("=")
        key = key.strip()
        value = value.strip()
        if sep and key and value:
            pairs[key] = value
    return pairs


def _summarize_payload(value: object, limit: Optional[int] = None) -> tuple[str, int, bool]:
    if value is None:
        text = ""
    elif isinstance(value, str):
        text = value
    else:
        text = json.dumps(value, ensure_ascii=False, default=str)
    size = len(text)
    max_len = _OTEL_ATTR_MAX_LEN if limit is None else limit
    if max_len and size > max_len:
        return text[:max_len] + "...", size, True
    return text, size, False


def build_span_attributes(
    prefix: str, payload: object, limit: Optional[int] = None
) -> Dict[str, object]:
    text, size, truncated = _summarize_payload(payload, limit=limit)
    return {
        prefix: text,
        f"{prefix}.size": size,
        f"{prefix}.truncated": truncated,
    }


@contextmanager
def start_span(name: str, attributes: Optional[Dict[str, object]] = None) -> Iterator[Span]:
    tracer = trace.get_tracer(os.getenv("OTEL_SERVICE_NAME") or SERVICE_NAME)
    with tracer.start_as_current_span(name, record_exception=False) as span:
        for key, value in (attributes or {}).items():
            if value is not None:
                span.set_attribute(key, value if isinstance(value, (str, bool, int, float)) else str(value))
        yield span


def record_exception(span: Span, exc: BaseException) -> None:
    span.record_exception(exc)
    span.set_status(Status(StatusCode.ERROR, str(exc)))


def _resolve_http_endpoint(base: Optional[str], override: Optional[str]) -> Optional[str]:
    endpoint = (override or base or "").strip()
    if not endpoint:
        return None
    if "/v1/" in endpoint:
        return endpoint
    return endpoint.rstrip("/") + "/v1/traces"


def init_otel(service_name: Optional[str] = None) -> bool:
    """Install an OTLP/HTTP span exporter when an endpoint is configured."""
    global _OTEL_INITIALIZED
    if _OTEL_INITIALIZED:
        return True
    exporter_name = (os.getenv("OTEL_TRACES_EXPORTER") or "otlp").strip().lower()
    if exporter_name in {"none", "off", "false", "0"}:
        return False
    endpoint = _resolve_http_endpoint(
        os.getenv("OTEL_EXPORTER_OTLP_ENDPOINT"),
        os.getenv("OTEL_EXPORTER_OTLP_TRACES_ENDPOINT"),
    )
    if not endpoint:
        return False

    from opentelemetry.exporter.otlp.proto.http.trace_exporter import OTLPSpanExporter
    from opentelemetry.sdk.resources import Resource
    from opentelemetry.sdk.trace import TracerProvider
    from opentelemetry.sdk.trace.export import BatchSpanProcessor

    service = service_name or os.getenv("OTEL_SERVICE_NAME") or SERVICE_NAME
    resource = Resource.create(
        {"service.name": service, **_parse_pairs(os.getenv("OTEL_RESOURCE_ATTRIBUTES"))}
    )
    provider = TracerProvider(resource=resource)
    provider.add_span_processor(
        BatchSpanProcessor(
            OTLPSpanExporter(
                endpoint=endpoint,
                headers=_parse_pairs(os.getenv("OTEL_EXPORTER_OTLP_HEADERS")),
            )
        )
    )
    trace.set_tracer_provider(provider)
    _LOGGER.info("OpenTelemetry traces exported to %s", endpoint)
    _OTEL_INITIALIZED = True
    return True


def instrument_fastapi(app: object) -> bool:
    global _OTEL_INSTRUMENTED
    if _OTEL_INSTRUMENTED:
        return True
    from opentelemetry.instrumentation.fastapi import FastAPIInstrumentor

    FastAPIInstrumentor.instrument_app(app)
    _OTEL_INSTRUMENTED = True
    return True
