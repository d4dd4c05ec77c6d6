from __future__ import annotations

import asyncio
from dataclasses import dataclass
from enum import Enum
from functools import lru_cache
from types import MappingProxyType
from typing import Any, Callable, Dict, Mapping, Optional, Tuple, Union

from pydantic import TypeAdapter, ValidationError

from ..domain.errors import (
    InvalidFieldError,
    MediatorBusyError,
    RemoteCallError,
    ResponseParseError,
)
from ..domain.fields import MISSING_FIELDS_MESSAGE, FieldSpec, validate_fields
from ..infra.generation import GenerationBackend
from ..infra.json_payload import load_json_payload
from ..observability.logging_utils import log_event, log_failure, summarize_text
from ..schemas.models import ImageInput, MediatorSnapshot, PanelError


UNAVAILABLE_MESSAGE = (
    "The AI service is not configured, so this feature is unavailable."
)


class MediatorStatus(str, Enum):
    IDLE = "idle"
    PENDING = "pending"
    RESOLVED = "resolved"
    FAILED = "failed"
    UNAVAILABLE = "unavailable"


@lru_cache(maxsize=None)
def _type_adapter(result_type: Any) -> TypeAdapter:
    return TypeAdapter(result_type)


@dataclass(frozen=True)
class Prompt:
    text: str
    images: Tuple[ImageInput, ...] = ()


@dataclass(frozen=True)
class PanelSpec:
    """Declaration of one dashboard panel: its form, prompt and result shape."""

    name: str
    title: str
    fields: Tuple[FieldSpec, ...]
    build_prompt: Callable[[Mapping[str, Any]], Prompt]
    failure_message: str
    result_type: Optional[Any] = None
    temperature: Optional[float] = None
    missing_message: str = MISSING_FIELDS_MESSAGE

    @property
    def structured(self) -> bool:
        return self.result_type is not None

    def _adapter(self) -> TypeAdapter:
        return _type_adapter(self.result_type)

    def result_schema(self) -> Dict[str, Any]:
        return self._adapter().json_schema(by_alias=True)

    def parse_result(self, raw: str) -> Any:
        payload = load_json_payload(raw)
        try:
            return self._adapter().validate_python(payload)
        except ValidationError as exc:
            raise ResponseParseError(
                f"reply does not match {self.name} result shape: {exc.error_count()} errors",
                raw=raw,
            ) from exc


class RequestMediator:
    """
    Turns one panel submission into exactly one remote call.

    State moves ``idle -> pending -> resolved | failed``; a mediator built
    without a backend stays ``unavailable`` for its whole life. Result and
    error are mutually exclusive and are cleared when a new request starts.
    """

    def __init__(
        self,
        spec: PanelSpec,
        backend: Optional[GenerationBackend],
        *,
        unavailable_message: str = UNAVAILABLE_MESSAGE,
    ) -> None:
        self.spec = spec
        self._backend = backend
        self._result: Any = None
        self._error: Optional[PanelError] = None
        self._request: Optional[Mapping[str, Any]] = None
        if backend is None:
            self._status = MediatorStatus.UNAVAILABLE
            self._error = PanelError(kind="unavailable", message=unavailable_message)
        else:
            self._status = MediatorStatus.IDLE

    @property
    def status(self) -> MediatorStatus:
        return self._status

    @property
    def result(self) -> Any:
        return self._result

    @property
    def error(self) -> Optional[PanelError]:
        return self._error

    @property
    def last_request(self) -> Optional[Mapping[str, Any]]:
        return self._request

    def snapshot(self) -> MediatorSnapshot:
        return MediatorSnapshot(
            panel=self.spec.name,
            status=self._status.value,
            result=self._result,
            error=self._error,
        )

    def _fail(self, kind: str, message: str) -> PanelError:
        self._error = PanelError(kind=kind, message=message)
        self._result = None
        self._status = MediatorStatus.FAILED
        return self._error

    async def submit(self, fields: Mapping[str, Any]) -> Union[Any, PanelError]:
        if self._status is MediatorStatus.PENDING:
            raise MediatorBusyError(f"{self.spec.name} already has a request in flight")
        if self._status is MediatorStatus.UNAVAILABLE:
            return self._error
        self._result = None
        self._error = None

        try:
            cleaned = validate_fields(
                fields, self.spec.fields, missing_message=self.spec.missing_message
            )
            prompt = self.spec.build_prompt(cleaned)
        except InvalidFieldError as exc:
            log_event(
                "mediator_validation_failed",
                panel=self.spec.name,
                field=exc.field,
                message=str(exc),
            )
            return self._fail("validation", str(exc))

        self._request = MappingProxyType(dict(cleaned))
        self._status = MediatorStatus.PENDING
        log_event(
            "mediator_submit",
            panel=self.spec.name,
            structured=self.spec.structured,
            images=len(prompt.images),
            prompt_summary=summarize_text(prompt.text, 160),
        )
        try:
            result = await self._call(prompt)
        except ResponseParseError as exc:
            log_failure(
                "mediator_failed",
                panel=self.spec.name,
                kind="invalid_response",
                error=str(exc),
                raw=summarize_text(exc.raw),
            )
            return self._fail("invalid_response", self.spec.failure_message)
        except asyncio.CancelledError:
            self._fail("remote", self.spec.failure_message)
            raise
        except Exception as exc:
            log_failure(
                "mediator_failed",
                panel=self.spec.name,
                kind="remote",
                error=str(exc),
                error_type=type(exc).__name__,
            )
            return self._fail("remote", self.spec.failure_message)

        self._result = result
        self._status = MediatorStatus.RESOLVED
        log_event("mediator_resolved", panel=self.spec.name)
        return result

    async def _call(self, prompt: Prompt) -> Any:
        if self.spec.structured:
            raw = await self._backend.generate_structured(
                prompt.text,
                schema=self.spec.result_schema(),
                images=prompt.images,
                temperature=self.spec.temperature,
            )
            return self.spec.parse_result(raw)
        text = await self._backend.generate_text(
            prompt.text, temperature=self.spec.temperature
        )
        if not isinstance(text, str):
            raise RemoteCallError(f"expected text reply, got {type(text).__name__}")
        return text.strip()
