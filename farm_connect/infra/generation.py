"""
Remote generation capability.

Every call to the hosted language model goes through a ``GenerationBackend``.
The LangChain implementation builds a chat model per temperature and turns
provider failures into ``RemoteCallError``.
"""

from __future__ import annotations

import json
from typing import Any, Callable, Dict, List, Optional, Protocol, Sequence

from langchain_core.language_models import BaseChatModel
from langchain_core.messages import AIMessage, BaseMessage, HumanMessage, SystemMessage

from ..domain.errors import RemoteCallError
from ..observability.logging_utils import log_event, summarize_text
from ..observability.otel import build_span_attributes, record_exception, start_span
from ..schemas.models import ConversationMessage, ImageInput
from .llm import ensure_credentials, get_chat_model


STRUCTURED_SUFFIX = (
    "Respond with JSON only, without commentary, matching this JSON Schema:\n{schema}"
)


class GenerationBackend(Protocol):
    async def generate_text(
        self, prompt: str, *, temperature: Optional[float] = None
    ) -> str: ...

    async def generate_structured(
        self,
        prompt: str,
        *,
        schema: Dict[str, Any],
        images: Sequence[ImageInput] = (),
        temperature: Optional[float] = None,
    ) -> str: ...

    async def continue_chat(
        self,
        *,
        system_instruction: str,
        history: Sequence[ConversationMessage],
        message: str,
    ) -> str: ...


def extract_text(result: object) -> str:
    content = getattr(result, "content", result)
    if isinstance(content, list):
        parts = []
        for item in content:
            if isinstance(item, dict):
                parts.append(str(item.get("text") or ""))
            else:
                parts.append(str(item))
        return "".join(parts).strip()
    if content is None:
        return ""
    return str(content).strip()


def build_human_message(prompt: str, images: Sequence[ImageInput] = ()) -> HumanMessage:
    if not images:
        return HumanMessage(content=prompt)
    content: List[Any] = [
        {"type": "image_url", "image_url": {"url": image.data_url}} for image in images
    ]
    content.append({"type": "text", "text": prompt})
    return HumanMessage(content=content)


def to_langchain_history(history: Sequence[ConversationMessage]) -> List[BaseMessage]:
    messages: List[BaseMessage] = []
    for item in history:
        if item.role == "user":
            messages.append(HumanMessage(content=item.text))
        else:
            messages.append(AIMessage(content=item.text))
    return messages


class LangChainGenerationBackend:
    """Generation backend over a LangChain chat model."""

    def __init__(
        self,
        model_factory: Callable[..., BaseChatModel] = get_chat_model,
    ) -> None:
        self._model_factory = model_factory
        self._models: Dict[Optional[float], BaseChatModel] = {}

    @classmethod
    def from_config(cls) -> "LangChainGenerationBackend":
        """Build a backend after checking that a credential is configured."""
        ensure_credentials()
        return cls()

    def _model(self, temperature: Optional[float]) -> BaseChatModel:
        if temperature not in self._models:
            self._models[temperature] = self._model_factory(temperature=temperature)
        return self._models[temperature]

    async def _invoke(
        self,
        operation: str,
        messages: List[BaseMessage],
        temperature: Optional[float] = None,
    ) -> str:
        prompt_text = extract_text(messages[-1])
        with start_span(
            f"generation.{operation}",
            {
                "generation.temperature": temperature,
                **build_span_attributes("generation.prompt", prompt_text),
            },
        ) as span:
            try:
                llm = self._model(temperature)
                result = await llm.ainvoke(messages)
            except Exception as exc:
                record_exception(span, exc)
                raise RemoteCallError(f"{operation} failed: {exc}") from exc
            text = extract_text(result)
            span.set_attribute("generation.reply.size", len(text))
        if not text:
            raise RemoteCallError(f"{operation} returned an empty reply")
        log_event(
            "generation_reply",
            operation=operation,
            prompt_summary=summarize_text(prompt_text, 120),
            reply_summary=summarize_text(text, 120),
        )
        return text

    async def generate_text(
        self, prompt: str, *, temperature: Optional[float] = None
    ) -> str:
        return await self._invoke("text", [HumanMessage(content=prompt)], temperature)

    async def generate_structured(
        self,
        prompt: str,
        *,
        schema: Dict[str, Any],
        images: Sequence[ImageInput] = (),
        temperature: Optional[float] = None,
    ) -> str:
        suffix = STRUCTURED_SUFFIX.format(schema=json.dumps(schema, ensure_ascii=False))
        message = build_human_message(f"{prompt}\n\n{suffix}", images)
        return await self._invoke("structured", [message], temperature)

    async def continue_chat(
        self,
        *,
        system_instruction: str,
        history: Sequence[ConversationMessage],
        message: str,
    ) -> str:
        messages: List[BaseMessage] = [SystemMessage(content=system_instruction)]
        messages.extend(to_langchain_history(history))
        messages.append(HumanMessage(content=message))
        return await self._invoke("chat", messages)
